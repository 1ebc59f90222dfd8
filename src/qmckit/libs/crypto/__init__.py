"""
Cryptographic primitives used by the QMC2 decryption engine.
"""

__all__ = [
    "RC4",
    "keystream_generate",
    "CipherError",
    "InvalidKeyError",
    "KeystreamBoundsError",
]

from .errors import CipherError, InvalidKeyError, KeystreamBoundsError
from .rc4 import RC4, keystream_generate
