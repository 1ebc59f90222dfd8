"""
QMC2 RC4 stream cipher: key hash, segment key derivation, segment splitting
and the in-place decryption engine.
"""

__all__ = [
    "FIRST_SEGMENT_SIZE",
    "OTHER_SEGMENT_SIZE",
    "RC4_STREAM_CACHE_SIZE",
    "MAX_STREAM_SIZE",
    "QMC2RC4",
    "new",
    "key_hash",
    "get_segment_key",
    "iter_segments",
    "decrypt_bytes",
    "iter_decrypt",
    "iter_decrypt_buffer",
    "load_decrypt_config",
]

from .cipher import RC4_STREAM_CACHE_SIZE, QMC2RC4, new
from .hash import key_hash
from .segment_key import get_segment_key
from .segments import (
    FIRST_SEGMENT_SIZE,
    MAX_STREAM_SIZE,
    OTHER_SEGMENT_SIZE,
    iter_segments,
)
from .stream import (
    decrypt_bytes,
    iter_decrypt,
    iter_decrypt_buffer,
    load_decrypt_config,
)
