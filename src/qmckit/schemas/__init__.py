"""
Data contracts and type definitions.
"""

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DecryptConfig",
]

from .config import DEFAULT_CHUNK_SIZE, DecryptConfig
