"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass

# 64 blocks of 5120 bytes, so pieces stay block aligned
DEFAULT_CHUNK_SIZE = 0x1400 * 64


@dataclass
class DecryptConfig:
    """Configuration for streamed decryption.

    Attributes:
        chunk_size: Maximum number of bytes decrypted per piece when a large
            buffer is processed incrementally.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
