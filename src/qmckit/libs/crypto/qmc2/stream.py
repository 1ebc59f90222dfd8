from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from qmckit.infra.config import ConfigAdapter, load_config
from qmckit.schemas import DecryptConfig

from .cipher import QMC2RC4

logger = logging.getLogger(__name__)


def load_decrypt_config(config_path: str | Path | None = None) -> DecryptConfig:
    """Resolve decryption settings from the active settings file.

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        The configured :class:`DecryptConfig`, or the defaults when no
        settings file exists.

    Raises:
        ValueError: If the settings file is invalid.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.debug("No settings file found, using default decrypt config")
        return DecryptConfig()
    return ConfigAdapter(config).get_decrypt_config()


def decrypt_bytes(cipher: QMC2RC4, data: bytes, offset: int = 0) -> bytes:
    """Decrypt a copy of ``data`` and return it.

    Args:
        cipher: Cipher to apply.
        data: Ciphertext found at ``offset`` in the stream.
        offset: Absolute stream offset of ``data[0]``.

    Returns:
        Plaintext bytes of the same length.
    """
    buf = bytearray(data)
    cipher.decrypt(buf, offset)
    return bytes(buf)


def iter_decrypt(
    cipher: QMC2RC4,
    chunks: Iterable[bytes],
    offset: int = 0,
) -> Iterator[bytes]:
    """Decrypt consecutive chunks of a stream.

    Chunks may have any size; the running stream offset is carried from one
    chunk to the next.

    Args:
        cipher: Cipher to apply.
        chunks: Contiguous pieces of ciphertext.
        offset: Absolute stream offset of the first chunk.

    Yields:
        Plaintext for each input chunk, in order.
    """
    for chunk in chunks:
        yield decrypt_bytes(cipher, chunk, offset)
        offset += len(chunk)


def iter_decrypt_buffer(
    cipher: QMC2RC4,
    data: bytes,
    offset: int = 0,
    chunk_size: int | None = None,
    config: DecryptConfig | None = None,
) -> Iterator[bytes]:
    """Decrypt a large buffer piece by piece.

    Args:
        cipher: Cipher to apply.
        data: Ciphertext found at ``offset`` in the stream.
        offset: Absolute stream offset of ``data[0]``.
        chunk_size: Maximum size of each yielded piece. Takes precedence
            over ``config``.
        config: Settings supplying ``chunk_size`` when it is not given,
            e.g. from :func:`load_decrypt_config`. Defaults to
            :class:`DecryptConfig`.

    Yields:
        Plaintext pieces of at most ``chunk_size`` bytes.

    Raises:
        ValueError: If ``chunk_size`` is not positive.
    """
    if chunk_size is None:
        chunk_size = (config or DecryptConfig()).chunk_size
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    view = memoryview(data)
    chunks = (view[i : i + chunk_size] for i in range(0, len(view), chunk_size))
    yield from iter_decrypt(cipher, chunks, offset)
