from __future__ import annotations

import logging
from array import array

from ..errors import InvalidKeyError, KeystreamBoundsError
from ..rc4 import keystream_generate
from .hash import key_hash
from .segment_key import get_segment_key
from .segments import MAX_STREAM_SIZE, OTHER_SEGMENT_SIZE, iter_segments

logger = logging.getLogger(__name__)

RC4_STREAM_CACHE_SIZE = OTHER_SEGMENT_SIZE + 512

_SKIP_MASK = 0x1FF

WritableBuffer = bytearray | memoryview | array


class QMC2RC4:
    """QMC2 RC4 stream cipher.

    The header region (first 128 bytes) is masked byte by byte with key bytes
    picked by :func:`get_segment_key`. Every following 5120-byte block is
    XORed with a window of one cached RC4 keystream, shifted by a per-block
    skip in ``[0, 511]``.

    Instances are immutable after construction and may be shared between
    threads, as long as each call works on its own buffer.
    """

    def __init__(self, key: bytes) -> None:
        """
        Args:
            key: Decrypted file key (must not be empty).

        Raises:
            InvalidKeyError: If ``key`` is empty.
        """
        if not key:
            raise InvalidKeyError("Key must not be empty")

        self._key = bytes(key)
        self._hash = key_hash(self._key)
        self._key_stream = keystream_generate(self._key, RC4_STREAM_CACHE_SIZE)
        logger.debug(
            "QMC2 RC4 cipher ready (key length=%d, hash=%r)",
            len(self._key),
            self._hash,
        )

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def hash(self) -> float:
        return self._hash

    @property
    def key_stream(self) -> bytes:
        return self._key_stream

    def decrypt(self, data: WritableBuffer, offset: int = 0) -> None:
        """Decrypt a range of the stream in place.

        The range may start anywhere and cross segment boundaries; each call
        is independent, so a file can be processed in arbitrary pieces.

        Args:
            data: Writable bytes-like object (``bytearray``, ``memoryview``...)
                holding the bytes found at ``offset`` in the stream.
            offset: Absolute stream offset of ``data[0]``.

        Raises:
            TypeError: If ``data`` is read-only.
            ValueError: If ``offset`` is negative or the range ends past
                the 64-bit stream size.
        """
        if offset < 0:
            raise ValueError("offset must not be negative")

        with memoryview(data) as view, view.cast("B") as buf:
            if buf.readonly:
                raise TypeError("data must be a writable buffer")
            if offset + len(buf) > MAX_STREAM_SIZE:
                raise ValueError("range exceeds the 64-bit stream size")

            for kind, start, stop, position in iter_segments(len(buf), offset):
                if kind == "first":
                    self._process_first_segment(buf[start:stop], position)
                else:
                    self._process_other_segment(buf[start:stop], position)

    encrypt = decrypt

    def _process_first_segment(self, buf: memoryview, offset: int) -> None:
        key = self._key
        n = len(key)
        h = self._hash

        for i in range(len(buf)):
            pos = offset + i
            idx = get_segment_key(pos, key[pos % n], h) % n
            buf[i] ^= key[idx]

    def _process_other_segment(self, buf: memoryview, offset: int) -> None:
        key = self._key
        n = len(key)
        size = len(buf)

        block_id = offset // OTHER_SEGMENT_SIZE
        block_offset = offset % OTHER_SEGMENT_SIZE

        skip = get_segment_key(block_id, key[block_id % n], self._hash) & _SKIP_MASK
        start = skip + block_offset
        stop = start + size
        if block_offset + size > OTHER_SEGMENT_SIZE or stop > len(self._key_stream):
            raise KeystreamBoundsError(
                f"keystream window {start}:{stop} exceeds cache "
                f"of {len(self._key_stream)} bytes"
            )

        mask = int.from_bytes(self._key_stream[start:stop], "little")
        buf[:] = (int.from_bytes(buf, "little") ^ mask).to_bytes(size, "little")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QMC2RC4):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash((QMC2RC4, self._key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_length={len(self._key)})"


def new(key: bytes) -> QMC2RC4:
    """Create a new QMC2 RC4 cipher.

    Args:
        key: Decrypted file key (must not be empty).

    Returns:
        A :class:`QMC2RC4` instance.
    """
    return QMC2RC4(key)
