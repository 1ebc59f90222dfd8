from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

FIRST_SEGMENT_SIZE = 0x0080
OTHER_SEGMENT_SIZE = 0x1400

# Offsets are unsigned 64-bit positions in the stream.
MAX_STREAM_SIZE = 1 << 64

SegmentKind = Literal["first", "other"]


def iter_segments(
    length: int,
    offset: int,
    first_size: int = FIRST_SEGMENT_SIZE,
    other_size: int = OTHER_SEGMENT_SIZE,
) -> Iterator[tuple[SegmentKind, int, int, int]]:
    """Split a byte range of the logical stream along segment boundaries.

    The stream starts with a ``first_size`` header region. Everything else
    is cut into ``other_size`` blocks counted from the start of the stream,
    so the header shares block 0 with the following bytes.

    Args:
        length: Number of bytes in the range.
        offset: Absolute stream offset of the first byte.
        first_size: Size of the header region.
        other_size: Size of every following block.

    Yields:
        ``(kind, start, stop, position)`` tuples, where ``start:stop`` is
        the slice of the caller's buffer and ``position`` is the absolute
        offset of ``start``. ``kind`` is ``"first"`` or ``"other"``.

    Raises:
        ValueError: If the range starts before 0 or ends past
            ``MAX_STREAM_SIZE``.
    """
    if offset < 0:
        raise ValueError("offset must not be negative")
    if offset + length > MAX_STREAM_SIZE:
        raise ValueError("range exceeds the 64-bit stream size")

    start = 0

    if offset < first_size and start < length:
        n = min(first_size - offset, length - start)
        yield "first", start, start + n, offset
        start += n
        offset += n

    excess = offset % other_size
    if excess and start < length:
        n = min(other_size - excess, length - start)
        yield "other", start, start + n, offset
        start += n
        offset += n

    while start < length:
        n = min(other_size, length - start)
        yield "other", start, start + n, offset
        start += n
        offset += n
