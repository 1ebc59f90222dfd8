_U64_MASK = 0xFFFFFFFFFFFFFFFF


def get_segment_key(index: int, seed: int, hash_value: float) -> int:
    """Derive the pseudo-random key for a segment.

    Args:
        index: Byte offset (first segment) or block id (other segments).
        seed: Key byte selected by ``index``.
        hash_value: Value returned by :func:`key_hash`.

    Returns:
        A non-negative integer; callers reduce it to their own range.
    """
    if seed == 0:
        return 0

    # Float division and truncation must match the reference bit for bit.
    divisor = float(((index + 1) * seed) & _U64_MASK)
    return int(hash_value / divisor * 100.0)
