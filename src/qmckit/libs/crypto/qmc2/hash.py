def key_hash(key: bytes) -> float:
    """Compute the seed value used by segment key derivation.

    The key bytes are multiplied together as a 32-bit unsigned integer,
    skipping zero bytes and stopping as soon as the product would wrap or
    stop growing. The result is handed out as a float because the
    derivation step divides it in floating point.

    Args:
        key: Raw key bytes.

    Returns:
        The hash as a float. ``1.0`` for a key without usable bytes.
    """
    h = 1
    for v in key:
        if v == 0:
            continue

        nxt = (h * v) & 0xFFFFFFFF
        if nxt == 0 or nxt <= h:
            break
        h = nxt
    return float(h)
