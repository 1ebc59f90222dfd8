from qmckit.libs.crypto.qmc2 import key_hash


def test_key_hash_empty_key():
    assert key_hash(b"") == 1.0


def test_key_hash_product():
    assert key_hash(b"\x02\x03\x04") == 24.0


def test_key_hash_skips_zero_bytes():
    assert key_hash(b"\x00\x05\x00\x07") == 35.0


def test_key_hash_stops_when_not_growing():
    # Multiplying by one does not increase the product.
    assert key_hash(b"\x02\x01\x09") == 2.0


def test_key_hash_stops_before_wrapping():
    # 0xFF ** 4 < 2**32, the fifth factor wraps and is rejected.
    key = b"\xff" * 8
    assert key_hash(key) == float(0xFF**4)


def test_key_hash_stops_on_zero_product():
    # 0x80 ** 4 == 2**28, one more 0x10 gives 2**32 which wraps to zero.
    key = b"\x80\x80\x80\x80\x10\x03"
    assert key_hash(key) == float(2**28)


def test_key_hash_returns_float():
    assert isinstance(key_hash(b"abc"), float)


def test_key_hash_alphanumeric_key():
    key = b"abcdefghijklmnopqrstuvwxyz" * 2
    h = 1
    for v in key:
        nxt = (h * v) & 0xFFFFFFFF
        if nxt <= h:
            break
        h = nxt
    assert key_hash(key) == float(h)
