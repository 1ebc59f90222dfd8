import pytest

from qmckit.libs.crypto.qmc2 import get_segment_key


def test_segment_key_zero_seed():
    assert get_segment_key(0, 0, 123456.0) == 0
    assert get_segment_key(99, 0, 123456.0) == 0


@pytest.mark.parametrize(
    "index, seed, hash_value, expected",
    [
        (0, 1, 1.0, 100),
        (1, 1, 1.0, 50),
        (2, 1, 1.0, 33),
        (0, 3, 10.0, 333),
        (4, 97, 4294967295.0, int(4294967295.0 / 485.0 * 100.0)),
    ],
)
def test_segment_key_values(index, seed, hash_value, expected):
    assert get_segment_key(index, seed, hash_value) == expected


def test_segment_key_truncates_towards_zero():
    # 7 / 3 * 100 = 233.33...
    assert get_segment_key(2, 1, 7.0) == 233


def test_segment_key_uses_float_division():
    hash_value = 3054237504.0
    index, seed = 12345, 0x7A
    expected = int(hash_value / float((index + 1) * seed) * 100.0)
    assert get_segment_key(index, seed, hash_value) == expected
