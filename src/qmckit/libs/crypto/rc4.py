from __future__ import annotations

from .errors import InvalidKeyError


class RC4:
    """RC4 variant whose permutation box is as large as the key.

    Unlike textbook RC4 the box has ``len(key)`` entries instead of 256, and
    every index is reduced modulo that size. The box is still seeded with
    byte values (``i & 0xFF``), so keys longer than 256 bytes repeat values.
    With a 256-byte key the output is identical to standard ARC4.
    """

    def __init__(self, key: bytes) -> None:
        """
        Args:
            key: RC4 key bytes (must not be empty).
        """
        if not key:
            raise InvalidKeyError("Key must not be empty")

        self._key = bytes(key)
        self._S = self._rc4_init(self._key)
        self._i = 0
        self._j = 0

    def derive(self, length: int) -> bytes:
        """Continue the generator and return the next ``length`` bytes.

        This is the RC4 Pseudo-Random Generation Algorithm (PRGA).

        Args:
            length: Number of keystream bytes to produce.

        Returns:
            Keystream bytes.
        """
        if length < 0:
            raise ValueError("length must not be negative")

        S = self._S
        n = len(S)
        i = self._i
        j = self._j
        out = bytearray(length)
        for idx in range(length):
            i = (i + 1) % n
            j = (j + S[i]) % n
            S[i], S[j] = S[j], S[i]
            out[idx] = S[(S[i] + S[j]) % n]
        self._i = i
        self._j = j
        return bytes(out)

    @staticmethod
    def _rc4_init(key: bytes) -> list[int]:
        """Perform the Key-Scheduling Algorithm (KSA) over a key-sized box."""
        n = len(key)
        S = [i & 0xFF for i in range(n)]
        j = 0
        for i in range(n):
            j = (j + S[i] + key[i]) % n
            S[i], S[j] = S[j], S[i]
        return S


def keystream_generate(key: bytes, length: int) -> bytes:
    """Generate ``length`` keystream bytes from a fresh generator.

    Args:
        key: RC4 key bytes (must not be empty).
        length: Number of bytes to produce.

    Returns:
        The first ``length`` bytes of the keystream for ``key``.
    """
    return RC4(key).derive(length)
