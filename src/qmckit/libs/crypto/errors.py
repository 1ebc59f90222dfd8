class CipherError(Exception):
    """Generic cipher failure."""


class InvalidKeyError(CipherError, ValueError):
    """Indicates that the supplied key cannot seed the cipher (e.g. empty)."""


class KeystreamBoundsError(CipherError):
    """Indicates a keystream read outside of the cached keystream buffer."""
