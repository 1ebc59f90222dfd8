from __future__ import annotations

from typing import Any

from qmckit.schemas import DecryptConfig


class ConfigAdapter:
    """High-level accessor for decryption settings.

    All configuration resolution follows the order:

    **general -> decrypt -> built-in defaults**

    Args:
        config (dict[str, Any]): Fully loaded configuration mapping containing
            a ``general`` block and optionally a ``decrypt`` block.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping.

        Returns:
            dict[str, Any]: The stored configuration.
        """
        return self._config

    def get_decrypt_config(self) -> DecryptConfig:
        """Build a DecryptConfig by merging general and decrypt overrides.

        Returns:
            DecryptConfig: Resolved decryption configuration.

        Raises:
            ValueError: If ``chunk_size`` is not a positive integer.
        """
        cfg = {**self._gen_cfg(), **self._decrypt_cfg()}
        default = DecryptConfig()

        chunk_size = cfg.get("chunk_size", default.chunk_size)
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise ValueError(f"chunk_size must be an integer, got {chunk_size!r}")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        return DecryptConfig(chunk_size=chunk_size)

    def _gen_cfg(self) -> dict[str, Any]:
        return self._config.get("general") or {}

    def _decrypt_cfg(self) -> dict[str, Any]:
        return self._config.get("decrypt") or {}
