from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from qmckit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_SETTING_NAMES = ("settings.toml", "settings.json")


def _candidate_paths(user_path: str | Path | None) -> Iterator[Path]:
    """
    Yield configuration file candidates in lookup order.

    Lookup order:
        1. User-specified path
        2. ``settings.toml`` / ``settings.json`` in the working directory
        3. The per-user ``SETTING_PATH``

    A user-specified path that does not exist is reported and skipped.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if path.is_file():
            yield path
        else:
            logger.warning("Specified config file not found: %s", path)

    cwd = Path.cwd()
    for name in LOCAL_SETTING_NAMES:
        yield (cwd / name).resolve()

    yield SETTING_PATH


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


_READERS = {
    ".json": ("JSON", _read_json),
    ".toml": ("TOML", _read_toml),
}


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Parse a `.json` or `.toml` settings file into a dictionary.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration mapping.

    Raises:
        ValueError: If the extension is unsupported, the content cannot be
            parsed, or the top-level value is not a table/object.
    """
    ext = path.suffix.lower()
    try:
        label, reader = _READERS[ext]
    except KeyError:
        raise ValueError(f"Unsupported config file extension: {ext}") from None

    try:
        data = reader(path)
    except (OSError, ValueError) as e:
        raise ValueError(f"Invalid {label} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")

    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Locate and parse the active settings file.

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If no candidate file exists.
        ValueError: If the selected file cannot be parsed.
    """
    for path in _candidate_paths(config_path):
        if path.is_file():
            logger.debug("Loading configuration from: %s", path)
            return _load_by_extension(path)

    raise FileNotFoundError("No valid config file found.")


def copy_default_config(target: Path) -> None:
    """
    Write the bundled sample settings to ``target``.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Default configuration written to: %s", target)


def save_config(
    config: dict[str, Any],
    output_path: str | Path | None = None,
) -> None:
    """
    Persist a configuration mapping as JSON.

    Args:
        config: Configuration mapping.
        output_path: Destination file, defaults to ``SETTING_PATH``.

    Raises:
        OSError: If the file cannot be written.
    """
    output = Path(output_path or SETTING_PATH).expanduser().resolve()
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        with output.open("w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to write config JSON '%s': %s", output, e)
        raise

    logger.info("Configuration saved to JSON: %s", output)


def save_config_file(
    source_path: str | Path,
    output_path: str | Path | None = None,
) -> None:
    """
    Convert a TOML/JSON settings file into the JSON settings store.

    Args:
        source_path: Path to the source TOML/JSON file.
        output_path: Destination file, defaults to ``SETTING_PATH``.

    Raises:
        FileNotFoundError: If the source file does not exist.
        ValueError: If the source file cannot be parsed.
    """
    source = Path(source_path).expanduser().resolve()
    if not source.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")

    save_config(_load_by_extension(source), output_path)
