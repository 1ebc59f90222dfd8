from importlib.resources import files

from platformdirs import user_config_path

PACKAGE_NAME = "qmckit"

# Per-user settings (e.g. ~/.config/qmckit/settings.json on Linux)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)
SETTING_PATH = USER_CONFIG_DIR / "settings.json"

# Bundled sample settings, copied out by `copy_default_config`
DEFAULT_CONFIG_FILE = files("qmckit.resources").joinpath(
    "config", "settings.sample.toml"
)
