from os import environ
from pathlib import Path

TOP_LEVEL = Path(__file__).resolve().parent

_CONF_DIR = TOP_LEVEL / "config"
LANG_ROOT = TOP_LEVEL / "locale"
DEFAULT_LANG = "en"

CONFIG_YML = _CONF_DIR / "defaults.yml"
TABLES_DIR = _CONF_DIR / "tables"


SETTINGS_VAR = "XLIT_SETTINGS"


DEBUG = "XLIT_DEBUG" in environ


# Characters subject to transliteration, everything else is matched literally
TOKEN_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-"
)
