from os import environ
from pathlib import Path
from typing import Any, Mapping, Optional

from std2.configparser import hydrate
from std2.graphlib import merge
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from ..consts import CONFIG_YML, SETTINGS_VAR
from ..shared.settings import Settings
from .rt_types import ValidationError
from .styles import STYLES

_DECODER = new_decoder[Settings](Settings)


def read_user_config(path: Optional[str] = None) -> Any:
    path = environ.get(SETTINGS_VAR) if path is None else path
    if not path:
        return {}
    else:
        return safe_load(Path(path).read_text("UTF-8")) or {}


def load(user_config: Mapping[str, Any]) -> Settings:
    yml = safe_load(CONFIG_YML.read_text("UTF-8"))
    u_conf = hydrate(user_config)

    if isinstance(u_conf, Mapping):
        if isinstance(styles := u_conf.get("styles"), Mapping):
            if (default := styles.get("default")) is not None:
                yml["styles"]["default"] = default
            if (overrides := styles.get("overrides")) is not None:
                yml["styles"]["overrides"] = overrides
        if isinstance(files := u_conf.get("files"), Mapping):
            if (ignored := files.get("ignored_extensions")) is not None:
                yml["files"]["ignored_extensions"] = ignored

    merged = merge(yml, u_conf, replace=True)
    config = _DECODER(merged)

    for name in (
        *config.styles.default,
        *(n for names in config.styles.overrides.values() for n in names),
    ):
        if name not in STYLES:
            raise ValidationError(f"unknown style :: {name}")

    if not config.styles.default:
        raise ValidationError("styles.default is empty")

    return config
