from dataclasses import asdict, dataclass
from locale import getlocale
from pathlib import Path
from string import Template
from typing import Optional, Union

from std2.cell import RefCell
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from .consts import DEFAULT_LANG, LANG_ROOT


@dataclass(frozen=True)
class Strings:
    indicator_enabled: str
    indicator_disabled: str

    no_match: str
    sole_match: str
    no_change: str
    extended: str
    matches: str

    bad_settings: str
    toggled: str


_DECODER = new_decoder[Strings](Strings)


def lang_code(code: Optional[str]) -> str:
    """
    `ja_JP.UTF-8`, `ja-JP` and `JA` all name `ja`
    """

    tag = code or getlocale()[0] or DEFAULT_LANG
    primary, _, _ = tag.casefold().partition(".")
    primary, _, _ = primary.partition("-")
    lang, _, _ = primary.partition("_")
    return lang


def locale_path(code: Optional[str]) -> Path:
    path = (LANG_ROOT / lang_code(code)).with_suffix(".yml")
    return path if path.exists() else (LANG_ROOT / DEFAULT_LANG).with_suffix(".yml")


def load(code: Optional[str]) -> Strings:
    return _DECODER(safe_load(locale_path(code).read_text("UTF-8")))


_CELL = RefCell(load(None))


def init(code: Optional[str]) -> Strings:
    _CELL.val = strings = load(code)
    return strings


def msg(key: str, **kwds: Union[int, float, str]) -> str:
    spec = asdict(_CELL.val)[key]
    return Template(spec).substitute(kwds)
