from dataclasses import dataclass
from typing import AbstractSet, Mapping, Optional, Sequence


@dataclass(frozen=True)
class MatchOptions:
    case_fold: bool


@dataclass(frozen=True)
class FileOptions:
    ignored_extensions: AbstractSet[str]


@dataclass(frozen=True)
class DisplayOptions:
    enabled: Optional[str]
    disabled: Optional[str]


@dataclass(frozen=True)
class StyleOptions:
    default: Sequence[str]
    overrides: Mapping[str, Sequence[str]]


@dataclass(frozen=True)
class Settings:
    enabled: bool
    table: str
    match: MatchOptions
    files: FileOptions
    display: DisplayOptions
    styles: StyleOptions


EMPTY_MATCH = MatchOptions(case_fold=False)
EMPTY_FILES = FileOptions(ignored_extensions=frozenset())
