from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Sequence, Union

Predicate = Callable[[str], bool]

# ASCII token -> regular expression matching its script variants
PatternGenerator = Callable[[str], str]


class InvalidPattern(Exception):
    ...


class SourceError(Exception):
    ...


class Action(Enum):
    all = auto()
    boundaries = auto()
    metadata = auto()


class SourceKind(Enum):
    collection = auto()
    generator = auto()


@dataclass(frozen=True)
class Metadata:
    category: Optional[str] = None
    styles: Sequence[str] = ()


@dataclass(frozen=True)
class Split:
    """
    |...          text          ...|
    |<prefix><token>               |
    """

    prefix: str
    token: str


@dataclass(frozen=True)
class NoMatch:
    ...


@dataclass(frozen=True)
class SoleMatch:
    ...


@dataclass(frozen=True)
class NoChange:
    text: str
    cursor: int


@dataclass(frozen=True)
class Extended:
    text: str
    cursor: int


CompletionResult = Union[NoMatch, SoleMatch, NoChange, Extended]


@dataclass(frozen=True)
class Matches:
    """
    Each candidate is relative to `text[:prefix_len]`
    """

    prefix_len: int
    candidates: Sequence[str]
