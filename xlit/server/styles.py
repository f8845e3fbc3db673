from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Sequence, Union

from ..shared.settings import MatchOptions, StyleOptions
from ..shared.types import (
    CompletionResult,
    Matches,
    NoMatch,
    PatternGenerator,
    Predicate,
)
from ..sources.types import CompletionSource
from ..translit.table import literal
from .complete import list_completions, list_matching, try_complete, try_matching


class TryFn(Protocol):
    def __call__(
        self,
        options: MatchOptions,
        gen: PatternGenerator,
        text: str,
        source: CompletionSource,
        pred: Optional[Predicate],
        cursor: int,
    ) -> CompletionResult:
        ...


class ListFn(Protocol):
    def __call__(
        self,
        options: MatchOptions,
        gen: PatternGenerator,
        text: str,
        source: CompletionSource,
        pred: Optional[Predicate],
        cursor: int,
    ) -> Union[Matches, NoMatch]:
        ...


@dataclass(frozen=True)
class Style:
    try_fn: TryFn
    list_fn: ListFn
    transliterate: bool


STYLES: Mapping[str, Style] = {
    "basic": Style(try_fn=try_matching, list_fn=list_matching, transliterate=False),
    "xlit": Style(try_fn=try_complete, list_fn=list_completions, transliterate=True),
}


def styles_for(
    options: StyleOptions,
    source: CompletionSource,
    text: str,
    pred: Optional[Predicate],
) -> Sequence[str]:
    """
    Declared styles win outright, category overrides only go ahead of the defaults
    """

    meta = source.metadata(text, pred=pred)
    if declared := tuple(name for name in meta.styles if name in STYLES):
        return declared
    else:
        overrides = (
            options.overrides.get(meta.category, ())
            if meta.category is not None
            else ()
        )
        return tuple(dict.fromkeys((*overrides, *options.default)))


def complete(
    styles: StyleOptions,
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
    cursor: int,
) -> CompletionResult:
    for name in styles_for(styles, source=source, text=text, pred=pred):
        style = STYLES[name]
        result = style.try_fn(
            options,
            gen=gen if style.transliterate else literal,
            text=text,
            source=source,
            pred=pred,
            cursor=cursor,
        )
        if not isinstance(result, NoMatch):
            return result
    else:
        return NoMatch()


def complete_all(
    styles: StyleOptions,
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
    cursor: int,
) -> Union[Matches, NoMatch]:
    for name in styles_for(styles, source=source, text=text, pred=pred):
        style = STYLES[name]
        result = style.list_fn(
            options,
            gen=gen if style.transliterate else literal,
            text=text,
            source=source,
            pred=pred,
            cursor=cursor,
        )
        if not isinstance(result, NoMatch):
            return result
    else:
        return NoMatch()
