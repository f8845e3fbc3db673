from typing import Optional, Sequence, Tuple, Union

from pynvim_pp.logging import log

from ..shared.common import common_prefix_all, is_prefix
from ..shared.settings import MatchOptions
from ..shared.types import (
    CompletionResult,
    Extended,
    InvalidPattern,
    Matches,
    NoChange,
    NoMatch,
    PatternGenerator,
    Predicate,
    SoleMatch,
    Split,
)
from ..sources.types import CompletionSource
from .filter import filter_candidates
from .pattern import compile_pattern
from .state import state


def split(source: CompletionSource, text: str, pred: Optional[Predicate]) -> Split:
    prefix_len = source.boundaries(text, pred=pred)
    return Split(prefix=text[:prefix_len], token=text[prefix_len:])


def _candidates(
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
) -> Union[Tuple[Split, Sequence[str]], InvalidPattern]:
    sp = split(source, text=text, pred=pred)
    pattern = compile_pattern(options, gen=gen, token=sp.token)
    if isinstance(pattern, InvalidPattern):
        log.debug("%s", f"XLIT -- invalid pattern :: {sp.token!r} :: {pattern}")
        return pattern
    else:
        candidates = filter_candidates(
            source, prefix=sp.prefix, pred=pred, pattern=pattern
        )
        return sp, candidates


def classify(
    options: MatchOptions,
    text: str,
    cursor: int,
    sp: Split,
    candidates: Sequence[str],
) -> CompletionResult:
    if not candidates:
        return NoMatch()
    elif len(candidates) == 1 and candidates[0] == sp.token:
        return SoleMatch()
    else:
        common = common_prefix_all(options.case_fold, candidates=candidates)
        if is_prefix(True, prefix=common, text=sp.token):
            return NoChange(text=text, cursor=cursor)
        else:
            new_text = sp.prefix + common
            return Extended(text=new_text, cursor=len(new_text))


def try_matching(
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
    cursor: int,
) -> CompletionResult:
    found = _candidates(options, gen=gen, text=text, source=source, pred=pred)
    if isinstance(found, InvalidPattern):
        return NoMatch()
    else:
        sp, candidates = found
        if source.file_like:
            candidates = source.try_filter(candidates)
        return classify(
            options, text=text, cursor=cursor, sp=sp, candidates=candidates
        )


def list_matching(
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
    cursor: int,
) -> Union[Matches, NoMatch]:
    found = _candidates(options, gen=gen, text=text, source=source, pred=pred)
    if isinstance(found, InvalidPattern):
        return NoMatch()
    else:
        sp, candidates = found
        if not candidates:
            return NoMatch()
        else:
            return Matches(prefix_len=len(sp.prefix), candidates=candidates)


def try_complete(
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
    cursor: int,
) -> CompletionResult:
    if not state().enabled:
        return NoMatch()
    else:
        return try_matching(
            options, gen=gen, text=text, source=source, pred=pred, cursor=cursor
        )


def list_completions(
    options: MatchOptions,
    gen: PatternGenerator,
    text: str,
    source: CompletionSource,
    pred: Optional[Predicate],
    cursor: int,
) -> Union[Matches, NoMatch]:
    if not state().enabled:
        return NoMatch()
    else:
        return list_matching(
            options, gen=gen, text=text, source=source, pred=pred, cursor=cursor
        )
