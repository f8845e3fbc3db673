from typing import Optional, Pattern, Sequence

from ..shared.types import Predicate, SourceKind
from ..sources.types import CompletionSource


def filter_candidates(
    source: CompletionSource,
    prefix: str,
    pred: Optional[Predicate],
    pattern: Pattern[str],
) -> Sequence[str]:
    candidates = source.all(prefix, pred=pred, restrictions=(pattern,))

    if source.kind is SourceKind.generator:
        return candidates
    elif source.kind is SourceKind.collection:
        return tuple(c for c in candidates if pattern.search(c))
    else:
        assert False
