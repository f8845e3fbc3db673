from typing import Iterable, Iterator, Optional, Pattern, Sequence

from ..shared.types import Metadata, Predicate, SourceKind
from .types import CompletionSource


class Collection(CompletionSource):
    kind = SourceKind.collection
    file_like = False

    def __init__(self, candidates: Iterable[str], meta: Metadata = Metadata()) -> None:
        self._candidates = tuple(candidates)
        self._meta = meta

    def boundaries(self, text: str, pred: Optional[Predicate]) -> int:
        return 0

    def all(
        self,
        prefix: str,
        pred: Optional[Predicate],
        restrictions: Sequence[Pattern[str]],
    ) -> Sequence[str]:
        # `restrictions` are re-applied by the caller
        def cont() -> Iterator[str]:
            for candidate in self._candidates:
                if candidate.startswith(prefix) and (pred is None or pred(candidate)):
                    yield candidate[len(prefix) :]

        return tuple(cont())

    def metadata(self, text: str, pred: Optional[Predicate]) -> Metadata:
        return self._meta
