from typing import Any, Optional, Pattern, Protocol, Sequence

from ..shared.types import Action, Metadata, Predicate, SourceError, SourceKind
from .types import CompletionSource


class Producer(Protocol):
    def __call__(
        self,
        action: Action,
        text: str,
        pred: Optional[Predicate],
        restrictions: Sequence[Pattern[str]],
    ) -> Any:
        ...


class Generator(CompletionSource):
    """
    Candidates computed on demand, `restrictions` are honoured by the producer
    """

    kind = SourceKind.generator
    file_like = False

    def __init__(self, producer: Producer) -> None:
        self._producer = producer

    def boundaries(self, text: str, pred: Optional[Predicate]) -> int:
        idx = self._producer(Action.boundaries, text, pred, ())
        if idx is None:
            return 0
        elif not isinstance(idx, int) or not 0 <= idx <= len(text):
            raise SourceError(f"bad boundary {idx!r} for {text!r}")
        else:
            return idx

    def all(
        self,
        prefix: str,
        pred: Optional[Predicate],
        restrictions: Sequence[Pattern[str]],
    ) -> Sequence[str]:
        candidates = self._producer(Action.all, prefix, pred, restrictions)
        return tuple(candidates or ())

    def metadata(self, text: str, pred: Optional[Predicate]) -> Metadata:
        meta = self._producer(Action.metadata, text, pred, ())
        return meta or Metadata()
