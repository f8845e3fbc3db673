from abc import ABC, abstractmethod
from typing import Optional, Pattern, Sequence

from ..shared.types import Metadata, Predicate, SourceKind


class CompletionSource(ABC):
    """
    Where candidates come from, the engine only adds restrictions
    """

    kind: SourceKind
    file_like: bool

    @abstractmethod
    def boundaries(self, text: str, pred: Optional[Predicate]) -> int:
        ...

    @abstractmethod
    def all(
        self,
        prefix: str,
        pred: Optional[Predicate],
        restrictions: Sequence[Pattern[str]],
    ) -> Sequence[str]:
        """
        Completions of the region after `prefix`, relative to it
        """

    @abstractmethod
    def metadata(self, text: str, pred: Optional[Predicate]) -> Metadata:
        ...

    def try_filter(self, candidates: Sequence[str]) -> Sequence[str]:
        return candidates
