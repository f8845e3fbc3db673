from contextlib import suppress
from locale import strxfrm
from os import curdir, pardir, scandir
from os.path import altsep, expanduser, sep
from pathlib import Path
from typing import AbstractSet, Any, Iterator, Optional, Pattern, Sequence

from ..shared.types import Action, Metadata, Predicate
from .generator import Generator

_SEPS = {sep, altsep} if altsep else {sep}
_DOTS = {curdir + sep, pardir + sep}


def p_boundary(text: str) -> int:
    return max((text.rfind(s) for s in _SEPS), default=-1) + 1


def ls(base: Path, prefix: str) -> Sequence[str]:
    p = Path(expanduser(prefix)) if prefix else Path(curdir)
    entire = p if p.is_absolute() else base / p

    def cont() -> Iterator[str]:
        with scandir(entire) as it:
            for entry in it:
                term = sep if entry.is_dir() else ""
                yield entry.name + term

    with suppress(FileNotFoundError, NotADirectoryError, PermissionError):
        return (*_DOTS, *cont())

    return ()


def filename_try_filter(
    ignored_extensions: AbstractSet[str], candidates: Sequence[str]
) -> Sequence[str]:
    """
    Drop `./`, `../` and ignored extensions, unless nothing would remain
    """

    kept = tuple(
        candidate
        for candidate in candidates
        if candidate not in _DOTS
        and not any(candidate.endswith(ext) for ext in ignored_extensions)
    )
    return kept or candidates


class PathSource(Generator):
    file_like = True

    def __init__(self, base: Path, ignored_extensions: AbstractSet[str]) -> None:
        super().__init__(self._produce)
        self._base = base
        self._ignored = ignored_extensions

    def _produce(
        self,
        action: Action,
        text: str,
        pred: Optional[Predicate],
        restrictions: Sequence[Pattern[str]],
    ) -> Any:
        if action is Action.boundaries:
            return p_boundary(text)
        elif action is Action.metadata:
            return Metadata(category="file")
        elif action is Action.all:
            names = (
                name
                for name in ls(self._base, prefix=text)
                if all(r.search(name) for r in restrictions)
                and (pred is None or pred(text + name))
            )
            return sorted(names, key=strxfrm)
        else:
            assert False

    def try_filter(self, candidates: Sequence[str]) -> Sequence[str]:
        return filename_try_filter(self._ignored, candidates=candidates)
