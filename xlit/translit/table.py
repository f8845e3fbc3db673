from pathlib import Path
from re import escape
from typing import Iterator, Mapping, Sequence

from std2.pickle.decoder import new_decoder
from yaml import safe_load

from ..consts import TABLES_DIR, TOKEN_CHARS
from ..shared.parse import lower
from ..shared.types import InvalidPattern

_DECODER = new_decoder[Mapping[str, Sequence[str]]](Mapping[str, Sequence[str]])


def literal(token: str) -> str:
    return escape(token)


def _alternatives(chunk: str, alts: Sequence[str]) -> str:
    uniq = tuple(dict.fromkeys((chunk, *alts)))
    return "(?:" + "|".join(map(escape, uniq)) + ")"


class TableGenerator:
    """
    Greedy longest match over a romanization table

    Each matched chunk matches itself or any of its alternatives,
    an unfinished trailing chunk matches everything it could grow into
    """

    def __init__(self, table: Mapping[str, Sequence[str]]) -> None:
        self._table = {lower(key): tuple(alts) for key, alts in table.items() if key}
        self._longest = max(map(len, self._table), default=0)

    def _longest_match(self, token: str, idx: int) -> int:
        for n in range(min(self._longest, len(token) - idx), 0, -1):
            if lower(token[idx : idx + n]) in self._table:
                return n
        else:
            return 0

    def _partial(self, rest: str) -> Sequence[str]:
        key = lower(rest)
        return tuple(
            alt
            for k, alts in self._table.items()
            if len(k) > len(key) and k.startswith(key)
            for alt in alts
        )

    def _chunks(self, token: str) -> Iterator[str]:
        idx = 0
        while idx < len(token):
            n = self._longest_match(token, idx=idx)
            rest = token[idx:]
            if not n or idx + n == len(token):
                if partial := self._partial(rest):
                    exact = self._table.get(lower(rest), ())
                    yield _alternatives(rest, alts=(*exact, *partial))
                    return

            if n:
                chunk = token[idx : idx + n]
                yield _alternatives(chunk, alts=self._table[lower(chunk)])
                idx += n
            else:
                yield escape(token[idx])
                idx += 1

    def __call__(self, token: str) -> str:
        if not {*token}.issubset(TOKEN_CHARS):
            raise InvalidPattern(token)
        else:
            return "".join(self._chunks(token))


def load_table(name: str, tables_dir: Path = TABLES_DIR) -> TableGenerator:
    path = (tables_dir / name).with_suffix(".yml")
    table = _DECODER(safe_load(path.read_text("UTF-8")))
    return TableGenerator(table)
