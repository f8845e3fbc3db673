from functools import reduce
from typing import Iterable

from .parse import lower


def _p_matches(case_fold: bool, lhs: str, rhs: str) -> int:
    p_matches = 0
    for l, r in zip(lhs, rhs):
        if l == r or (case_fold and lower(l) == lower(r)):
            p_matches += 1
        else:
            break
    return p_matches


def common_prefix(case_fold: bool, lhs: str, rhs: str) -> str:
    """
    Positional, not collation aware. `lhs` wins on case
    """

    return lhs[: _p_matches(case_fold, lhs=lhs, rhs=rhs)]


def common_prefix_all(case_fold: bool, candidates: Iterable[str]) -> str:
    it = iter(candidates)
    first = next(it, None)
    if first is None:
        return ""
    else:
        return reduce(
            lambda acc, rhs: common_prefix(case_fold, lhs=acc, rhs=rhs), it, first
        )


def is_prefix(case_fold: bool, prefix: str, text: str) -> bool:
    return len(prefix) <= len(text) and _p_matches(
        case_fold, lhs=prefix, rhs=text
    ) == len(prefix)
