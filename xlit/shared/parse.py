from itertools import takewhile
from typing import AbstractSet, Tuple

from ..consts import TOKEN_CHARS


def lower(text: str) -> str:
    return text.casefold()


def decompose(
    token: str, token_chars: AbstractSet[str] = TOKEN_CHARS
) -> Tuple[str, str, str]:
    """
    <lead literal><alnum run><tail literal>
    """

    lead = "".join(takewhile(lambda c: c not in token_chars, token))
    rest = token[len(lead) :]
    core = "".join(takewhile(lambda c: c in token_chars, rest))
    tail = rest[len(core) :]
    return lead, core, tail
