from re import IGNORECASE, compile, error, escape
from typing import Pattern, Union

from ..shared.parse import decompose
from ..shared.settings import MatchOptions
from ..shared.types import InvalidPattern, PatternGenerator


def assemble(gen: PatternGenerator, token: str) -> str:
    """
    ^<lead literal><gen(alnum run)><tail literal>
    """

    lead, core, tail = decompose(token)
    core_expr = gen(core) if core else ""
    return "^" + escape(lead) + core_expr + escape(tail)


def compile_pattern(
    options: MatchOptions, gen: PatternGenerator, token: str
) -> Union[Pattern[str], InvalidPattern]:
    flags = IGNORECASE if options.case_fold else 0
    try:
        return compile(assemble(gen, token=token), flags)
    except InvalidPattern as e:
        return e
    except error as e:
        return InvalidPattern(str(e))
