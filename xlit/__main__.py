from argparse import ArgumentParser, Namespace
from contextlib import nullcontext
from pathlib import Path
from sys import exit, stderr, stdin
from typing import Sequence

from pynvim_pp.logging import log
from std2.pickle.types import DecodeError
from std2.types import never

from .lang import init, msg
from .server.rt_types import ValidationError
from .server.settings import load, read_user_config
from .server.state import indicator, state, toggle
from .server.styles import complete, complete_all
from .shared.settings import Settings
from .shared.types import (
    CompletionResult,
    Extended,
    Matches,
    NoChange,
    NoMatch,
    PatternGenerator,
    SoleMatch,
)
from .sources.collection import Collection
from .sources.paths import PathSource
from .sources.types import CompletionSource
from .translit.table import load_table

_TOGGLE = ":toggle"


def _source_args(parser: ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--candidates", help="one per line, `-` for stdin")
    group.add_argument("--files", help="complete file names under this directory")


def parse_args() -> Namespace:
    parser = ArgumentParser(prog="xlit")
    parser.add_argument("--settings", help="yaml, overrides the defaults")
    parser.add_argument("--lang")

    sub_parsers = parser.add_subparsers(dest="command", required=True)

    with nullcontext(sub_parsers.add_parser("try")) as p:
        p.add_argument("text")
        p.add_argument("--cursor", type=int)
        _source_args(p)

    with nullcontext(sub_parsers.add_parser("all")) as p:
        p.add_argument("text")
        p.add_argument("--cursor", type=int)
        _source_args(p)

    with nullcontext(sub_parsers.add_parser("repl")) as p:
        _source_args(p)

    return parser.parse_args()


def _source(settings: Settings, args: Namespace) -> CompletionSource:
    if args.candidates is not None:
        lines = (
            stdin.read()
            if args.candidates == "-"
            else Path(args.candidates).read_text("UTF-8")
        )
        return Collection(filter(None, lines.splitlines()))
    else:
        base = Path(args.files) if args.files is not None else Path.cwd()
        return PathSource(base, ignored_extensions=settings.files.ignored_extensions)


def _fmt_result(result: CompletionResult) -> str:
    if isinstance(result, NoMatch):
        return msg("no_match")
    elif isinstance(result, SoleMatch):
        return msg("sole_match")
    elif isinstance(result, NoChange):
        return msg("no_change")
    elif isinstance(result, Extended):
        return msg("extended", text=result.text)
    else:
        never(result)


def _fmt_matches(text: str, matches: Matches) -> Sequence[str]:
    prefix = text[: matches.prefix_len]
    return tuple(prefix + candidate for candidate in matches.candidates)


def _try(
    settings: Settings,
    gen: PatternGenerator,
    source: CompletionSource,
    text: str,
    cursor: int,
) -> CompletionResult:
    return complete(
        settings.styles,
        options=settings.match,
        gen=gen,
        text=text,
        source=source,
        pred=None,
        cursor=cursor,
    )


def _repl(settings: Settings, gen: PatternGenerator, source: CompletionSource) -> None:
    print(indicator(settings.display), end=" ", flush=True)
    for line in stdin:
        text = line.rstrip("\n")
        if text == _TOGGLE:
            toggle()
            print(msg("toggled", indicator=indicator(settings.display)))
        else:
            result = _try(
                settings, gen=gen, source=source, text=text, cursor=len(text)
            )
            print(_fmt_result(result))
        print(indicator(settings.display), end=" ", flush=True)


def main() -> int:
    args = parse_args()
    if args.lang:
        init(args.lang)

    try:
        settings = load(read_user_config(args.settings))
    except (DecodeError, ValidationError) as e:
        log.warning("%s", e)
        print(msg("bad_settings", error=str(e)), file=stderr)
        return 1

    state(enabled=settings.enabled)
    gen = load_table(settings.table)
    source = _source(settings, args=args)

    if args.command == "try":
        cursor = len(args.text) if args.cursor is None else args.cursor
        result = _try(settings, gen=gen, source=source, text=args.text, cursor=cursor)
        print(_fmt_result(result))
        return int(isinstance(result, NoMatch))

    elif args.command == "all":
        cursor = len(args.text) if args.cursor is None else args.cursor
        matches = complete_all(
            settings.styles,
            options=settings.match,
            gen=gen,
            text=args.text,
            source=source,
            pred=None,
            cursor=cursor,
        )
        if isinstance(matches, NoMatch):
            print(msg("no_match"), file=stderr)
            return 1
        else:
            for line in _fmt_matches(args.text, matches=matches):
                print(line)
            print(msg("matches", count=len(matches.candidates)), file=stderr)
            return 0

    elif args.command == "repl":
        _repl(settings, gen=gen, source=source)
        return 0

    else:
        assert False


if __name__ == "__main__":
    exit(main())
