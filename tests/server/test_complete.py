from re import escape
from typing import Any, Optional, Pattern, Sequence
from unittest import TestCase

from xlit.server.complete import list_completions, split, try_complete
from xlit.server.pattern import compile_pattern
from xlit.server.state import state
from xlit.shared.settings import MatchOptions
from xlit.shared.types import (
    Action,
    Extended,
    InvalidPattern,
    Matches,
    NoChange,
    NoMatch,
    Predicate,
    SoleMatch,
    SourceError,
)
from xlit.sources.collection import Collection
from xlit.sources.generator import Generator

_EXACT = MatchOptions(case_fold=False)
_FOLD = MatchOptions(case_fold=True)

_SPRING = ("haru", "はるかぜ", "春一番", "fuyu")


def _gen(token: str) -> str:
    if token == "ha":
        return "(?:ha|はる|春)"
    else:
        return escape(token)


def _bad_gen(token: str) -> str:
    raise InvalidPattern(token)


def _nested(
    action: Action,
    text: str,
    pred: Optional[Predicate],
    restrictions: Sequence[Pattern[str]],
) -> Any:
    if action is Action.boundaries:
        _, sep, _ = text.rpartition("/")
        return text.rfind("/") + 1 if sep else 0
    elif action is Action.all:
        listing = {"notes/": ("haru.md", "はるかぜ.md", "fuyu.md")}.get(text, ())
        return tuple(
            name for name in listing if all(r.search(name) for r in restrictions)
        )
    else:
        return None


class _Enabled(TestCase):
    def setUp(self) -> None:
        state(enabled=True)

    def tearDown(self) -> None:
        state(enabled=True)


class Split(TestCase):
    def test_1(self) -> None:
        sp = split(Collection(_SPRING), text="ha", pred=None)
        self.assertEqual((sp.prefix, sp.token), ("", "ha"))

    def test_2(self) -> None:
        sp = split(Generator(_nested), text="notes/ha", pred=None)
        self.assertEqual((sp.prefix, sp.token), ("notes/", "ha"))

    def test_3(self) -> None:
        def producer(*_: Any) -> Any:
            return 99

        with self.assertRaises(SourceError):
            split(Generator(producer), text="ha", pred=None)


class TryComplete(_Enabled):
    def test_1(self) -> None:
        actual = try_complete(
            _EXACT, gen=_gen, text="ha", source=Collection(_SPRING), pred=None, cursor=2
        )
        self.assertEqual(actual, NoChange(text="ha", cursor=2))

    def test_2(self) -> None:
        source = Collection(("haru",))
        actual = try_complete(
            _EXACT, gen=_gen, text="haru", source=source, pred=None, cursor=4
        )
        self.assertEqual(actual, SoleMatch())

    def test_3(self) -> None:
        source = Collection(("haru", "fuyu"))
        actual = try_complete(
            _EXACT, gen=_gen, text="ha", source=source, pred=None, cursor=2
        )
        self.assertEqual(actual, Extended(text="haru", cursor=4))

    def test_4(self) -> None:
        source = Collection(("はるかぜ", "fuyu"))
        actual = try_complete(
            _EXACT, gen=_gen, text="ha", source=source, pred=None, cursor=2
        )
        self.assertEqual(actual, Extended(text="はるかぜ", cursor=4))

    def test_5(self) -> None:
        source = Collection(("fuyu", "natsu"))
        actual = try_complete(
            _EXACT, gen=_gen, text="ha", source=source, pred=None, cursor=2
        )
        self.assertEqual(actual, NoMatch())

    def test_6(self) -> None:
        actual = try_complete(
            _EXACT,
            gen=_bad_gen,
            text="ha",
            source=Collection(_SPRING),
            pred=None,
            cursor=2,
        )
        self.assertEqual(actual, NoMatch())

    def test_7(self) -> None:
        source = Collection(("haru2", "Haru"))
        actual = try_complete(
            _FOLD, gen=_gen, text="ha", source=source, pred=None, cursor=2
        )
        self.assertEqual(actual, Extended(text="haru", cursor=4))

    def test_8(self) -> None:
        source = Collection(("haru2", "Haru"))
        actual = try_complete(
            _EXACT, gen=_gen, text="ha", source=source, pred=None, cursor=2
        )
        self.assertEqual(actual, Extended(text="haru2", cursor=5))

    def test_9(self) -> None:
        source = Generator(_nested)
        actual = try_complete(
            _EXACT, gen=_gen, text="notes/ha", source=source, pred=None, cursor=8
        )
        self.assertEqual(actual, NoChange(text="notes/ha", cursor=8))

    def test_10(self) -> None:
        source = Generator(_nested)
        actual = try_complete(
            _EXACT, gen=_gen, text="notes/f", source=source, pred=None, cursor=7
        )
        self.assertEqual(actual, Extended(text="notes/fuyu.md", cursor=13))

    def test_11(self) -> None:
        source = Collection(_SPRING)
        actual = try_complete(
            _EXACT,
            gen=_gen,
            text="ha",
            source=source,
            pred=lambda c: c != "はるかぜ" and c != "春一番",
            cursor=2,
        )
        self.assertEqual(actual, Extended(text="haru", cursor=4))

    def test_12(self) -> None:
        def producer(action: Action, *_: Any) -> Any:
            if action is Action.all:
                raise SourceError("gone")
            else:
                return None

        with self.assertRaises(SourceError):
            try_complete(
                _EXACT,
                gen=_gen,
                text="ha",
                source=Generator(producer),
                pred=None,
                cursor=2,
            )


class Fixpoint(_Enabled):
    def test_1(self) -> None:
        source = Collection(("apple", "applet", "application"))
        first = try_complete(
            _EXACT, gen=escape, text="ap", source=source, pred=None, cursor=2
        )
        self.assertEqual(first, Extended(text="appl", cursor=4))

        assert isinstance(first, Extended)
        second = try_complete(
            _EXACT,
            gen=escape,
            text=first.text,
            source=source,
            pred=None,
            cursor=first.cursor,
        )
        self.assertEqual(second, NoChange(text="appl", cursor=4))

    def test_2(self) -> None:
        source = Generator(_nested)
        first = try_complete(
            _EXACT, gen=_gen, text="notes/fu", source=source, pred=None, cursor=8
        )
        assert isinstance(first, Extended)
        second = try_complete(
            _EXACT,
            gen=_gen,
            text=first.text,
            source=source,
            pred=None,
            cursor=first.cursor,
        )
        self.assertEqual(second, SoleMatch())


class ListCompletions(_Enabled):
    def test_1(self) -> None:
        actual = list_completions(
            _EXACT, gen=_gen, text="ha", source=Collection(_SPRING), pred=None, cursor=2
        )
        self.assertEqual(
            actual, Matches(prefix_len=0, candidates=("haru", "はるかぜ", "春一番"))
        )

    def test_2(self) -> None:
        source = Collection(("fuyu",))
        actual = list_completions(
            _EXACT, gen=_gen, text="ha", source=source, pred=None, cursor=2
        )
        self.assertEqual(actual, NoMatch())

    def test_3(self) -> None:
        actual = list_completions(
            _EXACT,
            gen=_bad_gen,
            text="ha",
            source=Collection(_SPRING),
            pred=None,
            cursor=2,
        )
        self.assertEqual(actual, NoMatch())

    def test_4(self) -> None:
        text = "notes/ha"
        actual = list_completions(
            _EXACT, gen=_gen, text=text, source=Generator(_nested), pred=None, cursor=8
        )
        assert isinstance(actual, Matches)
        self.assertEqual(actual.prefix_len, len("notes/"))
        self.assertEqual(actual.candidates, ("haru.md", "はるかぜ.md"))

        prefix = text[: actual.prefix_len]
        pattern = compile_pattern(_EXACT, gen=_gen, token=text[actual.prefix_len :])
        assert not isinstance(pattern, InvalidPattern)
        for candidate in actual.candidates:
            self.assertTrue((prefix + candidate).startswith(prefix))
            self.assertTrue(pattern.search(candidate))

    def test_5(self) -> None:
        source = Collection(("apple", "applet"))
        actual = list_completions(
            _EXACT, gen=escape, text="app", source=source, pred=None, cursor=3
        )
        self.assertEqual(actual, Matches(prefix_len=0, candidates=("apple", "applet")))


class Disabled(_Enabled):
    def test_1(self) -> None:
        state(enabled=False)
        actual = try_complete(
            _EXACT, gen=_gen, text="ha", source=Collection(_SPRING), pred=None, cursor=2
        )
        self.assertEqual(actual, NoMatch())

    def test_2(self) -> None:
        state(enabled=False)
        actual = list_completions(
            _EXACT, gen=_gen, text="ha", source=Collection(_SPRING), pred=None, cursor=2
        )
        self.assertEqual(actual, NoMatch())

    def test_3(self) -> None:
        state(enabled=False)
        actual = try_complete(
            _EXACT,
            gen=escape,
            text="haru",
            source=Collection(("haru",)),
            pred=None,
            cursor=4,
        )
        self.assertEqual(actual, NoMatch())
