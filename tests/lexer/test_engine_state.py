"""Tests for the matching engine's pending buffer and state transitions."""

from __future__ import annotations

import pytest

from chunklex.lexer import EngineState, MatchEngine
from chunklex.profiling import profiled_tokenize
from chunklex.rules import RuleTable
from chunklex.tokens import UNKNOWN_TOKEN_NAME, Token


@pytest.fixture
def table() -> RuleTable:
    table = RuleTable()
    table.add(r"^,$", "comma")
    table.add(r"^[a-z]+$", "word")
    table.add(r"^\s+$", "whitespace")
    table.set_ignored("whitespace")
    return table


class TestFeed:
    def test_whole_match_stays_pending(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        assert list(engine.feed("ca")) == []
        assert engine.pending == "ca"
        assert engine.state == EngineState.BUFFERING

    def test_pending_extended_by_next_step(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        list(engine.feed("ca"))
        tokens = list(engine.feed("t, d"))

        assert tokens == [
            Token("cat", "word", 0),
            Token(",", "comma", 3),
            Token(" ", "whitespace", 4),
        ]
        assert tokens[2].ignored is True
        assert engine.pending == "d"
        assert engine.offset == 5

    def test_empty_increment_is_noop(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        assert list(engine.feed("")) == []
        assert engine.state == EngineState.EMPTY
        assert engine.pending == ""

    def test_empty_increment_keeps_pending(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        list(engine.feed("ab"))
        assert list(engine.feed("")) == []
        assert engine.pending == "ab"
        assert engine.state == EngineState.BUFFERING

    def test_unknown_character(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        tokens = list(engine.feed("1a"))
        assert tokens == [Token("1", UNKNOWN_TOKEN_NAME, 0)]
        assert tokens[0].is_unknown
        assert engine.pending == "a"

    def test_increment_fully_resolved(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        tokens = list(engine.feed("a?"))
        assert [t.as_pair() for t in tokens] == [("a", "word"), ("?", UNKNOWN_TOKEN_NAME)]
        assert engine.state == EngineState.EMPTY

    def test_state_resolved_while_yielding(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        it = engine.feed("ab,")
        assert next(it) == Token("ab", "word", 0)
        assert engine.state == EngineState.RESOLVED
        assert list(it) == []
        assert engine.state == EngineState.BUFFERING
        assert engine.pending == ","


class TestFlush:
    def test_flush_commits_pending(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        list(engine.feed("dog"))
        assert engine.flush() == Token("dog", "word", 0)
        assert engine.pending == ""
        assert engine.state == EngineState.EMPTY
        assert engine.offset == 3

    def test_flush_empty_returns_none(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        assert engine.flush() is None

    def test_flush_ignored_pending(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        list(engine.feed("   "))
        token = engine.flush()
        assert token is not None
        assert token.ignored is True
        assert engine.state == EngineState.EMPTY

    def test_flush_after_resolved_tokens_returns_to_empty(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        assert list(engine.feed("ab,cd")) == [Token("ab", "word", 0), Token(",", "comma", 2)]
        assert engine.state == EngineState.BUFFERING

        assert engine.flush() == Token("cd", "word", 3)
        assert engine.state == EngineState.EMPTY
        assert engine.flush() is None
        assert engine.state == EngineState.EMPTY

    def test_feed_after_flush_starts_fresh(self, table: RuleTable) -> None:
        engine = MatchEngine(table.freeze())
        list(engine.feed("ab"))
        engine.flush()
        assert list(engine.feed("cd")) == []
        assert engine.pending == "cd"
        assert engine.state == EngineState.BUFFERING
        assert engine.flush() == Token("cd", "word", 2)

    def test_flush_drops_unmatched_text(self, table: RuleTable) -> None:
        with profiled_tokenize() as acc:
            engine = MatchEngine(table.freeze())
            # Only reachable if the pending text stops matching; force it
            engine._pending = "??"
            assert engine.flush() is None

        assert engine.pending == ""
        assert engine.offset == 2
        assert acc.dropped_chars == 2
        assert acc.segments == [("??", "", "dropped")]
