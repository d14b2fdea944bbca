"""Tests for chunklex.profiling and the tokenize profiling API."""

from chunklex import Tokenizer, TokenizerConfig
from chunklex.profiling import (
    TokenizeAccumulator,
    get_tokenize_accumulator,
    profiled_tokenize,
)


def make_tokenizer(config: TokenizerConfig | None = None) -> Tokenizer:
    t = Tokenizer(config)
    t.add_rule(r"^,$", "comma")
    t.add_rule(r"^[a-z]+$", "word")
    t.add_rule(r"^\s+$", "whitespace")
    t.set_ignored("whitespace")
    return t


class TestGetTokenizeAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_tokenize_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_tokenize():
            pass
        assert get_tokenize_accumulator() is None


class TestProfiledTokenize:
    def test_yields_accumulator(self) -> None:
        with profiled_tokenize() as acc:
            assert isinstance(acc, TokenizeAccumulator)
            assert get_tokenize_accumulator() is acc

    def test_records_call(self) -> None:
        with profiled_tokenize() as acc:
            make_tokenizer().tokens("  cat, dog ")
        assert acc.tokenize_calls == 1
        assert acc.input_length == len("cat, dog")
        assert acc.chunks == 1
        assert acc.steps == 1

    def test_counts_tokens(self) -> None:
        with profiled_tokenize() as acc:
            make_tokenizer().tokens("cat, dog?")
        assert acc.emitted == 4
        assert acc.ignored == 1
        assert acc.unknown == 1
        assert acc.dropped_chars == 0

    def test_segments_in_input_order(self) -> None:
        with profiled_tokenize() as acc:
            make_tokenizer().tokens("cat, dog")
        assert acc.segments == [
            ("cat", "word", "emitted"),
            (",", "comma", "emitted"),
            (" ", "whitespace", "ignored"),
            ("dog", "word", "emitted"),
        ]

    def test_reconstruct_includes_ignored(self) -> None:
        text = "the  cat ,sat"
        with profiled_tokenize() as acc:
            make_tokenizer().tokens(text)
        assert acc.reconstruct() == text

    def test_flushes_per_chunk(self) -> None:
        with profiled_tokenize() as acc:
            make_tokenizer(TokenizerConfig(chunk_size=4, step_size=2)).tokens("abcdefgh")
        assert acc.chunks == 2
        assert acc.steps == 4
        assert acc.flushes == 2

    def test_multiple_calls(self) -> None:
        t = make_tokenizer()
        with profiled_tokenize() as acc:
            t.tokens("a")
            t.tokens("b")
        assert acc.tokenize_calls == 2


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = TokenizeAccumulator().summary()
        assert summary["tokenize_calls"] == 0
        assert summary["emitted"] == 0
        assert summary["dropped_chars"] == 0

    def test_summary_keys(self) -> None:
        with profiled_tokenize() as acc:
            make_tokenizer().tokens("cat")
        summary = acc.summary()
        assert set(summary) == {
            "total_ms",
            "tokenize_calls",
            "input_length",
            "chunks",
            "steps",
            "flushes",
            "emitted",
            "ignored",
            "unknown",
            "dropped_chars",
        }
        assert summary["total_ms"] >= 0
