"""chunklex TokenizeAccumulator: opt-in profiling for tokenization.

This module provides accumulated metrics during tokenization:
- Total time and input length
- Chunk, step and flush counts
- Emitted, ignored and unknown token counts
- Text dropped by flushes
- The ordered list of consumed segments

Every character of the trimmed input ends up in exactly one segment, so
joining the segment texts reconstructs the input, including the parts that
were never delivered to the callback.

Zero overhead when disabled (get_tokenize_accumulator() returns None).

Example:
    from chunklex.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        tokenizer.tokenize("cat, dog", on_token)

    print(metrics.summary())
    # {"total_ms": 0.3, "tokenize_calls": 1, "emitted": 3, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Literal

SegmentOutcome = Literal["emitted", "ignored", "dropped"]


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        tokenize_calls: Number of tokenize calls recorded.
        input_length: Total length of trimmed input.
        chunks: Chunks streamed.
        steps: Steps fed to the matching engine.
        flushes: Flushes that found a non-empty pending buffer.
        emitted: Tokens delivered to the caller (unknown tokens included).
        ignored: Tokens consumed by ignored rules.
        unknown: Single-character fallback tokens.
        dropped_chars: Characters discarded by flushes without a match.
        segments: Consumed ``(text, name, outcome)`` triples in input order.
            Dropped text has an empty name.

    """

    start_time: float = field(default_factory=perf_counter)
    tokenize_calls: int = 0
    input_length: int = 0
    chunks: int = 0
    steps: int = 0
    flushes: int = 0
    emitted: int = 0
    ignored: int = 0
    unknown: int = 0
    dropped_chars: int = 0
    segments: list[tuple[str, str, SegmentOutcome]] = field(default_factory=list)

    def record_call(self, input_length: int) -> None:
        self.tokenize_calls += 1
        self.input_length += input_length

    def record_chunk(self, step_count: int) -> None:
        self.chunks += 1
        self.steps += step_count

    def record_token(self, text: str, name: str, *, ignored: bool, unknown: bool) -> None:
        """Record a token resolved by the matching engine."""
        if ignored:
            self.ignored += 1
            self.segments.append((text, name, "ignored"))
            return
        self.emitted += 1
        if unknown:
            self.unknown += 1
        self.segments.append((text, name, "emitted"))

    def record_flush(self, dropped: str = "") -> None:
        """Record a flush of a non-empty buffer; ``dropped`` is the unmatched text."""
        self.flushes += 1
        if dropped:
            self.dropped_chars += len(dropped)
            self.segments.append((dropped, "", "dropped"))

    def reconstruct(self) -> str:
        """Join all consumed segments back into the trimmed input."""
        return "".join(text for text, _, _ in self.segments)

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms and every counter.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "tokenize_calls": self.tokenize_calls,
            "input_length": self.input_length,
            "chunks": self.chunks,
            "steps": self.steps,
            "flushes": self.flushes,
            "emitted": self.emitted,
            "ignored": self.ignored,
            "unknown": self.unknown,
            "dropped_chars": self.dropped_chars,
        }


# Module-level ContextVar
_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Creates a TokenizeAccumulator and makes it available via
    get_tokenize_accumulator() for the duration of the with block.

    Yields:
        TokenizeAccumulator that will be populated during tokenize calls.

    Example:
        with profiled_tokenize() as metrics:
            tokens = tokenizer.tokens(source)
        assert metrics.reconstruct() == source.strip()

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
