"""Benchmark tokenizing a large text with a small rule set.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

try:
    import pytest

    from chunklex import Tokenizer, TokenizerConfig

    SENTENCE = "the quick brown fox, 42 times, jumps over 3+4 lazy dogs. "

    @pytest.fixture
    def large_text() -> str:
        return SENTENCE * 2000

    def make_tokenizer(config: TokenizerConfig | None = None) -> Tokenizer:
        t = Tokenizer(config)
        t.add_rule(r"^,$", "comma")
        t.add_rule(r"^\.$", "full stop")
        t.add_rule(r"^[a-z]+$", "word")
        t.add_rule(r"^[0-9]+$", "number")
        t.add_rule(r"^([0-9]*[+][0-9]*)+$", "special")
        t.add_rule(r"^\s+$", "whitespace")
        t.set_ignored("whitespace")
        return t

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_default_config(benchmark, large_text):
        """Default 256/32 chunking."""
        t = make_tokenizer()
        benchmark(lambda: t.tokenize(large_text, lambda text, name: None))

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_large_chunks(benchmark, large_text):
        """Large chunks and steps (fewer, longer engine calls)."""
        t = make_tokenizer(TokenizerConfig(chunk_size=4096, step_size=512))
        benchmark(lambda: t.tokenize(large_text, lambda text, name: None))

except ImportError:
    pass  # pytest not available
