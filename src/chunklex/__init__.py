"""
chunklex: streaming regex-rule tokenizer

Splits text into named tokens using an ordered list of fully anchored
regular expressions. The longest prefix some rule matches always wins;
ties go to the rule declared first. Characters no rule matches come out
as single-character ``_unknown_`` tokens, so tokenizing never fails on input.

Quick Start:
    >>> from chunklex import tokenize
    >>> tokenize(
    ...     "cat, dog",
    ...     [(r"^,$", "comma"), (r"^[a-z]+$", "word"), (r"^\\s+$", "whitespace")],
    ...     ignore=["whitespace"],
    ... )
    [Token(word, 'cat', 0), Token(comma, ',', 3), Token(word, 'dog', 5)]

    >>> # Or drive a Tokenizer with a callback
    >>> from chunklex import Tokenizer
    >>> t = Tokenizer()
    >>> _ = t.add_rule(r"^[0-9]+$", "number")
    >>> t.tokenize("12?34", lambda text, name: print(name, text))
    number 12
    _unknown_ ?
    number 34
"""

from collections.abc import Iterable

from chunklex.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from chunklex.errors import (
    ChunklexError,
    ConfigError,
    DuplicateRuleError,
    InvalidPatternError,
)
from chunklex.lexer import ChunkStream, Emitter, EngineState, MatchEngine, Tokenizer
from chunklex.profiling import TokenizeAccumulator, get_tokenize_accumulator, profiled_tokenize
from chunklex.rules import RuleSet, RuleTable, TokenRule
from chunklex.tokens import UNKNOWN_TOKEN_NAME, Token

__version__ = "0.1.0"


def tokenize(
    text: str,
    rules: Iterable[tuple[str, str]],
    *,
    ignore: Iterable[str] = (),
    config: TokenizerConfig | None = None,
) -> list[Token]:
    """Tokenize text with a one-off Tokenizer.

    Args:
        text: Input text
        rules: ``(pattern, name)`` pairs in priority order
        ignore: Token names whose matches are consumed but not returned
        config: Streaming configuration (uses the context config if None)

    Returns:
        Delivered tokens in input order

    Raises:
        DuplicateRuleError: If two rules share a pattern
        InvalidPatternError: If a pattern does not compile
    """
    tokenizer = Tokenizer(config)
    for pattern, name in rules:
        tokenizer.add_rule(pattern, name)
    for name in ignore:
        tokenizer.set_ignored(name)
    return tokenizer.tokens(text)


__all__ = [
    # Main API
    "tokenize",
    "Tokenizer",
    "Token",
    "UNKNOWN_TOKEN_NAME",
    # Rules
    "TokenRule",
    "RuleTable",
    "RuleSet",
    # Engine internals
    "ChunkStream",
    "MatchEngine",
    "EngineState",
    "Emitter",
    # Configuration
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Profiling
    "TokenizeAccumulator",
    "get_tokenize_accumulator",
    "profiled_tokenize",
    # Errors
    "ChunklexError",
    "ConfigError",
    "DuplicateRuleError",
    "InvalidPatternError",
    # Version
    "__version__",
]
