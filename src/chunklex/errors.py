"""Exception classes for chunklex.

Provides standardized exceptions for rule registration and configuration.
Unmatched input is never an error: the tokenizer falls back to single
character ``_unknown_`` tokens instead.
"""

from __future__ import annotations


class ChunklexError(Exception):
    """Base exception for all chunklex errors.

    Subclass this for specific error categories.
    """

    pass


class DuplicateRuleError(ChunklexError):
    """A rule with the same pattern and ignore status already exists.

    Raised by ``add_rule``. The rule table is left unchanged.
    """

    def __init__(self, pattern: str, name: str) -> None:
        """Initialize duplicate rule error.

        Args:
            pattern: Regular expression of the rejected rule
            name: Token name of the rejected rule
        """
        self.pattern = pattern
        self.name = name
        super().__init__(f"Rule for {name} with value ({pattern}) already exists!")


class InvalidPatternError(ChunklexError):
    """A rule pattern could not be compiled.

    The underlying ``re.error`` is chained as ``__cause__``.
    """

    def __init__(self, pattern: str, name: str, reason: str) -> None:
        """Initialize invalid pattern error.

        Args:
            pattern: The pattern that failed to compile
            name: Token name the pattern was registered under
            reason: Compiler message
        """
        self.pattern = pattern
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid pattern for {name} ({pattern}): {reason}")


class ConfigError(ChunklexError, ValueError):
    """Invalid tokenizer configuration (e.g. non-positive chunk size)."""

    pass
