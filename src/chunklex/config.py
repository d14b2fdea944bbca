"""ContextVar-based tokenizer configuration for chunklex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Tokenizer created without an explicit config picks up the active one.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit config
    tokenizer = Tokenizer(TokenizerConfig(chunk_size=1024))

    # Or use the context manager
    with tokenizer_config_context(TokenizerConfig(step_size=8)):
        tokenizer = Tokenizer()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from chunklex.errors import ConfigError

DEFAULT_CHUNK_SIZE = 0x100
DEFAULT_STEP_SIZE = 0x20


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        chunk_size: Length of the top-level slices the input is streamed in
        step_size: Length of the increments fed to the matching engine
        flush_each_chunk: Flush the pending buffer after every chunk. A token
            that straddles a chunk boundary is then committed early. Disable
            to flush only at end of stream. The pending buffer is then
            unbounded: a run that keeps matching is held whole across chunks
            and rescanned from length 1 on every step, so memory grows with
            the run and time grows much faster than linearly. Chunking no
            longer bounds either.
        trim_input: Strip leading and trailing whitespace before streaming

    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    step_size: int = DEFAULT_STEP_SIZE
    flush_each_chunk: bool = True
    trim_input: bool = True

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            msg = f"chunk_size must be positive, got {self.chunk_size}"
            raise ConfigError(msg)
        if self.step_size <= 0:
            msg = f"step_size must be positive, got {self.step_size}"
            raise ConfigError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> TokenizerConfig:
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New TokenizerConfig instance with values from dict.

        Example:
            >>> config = TokenizerConfig.from_dict({"chunk_size": 64, "extra": 1})
            >>> config.chunk_size
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (context-local)."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context.

    Args:
        config: TokenizerConfig instance to use for this context.

    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TokenizerConfig to use within the context.

    Example:
        >>> from chunklex import Tokenizer
        >>> with tokenizer_config_context(TokenizerConfig(chunk_size=16)):
        ...     tokenizer = Tokenizer()
        >>> tokenizer.config.chunk_size
        16
        >>> get_tokenizer_config().chunk_size
        256

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_STEP_SIZE",
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
