"""Rule-driven streaming tokenizer.

Splits text into named tokens using an ordered list of regular expression
rules. Input is streamed in chunks and steps (see ChunkStream) and each step
is fed to a MatchEngine, which always prefers the longest prefix some rule
matches.

Boundary behavior:
By default the pending buffer is flushed after every chunk, not only at the
end of the stream. A token that could still grow when a chunk ends is then
committed as-is, and the next chunk starts a new token. Set
``TokenizerConfig.flush_each_chunk`` to False to flush only at end of stream.

Thread Safety:
Each tokenize call gets its own stream and engine, working on a frozen
snapshot of the rules. Adding rules while another thread tokenizes is not
supported.

"""

from __future__ import annotations

from collections.abc import Iterator

from chunklex.config import TokenizerConfig, get_tokenizer_config
from chunklex.lexer.emitter import Emitter, TokenCallback
from chunklex.lexer.engine import MatchEngine
from chunklex.lexer.stream import ChunkStream
from chunklex.profiling import get_tokenize_accumulator
from chunklex.rules import RuleTable, TokenRule
from chunklex.tokens import Token
from chunklex.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer:
    """Extracts custom named tokens from text.

    Register rules with ``add_rule``, optionally mark some token names as
    ignored, then call ``tokenize`` with a callback that receives each
    ``(text, name)`` pair.

    Usage:
        >>> t = Tokenizer()
        >>> _ = t.add_rule(r"^,$", "comma")
        >>> _ = t.add_rule(r"^[a-z]+$", "word")
        >>> _ = t.add_rule(r"^\\s+$", "whitespace")
        >>> t.set_ignored("whitespace")
        True
        >>> t.tokenize("cat, dog", lambda text, name: print(name, text))
        word cat
        comma ,
        word dog

    """

    __slots__ = ("_rules", "_config")

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """Initialize tokenizer with no rules.

        Args:
            config: Streaming configuration. Defaults to the active
                context config (see ``chunklex.config``).
        """
        self._rules = RuleTable()
        self._config = config if config is not None else get_tokenizer_config()

    def add_rule(self, pattern: str, name: str) -> TokenRule:
        """Add a new rule with the lowest priority so far.

        Args:
            pattern: Regular expression the whole token must match
            name: Token name passed to callbacks

        Returns:
            The created rule

        Raises:
            InvalidPatternError: If the pattern does not compile
            DuplicateRuleError: If a non-ignored rule with this pattern exists
        """
        return self._rules.add(pattern, name)

    def set_ignored(self, name: str, ignore: bool = True) -> bool:
        """Stop delivering tokens of the first rule named ``name``.

        Ignored tokens still consume input. Unknown names are logged as a
        warning and otherwise have no effect.

        Returns:
            True if a rule was found
        """
        return self._rules.set_ignored(name, ignore)

    def match_rule(self, candidate: str) -> TokenRule | None:
        """Return the highest-priority rule fully matching ``candidate``."""
        return self._rules.match(candidate)

    def tokenize(self, text: str, on_token: TokenCallback) -> None:
        """Extract tokens from ``text``.

        Args:
            text: Input text; surrounding whitespace is trimmed by default
            on_token: Called in-line with ``(text, name)`` for each token
        """
        emitter = Emitter(on_token)
        for token in self._resolve(text):
            emitter.emit(token)

    def iter_tokens(self, text: str) -> Iterator[Token]:
        """Lazily yield the tokens ``tokenize`` would deliver."""
        for token in self._resolve(text):
            if not token.ignored:
                yield token

    def tokens(self, text: str) -> list[Token]:
        """Return all delivered tokens for ``text`` as a list."""
        return list(self.iter_tokens(text))

    def _resolve(self, text: str) -> Iterator[Token]:
        """Stream ``text`` through a fresh engine, yielding every resolved token.

        Yields:
            Tokens in input order, ignored ones included.
        """
        config = self._config
        stream = ChunkStream(config.chunk_size, config.step_size, trim=config.trim_input)
        engine = MatchEngine(self._rules.freeze())
        accumulator = get_tokenize_accumulator()

        chunks = stream.open(text)
        if accumulator is not None:
            accumulator.record_call(len(stream.data))

        chunk_count = 0
        for chunk in chunks:
            chunk_count += 1
            step_count = 0
            for step in stream.steps(chunk):
                step_count += 1
                yield from engine.feed(step)

            if accumulator is not None:
                accumulator.record_chunk(step_count)

            if config.flush_each_chunk:
                token = engine.flush()
                if token is not None:
                    yield token

        # End of stream
        token = engine.flush()
        if token is not None:
            yield token

        logger.debug("Tokenized %d chars in %d chunks", len(stream.data), chunk_count)

    @property
    def rules(self) -> RuleTable:
        """The rule table, in priority order."""
        return self._rules

    @property
    def config(self) -> TokenizerConfig:
        return self._config
