"""Incremental maximal-munch matching engine.

The engine receives the input in small increments and decides, one prefix
length at a time, how far the token at the front of its buffer extends:

1. Prepend the pending buffer to the new increment
2. Find the longest run of prefix lengths 1, 2, 3, ... that some rule matches
3. Commit, buffer, or fall back:
   - no length matches: emit the first character as ``_unknown_``
   - every length up to the end matches: keep the text pending, since more
     input could still extend the token
   - otherwise: commit the longest matching prefix to the highest-priority
     rule that matches it

Ignored rules take part in matching like any other rule; the engine yields
their tokens with ``ignored=True`` and leaves suppression to the emitter.

Thread Safety:
MatchEngine instances are single-use. Create one per tokenize call.
The rule set is immutable; the pending buffer is instance-local.

"""

from __future__ import annotations

from collections.abc import Iterator

from chunklex.lexer.modes import EngineState
from chunklex.profiling import get_tokenize_accumulator
from chunklex.rules import UNKNOWN_RULE, RuleSet, TokenRule
from chunklex.tokens import Token
from chunklex.utils.logger import get_logger

logger = get_logger(__name__)


class MatchEngine:
    """Greedy longest-prefix matcher with a pending buffer.

    Usage:
        >>> from chunklex.rules import RuleTable
        >>> table = RuleTable()
        >>> _ = table.add(r"^,$", "comma")
        >>> _ = table.add(r"^[a-z]+$", "word")
        >>> _ = table.add(r"^\\s+$", "whitespace")
        >>> engine = MatchEngine(table.freeze())
        >>> for step in ("ca", "t, d", "og"):
        ...     for token in engine.feed(step):
        ...         print(token)
        Token(word, 'cat', 0)
        Token(comma, ',', 3)
        Token(whitespace, ' ', 4)
        >>> engine.flush()
        Token(word, 'dog', 5)

    """

    __slots__ = ("_rules", "_pending", "_offset", "_state", "_accumulator")

    def __init__(self, rules: RuleSet) -> None:
        """Initialize engine with an empty buffer.

        Args:
            rules: Priority-ordered rules to match against
        """
        self._rules = rules
        self._pending = ""
        # Absolute offset of the first unresolved character
        self._offset = 0
        self._state = EngineState.EMPTY
        self._accumulator = get_tokenize_accumulator()

    def feed(self, data: str) -> Iterator[Token]:
        """Consume one increment of input.

        Args:
            data: Next slice of text (may be empty)

        Yields:
            Tokens resolved by this increment, ignored ones included, in
            input order. Text that may still be extended stays pending.
        """
        whole = self._pending + data
        self._pending = ""

        pos = 0
        end = len(whole)
        while pos < end:
            max_index = self._scan(whole, pos)

            if max_index == 0:
                # No rule matches even one character
                yield self._resolve(whole[pos], UNKNOWN_RULE)
                pos += 1
            elif pos + max_index == end:
                # The whole remainder matches; more input may extend it
                self._pending = whole[pos:]
                self._state = EngineState.BUFFERING
                return
            else:
                text = whole[pos : pos + max_index]
                rule = self._rules.match(text)
                assert rule is not None, f"scan matched {text!r} but no rule resolves it"
                yield self._resolve(text, rule)
                pos += max_index

        self._state = EngineState.EMPTY

    def flush(self) -> Token | None:
        """Force the pending buffer into a token.

        Pending text that no rule matches as a whole is dropped without an
        unknown-token fallback.

        Returns:
            The committed token, or None when nothing was pending or the
            text was dropped
        """
        if not self._pending:
            return None

        pending = self._pending
        self._pending = ""
        self._state = EngineState.EMPTY

        rule = self._rules.match(pending)
        if rule is None:
            logger.debug("Flush dropped %d unmatched chars at offset %d", len(pending), self._offset)
            self._offset += len(pending)
            if self._accumulator is not None:
                self._accumulator.record_flush(pending)
            return None

        if self._accumulator is not None:
            self._accumulator.record_flush()
        token = self._resolve(pending, rule)
        self._state = EngineState.EMPTY
        return token

    def _scan(self, whole: str, pos: int) -> int:
        """Count consecutive prefix lengths of ``whole[pos:]`` matched by any rule."""
        match = self._rules.match
        limit = len(whole) - pos
        length = 0
        while length < limit and match(whole[pos : pos + length + 1]) is not None:
            length += 1
        return length

    def _resolve(self, text: str, rule: TokenRule) -> Token:
        token = Token(text, rule.name, self._offset, rule.ignored)
        self._offset += len(text)
        self._state = EngineState.RESOLVED

        if self._accumulator is not None:
            self._accumulator.record_token(
                text,
                rule.name,
                ignored=rule.ignored,
                unknown=rule is UNKNOWN_RULE,
            )
        return token

    @property
    def pending(self) -> str:
        """Text consumed but not yet committed to a token."""
        return self._pending

    @property
    def offset(self) -> int:
        """Absolute offset of the first unresolved character."""
        return self._offset

    @property
    def state(self) -> EngineState:
        return self._state
