"""Token definition for the chunklex tokenizer.

The matching engine produces Token objects; the emitter hands their
``(text, name)`` pair to the caller's callback.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

# Reserved rule name for characters no rule matches
UNKNOWN_TOKEN_NAME = "_unknown_"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the matching engine.

    Attributes:
        text: The matched text
        name: Name of the rule that matched (or ``_unknown_``)
        offset: Start position of the token in the trimmed input
        ignored: True when the matching rule is ignored. Such tokens are
            never delivered to callbacks; they are visible to profiling only.

    """

    text: str
    name: str
    offset: int = 0
    ignored: bool = field(default=False, compare=False)

    @property
    def end(self) -> int:
        """Position just past the last character of the token."""
        return self.offset + len(self.text)

    @property
    def is_unknown(self) -> bool:
        """True for the single-character fallback token."""
        return self.name == UNKNOWN_TOKEN_NAME

    def as_pair(self) -> tuple[str, str]:
        """Return ``(text, name)`` as passed to tokenize callbacks."""
        return self.text, self.name

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.name}, {val!r}, {self.offset})"
