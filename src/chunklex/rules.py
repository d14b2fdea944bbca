"""Rule table for the chunklex tokenizer.

A rule pairs a regular expression with a token name. Rules are kept in
declaration order, which is also their priority: when several rules fully
match the same text, the first one declared wins.

Thread Safety:
RuleTable is mutable and meant to be filled before tokenizing.
RuleSet is an immutable snapshot of a table. Safe to share.

Example:
    >>> table = RuleTable()
    >>> _ = table.add(r"^[a-z]+$", "word")
    >>> _ = table.add(r"^\\s+$", "whitespace")
    >>> table.set_ignored("whitespace")
    True
    >>> table.freeze().match("cat").name
    'word'
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from chunklex.errors import DuplicateRuleError, InvalidPatternError
from chunklex.tokens import UNKNOWN_TOKEN_NAME
from chunklex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TokenRule:
    """A pattern and the token name it produces.

    Two rules are equal when their pattern and ignore status are equal;
    the name takes no part in comparison.

    Attributes:
        pattern: Regular expression, always applied to the whole candidate
        name: Token name reported for matches
        ignored: Matches are consumed but not delivered

    """

    pattern: str
    name: str = field(compare=False)
    ignored: bool = False
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            raise InvalidPatternError(self.pattern, self.name, str(e)) from e
        object.__setattr__(self, "_regex", compiled)

    def is_matching(self, word: str) -> bool:
        """Check whether ``word`` as a whole matches the pattern."""
        return self._regex.fullmatch(word) is not None


# Fallback for characters no rule matches. Never ignored.
UNKNOWN_RULE = TokenRule("", UNKNOWN_TOKEN_NAME)


def _first_match(rules: tuple[TokenRule, ...] | list[TokenRule], candidate: str) -> TokenRule | None:
    for rule in rules:
        if rule.is_matching(candidate):
            return rule
    return None


class RuleSet:
    """Immutable, priority-ordered snapshot of a RuleTable.

    The matching engine only ever sees a RuleSet, so rules cannot change
    under a running tokenize call.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[TokenRule, ...]) -> None:
        self._rules = rules

    def match(self, candidate: str) -> TokenRule | None:
        """Return the first rule whose pattern fully matches ``candidate``."""
        return _first_match(self._rules, candidate)

    @property
    def rules(self) -> tuple[TokenRule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[TokenRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


class RuleTable:
    """Mutable, ordered collection of token rules.

    Use ``add`` and ``set_ignored`` while setting up, then ``freeze`` to get
    the snapshot a tokenize call works on.
    """

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        """Initialize empty table."""
        self._rules: list[TokenRule] = []

    def add(self, pattern: str, name: str) -> TokenRule:
        """Append a new, non-ignored rule.

        Args:
            pattern: Regular expression matched against whole candidates
            name: Token name to report

        Returns:
            The created rule

        Raises:
            InvalidPatternError: If the pattern does not compile
            DuplicateRuleError: If a non-ignored rule with the same pattern
                already exists
        """
        rule = TokenRule(pattern, name)
        if rule in self._rules:
            raise DuplicateRuleError(pattern, name)

        self._rules.append(rule)
        logger.debug("Added rule %r for %r (priority %d)", pattern, name, len(self._rules))
        return rule

    def set_ignored(self, name: str, ignore: bool = True) -> bool:
        """Mark the first rule named ``name`` as ignored.

        Names are compared after ``str.lower()``, so "STRASSE" does not match
        "straße" the way full case folding would. An unknown name is most
        likely a typo on the caller's side, so it is logged rather than raised.

        Args:
            name: Token name of an existing rule
            ignore: False clears the flag instead

        Returns:
            True if a rule was found and updated
        """
        index = self._index_of(name)
        if index is None:
            logger.warning("Could not find token %s in the rules list!", name)
            return False

        self._rules[index] = replace(self._rules[index], ignored=ignore)
        return True

    def match(self, candidate: str) -> TokenRule | None:
        """Return the first rule whose pattern fully matches ``candidate``."""
        return _first_match(self._rules, candidate)

    def get(self, name: str) -> TokenRule | None:
        """Return the first rule named ``name`` (case-insensitive)."""
        index = self._index_of(name)
        return None if index is None else self._rules[index]

    def freeze(self) -> RuleSet:
        """Snapshot the current rules in priority order."""
        return RuleSet(tuple(self._rules))

    @property
    def names(self) -> tuple[str, ...]:
        """Token names in priority order (may repeat)."""
        return tuple(rule.name for rule in self._rules)

    def _index_of(self, name: str) -> int | None:
        lowered = name.lower()
        for i, rule in enumerate(self._rules):
            if rule.name.lower() == lowered:
                return i
        return None

    def __iter__(self) -> Iterator[TokenRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: str) -> bool:
        """Support 'name in table' syntax."""
        return self._index_of(name) is not None
