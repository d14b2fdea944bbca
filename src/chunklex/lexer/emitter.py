"""Delivery of resolved tokens to the caller's callback."""

from __future__ import annotations

from collections.abc import Callable

from chunklex.tokens import Token

TokenCallback = Callable[[str, str], None]


class Emitter:
    """Calls ``on_token(text, name)`` for every non-ignored token.

    Tokens are delivered synchronously, in the order they are emitted.
    """

    __slots__ = ("_on_token", "_emitted")

    def __init__(self, on_token: TokenCallback) -> None:
        self._on_token = on_token
        self._emitted = 0

    def emit(self, token: Token) -> bool:
        """Deliver ``token`` unless it is ignored.

        Returns:
            True if the callback was invoked
        """
        if token.ignored:
            return False
        self._on_token(token.text, token.name)
        self._emitted += 1
        return True

    @property
    def emitted(self) -> int:
        """Number of tokens delivered so far."""
        return self._emitted
