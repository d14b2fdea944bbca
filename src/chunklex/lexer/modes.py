"""Matching engine states.

This module defines the states the matching engine moves between while
consuming steps of input.
"""

from __future__ import annotations

from enum import Enum, auto


class EngineState(Enum):
    """Matching engine states.

    Transitions are driven by the outcome of each prefix scan:
    - EMPTY: Nothing pending
    - BUFFERING: Pending text fully matches a rule and may still grow
    - RESOLVED: A token was just committed (reported while it is yielded)

    """

    EMPTY = auto()
    BUFFERING = auto()
    RESOLVED = auto()
