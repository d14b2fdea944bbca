"""Streaming maximal-munch tokenizer for chunklex.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── core.py              # Tokenizer (public facade)
├── stream.py            # ChunkStream: chunks and steps
├── engine.py            # MatchEngine: pending buffer, prefix scan, flush
├── emitter.py           # Emitter: callback delivery, ignore filtering
└── modes.py             # EngineState enum

Usage:
    >>> from chunklex.lexer import Tokenizer
    >>> t = Tokenizer()
    >>> _ = t.add_rule(r"^[0-9]+$", "number")
    >>> t.tokens("42")
    [Token(number, '42', 0)]

"""

from chunklex.lexer.core import Tokenizer
from chunklex.lexer.emitter import Emitter
from chunklex.lexer.engine import MatchEngine
from chunklex.lexer.modes import EngineState
from chunklex.lexer.stream import ChunkStream

__all__ = ["ChunkStream", "Emitter", "EngineState", "MatchEngine", "Tokenizer"]
