"""Chunked streaming of input text.

Input is walked in two nested granularities: large chunks for overall
iteration, and small steps that are fed to the matching engine one at a
time. This bounds the amount of text any single engine call works on.

Thread Safety:
ChunkStream instances are single-use per tokenize call.
All state is instance-local.

"""

from __future__ import annotations

from collections.abc import Iterator

from chunklex.config import DEFAULT_CHUNK_SIZE, DEFAULT_STEP_SIZE
from chunklex.errors import ConfigError


class ChunkStream:
    """Streams a text in fixed-size chunks and each chunk in fixed-size steps.

    Usage:
        >>> stream = ChunkStream(chunk_size=4, step_size=2)
        >>> [list(stream.steps(c)) for c in stream.open("  abcdef  ")]
        [['ab', 'cd'], ['ef']]

    """

    __slots__ = (
        "_chunk_size",
        "_step_size",
        "_trim",
        "_data",
        "_offset",
        "_is_streaming",
    )

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        step_size: int = DEFAULT_STEP_SIZE,
        *,
        trim: bool = True,
    ) -> None:
        """Initialize stream with chunk and step sizes.

        Args:
            chunk_size: Length of each top-level chunk
            step_size: Length of each step within a chunk
            trim: Strip surrounding whitespace from opened text

        Raises:
            ConfigError: If either size is not positive
        """
        if chunk_size <= 0:
            msg = f"chunk_size must be positive, got {chunk_size}"
            raise ConfigError(msg)
        if step_size <= 0:
            msg = f"step_size must be positive, got {step_size}"
            raise ConfigError(msg)

        self._chunk_size = chunk_size
        self._step_size = step_size
        self._trim = trim
        self._data = ""
        self._offset = 0
        self._is_streaming = False

    def open(self, text: str) -> Iterator[str]:
        """Start streaming ``text``.

        The text is trimmed and the offset reset immediately; chunks are
        produced lazily by the returned iterator.

        Returns:
            Iterator over consecutive chunks
        """
        self._data = text.strip() if self._trim else text
        self._offset = 0
        self._is_streaming = True
        return self._chunks()

    def _chunks(self) -> Iterator[str]:
        data = self._data
        data_len = len(data)
        try:
            while True:
                next_offset = min(self._offset + self._chunk_size, data_len)
                # Exact end of data (or empty data)
                if next_offset <= self._offset:
                    return
                chunk = data[self._offset : next_offset]
                self._offset = next_offset
                yield chunk
        finally:
            self._is_streaming = False

    def steps(self, chunk: str) -> Iterator[str]:
        """Split ``chunk`` into contiguous steps; the last may be shorter."""
        step = self._step_size
        for index in range(0, len(chunk), step):
            yield chunk[index : index + step]

    @property
    def data(self) -> str:
        """The (trimmed) text being streamed."""
        return self._data

    @property
    def offset(self) -> int:
        """Position just past the last chunk handed out."""
        return self._offset

    @property
    def is_streaming(self) -> bool:
        return self._is_streaming
