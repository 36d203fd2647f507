""" Iterator that splits a source every ``n`` occurrences of a pattern """

from __future__ import annotations

import logging
from enum import Enum
from typing import (
    Any,
    Iterable,
)

from .exceptions import ConfigurationError
from .sources import (
    TextSource,
    make_source,
)


__all__ = [
    'PatternSplitter',
    'SplitterState',
    'split_every',
    'split_every_n_of_char',
    'split_every_n_of_str',
]

lgr = logging.getLogger('split_every.splitter')


class SplitterState(Enum):
    ACCUMULATING = 'accumulating'
    CHUNK_READY = 'chunk-ready'
    EXHAUSTED = 'exhausted'


class PatternSplitter:
    """ Yield chunks of a source, each ending after ``n`` pattern occurrences

    Elements are pulled from the source one at a time and compared to the
    pattern. Every contiguous occurrence of the pattern counts once, and
    occurrences never overlap. When the ``n``-th occurrence within a chunk is
    complete, the chunk is handed out. If the source ends earlier, all
    remaining elements form the last chunk.

    Splitting is exclusive by default: the occurrence that closes a chunk is
    consumed, but it is not part of the chunk, whereas any earlier
    occurrences are. With ``keep_pattern=True`` the closing occurrence is the
    end of its chunk, so that joining all chunks restores the source.

    A partial match that fails restarts matching at the failing element. An
    occurrence that starts inside the failed partial match is therefore not
    found, e.g. ``'aab'`` is not found in ``'aaab'``.

    Parameters
    ----------
    source: Any
      A ``ChunkSource`` or anything ``make_source()`` accepts.
    pattern: Iterable
      The non-empty sequence of elements to look for. For text sources it
      must be of the same type as the text.
    n: int
      Number of pattern occurrences that close a chunk, at least one.
    keep_pattern: bool
      If ``True``, the closing occurrence of the pattern stays at the end of
      its chunk.

    Raises
    ------
    ConfigurationError
      If ``pattern`` is empty or ``n`` is smaller than one.
    TypeError
      If ``n`` is not an integer, or the pattern does not fit the source.
    """
    def __init__(self,
                 source: Any,
                 pattern: Iterable,
                 n: int,
                 *,
                 keep_pattern: bool = False,
                 ):
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f'n must be an integer, not {type(n).__name__}')
        if n < 1:
            raise ConfigurationError(f'n must be greater than 0, got {n}')
        self._source = make_source(source)
        self._source.check_pattern(pattern)
        self._pattern = tuple(pattern)
        if not self._pattern:
            raise ConfigurationError('pattern must not be empty')
        self._n = n
        self._keep_pattern = keep_pattern
        self._position = 0
        # state of the chunk that is being built
        self._start = 0
        self._buffer = []
        self._cursor = 0
        self._found = 0
        self._state = SplitterState.ACCUMULATING
        lgr.debug('Created %r', self)

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}({self._source!r}, '
            f'pattern={self._pattern!r}, n={self._n}, '
            f'keep_pattern={self._keep_pattern})'
        )

    @property
    def pattern(self) -> tuple:
        return self._pattern

    @property
    def n(self) -> int:
        return self._n

    @property
    def keep_pattern(self) -> bool:
        return self._keep_pattern

    @property
    def position(self) -> int:
        """Number of elements pulled from the source so far"""
        return self._position

    @property
    def state(self) -> SplitterState:
        return self._state

    def __iter__(self) -> PatternSplitter:
        return self

    def __next__(self) -> Any:
        if self._state is SplitterState.EXHAUSTED:
            raise StopIteration
        if self._state is SplitterState.CHUNK_READY:
            self._start = self._position
            self._buffer = []
            self._state = SplitterState.ACCUMULATING

        pattern = self._pattern
        # an exception raised by the source leaves the chunk state intact
        for element in self._source:
            self._buffer.append(element)
            self._position += 1
            if element == pattern[self._cursor]:
                self._cursor += 1
            else:
                self._cursor = 1 if element == pattern[0] else 0
            if self._cursor < len(pattern):
                continue
            self._cursor = 0
            self._found += 1
            if self._found == self._n:
                return self._finish_chunk()

        # the source is done, never pull from it again
        self._state = SplitterState.EXHAUSTED
        lgr.debug('Source exhausted after %d elements', self._position)
        if self._buffer:
            buffer, self._buffer = self._buffer, []
            return self._source.chunk(self._start, self._position, buffer)
        raise StopIteration

    def _finish_chunk(self) -> Any:
        stop = self._position
        if not self._keep_pattern:
            stop -= len(self._pattern)
            del self._buffer[-len(self._pattern):]
        self._found = 0
        self._state = SplitterState.CHUNK_READY
        lgr.debug('Chunk [%d:%d] complete', self._start, stop)
        return self._source.chunk(self._start, stop, self._buffer)


def split_every(source: Any,
                pattern: Iterable,
                n: int,
                *,
                keep_pattern: bool = False,
                sentinel: Any = None,
                ) -> PatternSplitter:
    """ Split ``source`` every ``n`` occurrences of ``pattern``

    Parameters
    ----------
    source: Any
      A ``str``, ``bytes`` or ``bytearray`` (chunks are sub-strings), any
      other sequence (chunks are slices), a zero-argument callable that
      returns ``sentinel`` when it is exhausted, or any other iterable (for
      the last two, chunks are lists).
    pattern: Iterable
      The non-empty sequence of elements to look for.
    n: int
      Number of pattern occurrences per chunk.
    keep_pattern: bool
      Keep the occurrence that closes a chunk at the end of the chunk.
    sentinel: Any
      Exhaustion marker of a callable ``source``.

    Returns
    -------
    PatternSplitter
    """
    return PatternSplitter(
        make_source(source, sentinel),
        pattern,
        n,
        keep_pattern=keep_pattern,
    )


def split_every_n_of_str(text: str | bytes,
                         pattern: str | bytes,
                         n: int,
                         ) -> PatternSplitter:
    """ Split ``text`` every ``n`` times the sub-string ``pattern`` is found

    This splits exclusively.
    """
    return PatternSplitter(TextSource(text), pattern, n)


def split_every_n_of_char(text: str | bytes,
                          char: str | bytes | int,
                          n: int,
                          ) -> PatternSplitter:
    """ Split ``text`` every ``n`` times the character ``char`` is found

    For bytes, ``char`` may be given as an integer byte value. This splits
    exclusively.
    """
    if isinstance(char, int) and not isinstance(char, bool) \
            and isinstance(text, (bytes, bytearray)):
        if not 0 <= char < 256:
            raise ConfigurationError(f'{char} is not a byte value')
        char = bytes([char])
    if not isinstance(char, (str, bytes, bytearray)) or len(char) != 1:
        raise ConfigurationError(f'{char!r} is not a single character')
    return PatternSplitter(TextSource(text), char, n)
