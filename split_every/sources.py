""" Pull-based element sources for the pattern splitter

A source produces the elements a splitter consumes, one at a time, and knows
which shape a finished chunk has. Sources that are backed by indexable
storage return slices of that storage, all others return newly built lists.
"""

from __future__ import annotations

from collections.abc import (
    Callable,
    Iterable,
    Iterator,
    Sequence,
)
from typing import Any


__all__ = [
    'ChunkSource',
    'SequenceSource',
    'TextSource',
    'CallableSource',
    'IterableSource',
    'make_source',
]


class ChunkSource:
    """Interface to be implemented by any element source of a splitter"""
    def __iter__(self) -> Iterator:
        return self

    def __next__(self) -> Any:
        """Return the next element

        Raises
        ------
        StopIteration
          If the source has no more elements.
        """
        raise NotImplementedError

    def chunk(self, start: int, stop: int, elements: list) -> Any:
        """Build the chunk that covers the elements ``start`` to ``stop``

        Parameters
        ----------
        start: int
          Position (number of elements pulled before) of the first element of
          the chunk.
        stop: int
          Position after the last element of the chunk.
        elements: list
          The buffered elements of the chunk, ``stop - start`` of them.
        """
        raise NotImplementedError

    def check_pattern(self, pattern: Any) -> None:
        """Verify that ``pattern`` can be matched against this source

        Raises
        ------
        TypeError
          If elements of this source cannot be compared to the pattern.
        """
        pass


class SequenceSource(ChunkSource):
    """Source reading from an indexable sequence, e.g. a list or a tuple

    Chunks are slices of the sequence, i.e. they have the sequence's type.
    """
    def __init__(self, data: Sequence):
        self._data = data
        self._index = 0

    def __next__(self) -> Any:
        if self._index >= len(self._data):
            raise StopIteration
        element = self._data[self._index]
        self._index += 1
        return element

    def chunk(self, start: int, stop: int, elements: list) -> Sequence:
        return self._data[start:stop]

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._data!r})'


class TextSource(SequenceSource):
    """Source reading the characters of a ``str``, or the bytes of ``bytes``

    Elements are one-character strings for ``str`` and integers for
    bytes-like data, as Python iterates them. Chunks are sub-strings, or
    sub-bytes respectively.
    """
    def __init__(self, data: str | bytes | bytearray):
        if not isinstance(data, (str, bytes, bytearray)):
            raise TypeError(
                f'text source requires str or bytes, not {type(data).__name__}')
        super().__init__(data)

    def check_pattern(self, pattern: Any) -> None:
        if isinstance(self._data, str):
            expected = str
        else:
            expected = (bytes, bytearray)
        if not isinstance(pattern, expected):
            raise TypeError(
                f'cannot split {type(self._data).__name__} on a pattern of '
                f'type {type(pattern).__name__}')


class CallableSource(ChunkSource):
    """Source calling a function for every element

    The function is called without arguments. It signals exhaustion by
    returning ``sentinel``, after which it is never called again. Because
    there is no backing storage, chunks are lists.
    """
    def __init__(self, func: Callable[[], Any], sentinel: Any = None):
        self._iterator = iter(func, sentinel)

    def __next__(self) -> Any:
        return next(self._iterator)

    def chunk(self, start: int, stop: int, elements: list) -> list:
        return list(elements)


class IterableSource(CallableSource):
    """Source pulling elements from any iterable, e.g. a generator

    Chunks are lists.
    """
    def __init__(self, iterable: Iterable):
        self._iterator = iter(iterable)


def make_source(source: Any, sentinel: Any = None) -> ChunkSource:
    """Wrap ``source`` into the matching ``ChunkSource`` implementation

    Parameters
    ----------
    source: Any
      A ``ChunkSource`` (returned as is), a ``str``/``bytes``/``bytearray``,
      any other sequence, a zero-argument callable, or any other iterable.
    sentinel: Any
      The value a callable source returns to signal exhaustion.

    Returns
    -------
    ChunkSource

    Raises
    ------
    TypeError
      If ``source`` is none of the supported shapes.
    """
    if isinstance(source, ChunkSource):
        return source
    if isinstance(source, (str, bytes, bytearray)):
        return TextSource(source)
    if isinstance(source, Sequence):
        return SequenceSource(source)
    if callable(source):
        return CallableSource(source, sentinel)
    if isinstance(source, Iterable):
        return IterableSource(source)
    raise TypeError(f'cannot split {type(source).__name__} objects')
