""" Generator that splits a stream of data chunks every n pattern occurrences """

from __future__ import annotations

from itertools import chain
from typing import (
    Generator,
    Iterable,
)

from .sources import IterableSource
from .splitter import PatternSplitter


__all__ = ['split_every_processor']


def split_every_processor(iterable: Iterable[bytes | str],
                          pattern: str | bytes,
                          n: int,
                          keep_pattern: bool = False,
                          ) -> Generator[bytes | str, None, None]:
    """ Re-chunk data so that every chunk ends after `n` pattern occurrences

    This generator wraps another generator, e.g. the output of a subprocess,
    and treats the concatenation of its data chunks as one text. The text is
    split like ``PatternSplitter`` splits a ``str`` or ``bytes`` object, but
    without holding more than the current output chunk in memory. A pattern
    that is spread across two or more input chunks is found as well.

    The generator works on strings or bytes, depending on the type of the first
    element in `iterable`. During its runtime, the type of the elements in
    `iterable` must not change. The type of `pattern` must match the type of
    the elements in `iterable`.

    Parameters
    ----------
    iterable: Iterable[bytes | str]
        The iterable that yields the input data
    pattern: str | bytes
        The non-empty pattern to look for
    n: int
        The number of pattern occurrences after which a chunk is closed
    keep_pattern: bool
        If `True`, the pattern occurrence that closes a chunk is contained at
        the end of the chunk. If `False`, it is not contained in any chunk.

    Yields
    ------
    bytes | str
        The re-assembled chunks. The type of the yielded chunks depends on the
        type of the first element in `iterable`.

    Raises
    ------
    TypeError
        If the type of `pattern` does not match the type of the data chunks
    """
    iterator = iter(iterable)
    for first in iterator:
        break
    else:
        return

    if isinstance(first, str):
        if not isinstance(pattern, str):
            raise TypeError(
                f'cannot split str data on a {type(pattern).__name__} pattern')
        assemble = ''.join
    else:
        if not isinstance(pattern, (bytes, bytearray)):
            raise TypeError(
                f'cannot split bytes data on a {type(pattern).__name__} '
                f'pattern')
        # iterating bytes yields integers, `bytes()` turns them back
        assemble = bytes

    elements = chain.from_iterable(chain((first,), iterator))
    splitter = PatternSplitter(
        IterableSource(elements),
        pattern,
        n,
        keep_pattern=keep_pattern,
    )
    for chunk in splitter:
        yield assemble(chunk)
