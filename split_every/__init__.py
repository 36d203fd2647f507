""" Split sequences, texts, and element streams every n pattern occurrences

This package provides a lazy iterator that hands out chunks of a source, each
closed once a pattern was found ``n`` times in it.

.. currentmodule:: split_every

.. autosummary::
   :toctree: generated

    PatternSplitter
    SplitterState
    split_every
    split_every_n_of_str
    split_every_n_of_char
    split_every_processor
    make_source
    ChunkSource
    SequenceSource
    TextSource
    CallableSource
    IterableSource
    ConfigurationError
"""


from .exceptions import ConfigurationError
from .processors import split_every_processor
from .sources import (
    CallableSource,
    ChunkSource,
    IterableSource,
    SequenceSource,
    TextSource,
    make_source,
)
from .splitter import (
    PatternSplitter,
    SplitterState,
    split_every,
    split_every_n_of_char,
    split_every_n_of_str,
)
