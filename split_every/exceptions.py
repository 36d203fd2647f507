"""Exceptions raised by split_every"""

from __future__ import annotations


__all__ = ['ConfigurationError']


class ConfigurationError(ValueError):
    """Raised when a splitter is constructed with unusable parameters

    This covers an empty pattern, an occurrence threshold below one, and an
    invalid single character given to ``split_every_n_of_char()``.
    """
    pass
