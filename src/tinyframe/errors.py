"""Errors raised by Series and DataFrame operations.

Every error inherits from :class:`TinyFrameError`, so callers can catch
everything tinyframe raises at once, and from the closest builtin
exception, so that code written against plain Python containers
keeps working::

    >>> from tinyframe import Series
    >>> try:
    ...     Series("a", [1, 2]).get(5)
    ... except IndexError as e:
    ...     print(e)
    Index 5 out of range for series 'a' of length 2
"""


class TinyFrameError(Exception):
    """Base class for all tinyframe errors."""


class IndexOutOfRange(TinyFrameError, IndexError):
    """A position outside ``[0, len)`` was accessed."""


class LengthMismatch(TinyFrameError, ValueError):
    """Two series that must be row aligned have different lengths."""


class DuplicateColumnName(TinyFrameError, ValueError):
    """The same column name was provided more than once."""


class UnknownColumn(TinyFrameError, KeyError):
    """The requested column does not exist in the dataframe."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class DivisionByZero(TinyFrameError, ZeroDivisionError):
    """An integer series was divided by a series containing zero."""


class UnsupportedOperation(TinyFrameError, TypeError):
    """The operation is not defined for the values involved."""
