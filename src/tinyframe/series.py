"""Named vectors of values.

A :class:`Series` is the building block of a :class:`tinyframe.DataFrame`:
each column of a dataframe is a Series. A Series has a ``name``
and behaves like a Python list for indexing, appending and iterating.

Series holding numbers can be combined elementwise,
the arithmetic itself is delegated to the Apache Arrow
compute kernels::

    >>> from tinyframe import Series
    >>> a = Series("a", [1, 2, 3])
    >>> b = Series("b", [10, 20, 30])
    >>> print(a.add(b))
    (a+b): 11, 22, 33
    >>> print(a * b)
    (a*b): 10, 40, 90

Combining two series never changes them, a new Series
is always returned.
"""

import numbers
import operator
from typing import Any, Callable, Iterable, Iterator, Self

import pyarrow as pa
import pyarrow.compute as pc

from .errors import (
    DivisionByZero,
    IndexOutOfRange,
    LengthMismatch,
    UnsupportedOperation,
)

MISSING = None
"""Placeholder stored where a value is not available."""


def render_value(value: Any) -> str:
    """Text representation of a single value, ``null`` when missing."""
    if value is MISSING:
        return "null"
    return str(value)


def is_number(value: Any) -> bool:
    """Tell whether a value can take part in arithmetic.

    Missing values are accepted, as they propagate
    to the result. Booleans are not considered numbers.
    """
    if value is MISSING:
        return True
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Series:
    """A named, mutable sequence of values.

    Positions are always contiguous from ``0`` to ``len(series) - 1``,
    accessing anything outside of that range raises
    :class:`tinyframe.errors.IndexOutOfRange`. Assigning past the
    end does not grow the series, use :meth:`append` for that.

    >>> s = Series("prices", [1.5, 2.0])
    >>> s.append(3.25)
    >>> s[2]
    3.25
    >>> len(s)
    3
    """

    def __init__(self, name: str, values: Iterable[Any] = ()) -> None:
        """
        :param name: The name of the series.
        :param values: The values, they are copied into the series.
        """
        self._name = name
        self._values = list(values)

    @classmethod
    def from_arrow(cls, name: str, array: pa.Array | pa.ChunkedArray) -> Self:
        """Build a Series out of the content of a pyarrow array.

        Arrow nulls become :data:`MISSING`.
        """
        return cls(name, array.to_pylist())

    @property
    def name(self) -> str:
        """The name of the series."""
        return self._name

    def rename(self, name: str) -> Self:
        """Return a copy of the series with a different name."""
        return self.__class__(name, self._values)

    def copy(self) -> Self:
        """Return a copy of the series that does not share its values."""
        return self.__class__(self._name, self._values)

    def get(self, index: int) -> Any:
        """Get the value at ``index``."""
        return self._values[self._check_index(index)]

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``.

        The index must already exist, the series is never extended.
        """
        self._values[self._check_index(index)] = value

    def append(self, value: Any) -> None:
        """Add a value at the end of the series."""
        self._values.append(value)

    def extend(self, values: Iterable[Any]) -> None:
        """Add all the provided values at the end of the series."""
        self._values.extend(values)

    def to_pylist(self) -> list[Any]:
        """Return the values as a new Python list."""
        return list(self._values)

    def to_arrow(self) -> pa.Array:
        """Convert the values to a :class:`pyarrow.Array`.

        Values that Arrow can't store in a single array,
        like strings mixed with numbers, are refused.
        """
        try:
            return pa.array(self._values)
        except (pa.ArrowException, OverflowError) as e:
            raise UnsupportedOperation(
                f"Series '{self._name}' can't be converted to Arrow: {e}"
            ) from e

    def is_numeric(self) -> bool:
        """Whether all values in the series are numbers or missing."""
        return all(is_number(v) for v in self._values)

    def add(self, other: "Series") -> "Series":
        """Sum two series element by element."""
        return self._binary_op(other, "+", pc.add_checked)

    def subtract(self, other: "Series") -> "Series":
        """Subtract ``other`` from this series element by element."""
        return self._binary_op(other, "-", pc.subtract_checked)

    def multiply(self, other: "Series") -> "Series":
        """Multiply two series element by element."""
        return self._binary_op(other, "*", pc.multiply_checked)

    def divide(self, other: "Series") -> "Series":
        """Divide this series by ``other`` element by element.

        The result is always made of floats. Dividing an integer
        series by an integer zero raises
        :class:`tinyframe.errors.DivisionByZero`, while when floats
        are involved the usual ``inf`` and ``nan`` results apply.

        >>> print(Series("a", [1, 3]).divide(Series("b", [2, 2])))
        (a/b): 0.5, 1.5
        """
        return self._binary_op(other, "/", _true_divide)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def _binary_op(
        self,
        other: "Series",
        symbol: str,
        kernel: Callable[[pa.Array, pa.Array], pa.Array],
    ) -> "Series":
        if not isinstance(other, Series):
            raise UnsupportedOperation(
                f"Can't apply {symbol} between a Series and {type(other).__name__}"
            )
        if len(self._values) != len(other._values):
            raise LengthMismatch(
                f"Can't apply {symbol} to series of different lengths: "
                f"'{self._name}' has {len(self._values)} values, "
                f"'{other._name}' has {len(other._values)}"
            )

        name = f"{self._name}{symbol}{other._name}"
        left = self._numeric_array()
        right = other._numeric_array()
        try:
            result = kernel(left, right)
        except pa.ArrowException as e:
            raise UnsupportedOperation(f"Unable to compute {name}: {e}") from e
        return self.__class__(name, result.to_pylist())

    def _numeric_array(self) -> pa.Array:
        """The values as an Arrow array suitable for compute kernels."""
        if not self.is_numeric():
            raise UnsupportedOperation(
                f"Series '{self._name}' contains non numeric values"
            )
        try:
            array = pa.array(self._values)
        except (pa.ArrowException, OverflowError) as e:
            raise UnsupportedOperation(
                f"Series '{self._name}' can't be used in arithmetic: {e}"
            ) from e
        if pa.types.is_null(array.type):
            # Empty or fully missing, there are no kernels for the null type.
            array = array.cast(pa.int64())
        return array

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._values):
            raise IndexOutOfRange(
                f"Index {index} out of range for series '{self._name}' "
                f"of length {len(self._values)}"
            )
        return index

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __contains__(self, value: Any) -> bool:
        return value in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self._name == other._name and self._values == other._values

    __hash__ = None

    def __str__(self) -> str:
        return f"({self._name}): {', '.join(map(render_value, self._values))}"

    def __repr__(self) -> str:
        return f"Series({self._name!r}, {self._values!r})"


def _true_divide(left: pa.Array, right: pa.Array) -> pa.Array:
    """Divide two arrays always producing floating point results."""
    if pa.types.is_integer(left.type) and pa.types.is_integer(right.type):
        if pc.any(pc.equal(right, 0)).as_py():
            raise DivisionByZero("Integer division by zero")
    return pc.divide(left.cast(pa.float64()), right.cast(pa.float64()))
