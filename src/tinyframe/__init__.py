"""tinyframe

A minimal columnar data structure built on top of Apache Arrow.

Data is organised in columns, each column being a :class:`Series`,
a named vector of values. Columns are grouped together in a
:class:`DataFrame`, which keeps them aligned by row.

Data usually comes in as rows, which are pivoted into columns
by :meth:`DataFrame.from_records`. New columns are then computed
combining existing ones and stored back in the dataframe:

>>> from tinyframe import DataFrame
>>> df = DataFrame.from_records([
...     {"col0": "a", "col1": 5, "col2": 8.1},
...     {"col0": "b", "col1": 6, "col2": 3.2},
... ])
>>> df.set_column("col3", df.get_column("col1").add(df.get_column("col2")))
>>> print(df)
col0, col1, col2, col3
a, 5, 8.1, 13.1
b, 6, 3.2, 9.2

Rows where a record didn't provide a column hold the
:data:`MISSING` placeholder, which is shown as ``null``.

For the documentation of each component, refer to the
component itself.
"""

from . import errors
from .dataframe import DataFrame
from .series import MISSING, Series

__all__ = ("DataFrame", "Series", "MISSING", "errors")
