"""The DataFrame object itself."""
import logging
from typing import Any, Iterable, Iterator, Mapping, Self

import pyarrow as pa

from ..errors import DuplicateColumnName, LengthMismatch, UnknownColumn
from ..series import MISSING, Series, render_value
from ..utils import tabulate

logger = logging.getLogger(__name__)


class DataFrame:
    """Data structure that handles data in rows and columns.

    The DataFrame is an ordered collection of :class:`tinyframe.Series`,
    each one being a column identified by its name.
    Columns are kept in the order they were added.

    The DataFrame never computes anything by itself,
    it only stores and retrieves columns. New columns
    are usually computed from existing ones::

        df.set_column("total", df.get_column("price") * df.get_column("quantity"))

    All columns are expected to have the same length,
    but this is not enforced. Rows beyond the end
    of a shorter column are treated as missing.
    """

    def __init__(self, series: Iterable[Series] = ()) -> None:
        """
        :param series: The columns of the dataframe, each one
                       will be named as the name of the Series.
                       The dataframe takes ownership of the series.
        """
        columns = {}
        for s in series:
            if not isinstance(s, Series):
                raise TypeError(f"Expected a Series, got {type(s).__name__}")
            if s.name in columns:
                raise DuplicateColumnName(f"Column '{s.name}' provided more than once")
            columns[s.name] = s
        self._columns: dict[str, Series] = columns

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> Self:
        """Create a DataFrame out of a sequence of rows.

        Each record is a mapping of column names to values.
        Records don't have to provide all columns, the columns
        are discovered while going through the records and
        each record lacking a column gets :data:`tinyframe.MISSING`
        in that column.

        >>> df = DataFrame.from_records([{"a": 1}, {"a": 2, "b": 3}])
        >>> df.columns
        ['a', 'b']
        >>> df.get_column("b").to_pylist()
        [None, 3]
        """
        records = list(records)
        names: dict[str, None] = {}
        for record in records:
            if not isinstance(record, Mapping):
                raise TypeError(f"Expected a mapping, got {type(record).__name__}")
            names.update(dict.fromkeys(record))
        logger.debug("Discovered columns %s from %d records", list(names), len(records))

        return cls(
            Series(name, [record.get(name, MISSING) for record in records])
            for name in names
        )

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a DataFrame out of a pyarrow Table or RecordBatch."""
        return cls(
            Series.from_arrow(name, table.column(name)) for name in table.column_names
        )

    @property
    def columns(self) -> list[str]:
        """The names of the columns, in order."""
        return list(self._columns)

    @property
    def num_rows(self) -> int:
        """The number of rows, which is the length of the longest column."""
        return max((len(s) for s in self._columns.values()), default=0)

    def get_column(self, name: str) -> Series:
        """Get the Series stored for the column ``name``."""
        try:
            return self._columns[name]
        except KeyError:
            raise UnknownColumn(f"Column '{name}' does not exist") from None

    def set_column(self, name: str, series: Series) -> None:
        """Store a Series as the column ``name``.

        If the column already exists it gets replaced
        and keeps its position, otherwise it's added
        as the last column.

        The name of the column does not have to match
        the name of the Series.
        """
        if not isinstance(series, Series):
            raise TypeError(f"Expected a Series, got {type(series).__name__}")
        if self._columns and len(series) != self.num_rows:
            logger.warning(
                "Column '%s' has %d values while the dataframe has %d rows",
                name,
                len(series),
                self.num_rows,
            )
        self._columns[name] = series

    def drop_column(self, name: str) -> Series:
        """Remove the column ``name`` and return its Series."""
        try:
            return self._columns.pop(name)
        except KeyError:
            raise UnknownColumn(f"Column '{name}' does not exist") from None

    def rows(self) -> Iterator[tuple[Any, ...]]:
        """Iterate over the rows of the dataframe.

        Each row is a tuple with one value per column,
        columns that are too short provide :data:`tinyframe.MISSING`.
        """
        columns = list(self._columns.values())
        for idx in range(self.num_rows):
            yield tuple(s[idx] if idx < len(s) else MISSING for s in columns)

    def to_records(self) -> list[dict[str, Any]]:
        """Convert the dataframe to a list of records, one per row."""
        names = self.columns
        return [dict(zip(names, row)) for row in self.rows()]

    def to_arrow(self) -> pa.Table:
        """Convert the dataframe to a :class:`pyarrow.Table`.

        Arrow requires all columns to have the same length.
        """
        num_rows = self.num_rows
        for name, s in self._columns.items():
            if len(s) != num_rows:
                raise LengthMismatch(
                    f"Column '{name}' has {len(s)} values, expected {num_rows}"
                )
        return pa.table({name: s.to_arrow() for name, s in self._columns.items()})

    def tabulate(self, max_rows: int = 20) -> str:
        """Format the dataframe as an aligned text table.

        :param max_rows: How many rows to show at most.
        """
        return tabulate.tabulate(self, max_rows=max_rows)

    def __getitem__(self, name: str) -> Series:
        return self.get_column(name)

    def __setitem__(self, name: str, series: Series) -> None:
        self.set_column(name, series)

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return self.num_rows

    def __str__(self) -> str:
        lines = [", ".join(self._columns)]
        lines.extend(", ".join(map(render_value, row)) for row in self.rows())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DataFrame(columns={self.columns}, rows={self.num_rows})"
