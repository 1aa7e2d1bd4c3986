"""Format a dataframe into a text table for print.

the `tabulate` function takes a :class:`tinyframe.DataFrame` and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.

Example:

    >>> from tinyframe import DataFrame
    >>> df = DataFrame.from_records([
    ...     {"Product": "Videogame", "Quantity": 8, "Price": 66.5},
    ...     {"Product": "Laptop", "Quantity": 8, "Price": 38.72},
    ...     {"Product": "Laptop", "Price": 77.46},
    ... ])
    >>> print(tabulate(df))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | null     | 77.46
"""

from itertools import islice
from typing import TYPE_CHECKING, Any

from ..series import MISSING

if TYPE_CHECKING:
    from ..dataframe import DataFrame


def tabulate(frame: "DataFrame", max_rows: int = 20) -> str:
    """Format a DataFrame into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22
    """
    cols = frame.columns
    rows = [[format_value(v) for v in row] for row in islice(frame.rows(), max_rows)]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if frame.num_rows > max_rows:
        table += f"\n... and {frame.num_rows - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    Floats are shown with 2 decimal places, missing
    values as ``null`` and long strings get truncated.
    """
    if v is MISSING:
        return "null"
    elif isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
