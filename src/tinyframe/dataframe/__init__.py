"""Dataframe built on top of tinyframe Series.

A dataframe is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).

Data is stored by column, every column being a :class:`tinyframe.Series`.
This makes operations across whole columns, like summing two of them,
straightforward, while data arriving one row at a time has to be
pivoted into columns first, see :meth:`DataFrame.from_records`.
"""

from .dataframe import DataFrame

__all__ = ("DataFrame",)
