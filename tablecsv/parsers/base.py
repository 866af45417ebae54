"""
Description:
Abstract table parser.

Holds the loaded table and answers existence and accessor queries against it.
Getters hand out copies; the loaded table only changes on the next load.
Concrete parsers only have to implement load_file.
All public row and column numbers are 1-based.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from tablecsv.exceptions import (
    CellNotFound,
    ColumnNotFound,
    FieldNotFound,
    RowNotFound,
)

logger = logging.getLogger(__name__)

Row = List[str]
Table = List[Row]


class TableParser(ABC):
    """
    Abstract base class for table parsers.
    Defines the loading interface and implements the format-independent accessors.

    The ``val_only`` flag on the getters is kept for parity with richer
    spreadsheet formats and has no effect here.
    """

    file_extension: str = ""

    def __init__(self):
        self._table: Optional[Table] = None

    @abstractmethod
    def load_file(self, file_path: str) -> None:
        """
        Load *file_path*, replacing any previously loaded table.

        Args:
            file_path (str): Path to the source file.
        """
        raise NotImplementedError

    def get_field(self, val_only: bool = True) -> Table:
        if not self.is_field_exists():
            raise FieldNotFound("Field is not set")
        return [list(row) for row in self._table]

    def get_row(self, row_num: int, val_only: bool = True) -> Row:
        if not self.is_row_exists(row_num):
            raise RowNotFound(f"Row {row_num} doesn't exist")
        return list(self._table[row_num - 1])

    def get_column(self, col_num: int, val_only: bool = True) -> List[str]:
        """
        Return the *col_num* cell of every row, in row order.

        Raises:
            ColumnNotFound: If no row has the column, or if some row of a
                ragged table is too short to have it.
        """
        if not self.is_column_exists(col_num):
            raise ColumnNotFound(f"Column {col_num} doesn't exist")

        column = []
        for row_num, row in enumerate(self._table, start=1):
            if col_num > len(row):
                raise ColumnNotFound(f"Column {col_num} doesn't exist in row {row_num}")
            column.append(row[col_num - 1])
        return column

    def get_cell(self, row_num: int, col_num: int, val_only: bool = True) -> str:
        if not self.is_cell_exists(row_num, col_num):
            raise CellNotFound(f"Cell {row_num},{col_num} doesn't exist")
        return self._table[row_num - 1][col_num - 1]

    def is_field_exists(self) -> bool:
        return self._table is not None

    def is_row_exists(self, row_num: int) -> bool:
        if self._table is None:
            return False
        return 1 <= row_num <= len(self._table)

    def is_column_exists(self, col_num: int) -> bool:
        """True if at least one row is long enough to have *col_num*."""
        if self._table is None or col_num < 1:
            return False
        return any(col_num <= len(row) for row in self._table)

    def is_cell_exists(self, row_num: int, col_num: int) -> bool:
        # checked against the row itself, not just any row
        if not (self.is_row_exists(row_num) and self.is_column_exists(col_num)):
            return False
        return col_num <= len(self._table[row_num - 1])

    @property
    def row_count(self) -> int:
        return len(self._table) if self._table is not None else 0

    @property
    def column_count(self) -> int:
        """Length of the longest row."""
        if not self._table:
            return 0
        return max(len(row) for row in self._table)

    def is_rectangular(self) -> bool:
        if not self._table:
            return True
        width = len(self._table[0])
        return all(len(row) == width for row in self._table)
