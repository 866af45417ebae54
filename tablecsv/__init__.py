from tablecsv.exceptions import (
    CellNotFound,
    ColumnNotFound,
    ErrorCode,
    ExtensionMismatch,
    FieldNotFound,
    FileNotFound,
    ReadError,
    RowNotFound,
    TableError,
)
from tablecsv.parsers import CSVParser, TableParser, get_parser

__all__ = [
    "CSVParser",
    "TableParser",
    "get_parser",
    "ErrorCode",
    "TableError",
    "FileNotFound",
    "ExtensionMismatch",
    "ReadError",
    "FieldNotFound",
    "RowNotFound",
    "ColumnNotFound",
    "CellNotFound",
]
