"""
Description:
Exception classes for table loading and lookup errors.

Every error carries an ErrorCode so callers can tell the failure kinds apart
without matching on messages.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    FILE_NOT_FOUND = 1
    FILE_EXTENSION_MISMATCH = 2
    ERROR_READING_FILE = 3
    FIELD_NOT_FOUND = 4
    ROW_NOT_FOUND = 5
    COLUMN_NOT_FOUND = 6
    CELL_NOT_FOUND = 7


class TableError(Exception):
    """Base class for all table errors – makes catching easy."""
    code: ErrorCode

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class FileNotFound(TableError):
    """Path does not resolve to an existing file."""
    code = ErrorCode.FILE_NOT_FOUND


class ExtensionMismatch(TableError):
    """File extension is not the one the parser handles."""
    code = ErrorCode.FILE_EXTENSION_MISMATCH

    def __init__(self, found: str, expected: str):
        super().__init__(f"File extension {found} doesn't match with {expected}")
        self.found = found
        self.expected = expected


class ReadError(TableError):
    """File exists but could not be opened or read."""
    code = ErrorCode.ERROR_READING_FILE


class FieldNotFound(TableError, LookupError):
    """No table has been loaded."""
    code = ErrorCode.FIELD_NOT_FOUND


class RowNotFound(TableError, LookupError):
    code = ErrorCode.ROW_NOT_FOUND


class ColumnNotFound(TableError, LookupError):
    code = ErrorCode.COLUMN_NOT_FOUND


class CellNotFound(TableError, LookupError):
    code = ErrorCode.CELL_NOT_FOUND
