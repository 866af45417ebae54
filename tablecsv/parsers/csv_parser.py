"""
Description:
CSV table parser.

Loads a delimited text file into memory. Without an explicit delimiter the
file is first read as ';'-separated; the first row whose width differs from
the first row's abandons that pass and the file is re-read as ','-separated
with no width check.
"""

import codecs
import csv
import logging
import os
import sys
from typing import IO, List, Optional, Tuple

from tablecsv.exceptions import (
    ExtensionMismatch,
    FileNotFound,
    ReadError,
    TableError,
)
from tablecsv.metrics import (
    DELIMITER_FALLBACKS,
    FILES_LOADED,
    LOAD_DURATION,
    LOAD_ERRORS,
    ROWS_PARSED,
)
from .base import Row, Table, TableParser

logger = logging.getLogger(__name__)

SEMICOLON = ";"
COMMA = ","


def _raise_field_size_limit() -> None:
    """Lift csv's per-field length cap; sys.maxsize overflows a 32-bit C long."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 2


_raise_field_size_limit()


def _extension_of(file_path: str) -> str:
    """Upper-cased text after the last dot of the file name, '' if there is none."""
    name = os.path.basename(file_path)
    _, dot, extension = name.rpartition(".")
    return extension.upper() if dot else ""


def _read_rows(handle: IO[str], delimiter: str) -> Table:
    """
    Read every record from *handle*, whatever its width.
    A blank line becomes a row holding one empty cell.
    """
    return [row or [""] for row in csv.reader(handle, delimiter=delimiter)]


def _read_uniform_rows(handle: IO[str], delimiter: str) -> Optional[Table]:
    """
    Read records from *handle* as long as they all have the first row's width.

    Returns:
        Optional[Table]: The rows, or None as soon as a row of another width
        is met (the rest of the file is not read).
    """
    rows: List[Row] = []
    width = None
    for row in csv.reader(handle, delimiter=delimiter):
        row = row or [""]
        if width is None:
            width = len(row)
        elif len(row) != width:
            logger.debug(
                f"Row {len(rows) + 1} has {len(row)} fields, expected {width} "
                f"with delimiter {delimiter!r}"
            )
            return None
        rows.append(row)
    return rows


class CSVParser(TableParser):
    """
    Parser for delimited text files with a .csv extension.
    """

    file_extension = "CSV"

    def __init__(
            self,
            file_path: Optional[str] = None,
            delimiter: Optional[str] = None,
            encoding: str = "utf-8",
    ):
        """
        Initialize the parser and load *file_path* straight away when given.

        Args:
            file_path (Optional[str]): CSV file to load; load errors propagate.
            delimiter (Optional[str]): Explicit delimiter; auto-detected when None.
            encoding (str): Text encoding of the files to load.
        """
        super().__init__()
        self._delimiter = delimiter
        self.encoding = encoding
        self.detected_delimiter: Optional[str] = None
        if file_path is not None:
            self.load_file(file_path)

    @property
    def delimiter(self) -> Optional[str]:
        return self._delimiter

    def set_delimiter(self, delimiter: Optional[str]) -> None:
        """
        Use *delimiter* for every following load instead of auto-detection.
        None switches auto-detection back on.
        """
        self._delimiter = delimiter

    def load_file(self, file_path: str) -> None:
        """
        Load the CSV file at *file_path*, replacing the current table.
        The current table is left as it was when the load fails.

        Args:
            file_path (str): Path to the CSV file.
        Raises:
            ExtensionMismatch: If the file extension is not CSV.
            FileNotFound: If the path is not an existing file.
            ReadError: If the file cannot be opened, decoded or parsed.
        """
        file_path = os.fspath(file_path)
        with LOAD_DURATION.time():
            try:
                table, delimiter = self._load(file_path)
            except TableError as e:
                LOAD_ERRORS.labels(kind=type(e).__name__).inc()
                raise

        self._table = table
        self.detected_delimiter = delimiter
        FILES_LOADED.labels(delimiter=delimiter).inc()
        ROWS_PARSED.inc(len(table))
        logger.info(f"Loaded {len(table)} rows from {file_path} using delimiter {delimiter!r}")

    def _load(self, file_path: str) -> Tuple[Table, str]:
        extension = _extension_of(file_path)
        if extension != self.file_extension:
            logger.error(f"Refusing {file_path}: extension {extension!r} is not {self.file_extension}")
            raise ExtensionMismatch(extension, self.file_extension)

        if not os.path.isfile(file_path):
            logger.error(f"File {file_path} doesn't exist")
            raise FileNotFound(f"File {file_path} doesn't exist")

        if self._delimiter is not None and not (
                isinstance(self._delimiter, str) and len(self._delimiter) == 1
        ):
            logger.error(f"Cannot read {file_path}: delimiter {self._delimiter!r} is not a single character")
            raise ReadError(f"Delimiter {self._delimiter!r} is not a single character")

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            logger.error(f"Cannot read {file_path}: unknown encoding {self.encoding!r}")
            raise ReadError(f"Unknown encoding {self.encoding!r}") from e

        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as handle:
                return self._parse(handle)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.exception(f"Error reading the file in {file_path}")
            raise ReadError(f"Error reading the file in {file_path}") from e

    def _parse(self, handle: IO[str]) -> Tuple[Table, str]:
        if self._delimiter is not None:
            logger.debug(f"Splitting on configured delimiter {self._delimiter!r}")
            return _read_rows(handle, self._delimiter), self._delimiter

        rows = _read_uniform_rows(handle, SEMICOLON)
        if rows:
            return rows, SEMICOLON

        if rows is None:
            logger.warning("Rows differ in width with ';', falling back to ','")
            DELIMITER_FALLBACKS.inc()
        handle.seek(0)
        return _read_rows(handle, COMMA), COMMA
