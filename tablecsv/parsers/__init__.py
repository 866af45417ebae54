from tablecsv.config import ParserSettings
from .base import TableParser
from .csv_parser import CSVParser


def get_parser(cfg: ParserSettings) -> TableParser:
    """
    Factory to return the correct parser instance based on cfg.format.
    """
    parse_type = cfg.format.lower()
    if parse_type == "csv":
        return CSVParser(delimiter=cfg.delimiter, encoding=cfg.encoding)
    else:
        raise ValueError(f"Unsupported parser type: {cfg.format}")
