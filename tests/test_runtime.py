import logging
from types import SimpleNamespace

import pytest

from tablecsv import runtime
from tablecsv.config import MetricsConfig, ParserSettings, TableConfig, LoggingConfig
from tablecsv.parsers import CSVParser, get_parser


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_get_parser_builds_csv_parser():
    parser = get_parser(ParserSettings(delimiter="|", encoding="latin-1"))

    assert isinstance(parser, CSVParser)
    assert parser.delimiter == "|"
    assert parser.encoding == "latin-1"
    assert not parser.is_field_exists()


def test_get_parser_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unsupported parser type: xlsx"):
        get_parser(SimpleNamespace(format="xlsx", delimiter=None, encoding="utf-8"))


def test_setup_logging(restore_root_logger):
    runtime.setup_logging("warn")

    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1


def test_bootstrap_without_metrics(restore_root_logger, monkeypatch):
    started = []
    monkeypatch.setattr(runtime, "start_metrics_server", started.append)

    cfg = TableConfig(parser=ParserSettings(delimiter=";"), logging=LoggingConfig(level="DEBUG"))
    parser = runtime.bootstrap(cfg)

    assert parser.delimiter == ";"
    assert restore_root_logger.level == logging.DEBUG
    assert started == []


def test_bootstrap_starts_metrics_server(restore_root_logger, monkeypatch, tmp_path):
    started = []
    monkeypatch.setattr(runtime, "start_metrics_server", started.append)
    path = tmp_path / "data.csv"
    path.write_text("a;b\n1;2\n")

    parser = runtime.bootstrap(TableConfig(metrics=MetricsConfig(enabled=True, port=9100)))
    parser.load_file(str(path))

    assert started == [9100]
    assert parser.get_cell(2, 1) == "1"
