import pytest

from tablecsv import config
from tablecsv.config import ParserSettings, TableConfig, get_config


@pytest.fixture
def config_file(tmp_path):
    def _write(content):
        path = tmp_path / "tablecsv-config.yaml"
        path.write_text(content)
        return str(path)
    return _write


def test_load_full_config(config_file):
    path = config_file(
        "parser:\n"
        "  format: csv\n"
        "  delimiter: '|'\n"
        "  encoding: latin-1\n"
        "logging:\n"
        "  level: DEBUG\n"
        "metrics:\n"
        "  enabled: true\n"
        "  port: 9100\n"
    )
    cfg = TableConfig.load(path)

    assert cfg.parser.delimiter == "|"
    assert cfg.parser.encoding == "latin-1"
    assert cfg.logging.level == "DEBUG"
    assert cfg.metrics.enabled is True
    assert cfg.metrics.port == 9100


def test_empty_config_uses_defaults(config_file):
    cfg = TableConfig.load(config_file(""))

    assert cfg.parser.format == "csv"
    assert cfg.parser.delimiter is None
    assert cfg.parser.encoding == "utf-8"
    assert cfg.logging.level == "INFO"
    assert cfg.metrics.enabled is False


def test_get_config_reads_config_path(config_file, monkeypatch):
    monkeypatch.setattr(config, "CONFIG_PATH", config_file("parser:\n  delimiter: ';'\n"))
    assert get_config().parser.delimiter == ";"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        TableConfig.load(str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize("content", [
    "parser:\n  delimiter: ';;'\n",
    "parser:\n  format: xlsx\n",
    "logging:\n  level: LOUD\n",
    "metrics:\n  port: 0\n",
])
def test_invalid_config(config_file, content):
    with pytest.raises(ValueError, match="Invalid configuration"):
        TableConfig.load(config_file(content))


def test_delimiter_must_be_single_character():
    with pytest.raises(ValueError):
        ParserSettings(delimiter="ab")
    assert ParserSettings(delimiter="\t").delimiter == "\t"
