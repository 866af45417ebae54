"""
Description:
Runtime wiring for applications embedding the table loader.

Handles configuration loading, logging setup, metrics server startup, and parser construction.
"""

import logging
import sys
from typing import Optional

from tablecsv.config import TableConfig, get_config
from tablecsv.metrics import start_metrics_server
from tablecsv.parsers import TableParser, get_parser

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    root = logging.getLogger()
    # Remove default handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    # Console handler
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)-5s %(name)s: %(message)s"))
    root.addHandler(ch)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def bootstrap(cfg: Optional[TableConfig] = None) -> TableParser:
    """
    Set up logging and metrics from *cfg* and return the configured parser.

    Args:
        cfg (Optional[TableConfig]): Configuration to use; loaded from CONFIG_PATH when None.
    Returns:
        TableParser: A parser ready for load_file.
    """
    if cfg is None:
        cfg = get_config()

    setup_logging(cfg.logging.level)

    if cfg.metrics.enabled:
        logger.info(f"Starting metrics server on port {cfg.metrics.port}")
        start_metrics_server(cfg.metrics.port)

    return get_parser(cfg.parser)
