import os
from typing import Literal, Optional

import yaml
import logging
from pydantic import BaseModel, Field, validator

logger = logging.getLogger(__name__)

CONFIG_PATH = os.getenv("CONFIG_PATH", "config/tablecsv-config.yaml")


class ParserSettings(BaseModel):
    """
    Configuration for the parser settings.
    This class defines which format is parsed and how the source file is split and decoded.
    """
    format: Literal["csv"] = Field("csv", description="Source file format")
    delimiter: Optional[str] = Field(
        None, description="Character to split lines on; auto-detected when unset"
    )
    encoding: str = Field("utf-8", min_length=1, description="Text encoding of the source file")

    @validator("delimiter")
    def check_single_character(cls, v):
        if v is not None and len(v) != 1:
            logger.error(f"Delimiter must be a single character, got {v!r}")
            raise ValueError("`delimiter` must be a single character")
        return v

    def __init__(self, **data):
        logger.debug(f"Initializing ParserSettings with data: {data}")
        super().__init__(**data)


class LoggingConfig(BaseModel):
    """
    Configuration for logging settings.
    This class defines the logging level for the application.
    """
    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field(
        "INFO", description="Logging level"
    )

    def __init__(self, **data):
        logger.debug(f"Initializing LoggingConfig with data: {data}")
        super().__init__(**data)


class MetricsConfig(BaseModel):
    """
    Configuration for the Prometheus metrics endpoint.
    """
    enabled: bool = Field(False, description="Start the metrics HTTP server")
    port: int = Field(8000, ge=1, le=65535, description="Port for the metrics HTTP server")

    def __init__(self, **data):
        logger.debug(f"Initializing MetricsConfig with data: {data}")
        super().__init__(**data)


class TableConfig(BaseModel):
    """
    Configuration for the table loader.
    This class encapsulates the parser, logging and metrics settings.
    """
    parser: ParserSettings = Field(default_factory=ParserSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "TableConfig":
        """
        Load and validate the configuration from YAML.
        Raises a clear exception if the file is missing or invalid.
        Args:
            path (Optional[str]): YAML file to read; defaults to CONFIG_PATH.
        Returns:
            TableConfig: The validated configuration object.
        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ValueError: If the configuration is invalid.
        """
        path = path or CONFIG_PATH
        logger.info(f"Loading configuration from {path}")
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
                logger.debug(f"Raw config data: {data}")
        except FileNotFoundError as e:
            logger.exception(f"Configuration file not found at {path}")
            raise FileNotFoundError(f"Configuration file not found at {path}") from e

        try:
            config = cls(**(data or {}))
            logger.info("Configuration loaded and validated successfully")
            logger.debug(f"Final config object: {config}")
            return config
        except Exception as e:
            logger.exception("Invalid configuration provided")
            raise ValueError(f"Invalid configuration: {e}") from e


def get_config(path: Optional[str] = None) -> TableConfig:
    """
    Retrieve the configuration, loading it from the specified YAML file.
    Returns:
        TableConfig: The validated configuration object.
    """
    logger.info("Retrieving table configuration")
    config = TableConfig.load(path)
    logger.debug(f"Parsed configuration object: {config}")
    return config
