"""Configuration settings for the five-card poker tools."""

import logging
import os
import sys


class Config:
    """Base configuration class."""

    # Logging settings
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Output settings
    OUTPUT_FORMAT = os.environ.get("POKER_OUTPUT_FORMAT", "text").lower()  # "text" or "json"
    DETAILED_DESCRIPTIONS = os.environ.get("POKER_DETAILED", "true").lower() == "true"


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "DEBUG"
    OUTPUT_FORMAT = "text"
    DETAILED_DESCRIPTIONS = True


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": Config,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("POKER_ENV", "default")

    return config.get(config_name, config["default"])


def setup_logging(level: str | int | None = None, config_class: type[Config] = Config) -> None:
    """Set up root logging to stdout."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=level if level is not None else config_class.LOG_LEVEL,
        format=config_class.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )
