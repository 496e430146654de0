"""
Client configuration utilities.

Usage:
    from csco_spark.config import load_client_config

    config = load_client_config("my_bot")
"""

from csco_spark.config.loader import (
    DEFAULT_BASE_URI,
    ClientConfig,
    get_config_path,
    load_client_config,
)
from csco_spark.config.settings import SparkSettings

__all__ = [
    "DEFAULT_BASE_URI",
    "ClientConfig",
    "SparkSettings",
    "get_config_path",
    "load_client_config",
]
