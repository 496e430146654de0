"""
Client configuration management utilities.

This module defines the immutable ClientConfig passed to SparkClient and
provides a loader that reads it from a YAML file at the project root.
Bearer tokens are created on the Spark developer portal before use.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_BASE_URI = "https://api.ciscospark.com/v1"


@dataclass(frozen=True)
class ClientConfig:
    """Default base URI and bearer token for a SparkClient.

    Every request uses these unless it passes its own uri or token.
    """

    base_uri: str = DEFAULT_BASE_URI
    token: str = ""
    verify_ssl: bool = True
    timeout: float = 30.0


def get_config_path() -> Path:
    """
    Get the path to the client configuration file.

    Looks for spark_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "spark_config.yaml"


def load_client_config(profile: str) -> ClientConfig:
    """
    Load a client profile from YAML file at project root.

    Example file:

        bot:
          token: "ZDk2..."
          base_uri: https://api.ciscospark.com/v1

    Args:
        profile: The key identifying the profile in the config file

    Returns:
        ClientConfig built from the profile

    Raises:
        FileNotFoundError: If spark_config.yaml doesn't exist
        ValueError: If the profile or its token is missing or empty, or the
            timeout is not a number
    """
    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"spark_config.yaml not found at {config_path}. "
            "Copy spark_config.yaml.example to spark_config.yaml and add your token."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        profile_config = config.get(profile, {})

        if not profile_config:
            raise ValueError(
                f"Profile '{profile}' not found in {config_path}. "
                f"Please add the profile configuration."
            )

        token = profile_config.get("token")
        if not token:
            raise ValueError(
                f"Missing required fields for profile '{profile}': token. "
                f"Please add a bearer token to {config_path}"
            )

        try:
            timeout = float(profile_config.get("timeout", 30.0))
        except (TypeError, ValueError):
            raise ValueError(
                f"Invalid timeout for profile '{profile}': "
                f"{profile_config.get('timeout')!r} is not a number of seconds"
            )

        return ClientConfig(
            base_uri=profile_config.get("base_uri") or DEFAULT_BASE_URI,
            token=token,
            verify_ssl=bool(profile_config.get("verify_ssl", True)),
            timeout=timeout,
        )
    except ValueError:
        raise
    except Exception as e:
        raise RuntimeError(f"Error loading client config: {e}") from e
