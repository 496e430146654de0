"""Fixtures for integration tests against the real Spark API.

These tests require a valid bearer token.
Credentials are loaded from .env.test file automatically.

Run integration tests:
    uv run pytest tests/integration/ -v

Skip integration tests (run only unit tests):
    uv run pytest tests/ --ignore=tests/integration/

To override .env.test values, set environment variables:
    SPARK_TEST_TOKEN="your-token" uv run pytest tests/integration/ -v
"""

from pathlib import Path

import pytest
from pydantic_settings import BaseSettings, SettingsConfigDict

from csco_spark import ClientConfig, SparkClient


class IntegrationSettings(BaseSettings):
    """Settings for integration tests, loaded from .env.test."""

    spark_test_token: str = ""
    spark_test_base_uri: str = "https://api.ciscospark.com/v1"

    # Room with at least one message, for listing tests
    spark_test_room_id: str = ""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env.test",
        case_sensitive=False,
        extra="ignore",
    )


# Load settings from .env.test
integration_settings = IntegrationSettings()


def get_token() -> str | None:
    return integration_settings.spark_test_token or None


def get_room_id() -> str | None:
    return integration_settings.spark_test_room_id or None


# Skip marker for integration tests
requires_token = pytest.mark.skipif(
    not get_token(), reason="SPARK_TEST_TOKEN environment variable not set"
)

requires_room = pytest.mark.skipif(
    not get_token() or not get_room_id(),
    reason="SPARK_TEST_TOKEN and SPARK_TEST_ROOM_ID required for room tests",
)


@pytest.fixture
async def live_spark():
    """Create a real SparkClient for integration tests.

    Uses function scope to avoid event loop issues with async tests.
    """
    config = ClientConfig(
        base_uri=integration_settings.spark_test_base_uri,
        token=get_token() or "",
    )
    async with SparkClient(config) as spark:
        yield spark
