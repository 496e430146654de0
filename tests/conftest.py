"""
Pytest fixtures for csco_spark tests.

Provides a fake Spark API served through httpx.MockTransport, so tests
run without network access.

Key fixture pattern:
- fake_api: FakeSparkApi, register responses with add() / add_page()
- spark: SparkClient wired to fake_api
- Tests verify traffic through fake_api.requests
"""

import os

import httpx
import pytest

from csco_spark.client import RequestExecutor, SparkClient
from csco_spark.config import ClientConfig
from tests.fixtures import BASE_URI, TOKEN, FakeSparkApi


def pytest_ignore_collect(collection_path):
    """Skip integration tests in CI environment.

    GitHub Actions sets CI=true automatically.
    Integration tests need a real bearer token.
    """
    if os.environ.get("CI") == "true":
        if "integration" in str(collection_path):
            return True
    return False


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_uri=BASE_URI, token=TOKEN)


@pytest.fixture
def fake_api() -> FakeSparkApi:
    return FakeSparkApi()


@pytest.fixture
async def http_client(fake_api: FakeSparkApi):
    """httpx client whose requests are answered by fake_api."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api))
    yield client
    await client.aclose()


@pytest.fixture
def executor(config: ClientConfig, http_client: httpx.AsyncClient) -> RequestExecutor:
    return RequestExecutor(config, http_client=http_client)


@pytest.fixture
def spark(config: ClientConfig, http_client: httpx.AsyncClient) -> SparkClient:
    return SparkClient(config, http_client=http_client)
