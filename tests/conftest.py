"""
Pytest configuration and shared fixtures.
"""

import httpx
import pytest

from upstash_kafka import Client, Target
from upstash_kafka import registry

from .fixtures import API_KEY, API_URL, EMAIL, REST_URL, StubServer


@pytest.fixture(autouse=True)
def reset_registry():
    """Every test starts and ends with empty process-wide slots."""
    registry.reset()
    yield
    registry.reset()


@pytest.fixture
def stub():
    return StubServer()


@pytest.fixture
async def client(stub):
    """Provisioning client wired to the stub server."""
    http_client = httpx.AsyncClient(transport=stub.transport)
    client = Client(API_URL, EMAIL, API_KEY, http_client=http_client)
    yield client
    await client.aclose()


@pytest.fixture
async def rest_client(stub):
    """REST proxy client wired to the stub server."""
    http_client = httpx.AsyncClient(transport=stub.transport)
    client = Client(REST_URL, "rest-user", "rest-pass", target=Target.REST, http_client=http_client)
    yield client
    await client.aclose()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No credentials in the environment and no .env file in reach."""
    for name in (
        "UPSTASH_EMAIL", "UPSTASH_API_KEY", "UPSTASH_API_URL",
        "KAFKA_USERNAME", "KAFKA_PASSWORD", "KAFKA_REST_SERVER",
        "UPSTASH_KAFKA_REQUEST_TIMEOUT", "UPSTASH_KAFKA_LOG_LEVEL",
        "UPSTASH_KAFKA_STRUCTURED_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def upstash_env(clean_env):
    clean_env.setenv("UPSTASH_EMAIL", EMAIL)
    clean_env.setenv("UPSTASH_API_KEY", API_KEY)
    return clean_env


@pytest.fixture
def kafka_rest_env(clean_env):
    clean_env.setenv("KAFKA_USERNAME", "rest-user")
    clean_env.setenv("KAFKA_PASSWORD", "rest-pass")
    clean_env.setenv("KAFKA_REST_SERVER", "example-kafka.upstash.io")
    return clean_env
