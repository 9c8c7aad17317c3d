import httpx
import pytest
import pytest_asyncio

from serper_mcp.api.serper import SerperClient
from serper_mcp.config import load_settings
from tests.app.test_helpers import TEST_API_KEY, TEST_BASE_URL

SERPER_ENV_VARS = (
    "SERPER_API_KEY",
    "SERPER_API_URL",
    "SERPER_MCP_TRANSPORT",
    "SERPER_MCP_HOST",
    "SERPER_MCP_PORT",
    "SERPER_MCP_LOG_LEVEL",
)

@pytest.fixture(autouse=True)
def _clean_serper_env(monkeypatch):
    """
    Ensure each test starts without Serper configuration from the outer environment.
    """
    for name in SERPER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield

@pytest.fixture
def settings():
    return load_settings({"api_key": TEST_API_KEY, "SERPER_API_URL": TEST_BASE_URL}, env_file=None)

@pytest_asyncio.fixture
async def serper_client():
    client = SerperClient(TEST_API_KEY, base_url=TEST_BASE_URL)
    yield client
    await client.aclose()

@pytest_asyncio.fixture
async def mock_serper_client():
    """SerperClient wired to the in-process mock Serper app."""
    from tests.mock.mock_serper import MOCK_API_KEY, app

    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://mock-serper")
    client = SerperClient(MOCK_API_KEY, base_url="http://mock-serper", http_client=http_client)
    yield client
    await http_client.aclose()
