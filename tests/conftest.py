import pytest

from gong_mcp.client import GongClient
from gong_mcp.config import Credentials, Settings
from gong_mcp.tools import ToolRouter

from .helpers import ACCESS_KEY, ACCESS_SECRET, RecordingTransport, json_responder


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        credentials=Credentials(access_key=ACCESS_KEY, access_secret=ACCESS_SECRET),
        base_url="https://api.gong.io/v2",
    )


@pytest.fixture
async def make_router(settings):
    """Build routers backed by recording mock transports; clients close on teardown."""
    clients = []

    def build(responder=None):
        recorder = RecordingTransport(responder or json_responder({"calls": []}))
        client = GongClient(settings, transport=recorder.transport)
        clients.append(client)
        return ToolRouter(client), recorder

    yield build

    for client in clients:
        await client.close()
