import json

import httpx
import pytest
from pydantic import BaseModel, Field

from exa_mcp.core.config import Settings
from exa_mcp.models.common import ToolResult
from exa_mcp.services.exa_client import ExaClient
from exa_mcp.tools.base_tool import BaseTool


class EchoInput(BaseModel):
    query: str = Field(..., description="Text to echo back")


class EchoTool(BaseTool):
    """Test tool that echoes its query without touching the network."""
    description = "Echoes the query back."
    args_schema = EchoInput

    def __init__(self, tool_id: str, enabled: bool = False, name: str = None):
        self.id = tool_id
        self.name = name or tool_id
        self.enabled_by_default = enabled
        self.calls = []

    async def execute(self, client, args):
        self.calls.append(args)
        return ToolResult.ok(f"{self.id}:{args.query}")


class ExplodingTool(EchoTool):
    async def execute(self, client, args):
        raise RuntimeError("boom")


@pytest.fixture
def settings():
    return Settings(_env_file=None, EXA_API_KEY="test-key", MCP_TRANSPORT="auto", PORT=8080)


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def exa_responses():
    """Map of endpoint path to (status, body); tests fill it in."""
    return {}


@pytest.fixture
def exa_client(recorded_requests, exa_responses):
    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        status, body = exa_responses.get(request.url.path, (200, {"results": []}))
        return httpx.Response(status, json=body)

    return ExaClient(api_key="test-key", base_url="https://api.exa.test", transport=httpx.MockTransport(handler))


def request_body(request: httpx.Request) -> dict:
    return json.loads(request.content)
