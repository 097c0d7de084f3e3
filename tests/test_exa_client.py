import asyncio

import httpx
import pytest

from exa_mcp.core.config import Settings
from exa_mcp.core.exceptions import ConfigurationError
from exa_mcp.models.common import ContentsRequest, SearchRequest, TextOptions
from exa_mcp.services.exa_client import ExaAPIError, ExaClient
from exa_mcp.tools.base_tool import text_contents

from conftest import request_body


def test_search_posts_camel_case_body_with_api_key(exa_client, recorded_requests, exa_responses):
    exa_responses["/search"] = (200, {"results": [{"url": "https://example.com"}]})
    request = SearchRequest(query="python", num_results=3, include_domains=["github.com"], contents=text_contents())

    data = asyncio.run(exa_client.search(request))

    assert data == {"results": [{"url": "https://example.com"}]}
    [sent] = recorded_requests
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.exa.test/search"
    assert sent.headers["x-api-key"] == "test-key"
    assert sent.headers["accept"] == "application/json"
    assert request_body(sent) == {
        "query": "python",
        "type": "auto",
        "numResults": 3,
        "includeDomains": ["github.com"],
        "contents": {"text": {"maxCharacters": 3000}, "livecrawl": "always"},
    }


def test_get_contents_posts_to_contents_endpoint(exa_client, recorded_requests):
    request = ContentsRequest(ids=["https://example.com"], text=TextOptions(max_characters=100), livecrawl="always")

    asyncio.run(exa_client.get_contents(request))

    [sent] = recorded_requests
    assert sent.url.path == "/contents"
    assert request_body(sent) == {"ids": ["https://example.com"], "text": {"maxCharacters": 100}, "livecrawl": "always"}


def test_http_error_raises_exa_api_error_with_status(exa_client, exa_responses):
    exa_responses["/search"] = (401, {"error": "Invalid API key"})
    request = SearchRequest(query="python", num_results=1, contents=text_contents())

    with pytest.raises(ExaAPIError) as excinfo:
        asyncio.run(exa_client.search(request))

    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Invalid API key"


def test_network_error_has_unknown_status():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = ExaClient(api_key="k", transport=httpx.MockTransport(handler))
    request = SearchRequest(query="python", num_results=1, contents=text_contents())

    with pytest.raises(ExaAPIError) as excinfo:
        asyncio.run(client.search(request))

    assert excinfo.value.status_code is None
    assert excinfo.value.status_label == "unknown"


def test_from_settings_requires_a_key():
    with pytest.raises(ConfigurationError, match="EXA_API_KEY"):
        ExaClient.from_settings(Settings(_env_file=None, EXA_API_KEY=None))
