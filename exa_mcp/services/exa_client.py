# exa_mcp/services/exa_client.py
# Thin async client for the Exa search API.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

import httpx
from typing import Any, Dict, Optional
from exa_mcp.core.config import Settings
from exa_mcp.core.exceptions import ConfigurationError
from exa_mcp.models.common import ContentsRequest, SearchRequest
from exa_mcp.utils.logger import console

SEARCH_ENDPOINT = "/search"
CONTENTS_ENDPOINT = "/contents"


class ExaAPIError(Exception):
    """
    Raised when a call to the Exa API fails.
    Attributes:
        status_code: HTTP status of the failed response, None if no response arrived.
        message: Error message extracted from the response body, or the transport error.
    """
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def status_label(self) -> str:
        return str(self.status_code) if self.status_code is not None else "unknown"


class ExaClient:
    """
    Sends search and contents requests to Exa, authenticated with the x-api-key header.

    A fresh httpx.AsyncClient is opened per request, so one instance can be shared
    by every tool for the lifetime of the server.
    """
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.exa.ai",
        timeout: float = 25.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExaClient":
        if not settings.EXA_API_KEY:
            raise ConfigurationError("EXA_API_KEY environment variable is required")
        return cls(
            api_key=settings.EXA_API_KEY,
            base_url=settings.EXA_API_BASE_URL,
            timeout=settings.EXA_REQUEST_TIMEOUT,
        )

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "x-api-key": self._api_key,
        }

    async def search(self, request: SearchRequest) -> Dict[str, Any]:
        return await self._post(SEARCH_ENDPOINT, request.to_payload())

    async def get_contents(self, request: ContentsRequest) -> Dict[str, Any]:
        return await self._post(CONTENTS_ENDPOINT, request.to_payload())

    async def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                headers=self.headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(endpoint, json=payload)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            console.error(f"Exa API returned {e.response.status_code} for {endpoint}: {message}")
            raise ExaAPIError(message, status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            console.error(f"Request to Exa {endpoint} failed: {e}")
            raise ExaAPIError(str(e) or type(e).__name__) from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or body)
    return str(body)
