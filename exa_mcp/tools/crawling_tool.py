# The module is to define the CrawlingTool that extracts page content through Exa.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import BaseTool, DEFAULT_MAX_CHARACTERS
from exa_mcp.models.common import ContentsRequest, TextOptions, ToolResult
from exa_mcp.services.exa_client import ExaAPIError, ExaClient
from exa_mcp.utils.logger import console

NO_CONTENT_MESSAGE = "No content found for the provided URL."

class CrawlingInput(BaseModel):
    """
    Input model for the CrawlingTool.
    Attributes:
        url (str): The page to extract content from.
    """
    url: str = Field(..., description="URL to crawl and extract content from")

class CrawlingTool(BaseTool):
    """
    Fetches the full text of a single known URL through Exa's /contents
    endpoint, crawling it live rather than relying on Exa's cache.
    """
    id: str = "crawling"
    name: str = "crawling"
    description: str = "Extract content from specific URLs using Exa AI - performs targeted crawling of web pages " \
    "to retrieve their full content. Useful for reading articles, PDFs, or any web page when you have the exact URL."
    args_schema: Type[BaseModel] = CrawlingInput
    enabled_by_default: bool = True

    async def execute(self, client: ExaClient, args: CrawlingInput) -> ToolResult:
        request_id = self.new_request_id()
        console.info(f"[{request_id}] Starting crawl for URL: {args.url}")

        request = ContentsRequest(
            ids=[args.url],
            text=TextOptions(max_characters=DEFAULT_MAX_CHARACTERS),
            livecrawl="always",
        )
        try:
            data = await client.get_contents(request)
        except ExaAPIError as e:
            console.error(f"[{request_id}] Crawling error ({e.status_label}): {e.message}")
            return ToolResult.error(f"Crawling error ({e.status_label}): {e.message}")

        if not data or not data.get("results"):
            console.warning(f"[{request_id}] Warning: Empty or invalid response from Exa API")
            return ToolResult.ok(NO_CONTENT_MESSAGE)

        console.success(f"[{request_id}] Successfully crawled content")
        return ToolResult.from_data(data)
