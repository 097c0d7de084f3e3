# The module is to define the web search tool backed by Exa.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import DEFAULT_NUM_RESULTS, SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class WebSearchInput(BaseModel):
    """
    Input model for the WebSearchTool.
    Attributes:
        query (str): The search query to look up on the web.
        numResults (int): Number of search results to return.
    """
    query: str = Field(..., description="Search query")
    numResults: int = Field(default=DEFAULT_NUM_RESULTS, ge=1, le=100, description="Number of search results to return (default: 5)")

class WebSearchTool(SearchTool):
    """
    Real-time web search through Exa. Returns the content of the most relevant
    pages, crawled live.
    """
    id: str = "web_search"
    name: str = "web_search_exa"
    description: str = "Search the web using Exa AI - performs real-time web searches and can scrape content " \
    "from specific URLs. Supports configurable result counts and returns the content from the most relevant websites."
    args_schema: Type[BaseModel] = WebSearchInput
    enabled_by_default: bool = True

    def build_request(self, args: WebSearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            type="auto",
            num_results=args.numResults,
            contents=text_contents(livecrawl="always"),
        )
