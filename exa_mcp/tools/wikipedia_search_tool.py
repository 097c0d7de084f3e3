# The module is to define the Wikipedia search tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import DEFAULT_NUM_RESULTS, SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class WikipediaSearchInput(BaseModel):
    query: str = Field(..., description="Search query for Wikipedia")
    numResults: int = Field(default=DEFAULT_NUM_RESULTS, ge=1, le=100, description="Number of search results to return (default: 5)")

class WikipediaSearchTool(SearchTool):
    id: str = "wikipedia_search_exa"
    name: str = "wikipedia_search_exa"
    description: str = "Search Wikipedia using Exa AI - performs searches specifically within Wikipedia.org and " \
    "returns relevant content from Wikipedia pages."
    args_schema: Type[BaseModel] = WikipediaSearchInput
    error_label: str = "Wikipedia search"

    def build_request(self, args: WikipediaSearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            include_domains=["wikipedia.org"],
            type="auto",
            num_results=args.numResults,
            contents=text_contents(livecrawl="always"),
        )
