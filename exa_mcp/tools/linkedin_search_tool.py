# The module is to define the LinkedIn search tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import DEFAULT_NUM_RESULTS, SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class LinkedInSearchInput(BaseModel):
    query: str = Field(..., description="Search query for LinkedIn (e.g., <url>, <person name> <company name>, <company name> LinkedIn page)")
    numResults: int = Field(default=DEFAULT_NUM_RESULTS, ge=1, le=100, description="Number of search results to return (default: 5)")

class LinkedInSearchTool(SearchTool):
    id: str = "linkedin_search"
    name: str = "linkedin_search"
    description: str = "Search LinkedIn for companies and people using Exa AI. Simply include company names, " \
    "person names, or specific LinkedIn URLs in your query."
    args_schema: Type[BaseModel] = LinkedInSearchInput
    error_label: str = "LinkedIn search"

    def build_request(self, args: LinkedInSearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            include_domains=["linkedin.com"],
            type="auto",
            num_results=args.numResults,
            contents=text_contents(livecrawl="always"),
        )
