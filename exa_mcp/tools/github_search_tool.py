# The module is to define the GitHub search tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import DEFAULT_NUM_RESULTS, SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class GithubSearchInput(BaseModel):
    query: str = Field(..., description="Search query for GitHub repositories, or Github account, or code")
    numResults: int = Field(default=DEFAULT_NUM_RESULTS, ge=1, le=100, description="Number of search results to return (default: 5)")

class GithubSearchTool(SearchTool):
    """Searches repositories, accounts and code hosted on github.com."""
    id: str = "github_search"
    name: str = "github_search"
    description: str = "Search GitHub repositories using Exa AI - performs real-time searches on GitHub.com to find " \
    "relevant repositories, issues and GitHub accounts."
    args_schema: Type[BaseModel] = GithubSearchInput
    error_label: str = "GitHub search"

    def build_request(self, args: GithubSearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            include_domains=["github.com"],
            type="auto",
            num_results=args.numResults,
            contents=text_contents(livecrawl="always"),
        )
