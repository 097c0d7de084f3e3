# The module is to define the Twitter/X search tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Optional, Type
from .base_tool import DEFAULT_NUM_RESULTS, SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class TwitterSearchInput(BaseModel):
    """Input model for the TwitterSearchTool."""
    query: str = Field(..., description="Twitter username, hashtag, or search term (e.g., 'x.com/username' or search term)")
    numResults: int = Field(default=DEFAULT_NUM_RESULTS, ge=1, le=100, description="Number of tweets to return (default: 5)")
    startPublishedDate: Optional[str] = Field(default=None, description="Optional ISO date string (e.g., '2023-04-01T00:00:00.000Z') to filter tweets published after this date. Use only when necessary.")
    endPublishedDate: Optional[str] = Field(default=None, description="Optional ISO date string (e.g., '2023-04-30T23:59:59.999Z') to filter tweets published before this date. Use only when necessary.")

class TwitterSearchTool(SearchTool):
    """Searches tweets and profiles by restricting Exa to x.com and twitter.com."""
    id: str = "twitter_search"
    name: str = "twitter_search"
    description: str = "Search Twitter/X.com posts and accounts using Exa AI - performs targeted searches of " \
    "Twitter (X.com) content including tweets, profiles, and conversations. Returns relevant tweets, profile " \
    "information, and conversation threads based on your query."
    args_schema: Type[BaseModel] = TwitterSearchInput
    error_label: str = "Twitter search"

    def build_request(self, args: TwitterSearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            include_domains=["x.com", "twitter.com"],
            type="auto",
            num_results=args.numResults,
            start_published_date=args.startPublishedDate,
            end_published_date=args.endPublishedDate,
            contents=text_contents(livecrawl="always"),
        )
