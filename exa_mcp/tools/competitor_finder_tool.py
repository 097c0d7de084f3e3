# The module is to define the competitor finder tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Optional, Type
from .base_tool import SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class CompetitorFinderInput(BaseModel):
    """Input model for the CompetitorFinderTool."""
    query: str = Field(..., description="Describe what the company/product in a few words (e.g., 'web search API', 'AI image generation', 'cloud storage service'). Keep it simple. Do not include the company name.")
    excludeDomain: Optional[str] = Field(default=None, description="Optional: The company's website to exclude from results (e.g., 'exa.ai')")
    numResults: int = Field(default=10, ge=1, le=100, description="Number of competitors to return (default: 10)")

class CompetitorFinderTool(SearchTool):
    """
    Finds companies offering similar products. The company's own domain can be
    excluded so it does not show up as its own competitor.
    """
    id: str = "competitor_finder"
    name: str = "competitor_finder"
    description: str = "Find competitors of a company using Exa AI - performs targeted searches to identify businesses " \
    "that offer similar products or services. Describe what the company does (without mentioning its name) and " \
    "optionally provide the company's website to exclude it from results."
    args_schema: Type[BaseModel] = CompetitorFinderInput
    error_label: str = "Competitor finder"

    def build_request(self, args: CompetitorFinderInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            type="auto",
            num_results=args.numResults,
            exclude_domains=[args.excludeDomain] if args.excludeDomain else None,
            contents=text_contents(livecrawl="always"),
        )
