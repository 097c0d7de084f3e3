# The module is to define the research paper search tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import DEFAULT_NUM_RESULTS, SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class ResearchPaperSearchInput(BaseModel):
    """Input model for the ResearchPaperSearchTool."""
    query: str = Field(..., description="Research topic or keyword to search for")
    numResults: int = Field(default=DEFAULT_NUM_RESULTS, ge=1, le=100, description="Number of research papers to return (default: 5)")
    maxCharacters: int = Field(default=3000, ge=1, description="Maximum number of characters to return for each result's text content (Default: 3000)")

class ResearchPaperSearchTool(SearchTool):
    """Searches academic papers and research content through Exa's 'research paper' category."""
    id: str = "research_paper_search"
    name: str = "research_paper_search"
    description: str = "Search across 100M+ research papers with full text access using Exa AI - performs targeted " \
    "academic paper searches with deep research content coverage. Returns detailed information about relevant " \
    "academic papers including titles, authors, publication dates, and full text excerpts."
    args_schema: Type[BaseModel] = ResearchPaperSearchInput
    enabled_by_default: bool = True

    def build_request(self, args: ResearchPaperSearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            category="research paper",
            type="auto",
            num_results=args.numResults,
            contents=text_contents(max_characters=args.maxCharacters, livecrawl="fallback"),
        )
