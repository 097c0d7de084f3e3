# The module is to define the company research tool.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from pydantic import BaseModel, Field
from typing import List, Optional, Type
from .base_tool import SearchTool, text_contents
from exa_mcp.models.common import SearchRequest

class CompanyResearchInput(BaseModel):
    """
    Input model for the CompanyResearchTool.
    Attributes:
        query (str): The company's website, which also scopes the search to that domain.
        subpages (int): Number of subpages to crawl on the company site.
        subpageTarget (List[str]): Keywords that steer which subpages get crawled.
    """
    query: str = Field(..., description="Company website URL (e.g., 'exa.ai' or 'https://exa.ai')")
    subpages: int = Field(default=10, ge=1, description="Number of subpages to crawl (default: 10)")
    subpageTarget: Optional[List[str]] = Field(default=None, description="Specific sections to target (e.g., ['about', 'pricing', 'faq', 'blog']). If not provided, will crawl the most relevant pages.")

class CompanyResearchTool(SearchTool):
    """
    Crawls a company's own website to gather structured information about it.
    """
    id: str = "company_research"
    name: str = "company_research"
    description: str = "Research companies using Exa AI - performs targeted searches of company websites to gather " \
    "comprehensive information about businesses. Returns detailed information from company websites including " \
    "about pages, pricing information, FAQs, blogs, and other relevant content."
    args_schema: Type[BaseModel] = CompanyResearchInput
    enabled_by_default: bool = True
    error_label: str = "Company research"

    def build_request(self, args: CompanyResearchInput) -> SearchRequest:
        return SearchRequest(
            query=args.query,
            category="company",
            include_domains=[args.query],
            type="auto",
            num_results=1,
            contents=text_contents(
                livecrawl="always",
                subpages=args.subpages,
                subpage_target=args.subpageTarget,
            ),
        )
