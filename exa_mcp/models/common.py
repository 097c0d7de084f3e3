# The module is to define the common models for the application.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

import json
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, List, Literal, Optional

LiveCrawl = Literal["always", "fallback", "never"]


class ExaModel(BaseModel):
    """Base for request bodies sent to Exa, which expects camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class TextOptions(ExaModel):
    max_characters: int = Field(..., description="Maximum characters of page text per result.")


class ContentsOptions(ExaModel):
    """
    Controls what Exa returns alongside each search hit.
    Attributes:
        text (TextOptions): Page text extraction settings.
        livecrawl (str): Whether Exa crawls the page live instead of using its cache.
        subpages (int): Number of subpages to crawl for each result.
        subpage_target (List[str]): Keywords used to pick which subpages to crawl.
    """
    text: TextOptions
    livecrawl: Optional[LiveCrawl] = None
    subpages: Optional[int] = None
    subpage_target: Optional[List[str]] = None


class SearchRequest(ExaModel):
    """
    Body of a POST /search request.
    Attributes:
        query (str): The search query.
        type (str): Search type, 'auto' lets Exa choose between neural and keyword.
        num_results (int): Number of results to return.
        category (str): Optional category filter, e.g. 'research paper' or 'company'.
        include_domains (List[str]): Only return results from these domains.
        exclude_domains (List[str]): Never return results from these domains.
        start_published_date (str): ISO date lower bound on publication.
        end_published_date (str): ISO date upper bound on publication.
        contents (ContentsOptions): Content retrieval options.
    """
    query: str
    type: str = "auto"
    num_results: int
    category: Optional[str] = None
    include_domains: Optional[List[str]] = None
    exclude_domains: Optional[List[str]] = None
    start_published_date: Optional[str] = None
    end_published_date: Optional[str] = None
    contents: ContentsOptions


class ContentsRequest(ExaModel):
    """Body of a POST /contents request."""
    ids: List[str]
    text: TextOptions
    livecrawl: Optional[LiveCrawl] = None


class ToolResult(BaseModel):
    """
    Outcome of one tool invocation, as handed back to the protocol layer.
    Attributes:
        text (str): The payload or the failure message.
        is_error (bool): True when the invocation failed.
    """
    text: str = Field(..., description="The payload or the failure message.")
    is_error: bool = Field(default=False, description="True when the invocation failed.")

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def from_data(cls, data: Any) -> "ToolResult":
        return cls(text=json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)
