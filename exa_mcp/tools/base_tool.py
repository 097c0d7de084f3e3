# The module is to define the base class for all tools in the application.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

import random
import time
from abc import ABC, abstractmethod
from pydantic import BaseModel, ValidationError
from typing import Any, Dict, Mapping, Optional, Type
from exa_mcp.core.exceptions import ToolInputError
from exa_mcp.models.common import ContentsOptions, SearchRequest, TextOptions, ToolResult
from exa_mcp.services.exa_client import ExaAPIError, ExaClient
from exa_mcp.utils.logger import console

NO_RESULTS_MESSAGE = "No search results found. Please try a different query."
DEFAULT_NUM_RESULTS = 5
DEFAULT_MAX_CHARACTERS = 3000


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    A tool is a static descriptor plus a handler. Subclasses set the class
    attributes and implement execute(); construction never needs credentials,
    so the whole catalogue can be listed without an API key.
    Attributes:
        id (str): Stable identifier used by --tools and the registry.
        name (str): The name clients see; may differ from the id.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): Pydantic model the arguments are
            validated against before execute() runs.
        enabled_by_default (bool): Exposed when no explicit allow-list is given.
    """
    id: str
    name: str
    description: str
    args_schema: Type[BaseModel]
    enabled_by_default: bool = False

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.args_schema.model_json_schema()

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> BaseModel:
        """Checks raw call arguments against args_schema."""
        try:
            return self.args_schema.model_validate(dict(arguments or {}))
        except ValidationError as e:
            raise ToolInputError(f"Invalid arguments for tool '{self.name}': {e}") from e

    @abstractmethod
    async def execute(self, client: ExaClient, args: BaseModel) -> ToolResult:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            client: The shared Exa API client.
            args: The validated arguments, an instance of args_schema.

        Returns:
            A ToolResult carrying either the payload or a failure message.
        """

    def get_definition(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "enabled": self.enabled_by_default,
            "input_schema": self.input_schema,
        }

    def new_request_id(self) -> str:
        return f"{self.name}-{int(time.time() * 1000)}-{random.randrange(36 ** 7):07x}"


class SearchTool(BaseTool):
    """
    Shared flow for every tool backed by Exa's /search endpoint. Subclasses
    only describe the request through build_request().
    """
    error_label: str = "Search"

    @abstractmethod
    def build_request(self, args: BaseModel) -> SearchRequest:
        """Translates validated arguments into an Exa search request."""

    async def execute(self, client: ExaClient, args: BaseModel) -> ToolResult:
        request_id = self.new_request_id()
        request = self.build_request(args)
        console.info(f"[{request_id}] Starting {self.name} for query: '{request.query}'")

        try:
            console.debug(f"[{request_id}] Sending request to Exa API")
            data = await client.search(request)
            console.debug(f"[{request_id}] Received response from Exa API")
        except ExaAPIError as e:
            console.error(f"[{request_id}] {self.error_label} error ({e.status_label}): {e.message}")
            return ToolResult.error(f"{self.error_label} error ({e.status_label}): {e.message}")

        if not data or not data.get("results"):
            console.warning(f"[{request_id}] Warning: Empty or invalid response from Exa API")
            return ToolResult.ok(NO_RESULTS_MESSAGE)

        console.success(f"[{request_id}] Found {len(data['results'])} results")
        return ToolResult.from_data(data)


def text_contents(max_characters: int = DEFAULT_MAX_CHARACTERS, livecrawl: str = "always", **extra) -> ContentsOptions:
    return ContentsOptions(text=TextOptions(max_characters=max_characters), livecrawl=livecrawl, **extra)
