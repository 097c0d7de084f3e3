# exa_mcp/core/server.py
# The server facade: registers the enabled tools with the MCP runtime and serves them.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from typing import AbstractSet, Any, Callable, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server

from exa_mcp.core.config import SERVER_NAME, SERVER_VERSION, Settings
from exa_mcp.core.enablement import resolve_enabled_tools
from exa_mcp.core.exceptions import ConfigurationError, ToolExecutionError, ToolInputError
from exa_mcp.core.tool_registry import ToolRegistry
from exa_mcp.core.transport import SelectedTransport, select_transport
from exa_mcp.models.common import ToolResult
from exa_mcp.services.exa_client import ExaClient
from exa_mcp.tools.base_tool import BaseTool
from exa_mcp.utils.logger import console


class ExaServer:
    """
    Exa AI Web Search MCP Server.

    Integrates Exa's search capabilities with Claude and other MCP-compatible
    clients. One instance owns one protocol session, the subset of the
    registry enabled for this run, and the transport it is served over.
    """
    def __init__(
        self,
        registry: ToolRegistry,
        settings: Settings,
        client: ExaClient,
        requested_tools: AbstractSet[str] = frozenset(),
        transport_selector: Callable[[Settings], SelectedTransport] = select_transport,
    ):
        self.registry = registry
        self.settings = settings
        self.client = client
        self.requested_tools = requested_tools
        self._select_transport = transport_selector
        self._tools: Dict[str, BaseTool] = {}
        self.server = self.initialize()
        console.info("Server initialized")

    def initialize(self) -> Server:
        """Creates the protocol session and wires the list/call handlers into it."""
        server = Server(SERVER_NAME, version=SERVER_VERSION)

        @server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return self.list_tools()

        @server.call_tool()
        async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
            result = await self.call_tool(name, arguments)
            if result.is_error:
                raise ToolExecutionError(result.text)
            return [types.TextContent(type="text", text=result.text)]

        return server

    def add_tool(self, tool: BaseTool) -> None:
        if tool.name in self._tools:
            raise ConfigurationError(f"A tool named '{tool.name}' is already registered with the server.")
        self._tools[tool.name] = tool

    @property
    def registered_tools(self) -> List[str]:
        return [tool.id for tool in self._tools.values()]

    def setup_tools(self) -> List[str]:
        """Registers every tool enabled for this run and returns their ids."""
        for _, tool in resolve_enabled_tools(self.requested_tools, self.registry):
            self.add_tool(tool)
        return self.registered_tools

    def list_tools(self) -> List[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in self._tools.values()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
        """
        Runs one tool invocation. Arguments are validated before the handler
        runs; every failure becomes an error result for this call only.
        """
        tool = self._tools.get(name)
        if tool is None:
            return ToolResult.error(f"Unknown tool: {name}")

        try:
            args = tool.validate(arguments)
        except ToolInputError as e:
            console.warning(str(e))
            return ToolResult.error(str(e))

        try:
            return await tool.execute(self.client, args)
        except Exception as e:
            console.exception(f"Error executing tool '{name}'")
            return ToolResult.error(f"Error executing tool '{name}': {e}")

    async def run(self) -> None:
        console.rule(f"{SERVER_NAME} v{SERVER_VERSION}")
        try:
            registered = self.setup_tools()
            console.info(f"Starting Exa MCP server with {len(registered)} tools: {', '.join(registered)}")

            selected = self._select_transport(self.settings)
            if selected.kind == "network":
                console.success("Exa Search MCP server running on HTTP (cloud/desktop compatible)")
            else:
                console.success("Exa Search MCP server running on stdio (CLI/desktop compatible)")
            await selected.transport.serve(self.server)
        except Exception as e:
            console.error(f"Server initialization error: {e}")
            raise
