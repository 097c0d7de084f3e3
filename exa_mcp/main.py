# The module provides the command line entry point for the Exa MCP server.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

import argparse
import asyncio
import sys
from typing import List, Optional

from exa_mcp.core.config import Settings, get_settings
from exa_mcp.core.enablement import parse_tool_list
from exa_mcp.core.exceptions import ConfigurationError
from exa_mcp.core.server import ExaServer
from exa_mcp.core.tool_registry import ToolRegistry, build_registry
from exa_mcp.services.exa_client import ExaClient
from exa_mcp.utils.logger import console, print_tool_listing


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="exa-mcp-server",
        description="A Model Context Protocol server with Exa for web search, academic paper search, and Twitter/X.com search.",
    )
    p.add_argument(
        "--tools",
        type=str,
        default="",
        help="Comma-separated list of tools to enable (if not specified, all enabled-by-default tools are used)",
    )
    p.add_argument("--list-tools", action="store_true", help="List all available tools and exit")
    p.add_argument(
        "--transport",
        choices=["auto", "http", "stdio"],
        default=None,
        help="Transport to serve on: 'auto' tries streamable HTTP and falls back to stdio (default: MCP_TRANSPORT or auto)",
    )
    return p.parse_args(argv)


def list_tools(registry: ToolRegistry) -> None:
    print_tool_listing(registry.get_definitions())


def require_api_key(settings: Settings) -> str:
    if not settings.EXA_API_KEY:
        raise ConfigurationError("EXA_API_KEY environment variable is required")
    return settings.EXA_API_KEY


def run(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Runs the server and returns the process exit code."""
    args = parse_args(argv)

    try:
        registry = build_registry()

        # Listing needs only the registry: no key, no settings.
        if args.list_tools:
            list_tools(registry)
            return 0

        settings = settings or get_settings()
        console.set_level(settings.LOG_LEVEL)
        require_api_key(settings)
        if args.transport:
            settings = settings.model_copy(update={"MCP_TRANSPORT": args.transport})

        server = ExaServer(
            registry=registry,
            settings=settings,
            client=ExaClient.from_settings(settings),
            requested_tools=parse_tool_list(args.tools),
        )
        asyncio.run(server.run())
    except KeyboardInterrupt:
        console.info("Exa MCP server stopped.")
    except Exception as e:
        console.error(f"Fatal server error: {e}")
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
