# Decides which registered tools are exposed for one server run.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

from typing import AbstractSet, List, Optional, Set, Tuple
from exa_mcp.core.tool_registry import ToolRegistry
from exa_mcp.tools.base_tool import BaseTool
from exa_mcp.utils.logger import console


def parse_tool_list(raw: Optional[str]) -> Set[str]:
    """Turns a comma-separated --tools value into a set of ids."""
    if not raw:
        return set()
    return {part.strip() for part in raw.split(",") if part.strip()}


def resolve_enabled_tools(requested: AbstractSet[str], registry: ToolRegistry) -> List[Tuple[str, BaseTool]]:
    """
    Returns the (id, tool) pairs to expose, in registry order.

    With an explicit allow-list, exactly the listed ids that exist in the
    registry are returned; unknown ids are ignored. Without one, every tool
    flagged enabled_by_default is returned.
    """
    tools = registry.all()
    if requested:
        unknown = sorted(set(requested) - set(tools))
        if unknown:
            console.debug(f"Ignoring unknown tool ids: {', '.join(unknown)}")
        return [(tool_id, tool) for tool_id, tool in tools.items() if tool_id in requested]
    return [(tool_id, tool) for tool_id, tool in tools.items() if tool.enabled_by_default]
