# Discovers every available tool and keeps them in a read-only registry.
# Version 0.3.10: The registry is frozen after discovery and injected where needed.

import inspect
import pkgutil
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional
from exa_mcp import tools as tools_package
from exa_mcp.core.exceptions import ConfigurationError
from exa_mcp.tools.base_tool import BaseTool
from exa_mcp.utils.logger import console


class ToolRegistry:
    """
    An ordered mapping from tool id to tool.

    Populated during an explicit initialization phase, then frozen; after
    freeze() the registry is read-only for the rest of the process.
    """
    def __init__(self, tools: Optional[Iterable[BaseTool]] = None):
        self._tools: Dict[str, BaseTool] = {}
        self._frozen = False
        for tool in tools or ():
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        if self._frozen:
            raise ConfigurationError(f"Cannot register tool '{tool.id}': the registry is frozen.")
        if tool.id in self._tools:
            raise ConfigurationError(f"Duplicate tool id '{tool.id}' in the tool registry.")
        self._tools[tool.id] = tool
        console.debug(f"Registered tool: '{tool.id}'")

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def all(self) -> Mapping[str, BaseTool]:
        """Returns the full mapping in registration order."""
        return MappingProxyType(self._tools)

    def get(self, tool_id: str) -> Optional[BaseTool]:
        return self._tools.get(tool_id)

    def __contains__(self, tool_id: str) -> bool:
        return tool_id in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def get_definitions(self) -> List[dict]:
        """Returns the definitions of every tool, for listing."""
        return [tool.get_definition() for tool in self._tools.values()]


def discover_tools(package=tools_package) -> List[BaseTool]:
    """
    Scans the tools package, imports all modules, finds the concrete classes
    that inherit from BaseTool, and creates an instance of each.

    Modules are visited in name order and classes in definition order, so the
    result is stable between runs.
    """
    found: List[BaseTool] = []
    for _, modname, _ in pkgutil.iter_modules(package.__path__, f"{package.__name__}."):
        if modname.startswith(f"{package.__name__}.base_tool"):
            continue
        try:
            module = __import__(modname, fromlist="dummy")
        except Exception:
            console.exception(f"Failed to load tool module {modname}")
            continue
        for obj in list(vars(module).values()):
            if (
                inspect.isclass(obj)
                and issubclass(obj, BaseTool)
                and obj.__module__ == module.__name__
                and not inspect.isabstract(obj)
            ):
                found.append(obj())
    return found


def build_registry(tools: Optional[Iterable[BaseTool]] = None) -> ToolRegistry:
    """Builds and freezes the registry; duplicate ids abort startup."""
    registry = ToolRegistry(discover_tools() if tools is None else tools).freeze()
    console.debug(f"Tool discovery complete. Found {len(registry)} tools: {list(registry.all().keys())}")
    return registry
