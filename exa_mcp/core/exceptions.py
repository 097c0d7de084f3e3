# Exceptions shared by the registry, the transport selector and the server.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10


class ConfigurationError(Exception):
    """Fatal startup problem: missing credential, duplicate tool id, late registration."""


class TransportError(Exception):
    """A transport could not be constructed."""


class ToolInputError(Exception):
    """Arguments for a tool call did not match the tool's input schema."""


class ToolExecutionError(Exception):
    """Raised towards the protocol layer so a failed call is reported as an error result."""
