# Chooses and runs the channel the MCP server talks to its client over.
# Author: Exa Labs
# Date: 2025-06-11
# Version: 0.3.10

import contextlib
import socket
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Literal, Optional

import anyio
from mcp.server.lowlevel import Server

if sys.version_info < (3, 11):
    from exceptiongroup import BaseExceptionGroup

from exa_mcp.core.config import Settings
from exa_mcp.core.exceptions import TransportError
from exa_mcp.utils.logger import console

TransportKind = Literal["network", "pipe"]
ErrorObserver = Callable[[BaseException], None]

STREAMABLE_HTTP_PATH = "/mcp"
STREAM_CLOSED_ERRORS = (anyio.ClosedResourceError, anyio.BrokenResourceError)


class Transport(ABC):
    """One bidirectional channel to the client. Only one is active per server."""
    kind: TransportKind
    on_error: Optional[ErrorObserver] = None

    @abstractmethod
    async def serve(self, server: Server) -> None:
        """Runs the protocol session until the client goes away."""

    @abstractmethod
    def describe(self) -> str:
        ...

    def report_error(self, exc: BaseException) -> None:
        if self.on_error is not None:
            self.on_error(exc)


class _StreamableHTTPApp:
    """ASGI endpoint handing every /mcp request to the SDK session manager."""
    def __init__(self, transport: "StreamableHTTPTransport", session_manager):
        self._transport = transport
        self._session_manager = session_manager

    async def __call__(self, scope, receive, send):
        try:
            await self._session_manager.handle_request(scope, receive, send)
        except Exception as exc:
            self._transport.report_error(exc)
            raise


class StreamableHTTPTransport(Transport):
    """
    Network transport: the SDK's streamable HTTP session manager mounted into
    Starlette and served by uvicorn.

    The listening socket is bound in the constructor, so an occupied port or
    a missing HTTP stack surfaces while the transport is being built rather
    than after the server has started.
    """
    kind: TransportKind = "network"

    def __init__(self, host: str, port: int, log_level: str = "info"):
        try:
            import uvicorn  # noqa: F401
            import starlette  # noqa: F401
        except ImportError as e:
            raise TransportError(f"HTTP transport is unavailable: {e}") from e

        self.host = host
        self.port = port
        self._log_level = log_level.lower()
        self._socket = _bind_socket(host, port)

    def describe(self) -> str:
        return f"Streamable HTTP transport on {self.host}:{self.port}{STREAMABLE_HTTP_PATH}"

    def build_app(self, server: Server):
        from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
        from starlette.applications import Starlette
        from starlette.routing import Route

        session_manager = StreamableHTTPSessionManager(app=server, json_response=True, stateless=True)

        @contextlib.asynccontextmanager
        async def lifespan(app):
            async with session_manager.run():
                yield

        return Starlette(
            routes=[Route(STREAMABLE_HTTP_PATH, endpoint=_StreamableHTTPApp(self, session_manager))],
            lifespan=lifespan,
        )

    async def serve(self, server: Server) -> None:
        import uvicorn

        config = uvicorn.Config(self.build_app(server), log_level=self._log_level)
        try:
            await uvicorn.Server(config).serve(sockets=[self._socket])
        finally:
            self.close()

    def close(self) -> None:
        self._socket.close()


class StdioTransport(Transport):
    """Pipe transport: JSON-RPC over this process's stdin and stdout."""
    kind: TransportKind = "pipe"

    def __init__(self):
        if sys.stdin is None or sys.stdout is None:
            raise TransportError("stdio transport is unavailable: no standard streams attached.")

    def describe(self) -> str:
        return "stdio transport"

    async def serve(self, server: Server) -> None:
        from mcp.server.stdio import stdio_server

        try:
            async with stdio_server() as (read_stream, write_stream):
                await server.run(read_stream, write_stream, server.create_initialization_options())
        except STREAM_CLOSED_ERRORS as exc:
            self.report_error(exc)
        except BaseExceptionGroup as group:
            # The SDK runs the pipe inside task groups, so a dropped stream
            # arrives wrapped.
            closed, rest = group.split(STREAM_CLOSED_ERRORS)
            if closed is None:
                raise
            self.report_error(_first_leaf(closed))
            if rest is not None:
                raise rest


@dataclass(frozen=True)
class SelectedTransport:
    """The outcome of transport selection, tagged with the kind that was bound."""
    kind: TransportKind
    transport: Transport


def _bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def _first_leaf(exc: BaseException) -> BaseException:
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc


def attach_error_observer(transport: Transport) -> Transport:
    """Logs transport-level errors; the process keeps running."""
    def _log_transport_error(exc: BaseException) -> None:
        console.error(f"Transport error: {exc}")

    transport.on_error = _log_transport_error
    return transport


def select_transport(
    settings: Settings,
    mode: Optional[str] = None,
    network_factory: Optional[Callable[[], Transport]] = None,
    pipe_factory: Optional[Callable[[], Transport]] = None,
) -> SelectedTransport:
    """
    Builds exactly one transport.

    In 'auto' mode the network transport is tried first; if it cannot be
    constructed, the error is logged at debug level and the stdio transport is
    built instead. A failure to build the stdio transport propagates. 'http'
    and 'stdio' modes build only the named transport.
    """
    mode = mode or settings.MCP_TRANSPORT
    if network_factory is None:
        network_factory = lambda: StreamableHTTPTransport(settings.HOST, settings.PORT, settings.LOG_LEVEL)
    if pipe_factory is None:
        pipe_factory = StdioTransport

    if mode == "stdio":
        transport = pipe_factory()
    elif mode == "http":
        transport = network_factory()
    else:
        try:
            transport = network_factory()
        except Exception as e:
            console.debug(f"Failed to start HTTP transport: {e!r}. Falling back to stdio.")
            transport = pipe_factory()

    attach_error_observer(transport)
    console.info(f"Using {transport.describe()}")
    return SelectedTransport(kind=transport.kind, transport=transport)
