import asyncio
import contextlib
import socket
import sys

import anyio
import pytest
from mcp.server.lowlevel import Server

if sys.version_info < (3, 11):
    from exceptiongroup import BaseExceptionGroup

from exa_mcp.core import transport as transport_module
from exa_mcp.core.exceptions import TransportError
from exa_mcp.core.transport import (
    StdioTransport,
    StreamableHTTPTransport,
    Transport,
    attach_error_observer,
    select_transport,
)


class FakeTransport(Transport):
    def __init__(self, kind):
        self.kind = kind
        self.served = []

    async def serve(self, server):
        self.served.append(server)

    def describe(self):
        return f"fake {self.kind} transport"


def _failing_network():
    raise OSError("address already in use")


def test_network_failure_falls_back_to_pipe(settings):
    selected = select_transport(settings, network_factory=_failing_network, pipe_factory=lambda: FakeTransport("pipe"))

    assert selected.kind == "pipe"
    assert isinstance(selected.transport, FakeTransport)
    assert selected.transport.on_error is not None


def test_network_is_preferred_when_it_can_be_built(settings):
    built = []

    def pipe_factory():
        built.append("pipe")
        return FakeTransport("pipe")

    selected = select_transport(settings, network_factory=lambda: FakeTransport("network"), pipe_factory=pipe_factory)

    assert selected.kind == "network"
    assert built == []


def test_pipe_failure_propagates(settings):
    def broken_pipe():
        raise TransportError("no standard streams")

    with pytest.raises(TransportError):
        select_transport(settings, network_factory=_failing_network, pipe_factory=broken_pipe)


def test_forced_http_does_not_fall_back(settings):
    with pytest.raises(OSError):
        select_transport(settings, mode="http", network_factory=_failing_network, pipe_factory=lambda: FakeTransport("pipe"))


def test_forced_stdio_skips_the_network_attempt(settings):
    def network_factory():
        raise AssertionError("network transport should not be built")

    selected = select_transport(settings, mode="stdio", network_factory=network_factory, pipe_factory=lambda: FakeTransport("pipe"))

    assert selected.kind == "pipe"


def test_error_observer_logs_without_raising(monkeypatch):
    logged = []
    monkeypatch.setattr(transport_module.console, "error", logged.append)
    fake = attach_error_observer(FakeTransport("pipe"))

    fake.report_error(RuntimeError("connection reset"))

    assert logged == ["Transport error: connection reset"]


def test_occupied_port_falls_back_to_stdio(settings):
    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    blocker.bind(("127.0.0.1", 0))
    blocker.listen(1)
    port = blocker.getsockname()[1]
    try:
        busy = settings.model_copy(update={"HOST": "127.0.0.1", "PORT": port})
        selected = select_transport(busy)
    finally:
        blocker.close()

    assert selected.kind == "pipe"
    assert isinstance(selected.transport, StdioTransport)


def test_http_transport_binds_and_exposes_mcp_route():
    transport = StreamableHTTPTransport("127.0.0.1", 0)
    try:
        app = transport.build_app(Server("test-server"))
        assert transport.kind == "network"
        assert [route.path for route in app.routes] == ["/mcp"]
    finally:
        transport.close()


class _PipeSession:
    """Stands in for the protocol session; its run fails with the given error."""
    def __init__(self, error):
        self.error = error

    def create_initialization_options(self):
        return None

    async def run(self, read_stream, write_stream, options):
        raise self.error


def _serve_stdio(monkeypatch, error):
    @contextlib.asynccontextmanager
    async def fake_stdio_server():
        yield None, None

    monkeypatch.setattr("mcp.server.stdio.stdio_server", fake_stdio_server)
    reported = []
    transport = StdioTransport()
    transport.on_error = reported.append
    asyncio.run(transport.serve(_PipeSession(error)))
    return reported


def test_stdio_reports_a_closed_stream(monkeypatch):
    closed = anyio.ClosedResourceError()

    assert _serve_stdio(monkeypatch, closed) == [closed]


def test_stdio_reports_a_closed_stream_wrapped_in_a_task_group_error(monkeypatch):
    broken = anyio.BrokenResourceError()
    wrapped = BaseExceptionGroup("unhandled errors in a TaskGroup", [BaseExceptionGroup("inner", [broken])])

    assert _serve_stdio(monkeypatch, wrapped) == [broken]


def test_stdio_reraises_unrelated_task_group_errors(monkeypatch):
    wrapped = BaseExceptionGroup("unhandled errors in a TaskGroup", [RuntimeError("boom")])

    with pytest.raises(BaseExceptionGroup) as info:
        _serve_stdio(monkeypatch, wrapped)

    assert isinstance(info.value.exceptions[0], RuntimeError)
