import socket

import pytest
import uvicorn

from healthsvc.healthcheck import app
from healthsvc.server import bind_listener, build_server, serve


def test_bind_listener_returns_bound_socket():
    sock = bind_listener("127.0.0.1", 0)
    try:
        host, port = sock.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
    finally:
        sock.close()


def test_bind_listener_exits_when_address_in_use():
    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    blocker.bind(("127.0.0.1", 0))
    blocker.listen()
    port = blocker.getsockname()[1]
    try:
        with pytest.raises(SystemExit) as exc_info:
            bind_listener("127.0.0.1", port)
    finally:
        blocker.close()

    assert exc_info.value.code
    assert f"failed to bind 127.0.0.1:{port}" in str(exc_info.value.code)


def test_serve_prints_address_and_runs_uvicorn(monkeypatch, capsys):
    handed_over = []

    def fake_run(self, sockets=None):
        for sock in sockets:
            handed_over.append(sock.getsockname()[1])
            sock.close()

    monkeypatch.setattr(uvicorn.Server, "run", fake_run)

    serve(app, "127.0.0.1", 0)

    assert len(handed_over) == 1
    assert capsys.readouterr().out == f"Listening on http://127.0.0.1:{handed_over[0]}\n"


def test_build_server_disables_access_log():
    server = build_server(app)

    assert server.config.access_log is False
    assert server.config.log_config is None
