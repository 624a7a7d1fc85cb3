import socket

import uvicorn
from fastapi import FastAPI

from healthsvc.settings import HOST, PORT


def bind_listener(host: str = HOST, port: int = PORT) -> socket.socket:
    """Bind the listening socket, exiting the process if the address is unavailable."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise SystemExit(f"failed to bind {host}:{port}: {exc}") from exc
    return sock


def build_server(app: FastAPI) -> uvicorn.Server:
    # log_config=None keeps uvicorn on the process-wide logging setup;
    # handlers log their own line, so the access log stays off
    config = uvicorn.Config(app, log_config=None, access_log=False)
    return uvicorn.Server(config)


def serve(app: FastAPI, host: str = HOST, port: int = PORT) -> None:
    sock = bind_listener(host, port)
    bound_host, bound_port = sock.getsockname()[:2]
    print(f"Listening on http://{bound_host}:{bound_port}", flush=True)

    build_server(app).run(sockets=[sock])
