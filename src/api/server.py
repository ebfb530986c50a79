"""
HTTP server startup.

The listening socket is bound here, before uvicorn starts, so the startup
line is only logged once the port is actually ours. ``serve`` owns the
socket for the lifetime of the server.
"""

from __future__ import annotations

import logging
import socket

import uvicorn

from src.api.app import create_app
from src.config import Settings

logger = logging.getLogger(__name__)


def open_listener(settings: Settings) -> tuple[uvicorn.Config, socket.socket]:
    """Build the uvicorn config and bind its socket.

    ``Config.bind_socket`` logs the error and exits the process when the
    address is already in use.
    """
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    sock = config.bind_socket()
    port = sock.getsockname()[1]
    logger.info("Distance API running at http://localhost:%s", port)
    return config, sock


def serve(settings: Settings) -> None:
    config, sock = open_listener(settings)
    try:
        uvicorn.Server(config).run(sockets=[sock])
    finally:
        sock.close()
