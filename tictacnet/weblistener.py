"""A TCP listener that the web front end connects to."""

from __future__ import annotations

import ipaddress
import socket

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "BUFFER_SIZE", "WebListener"]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5001
BUFFER_SIZE = 512


class WebListener:
    """A listening IPv4 stream socket that hands back what a client sends."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        ipaddress.IPv4Address(host)  # raises ValueError for anything else
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.bind((host, port))
            sock.listen(socket.SOMAXCONN)
        except OSError:
            sock.close()
            raise
        self._sock = sock

    @property
    def address(self) -> tuple[str, int]:
        """The host and port actually bound."""
        return self._sock.getsockname()

    def receive_info(self) -> bytes:
        """Accept the next connection and return up to BUFFER_SIZE bytes from it."""
        conn, _ = self._sock.accept()
        with conn:
            return conn.recv(BUFFER_SIZE)

    def close(self) -> None:
        """Stop listening."""
        self._sock.close()

    def __enter__(self) -> "WebListener":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()