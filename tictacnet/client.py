"""The game client's connection to the server and its message handling."""

from __future__ import annotations

import ipaddress
import logging
import socket
from typing import Any

from .board import ROWS

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "BUFFER_SIZE", "ClientSocket"]

log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 0o5213
BUFFER_SIZE = 512

_CELLS = frozenset(f"{row}{col}" for row in ROWS for col in "123")


def _char(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


class ClientSocket:
    """A TCP connection to the game server."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        ipaddress.IPv4Address(host)  # raises ValueError for anything else
        self.address = (host, port)
        self.index = -1
        self.can_play = False
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)

    def connect(self) -> None:
        """Connect to the server."""
        try:
            self._sock.connect(self.address)
        except OSError:
            self._sock.close()
            raise

    def send_info(self, message: str | bytes) -> None:
        """Send a message; a failure closes the socket and is raised."""
        data = message.encode("latin-1") if isinstance(message, str) else bytes(message)
        try:
            self._sock.sendall(data)
        except OSError:
            self._sock.close()
            raise

    def shut_down(self) -> None:
        """Stop sending; a failure closes the socket and is raised."""
        try:
            self._sock.shutdown(socket.SHUT_WR)
        except OSError:
            self._sock.close()
            raise

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()

    def __enter__(self) -> "ClientSocket":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def receive_info(self, game: Any, panel: Any) -> bytes:
        """Read one message and act on it; returns it, empty when the peer closed."""
        data = self._sock.recv(BUFFER_SIZE)
        if data:
            log.debug("bytes received: %d", len(data))
            self.handle_message(data, game, panel)
        else:
            log.debug("connection closed")
        return data

    def handle_message(self, data: str | bytes, game: Any, panel: Any) -> None:
        """Act on a server message.

        The first message's first character gives this client's index.
        "player1"/"player2" followed by a name sets that player's name; a
        second character "S" or "P" asks the client to say what it is; a cell
        name followed by a token records a move, and a "1" or "2" at offset 9
        names the winner.
        """
        text = data.decode("latin-1") if isinstance(data, (bytes, bytearray)) else data
        if not text:
            return

        if self.index == -1:
            self.index = ord(text[0]) - ord("0")

        head = text[:7]
        for slot, prefix in enumerate(("player1", "player2")):
            if head == prefix:
                name = text[7:]
                if name:
                    panel.set_name(name, slot)
                    self.can_play = True

        role = _char(text, 1)
        if role == "S":
            self.send_info("I'm spectator")
        elif role == "P":
            self.send_info(f"I'm player {self.index}")

        pos = text[:2]
        if pos in _CELLS:
            game.switch_player()
            game.apply_move(pos, _char(text, 2))
            winner = _char(text, 9)
            if winner in ("1", "2"):
                panel.render_winner(int(winner))
                game.reset()