"""Side panel showing both players' names and whose turn it is."""

from __future__ import annotations

from typing import Any

import pygame

__all__ = [
    "INFO_SIZE",
    "GRID_SIZE",
    "WINDOW_SIZE",
    "RED",
    "BLUE",
    "GREEN",
    "WHITE",
    "PlayerPanel",
]

INFO_SIZE = 200
GRID_SIZE = 600
WINDOW_SIZE = GRID_SIZE + INFO_SIZE

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)

FONT_FILE = "OpenSans-SemiBold.ttf"
FONT_SIZE = 24
_OUTLINE = 5


def _is_cross(current: Any) -> bool:
    name = getattr(current, "name", current)
    return str(name).lower() == "cross"


class PlayerPanel:
    """Names of the two players and the marks they play."""

    def __init__(self) -> None:
        self.player1_name = "Player 1"
        self.player2_name = "Player 2"
        self.player1_pos = (2, 2)
        self.player2_pos = (2, GRID_SIZE - 40)
        self.player1_color = WHITE
        self.player2_color = WHITE
        self.pos1 = float(GRID_SIZE - 40)
        self.pos2 = 2.0
        self._font: pygame.font.Font | None = None

    def set_name(self, name: str, index: int) -> None:
        """Set the name of player 0 or player 1; other indexes are ignored."""
        if index == 0:
            self.player1_name = name
        elif index == 1:
            self.player2_name = name

    def render_winner(self, player_id: int) -> None:
        """Move the winner's marker; ids are 1 and 2."""
        if player_id == 1:
            self.pos1 = float(GRID_SIZE - 40 // 2)
        elif player_id == 2:
            self.pos2 = float(GRID_SIZE - 40 // 2)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(FONT_FILE, FONT_SIZE)
            except (OSError, FileNotFoundError):
                font = pygame.font.Font(None, FONT_SIZE)
            font.set_bold(True)
            self._font = font
        return self._font

    def draw(self, surface: pygame.Surface, current: Any) -> None:
        """Draw both names, highlighting the player whose turn it is."""
        if _is_cross(current):
            self.player1_color, self.player2_color = GREEN, WHITE
        else:
            self.player1_color, self.player2_color = WHITE, GREEN

        font = self._get_font()
        surface.blit(font.render(self.player1_name, True, self.player1_color), self.player1_pos)

        pygame.draw.line(surface, RED, (40, 40), (60, 60))
        pygame.draw.line(surface, RED, (40, 60), (60, 40))

        surface.blit(font.render(self.player2_name, True, self.player2_color), self.player2_pos)

        radius = GRID_SIZE // 32
        left, top = 40, GRID_SIZE - 60
        pygame.draw.circle(surface, BLUE, (left + radius, top + radius), radius + _OUTLINE)