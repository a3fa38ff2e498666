"""The playing screen: a board driven by mouse clicks and drawn with pygame."""

from __future__ import annotations

from typing import Any

import pygame

from .board import CELL_SIZE, SIZE, Board, Mark, cell_at
from .players import BLUE, GRID_SIZE, INFO_SIZE, RED, WHITE, WINDOW_SIZE

__all__ = ["WIN_MESSAGE", "Game"]

WIN_MESSAGE = "playerWin"
BLACK = (0, 0, 0)
_OUTLINE = 5


class Game(Board):
    """A board that sends this client's moves to the server."""

    def __init__(self, client: Any) -> None:
        super().__init__()
        self.client = client

    def _my_turn(self) -> bool:
        return (self.current is Mark.CROSS and self.client.index == 0) or (
            self.current is Mark.CIRCLE and self.client.index == 1
        )

    def handle_click(self, x: int, y: int) -> tuple[str, bool] | None:
        """Play the cell under a left click when it is this client's turn.

        The move's cell name is sent, followed by the win message when it wins.
        Returns the cell name and whether it won, or None when nothing was played.
        """
        if not self.client.can_play or not self._my_turn():
            return None
        where = cell_at(x, y)
        if where is None:
            return None
        result = self.place(*where)
        if result is None:
            return None
        name, won = result
        self.client.send_info(name)
        if won:
            self.client.send_info(WIN_MESSAGE)
        return result

    def render(self, surface: pygame.Surface, panel: Any) -> None:
        """Clear the surface and draw the grid, the marks and the player panel."""
        surface.fill(BLACK)
        for i in range(1, SIZE):
            x = i * GRID_SIZE // SIZE + INFO_SIZE
            pygame.draw.line(surface, WHITE, (x, 0), (x, GRID_SIZE))
            y = i * GRID_SIZE // SIZE
            pygame.draw.line(surface, WHITE, (INFO_SIZE, y), (WINDOW_SIZE, y))

        for row, cells in enumerate(self.cells):
            for col, mark in enumerate(cells):
                if mark is Mark.CROSS:
                    self._draw_cross(surface, row, col)
                elif mark is Mark.CIRCLE:
                    self._draw_circle(surface, row, col)

        panel.draw(surface, self.current)

    @staticmethod
    def _draw_cross(surface: pygame.Surface, row: int, col: int) -> None:
        left = col * CELL_SIZE + INFO_SIZE
        right = (col + 1) * CELL_SIZE + INFO_SIZE
        top = row * CELL_SIZE
        bottom = (row + 1) * CELL_SIZE
        pygame.draw.line(surface, RED, (left, top), (right, bottom))
        pygame.draw.line(surface, RED, (right, top), (left, bottom))

    @staticmethod
    def _draw_circle(surface: pygame.Surface, row: int, col: int) -> None:
        radius = CELL_SIZE // 2 - _OUTLINE
        left = col * CELL_SIZE + INFO_SIZE
        top = row * CELL_SIZE
        pygame.draw.circle(surface, BLUE, (left + radius, top + radius), radius + _OUTLINE)