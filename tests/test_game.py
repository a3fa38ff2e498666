import pygame
import pytest

from tictacnet.board import CELL_SIZE, Mark
from tictacnet.game import WIN_MESSAGE, Game
from tictacnet.players import BLUE, INFO_SIZE, RED, WHITE, PlayerPanel


class _Client:
    def __init__(self, index=0, can_play=True):
        self.index = index
        self.can_play = can_play
        self.sent = []

    def send_info(self, message):
        self.sent.append(message)


def _point(row, col):
    return INFO_SIZE + col * CELL_SIZE + 10, row * CELL_SIZE + 10


def test_click_marks_cell_and_sends_name():
    client = _Client()
    game = Game(client)
    assert game.handle_click(*_point(0, 0)) == ("A1", False)
    assert game.cells[0][0] is Mark.CROSS
    assert client.sent == ["A1"]


def test_turn_is_handed_back_after_own_move():
    game = Game(_Client())
    game.handle_click(*_point(1, 1))
    assert game.current is Mark.CROSS


def test_circle_player_plays_on_its_turn():
    client = _Client(index=1)
    game = Game(client)
    game.current = Mark.CIRCLE
    assert game.handle_click(*_point(1, 2)) == ("B3", False)
    assert game.cells[1][2] is Mark.CIRCLE
    assert client.sent == ["B3"]


def test_not_my_turn_does_nothing():
    client = _Client(index=1)
    game = Game(client)
    assert game.handle_click(*_point(0, 0)) is None
    assert client.sent == []
    assert all(mark is Mark.NONE for row in game.cells for mark in row)


def test_cannot_play_before_allowed():
    client = _Client(can_play=False)
    game = Game(client)
    assert game.handle_click(*_point(0, 0)) is None
    assert client.sent == []


def test_click_on_panel_is_ignored():
    client = _Client()
    game = Game(client)
    assert game.handle_click(INFO_SIZE - 10, 10) is None
    assert client.sent == []


def test_taken_cell_is_ignored():
    client = _Client()
    game = Game(client)
    game.cells[0][0] = Mark.CIRCLE
    assert game.handle_click(*_point(0, 0)) is None
    assert client.sent == []
    assert game.cells[0][0] is Mark.CIRCLE


def test_winning_move_sends_win_and_clears():
    client = _Client()
    game = Game(client)
    game.cells[0][0] = Mark.CROSS
    game.cells[0][1] = Mark.CROSS
    assert game.handle_click(*_point(0, 2)) == ("A3", True)
    assert client.sent == ["A3", WIN_MESSAGE]
    assert all(mark is Mark.NONE for row in game.cells for mark in row)


def test_server_move_applies_to_game():
    game = Game(_Client())
    game.apply_move("C1", "2")
    assert game.cells[2][0] is Mark.CIRCLE


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((800, 600))


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_render_draws_grid_and_marks(surface):
    game = Game(_Client())
    game.cells[0][0] = Mark.CROSS
    game.cells[1][1] = Mark.CIRCLE
    game.render(surface, PlayerPanel())
    assert _rgb(surface, (INFO_SIZE + CELL_SIZE // 2, CELL_SIZE // 2)) == RED
    assert _rgb(surface, (INFO_SIZE + CELL_SIZE + CELL_SIZE // 2, CELL_SIZE + CELL_SIZE // 2)) == BLUE
    assert _rgb(surface, (INFO_SIZE + CELL_SIZE, 50)) == WHITE
    assert _rgb(surface, (INFO_SIZE + 2 * CELL_SIZE + 100, 100)) == (0, 0, 0)