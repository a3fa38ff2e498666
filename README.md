# tictacnet

Pieces of a two-player tic-tac-toe game played over TCP: the board and its
rules, the client's connection to the game server and the handling of what
the server sends, and pygame drawing of the grid and the player panel. A small
`tictacnet.jsonkit` sub-package holds helpers for writing JSON output.

## Cells

Cells are named by row letter and column number:

```
A1 | A2 | A3
---+----+---
B1 | B2 | B3
---+----+---
C1 | C2 | C3
```

These names are what travels over the wire.

## The board

`tictacnet.board` needs no window or network:

```python
from tictacnet.board import Board, Mark, cell_name, cell_at

board = Board()
board.apply_move("A1", "1")   # "1" places a cross, anything else a circle
board.apply_move("B2", "1")
board.apply_move("C3", "1")
board.check_winner()          # True; a win also empties the board

cell_name(0, 0)               # "A1"
cell_at(250, 50)              # (0, 0): window point to (row, col), None off the grid
```

- `Board.current` is the mark whose turn it is (`Mark.CROSS` first).
- `Board.place(row, col)` puts the current mark on an empty cell and returns
  the cell's name and whether the move won, or `None` if the cell is off the
  board or taken. It leaves `current` as it was; the turn is passed with
  `switch_player()`, which the client does when a move arrives from the server.
- Unknown cell names given to `apply_move` change nothing.

The window is 800 × 600 pixels: a 200-pixel panel on the left (`INFO_SIZE`)
and a 600-pixel grid (`GRID_SIZE`) of 200-pixel cells.

## The client connection

`tictacnet.client.ClientSocket(host="127.0.0.1", port=2699)` opens an IPv4
TCP socket; `connect()`, `send_info(message)`, `shut_down()` and `close()`
do what their names say, and it works as a context manager. Socket errors are
raised after the socket is closed.

`receive_info(game, panel)` reads up to 512 bytes and passes them to
`handle_message(data, game, panel)`, which:

- takes the first character of the first message as this client's `index`;
- on `player1<name>` or `player2<name>` sets that name on the panel and
  allows play (`can_play`);
- answers `"I'm spectator"` when the second character is `S`, and
  `"I'm player <index>"` when it is `P`;
- on a cell name followed by a token passes the turn and records the move,
  and when offset 9 holds `1` or `2` marks that player as winner and empties
  the board.

## The playing screen

`tictacnet.game.Game(client)` is a `Board` tied to a client.
`handle_click(x, y)` plays the cell under the point when play is allowed and
it is this client's turn (index 0 plays crosses, index 1 circles), sends the
cell name and, on a win, `"playerWin"`. `render(surface, panel)` draws the
grid, red crosses, blue circles and the panel onto a pygame surface.

`tictacnet.players.PlayerPanel` holds the two names (`set_name(name, index)`
with index 0 or 1) and `draw(surface, current)` shows them, highlighting in
green the player whose turn it is. It uses `OpenSans-SemiBold.ttf` from the
working directory when present and pygame's default font otherwise.

## Web listener

`tictacnet.weblistener.WebListener(host="127.0.0.1", port=5001)` binds and
listens on an IPv4 TCP socket. `receive_info()` accepts the next connection
and returns up to 512 bytes from it; `address` gives the bound host and port;
`close()` stops listening, and it works as a context manager.

## The JSON helpers

- `numfmt.to_chars(value)` — shortest text for a finite float that reads back
  exactly, always looking like a float; digit generation is in `grisu`
  (Grisu2) and `diyfp`.
- `orderedmap.OrderedMap` — a mapping that keeps insertion order; `insert`
  and `emplace` never replace an existing value, item assignment does.
- `binary.ByteContainer` — a `bytearray` with an optional numeric subtype.
- `adapters.output_adapter(target)` — a sink for output text: a string
  collector for `None`, a list adapter for a mutable sequence, a stream
  adapter for anything with `write`.

```python
from tictacnet.jsonkit.numfmt import to_chars

to_chars(0.1)      # "0.1"
to_chars(1e100)    # "1e+100"
to_chars(-0.0)     # "-0.0"
```

## What this package does not do

- There is no command to start the game, no window or event loop, and no
  start menu or name entry; the pieces above have to be driven by your own
  pygame code.
- Player names and victory counts are not saved anywhere.
- There is no game server; `ClientSocket` expects one to be running.
- `tictacnet.jsonkit` does not parse or serialise whole JSON documents.