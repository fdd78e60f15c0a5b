# clichess

A two-player chess game for the terminal. Both players share the same
keyboard and take turns entering their moves.

## Installing

```
pip install .
```

## Playing

```
clichess
```

The same game also starts with `python -m clichess.game`. The command takes
no options apart from `--help`.

Press Enter to start. The board is drawn with White at the bottom and rank
and file labels around it. Uppercase letters are White's pieces and lowercase
letters are Black's. A `.` marks an empty square.

Enter a move as the square a piece moves from followed by the square it moves
to, for example `e2e4`. Case does not matter, and hyphens or spaces between
the squares are ignored, so `e2-e4` and `E2 E4` work too. A pawn that reaches
the last rank always becomes a queen; a trailing piece letter such as in
`e7e8q` is accepted, but the promoted piece is a queen whichever letter is
given.

Commands:

| Command          | Effect                                        |
|------------------|-----------------------------------------------|
| `moves`          | list every legal move for the player to move  |
| `board`          | draw the board again                          |
| `help`           | show a short reminder                         |
| `quit` / `exit`  | leave the game                                |

A move that is not in `e2e4` form is answered with "Invalid format", and a
well-formed move that is not legal with "Illegal move". The game ends in
checkmate or stalemate. It also ends when you quit or when input runs out.

## What it does not do

- No castling, no en passant, and no promotion to anything but a queen.
- No draws by repetition, the fifty-move rule or insufficient material.
- No computer opponent, clock, move history, or saving and loading of games.

## Using it as a library

```python
from clichess.board import Board, Color
from clichess.game import parse_move, move_to_str

board = Board()
moves = board.generate_moves(Color.WHITE)
print(len(moves))                      # 20
board.make_move(parse_move("e2e4"))
print(board.render())
print(board.is_in_check(Color.BLACK))  # False
print(move_to_str(moves[0]))
```

In `clichess.board`:

- `Board` holds an 8x8 position; row 0 is rank 8 and column 0 is file a.
  It has `reset()`, `render()`, `copy()`, `piece_at(row, col)`,
  `place(row, col, piece)`, `generate_moves(side)`, `is_in_check(color)`,
  `make_move(move)` and a `side_to_move` attribute. `piece_at` and `place`
  raise `ValueError` for squares off the board, and `place` also for
  anything other than a piece letter or `.`.
- `Move` is a frozen dataclass with `from_row`, `from_col`, `to_row`,
  `to_col` and `promotion`.
- `Color` has `WHITE` and `BLACK` and an `opponent()` method.
- `on_board`, `is_white_piece`, `is_black_piece` and `is_empty` are small
  helpers for coordinates and piece letters.

In `clichess.game`:

- `parse_move(text)` returns a `Move` and raises `ValueError` when the text
  is not a move in `e2e4` form.
- `move_to_str(move)` and `square_name(row, col)` give coordinate notation.
- `Game(stdin=None, stdout=None).run()` plays a game over the given text
  streams, or the terminal when none are given.
- `main(argv=None)` is the command's entry point.