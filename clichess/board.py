"""Board state, move generation and check detection."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

BOARD_SIZE = 8
EMPTY = "."

_START_ROWS = (
    "rnbqkbnr",
    "pppppppp",
    "........",
    "........",
    "........",
    "........",
    "PPPPPPPP",
    "RNBQKBNR",
)

_KNIGHT_DIRS = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
_BISHOP_DIRS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_ROOK_DIRS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_KING_DIRS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))

_SLIDER_DIRS = {
    "b": _BISHOP_DIRS,
    "r": _ROOK_DIRS,
    "q": _BISHOP_DIRS + _ROOK_DIRS,
}


class Color(enum.Enum):
    """Side of a piece or of the player to move."""

    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> Color:
        """Return the other colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


@dataclass(frozen=True)
class Move:
    """A move from one square to another, with an optional promotion piece."""

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    promotion: str | None = None


def on_board(row: int, col: int) -> bool:
    """Whether the coordinates lie on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_white_piece(piece: str) -> bool:
    return "A" <= piece <= "Z"


def is_black_piece(piece: str) -> bool:
    return "a" <= piece <= "z"


def is_empty(piece: str) -> bool:
    return piece == EMPTY


def _is_opponent(piece: str, piece_is_white: bool) -> bool:
    if is_empty(piece):
        return False
    return is_black_piece(piece) if piece_is_white else is_white_piece(piece)


class Board:
    """An 8x8 board; row 0 is rank 8 and column 0 is file a."""

    def __init__(self) -> None:
        self._squares: list[list[str]] = []
        self.side_to_move = Color.WHITE
        self.reset()

    def reset(self) -> None:
        """Set up the standard starting position with White to move."""
        self._squares = [list(row) for row in _START_ROWS]
        self.side_to_move = Color.WHITE

    def render(self) -> str:
        """Return the board as text, with file and rank labels."""
        files = "  a b c d e f g h"
        lines = [files]
        for row_index, row in enumerate(self._squares):
            rank = BOARD_SIZE - row_index
            lines.append(f"{rank} {' '.join(row)} {rank}")
        lines.append(files)
        lines.append("White to move" if self.side_to_move is Color.WHITE else "Black to move")
        return "\n".join(lines)

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        other = Board.__new__(Board)
        other._squares = [list(row) for row in self._squares]
        other.side_to_move = self.side_to_move
        return other

    def piece_at(self, row: int, col: int) -> str:
        """Return the piece letter on a square, or '.' when it is empty."""
        if not on_board(row, col):
            raise ValueError(f"square ({row}, {col}) is off the board")
        return self._squares[row][col]

    def place(self, row: int, col: int, piece: str) -> None:
        """Put a piece letter (or '.') on a square."""
        if not on_board(row, col):
            raise ValueError(f"square ({row}, {col}) is off the board")
        if len(piece) != 1 or not (piece == EMPTY or piece.lower() in "pnbrqk"):
            raise ValueError(f"invalid piece {piece!r}")
        self._squares[row][col] = piece

    def generate_moves(self, side: Color) -> list[Move]:
        """Return all moves for side that do not leave its own king in check."""
        legal = []
        for move in self._pseudo_moves(side):
            trial = self.copy()
            trial.make_move(move)
            if not trial.is_in_check(side):
                legal.append(move)
        return legal

    def is_in_check(self, color: Color) -> bool:
        """Whether the king of color is attacked; False if it has no king."""
        square = self._find_king(color)
        if square is None:
            return False
        return self._is_attacked(*square, color.opponent())

    def make_move(self, move: Move) -> None:
        """Play a move; any promotion becomes a queen. Passes the turn."""
        piece = self._squares[move.from_row][move.from_col]
        self._squares[move.to_row][move.to_col] = piece
        self._squares[move.from_row][move.from_col] = EMPTY
        if move.promotion:
            self._squares[move.to_row][move.to_col] = "Q" if is_white_piece(piece) else "q"
        self.side_to_move = self.side_to_move.opponent()

    def _pseudo_moves(self, side: Color) -> Iterator[Move]:
        for row, rank in enumerate(self._squares):
            for col, piece in enumerate(rank):
                if is_empty(piece):
                    continue
                white = is_white_piece(piece)
                if (side is Color.WHITE and not white) or (
                    side is Color.BLACK and not is_black_piece(piece)
                ):
                    continue
                kind = piece.lower()
                if kind == "p":
                    yield from self._pawn_moves(row, col, white)
                elif kind == "n":
                    yield from self._step_moves(row, col, white, _KNIGHT_DIRS)
                elif kind == "k":
                    yield from self._step_moves(row, col, white, _KING_DIRS)
                elif kind in _SLIDER_DIRS:
                    yield from self._sliding_moves(row, col, white, _SLIDER_DIRS[kind])

    def _sliding_moves(self, row, col, white, dirs) -> Iterator[Move]:
        for d_row, d_col in dirs:
            r, c = row + d_row, col + d_col
            while on_board(r, c):
                target = self._squares[r][c]
                if is_empty(target):
                    yield Move(row, col, r, c)
                else:
                    if _is_opponent(target, white):
                        yield Move(row, col, r, c)
                    break
                r += d_row
                c += d_col

    def _step_moves(self, row, col, white, dirs) -> Iterator[Move]:
        for d_row, d_col in dirs:
            r, c = row + d_row, col + d_col
            if not on_board(r, c):
                continue
            target = self._squares[r][c]
            if is_empty(target) or _is_opponent(target, white):
                yield Move(row, col, r, c)

    def _pawn_moves(self, row, col, white) -> Iterator[Move]:
        forward = -1 if white else 1
        start_row = 6 if white else 1
        last_row = 0 if white else BOARD_SIZE - 1
        one_step = row + forward
        if on_board(one_step, col) and is_empty(self._squares[one_step][col]):
            yield Move(row, col, one_step, col, "q" if one_step == last_row else None)
            if row == start_row:
                two_step = row + 2 * forward
                if on_board(two_step, col) and is_empty(self._squares[two_step][col]):
                    yield Move(row, col, two_step, col)
        for d_col in (-1, 1):
            r, c = row + forward, col + d_col
            if on_board(r, c) and _is_opponent(self._squares[r][c], white):
                yield Move(row, col, r, c, "q" if r == last_row else None)

    def _find_king(self, color: Color) -> tuple[int, int] | None:
        wanted = "K" if color is Color.WHITE else "k"
        for row, rank in enumerate(self._squares):
            for col, piece in enumerate(rank):
                if piece == wanted:
                    return row, col
        return None

    def _is_attacked(self, row: int, col: int, by: Color) -> bool:
        white = by is Color.WHITE

        def own(letter: str) -> str:
            return letter.upper() if white else letter

        pawn_dir = -1 if white else 1
        for d_col in (-1, 1):
            r, c = row + pawn_dir, col + d_col
            if on_board(r, c) and self._squares[r][c] == own("p"):
                return True

        for d_row, d_col in _KNIGHT_DIRS:
            r, c = row + d_row, col + d_col
            if on_board(r, c) and self._squares[r][c] == own("n"):
                return True

        for dirs, attackers in ((_BISHOP_DIRS, "bq"), (_ROOK_DIRS, "rq")):
            wanted = {own(letter) for letter in attackers}
            for d_row, d_col in dirs:
                r, c = row + d_row, col + d_col
                while on_board(r, c):
                    piece = self._squares[r][c]
                    if not is_empty(piece):
                        if piece in wanted:
                            return True
                        break
                    r += d_row
                    c += d_col

        for d_row, d_col in _KING_DIRS:
            r, c = row + d_row, col + d_col
            if on_board(r, c) and self._squares[r][c] == own("k"):
                return True

        return False