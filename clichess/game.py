"""Interactive two-player game loop and move notation."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import TextIO

from clichess.board import Board, Color, Move

_PROMOTION_PIECES = "qrbn"
_WHITESPACE = " \t\r\n"
_COLOR_NAMES = {Color.WHITE: "White", Color.BLACK: "Black"}


def _valid_file(ch: str) -> bool:
    return "a" <= ch <= "h"


def _valid_rank(ch: str) -> bool:
    return "1" <= ch <= "8"


def square_name(row: int, col: int) -> str:
    """Return algebraic name of a square, e.g. (6, 4) -> 'e2'."""
    return f"{chr(ord('a') + col)}{chr(ord('1') + 7 - row)}"


def move_to_str(move: Move) -> str:
    """Return a move in coordinate notation such as 'e2e4' or 'e7e8q'."""
    text = square_name(move.from_row, move.from_col) + square_name(move.to_row, move.to_col)
    if move.promotion:
        text += move.promotion.lower()
    return text


def parse_move(text: str) -> Move:
    """Parse coordinate notation ('e2e4', 'e7-e8q', 'E2 E4'); raise ValueError if malformed."""
    cleaned = "".join(
        ch.lower() for ch in text if ch.isascii() and (ch.isalpha() or ch.isdigit())
    )
    if len(cleaned) < 4:
        raise ValueError(f"not a move: {text!r}")
    f1, r1, f2, r2 = cleaned[:4]
    if not (_valid_file(f1) and _valid_file(f2) and _valid_rank(r1) and _valid_rank(r2)):
        raise ValueError(f"not a move: {text!r}")
    promotion = None
    if len(cleaned) > 4 and cleaned[4] in _PROMOTION_PIECES:
        promotion = cleaned[4]
    return Move(
        from_row=7 - (ord(r1) - ord("1")),
        from_col=ord(f1) - ord("a"),
        to_row=7 - (ord(r2) - ord("1")),
        to_col=ord(f2) - ord("a"),
        promotion=promotion,
    )


class Game:
    """A local game between two players sharing one terminal."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.board = Board()
        self._in = stdin
        self._out = stdout

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def _readline(self) -> str | None:
        line = (self._in or sys.stdin).readline()
        return line if line else None

    def run(self) -> None:
        """Play until checkmate, stalemate, 'quit' or end of input."""
        self._write("CLI Chess — simple, local 1v1.\n")
        self._write(
            "Rules: no castling, no en-passant. Moves like e2e4 or e7-e8q for promotion.\n"
        )
        self._write("Commands: 'moves', 'board', 'help', 'quit'\n\n")
        self._write("Press Enter to start...\n")
        self._readline()

        self._write(self.board.render() + "\n")

        while True:
            to_move = self.board.side_to_move
            name = _COLOR_NAMES[to_move]
            legal = self.board.generate_moves(to_move)
            if not legal:
                if self.board.is_in_check(to_move):
                    self._write(f"{name} is checkmated.\n")
                else:
                    self._write("Stalemate.\n")
                break

            self._write(f"{name} to move. (type a move, 'moves', 'board', or 'help')\n> ")
            line = self._readline()
            if line is None:
                break
            cmd = line.strip(_WHITESPACE).lower()
            if not cmd:
                continue
            if cmd in ("quit", "exit"):
                break
            if cmd == "help":
                self._write(
                    "Help: Enter moves like e2e4 or e7-e8q.\n"
                    "Type 'moves' to list legal moves, 'board' to redraw the board, "
                    "'quit' to exit.\n"
                )
                continue
            if cmd == "board":
                self._write(self.board.render() + "\n")
                continue
            if cmd == "moves":
                listed = ", ".join(move_to_str(m) for m in legal)
                self._write(f"Legal moves ({len(legal)}): {listed}\n")
                continue

            try:
                wanted = parse_move(cmd)
            except ValueError:
                self._write("Invalid format. Use e2e4 or e7-e8q, or type 'help'.\n")
                continue

            match = next(
                (
                    m
                    for m in legal
                    if (m.from_row, m.from_col, m.to_row, m.to_col)
                    == (wanted.from_row, wanted.from_col, wanted.to_row, wanted.to_col)
                ),
                None,
            )
            if match is None:
                self._write("Illegal move. Type 'moves' to see legal moves.\n")
                continue
            if match.promotion and wanted.promotion:
                match = replace(match, promotion=wanted.promotion)
            self.board.make_move(match)
            self._write(self.board.render() + "\n")

        self._write("Game over.\n")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game on the terminal."""
    parser = argparse.ArgumentParser(prog="clichess", description="Local two-player chess.")
    parser.parse_args(argv)
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())