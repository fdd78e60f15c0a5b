import io

import pytest

from clichess.board import Board, Color, Move
from clichess.game import Game, main, move_to_str, parse_move, square_name


def play(script):
    out = io.StringIO()
    game = Game(stdin=io.StringIO(script), stdout=out)
    game.run()
    return game, out.getvalue()


@pytest.mark.parametrize("text", ["e2e4", "a7a8q", "h1h8"])
def test_parse_round_trip(text):
    assert move_to_str(parse_move(text)) == text


def test_parse_accepts_dash_spaces_and_case():
    assert move_to_str(parse_move("e7-e8q")) == "e7e8q"
    assert parse_move("E2 E4") == parse_move("e2e4")


def test_parse_ignores_unknown_promotion_letter():
    assert parse_move("e7e8k").promotion is None
    assert parse_move("e7e8n").promotion == "n"


@pytest.mark.parametrize("text", ["e2", "e9e4", "i2e4", "", "quit"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_parsed_move_matches_generated_move():
    assert parse_move("e2e4") in Board().generate_moves(Color.WHITE)
    assert parse_move("g8f6") in Board().generate_moves(Color.BLACK)


def test_square_name_and_parse_agree():
    move = parse_move("b1c3")
    assert square_name(move.from_row, move.from_col) == "b1"
    assert square_name(move.to_row, move.to_col) == "c3"


def test_move_to_str_lowercases_promotion():
    move = parse_move("a7a8")
    assert move_to_str(Move(move.from_row, move.from_col, move.to_row, move.to_col, "Q")) == "a7a8q"


def test_run_plays_move_then_quits():
    game, output = play("\ne2e4\nquit\n")
    assert game.board.side_to_move is Color.BLACK
    assert game.board.piece_at(4, 4) == "P"
    assert "Black to move" in output
    assert output.endswith("Game over.\n")


def test_run_reports_checkmate():
    _, output = play("\nf2f3\ne7e5\ng2g4\nd8h4\n")
    assert "White is checkmated." in output
    assert output.endswith("Game over.\n")


def test_run_rejects_illegal_and_malformed_moves():
    game, output = play("\ne2e5\nxyz\nquit\n")
    assert "Illegal move. Type 'moves' to see legal moves." in output
    assert "Invalid format. Use e2e4 or e7-e8q, or type 'help'." in output
    assert game.board.side_to_move is Color.WHITE


def test_run_lists_moves_and_help():
    _, output = play("\nmoves\nhelp\nboard\nexit\n")
    assert "Legal moves (" in output
    assert "e2e4" in output
    assert "Help: Enter moves like e2e4 or e7-e8q." in output
    assert output.count("  a b c d e f g h") == 4


def test_run_stops_at_end_of_input():
    game, output = play("")
    assert output.endswith("Game over.\n")
    assert game.board.side_to_move is Color.WHITE


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\nquit\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Game over.\n")