"""
Test script for the Reversi turn loop.
"""
from reversi.config import get_default_config
from reversi.game import Piece, Point, ReversiGame, run_console

WHITE_SKIPS = """
     |0|1|2|3|4|5|6|7|8|9|
    0|×|×|×|×|×|×|×|×|×|×|
    1|×| | | | |●|●|●|●|×|
    2|×| | | | |●|●|●|●|×|
    3|×| | | | |●|●|●|●|×|
    4|×| | | |○|●|●|●|●|×|
    5|×| | | |●|●|●|●|●|×|
    6|×| | | |●|●|●|●|●|×|
    7|×| | | |●|●|●|●|●|×|
    8|×| | | |●|●|●|●|●|×|
    9|×|×|×|×|×|×|×|×|×|×|
"""

# Neither side can place, but the board is neither full nor one color.
DEADLOCK = """
     |0|1|2|3|4|5|
    0|×|×|×|×|×|×|
    1|×|●| | |○|×|
    2|×| | | | |×|
    3|×| | | | |×|
    4|×| | | | |×|
    5|×|×|×|×|×|×|
"""

# Black wipes out White with (3, 1).
ONE_MOVE_LEFT = """
     |0|1|2|3|4|5|
    0|×|×|×|×|×|×|
    1|×|●|○| | |×|
    2|×| | | | |×|
    3|×| | | | |×|
    4|×| | | | |×|
    5|×|×|×|×|×|×|
"""


def scripted(*answers):
    """Build an input function that replays `answers` in order."""
    remaining = list(answers)

    def input_fn(prompt):
        return remaining.pop(0)
    return input_fn


def test_initial_game():
    game = ReversiGame()

    assert game.current_player is Piece.BLACK, "Black moves first"
    assert game.board.get_score() == (2, 2)
    assert not game.is_over()
    assert "Current player: Black" in str(game)
    assert "Score - Black: 2, White: 2" in str(game)


def test_first_player_from_config():
    config = get_default_config()
    config.play.first_player = "white"
    config.board.width = 6
    config.board.height = 6

    game = ReversiGame(config)
    assert game.current_player is Piece.WHITE
    assert game.board.width == 6


def test_play_move_switches_player():
    game = ReversiGame()

    assert game.play_move(Point(3, 4)), "Should be a valid move"
    assert game.current_player is Piece.WHITE, "Should be white's turn"
    assert game.board.get_score() == (4, 1)

    assert not game.play_move(Point(1, 1))
    assert game.current_player is Piece.WHITE
    assert game.board.get_score() == (4, 1)


def test_reset():
    game = ReversiGame()
    game.play_move(Point(3, 4))
    game.reset()

    assert game.current_player is Piece.BLACK
    assert game.board.get_score() == (2, 2)


def test_advance_skip(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(WHITE_SKIPS)
    game.current_player = Piece.WHITE

    assert game.advance_skip()
    assert game.current_player is Piece.BLACK
    assert not game.advance_skip()
    assert game.current_player is Piece.BLACK


def test_deadlock_is_not_over_by_default(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(DEADLOCK)

    assert game.is_deadlocked()
    assert not game.is_over()

    game.config.play.end_on_double_pass = True
    assert game.is_over()


def test_result_message():
    game = ReversiGame()
    assert game.result_message() == "It's a draw!"

    game.play_move(Point(3, 4))
    assert game.result_message() == "Black wins!"


def test_console_game_to_the_end(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(ONE_MOVE_LEFT)
    output = []

    winner = run_console(game, scripted('3', '1'), output.append)

    assert winner is Piece.BLACK
    assert "Black placed at (3, 1)" in output
    assert output[-2:] == ["Game over", "Black wins!"]


def test_console_reprompts_on_malformed_input(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(ONE_MOVE_LEFT)
    output = []

    winner = run_console(game, scripted('abc', '3', 'one', '3', '1'), output.append)

    assert winner is Piece.BLACK
    assert "Invalid x value: 'abc'" in output
    assert "Invalid y value: 'one'" in output


def test_console_rejects_illegal_coordinates(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(ONE_MOVE_LEFT)
    output = []

    winner = run_console(game, scripted('1', '1', '-1', '7', '3', '1'), output.append)

    assert winner is Piece.BLACK
    assert "Cannot place at (1, 1)" in output
    assert "Cannot place at (-1, 7)" in output


def test_console_quit():
    game = ReversiGame()
    output = []

    assert run_console(game, scripted('q'), output.append) is None
    assert output[-1] == "Quit."

    output = []
    assert run_console(game, scripted('3', 'Q'), output.append) is None
    assert output[-1] == "Quit."
    assert game.board.get_score() == (2, 2)


def test_console_skips_player_without_moves(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(WHITE_SKIPS)
    game.current_player = Piece.WHITE
    output = []

    run_console(game, scripted('q'), output.append)

    assert "White has nowhere to place" in output
    assert "Black to move ('q' to quit)" in output


def test_console_stops_when_nobody_can_move(board_from_text):
    game = ReversiGame()
    game.board = board_from_text(DEADLOCK)
    output = []

    winner = run_console(game, scripted(), output.append)

    assert winner is None
    assert "Neither player can place a piece" in output
    assert output[-1] == "It's a draw!"


def test_console_double_pass_rule(board_from_text):
    game = ReversiGame()
    game.config.play.end_on_double_pass = True
    game.board = board_from_text(DEADLOCK)
    output = []

    run_console(game, scripted(), output.append)

    assert "Neither player can place a piece" not in output
    assert output[-2:] == ["Game over", "It's a draw!"]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__])
