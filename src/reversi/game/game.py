"""
Reversi game module.
Handles turn order and the console game loop on top of the Board.
"""
import logging
from typing import Callable, Optional

from ..config import Config, get_default_config
from .board import Board
from .pieces import Piece
from .point import Point

logger = logging.getLogger(__name__)


class ReversiGame:
    """
    Main game class for Reversi that tracks whose turn it is.

    The board itself is stateless about turns; this class owns that bookkeeping.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize a new Reversi game.

        Args:
            config: Configuration object (default: get_default_config())
        """
        self.config = config or get_default_config()
        self.reset()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board(self.config.board.width, self.config.board.height)
        self.current_player = Piece.from_name(self.config.play.first_player)

    def play_move(self, point: Point) -> bool:
        """
        Place a piece for the current player and pass the turn.

        Args:
            point: Where to place

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if not self.board.can_place(self.current_player, point):
            return False

        self.board = self.board.place(self.current_player, point)
        self.current_player = self.current_player.opposite()
        return True

    def advance_skip(self) -> bool:
        """Pass the turn if the current player has no legal move. Returns True if it did."""
        if self.board.is_end() or not self.board.is_skip(self.current_player):
            return False

        logger.info("%s has no legal move, passing", self.current_player)
        self.current_player = self.current_player.opposite()
        return True

    def is_deadlocked(self) -> bool:
        """Check whether neither player can place a piece."""
        return self.board.is_skip(Piece.BLACK) and self.board.is_skip(Piece.WHITE)

    def is_over(self) -> bool:
        """Check if the game is over."""
        if self.board.is_end():
            return True
        return self.config.play.end_on_double_pass and self.is_deadlocked()

    def get_winner(self) -> Optional[Piece]:
        return self.board.get_winner()

    def result_message(self) -> str:
        winner = self.get_winner()
        if winner is None:
            return "It's a draw!"
        return f"{winner} wins!"

    def __str__(self) -> str:
        black, white = self.board.get_score()
        return "\n".join([
            self.board.render(),
            f"Current player: {self.current_player}",
            f"Score - Black: {black}, White: {white}",
        ])


def _read_axis(name: str, input_fn: Callable[[str], str], quit_command: str) -> Optional[int]:
    """Prompt for one coordinate. Returns None on the quit command."""
    text = input_fn(f"Enter the {name} coordinate: ").strip()
    if text.lower() == quit_command.lower():
        return None
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid {name} value: {text!r}") from None


def run_console(game: ReversiGame,
                input_fn: Optional[Callable[[str], str]] = None,
                output_fn: Optional[Callable[[str], None]] = None) -> Optional[Piece]:
    """
    Play a game on the console until it ends or the player quits.

    Args:
        game: The game to play
        input_fn: Reads one line of input given a prompt (default: input)
        output_fn: Writes one message (default: print)

    Returns:
        The winner, or None for a draw or an abandoned game
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    quit_command = game.config.play.quit_command
    output_fn(str(game))

    while not game.is_over():
        if game.advance_skip():
            output_fn(f"{game.current_player.opposite()} has nowhere to place")
            if game.board.is_skip(game.current_player):
                output_fn("Neither player can place a piece")
                break

        output_fn(f"{game.current_player} to move ('{quit_command}' to quit)")

        try:
            x = _read_axis('x', input_fn, quit_command)
            y = None if x is None else _read_axis('y', input_fn, quit_command)
        except ValueError as e:
            output_fn(str(e))
            continue

        if x is None or y is None:
            logger.info("Game abandoned")
            output_fn("Quit.")
            return None

        point = Point(x, y)
        player = game.current_player
        if game.play_move(point):
            output_fn(f"{player} placed at {point}")
            output_fn(str(game))
        else:
            output_fn(f"Cannot place at {point}")

    black, white = game.board.get_score()
    logger.info("Game over: Black %d - White %d", black, white)
    output_fn("Game over")
    output_fn(game.result_message())
    return game.get_winner()
