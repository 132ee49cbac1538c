"""
Board module for Reversi.
Handles the cell grid, move validation, capturing and end-of-game detection.

The play area spans x in [1, width] and y in [1, height]. It is wrapped in a
one-cell ring of Border cells, so a neighbour lookup never needs a bounds
check: anything outside the grid comes back as None and is treated like Border.
"""
import logging
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .pieces import BORDER, PLAYABLE, Border, Cell, Occupied, Piece, Playable
from .point import Point

logger = logging.getLogger(__name__)

# The 8 compass offsets (dx, dy)
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Board:
    """
    Represents a Reversi board as a mapping from Point to Cell.

    Boards are treated as immutable snapshots: `place` returns a new board
    and leaves the original untouched. The board never tracks whose turn it
    is; every query takes the acting piece explicitly.
    """

    # Cell codes used by get_board_state()
    BORDER = -1
    PLAYABLE = 0
    BLACK = 1
    WHITE = 2

    def __init__(self, width: int = 8, height: int = 8):
        """
        Initialize a new board with the standard four-piece opening.

        Args:
            width: Number of playable columns (usually 8)
            height: Number of playable rows (usually 8)

        Raises:
            ValueError: If the dimensions leave no room for the opening pieces
        """
        self._init_grid(width, height)

        cx, cy = width // 2, height // 2
        self._cells[Point(cx, cy)] = Occupied(Piece.WHITE)
        self._cells[Point(cx + 1, cy)] = Occupied(Piece.BLACK)
        self._cells[Point(cx, cy + 1)] = Occupied(Piece.BLACK)
        self._cells[Point(cx + 1, cy + 1)] = Occupied(Piece.WHITE)

    def _init_grid(self, width: int, height: int) -> None:
        """Lay out the bordered grid with an empty play area."""
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Board {name} must be an integer, got {value!r}")
            if value < 2:
                raise ValueError(f"Board {name} must be at least 2, got {value}")

        self.width = width
        self.height = height
        self._cells: Dict[Point, Cell] = {}
        for point in self.iter_points():
            self._cells[point] = PLAYABLE if self.in_play_area(point) else BORDER

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Mapping[Point, Cell]) -> 'Board':
        """
        Build a board from explicit cell contents instead of the opening.

        Cells not listed stay Playable (inside the play area) or Border.

        Args:
            width: Number of playable columns
            height: Number of playable rows
            cells: Contents to apply on top of the empty grid

        Returns:
            The new board

        Raises:
            ValueError: If a cell is outside the grid or would break the border ring
        """
        board = cls.__new__(cls)
        board._init_grid(width, height)
        for point, cell in cells.items():
            if point not in board._cells:
                raise ValueError(f"{point} is outside a {width}x{height} board")
            if isinstance(cell, Border) != (not board.in_play_area(point)):
                raise ValueError(f"Border cells must form the ring around the play area, got {cell} at {point}")
            board._cells[point] = cell
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board.__new__(Board)
        new_board.width = self.width
        new_board.height = self.height
        new_board._cells = dict(self._cells)
        return new_board

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def iter_points(self) -> Iterator[Point]:
        """Yield every coordinate, border included, in row-major order."""
        for y in range(self.height + 2):
            for x in range(self.width + 2):
                yield Point(x, y)

    def iter_cells(self) -> Iterator[Tuple[Point, Cell]]:
        """Yield (point, cell) pairs in row-major order."""
        for point in self.iter_points():
            yield point, self._cells[point]

    def in_play_area(self, point: Point) -> bool:
        return 1 <= point.x <= self.width and 1 <= point.y <= self.height

    def get_cell(self, point: Point) -> Optional[Cell]:
        """Get the cell at `point`, or None if the point is off the grid."""
        return self._cells.get(point)

    # ------------------------------------------------------------------
    # Move validation and capturing
    # ------------------------------------------------------------------

    def _is_playable(self, point: Point) -> bool:
        return isinstance(self.get_cell(point), Playable)

    def _is_next_to_piece(self, point: Point) -> bool:
        return any(isinstance(self.get_cell(point.offset(dx, dy)), Occupied) for dx, dy in DIRECTIONS)

    def _extract_line(self, origin: Point, dx: int, dy: int) -> List[Tuple[Point, Piece]]:
        """Collect the unbroken run of pieces starting one step from `origin`."""
        line = []
        point = origin.offset(dx, dy)
        while True:
            cell = self.get_cell(point)
            if not isinstance(cell, Occupied):
                # Playable, Border or off the grid all end the line
                break
            line.append((point, cell.piece))
            point = point.offset(dx, dy)
        return line

    @staticmethod
    def _capturable(line: List[Tuple[Point, Piece]], piece: Piece) -> List[Point]:
        """
        Return the opposite-colored prefix of `line` if it is closed by `piece`.

        An empty list means nothing in this direction can be captured: either
        the first piece already belongs to the mover, or the line ends before
        reaching one of the mover's pieces.
        """
        run = []
        for point, this_piece in line:
            if this_piece is piece:
                return run
            run.append(point)
        return []

    def _capture_runs(self, piece: Piece, point: Point) -> List[List[Point]]:
        """Get the non-empty capturable run for every direction from `point`."""
        if not self._is_playable(point) or not self._is_next_to_piece(point):
            return []

        runs = []
        for dx, dy in DIRECTIONS:
            run = self._capturable(self._extract_line(point, dx, dy), piece)
            if run:
                runs.append(run)
        return runs

    def can_place(self, piece: Piece, point: Point) -> bool:
        """
        Check whether `piece` may be placed at `point`.

        Off-grid, border and occupied points are never placeable.
        """
        return bool(self._capture_runs(piece, point))

    def flips(self, piece: Piece, point: Point) -> List[Point]:
        """
        Get the pieces that placing `piece` at `point` would flip.

        Returns:
            Points of the captured pieces, empty if the move is illegal
        """
        return [p for run in self._capture_runs(piece, point) for p in run]

    def place(self, piece: Piece, point: Point) -> 'Board':
        """
        Place a piece and flip everything it captures.

        Args:
            piece: The piece being placed
            point: Where to place it

        Returns:
            A new board with the move applied, or this same board unchanged
            if the move is illegal
        """
        captured = self.flips(piece, point)
        if not captured:
            logger.debug("Ignoring illegal move %s at %s", piece, point)
            return self

        board = self.copy()
        board._cells[point] = Occupied(piece)
        for p in captured:
            board._cells[p] = Occupied(piece)

        logger.debug("%s placed at %s, flipped %d", piece, point, len(captured))
        return board

    def valid_moves(self, piece: Piece) -> List[Point]:
        """Get every point where `piece` can be placed, in row-major order."""
        return [point for point in self.iter_points() if self.can_place(piece, point)]

    def is_skip(self, piece: Piece) -> bool:
        """Check whether `piece` has no legal move anywhere on the board."""
        return not any(self.can_place(piece, point) for point in self.iter_points())

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------

    def is_end(self) -> bool:
        """
        Check if the game is over.

        The game ends when no Playable cell is left or when only one color
        remains on the board. A position where neither side can move but
        empty cells remain is not treated as the end here.
        """
        return self._is_full() or self._is_one_color()

    def _is_full(self) -> bool:
        return not any(isinstance(cell, Playable) for _, cell in self.iter_cells())

    def _is_one_color(self) -> bool:
        seen = set()
        for _, cell in self.iter_cells():
            if isinstance(cell, Occupied):
                seen.add(cell.piece)
                if len(seen) == 2:
                    return False
        return True

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_count, white_count)
        """
        black_count = 0
        white_count = 0
        for _, cell in self.iter_cells():
            if isinstance(cell, Occupied):
                if cell.piece is Piece.BLACK:
                    black_count += 1
                else:
                    white_count += 1
        return black_count, white_count

    def get_winner(self) -> Optional[Piece]:
        """
        Get the color with more pieces on the board.

        Returns:
            Piece.BLACK or Piece.WHITE, or None for a tie
        """
        black_count, white_count = self.get_score()
        if black_count > white_count:
            return Piece.BLACK
        if white_count > black_count:
            return Piece.WHITE
        return None

    # ------------------------------------------------------------------
    # Display and export
    # ------------------------------------------------------------------

    def get_board_state(self) -> np.ndarray:
        """
        Get the board as a numpy array indexed [y, x].

        Returns:
            (height + 2, width + 2) int array of BORDER, PLAYABLE, BLACK and WHITE codes
        """
        state = np.full((self.height + 2, self.width + 2), self.BORDER, dtype=int)
        for point, cell in self.iter_cells():
            if isinstance(cell, Occupied):
                state[point.y, point.x] = self.BLACK if cell.piece is Piece.BLACK else self.WHITE
            elif isinstance(cell, Playable):
                state[point.y, point.x] = self.PLAYABLE
        return state

    def render(self) -> str:
        """
        Render the board as text, one glyph per cell, border included.

        The first line holds the column indices; every following line starts
        with its row index. Cells are separated by '|'.
        """
        lines = [' |' + ''.join(f"{x}|" for x in range(self.width + 2))]
        row: List[str] = []
        for point, cell in self.iter_cells():
            row.append(f"{cell.glyph}|")
            if point.x == self.width + 1:
                lines.append(f"{point.y}|" + ''.join(row))
                row = []
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        black_count, white_count = self.get_score()
        return f"Board(width={self.width}, height={self.height}, black={black_count}, white={white_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.height, self._cells) == (other.width, other.height, other._cells)

    __hash__ = None  # type: ignore[assignment]
