"""
Board coordinates.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An (x, y) cell coordinate. Column x, row y, both counted from the border."""
    x: int
    y: int

    def offset(self, dx: int, dy: int, steps: int = 1) -> 'Point':
        """Return the point `steps` moves away in direction (dx, dy)."""
        return Point(self.x + dx * steps, self.y + dy * steps)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
