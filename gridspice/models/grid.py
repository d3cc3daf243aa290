"""
GridPosition - Integer coordinates on the schematic grid.

This module contains no Qt dependencies. Scene points (pixels) are
represented as (x, y) float tuples and snapped to grid units here.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterator

# Scene pixels per grid unit
GRID_SIZE = 16


@dataclass(frozen=True, order=True)
class GridPosition:
    """An (x, y) pair of grid units. Immutable and hashable by value."""

    x: int
    y: int

    ZERO: ClassVar["GridPosition"]
    X: ClassVar["GridPosition"]
    Y: ClassVar["GridPosition"]
    NEG_X: ClassVar["GridPosition"]
    NEG_Y: ClassVar["GridPosition"]
    DIRECTIONS: ClassVar[tuple["GridPosition", ...]]

    @classmethod
    def from_point(cls, x: float, y: float, grid_size: int = GRID_SIZE) -> "GridPosition":
        """
        Snap a scene point to the nearest grid position.

        Args:
            x: Scene x coordinate in pixels.
            y: Scene y coordinate in pixels.
            grid_size: Pixels per grid unit.

        Returns:
            The GridPosition in grid units.
        """
        return cls(int(round(x / grid_size)), int(round(y / grid_size)))

    def to_point(self, grid_size: int = 1) -> tuple[float, float]:
        """Return this position as a float (x, y) tuple scaled by grid_size."""
        return (float(self.x * grid_size), float(self.y * grid_size))

    def __add__(self, other: "GridPosition") -> "GridPosition":
        return GridPosition(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "GridPosition") -> "GridPosition":
        return GridPosition(self.x - other.x, self.y - other.y)

    def __mod__(self, modulus: int) -> "GridPosition":
        return GridPosition(self.x % modulus, self.y % modulus)

    def __repr__(self) -> str:
        return f"GridPosition({self.x}, {self.y})"


GridPosition.ZERO = GridPosition(0, 0)
GridPosition.X = GridPosition(1, 0)
GridPosition.Y = GridPosition(0, 1)
GridPosition.NEG_X = GridPosition(-1, 0)
GridPosition.NEG_Y = GridPosition(0, -1)
GridPosition.DIRECTIONS = (GridPosition.X, GridPosition.Y, GridPosition.NEG_X, GridPosition.NEG_Y)


def _signed_step(start: int, end: int, step: int) -> int:
    if end > start:
        return step
    if end < start:
        return -step
    return 0


def step_range(start: int, end: int, step: int = 1) -> Iterator[int]:
    """
    Walk from start toward end, excluding end.

    The direction is taken from the sign of (end - start); equal values
    produce nothing.

    Examples: (0, 4) -> 0 1 2 3, (4, 0) -> 4 3 2 1, (0, 4, 2) -> 0 2
    """
    current = start
    delta = _signed_step(start, end, step)
    while (delta > 0 and current < end) or (delta < 0 and current > end):
        yield current
        current += delta


def step_range_inclusive(start: int, end: int, step: int = 1) -> Iterator[int]:
    """
    Walk from start toward end, including end.

    Equal values yield start once.

    Examples: (0, 4) -> 0 1 2 3 4, (4, 0, 2) -> 4 2 0
    """
    yield from step_range(start, end, step)
    yield end
