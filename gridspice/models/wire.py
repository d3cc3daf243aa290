"""
RenderedWire - Pure Python data model for a drawn wire segment.

This module contains no Qt dependencies. Points are stored as
tuples (x, y) in grid units rather than QPointF. Rendered wires are
display data only; connectivity lives in the WireGraph.
"""

from dataclasses import dataclass, field

from .grid import GridPosition


@dataclass
class RenderedWire:
    """
    An orthogonal wire as drawn by the user: start, elbow, end.
    """

    points: list[tuple[float, float]] = field(default_factory=list)

    @classmethod
    def from_positions(cls, *positions: GridPosition) -> "RenderedWire":
        """Build a rendered wire from grid positions."""
        return cls(points=[p.to_point() for p in positions])

    def contains(self, position: GridPosition) -> bool:
        """Check if one of this wire's points sits on the given grid position."""
        return position.to_point() in self.points

    def touches_any(self, positions) -> bool:
        """Check if any point of this wire is one of the given grid positions."""
        return any(self.contains(p) for p in positions)

    def to_dict(self) -> dict:
        return {"points": [list(p) for p in self.points]}

    def __repr__(self) -> str:
        return f"RenderedWire({' -> '.join(f'({x:g}, {y:g})' for x, y in self.points)})"
