"""
ElementData - Pure Python data model for placed schematic elements.

This module contains no Qt dependencies. Scene positions are represented
as tuples (x, y) in pixels; terminal positions are snapped to the grid
once, when the element is built.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .grid import GRID_SIZE, GridPosition
from .units import parse_value

# Default value given to a freshly placed element
DEFAULT_ELEMENT_VALUE = 10.0

# Placement rectangle used when the caller gives no explicit size
DEFAULT_ELEMENT_SIZE = (128.0, 62.5)

# Terminal offsets from the element center (scene pixels, before rotation)
GROUND_TERMINAL_OFFSET = (0.0, 16.0)
TWO_TERMINAL_OFFSET = (32.0, 0.0)


class ElementKind(Enum):
    """Kinds of element the editor can place."""

    GROUND = "Ground"
    RESISTOR = "Resistor"
    DC_VOLTAGE_SOURCE = "DC Voltage Source"
    DC_CURRENT_SOURCE = "DC Current Source"
    CAPACITOR = "Capacitor"
    INDUCTOR = "Inductor"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def unit_name(self) -> Optional[str]:
        return _UNIT_NAMES.get(self)

    @property
    def unit_symbol(self) -> Optional[str]:
        return _UNIT_SYMBOLS.get(self)

    @property
    def spice_symbol(self) -> str:
        return _SPICE_SYMBOLS[self]

    @property
    def terminal_count(self) -> int:
        return 1 if self is ElementKind.GROUND else 2

    @property
    def has_value(self) -> bool:
        return self is not ElementKind.GROUND

    @property
    def has_bias_current(self) -> bool:
        """Whether the solver needs an extra branch-current unknown for this kind."""
        return self in (ElementKind.DC_VOLTAGE_SOURCE, ElementKind.INDUCTOR)

    @property
    def default_value(self) -> Optional[float]:
        return DEFAULT_ELEMENT_VALUE if self.has_value else None


_UNIT_NAMES = {
    ElementKind.RESISTOR: "Resistance",
    ElementKind.DC_VOLTAGE_SOURCE: "Voltage",
    ElementKind.DC_CURRENT_SOURCE: "Current",
    ElementKind.CAPACITOR: "Capacitance",
    ElementKind.INDUCTOR: "Inductance",
}

_UNIT_SYMBOLS = {
    ElementKind.RESISTOR: "Ω",
    ElementKind.DC_VOLTAGE_SOURCE: "V",
    ElementKind.DC_CURRENT_SOURCE: "A",
    ElementKind.CAPACITOR: "F",
    ElementKind.INDUCTOR: "H",
}

_SPICE_SYMBOLS = {
    ElementKind.GROUND: "GND",
    ElementKind.RESISTOR: "R",
    ElementKind.DC_VOLTAGE_SOURCE: "V",
    ElementKind.DC_CURRENT_SOURCE: "I",
    ElementKind.CAPACITOR: "C",
    ElementKind.INDUCTOR: "L",
}


def _rotate(vector: tuple[float, float], degrees: float) -> tuple[float, float]:
    rad = math.radians(degrees)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    x, y = vector
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def terminal_positions(kind: ElementKind, center: tuple[float, float], rotation: float,
                       grid_size: int = GRID_SIZE) -> list[GridPosition]:
    """
    Compute the grid positions of an element's terminals.

    Ground has one terminal above its center; every other kind has two
    terminals, left and right of center. Offsets are rotated with the
    element before snapping.

    Args:
        kind: The element kind.
        center: Element center in scene pixels.
        rotation: Display rotation in degrees.
        grid_size: Pixels per grid unit.

    Returns:
        List of terminal GridPositions (1 for Ground, 2 otherwise).
    """
    cx, cy = center
    if kind is ElementKind.GROUND:
        dx, dy = _rotate(GROUND_TERMINAL_OFFSET, rotation)
        return [GridPosition.from_point(cx - dx, cy - dy, grid_size)]

    dx, dy = _rotate(TWO_TERMINAL_OFFSET, rotation)
    return [
        GridPosition.from_point(cx - dx, cy - dy, grid_size),
        GridPosition.from_point(cx + dx, cy + dy, grid_size),
    ]


@dataclass
class ElementData:
    """
    Pure Python data class representing a placed element.

    Terminals are derived from kind, position and rotation in
    __post_init__ and are not recomputed afterwards.
    """

    kind: ElementKind
    position: tuple[float, float]  # (x, y) center in scene coordinates
    rotation: float = 0.0  # degrees
    value: Optional[float] = None
    size: tuple[float, float] = DEFAULT_ELEMENT_SIZE
    element_id: int = 0  # assigned by ElementRegistry
    terminals: list[GridPosition] = field(default_factory=list)

    def __post_init__(self):
        """Fill in the default value and compute terminal positions."""
        if not self.kind.has_value:
            self.value = None
        elif self.value is None:
            self.value = self.kind.default_value
        if not self.terminals:
            self.terminals = terminal_positions(self.kind, self.position, self.rotation)

    def set_value(self, value) -> bool:
        """
        Set the element's numeric value.

        Accepts floats or strings with SI prefixes ("4.7k").

        Returns:
            False for Ground, which carries no value.

        Raises:
            ValueError: If a string value cannot be parsed.
        """
        if not self.kind.has_value:
            return False
        self.value = parse_value(value)
        return True

    def rotated(self, quarter_turns: int = 1) -> "ElementData":
        """Return a copy rotated by 90 degree steps, with fresh terminals."""
        rotation = (self.rotation + 90.0 * quarter_turns) % 360.0
        return replace(self, rotation=rotation, terminals=[])

    def rect(self) -> tuple[float, float, float, float]:
        """Return the placement rectangle as (x, y, width, height)."""
        width, height = self.size
        return (self.position[0] - width / 2.0, self.position[1] - height / 2.0, width, height)

    def display_properties(self) -> Optional[tuple[str, str, str, float]]:
        """
        Return (title, unit name, unit symbol, value) for the property panel.

        Ground has no editable properties and returns None.
        """
        if not self.kind.has_value:
            return None
        return (
            f"{self.kind.display_name} Properties",
            self.kind.unit_name,
            self.kind.unit_symbol,
            self.value,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.element_id,
            "kind": self.kind.value,
            "value": self.value,
            "pos": {"x": self.position[0], "y": self.position[1]},
            "rotation": self.rotation,
            "terminals": [[t.x, t.y] for t in self.terminals],
        }

    def __repr__(self) -> str:
        return (
            f"ElementData(id={self.element_id}, kind={self.kind.name}, "
            f"value={self.value!r}, pos={self.position}, rot={self.rotation})"
        )
