"""
Shared test fixtures for the gridspice test suite.

All fixtures build pure-Python model objects (no Qt dependencies).
"""

import sys
from pathlib import Path

# Ensure the repository root is on sys.path so `import gridspice` works when
# running individual test files (e.g., python -m pytest gridspice/tests/unit/test_foo.py).
_root_dir = str(Path(__file__).resolve().parent.parent.parent)
if _root_dir not in sys.path:
    sys.path.insert(0, _root_dir)

import pytest
from gridspice.models.circuit import CircuitModel
from gridspice.models.element import ElementData, ElementKind
from gridspice.models.grid import GRID_SIZE, GridPosition


def P(x, y):
    """Shorthand for GridPosition(x, y)."""
    return GridPosition(x, y)


def scene(x, y):
    """Scene point (pixels) of a grid position."""
    return (float(x * GRID_SIZE), float(y * GRID_SIZE))


def make_element(kind, grid_center=(0, 0), rotation=0.0, value=None, element_id=0):
    """Helper to create an ElementData centered on a grid position."""
    return ElementData(
        kind=kind,
        position=scene(*grid_center),
        rotation=rotation,
        value=value,
        element_id=element_id,
    )


@pytest.fixture
def model():
    return CircuitModel()


@pytest.fixture
def divider_model():
    """
    V0 -- R1 -- R2 -- GND

    Grid layout (grid units, rotation 0 so terminals sit at center -/+ 2 in x):
        V0 center (2, 0): terminals (0, 0) and (4, 0)
        R1 center (8, 0): terminals (6, 0) and (10, 0)
        R2 center (14, 0): terminals (12, 0) and (16, 0)
        GND center (0, 5): terminal (0, 4)

    Wires: (4,0)-(6,0), (10,0)-(12,0), (16,0)-(16,4)-(0,4), (0,0)-(0,4)
    """
    m = CircuitModel()
    m.add_element(ElementKind.DC_VOLTAGE_SOURCE, scene(2, 0), value=10.0)
    m.add_element(ElementKind.RESISTOR, scene(8, 0), value=1000.0)
    m.add_element(ElementKind.RESISTOR, scene(14, 0), value=1000.0)
    m.add_element(ElementKind.GROUND, scene(0, 5))
    m.route(P(4, 0), P(6, 0), True)
    m.route(P(10, 0), P(12, 0), True)
    m.route(P(16, 0), P(0, 4), False)
    m.route(P(0, 0), P(0, 4), False)
    return m
