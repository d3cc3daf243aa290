"""
Pure Python data models for gridspice.

This package contains Qt-free data classes and graph algorithms for the
schematic: grid positions, the wire graph, wire routing, node grouping
and placed elements.
"""

from .circuit import CircuitModel
from .element import (
    DEFAULT_ELEMENT_VALUE,
    ElementData,
    ElementKind,
    terminal_positions,
)
from .grid import GRID_SIZE, GridPosition, step_range, step_range_inclusive
from .node_grouping import group_wires_into_nodes
from .registry import ElementRegistry
from .units import format_value, parse_value
from .wire import RenderedWire
from .wire_graph import WireGraph
from .wire_router import elbow_position, prefers_x_first, route_orthogonal

__all__ = [
    "CircuitModel",
    "ElementData",
    "ElementKind",
    "ElementRegistry",
    "DEFAULT_ELEMENT_VALUE",
    "GRID_SIZE",
    "GridPosition",
    "RenderedWire",
    "WireGraph",
    "elbow_position",
    "format_value",
    "group_wires_into_nodes",
    "parse_value",
    "prefers_x_first",
    "route_orthogonal",
    "step_range",
    "step_range_inclusive",
    "terminal_positions",
]
