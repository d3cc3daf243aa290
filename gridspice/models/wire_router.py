"""
Orthogonal wire routing on the schematic grid.

This module contains no Qt dependencies. A wire is drawn as an L shape:
one leg along the first axis up to an elbow, then a second leg to the
end point. Every unit step is folded into the WireGraph.
"""

import logging
from typing import Optional

from .grid import GridPosition, step_range, step_range_inclusive
from .wire import RenderedWire
from .wire_graph import WireGraph

logger = logging.getLogger(__name__)


def elbow_position(start: GridPosition, end: GridPosition, x_first: bool) -> GridPosition:
    """Return the corner of the L-shaped path between start and end."""
    if x_first:
        return GridPosition(end.x, start.y)
    return GridPosition(start.x, end.y)


def prefers_x_first(delta_x: float, delta_y: float) -> bool:
    """
    Pick the axis order from the pointer motion at the start of a drag.

    Horizontal-first when the motion is mostly horizontal.
    """
    return abs(delta_y) < abs(delta_x)


def _walk_axis(graph: WireGraph, previous: Optional[GridPosition], elbow: GridPosition,
               coordinates, x_axis: bool) -> Optional[GridPosition]:
    """Link each step of one leg to the step before it; return the last position."""
    for value in coordinates:
        if x_axis:
            position = GridPosition(value, elbow.y)
        else:
            position = GridPosition(elbow.x, value)

        if previous is None:
            graph.add_position(position)
        else:
            graph.link(previous, position)
        previous = position
    return previous


def route_orthogonal(graph: WireGraph, anchors: list[GridPosition],
                     start: GridPosition, end: GridPosition, x_first: bool) -> RenderedWire:
    """
    Fold an L-shaped wire from start to end into the graph.

    The end point is registered as an anchor before the start point;
    positions already anchored are not added twice. The first leg stops
    short of the elbow and the second leg starts on it, so the elbow is
    visited exactly once.

    Args:
        graph: Wire graph to extend in place.
        anchors: Anchor list to extend in place.
        start: First end point of the wire.
        end: Second end point of the wire.
        x_first: Walk along x before y when True.

    Returns:
        The RenderedWire (start, elbow, end) for display.
    """
    if end not in anchors:
        anchors.append(end)
    if start not in anchors:
        anchors.append(start)

    elbow = elbow_position(start, end, x_first)

    if x_first:
        previous = _walk_axis(graph, None, elbow, step_range(start.x, elbow.x), x_axis=True)
        _walk_axis(graph, previous, elbow, step_range_inclusive(elbow.y, end.y), x_axis=False)
    else:
        previous = _walk_axis(graph, None, elbow, step_range(start.y, elbow.y), x_axis=False)
        _walk_axis(graph, previous, elbow, step_range_inclusive(elbow.x, end.x), x_axis=True)

    logger.debug("Routed wire %s -> %s via %s (x_first=%s)", start, end, elbow, x_first)
    return RenderedWire.from_positions(start, elbow, end)
