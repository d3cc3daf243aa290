"""
CircuitModel - Central data store for schematic state.

This module contains no Qt dependencies. It holds the wire graph, the
wire anchors, the node groups derived from them, the rendered wires and
the placed elements, and provides the editing operations the canvas
calls into.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .element import DEFAULT_ELEMENT_SIZE, ElementData, ElementKind
from .grid import GridPosition
from .node_grouping import group_wires_into_nodes
from .registry import ElementRegistry
from .wire import RenderedWire
from .wire_graph import WireGraph
from .wire_router import route_orthogonal

logger = logging.getLogger(__name__)


@dataclass
class CircuitModel:
    """
    Central data store holding all schematic state.

    Every topology edit ends with a full regroup, so node_groups always
    partitions the positions reachable from the anchors.
    """

    wire_graph: WireGraph = field(default_factory=WireGraph)
    # Wire end points, used as seeds when grouping
    anchors: list[GridPosition] = field(default_factory=list)
    node_groups: list[frozenset[GridPosition]] = field(default_factory=list)
    rendered_wires: list[RenderedWire] = field(default_factory=list)
    registry: ElementRegistry = field(default_factory=ElementRegistry)

    # --- Wire operations ---

    def route(self, start: GridPosition, end: GridPosition, x_first: bool) -> RenderedWire:
        """Add an L-shaped wire from start to end and regroup."""
        wire = route_orthogonal(self.wire_graph, self.anchors, start, end, x_first)
        self.rendered_wires.append(wire)
        self.regroup()
        return wire

    def remove_node(self, position: GridPosition) -> Optional[frozenset[GridPosition]]:
        """
        Delete the whole node group containing a position.

        Removes the group's points from the wire graph, the rendered wires
        drawn over it and its anchors, then regroups. Positions outside
        every group are ignored.

        Returns:
            The removed group, or None if nothing was removed.
        """
        group_index = self.find_group(position)
        if group_index is None:
            logger.debug("No node group at %s; nothing removed", position)
            return None

        group = self.node_groups[group_index]
        self.wire_graph.remove_positions(group)
        self.rendered_wires = [w for w in self.rendered_wires if not w.touches_any(group)]
        self.anchors = [a for a in self.anchors if a not in group]
        self.regroup()
        logger.debug("Removed node group %d (%d points)", group_index, len(group))
        return group

    def regroup(self) -> None:
        """Recompute node groups from the current wire graph and anchors."""
        self.node_groups = group_wires_into_nodes(self.wire_graph, self.anchors)

    def find_group(self, position: GridPosition) -> Optional[int]:
        """Return the index of the node group containing a position, or None."""
        for index, group in enumerate(self.node_groups):
            if position in group:
                return index
        return None

    # --- Element operations ---

    def add_element(self, kind: ElementKind, position: tuple[float, float],
                    rotation: float = 0.0, value: Optional[float] = None,
                    size: tuple[float, float] = DEFAULT_ELEMENT_SIZE) -> ElementData:
        """Place a new element and return it with its allocated id."""
        element = ElementData(kind=kind, position=position, rotation=rotation,
                              value=value, size=size)
        self.registry.add(element)
        return element

    def remove_element(self, element_id: int) -> Optional[ElementData]:
        """
        Delete an element and drop the anchors sitting on its terminals.

        Does not regroup. Unknown ids are ignored.

        Returns:
            The removed element, or None.
        """
        element = self.registry.remove(element_id)
        if element is None:
            return None
        terminals = set(element.terminals)
        self.anchors = [a for a in self.anchors if a not in terminals]
        return element

    def set_value(self, element_id: int, value) -> bool:
        """
        Change an element's value.

        Returns:
            False if the element does not exist or carries no value.

        Raises:
            ValueError: If a string value cannot be parsed.
        """
        element = self.registry.get(element_id)
        if element is None:
            return False
        return element.set_value(value)

    # --- Queries ---

    def drag_points(self) -> list[GridPosition]:
        """Grid positions offered as wire drag handles: wire points and element terminals."""
        points = {p for group in self.node_groups for p in group}
        for element in self.registry:
            points.update(element.terminals)
        return sorted(points)

    def assemble(self):
        """Build a solver netlist from the current state, or None without a wired ground."""
        from gridspice.simulation.circuit_assembler import CircuitAssembler

        return CircuitAssembler(self.registry, self.node_groups).assemble()

    # --- Circuit operations ---

    def clear(self) -> None:
        """Clear all schematic data."""
        self.wire_graph.clear()
        self.anchors.clear()
        self.node_groups.clear()
        self.rendered_wires.clear()
        self.registry.clear()
