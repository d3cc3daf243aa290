"""
CircuitController - Orchestrates wire and element editing operations.

This module contains no Qt dependencies. It manages the CircuitModel
and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from gridspice.models.circuit import CircuitModel
from gridspice.models.element import DEFAULT_ELEMENT_SIZE, ElementData, ElementKind
from gridspice.models.grid import GridPosition
from gridspice.models.wire import RenderedWire
from gridspice.models.wire_router import prefers_x_first

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for circuit wire and element operations.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        wire_routed (RenderedWire) - A wire was added to the graph
        node_removed (frozenset[GridPosition]) - A node group was deleted
        element_added (ElementData) - A new element was placed
        element_removed (int) - An element was removed (by ID)
        element_value_changed (ElementData) - An element's value changed
        nodes_regrouped (list[frozenset[GridPosition]]) - Node groups were recomputed
        circuit_cleared (None) - The entire circuit was cleared
        simulation_started (None) - Simulation began
        simulation_completed (SimulationResult) - Simulation finished
    """

    def __init__(self, model: Optional[CircuitModel] = None):
        self.model = model or CircuitModel()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Wire operations ---

    def route_wire(self, start: GridPosition, end: GridPosition,
                   x_first: Optional[bool] = None) -> RenderedWire:
        """
        Route an L-shaped wire between two grid positions.

        When x_first is None the leg order follows the drag direction:
        horizontal first when the drag is wider than it is tall.

        Returns:
            The RenderedWire drawn for the route.
        """
        if x_first is None:
            delta = end - start
            x_first = prefers_x_first(delta.x, delta.y)
        wire = self.model.route(start, end, x_first)
        self._notify('wire_routed', wire)
        self._notify('nodes_regrouped', self.model.node_groups)
        return wire

    def route_wire_from_points(self, start: tuple[float, float],
                               end: tuple[float, float]) -> RenderedWire:
        """Route a wire between two scene points, snapping both to the grid."""
        return self.route_wire(GridPosition.from_point(*start), GridPosition.from_point(*end))

    def remove_node(self, position: GridPosition) -> Optional[frozenset[GridPosition]]:
        """Delete the node group under a position. No-op when nothing is there."""
        group = self.model.remove_node(position)
        if group is None:
            return None
        self._notify('node_removed', group)
        self._notify('nodes_regrouped', self.model.node_groups)
        return group

    # --- Element operations ---

    def add_element(self, kind: ElementKind, position: tuple[float, float],
                    rotation: float = 0.0, value: Optional[float] = None,
                    size: tuple[float, float] = DEFAULT_ELEMENT_SIZE) -> ElementData:
        """
        Place a new element.

        Returns:
            The newly created ElementData with its allocated id.
        """
        element = self.model.add_element(kind, position, rotation=rotation,
                                         value=value, size=size)
        self._notify('element_added', element)
        return element

    def remove_element(self, element_id: int) -> Optional[ElementData]:
        """Remove an element and the anchors on its terminals."""
        element = self.model.remove_element(element_id)
        if element is None:
            return None
        self._notify('element_removed', element_id)
        return element

    def update_element_value(self, element_id: int, value) -> bool:
        """
        Update an element's value from a number or an SI string such as "4.7k".

        Raises:
            ValueError: If a string value cannot be parsed.
        """
        if not self.model.set_value(element_id, value):
            return False
        self._notify('element_value_changed', self.model.registry.get(element_id))
        return True

    # --- Queries ---

    def assemble(self):
        """Return a netlist snapshot of the circuit, or None."""
        return self.model.assemble()

    def get_element(self, element_id: int) -> Optional[ElementData]:
        return self.model.registry.get(element_id)

    # --- Circuit operations ---

    def clear_circuit(self) -> None:
        """Clear the entire circuit."""
        self.model.clear()
        self._notify('circuit_cleared', None)
