"""
simulation/circuit_assembler.py

Builds a solver netlist from placed elements and node groups
"""

import logging
from typing import Iterable, Optional, Sequence

from gridspice.models.element import ElementData, ElementKind
from gridspice.models.grid import GridPosition

from .netlist import Netlist, NetlistDevice

logger = logging.getLogger(__name__)


def transcribe_node(group_index: int, ground_group: int) -> int:
    """
    Map a node group index to a solver node id.

    The ground group always becomes node 0: when it is not already
    first, indices 0 and ground_group trade places and every other
    index is kept.
    """
    if ground_group != 0:
        if group_index == 0:
            return ground_group
        if group_index == ground_group:
            return 0
    return group_index


class CircuitAssembler:
    """Resolves element terminals to node groups and emits netlist devices"""

    def __init__(self, elements: Iterable[ElementData],
                 node_groups: Sequence[frozenset[GridPosition]]):
        # Ascending id order keeps bias indices reproducible between runs
        self.elements = sorted(elements, key=lambda e: e.element_id)
        self.node_groups = node_groups

    def find_group(self, position: GridPosition) -> Optional[int]:
        """Return the index of the node group containing a position, or None."""
        for index, group in enumerate(self.node_groups):
            if position in group:
                return index
        return None

    def find_ground(self) -> Optional[ElementData]:
        """Return the lowest-id Ground element, or None."""
        for element in self.elements:
            if element.kind is ElementKind.GROUND:
                return element
        return None

    def assemble(self) -> Optional[Netlist]:
        """
        Build the netlist.

        Returns:
            The Netlist, or None when there is no Ground element or the
            ground terminal is not on any wire.
        """
        ground = self.find_ground()
        if ground is None:
            logger.warning("Cannot assemble circuit: no ground element")
            return None

        ground_group = self.find_group(ground.terminals[0])
        if ground_group is None:
            logger.warning("Cannot assemble circuit: ground %d is not connected to any wire",
                           ground.element_id)
            return None

        netlist = Netlist(nodes=list(range(len(self.node_groups))))

        bias_count = 0
        for element in self.elements:
            if element.kind is ElementKind.GROUND:
                continue

            group1 = self.find_group(element.terminals[0])
            group2 = self.find_group(element.terminals[1])
            if group1 is None or group2 is None:
                logger.warning("Dropping %s %d from netlist: terminal not connected",
                               element.kind.display_name, element.element_id)
                netlist.excluded.append(element.element_id)
                continue

            bias_index = None
            if element.kind.has_bias_current:
                bias_index = bias_count
                bias_count += 1

            netlist.devices.append(NetlistDevice(
                element_id=element.element_id,
                kind=element.kind,
                value=element.value,
                node1=transcribe_node(group1, ground_group),
                node2=transcribe_node(group2, ground_group),
                bias_index=bias_index,
            ))

        logger.info("Assembled netlist: %d nodes, %d devices, ground group %d",
                    netlist.node_count, len(netlist.devices), ground_group)
        return netlist
