"""
Netlist - Solver-ready description of nodes and devices.

This module contains no Qt dependencies. A Netlist is built fresh for
every run and handed to the solver; nothing keeps it afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional

from gridspice.models.element import ElementKind


@dataclass(frozen=True)
class NetlistDevice:
    """One branch device between two solver nodes."""

    element_id: int
    kind: ElementKind
    value: float
    node1: int
    node2: int
    # Index of the auxiliary branch-current unknown (voltage sources, inductors)
    bias_index: Optional[int] = None

    @property
    def name(self) -> str:
        """SPICE style device name, e.g. R3 or V0."""
        return f"{self.kind.spice_symbol}{self.element_id}"

    def to_dict(self) -> dict:
        data = {
            "id": self.element_id,
            "kind": self.kind.value,
            "value": self.value,
            "nodes": [self.node1, self.node2],
        }
        if self.bias_index is not None:
            data["bias_index"] = self.bias_index
        return data


@dataclass
class Netlist:
    """
    Node ids 0..N-1 (0 is the reference node) and the devices between them.

    The solver answers with a vector of N-1 node voltages followed by
    one current per bias index, in bias index order.
    """

    nodes: list[int] = field(default_factory=list)
    devices: list[NetlistDevice] = field(default_factory=list)
    # Element ids left out because a terminal touches no node group
    excluded: list[int] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def bias_count(self) -> int:
        return sum(1 for d in self.devices if d.bias_index is not None)

    def bias_devices(self) -> list[NetlistDevice]:
        """Devices with a bias current, sorted by bias index."""
        return sorted((d for d in self.devices if d.bias_index is not None),
                      key=lambda d: d.bias_index)

    def solution_size(self) -> int:
        """Length of the vector a solver returns for this netlist."""
        return max(self.node_count - 1, 0) + self.bias_count

    def to_dict(self) -> dict:
        return {
            "nodes": list(self.nodes),
            "devices": [d.to_dict() for d in self.devices],
            "excluded": list(self.excluded),
        }

    def __repr__(self) -> str:
        return f"Netlist(nodes={self.node_count}, devices={len(self.devices)}, excluded={self.excluded})"
