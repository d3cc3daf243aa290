"""
Operating point solution - node voltages and bias currents from a solver.

This module contains no Qt dependencies.
"""

from dataclasses import dataclass, field

import numpy as np

from .netlist import Netlist


@dataclass
class OperatingPoint:
    """
    Solver answer split into its two parts.

    node_voltages[i] is the voltage of node i+1 (node 0 is the reference);
    bias_currents[k] is the current through the device with bias index k.
    """

    node_voltages: np.ndarray = field(default_factory=lambda: np.zeros(0))
    bias_currents: np.ndarray = field(default_factory=lambda: np.zeros(0))

    @classmethod
    def from_vector(cls, netlist: Netlist, vector) -> "OperatingPoint":
        """
        Split a solution vector of length (N-1) + bias count.

        Raises:
            ValueError: if the vector length does not match the netlist.
        """
        values = np.asarray(vector, dtype=float).ravel()
        expected = netlist.solution_size()
        if values.size != expected:
            raise ValueError(
                f"Solution has {values.size} entries, netlist expects {expected}"
            )
        voltage_count = max(netlist.node_count - 1, 0)
        return cls(node_voltages=values[:voltage_count].copy(),
                   bias_currents=values[voltage_count:].copy())

    def format_lines(self) -> list[str]:
        """Human readable lines: "V1: 10V" per node, then "I1: 0.5A" per bias current."""
        lines = [f"V{i + 1}: {v}V" for i, v in enumerate(self.node_voltages.tolist())]
        lines.extend(f"I{k + 1}: {c}A" for k, c in enumerate(self.bias_currents.tolist()))
        return lines

    def to_dict(self) -> dict:
        return {
            "node_voltages": self.node_voltages.tolist(),
            "bias_currents": self.bias_currents.tolist(),
        }
