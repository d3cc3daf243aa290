"""
simulation/result_parser.py

Parses ngspice operating point output into a solution vector
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

_NUMBER = r'([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)'

# v(3) = 1.000000e+01   or   V(3)     1.000000e+01
_VOLTAGE_RE = re.compile(r'^\s*v\((\d+)\)\s*[=:]?\s*' + _NUMBER, re.IGNORECASE)
# i(V0) = -1.0e-03   or   v0#branch = -1.0e-03
_CURRENT_RE = re.compile(r'^\s*(?:i\((\w+)\)|(\w+)#branch)\s*[=:]?\s*' + _NUMBER, re.IGNORECASE)


class ResultParser:
    """Parses ngspice simulation results"""

    @staticmethod
    def parse_op_results(output):
        """
        Extract printed node voltages and branch currents.

        Returns:
            tuple: (voltages: dict[int, float], currents: dict[str, float])
            with device names lower-cased.
        """
        voltages = {}
        currents = {}
        for line in output.splitlines():
            match = _VOLTAGE_RE.match(line)
            if match:
                voltages[int(match.group(1))] = float(match.group(2))
                continue
            match = _CURRENT_RE.match(line)
            if match:
                name = (match.group(1) or match.group(2)).lower()
                currents[name] = float(match.group(3))
        return voltages, currents

    @staticmethod
    def parse_op_vector(output, netlist):
        """
        Order parsed results as the solution vector for a netlist.

        Node voltages 1..N-1 come first, then one current per bias device
        in bias index order. Nodes no device touches are not simulated and
        read as NaN.

        Returns:
            list[float], or None if a printed value is missing.
        """
        voltages, currents = ResultParser.parse_op_results(output)

        used = {d.node1 for d in netlist.devices} | {d.node2 for d in netlist.devices}
        vector = []
        for node in range(1, netlist.node_count):
            if node in voltages:
                vector.append(voltages[node])
            elif node not in used:
                vector.append(math.nan)
            else:
                logger.warning("No voltage for node %d in ngspice output", node)
                return None

        for device in netlist.bias_devices():
            name = device.name.lower()
            if name not in currents:
                logger.warning("No branch current for %s in ngspice output", device.name)
                return None
            vector.append(currents[name])

        return vector
