"""
simulation/netlist_generator.py

Handles SPICE deck generation from an assembled netlist
"""

from gridspice.models.element import ElementKind

from .netlist import Netlist


class NetlistGenerator:
    """Renders a Netlist as an ngspice DC operating point deck"""

    def __init__(self, netlist: Netlist, title: str = "gridspice circuit"):
        self.netlist = netlist
        self.title = title

    def device_line(self, device) -> str:
        """Return the SPICE element line for one device."""
        nodes = f"{device.node1} {device.node2}"
        if device.kind in (ElementKind.DC_VOLTAGE_SOURCE, ElementKind.DC_CURRENT_SOURCE):
            return f"{device.name} {nodes} DC {device.value:g}"
        return f"{device.name} {nodes} {device.value:g}"

    def referenced_nodes(self) -> list[int]:
        """Non-reference node ids that at least one device touches, ascending."""
        used = set()
        for device in self.netlist.devices:
            used.add(device.node1)
            used.add(device.node2)
        used.discard(0)
        return sorted(used)

    def print_vectors(self) -> list[str]:
        """
        Vectors to print, in solution order.

        Node voltages come first, then branch currents by bias index.
        """
        vectors = [f"v({node})" for node in self.referenced_nodes()]
        vectors.extend(f"i({device.name})" for device in self.netlist.bias_devices())
        return vectors

    def generate(self) -> str:
        """Generate complete SPICE deck"""
        lines = [self.title, "* Generated netlist", ""]

        for device in self.netlist.devices:
            lines.append(self.device_line(device))

        lines.append("")
        lines.append("* Analysis Command")
        lines.append(".op")

        lines.append("")
        lines.append("* Control block for batch execution")
        lines.append(".control")
        lines.append("run")
        vectors = self.print_vectors()
        if vectors:
            lines.append(f"print {' '.join(vectors)}")
        lines.append(".endc")

        lines.append("")
        lines.append(".end")

        return "\n".join(lines)
