"""
SimulationController - Orchestrates the operating point pipeline.

This module contains no Qt dependencies. It coordinates circuit
validation, netlist assembly, SPICE deck generation, solver execution
and result pairing.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from gridspice.models.circuit import CircuitModel

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Result of a simulation run."""

    success: bool
    data: Any = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str = ""
    netlist: Any = None
    raw_output: str = ""
    output_file: str = ""


class SimulationController:
    """
    Controller for the simulation pipeline.

    Coordinates: validate -> assemble netlist -> solve -> pair results
    """

    def __init__(self, model: Optional[CircuitModel] = None, circuit_ctrl=None,
                 settings=None):
        self.model = model or CircuitModel()
        self.circuit_ctrl = circuit_ctrl
        self._settings = settings
        self._runner = None

    @property
    def settings(self):
        """Lazy initialization of SimulationSettings."""
        if self._settings is None:
            from gridspice.simulation import SimulationSettings

            self._settings = SimulationSettings()
        return self._settings

    @property
    def runner(self):
        """Lazy initialization of NgspiceRunner."""
        if self._runner is None:
            from gridspice.simulation import NgspiceRunner

            self._runner = NgspiceRunner.from_settings(self.settings)
        return self._runner

    def validate_circuit(self) -> SimulationResult:
        """
        Validate the circuit before simulation.

        Returns a SimulationResult with success=False and errors if invalid.
        """
        from gridspice.simulation import validate_circuit

        is_valid, errors, warnings = validate_circuit(self.model)
        return SimulationResult(
            success=is_valid,
            errors=errors,
            warnings=warnings,
            error="; ".join(errors) if errors else "",
        )

    def build_netlist(self):
        """Assemble the current circuit. Returns a Netlist or None."""
        return self.model.assemble()

    def generate_deck(self, netlist=None) -> Optional[str]:
        """Render the SPICE deck for a netlist (assembled now when omitted)."""
        from gridspice.simulation import NetlistGenerator

        if netlist is None:
            netlist = self.build_netlist()
            if netlist is None:
                return None
        return NetlistGenerator(netlist, title=self.settings.title).generate()

    def _finish(self, result: SimulationResult) -> SimulationResult:
        if self.circuit_ctrl:
            self.circuit_ctrl._notify("simulation_completed", result)
        return result

    def run_operating_point(
        self,
        solver: Optional[Callable[[Any], Sequence[float]]] = None,
    ) -> SimulationResult:
        """
        Run the DC operating point pipeline.

        Args:
            solver: callable taking a Netlist and returning the solution
                vector. ngspice is used when omitted.

        Returns:
            SimulationResult whose data is an OperatingPoint on success.
        """
        from gridspice.simulation import OperatingPoint

        if self.circuit_ctrl:
            self.circuit_ctrl._notify("simulation_started", None)

        # 1. Validate
        validation = self.validate_circuit()
        if not validation.success:
            return self._finish(validation)

        # 2. Assemble
        netlist = self.build_netlist()
        if netlist is None:
            return self._finish(SimulationResult(
                success=False,
                error="Circuit could not be assembled: ground is missing or not wired.",
                warnings=validation.warnings,
            ))

        # 3. Solve
        if solver is None:
            return self._finish(self._run_ngspice(netlist, validation.warnings))

        try:
            vector = solver(netlist)
            data = OperatingPoint.from_vector(netlist, vector)
        except (ValueError, ArithmeticError) as e:
            logger.error("Solver failed: %s", e)
            return self._finish(SimulationResult(
                success=False,
                error=f"Solver failed: {e}",
                netlist=netlist,
                warnings=validation.warnings,
            ))

        return self._finish(SimulationResult(
            success=True,
            data=data,
            netlist=netlist,
            warnings=validation.warnings,
        ))

    def _run_ngspice(self, netlist, warnings: list[str]) -> SimulationResult:
        """Hand the netlist to ngspice and pair the printed values back."""
        from gridspice.simulation import NetlistGenerator, OperatingPoint, ResultParser

        deck = NetlistGenerator(netlist, title=self.settings.title).generate()

        success, output_file, stdout, stderr = self.runner.run_simulation(deck)
        if not success:
            return SimulationResult(
                success=False,
                error=stderr or "ngspice failed",
                netlist=netlist,
                raw_output=stdout,
                warnings=warnings,
            )

        try:
            output = self.runner.read_output(output_file)
            vector = ResultParser.parse_op_vector(output, netlist)
            if vector is None:
                raise ValueError("ngspice output is missing solution values")
            data = OperatingPoint.from_vector(netlist, vector)
        except (ValueError, OSError) as e:
            logger.error("Result parsing failed: %s", e, exc_info=True)
            return SimulationResult(
                success=False,
                error=f"Result parsing failed: {e}",
                netlist=netlist,
                raw_output=stdout,
                output_file=output_file or "",
                warnings=warnings,
            )

        return SimulationResult(
            success=True,
            data=data,
            netlist=netlist,
            raw_output=stdout,
            output_file=output_file or "",
            warnings=warnings,
        )
