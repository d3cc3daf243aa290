"""Tests for SimulationController and SimulationResult."""

from unittest.mock import MagicMock, patch

import numpy as np
import pytest
from gridspice.controllers.circuit_controller import CircuitController
from gridspice.controllers.simulation_controller import SimulationController, SimulationResult
from gridspice.models.circuit import CircuitModel
from gridspice.models.element import ElementKind
from gridspice.simulation.settings import SimulationSettings
from gridspice.simulation.solution import OperatingPoint

DIVIDER_OUTPUT = "v(1) = 5.000000e+00\nv(2) = 1.000000e+01\ni(v0) = -5.000000e-03\n"


@pytest.fixture
def settings(tmp_path):
    return SimulationSettings(output_dir=str(tmp_path / "sim"), title="test deck")


@pytest.fixture
def sim(divider_model, settings):
    return SimulationController(divider_model, settings=settings)


def divider_solver(netlist):
    assert netlist.solution_size() == 3
    return [5.0, 10.0, -0.005]


class TestSimulationResult:
    def test_defaults(self):
        result = SimulationResult(success=True)
        assert result.data is None
        assert result.errors == []
        assert result.warnings == []
        assert result.error == ""


class TestValidation:
    def test_valid_circuit(self, sim):
        result = sim.validate_circuit()
        assert result.success
        assert result.error == ""

    def test_invalid_circuit(self, settings):
        result = SimulationController(CircuitModel(), settings=settings).validate_circuit()
        assert not result.success
        assert result.errors
        assert result.error == "; ".join(result.errors)


class TestNetlist:
    def test_build_netlist(self, sim):
        netlist = sim.build_netlist()
        assert netlist.node_count == 3

    def test_generate_deck_uses_title(self, sim):
        deck = sim.generate_deck()
        assert deck.splitlines()[0] == "test deck"
        assert "V0 0 2 DC 10" in deck

    def test_generate_deck_without_ground(self, settings):
        model = CircuitModel()
        model.add_element(ElementKind.RESISTOR, (32.0, 0.0))
        assert SimulationController(model, settings=settings).generate_deck() is None


class TestRunWithSolver:
    def test_success(self, sim):
        result = sim.run_operating_point(solver=divider_solver)
        assert result.success
        assert isinstance(result.data, OperatingPoint)
        np.testing.assert_allclose(result.data.node_voltages, [5.0, 10.0])
        np.testing.assert_allclose(result.data.bias_currents, [-0.005])
        assert result.data.format_lines() == ["V1: 5.0V", "V2: 10.0V", "I1: -0.005A"]
        assert result.netlist.node_count == 3

    def test_wrong_length_fails(self, sim):
        result = sim.run_operating_point(solver=lambda netlist: [1.0])
        assert not result.success
        assert "Solver failed" in result.error

    def test_solver_error_fails(self, sim):
        def singular(netlist):
            raise ZeroDivisionError("singular matrix")

        result = sim.run_operating_point(solver=singular)
        assert not result.success
        assert "singular matrix" in result.error

    def test_validation_failure_skips_solver(self, settings):
        solver = MagicMock()
        result = SimulationController(CircuitModel(), settings=settings).run_operating_point(solver)
        assert not result.success
        solver.assert_not_called()

    def test_notifies_circuit_controller(self, divider_model, settings):
        circuit_ctrl = CircuitController(divider_model)
        recorded = []
        circuit_ctrl.add_observer(lambda event, data: recorded.append((event, data)))
        sim = SimulationController(divider_model, circuit_ctrl=circuit_ctrl, settings=settings)

        result = sim.run_operating_point(solver=divider_solver)

        assert recorded[0] == ("simulation_started", None)
        assert recorded[-1][0] == "simulation_completed"
        assert recorded[-1][1] is result

    def test_warnings_carried(self, divider_model, settings):
        divider_model.add_element(ElementKind.CAPACITOR, (640.0, 640.0))
        result = SimulationController(divider_model, settings=settings).run_operating_point(divider_solver)
        assert result.success
        assert any("C4" in w for w in result.warnings)
        assert result.netlist.excluded == [4]


class TestRunWithNgspice:
    def test_runner_built_from_settings(self, sim, settings):
        assert sim.runner.output_dir == settings.output_dir
        assert sim.runner.timeout == settings.timeout

    def test_success(self, sim):
        runner = MagicMock()
        runner.ngspice_cmd = "ngspice"
        runner.run_simulation.return_value = (True, "out.txt", "stdout", "")
        runner.read_output.return_value = DIVIDER_OUTPUT
        sim._runner = runner

        result = sim.run_operating_point()

        assert result.success
        assert result.output_file == "out.txt"
        np.testing.assert_allclose(result.data.node_voltages, [5.0, 10.0])
        deck = runner.run_simulation.call_args[0][0]
        assert "print v(1) v(2) i(V0)" in deck

    def test_ngspice_not_found(self, sim):
        with patch.object(sim.runner, "find_ngspice", return_value=None) as find:
            result = sim.run_operating_point()
        assert not result.success
        assert "ngspice executable not found" in result.error
        assert result.netlist is not None
        find.assert_called_once_with()

    def test_ngspice_failure(self, sim):
        runner = MagicMock()
        runner.ngspice_cmd = "ngspice"
        runner.run_simulation.return_value = (False, None, "", "Error: singular matrix")
        sim._runner = runner
        result = sim.run_operating_point()
        assert not result.success
        assert result.error == "Error: singular matrix"

    def test_unparseable_output(self, sim):
        runner = MagicMock()
        runner.ngspice_cmd = "ngspice"
        runner.run_simulation.return_value = (True, "out.txt", "", "")
        runner.read_output.return_value = "v(1) = 5\n"
        sim._runner = runner
        result = sim.run_operating_point()
        assert not result.success
        assert "Result parsing failed" in result.error
