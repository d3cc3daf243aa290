from .circuit_assembler import CircuitAssembler, transcribe_node
from .circuit_validator import validate_circuit
from .netlist import Netlist, NetlistDevice
from .netlist_generator import NetlistGenerator
from .ngspice_runner import NgspiceRunner
from .result_parser import ResultParser
from .settings import SimulationSettings, load_settings, save_settings
from .solution import OperatingPoint

__all__ = [
    'CircuitAssembler',
    'Netlist',
    'NetlistDevice',
    'NetlistGenerator',
    'NgspiceRunner',
    'OperatingPoint',
    'ResultParser',
    'SimulationSettings',
    'load_settings',
    'save_settings',
    'transcribe_node',
    'validate_circuit',
]
