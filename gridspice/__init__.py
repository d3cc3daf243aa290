from .controllers import CircuitController, SimulationController, SimulationResult
from .models import CircuitModel, ElementKind, GridPosition
from .simulation import Netlist, NetlistGenerator, NgspiceRunner, OperatingPoint, ResultParser

__version__ = "0.1.0"

__all__ = [
    'CircuitController',
    'CircuitModel',
    'ElementKind',
    'GridPosition',
    'Netlist',
    'NetlistGenerator',
    'NgspiceRunner',
    'OperatingPoint',
    'ResultParser',
    'SimulationController',
    'SimulationResult',
]
