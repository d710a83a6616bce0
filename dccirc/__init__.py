from .analysis import resistance
from .canvas import MatplotlibCanvas, RecordingCanvas, render
from .circuit_elements import (Battery, Capacitor, CircuitElement, Farads, Ohms, Parallel,
                               Resistor, Series, Volts, Wire, example_circuit, parallel, series)
from .circuit_parser import CircuitModel, parse_circuit, to_expression
from .exceptions import CircuitError, CircuitParseError, DegenerateGeometryError
from .geometry import Segment, endpoint, flip
from .layout import circuit_length, circuit_width, extent, layout_circuit

__all__ = [
    'Battery', 'Capacitor', 'CircuitElement', 'CircuitError', 'CircuitModel',
    'CircuitParseError', 'DegenerateGeometryError', 'Farads', 'MatplotlibCanvas', 'Ohms',
    'Parallel', 'RecordingCanvas', 'Resistor', 'Segment', 'Series', 'Volts', 'Wire',
    'circuit_length', 'circuit_width', 'endpoint', 'example_circuit', 'extent', 'flip',
    'layout_circuit', 'parallel', 'parse_circuit', 'render', 'resistance', 'series',
    'to_expression',
]
