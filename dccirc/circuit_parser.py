import logging
import re
from functools import reduce

import numpy as np

from .analysis import resistance
from .canvas import MatplotlibCanvas, render
from .circuit_elements import (Battery, Capacitor, CircuitElement, Farads, Ohms,
                               Parallel, Resistor, Series, Volts, Wire, parallel, series)
from .circuit_parameters_default import (DRAWING_CONFIG, ELEMENT_CONFIG, SI_PREFIX_MULTIPLIERS,
                                         extract_base_type)
from .exceptions import CircuitParseError
from .layout import extent, layout_circuit

logger = logging.getLogger(__name__)

ELEMENT_TYPES = {
    'W': Wire,
    'R': Resistor,
    'C': Capacitor,
    'B': Battery,
}

_VALUE_PATTERN = re.compile(r'^(\d+(?:\.\d*)?|\.\d+)(MEG|[pnuµmkMG])?$')


class CircuitModel:
    """
    A DC circuit, built from a tree of circuit elements or an expression
    string such as ``"W-(R5-C3-B1)//(B2-R4//(R5-R1))-W"``.
    """

    def __init__(self, circuit_structure):
        if isinstance(circuit_structure, str):
            self.circuit_string = circuit_structure
            self.circuit_structure = parse_circuit(circuit_structure)
        elif isinstance(circuit_structure, CircuitElement):
            self.circuit_structure = circuit_structure
            self.circuit_string = None
        else:
            raise TypeError(f"Expected an expression or a CircuitElement, "
                            f"got {type(circuit_structure).__name__}")
        self.canvas = None

    def __repr__(self):
        if self.circuit_string is None:
            return f"CircuitModel({self.circuit_structure!r})"
        return f"CircuitModel({self.circuit_string!r})"

    @property
    def expression(self):
        return to_expression(self.circuit_structure)

    @property
    def extent(self):
        return extent(self.circuit_structure)

    def resistance(self):
        return resistance(self.circuit_structure)

    def layout(self, x1=None, x2=None, y=None, **drawing_overrides):
        """Segments of the schematic; span and centerline default to DRAWING_CONFIG"""
        default_x1, default_x2 = DRAWING_CONFIG['span']['default']
        x1 = default_x1 if x1 is None else x1
        x2 = default_x2 if x2 is None else x2
        y = DRAWING_CONFIG['centerline']['default'] if y is None else y
        return layout_circuit(self.circuit_structure, x1, x2, y, **drawing_overrides)

    def render(self, canvas, x1=None, x2=None, y=None, **drawing_overrides):
        return render(self.layout(x1, x2, y, **drawing_overrides), canvas)

    def draw_circuit(self, ax=None, position=None, width=None, height=None,
                     x1=None, x2=None, y=None, loc='upper right', borderpad=1,
                     **drawing_overrides):
        """
        Draw the circuit diagram as matplotlib figure or inset.
        """
        self.canvas = MatplotlibCanvas(width=width, height=height, ax=ax, position=position,
                                       loc=loc, borderpad=borderpad)
        self.render(self.canvas, x1, x2, y, **drawing_overrides)
        return self.canvas.ax


def parse_value(text, kind, expression=''):
    """Element value with an optional SI prefix ('4.7k' -> 4700.0); empty means default"""
    if text == '':
        return ELEMENT_CONFIG[kind]['default']
    match = _VALUE_PATTERN.match(text)
    if not match:
        raise CircuitParseError(expression or text, f"invalid value '{text}' for {kind}")
    number, prefix = match.groups()
    return float(number) * (SI_PREFIX_MULTIPLIERS[prefix] if prefix else 1.0)


def _parse_element(token, expression):
    try:
        kind = extract_base_type(token)
    except ValueError:
        raise CircuitParseError(expression, f"unexpected token '{token}'") from None
    if kind not in ELEMENT_TYPES:
        raise CircuitParseError(expression, f"unknown component type '{token[0]}'")
    value_text = token[1:]

    if kind == 'W':
        if value_text:
            raise CircuitParseError(expression, f"wire takes no value: '{token}'")
        return Wire()

    value = parse_value(value_text, kind, expression)
    if kind == 'R':
        return Resistor(Ohms(value))
    elif kind == 'C':
        return Capacitor(Farads(value))
    return Battery(Volts(value))


def _split_top_level(expr, separator, expression):
    """Split on `separator` outside parentheses"""
    parts = []
    depth = 0
    start = 0
    i = 0
    while i < len(expr):
        char = expr[i]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth < 0:
                raise CircuitParseError(expression, "unbalanced ')'")
        elif depth == 0 and expr.startswith(separator, i):
            parts.append(expr[start:i])
            i += len(separator)
            start = i
            continue
        i += 1
    if depth != 0:
        raise CircuitParseError(expression, "unbalanced '('")
    parts.append(expr[start:])
    return parts


def _is_wrapped(expr):
    """True when the opening parenthesis closes at the very end"""
    if not (expr.startswith('(') and expr.endswith(')')):
        return False
    depth = 0
    for i, char in enumerate(expr):
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return i == len(expr) - 1
    return False


def parse_circuit(expression):
    """
    Parse a circuit expression string into a circuit tree.

    ``-`` joins in series, ``//`` in parallel, parentheses group. Series binds
    loosest and chains group to the left, as with the Python operators.
    """
    if not isinstance(expression, str):
        raise TypeError(f"Expression must be a string, got {type(expression).__name__}")
    stripped = re.sub(r'\s+', '', expression)

    def parse(expr):
        if expr == '':
            raise CircuitParseError(expression, "missing element")

        series_parts = _split_top_level(expr, '-', expression)
        if len(series_parts) > 1:
            return reduce(series, [parse(part) for part in series_parts])

        parallel_parts = _split_top_level(expr, '//', expression)
        if len(parallel_parts) > 1:
            return reduce(parallel, [parse(part) for part in parallel_parts])

        if _is_wrapped(expr):
            return parse(expr[1:-1])

        return _parse_element(expr, expression)

    tree = parse(stripped)
    logger.debug("Parsed '%s' into %s", expression, type(tree).__name__)
    return tree


def _format_value(value):
    if not np.isfinite(value) or value < 0:
        raise ValueError(f"Value {value} cannot be written as a circuit expression")
    return np.format_float_positional(float(value), trim='-')


def to_expression(structure):
    """Expression string that parse_circuit reads back into the same tree"""
    if isinstance(structure, Wire):
        return 'W'
    elif isinstance(structure, Resistor):
        return 'R' + _format_value(structure.resistance)
    elif isinstance(structure, Capacitor):
        return 'C' + _format_value(structure.capacitance)
    elif isinstance(structure, Battery):
        return 'B' + _format_value(structure.voltage)
    elif isinstance(structure, Series):
        right = to_expression(structure.right)
        if isinstance(structure.right, Series):
            right = f'({right})'
        return f'{to_expression(structure.left)}-{right}'
    elif isinstance(structure, Parallel):
        top = to_expression(structure.top)
        bottom = to_expression(structure.bottom)
        if isinstance(structure.top, Series):
            top = f'({top})'
        if isinstance(structure.bottom, (Series, Parallel)):
            bottom = f'({bottom})'
        return f'{top}//{bottom}'
    raise TypeError(f"Unknown circuit element: {structure!r}")
