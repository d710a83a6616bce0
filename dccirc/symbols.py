"""Drawing recipes for leaf elements: each returns the segments of one symbol."""

from .circuit_elements import Battery, Capacitor, Resistor, Wire
from .circuit_parameters_default import DRAWING_CONFIG, initialize_drawing_parameters
from .geometry import down, left, line, right, up, walk_path

ZIGZAG = DRAWING_CONFIG['resistor_zigzag']['default']


def draw_wire(x1, x2, y, stroke_width=3.0):
    return [line(x1, y, right, x2 - x1, stroke_width)]


def draw_resistor(x1, x2, y, stroke_width=3.0, resistor_inset=30.0, resistor_zigzag=ZIGZAG):
    """Leads from both ends, then the zigzag starting at the inner end of the lead-in"""
    wire_length = 0.5 * (x2 - x1) - resistor_inset
    t1x = x1 + wire_length
    segments = [
        line(x1, y, right, wire_length, stroke_width),
        line(x2, y, left, wire_length, stroke_width),
    ]
    segments.extend(walk_path(t1x, y, resistor_zigzag, stroke_width))
    return segments


def _draw_plates(x1, x2, y, first_plate, second_plate, stroke_width, terminal_gap):
    half_span = 0.5 * (x2 - x1)
    wire_length = half_span - terminal_gap
    t1x = x1 + wire_length
    t2x = x2 - wire_length
    return [
        line(x1, y, right, wire_length, stroke_width),
        line(x1 + half_span + terminal_gap, y, right, wire_length, stroke_width),
        line(t1x, y, up, first_plate, stroke_width),
        line(t1x, y, down, first_plate, stroke_width),
        line(t2x, y, up, second_plate, stroke_width),
        line(t2x, y, down, second_plate, stroke_width),
    ]


def draw_capacitor(x1, x2, y, stroke_width=3.0, terminal_gap=10.0, long_plate=20.0):
    return _draw_plates(x1, x2, y, long_plate, long_plate, stroke_width, terminal_gap)


def draw_battery(x1, x2, y, stroke_width=3.0, terminal_gap=10.0, long_plate=20.0,
                 short_plate=10.0):
    """Long plate on the left terminal, short plate on the right"""
    return _draw_plates(x1, x2, y, long_plate, short_plate, stroke_width, terminal_gap)


def draw_symbol(element, x1, x2, y, **drawing_overrides):
    """Segments of a leaf element placed over [x1, x2] on centerline y"""
    params = initialize_drawing_parameters(**drawing_overrides)
    stroke_width = params['stroke_width']

    if isinstance(element, Wire):
        return draw_wire(x1, x2, y, stroke_width)
    elif isinstance(element, Resistor):
        return draw_resistor(x1, x2, y, stroke_width,
                             resistor_inset=params['resistor_inset'],
                             resistor_zigzag=params['resistor_zigzag'])
    elif isinstance(element, Capacitor):
        return draw_capacitor(x1, x2, y, stroke_width,
                              terminal_gap=params['terminal_gap'],
                              long_plate=params['long_plate'])
    elif isinstance(element, Battery):
        return draw_battery(x1, x2, y, stroke_width,
                            terminal_gap=params['terminal_gap'],
                            long_plate=params['long_plate'],
                            short_plate=params['short_plate'])
    raise TypeError(f"Not a leaf element: {element!r}")
