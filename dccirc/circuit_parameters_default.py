import numpy as np
import re

ELEMENT_CONFIG = {
    'W': {
        'default': None,
        'unit': '',
        'description': 'Ideal wire (0 Ω)'
    },
    'R': {
        'default': 100,
        'unit': 'Ω',
        'description': 'Resistance (Ω)'
    },
    'C': {
        'default': 1e-6,
        'unit': 'F',
        'description': 'Capacitance (F), open circuit at DC'
    },
    'B': {
        'default': 1.5,
        'unit': 'V',
        'description': 'Battery voltage (V), ideal source'
    },
}

# Multipliers accepted after an element value, e.g. R4.7k or C10u
SI_PREFIX_MULTIPLIERS = {
    'p': 1e-12,
    'n': 1e-9,
    'u': 1e-6,
    'µ': 1e-6,
    'm': 1e-3,
    'k': 1e3,
    'M': 1e6,
    'MEG': 1e6,
    'G': 1e9,
}

DRAWING_CONFIG = {
    # Layout
    'unit_pixels': {
        'default': 60.0,
        'description': 'Pixels per layout width unit (parallel branch offset)'
    },
    'series_split': {
        'default': 'proportional',
        'choices': ('proportional', 'legacy'),
        'description': 'Series divider: x1 + f*(x2-x1), or the legacy f*(x1+x2)'
    },

    # Strokes
    'stroke_width': {
        'default': 3.0,
        'description': 'Line width of leads and symbols (px)'
    },
    'bus_stroke_width': {
        'default': 2.0,
        'description': 'Line width of parallel bus bars (px)'
    },

    # Symbols
    'resistor_inset': {
        'default': 30.0,
        'description': 'Half-width of the resistor zigzag gap (px)'
    },
    'resistor_zigzag': {
        'default': ((0.25 * np.pi, 11.0), (-0.25 * np.pi, 22.0), (0.25 * np.pi, 22.0),
                    (-0.25 * np.pi, 22.0), (0.25 * np.pi, 11.0)),
        'description': 'Zigzag path as (angle, length) vectors'
    },
    'terminal_gap': {
        'default': 10.0,
        'description': 'Half-distance between capacitor/battery plates (px)'
    },
    'long_plate': {
        'default': 20.0,
        'description': 'Half-length of a long plate (px)'
    },
    'short_plate': {
        'default': 10.0,
        'description': 'Half-length of the short battery plate (px)'
    },

    # Canvas
    'canvas_width': {
        'default': 1000,
        'description': 'Canvas width (px)'
    },
    'canvas_height': {
        'default': 600,
        'description': 'Canvas height (px)'
    },
    'span': {
        'default': (50.0, 950.0),
        'description': 'Default horizontal span (x1, x2) of the top-level circuit'
    },
    'centerline': {
        'default': 400.0,
        'description': 'Default centerline y of the top-level circuit (math convention)'
    },
}


def extract_base_type(token):
    """Element kind of an expression token ('R4.7k' -> 'R')"""
    match = re.match(r'^([A-Za-z])', token)
    if not match:
        raise ValueError(f"Cannot determine element type of '{token}'")
    return match.group(1).upper()


def get_drawing_parameter(name, **overrides):
    """Drawing parameter value, with keyword overrides taking precedence"""
    if name not in DRAWING_CONFIG:
        raise ValueError(f"Unknown drawing parameter: {name}")
    value = overrides.get(name, DRAWING_CONFIG[name]['default'])
    choices = DRAWING_CONFIG[name].get('choices')
    if choices and value not in choices:
        raise ValueError(f"{name} must be one of {choices}, got {value!r}")
    return value


def initialize_drawing_parameters(**overrides):
    """Full drawing parameter set with defaults filled in"""
    unknown = set(overrides) - set(DRAWING_CONFIG)
    if unknown:
        raise ValueError(f"Unknown drawing parameter(s): {', '.join(sorted(unknown))}")
    return {name: get_drawing_parameter(name, **overrides) for name in DRAWING_CONFIG}
