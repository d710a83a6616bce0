import logging
from typing import NamedTuple

from .circuit_elements import Parallel, Series
from .circuit_parameters_default import initialize_drawing_parameters
from .exceptions import DegenerateGeometryError
from .geometry import line, up
from .symbols import draw_symbol

logger = logging.getLogger(__name__)


class Extent(NamedTuple):
    """Size of a subtree in layout units."""
    length: int
    width: int


def circuit_length(element):
    """Horizontal layout units: series lengths add, parallel branches share the widest"""
    if isinstance(element, Series):
        return circuit_length(element.left) + circuit_length(element.right)
    elif isinstance(element, Parallel):
        return max(circuit_length(element.top), circuit_length(element.bottom))
    return 1


def circuit_width(element):
    """Vertical layout units: parallel widths add, series takes the tallest part"""
    if isinstance(element, Parallel):
        return circuit_width(element.top) + circuit_width(element.bottom)
    elif isinstance(element, Series):
        return max(circuit_width(element.left), circuit_width(element.right))
    return 1


def extent(element):
    return Extent(circuit_length(element), circuit_width(element))


def series_split(left_length, right_length, x1, x2, mode='proportional'):
    """
    Divider between the two halves of a series pair.

    'proportional' interpolates inside [x1, x2]. 'legacy' keeps the historical
    f * (x1 + x2) formula, which only agrees with it when x1 == 0.
    """
    fraction = left_length / (left_length + right_length)
    if mode == 'proportional':
        return x1 + fraction * (x2 - x1)
    elif mode == 'legacy':
        return fraction * (x1 + x2)
    raise ValueError(f"Unknown series split mode: {mode!r}")


def layout_circuit(element, x1, x2, y, **drawing_overrides):
    """
    Place a circuit tree over the span [x1, x2] on centerline y.

    Returns the drawing segments in math convention, in draw order: series
    parts left to right, parallel branches top then bottom, followed by the
    two bus bars joining them.
    """
    params = initialize_drawing_parameters(**drawing_overrides)
    segments = []
    _layout(element, x1, x2, y, params, segments)
    logger.debug("Laid out %s over [%s, %s] at y=%s: %d segments",
                 type(element).__name__, x1, x2, y, len(segments))
    return segments


def _layout(element, x1, x2, y, params, segments):
    if not x1 < x2:
        raise DegenerateGeometryError(element, x1, x2)

    if isinstance(element, Series):
        midpoint = series_split(circuit_length(element.left), circuit_length(element.right),
                                x1, x2, params['series_split'])
        _layout(element.left, x1, midpoint, y, params, segments)
        _layout(element.right, midpoint, x2, y, params, segments)

    elif isinstance(element, Parallel):
        width_top = params['unit_pixels'] * circuit_width(element.top)
        width_bottom = params['unit_pixels'] * circuit_width(element.bottom)
        width = width_top + width_bottom
        _layout(element.top, x1, x2, y + width_top, params, segments)
        _layout(element.bottom, x1, x2, y - width_bottom, params, segments)
        segments.append(line(x1, y - width_bottom, up, width, params['bus_stroke_width']))
        segments.append(line(x2, y - width_bottom, up, width, params['bus_stroke_width']))

    else:
        segments.extend(draw_symbol(element, x1, x2, y, **params))
