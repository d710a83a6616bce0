import logging

import numpy as np

from .circuit_elements import Battery, Capacitor, Parallel, Resistor, Series, Wire

logger = logging.getLogger(__name__)


def resistance(element):
    """
    Equivalent DC resistance of a circuit tree, in ohms.

    Capacitors are open circuits at steady state and evaluate to ``inf``;
    wires and ideal batteries contribute nothing. Infinite and zero branches
    follow IEEE-754 arithmetic, so a shorted parallel pair gives 0 and two
    open branches in parallel stay open. Nothing here raises on those values.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        value = float(_resistance(element))
    if np.isinf(value):
        logger.info("Circuit is open: equivalent resistance is infinite")
    return value


def _resistance(element):
    if isinstance(element, (Wire, Battery)):
        return np.float64(0.0)
    elif isinstance(element, Capacitor):
        return np.float64(np.inf)
    elif isinstance(element, Resistor):
        return np.float64(element.resistance)
    elif isinstance(element, Series):
        return _resistance(element.left) + _resistance(element.right)
    elif isinstance(element, Parallel):
        one = np.float64(1.0)
        return one / (one / _resistance(element.top) + one / _resistance(element.bottom))
    raise TypeError(f"Unknown circuit element: {element!r}")
