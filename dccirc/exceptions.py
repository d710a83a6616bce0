"""Custom exceptions for dccirc."""


class CircuitError(Exception):
    """Base class for errors raised by dccirc."""

    pass


class CircuitParseError(CircuitError, ValueError):
    """Raised when a circuit expression string cannot be parsed."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Cannot parse circuit expression '{expression}': {reason}")


class DegenerateGeometryError(CircuitError):
    """Raised when a subtree is assigned an empty or reversed horizontal span."""

    def __init__(self, element, x1: float, x2: float):
        self.element = element
        self.x1 = x1
        self.x2 = x2
        super().__init__(
            f"Degenerate span [{x1}, {x2}] for {type(element).__name__}; "
            f"x1 must be strictly less than x2."
        )
