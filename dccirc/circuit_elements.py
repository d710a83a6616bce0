from dataclasses import dataclass
from typing import NewType

Volts = NewType('Volts', float)      # energy per unit charge, EMF
Ohms = NewType('Ohms', float)        # volts required per ampere of current
Farads = NewType('Farads', float)    # coulombs stored per volt


class CircuitElement:
    """
    Base of the circuit tree.

    Elements combine with `-` (series) and `//` (parallel):

        Wire() - Resistor(4) // (Resistor(5) - Resistor(1)) - Wire()

    `//` binds tighter than `-`, and both group left to right.
    """

    __slots__ = ()

    def __sub__(self, other):
        if not isinstance(other, CircuitElement):
            return NotImplemented
        return series(self, other)

    def __floordiv__(self, other):
        if not isinstance(other, CircuitElement):
            return NotImplemented
        return parallel(self, other)

    @property
    def is_leaf(self):
        return not isinstance(self, (Series, Parallel))


@dataclass(frozen=True)
class Wire(CircuitElement):
    pass


@dataclass(frozen=True)
class Battery(CircuitElement):
    voltage: Volts


@dataclass(frozen=True)
class Resistor(CircuitElement):
    resistance: Ohms


@dataclass(frozen=True)
class Capacitor(CircuitElement):
    capacitance: Farads


@dataclass(frozen=True)
class Series(CircuitElement):
    left: CircuitElement
    right: CircuitElement


@dataclass(frozen=True)
class Parallel(CircuitElement):
    top: CircuitElement
    bottom: CircuitElement


def series(a: CircuitElement, b: CircuitElement) -> Series:
    return Series(a, b)


def parallel(a: CircuitElement, b: CircuitElement) -> Parallel:
    return Parallel(a, b)


def example_circuit() -> CircuitElement:
    """Mixed series/parallel network with an open (capacitor) branch; 2.4 Ω overall."""
    return (Wire()
            - (Resistor(Ohms(5.0)) - Capacitor(Farads(3.0)) - Battery(Volts(1.0)))
            // (Battery(Volts(2.0))
                - Resistor(Ohms(4.0)) // (Resistor(Ohms(5.0)) - Resistor(Ohms(1.0))))
            - Wire())
