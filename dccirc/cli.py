"""
Command-line interface for dccirc.

Print the equivalent DC resistance of a circuit and draw its schematic.

Usage::

    python -m dccirc
    python -m dccirc "W-(R5-C3-B1)//(B2-R4//(R5-R1))-W" --output circuit.png
    python -m dccirc "R4.7k//R10k" --no-show
"""

import argparse
import logging
import sys

import numpy as np

from .circuit_elements import example_circuit
from .circuit_parameters_default import DRAWING_CONFIG
from .circuit_parser import CircuitModel
from .exceptions import CircuitError

logger = logging.getLogger(__name__)

MARGIN = DRAWING_CONFIG['span']['default'][0]


def format_resistance(value):
    if np.isinf(value):
        return "inf Ω (open circuit)"
    return f"{value:g} Ω"


def default_geometry(width, height):
    """Span and centerline for a canvas: fixed side margins, centerline two thirds up"""
    return MARGIN, width - MARGIN, height * 2.0 / 3.0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dccirc",
        description="Compute the DC resistance of a circuit and draw its schematic.",
    )
    parser.add_argument(
        "expression", nargs="?",
        help="circuit expression, e.g. 'W-R5//(R4-C1u)-W' (default: built-in example)",
    )
    parser.add_argument("-o", "--output", help="save the schematic to this file")
    parser.add_argument("--width", type=int, default=DRAWING_CONFIG['canvas_width']['default'],
                        help="canvas width in pixels")
    parser.add_argument("--height", type=int, default=DRAWING_CONFIG['canvas_height']['default'],
                        help="canvas height in pixels")
    parser.add_argument("--legacy-split", action="store_true",
                        help="use the legacy f*(x1+x2) series divider")
    parser.add_argument("--no-show", action="store_true",
                        help="do not open a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.expression is None:
            model = CircuitModel(example_circuit())
        else:
            model = CircuitModel(args.expression)
    except CircuitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Equivalent resistance: {format_resistance(model.resistance())}")

    if args.no_show and not args.output:
        return 0

    if args.no_show:
        import matplotlib
        matplotlib.use("Agg")

    x1, x2, y = default_geometry(args.width, args.height)
    split = 'legacy' if args.legacy_split else 'proportional'
    try:
        model.draw_circuit(width=args.width, height=args.height, x1=x1, x2=x2, y=y,
                           series_split=split)
    except CircuitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        model.canvas.save(args.output)
    if not args.no_show:
        model.canvas.show()
    model.canvas.close()
    return 0
