from typing import NamedTuple

import numpy as np

pi = np.pi
up = 0.5 * pi
down = 1.5 * pi
left = pi
right = 0.0


class Segment(NamedTuple):
    """Straight line between two points, in math convention (y up)."""
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float


def endpoint(x, y, angle, length):
    """Point reached from (x, y) going `length` along `angle` (radians, counter-clockwise)"""
    return (x + length * np.cos(angle),
            y + length * np.sin(angle))


def flip(y, canvas_height):
    """Convert a y coordinate between math (up positive) and canvas (down positive) convention"""
    return canvas_height - y


def line(x, y, angle, length, stroke_width):
    """Segment starting at (x, y) going `length` along `angle`"""
    x_end, y_end = endpoint(x, y, angle, length)
    return Segment(float(x), float(y), float(x_end), float(y_end), float(stroke_width))


def walk_path(x, y, vectors, stroke_width):
    """
    Follow a chain of (angle, length) vectors starting at (x, y).

    Each segment starts where the previous one ended.
    """
    segments = []
    for angle, length in vectors:
        segment = line(x, y, angle, length, stroke_width)
        segments.append(segment)
        x, y = segment.x2, segment.y2
    return segments
