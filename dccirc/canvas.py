"""
Canvas adapters.

The layout engine only produces segments in math convention (y up). A canvas
takes lines in its own convention (y down); `render` flips each segment once
on the way in.
"""

import logging
from typing import NamedTuple, Protocol

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from mpl_toolkits.axes_grid1.inset_locator import inset_axes

from .circuit_parameters_default import DRAWING_CONFIG
from .geometry import flip

logger = logging.getLogger(__name__)


class Canvas(Protocol):
    height: float

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  stroke_width: float) -> None:
        ...


class DrawCommand(NamedTuple):
    """A draw_line call in canvas coordinates."""
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float


class RecordingCanvas:
    """Canvas that keeps every draw_line call in order."""

    def __init__(self, width=None, height=None):
        self.width = DRAWING_CONFIG['canvas_width']['default'] if width is None else width
        self.height = DRAWING_CONFIG['canvas_height']['default'] if height is None else height
        self.commands = []

    def draw_line(self, x1, y1, x2, y2, stroke_width):
        self.commands.append(DrawCommand(x1, y1, x2, y2, stroke_width))

    def __len__(self):
        return len(self.commands)


class MatplotlibCanvas:
    """
    Canvas backed by a matplotlib axes spanning width x height pixels.

    Without `ax` a new figure of that size is created. With `ax` the drawing
    goes into an inset of the given axes, placed at `loc`.
    """

    def __init__(self, width=None, height=None, ax=None, position=None, dpi=100,
                 loc='upper right', borderpad=1, color='black'):
        self.width = DRAWING_CONFIG['canvas_width']['default'] if width is None else width
        self.height = DRAWING_CONFIG['canvas_height']['default'] if height is None else height
        self.color = color

        if ax is None:
            self.figure = plt.figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
            self.ax = self.figure.add_axes([0, 0, 1, 1])
            self.is_inset = False
        else:
            if position is None:
                position = [0.3 * self.width / dpi, 0.3 * self.height / dpi]
            self.ax = inset_axes(ax, width=position[0], height=position[1],
                                 loc=loc, borderpad=borderpad)
            self.figure = ax.figure
            self.is_inset = True

        # Canvas convention: origin top-left, y grows downwards
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect('equal')
        self.ax.axis('off')
        self._points_per_pixel = 72.0 / self.figure.dpi

    def draw_line(self, x1, y1, x2, y2, stroke_width):
        self.ax.add_line(Line2D([x1, x2], [y1, y2], color=self.color,
                                linewidth=stroke_width * self._points_per_pixel,
                                solid_capstyle='butt'))

    def save(self, path, **kwargs):
        self.figure.savefig(path, **kwargs)
        logger.info("Saved schematic to %s", path)

    def show(self):
        plt.show()

    def close(self):
        # an inset belongs to the caller's figure
        if not self.is_inset:
            plt.close(self.figure)


def render(segments, canvas: Canvas) -> Canvas:
    """Send math-convention segments to a canvas, flipping y exactly once"""
    for segment in segments:
        canvas.draw_line(segment.x1, flip(segment.y1, canvas.height),
                         segment.x2, flip(segment.y2, canvas.height),
                         segment.stroke_width)
    logger.debug("Rendered %d segments", len(segments))
    return canvas
