from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from PIL import Image, ImageDraw
from matplotlib.patches import Circle, Rectangle


def to_hex(rgb: Sequence[int]) -> str:
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def to_unit_rgb(rgb: Sequence[int]) -> np.ndarray:
    """RGB in [0, 255] -> RGB in [0, 1] for matplotlib."""
    return np.clip(np.array(rgb, dtype=float).reshape(3,) / 255.0, 0.0, 1.0)


class Surface:
    """
    Something shapes can draw on. Coordinates are integer pixels with the
    origin at the top-left corner and y growing downwards; (x, y) is the
    top-left corner of a size x size bounding box.
    """
    def fill_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        raise NotImplementedError

    def draw_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        raise NotImplementedError

    def fill_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        raise NotImplementedError

    def draw_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        raise NotImplementedError


class CanvasSurface(Surface):
    """
    Draws onto a Tk canvas (tkinter.Canvas or customtkinter.CTkCanvas) as canvas items.
    """
    def __init__(self, canvas: Any, tag: str = "shape"):
        self.canvas = canvas
        self.tag = tag

    def clear(self) -> None:
        self.canvas.delete(self.tag)

    def fill_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        c = to_hex(color)
        self.canvas.create_oval(x, y, x + size, y + size, fill=c, outline=c, tags=self.tag)

    def draw_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self.canvas.create_oval(x, y, x + size, y + size, fill="", outline=to_hex(color), tags=self.tag)

    def fill_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        c = to_hex(color)
        self.canvas.create_rectangle(x, y, x + size, y + size, fill=c, outline=c, tags=self.tag)

    def draw_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self.canvas.create_rectangle(x, y, x + size, y + size, fill="", outline=to_hex(color), tags=self.tag)


class ImageSurface(Surface):
    """
    Draws into a PIL image. Filled shapes cover size x size pixels, outlines
    are one pixel wide and span size + 1 pixels.
    """
    def __init__(self, image: Image.Image):
        self.image = image
        self.draw = ImageDraw.Draw(image)

    def fill_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self.draw.ellipse([x, y, x + size - 1, y + size - 1], fill=tuple(color))

    def draw_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self.draw.ellipse([x, y, x + size, y + size], outline=tuple(color), width=1)

    def fill_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self.draw.rectangle([x, y, x + size - 1, y + size - 1], fill=tuple(color))

    def draw_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self.draw.rectangle([x, y, x + size, y + size], outline=tuple(color), width=1)


class AxesSurface(Surface):
    """
    Draws onto a Matplotlib axis as patches. Call prepare() first so the axis
    uses pixel coordinates with y pointing down.
    """
    def __init__(self, ax: Any, linewidth: float = 1.0):
        self.ax = ax
        self.linewidth = linewidth

    def prepare(self, panel_size: int) -> None:
        self.ax.set_xlim(0, panel_size)
        self.ax.set_ylim(panel_size, 0)
        self.ax.set_aspect("equal")
        self.ax.axis("off")

    def _add_circle(self, x: int, y: int, size: int, color: Sequence[int], filled: bool) -> None:
        rgb = to_unit_rgb(color)
        half = size / 2.0
        self.ax.add_patch(Circle((x + half, y + half), half, fill=filled, facecolor=rgb if filled else "none", edgecolor=rgb, linewidth=self.linewidth))

    def _add_square(self, x: int, y: int, size: int, color: Sequence[int], filled: bool) -> None:
        rgb = to_unit_rgb(color)
        self.ax.add_patch(Rectangle((x, y), size, size, fill=filled, facecolor=rgb if filled else "none", edgecolor=rgb, linewidth=self.linewidth))

    def fill_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self._add_circle(x, y, size, color, filled=True)

    def draw_oval(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self._add_circle(x, y, size, color, filled=False)

    def fill_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self._add_square(x, y, size, color, filled=True)

    def draw_rect(self, x: int, y: int, size: int, color: Sequence[int]) -> None:
        self._add_square(x, y, size, color, filled=False)
