from __future__ import annotations

from typing import Literal, Sequence, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from plotting.surfaces import Surface


ShapeKind = Literal["circle", "square"]
SHAPE_KINDS: Tuple[ShapeKind, ...] = ("circle", "square")

RGB = Tuple[int, int, int]


def _as_point(point_xy: Sequence[int] | np.ndarray) -> np.ndarray:
    p = np.array(point_xy, dtype=np.int64).reshape(-1)
    if p.shape != (2,):
        raise ValueError("point must have exactly two coordinates")
    return p


class DraggableShape:
    """
    A circle or square on the canvas, described by the top-left corner of its
    bounding box (the anchor) and its size (diameter / edge length).

    The anchor is the only mutable part. It is copied on construction so that
    no caller-owned point is ever aliased.
    """
    def __init__(self,
                 kind: ShapeKind,
                 filled: bool,
                 size: int,
                 anchor: Sequence[int] | np.ndarray,
                 color: Sequence[int]):
        if kind not in SHAPE_KINDS:
            raise ValueError(f"unknown shape kind: {kind}")
        if int(size) <= 0:
            raise ValueError("size must be positive")
        rgb = tuple(int(c) for c in color)
        if len(rgb) != 3 or any(c < 0 or c > 255 for c in rgb):
            raise ValueError("color must be an RGB triple with channels in [0, 255]")
        self._kind: ShapeKind = kind
        self._filled = bool(filled)
        self._size = int(size)
        self._color: RGB = rgb  # type: ignore[assignment]
        self._anchor = _as_point(anchor)

    @property
    def kind(self) -> ShapeKind:
        return self._kind

    @property
    def filled(self) -> bool:
        return self._filled

    @property
    def size(self) -> int:
        return self._size

    @property
    def color(self) -> RGB:
        return self._color

    @property
    def anchor(self) -> Tuple[int, int]:
        return int(self._anchor[0]), int(self._anchor[1])

    @property
    def center(self) -> Tuple[int, int]:
        half = self._size // 2
        return int(self._anchor[0]) + half, int(self._anchor[1]) + half

    def render(self, surface: "Surface") -> None:
        """
        Draw this shape onto the given surface.
        """
        x, y = self.anchor
        if self._kind == "circle":
            if self._filled:
                surface.fill_oval(x, y, self._size, self._color)
            else:
                surface.draw_oval(x, y, self._size, self._color)
        else:
            if self._filled:
                surface.fill_rect(x, y, self._size, self._color)
            else:
                surface.draw_rect(x, y, self._size, self._color)

    def translate(self, dx: int, dy: int) -> None:
        # Relative move; off-canvas positions are allowed.
        self._anchor += np.array([int(dx), int(dy)], dtype=np.int64)

    def contains(self, point_xy: Sequence[int] | np.ndarray) -> bool:
        p = _as_point(point_xy)
        if self._kind == "circle":
            # Integer-divided radius keeps the hit boundary slightly inside the drawn circle.
            center = np.array(self.center, dtype=np.int64)
            return float(np.linalg.norm(p - center)) <= self._size // 2
        x, y = self._anchor
        return bool(x <= p[0] <= x + self._size and y <= p[1] <= y + self._size)

    def __repr__(self) -> str:
        style = "filled" if self._filled else "outlined"
        return f"DraggableShape({style} {self._kind}, size={self._size}, anchor={self.anchor}, color={self._color})"
