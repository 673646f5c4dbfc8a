from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple
import numpy as np

from shapes import DraggableShape

from .model import Scene


@dataclass
class DragSession:
    shape: DraggableShape
    last_pointer: Tuple[int, int]


def _pointer(point_xy: Sequence[int] | np.ndarray) -> Tuple[int, int]:
    x, y = point_xy
    return int(x), int(y)


class DragController:
    """
    Pointer state machine for dragging one shape at a time.

    Idle --press on a shape--> Dragging: the shape is moved to the top of the
    scene and follows the pointer by relative offsets until release.
    Presses on empty space, and move/release while idle, change nothing.
    """
    def __init__(self, scene: Scene, request_repaint: Optional[Callable[[], None]] = None):
        self.scene = scene
        self._request_repaint = request_repaint
        self._session: Optional[DragSession] = None

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def dragging(self) -> Optional[DraggableShape]:
        return self._session.shape if self._session is not None else None

    def press(self, point_xy: Sequence[int] | np.ndarray) -> Optional[DraggableShape]:
        self._session = None
        p = _pointer(point_xy)
        shape = self.scene.shape_at(p)
        if shape is None:
            return None
        self.scene.bring_to_front(shape)
        self._session = DragSession(shape=shape, last_pointer=p)
        return shape

    def move(self, point_xy: Sequence[int] | np.ndarray) -> None:
        if self._session is None:
            return
        p = self._drag_to(point_xy)
        self._session.last_pointer = p
        self._repaint()

    def release(self, point_xy: Sequence[int] | np.ndarray) -> None:
        if self._session is None:
            return
        self._drag_to(point_xy)
        self._session = None
        self._repaint()

    def _drag_to(self, point_xy: Sequence[int] | np.ndarray) -> Tuple[int, int]:
        assert self._session is not None
        p = _pointer(point_xy)
        lx, ly = self._session.last_pointer
        self._session.shape.translate(p[0] - lx, p[1] - ly)
        return p

    def _repaint(self) -> None:
        if self._request_repaint is not None:
            self._request_repaint()
