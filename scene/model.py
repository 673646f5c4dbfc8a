from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, TYPE_CHECKING
import numpy as np

from shapes import DraggableShape

if TYPE_CHECKING:
    from plotting.surfaces import Surface


class Scene:
    """
    Ordered collection of shapes. Order is paint order: later shapes are drawn
    on top of earlier ones.
    """
    def __init__(self, shapes: Iterable[DraggableShape] = ()):
        self._shapes: List[DraggableShape] = list(shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[DraggableShape]:
        return iter(self._shapes)

    def __getitem__(self, index: int) -> DraggableShape:
        return self._shapes[index]

    def append(self, shape: DraggableShape) -> None:
        self._shapes.append(shape)

    def index(self, shape: DraggableShape) -> int:
        # identity, not equality: two shapes may look the same
        for i, s in enumerate(self._shapes):
            if s is shape:
                return i
        raise ValueError(f"{shape!r} is not in the scene")

    def shape_at(self, point_xy: Sequence[int] | np.ndarray) -> Optional[DraggableShape]:
        """
        Topmost shape containing the point, or None.
        """
        for shape in reversed(self._shapes):
            if shape.contains(point_xy):
                return shape
        return None

    def bring_to_front(self, shape: DraggableShape) -> None:
        i = self.index(shape)
        self._shapes.append(self._shapes.pop(i))

    def render(self, surface: "Surface") -> None:
        for shape in self._shapes:
            shape.render(surface)
