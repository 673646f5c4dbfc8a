# Re-export core geometry API for convenience
from .geometry import (
    DraggableShape,
    ShapeKind,
    SHAPE_KINDS,
    RGB,
)
