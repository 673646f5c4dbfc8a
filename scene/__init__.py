# Re-export scene model, generation and dragging API
from .model import Scene
from .generator import (
    MIN_SIZE,
    MAX_SIZE,
    PANEL_SIZE,
    SceneConfig,
    random_shape,
    initialize_scene,
)
from .drag import (
    DragSession,
    DragController,
)
