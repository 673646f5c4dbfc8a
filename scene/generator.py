from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

from shapes import DraggableShape, SHAPE_KINDS

from .model import Scene


MIN_SIZE = 25
MAX_SIZE = 100
PANEL_SIZE = 600


@dataclass(frozen=True)
class SceneConfig:
    count: int
    min_size: int = MIN_SIZE
    max_size: int = MAX_SIZE
    panel_size: int = PANEL_SIZE
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.count < 1:
            raise ValueError("count must be a positive integer")
        if not 0 < self.min_size < self.max_size <= self.panel_size:
            raise ValueError("sizes must satisfy 0 < min_size < max_size <= panel_size")


def _rand_color(rng: np.random.Generator) -> Tuple[int, int, int]:
    r, g, b = rng.integers(0, 255, size=3)
    return int(r), int(g), int(b)


def random_shape(rng: np.random.Generator, cfg: SceneConfig) -> DraggableShape:
    """
    One shape whose bounding box fits on the panel.
    """
    kind = rng.choice(SHAPE_KINDS).item()
    filled = bool(rng.integers(0, 2))
    size = int(rng.integers(cfg.min_size, cfg.max_size))
    anchor = rng.integers(0, cfg.panel_size - size, size=2)
    return DraggableShape(kind, filled, size, anchor, _rand_color(rng))


def initialize_scene(cfg: SceneConfig) -> Tuple[np.random.Generator, Scene]:
    rng = np.random.default_rng(cfg.random_seed)
    scene = Scene(random_shape(rng, cfg) for _ in range(cfg.count))
    return rng, scene
