from __future__ import annotations

from typing import Optional, Tuple
import os
from PIL import Image
from matplotlib.figure import Figure

from scene import Scene, PANEL_SIZE
from plotting.surfaces import AxesSurface, ImageSurface


def render_scene_image(
    scene: Scene,
    panel_size: int = PANEL_SIZE,
    background: Tuple[int, int, int] = (255, 255, 255),
) -> Image.Image:
    """
    Rasterize the scene in memory, pixel for pixel as laid out on the panel.
    """
    image = Image.new("RGB", (panel_size, panel_size), background)
    scene.render(ImageSurface(image))
    return image


def render_scene_to_axes(
    ax,
    scene: Scene,
    panel_size: int = PANEL_SIZE,
    title: Optional[str] = None,
) -> None:
    surface = AxesSurface(ax)
    surface.prepare(panel_size)
    scene.render(surface)
    if title:
        ax.set_title(title)


def render_scene_to_file(
    scene: Scene,
    out_path: str,
    panel_size: int = PANEL_SIZE,
    dpi: int = 100,
    title: Optional[str] = None,
    format: Optional[str] = None,
    transparent: bool = False,
) -> None:
    """
    Saves the scene as a picture (PNG, SVG, ... picked from the extension
    unless format is given).
    """
    fig = Figure(figsize=(panel_size / dpi, panel_size / dpi), dpi=dpi)
    fig.patch.set_facecolor("white")
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))

    render_scene_to_axes(ax, scene, panel_size=panel_size, title=title)

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    if format is None:
        format = "svg" if out_path.endswith(".svg") else "png"

    fig.savefig(out_path, dpi=dpi, format=format, transparent=transparent, facecolor="white")
