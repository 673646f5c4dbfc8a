from .surfaces import (
    Surface,
    CanvasSurface,
    ImageSurface,
    AxesSurface,
    to_hex,
    to_unit_rgb,
)
from .renderer import (
    render_scene_image,
    render_scene_to_axes,
    render_scene_to_file,
)
