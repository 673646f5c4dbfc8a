"""Tests for drawing surfaces and scene rendering."""

from PIL import Image

from plotting import (
    CanvasSurface,
    ImageSurface,
    render_scene_image,
    render_scene_to_file,
    to_hex,
    to_unit_rgb,
)
from scene import Scene, SceneConfig, initialize_scene
from shapes import DraggableShape


WHITE = (255, 255, 255)
RED = (220, 20, 20)
BLUE = (20, 20, 220)


def test_color_conversions() -> None:
    assert to_hex((255, 0, 16)) == "#ff0010"
    assert to_unit_rgb((255, 0, 51)).tolist() == [1.0, 0.0, 0.2]


def test_filled_square_covers_its_box() -> None:
    image = render_scene_image(Scene([DraggableShape("square", True, 40, (10, 10), RED)]), panel_size=100)
    assert image.size == (100, 100)
    assert image.getpixel((10, 10)) == RED
    assert image.getpixel((30, 30)) == RED
    assert image.getpixel((60, 60)) == WHITE


def test_outlined_circle_leaves_center_empty() -> None:
    image = render_scene_image(Scene([DraggableShape("circle", False, 40, (10, 10), BLUE)]), panel_size=100)
    assert image.getpixel((30, 30)) == WHITE
    assert any(image.getpixel((x, 30)) == BLUE for x in range(9, 13))


def test_later_shapes_paint_over_earlier_ones() -> None:
    bottom = DraggableShape("square", True, 50, (0, 0), RED)
    top = DraggableShape("square", True, 50, (25, 25), BLUE)
    scene = Scene([bottom, top])
    assert render_scene_image(scene, panel_size=100).getpixel((30, 30)) == BLUE
    scene.bring_to_front(bottom)
    assert render_scene_image(scene, panel_size=100).getpixel((30, 30)) == RED


def test_off_canvas_shapes_are_clipped() -> None:
    shape = DraggableShape("square", True, 40, (-20, -20), RED)
    image = Image.new("RGB", (50, 50), WHITE)
    shape.render(ImageSurface(image))
    assert image.getpixel((0, 0)) == RED
    assert image.getpixel((25, 25)) == WHITE


class _FakeCanvas:
    def __init__(self) -> None:
        self.items = []
        self.deleted = []

    def create_oval(self, *coords, **options):
        self.items.append(("oval", coords, options))

    def create_rectangle(self, *coords, **options):
        self.items.append(("rectangle", coords, options))

    def delete(self, tag):
        self.deleted.append(tag)


def test_canvas_surface_creates_tagged_items() -> None:
    canvas = _FakeCanvas()
    surface = CanvasSurface(canvas)
    Scene([
        DraggableShape("circle", True, 30, (1, 2), (255, 0, 0)),
        DraggableShape("square", False, 20, (5, 6), (0, 255, 0)),
    ]).render(surface)
    assert canvas.items == [
        ("oval", (1, 2, 31, 32), {"fill": "#ff0000", "outline": "#ff0000", "tags": "shape"}),
        ("rectangle", (5, 6, 25, 26), {"fill": "", "outline": "#00ff00", "tags": "shape"}),
    ]
    surface.clear()
    assert canvas.deleted == ["shape"]


def test_render_scene_to_file_writes_png_and_svg(tmp_path) -> None:
    _, scene = initialize_scene(SceneConfig(count=6, random_seed=1))
    png_path = tmp_path / "out" / "scene.png"
    svg_path = tmp_path / "scene.svg"
    render_scene_to_file(scene, str(png_path), dpi=50)
    render_scene_to_file(scene, str(svg_path))
    with Image.open(png_path) as img:
        assert img.size == (600, 600)
    assert svg_path.read_text(encoding="utf-8").lstrip().startswith("<?xml")
