from __future__ import annotations

import sys
from typing import Optional

import customtkinter

from scene import Scene, DragController, PANEL_SIZE
from plotting import CanvasSurface, render_scene_to_file


# Buttons 4/5 are the scroll wheel on X11.
POINTER_BUTTONS = (1, 2, 3)
# Button1Mask | Button2Mask | Button3Mask
HELD_BUTTON_MASK = 0x100 | 0x200 | 0x400


class DragApp(customtkinter.CTk):
    """
    Window hosting a fixed-size canvas with the scene on it. Owns the scene and
    the drag controller; press/drag/release of any pointer button are forwarded
    to the controller and every state change schedules one repaint.
    """
    def __init__(self, scene: Scene, panel_size: int = PANEL_SIZE, snapshot_path: Optional[str] = None):
        super().__init__()

        self.scene = scene
        self.panel_size = panel_size
        self.snapshot_path = snapshot_path
        self._repaint_pending = False

        self.title("DragMany")
        self.geometry(f"{panel_size}x{panel_size}")
        self.resizable(False, False)

        self.setup_ui()

        self.controller = DragController(scene, request_repaint=self.request_repaint)
        self.surface = CanvasSurface(self.canvas)

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self.redraw()

    def setup_ui(self) -> None:
        """Creates the canvas and binds pointer events."""
        self.canvas = customtkinter.CTkCanvas(
            self,
            width=self.panel_size,
            height=self.panel_size,
            bg="white",
            highlightthickness=0,
        )
        self.canvas.pack(fill="both", expand=True)

        self.canvas.bind("<ButtonPress>", self.on_press)
        self.canvas.bind("<Motion>", self.on_drag)
        self.canvas.bind("<ButtonRelease>", self.on_release)

    def on_press(self, event) -> None:
        if event.num not in POINTER_BUTTONS:
            return
        self.controller.press((event.x, event.y))

    def on_drag(self, event) -> None:
        if not event.state & HELD_BUTTON_MASK:
            return
        self.controller.move((event.x, event.y))

    def on_release(self, event) -> None:
        if event.num not in POINTER_BUTTONS:
            return
        self.controller.release((event.x, event.y))

    def request_repaint(self) -> None:
        # Coalesce bursts of motion events into a single redraw.
        if self._repaint_pending:
            return
        self._repaint_pending = True
        self.after_idle(self.redraw)

    def redraw(self) -> None:
        self._repaint_pending = False
        self.surface.clear()
        self.scene.render(self.surface)

    def on_close(self) -> None:
        try:
            if self.snapshot_path:
                print(f"Saving snapshot -> {self.snapshot_path}")
                render_scene_to_file(self.scene, self.snapshot_path, panel_size=self.panel_size)
        except (OSError, ValueError) as e:
            print(f"Error saving snapshot {self.snapshot_path}: {e}", file=sys.stderr)
        finally:
            self.destroy()
