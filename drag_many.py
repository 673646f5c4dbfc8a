from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, Sequence

from scene import Scene, SceneConfig, initialize_scene, PANEL_SIZE


class _ArgumentParser(argparse.ArgumentParser):
    # Startup errors exit with status 1 instead of argparse's 2.
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _int_arg(value: str) -> int:
    # ASCII decimal digits only, optionally signed.
    if re.fullmatch(r"[+-]?[0-9]+", value) is None:
        raise argparse.ArgumentTypeError(f"could not parse {value!r} as integer")
    return int(value, 10)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parses command-line arguments."""
    p = _ArgumentParser(prog="drag-many", description="Drag any one of many randomly generated shapes with the mouse.")
    p.add_argument("count", type=_int_arg, help="number of shapes to generate")
    p.add_argument("--seed", type=_int_arg, default=None, help="random seed (default: different layout every run)")
    p.add_argument("--snapshot", type=str, default="", help="save a picture of the final layout here when the window closes (.png or .svg)")
    args = p.parse_args(argv)
    if args.count < 1:
        p.error(f"count must be a positive integer, got {args.count}")
    return args


def build_scene(args: argparse.Namespace) -> Scene:
    cfg = SceneConfig(count=args.count, random_seed=args.seed)
    _, scene = initialize_scene(cfg)
    print(f"Generated {len(scene)} shapes (seed={cfg.random_seed}).")
    return scene


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the GUI application."""
    args = parse_args(argv)
    scene = build_scene(args)

    # Tk is only needed once the arguments are valid.
    import customtkinter
    from gui import DragApp

    customtkinter.set_appearance_mode("System")
    customtkinter.set_default_color_theme("blue")

    app = DragApp(scene, panel_size=PANEL_SIZE, snapshot_path=args.snapshot or None)
    app.mainloop()

    print("Closing application.")


if __name__ == "__main__":
    main()
