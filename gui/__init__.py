from .window import DragApp
