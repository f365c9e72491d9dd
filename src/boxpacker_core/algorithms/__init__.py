from .resize import (
    HeightResizer,
    ResizeState,
    can_shrink,
    normalize_box,
    shrink_box,
)

__all__ = [
    "HeightResizer",
    "ResizeState",
    "can_shrink",
    "normalize_box",
    "shrink_box",
]
