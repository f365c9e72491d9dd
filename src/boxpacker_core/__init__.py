"""Fixed-width, growing-height box packing for sprite atlases."""

from .engine import BoxPacker
from .errors import OversizedBoxError, PackingError, UnresizableError
from .models import Box, Layout, layout_of
from .algorithms import HeightResizer, ResizeState

__all__ = [
    "Box",
    "BoxPacker",
    "HeightResizer",
    "Layout",
    "OversizedBoxError",
    "PackingError",
    "ResizeState",
    "UnresizableError",
    "layout_of",
]
