from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, List, Optional, Tuple

PX = int

# Layout is list of rectangles (x, y, w, h)
Layout = List[Tuple[int, int, int, int]]


@dataclass
class Box:
    """Rectangle waiting to be packed, or already placed."""

    key: Hashable
    width: PX
    height: PX
    x: Optional[PX] = None
    y: Optional[PX] = None

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_packed(self) -> bool:
        return self.x is not None and self.y is not None

    def as_layout(self) -> Tuple[int, int, int, int]:
        if not self.is_packed:
            raise ValueError(f"box {self.key!r} has not been packed")
        return self.x, self.y, self.width, self.height


def layout_of(boxes: Iterable[Box]) -> Layout:
    return [box.as_layout() for box in boxes]


def check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value
