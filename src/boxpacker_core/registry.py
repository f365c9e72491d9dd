from __future__ import annotations

from typing import Hashable, List

from .models import Box, check_dimension


class BoxRegistry:
    """Owns the unpacked worklist and the packed results of one run.

    A box lives in exactly one of the two lists. ``take`` is the only way a
    box leaves ``unpacked``, and ``place`` is the only way x/y get set.
    """

    def __init__(self) -> None:
        self.unpacked: List[Box] = []
        self.packed: List[Box] = []

    def __len__(self) -> int:
        return len(self.unpacked) + len(self.packed)

    def add(self, key: Hashable, width: int, height: int) -> Box:
        box = Box(
            key=key,
            width=check_dimension("width", width),
            height=check_dimension("height", height),
        )
        self.unpacked.append(box)
        return box

    def boxes(self) -> List[Box]:
        return self.packed + self.unpacked

    def packed_boxes(self) -> List[Box]:
        return self.packed

    def has_unpacked(self) -> bool:
        return bool(self.unpacked)

    def sort_unpacked(self) -> None:
        self.unpacked.sort(key=lambda box: box.width, reverse=True)

    def take(self, index: int) -> Box:
        return self.unpacked.pop(index)

    def place(self, index: int, x: int, y: int) -> Box:
        box = self.take(index)
        box.x = x
        box.y = y
        self.packed.append(box)
        return box

    def reset(self) -> None:
        for box in self.packed:
            box.x = None
            box.y = None
        self.unpacked = self.packed + self.unpacked
        self.packed = []
