"""Per-column filled height ("skyline") of a fixed-width container."""

from __future__ import annotations

from typing import Tuple

import numpy as np


def padded(coordinate: int, space_between: int) -> int:
    """Reported coordinate: padding goes after the first row/column only."""
    return coordinate + space_between if coordinate else 0


class ColumnMap:
    """Skyline of a container ``width`` columns wide.

    Each entry holds the filled height of one column. Regions where nothing
    fits are bumped by one, so entries are an upper bound of the real stack
    height rather than the exact value.
    """

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise ValueError(f"container width must be positive, got {width}")
        self.width = width
        self.heights = np.zeros(width, dtype=np.int64)

    def free_region(self) -> Tuple[int, int, int]:
        """Return ``(x, y, width)`` of the lowest run of columns.

        The run is anchored at the first column holding the minimum value.
        """
        lowest = int(self.heights.min())
        x = int(np.argmin(self.heights))
        higher = np.flatnonzero(self.heights[x:] > lowest)
        available = int(higher[0]) if higher.size else self.width - x
        return x, lowest, available

    def footprint(self, x: int, width: int, space_between: int) -> int:
        return width + space_between if x > 0 else width

    def occupy(self, x: int, width: int, height: int, space_between: int = 0) -> int:
        """Raise the columns under a box placed at ``x``; return its raw y."""
        y = int(self.heights[x])
        span = self.footprint(x, width, space_between)
        if x + span > self.width:
            raise ValueError(
                f"box of width {width} at x={x} does not fit in {self.width} columns"
            )
        if y > 0:
            height += space_between
        self.heights[x : x + span] += height
        return y

    def mark_unavailable(self, x: int, width: int) -> None:
        self.heights[x : x + width] += 1

    def height(self) -> int:
        return int(self.heights.max())

    def as_list(self) -> list[int]:
        return self.heights.tolist()
