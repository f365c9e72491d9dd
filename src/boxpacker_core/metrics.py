from __future__ import annotations

from .models import Layout


def used_area(layout: Layout) -> int:
    return sum(w * h for _, _, w, h in layout)


def stack_height(layout: Layout) -> int:
    """Tallest box edge, ignoring regions that were only marked unavailable."""
    if not layout:
        return 0
    return max(y + h for _, y, _, h in layout)


def fill_ratio(layout: Layout, container_width: int, height: int) -> float:
    total = container_width * height
    if total <= 0:
        return 0.0
    return used_area(layout) / total


def wasted_area(layout: Layout, container_width: int, height: int) -> int:
    return max(0, container_width * height - used_area(layout))
