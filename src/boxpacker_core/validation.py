from __future__ import annotations

from typing import List, Optional, Tuple

from .models import Layout

Rect = Tuple[int, int, int, int]


def rects_overlap(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax + aw <= bx or bx + bw <= ax or ay + ah <= by or by + bh <= ay)


def overlapping_pairs(layout: Layout) -> List[Tuple[int, int]]:
    pairs: List[Tuple[int, int]] = []
    for i in range(len(layout)):
        for j in range(i + 1, len(layout)):
            if rects_overlap(layout[i], layout[j]):
                pairs.append((i, j))
    return pairs


def out_of_bounds(layout: Layout, container_width: int) -> List[int]:
    return [
        idx
        for idx, (x, y, w, _) in enumerate(layout)
        if x < 0 or y < 0 or x + w > container_width
    ]


def layout_flags(
    layout: Layout,
    container_width: int,
    expected_count: Optional[int] = None,
) -> set[str]:
    flags: set[str] = set()
    if overlapping_pairs(layout):
        flags.add("overlap")
    if out_of_bounds(layout, container_width):
        flags.add("out_of_bounds")
    if expected_count is not None and len(layout) != expected_count:
        flags.add("incomplete")
    return flags


def is_valid(
    layout: Layout,
    container_width: int,
    expected_count: Optional[int] = None,
) -> bool:
    return not layout_flags(layout, container_width, expected_count)
