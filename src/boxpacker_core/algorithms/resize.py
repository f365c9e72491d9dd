"""Repack a box set with resized boxes until a target height is met.

Both strategies walk the same states::

    INITIAL -> PACKED -> (ADJUST_ONE -> PACKED)* -> CONVERGED | FAILED

Every transition out of ``PACKED`` is decided by comparing the height of the
last full repack with the target.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from ..errors import UnresizableError
from ..models import Box
from ..settings import default_resize_step

if TYPE_CHECKING:  # pragma: no cover
    from ..engine import BoxPacker

logger = logging.getLogger(__name__)


class ResizeState(Enum):
    INITIAL = "initial"
    PACKED = "packed"
    ADJUST_ONE = "adjust_one"
    CONVERGED = "converged"
    FAILED = "failed"


def can_shrink(box: Box, step: int) -> bool:
    return box.width > step and box.height > step


def shrink_box(box: Box, step: int) -> None:
    box.width -= step
    box.height -= step


def normalize_box(box: Box, min_area: int, step: int) -> None:
    """Shrink ``box`` until its area is at most ``min_area``.

    Sides already one unit long are left alone, so the loop always ends.
    """
    while box.area > min_area:
        box.width = max(1, box.width - step)
        box.height = max(1, box.height - step)


class HeightResizer:
    """Drive a :class:`BoxPacker` towards ``target`` height by resizing boxes."""

    def __init__(self, packer: "BoxPacker", target: int, *, step: Optional[int] = None) -> None:
        if target < 0:
            raise ValueError(f"target height must not be negative, got {target}")
        if step is None:
            step = default_resize_step()
        if step <= 0:
            raise ValueError(f"resize step must be positive, got {step}")
        self.packer = packer
        self.target = target
        self.step = step
        self.state = ResizeState.INITIAL
        self.heights: List[int] = []

    @property
    def iterations(self) -> int:
        return max(len(self.heights) - 1, 0)

    def shrink_uniformly(self) -> List[Box]:
        height = self._repack()
        while height > self.target:
            self._adjust()
            boxes = self.packer.boxes()
            for box in boxes:
                if not can_shrink(box, self.step):
                    self._fail(box)
            for box in boxes:
                shrink_box(box, self.step)
            height = self._repack()
        return self._converge()

    def normalize_and_fit(self) -> List[Box]:
        boxes = self.packer.boxes()
        if not boxes:
            self._repack()
            return self._converge()

        self.packer.reset()
        min_area = min(box.area for box in boxes)
        for box in boxes:
            normalize_box(box, min_area, self.step)
        height = self._repack()

        if height > self.target:
            self._shrink_largest(height)
        elif height < self.target:
            self._grow_smallest(height)
        return self._converge()

    def _shrink_largest(self, height: int) -> None:
        while height > self.target:
            self._adjust()
            largest = max(self.packer.boxes(), key=lambda box: box.area)
            if not can_shrink(largest, self.step):
                self._fail(largest)
            shrink_box(largest, self.step)
            height = self._repack()

    def _grow_smallest(self, height: int) -> None:
        while height < self.target:
            smallest = min(self.packer.boxes(), key=lambda box: box.area)
            if smallest.width + self.step >= self.packer.container_width:
                logger.debug(
                    "Box %r reached the width limit %d, stopping growth at height %d",
                    smallest.key,
                    self.packer.container_width,
                    height,
                )
                break
            self._adjust()
            smallest.width += self.step
            height = self._repack()

    def _repack(self) -> int:
        self.packer.pack()
        height = self.packer.get_height()
        self.heights.append(height)
        self.state = ResizeState.PACKED
        logger.debug("Resize pass %d: height %d, target %d", len(self.heights), height, self.target)
        return height

    def _adjust(self) -> None:
        self.state = ResizeState.ADJUST_ONE
        self.packer.reset()

    def _fail(self, box: Box) -> None:
        self.state = ResizeState.FAILED
        self.packer.reset()
        logger.warning(
            "Cannot shrink box %r (%dx%d) further, target height %d not reached",
            box.key,
            box.width,
            box.height,
            self.target,
        )
        raise UnresizableError(box.key, self.target)

    def _converge(self) -> List[Box]:
        self.state = ResizeState.CONVERGED
        logger.info(
            "Resize finished at height %d (target %d) after %d iterations",
            self.heights[-1],
            self.target,
            self.iterations,
        )
        return self.packer.packed_boxes()
