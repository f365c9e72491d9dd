from __future__ import annotations

import logging
from typing import Hashable, List, Optional

from .algorithms.resize import HeightResizer
from .column_map import ColumnMap, padded
from .errors import OversizedBoxError
from .models import Box
from .registry import BoxRegistry
from .settings import default_space_between

logger = logging.getLogger(__name__)


def _check_container_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ValueError(f"container width must be a positive integer, got {width!r}")
    return width


def _check_space_between(space_between: int) -> int:
    if isinstance(space_between, bool) or not isinstance(space_between, int):
        raise ValueError(f"space_between must be an integer, got {space_between!r}")
    if space_between < 0:
        raise ValueError(f"space_between must not be negative, got {space_between}")
    return space_between


class BoxPacker:
    """Pack boxes into a container of fixed width and growing height.

    Boxes are sorted widest first, then placed one at a time into the lowest
    free run of columns, picking the box that fills the run best. When no
    box fits the run, the run is raised by one and the search repeats.
    """

    def __init__(self, container_width: int, space_between: Optional[int] = None) -> None:
        self._container_width = _check_container_width(container_width)
        if space_between is None:
            space_between = default_space_between()
        self._space_between = _check_space_between(space_between)
        self.registry = BoxRegistry()
        self._map: Optional[ColumnMap] = None

    @property
    def container_width(self) -> int:
        return self._container_width

    @container_width.setter
    def container_width(self, width: int) -> None:
        self._container_width = _check_container_width(width)
        self.reset()

    @property
    def space_between(self) -> int:
        return self._space_between

    def configure(self, container_width: int, space_between: int = 0) -> None:
        self._container_width = _check_container_width(container_width)
        self._space_between = _check_space_between(space_between)
        self.reset()

    @property
    def column_map(self) -> ColumnMap:
        if self._map is None:
            self._map = ColumnMap(self._container_width)
        return self._map

    def add_box(self, key: Hashable, width: int, height: int) -> Box:
        return self.registry.add(key, width, height)

    def boxes(self) -> List[Box]:
        return self.registry.boxes()

    def packed_boxes(self) -> List[Box]:
        return self.registry.packed_boxes()

    def pack(self) -> List[Box]:
        if not self.registry.has_unpacked():
            return self.registry.packed_boxes()

        self.registry.sort_unpacked()
        widest = self.registry.unpacked[0]
        if widest.width > self._container_width:
            raise OversizedBoxError(widest.key, widest.width, self._container_width)

        column_map = self.column_map
        logger.debug(
            "Packing %d boxes into width %d (space_between=%d)",
            len(self.registry.unpacked),
            self._container_width,
            self._space_between,
        )
        bumps = 0
        while self.registry.has_unpacked():
            x, y, available = column_map.free_region()
            index = self._best_fit(x, available)
            if index is None:
                column_map.mark_unavailable(x, available)
                bumps += 1
                continue
            self._pack_box(index, x)

        logger.debug(
            "Packed %d boxes, height %d, %d unavailable regions",
            len(self.registry.packed),
            column_map.height(),
            bumps,
        )
        return self.registry.packed_boxes()

    def get_height(self) -> int:
        if self.registry.has_unpacked():
            self.pack()
        return self.column_map.height()

    def reset(self) -> None:
        self.registry.reset()
        self._map = None

    def pack_with_height_and_resize(self, height: int, step: Optional[int] = None) -> List[Box]:
        return HeightResizer(self, height, step=step).shrink_uniformly()

    def pack_with_height_and_normalized_reduction(
        self, height: int, step: Optional[int] = None
    ) -> List[Box]:
        return HeightResizer(self, height, step=step).normalize_and_fit()

    def _best_fit(self, x: int, available: int) -> Optional[int]:
        best_index = None
        best_width = 0
        for index, box in enumerate(self.registry.unpacked):
            width = self.column_map.footprint(x, box.width, self._space_between)
            if width == available:
                return index
            if best_width < width < available:
                best_width = width
                best_index = index
        return best_index

    def _pack_box(self, index: int, x: int) -> Box:
        box = self.registry.unpacked[index]
        y = self.column_map.occupy(x, box.width, box.height, self._space_between)
        return self.registry.place(
            index, padded(x, self._space_between), padded(y, self._space_between)
        )
