from __future__ import annotations

from typing import Hashable


class PackingError(Exception):
    """Base class for packing failures."""


class OversizedBoxError(PackingError):
    def __init__(self, key: Hashable, width: int, container_width: int) -> None:
        self.key = key
        self.width = width
        self.container_width = container_width
        super().__init__(
            f"One of boxes bigger than container: width: {width} px, key: {key}"
            f" (container width {container_width} px)"
        )


class UnresizableError(PackingError):
    """A shrinking resize would collapse a box before the target was met."""

    def __init__(self, key: Hashable, target: int) -> None:
        self.key = key
        self.target = target
        super().__init__(
            f"Box {key!r} cannot be shrunk any further to reach height {target}"
        )
