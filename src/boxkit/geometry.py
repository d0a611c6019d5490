"""Region descriptors in a y-up coordinate system.

Coordinates are points. A region stores its absolute top-left corner plus its
size; positions handed to the host engine are relative to the bottom-left
corner (the ``anchor``) of the region that is active at that moment.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Region:
    """Immutable rectangular area.

    x, y: absolute left and top edges
    width, height: size, never negative for regions the host creates
    parent: region that was active when this one was created
    """

    x: float
    y: float
    width: float
    height: float
    parent: Optional['Region'] = field(default=None, compare=False, repr=False)

    @property
    def anchor(self) -> Point:
        """Absolute bottom-left corner, the origin of the local frame."""
        return (self.x, self.y - self.height)

    @property
    def absolute_left(self) -> float:
        return self.x

    @property
    def absolute_right(self) -> float:
        return self.x + self.width

    @property
    def absolute_top(self) -> float:
        return self.y

    @property
    def absolute_bottom(self) -> float:
        return self.y - self.height

    @property
    def absolute_top_left(self) -> Point:
        return (self.absolute_left, self.absolute_top)

    @property
    def absolute_top_right(self) -> Point:
        return (self.absolute_right, self.absolute_top)

    @property
    def absolute_bottom_left(self) -> Point:
        return (self.absolute_left, self.absolute_bottom)

    @property
    def absolute_bottom_right(self) -> Point:
        return (self.absolute_right, self.absolute_bottom)

    # Local frame (relative to anchor)
    @property
    def left(self) -> float:
        return 0.0

    @property
    def right(self) -> float:
        return self.width

    @property
    def top(self) -> float:
        return self.height

    @property
    def bottom(self) -> float:
        return 0.0

    @property
    def top_left(self) -> Point:
        return (self.left, self.top)

    @property
    def top_right(self) -> Point:
        return (self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return (self.left, self.bottom)

    def dimension(self, axis: str) -> float:
        """Size along ``axis`` ('width'/'x' or 'height'/'y')."""
        if axis in ('width', 'x', 'w'):
            return self.width
        if axis in ('height', 'y', 'h'):
            return self.height
        raise ValueError(f"Unknown axis '{axis}'")

    def child(self, point: Point, width: float, height: float) -> 'Region':
        """Region whose top-left sits at ``point`` in this region's local frame."""
        ax, ay = self.anchor
        return Region(ax + point[0], ay + point[1], width, height, parent=self)

    def union(self, other: 'Region') -> 'Region':
        """Smallest region covering both regions, parented like ``self``."""
        left = min(self.absolute_left, other.absolute_left)
        right = max(self.absolute_right, other.absolute_right)
        top = max(self.absolute_top, other.absolute_top)
        bottom = min(self.absolute_bottom, other.absolute_bottom)
        return Region(left, top, right - left, top - bottom, parent=self.parent)


def sum_points(a: Point, b: Point) -> Point:
    """Component-wise sum of two points."""
    return (a[0] + b[0], a[1] + b[1])
