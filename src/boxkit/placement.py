"""Positions relative to a previously created region.

All results are expressed in the local frame of ``bounds`` (the region that is
active when the new box is created), ready to be passed to the host's
``bounding_box``.
"""

from typing import Optional

from .geometry import Point, Region, sum_points


def _first(origin) -> Optional[Region]:
    if isinstance(origin, (list, tuple)):
        return origin[0] if origin else None
    return origin


def position_beside(bounds: Region, origin=None, gutter: float = 0) -> Point:
    """Top-left for a box directly to the right of ``origin``.

    Without an origin the box goes to the top-left of ``bounds``.
    """
    origin = _first(origin)
    if origin is None:
        return bounds.top_left
    ax, ay = bounds.anchor
    return sum_points(origin.absolute_top_right, (float(gutter) - ax, -ay))


def position_below(bounds: Region, origin=None, gutter: float = 0) -> Point:
    """Top-left for a box directly below ``origin``, ``gutter`` points lower."""
    origin = _first(origin)
    if origin is None:
        return bounds.top_left
    ax, ay = bounds.anchor
    left = origin.absolute_left - ax
    bottom = origin.anchor[1] - ay - float(gutter)
    return (left, bottom)


def remaining_height(bounds: Region, base: Region) -> float:
    """Height left between the bottom of ``base`` and the bottom of ``bounds``."""
    return base.anchor[1] - bounds.anchor[1]
