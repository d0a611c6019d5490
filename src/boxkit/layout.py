"""Box creation relative to the current bounds and to earlier boxes.

Width and height accept points or percentage strings (see ``boxkit.percent``):

  layout.box((0, layout.bounds.top), '50%', 100, content, padding=10)
  layout.box_beside_previous('100%l', 100, content, gutter=5)

The second box starts right of the first, 5pt away, and fills the rest of the
row. ``layout.last_created_box`` always holds the most recent box created with
tracking enabled.
"""

from typing import Optional

from . import padding as _padding
from . import percent, placement
from .geometry import Point, Region
from .host import Content


class LayoutContext:
    """Per-document box factory; create one for every document being built."""

    def __init__(self, host):
        self.host = host
        self.last_created_box: Optional[Region] = None

    @property
    def bounds(self) -> Region:
        return self.host.bounds

    def percent_w(self, value) -> float:
        return percent.percent_w(value, self.bounds)

    def percent_h(self, value) -> float:
        return percent.percent_h(value, self.bounds)

    def remaining_height(self, base: Region) -> float:
        return placement.remaining_height(self.bounds, base)

    def position_beside(self, origin=None, gutter: float = 0) -> Point:
        return placement.position_beside(self.bounds, origin, gutter)

    def position_below(self, origin=None, gutter: float = 0) -> Point:
        return placement.position_below(self.bounds, origin, gutter)

    def padding(self, values, content: Content = None) -> Region:
        """Run ``content`` in a frame inset into the current bounds."""
        position, width, height = _padding.apply_padding(self.bounds, values)
        return self.host.bounding_box(position, width, height, content)

    def box(self, position: Point, width, height, content: Content = None, *, padding=None, track: bool = True) -> Region:
        """Create a box with its top-left at ``position`` and return it.

        padding: scalar or (top, right, bottom, left); ``content`` runs inside
        the padded frame
        track: remember the box as ``last_created_box``
        """
        w, h = percent.resolve_size(position, width, height, self.bounds)
        outer = self.host.bounding_box(position, w, h, lambda: self.padding(padding, content))
        if track:
            self.last_created_box = outer
        return outer

    def box_beside(self, origin, width, height, content: Content = None, *, gutter: float = 0, **options) -> Region:
        position = self.position_beside(origin, gutter)
        return self.box(position, width, height, content, **options)

    def box_below(self, origin, width, height, content: Content = None, *, gutter: float = 0, **options) -> Region:
        position = self.position_below(origin, gutter)
        return self.box(position, width, height, content, **options)

    def box_beside_previous(self, width, height, content: Content = None, **options) -> Region:
        return self.box_beside(self.last_created_box, width, height, content, **options)

    def box_below_previous(self, width, height, content: Content = None, **options) -> Region:
        return self.box_below(self.last_created_box, width, height, content, **options)
