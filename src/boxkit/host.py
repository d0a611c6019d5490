"""Capability interface the layout helpers need from a host engine.

``boxkit.document.Document`` is the implementation shipped with the package;
anything else providing these members can be driven by LayoutContext,
GridPartitioner, PageValueStore and TextHelpers.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .geometry import Point, Region

Content = Optional[Callable[[], None]]


class HostEngine(ABC):
    @property
    @abstractmethod
    def bounds(self) -> Region:
        """Currently active region (coordinate frame)."""

    @abstractmethod
    def bounding_box(self, point: Point, width: float, height: float, content: Content = None) -> Region:
        """Materialize a region at ``point`` (local to ``bounds``) and run ``content``
        with it as the active frame. The previous frame is restored on every exit."""

    @abstractmethod
    def stroke_line(self, start: Point, end: Point) -> None:
        ...

    @property
    @abstractmethod
    def leading(self) -> float:
        ...

    @leading.setter
    @abstractmethod
    def leading(self, value: float) -> None:
        ...

    @property
    @abstractmethod
    def fill_color(self) -> str:
        ...

    @fill_color.setter
    @abstractmethod
    def fill_color(self, value: str) -> None:
        ...

    @property
    @abstractmethod
    def cursor(self) -> float:
        """Vertical write position relative to the bottom of ``bounds``."""

    @abstractmethod
    def define_grid(self, columns: int, rows: int, gutter: float = 0) -> None:
        """Partition the current bounds into an evenly spaced grid.

        Hosts may also accept ``row_gutter`` and ``column_gutter`` keywords;
        they are only passed when set.
        """

    @abstractmethod
    def grid(self, start, end=None) -> Region:
        """Region of one cell (row, column) or the union of cells start..end."""

    @abstractmethod
    def grid_scope(self):
        """Context manager restoring the active grid on exit."""

    @property
    @abstractmethod
    def page_number(self) -> int:
        ...

    @property
    @abstractmethod
    def page_count(self) -> int:
        ...

    @abstractmethod
    def repeat(self, callback: Callable[[], None], pages='all', dynamic: bool = True) -> None:
        """Register an overlay evaluated once per page after the content pass."""

    @abstractmethod
    def font(self, family=None, style=None, size=None, content: Content = None):
        ...

    @abstractmethod
    def text_box(self, text: str, **options) -> None:
        ...

    @abstractmethod
    def formatted_text_box(self, fragments, **options) -> None:
        ...
