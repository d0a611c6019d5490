"""In-memory paginated host engine.

Document keeps a stack of active regions, records positioned text, lines and
rectangles per page, evaluates overlays registered with ``repeat`` after the
content pass, and hands the result to ``boxkit.typst`` for serialisation.
Coordinates are points with y growing upward from the bottom of the page.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .errors import GridUndefinedError, InvalidRegionError, UnknownFontError
from .geometry import Point, Region
from .host import Content, HostEngine
from .padding import Padding

MM_TO_PT = 72.0 / 25.4

PAGE_SIZES_MM = {
    'A3': (297, 420),
    'A4': (210, 297),
    'A5': (148, 210),
    'LETTER': (215.9, 279.4),
    'LEGAL': (215.9, 355.6),
}

PAGE_SIZES_PT = {
    name: (round(w * MM_TO_PT, 2), round(h * MM_TO_PT, 2)) for name, (w, h) in PAGE_SIZES_MM.items()
}

# Fonts embedded in the typst binary
BUILTIN_FONTS = ('Libertinus Serif', 'New Computer Modern', 'DejaVu Sans Mono')
FONT_STYLES = ('normal', 'bold', 'italic', 'bold_italic')

DEFAULTS = {
    'PAGESIZE': 'A4',
    'ORIENTATION': 'portrait',
    'MARGIN': '36',
    'FONT': 'Libertinus Serif',
    'FONT_SIZE': '12',
    'LEADING': '0',
    'FILL_COLOR': '000000',
    'STROKE_COLOR': '000000',
    'LINE_WIDTH': '1',
    'FONT_DIR': 'assets/fonts',
    'TYPST_BIN': 'typst',
}


def document_defaults(meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """DEFAULTS overlaid with known keys from ``meta`` (case-insensitive) and the
    BOXKIT_TYPST_BIN environment variable."""
    d = DEFAULTS.copy()
    env_bin = os.environ.get('BOXKIT_TYPST_BIN')
    if env_bin:
        d['TYPST_BIN'] = env_bin
    for k, v in (meta or {}).items():
        key = str(k).upper()
        if key in d and v is not None:
            d[key] = v
    return d


def page_dimensions(pagesize: str, orientation: str) -> Tuple[float, float]:
    w, h = PAGE_SIZES_PT.get(str(pagesize).upper(), PAGE_SIZES_PT['A4'])
    if str(orientation).lower() == 'landscape':
        return (h, w)
    return (w, h)


def _as_float(value, fallback: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


@dataclass(frozen=True)
class FontSpec:
    family: str
    style: str = 'normal'
    size: float = 12.0


@dataclass(frozen=True)
class GridSpec:
    columns: int
    rows: int
    row_gutter: float = 0.0
    column_gutter: float = 0.0

    def column_width(self, region: Region) -> float:
        return (region.width - self.column_gutter * (self.columns - 1)) / self.columns

    def row_height(self, region: Region) -> float:
        return (region.height - self.row_gutter * (self.rows - 1)) / self.rows


@dataclass
class TextOp:
    region: Region
    fragments: List[Dict[str, Any]]
    font: FontSpec
    leading: float
    color: str
    align: Optional[str] = None
    valign: Optional[str] = None


@dataclass
class LineOp:
    start: Point
    end: Point
    width: float
    color: str


@dataclass
class RectOp:
    region: Region
    width: float
    color: str


@dataclass
class Page:
    number: int
    width: float
    height: float
    ops: List[Any] = field(default_factory=list)
    overlay_ops: List[Any] = field(default_factory=list)

    def all_ops(self) -> List[Any]:
        return self.ops + self.overlay_ops


@dataclass
class Repeater:
    callback: Callable[[], None]
    pages: Any = 'all'
    dynamic: bool = True

    def matches(self, number: int) -> bool:
        pages = self.pages
        if pages == 'all' or pages is None:
            return True
        if pages == 'odd':
            return number % 2 == 1
        if pages == 'even':
            return number % 2 == 0
        if callable(pages):
            return bool(pages(number))
        return number in pages


class Document(HostEngine):
    """Paginated drawing surface with a region stack.

    Settings come from DEFAULTS; pass overrides as keyword arguments using the
    lowercase setting names (pagesize, orientation, margin, font, font_size,
    leading, fill_color, stroke_color, line_width, font_dir, typst_bin).
    """

    def __init__(self, **meta):
        self.settings = document_defaults(meta)
        s = self.settings
        self.page_width, self.page_height = page_dimensions(s['PAGESIZE'], s['ORIENTATION'])
        self.margin = Padding.parse(s['MARGIN'])
        self.margin_box = Region(
            float(self.margin.left),
            self.page_height - self.margin.top,
            self.page_width - self.margin.horizontal,
            self.page_height - self.margin.vertical,
        )
        if self.margin_box.width < 0 or self.margin_box.height < 0:
            raise InvalidRegionError(f"Margins {self.margin.as_tuple()} exceed the page size")
        self.pages: List[Page] = []
        self.font_families: Dict[str, Dict[str, str]] = {}
        self.font_names: Dict[str, str] = {}
        self.font_paths: List[str] = []
        self.line_width = _as_float(s['LINE_WIDTH'], 1.0)
        self.stroke_color = s['STROKE_COLOR']
        self._fill_color = s['FILL_COLOR']
        self._leading = _as_float(s['LEADING'], 0.0)
        self._font = FontSpec(s['FONT'], 'normal', _as_float(s['FONT_SIZE'], 12.0))
        self._stack: List[Region] = [self.margin_box]
        self._grid: Optional[Tuple[GridSpec, Region]] = None
        self._repeaters: List[Repeater] = []
        self._page_index = -1
        self._overlay_target: Optional[List[Any]] = None
        self.y = self.margin_box.absolute_top
        self.start_new_page()

    # -- pages -------------------------------------------------------------

    def start_new_page(self) -> Page:
        page = Page(len(self.pages) + 1, self.page_width, self.page_height)
        self.pages.append(page)
        self._page_index = len(self.pages) - 1
        self.y = self.bounds.absolute_top
        return page

    def _page_at(self, number: int) -> Page:
        if number < 1 or number > len(self.pages):
            raise IndexError(f"Page {number} out of range 1..{len(self.pages)}")
        return self.pages[number - 1]

    def go_to_page(self, number: int) -> Page:
        page = self._page_at(number)
        self._page_index = number - 1
        return page

    @property
    def page(self) -> Page:
        return self.pages[self._page_index]

    @property
    def page_number(self) -> int:
        return self._page_index + 1

    @property
    def page_count(self) -> int:
        return len(self.pages)

    # -- regions -----------------------------------------------------------

    @property
    def bounds(self) -> Region:
        return self._stack[-1]

    @property
    def cursor(self) -> float:
        return self.y - self.bounds.absolute_bottom

    def move_down(self, amount: float) -> None:
        self.y -= amount

    def move_cursor_to(self, value: float) -> None:
        self.y = self.bounds.absolute_bottom + value

    @contextmanager
    def frame(self, region: Region):
        """Make ``region`` the active frame for the duration of the block."""
        self._stack.append(region)
        self.y = region.absolute_top
        try:
            yield region
        finally:
            self._stack.pop()
            self.y = region.absolute_bottom

    def bounding_box(self, point: Point, width: float, height: Optional[float] = None, content: Content = None) -> Region:
        """Create a region with its top-left at ``point`` (local to ``bounds``).

        Height defaults to the space down to the bottom of the current bounds.
        """
        if height is None:
            height = point[1]
        if width < 0 or height < 0:
            raise InvalidRegionError(
                f"Cannot create a {width}x{height} region at {tuple(point)}"
            )
        region = self.bounds.child(point, width, height)
        with self.frame(region):
            if content is not None:
                content()
        return region

    def stroke_bounds(self) -> None:
        self._emit(RectOp(self.bounds, self.line_width, self.stroke_color))

    # -- grids -------------------------------------------------------------

    def define_grid(self, columns: int, rows: int, gutter: float = 0, row_gutter=None, column_gutter=None) -> GridSpec:
        rg = gutter if row_gutter is None else row_gutter
        cg = gutter if column_gutter is None else column_gutter
        spec = GridSpec(int(columns), int(rows), float(rg), float(cg))
        self._grid = (spec, self.bounds)
        return spec

    @contextmanager
    def grid_scope(self):
        """Restore the grid active on entry when the block ends."""
        saved = self._grid
        try:
            yield
        finally:
            self._grid = saved

    @property
    def grid_spec(self) -> Optional[GridSpec]:
        return self._grid[0] if self._grid else None

    def _cell(self, row: int, column: int) -> Region:
        spec, region = self._grid
        if not (0 <= row < spec.rows) or not (0 <= column < spec.columns):
            raise IndexError(
                f"Cell ({row}, {column}) outside {spec.columns}x{spec.rows} grid"
            )
        cw = spec.column_width(region)
        rh = spec.row_height(region)
        x = region.absolute_left + column * (cw + spec.column_gutter)
        y = region.absolute_top - row * (rh + spec.row_gutter)
        return Region(x, y, cw, rh, parent=region)

    def grid(self, start, end=None) -> Region:
        """Absolute region of cell ``start`` or of the cells ``start``..``end``.

        Cells are (row, column) pairs counted from the top-left, starting at 0.
        """
        if self._grid is None:
            raise GridUndefinedError("define_grid must be called before grid")
        first = self._cell(*start)
        if end is None:
            return first
        return first.union(self._cell(*end))

    # -- graphics state ----------------------------------------------------

    @property
    def leading(self) -> float:
        return self._leading

    @leading.setter
    def leading(self, value: float) -> None:
        self._leading = float(value)

    @property
    def fill_color(self) -> str:
        return self._fill_color

    @fill_color.setter
    def fill_color(self, value: str) -> None:
        self._fill_color = str(value).lstrip('#')

    @property
    def current_font(self) -> FontSpec:
        return self._font

    def _check_font(self, family: str, style: str) -> None:
        if family in BUILTIN_FONTS:
            if style not in FONT_STYLES:
                raise UnknownFontError(f"Unknown style '{style}' for font '{family}'")
            return
        styles = self.font_families.get(family)
        if styles is None:
            raise UnknownFontError(f"Font family '{family}' is not registered")
        if style not in styles:
            raise UnknownFontError(f"Style '{style}' of font family '{family}' is not registered")

    def font(self, family=None, style=None, size=None, content: Content = None) -> FontSpec:
        """Switch font. With ``content`` the switch only lasts for that call."""
        new = FontSpec(
            family or self._font.family,
            style or 'normal',
            float(size) if size is not None else self._font.size,
        )
        self._check_font(new.family, new.style)
        if content is None:
            self._font = new
            return new
        previous = self._font
        self._font = new
        try:
            content()
        finally:
            self._font = previous
        return new

    # -- drawing -----------------------------------------------------------

    def _emit(self, op) -> None:
        if self._overlay_target is not None:
            self._overlay_target.append(op)
        else:
            self.page.ops.append(op)

    def _absolute(self, point: Point) -> Point:
        ax, ay = self.bounds.anchor
        return (ax + point[0], ay + point[1])

    def stroke_line(self, start: Point, end: Point) -> None:
        self._emit(LineOp(self._absolute(start), self._absolute(end), self.line_width, self.stroke_color))

    def formatted_text_box(self, fragments: Iterable[Dict[str, Any]], at: Optional[Point] = None, width=None, height=None, align=None, valign=None, size=None, style=None) -> Region:
        """Place styled fragments in a box, by default from the cursor to the
        bottom-right of the current bounds. The cursor does not move."""
        bounds = self.bounds
        if at is None:
            at = (bounds.left, self.cursor)
        if width is None:
            width = bounds.width - at[0]
        if height is None:
            height = at[1]
        region = bounds.child(at, max(width, 0.0), max(height, 0.0))
        font = self._font
        if size is not None or style is not None:
            font = FontSpec(font.family, style or font.style, float(size) if size is not None else font.size)
        frags = [dict(f) for f in fragments]
        self._emit(TextOp(region, frags, font, self._leading, self._fill_color, align, valign))
        return region

    def text_box(self, text: str, **options) -> Region:
        return self.formatted_text_box([{'text': str(text)}], **options)

    # -- overlays ----------------------------------------------------------

    def repeat(self, callback: Callable[[], None], pages='all', dynamic: bool = True) -> Repeater:
        """Register an overlay evaluated per page by ``render_overlays``.

        Dynamic overlays run once for every matching page with ``page_number``
        set to that page. Static ones run once and their output is stamped on
        every matching page.
        """
        rep = Repeater(callback, pages, dynamic)
        self._repeaters.append(rep)
        return rep

    @contextmanager
    def _overlay_state(self, page: Page, target: List[Any]):
        saved = (self._page_index, self._stack, self.y, self._font, self._leading, self._fill_color)
        self._page_index = page.number - 1
        self._stack = [self.margin_box]
        self.y = self.margin_box.absolute_top
        self._overlay_target = target
        try:
            yield
        finally:
            self._overlay_target = None
            (self._page_index, self._stack, self.y, self._font, self._leading, self._fill_color) = saved

    def render_overlays(self, order: Optional[Iterable[int]] = None) -> None:
        """Evaluate all overlays, replacing previous overlay output.

        order: page numbers to visit, in that order (default: every page
        ascending). Unvisited pages keep no overlay output. Numbers
        outside 1..page_count raise IndexError before anything is rendered.
        """
        numbers = list(order) if order is not None else [p.number for p in self.pages]
        targets = [self._page_at(number) for number in numbers]
        for page in self.pages:
            page.overlay_ops = []
        stamps: Dict[int, List[Any]] = {}
        for number, page in zip(numbers, targets):
            for idx, rep in enumerate(self._repeaters):
                if not rep.matches(number):
                    continue
                if rep.dynamic:
                    with self._overlay_state(page, page.overlay_ops):
                        rep.callback()
                    continue
                if idx not in stamps:
                    stamps[idx] = []
                    with self._overlay_state(page, stamps[idx]):
                        rep.callback()
                page.overlay_ops.extend(stamps[idx])

    def typst_font_name(self, family: str) -> str:
        return self.font_names.get(family, family)
