"""Grid blocks with column spans.

A grid fills the current bounds (minus padding) and is split into equal
cells. Cells are addressed by (row, column) from the top-left, starting at 0;
passing a [first, last] pair as the column spans those columns, like an HTML
colspan:

  grid.define_grid_block(4, 3, lambda: (
      grid.text_grid_cell(0, 1, 'Name', 'John'),
      grid.text_grid_cell(1, [0, 3], 'Whole second row'),
  ), padding=10, gutter=2, leading=1)

Not meant for tabular data.
"""

from typing import Optional

from .geometry import Region
from .host import Content
from .text import TextHelpers, leading_scope


class GridPartitioner:
    def __init__(self, layout, text: Optional[TextHelpers] = None):
        self.layout = layout
        self.host = layout.host
        self.text = text or TextHelpers(self.host)

    def define_grid_block(
        self,
        columns: int,
        rows: int,
        content: Content = None,
        *,
        padding=None,
        leading=None,
        gutter: float = 0,
        row_gutter=None,
        column_gutter=None,
    ) -> Region:
        """Define a columns x rows grid inside the padded bounds and run
        ``content``; ``leading`` and the grid apply until the block ends."""

        extra = {}
        if row_gutter is not None:
            extra['row_gutter'] = row_gutter
        if column_gutter is not None:
            extra['column_gutter'] = column_gutter

        def block():
            with self.host.grid_scope():
                self.host.define_grid(columns, rows, gutter=gutter, **extra)
                with leading_scope(self.host, leading):
                    if content is not None:
                        content()

        return self.layout.padding(padding, block)

    def cell_region(self, row: int, columns) -> Region:
        """Absolute region covered by ``columns`` of ``row``."""
        if not isinstance(columns, (list, tuple)):
            columns = [columns] * 2
        return self.host.grid((row, columns[0]), (row, columns[1]))

    def grid_cell(self, row: int, columns, content: Content = None) -> Region:
        """Run ``content`` inside the cell (or span of cells) and return it."""
        region = self.cell_region(row, columns)
        ax, ay = self.host.bounds.anchor
        point = (region.absolute_left - ax, region.absolute_top - ay)
        return self.host.bounding_box(point, region.width, region.height, content)

    def text_grid_cell(self, row: int, columns, label_or_text, text=None) -> Region:
        """Cell holding ``label_or_text``, or "label: text" when ``text`` is given."""

        def content():
            if text is not None:
                self.text.titled_text(label_or_text, text)
            else:
                self.text.text_box(label_or_text)

        return self.grid_cell(row, columns, content)
