"""Text helpers: scoped font, leading and colour switches, rules and titled text."""

from contextlib import contextmanager
from typing import Iterable, Optional

from .host import Content
from .i18n import Translator
from .percent import percent_h


@contextmanager
def leading_scope(host, new_leading=None):
    """Install ``new_leading`` (when given) and restore the previous value on exit."""
    previous = host.leading
    if new_leading is not None:
        host.leading = new_leading
    try:
        yield previous
    finally:
        host.leading = previous


@contextmanager
def color_scope(host, new_color):
    previous = host.fill_color
    host.fill_color = new_color
    try:
        yield previous
    finally:
        host.fill_color = previous


class TextHelpers:
    """Text conveniences bound to one host document."""

    def __init__(self, host, translator: Optional[Translator] = None):
        self.host = host
        self.translator = translator or Translator()

    def t(self, text_or_key, **values) -> str:
        """Translate I18nKey values; anything else is returned as a string."""
        return self.translator.t(text_or_key, **values)

    def save_leading(self, new_leading=None, content: Content = None) -> None:
        with leading_scope(self.host, new_leading):
            if content is not None:
                content()

    def save_color(self, new_color: str, content: Content = None) -> None:
        with color_scope(self.host, new_color):
            if content is not None:
                content()

    def switch_font(self, content: Content = None, *, family=None, style=None, size=None, leading=None):
        """Change font family, style, size and leading.

        With ``content`` every change, leading included, is rolled back when
        the call returns.
        """
        if content is None:
            if leading is not None:
                self.host.leading = leading
            return self.host.font(family, style, size)
        with leading_scope(self.host, leading):
            return self.host.font(family, style, size, content=content)

    def regular_font(self, content: Content = None, **options):
        return self.switch_font(content, **dict(options, style='normal'))

    def bold_font(self, content: Content = None, **options):
        return self.switch_font(content, **dict(options, style='bold'))

    def italic_font(self, content: Content = None, **options):
        return self.switch_font(content, **dict(options, style='italic'))

    def horizontal_line(self, padding: float = 0) -> 'TextHelpers':
        """Rule across the current bounds at the cursor, shortened by
        ``padding`` on each side."""
        cursor = self.host.cursor
        self.host.stroke_line((padding, cursor), (self.host.bounds.width - padding, cursor))
        return self

    def vertical_line(self, *horizontal_positions: float) -> 'TextHelpers':
        """Full-height rules at each x position of the current bounds."""
        top = percent_h(100, self.host.bounds)
        for x in horizontal_positions:
            self.host.stroke_line((x, top), (x, 0))
        return self

    def titled_text(self, title, text, styles: Iterable[str] = ('bold',), color: Optional[str] = None, **options):
        """Text prefixed with a styled title, e.g. "Name: John" with "Name" bold."""
        title_fragment = {'text': f"{self.t(title)}: ", 'styles': list(styles)}
        if color is not None:
            title_fragment['color'] = color
        return self.host.formatted_text_box([title_fragment, {'text': self.t(text)}], **options)

    def text_box(self, text, **options):
        return self.host.text_box(self.t(text), **options)
