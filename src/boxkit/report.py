"""One document-generation session: a host document plus the helpers bound to it."""

from typing import Optional

from . import fonts
from . import typst as typst_backend
from .document import Document
from .grid import GridPartitioner
from .i18n import Translator
from .layout import LayoutContext
from .page_values import PageValueStore
from .text import TextHelpers


class Report:
    """Composition root for a single document.

    Every Report owns its own LayoutContext and PageValueStore, so reports can
    be generated side by side without sharing layout state.
    """

    def __init__(self, document: Optional[Document] = None, translator: Optional[Translator] = None, **settings):
        self.document = document if document is not None else Document(**settings)
        self.layout = LayoutContext(self.document)
        self.text = TextHelpers(self.document, translator)
        self.grid = GridPartitioner(self.layout, self.text)
        self.values = PageValueStore(self.document)

    @property
    def t(self):
        return self.text.t

    def create_font_family(self, family: str, extension: str = 'ttf', font_dir=None):
        return fonts.create_font_family(self.document, family, extension, font_dir)

    def repeat(self, callback, pages='all', dynamic: bool = True):
        return self.document.repeat(callback, pages, dynamic)

    def to_typst(self) -> str:
        return typst_backend.generate_typst(self.document)

    def save_typst(self, path):
        return typst_backend.write_typst(self.document, path)

    def render_pdf(self, pdf_path, typst_path=None, typst_bin: Optional[str] = None) -> bool:
        return typst_backend.render_pdf(self.document, pdf_path, typst_path, typst_bin)
