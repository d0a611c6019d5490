from .errors import (
    BoxkitError as BoxkitError,
    InvalidRegionError as InvalidRegionError,
    GridUndefinedError as GridUndefinedError,
    UnknownFontError as UnknownFontError,
)
from .geometry import Region as Region
from .percent import (
    SizeSpec as SizeSpec,
    parse_size as parse_size,
    resolve_percent as resolve_percent,
    clamp_percentage as clamp_percentage,
)
from .padding import Padding as Padding, apply_padding as apply_padding
from .placement import (
    position_beside as position_beside,
    position_below as position_below,
    remaining_height as remaining_height,
)
from .document import (
    Document as Document,
    DEFAULTS as DEFAULTS,
    document_defaults as document_defaults,
)
from .layout import LayoutContext as LayoutContext
from .grid import GridPartitioner as GridPartitioner
from .page_values import PageValueStore as PageValueStore
from .text import TextHelpers as TextHelpers
from .i18n import Translator as Translator, I18nKey as I18nKey, key as key
from .fonts import create_font_family as create_font_family
from .report import Report as Report
from .typst import generate_typst as generate_typst, compile_pdf as compile_pdf

__version__ = '0.1.0'
