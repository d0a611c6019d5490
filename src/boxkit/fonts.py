"""Register font families from files on disk.

A family named ``Family`` is looked up as::

  <font_dir>/Family.ttf
  <font_dir>/Family_Bold.ttf
  <font_dir>/Family_Italic.ttf
  <font_dir>/Family_BoldItalic.ttf

The normal style is always registered; other styles only when their file
exists. The real family name stored in the font's name table is what Typst
matches on, so it is read with fontTools and recorded alongside.
"""

import pathlib
import warnings
from typing import Dict, Optional

from fontTools.ttLib import TTFont, TTLibError

STYLE_SUFFIXES = {
    'normal': '',
    'bold': '_Bold',
    'italic': '_Italic',
    'bold_italic': '_BoldItalic',
}

# name table records: typographic family (16) preferred over legacy family (1)
FAMILY_NAME_IDS = (16, 1)


def external_font_filepath(family: str, style: str, extension: str = 'ttf', font_dir='assets/fonts') -> pathlib.Path:
    suffix = STYLE_SUFFIXES[style]
    return pathlib.Path(font_dir) / f"{family}{suffix}.{extension.lstrip('.')}"


def font_family_files(family: str, extension: str = 'ttf', font_dir='assets/fonts') -> Dict[str, str]:
    """Paths for every style, dropping optional styles whose file is missing."""
    files = {
        style: external_font_filepath(family, style, extension, font_dir) for style in STYLE_SUFFIXES
    }
    return {
        style: str(path)
        for style, path in files.items()
        if style == 'normal' or path.exists()
    }


def read_family_name(path) -> Optional[str]:
    """Family name from the font's name table, or None when it can't be read."""
    try:
        font = TTFont(str(path), lazy=True)
    except (OSError, TTLibError) as e:
        warnings.warn(f"Could not read font '{path}': {e}")
        return None
    try:
        table = font.get('name')
        if not table:
            return None
        for name_id in FAMILY_NAME_IDS:
            rec = table.getName(name_id, 3, 1, 0x409) or table.getName(name_id, 1, 0, 0)
            if rec is not None:
                name = rec.toUnicode().strip()
                if name:
                    return name
        return None
    finally:
        font.close()


def create_font_family(document, family: str, extension: str = 'ttf', font_dir=None) -> Dict[str, str]:
    """Register ``family`` on ``document`` and return its style → path map."""
    font_dir = pathlib.Path(font_dir or document.settings['FONT_DIR'])
    styles = font_family_files(family, extension, font_dir)
    normal = pathlib.Path(styles['normal'])
    real_name = None
    if normal.exists():
        real_name = read_family_name(normal)
    else:
        warnings.warn(f"Font file for '{family}' not found: {normal}")
    document.font_families[family] = styles
    document.font_names[family] = real_name or family
    if str(font_dir) not in document.font_paths:
        document.font_paths.append(str(font_dir))
    return styles
