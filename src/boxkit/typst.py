"""Serialise a Document to Typst markup and compile it to PDF.

Every recorded op becomes an absolutely placed element on a zero-margin page;
y coordinates are flipped from the document's y-up frame to Typst's top-down
frame.
"""

import pathlib
import shutil
import subprocess
import sys
from typing import Iterable, List, Optional

from .document import Document, LineOp, RectOp, TextOp

TYPST_HEADER = """// Auto-generated Typst file
// Generated by typst-boxkit
"""

# Characters with markup meaning inside a Typst content block
MARKUP_SPECIALS = '\\#$[]*_`<>@~=/'


def fmt_len(val: float) -> str:
    """Format a length value removing trailing zeros."""
    try:
        return (f"{float(val):.4f}").rstrip('0').rstrip('.')
    except (TypeError, ValueError):
        return "0"


def pt(val: float) -> str:
    return f"{fmt_len(val)}pt"


def escape_typst_text(text: str) -> str:
    """Escape text for safe inclusion in a Typst content block.

    Newlines become forced line breaks.
    """
    if not text:
        return ""
    escaped = ''.join('\\' + ch if ch in MARKUP_SPECIALS else ch for ch in text)
    return escaped.replace('\r\n', '\n').replace('\n', ' \\\n')


def escape_typst_string(text: str) -> str:
    """Escape text for a Typst string literal."""
    return text.replace('\\', '\\\\').replace('"', '\\"')


def typst_color(hex_color: Optional[str]) -> Optional[str]:
    if not hex_color:
        return None
    return f'rgb("#{str(hex_color).lstrip("#")}")'


def build_text_args(
    font: Optional[str] = None,
    size: Optional[float] = None,
    weight: Optional[str] = None,
    style: Optional[str] = None,
    fill: Optional[str] = None,
) -> str:
    """Build Typst text function arguments string.

    Returns formatted argument string like: font: "Inter", size: 12pt, weight: "bold"
    """
    args = []
    if font:
        args.append(f'font: "{escape_typst_string(font)}"')
    if size is not None:
        args.append(f'size: {pt(size)}')
    if weight:
        args.append(f'weight: "{weight}"')
    if style:
        args.append(f'style: "{style}"')
    if fill:
        args.append(f'fill: {fill}')
    return ', '.join(args)


def _style_args(styles: Iterable[str]):
    styles = set(styles or ())
    weight = 'bold' if styles & {'bold', 'bold_italic'} else None
    style = 'italic' if styles & {'italic', 'bold_italic'} else None
    return weight, style


def build_place_command(content: str, x: float, y: float, width: Optional[float] = None, height: Optional[float] = None) -> str:
    """Place ``content`` with its top-left at (x, y) from the page's top-left."""
    if width is not None and height is not None:
        content = f"#box(width: {pt(width)}, height: {pt(height)})[{content}]"
    return f"#place(top + left, dx: {pt(x)}, dy: {pt(y)})[{content}]"


def build_typst_comment(text: str) -> str:
    return f"// {text}"


def build_page_setup(width: float, height: float) -> str:
    return f"#set page(width: {pt(width)}, height: {pt(height)}, margin: 0pt)"


_ALIGN = {'left': 'left', 'center': 'center', 'right': 'right', 'justify': 'left'}
_VALIGN = {'top': 'top', 'center': 'horizon', 'middle': 'horizon', 'bottom': 'bottom'}


def _render_text(doc: Document, op: TextOp) -> str:
    font = op.font
    base_weight, base_style = _style_args([font.style])
    base = build_text_args(
        font=doc.typst_font_name(font.family),
        size=font.size,
        weight=base_weight,
        style=base_style,
        fill=typst_color(op.color),
    )
    parts = []
    for frag in op.fragments:
        body = escape_typst_text(str(frag.get('text', '')))
        weight, style = _style_args(frag.get('styles'))
        args = build_text_args(
            size=frag.get('size'),
            weight=weight,
            style=style,
            fill=typst_color(frag.get('color')),
        )
        parts.append(f"#text({args})[{body}]" if args else body)
    content = ''.join(parts)
    if op.leading:
        content = f"#set par(leading: {pt(op.leading)})\n{content}"
    content = f"#text({base})[{content}]"
    align = [a for a in (_ALIGN.get(op.align or ''), _VALIGN.get(op.valign or '')) if a]
    if align:
        content = f"#align({' + '.join(align)})[{content}]"
    region = op.region
    return build_place_command(
        content,
        region.absolute_left,
        doc.page_height - region.absolute_top,
        region.width,
        region.height,
    )


def _render_line(doc: Document, op: LineOp) -> str:
    (x1, y1), (x2, y2) = op.start, op.end
    h = doc.page_height
    stroke = f"{pt(op.width)} + {typst_color(op.color)}"
    line = f"#line(start: ({pt(x1)}, {pt(h - y1)}), end: ({pt(x2)}, {pt(h - y2)}), stroke: {stroke})"
    return f"#place(top + left)[{line}]"


def _render_rect(doc: Document, op: RectOp) -> str:
    region = op.region
    stroke = f"{pt(op.width)} + {typst_color(op.color)}"
    rect = f"#rect(width: {pt(region.width)}, height: {pt(region.height)}, stroke: {stroke})"
    return build_place_command(rect, region.absolute_left, doc.page_height - region.absolute_top)


def render_op(doc: Document, op) -> str:
    if isinstance(op, TextOp):
        return _render_text(doc, op)
    if isinstance(op, LineOp):
        return _render_line(doc, op)
    if isinstance(op, RectOp):
        return _render_rect(doc, op)
    raise TypeError(f"Cannot render {type(op).__name__}")


def generate_typst(doc: Document, overlays: bool = True) -> str:
    """Typst source for every page of ``doc``.

    overlays: evaluate the document's repeaters first (ascending page order)
    """
    if overlays:
        doc.render_overlays()
    out: List[str] = [TYPST_HEADER, build_page_setup(doc.page_width, doc.page_height), '']
    for idx, page in enumerate(doc.pages):
        if idx:
            out.append('#pagebreak()')
        out.append(build_typst_comment(f"Page {page.number}"))
        for op in page.all_ops():
            out.append(render_op(doc, op))
        out.append('')
    return '\n'.join(out)


def write_typst(doc: Document, path) -> pathlib.Path:
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_typst(doc), encoding='utf-8')
    return path


def bin_exists(name: str) -> bool:
    return shutil.which(name) is not None


def check_typst_binary(typst_bin: str = 'typst') -> bool:
    """Check if Typst binary is available and working"""
    try:
        result = subprocess.run([typst_bin, '--version'], capture_output=True, text=True, timeout=10)
    except FileNotFoundError:
        print(f"ERROR: Typst binary '{typst_bin}' not found in PATH", file=sys.stderr)
        print("Please install Typst: https://github.com/typst/typst/releases", file=sys.stderr)
        return False
    except subprocess.TimeoutExpired:
        print(f"ERROR: Typst binary '{typst_bin}' timed out", file=sys.stderr)
        return False
    if result.returncode != 0:
        print(
            f"ERROR: Typst binary '{typst_bin}' returned error code {result.returncode}",
            file=sys.stderr,
        )
        return False
    return True


def compile_pdf(
    typst_file, pdf_path, typst_bin: str = 'typst', font_paths: Iterable[str] = ()
) -> bool:
    """Compile ``typst_file`` to ``pdf_path``. Returns False and prints the
    compiler output on failure."""
    if not check_typst_binary(typst_bin):
        return False
    typst_file = pathlib.Path(typst_file)
    font_paths = list(dict.fromkeys(fp for fp in font_paths if fp))
    cmd = [typst_bin, 'compile', '--root', str(typst_file.resolve().parent)]
    for font_path in font_paths:
        cmd.extend(['--font-path', font_path])
    cmd.extend([str(typst_file), str(pdf_path)])
    res = subprocess.run(cmd, capture_output=True, text=True)
    if res.returncode == 0:
        return True
    print(f"ERROR: Typst compile failed (exit {res.returncode}):\n{res.stderr}", file=sys.stderr)
    if font_paths:
        print(f"Font paths used: {font_paths}", file=sys.stderr)
    return False


def render_pdf(doc: Document, pdf_path, typst_path=None, typst_bin: Optional[str] = None) -> bool:
    """Write ``doc`` as Typst next to ``pdf_path`` (or at ``typst_path``) and compile it."""
    pdf_path = pathlib.Path(pdf_path)
    typst_path = pathlib.Path(typst_path) if typst_path else pdf_path.with_suffix('.typ')
    write_typst(doc, typst_path)
    return compile_pdf(
        typst_path,
        pdf_path,
        typst_bin or doc.settings['TYPST_BIN'],
        font_paths=doc.font_paths,
    )
