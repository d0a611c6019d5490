#!/usr/bin/env python3
"""Command line interface for typst-boxkit

Subcommands:
  build     layout script -> typst
  pdf       layout script -> typst -> pdf
  fonts     show which styles of a font family are found on disk

A layout script is a Python file defining ``build(report)``; it may also
define a ``SETTINGS`` dict of document settings (pagesize, margin, ...).
"""

import argparse
import pathlib
import runpy
import sys

from .fonts import font_family_files, read_family_name
from .report import Report

DEFAULT_EXPORT_DIR = 'export'


def _resolve(export_dir: pathlib.Path, name: str) -> pathlib.Path:
    path = pathlib.Path(name)
    return path if path.is_absolute() else export_dir / path


def _run_script(script: str, overrides) -> Report:
    namespace = runpy.run_path(script, run_name='__boxkit__')
    build = namespace.get('build')
    if not callable(build):
        raise SystemExit(f"ERROR: {script} does not define build(report)")
    settings = dict(namespace.get('SETTINGS') or {})
    for item in overrides or []:
        k, sep, v = item.partition('=')
        if not sep:
            raise SystemExit(f"ERROR: setting '{item}' must be KEY=VALUE")
        settings[k.strip()] = v.strip()
    report = Report(**settings)
    build(report)
    return report


def cmd_build(args):
    report = _run_script(args.script, args.set)
    export_dir = pathlib.Path(args.export_dir)
    out_path = _resolve(export_dir, args.output or f"{pathlib.Path(args.script).stem}.typ")
    report.save_typst(out_path)
    print(f"Built Typst: {out_path} pages={report.document.page_count}")


def cmd_pdf(args):
    report = _run_script(args.script, args.set)
    export_dir = pathlib.Path(args.export_dir)
    stem = pathlib.Path(args.script).stem
    typst_path = _resolve(export_dir, args.output or f"{stem}.typ")
    pdf_path = _resolve(export_dir, args.pdf_output or f"{stem}.pdf")
    ok = report.render_pdf(pdf_path, typst_path, typst_bin=args.typst_bin)
    print(f"PDF build success={ok} pdf={pdf_path} pages={report.document.page_count}")
    if not ok:
        sys.exit(1)


def cmd_fonts(args):
    files = font_family_files(args.family, args.extension, args.font_dir)
    normal = pathlib.Path(files['normal'])
    if not normal.exists():
        print(f"❌ Font '{args.family}' not found: {normal}")
        sys.exit(1)
    print(f"Family: {args.family} (name table: {read_family_name(normal) or 'unknown'})")
    for style, path in files.items():
        print(f"  ✅ {style}: {path}")


def build_parser():
    p = argparse.ArgumentParser(prog='boxkit')
    sub = p.add_subparsers(dest='command', required=True)

    b = sub.add_parser('build', help='layout script -> typst')
    b.add_argument('script')
    b.add_argument('-o', '--output')
    b.add_argument('--export-dir', default=DEFAULT_EXPORT_DIR)
    b.add_argument('--set', action='append', metavar='KEY=VALUE', help='document setting override')
    b.set_defaults(func=cmd_build)

    pdf = sub.add_parser('pdf', help='layout script -> typst -> pdf')
    pdf.add_argument('script')
    pdf.add_argument('-o', '--output')
    pdf.add_argument('--pdf-output')
    pdf.add_argument('--typst-bin')
    pdf.add_argument('--export-dir', default=DEFAULT_EXPORT_DIR)
    pdf.add_argument('--set', action='append', metavar='KEY=VALUE', help='document setting override')
    pdf.set_defaults(func=cmd_pdf)

    fonts = sub.add_parser('fonts', help='list the styles found for a font family')
    fonts.add_argument('family')
    fonts.add_argument('--font-dir', default='assets/fonts')
    fonts.add_argument('--extension', default='ttf')
    fonts.set_defaults(func=cmd_fonts)

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == '__main__':
    main()
