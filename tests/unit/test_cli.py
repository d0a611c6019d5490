#!/usr/bin/env python3
import os
import pathlib
import subprocess
import sys
import tempfile
import unittest

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
SRC_PATH = os.path.join(PROJECT_ROOT, 'src')
EXAMPLE = os.path.join(PROJECT_ROOT, 'examples', 'comments_report.py')


class TestCLI(unittest.TestCase):
    def _run(self, args, expect_success=True):
        cmd = [sys.executable, '-m', 'boxkit.cli'] + args
        env = os.environ.copy()
        env['PYTHONPATH'] = SRC_PATH + os.pathsep + env.get('PYTHONPATH', '')
        res = subprocess.run(cmd, cwd=PROJECT_ROOT, env=env, capture_output=True, text=True)
        if expect_success and res.returncode != 0:
            self.fail(f"Command failed {cmd}\nSTDOUT:\n{res.stdout}\nSTDERR:\n{res.stderr}")
        return res

    def test_build_subcommand_output(self):
        with tempfile.TemporaryDirectory() as td:
            res = self._run(['build', EXAMPLE, '--export-dir', td])
            self.assertIn('Built Typst', res.stdout)
            self.assertIn('pages=2', res.stdout)
            out = pathlib.Path(td) / 'comments_report.typ'
            self.assertTrue(out.exists())
            self.assertIn('Layout with boxes', out.read_text(encoding='utf-8'))

    def test_build_with_setting_override(self):
        with tempfile.TemporaryDirectory() as td:
            self._run(['build', EXAMPLE, '--export-dir', td, '-o', 'wide.typ', '--set', 'orientation=landscape'])
            text = (pathlib.Path(td) / 'wide.typ').read_text(encoding='utf-8')
            self.assertIn('#set page(width: 841.89pt, height: 595.28pt, margin: 0pt)', text)

    def test_script_without_build(self):
        with tempfile.TemporaryDirectory() as td:
            script = pathlib.Path(td) / 'empty.py'
            script.write_text('X = 1\n', encoding='utf-8')
            res = self._run(['build', str(script), '--export-dir', td], expect_success=False)
            self.assertNotEqual(res.returncode, 0)
            self.assertIn('does not define build', res.stderr)

    def test_fonts_missing_family(self):
        with tempfile.TemporaryDirectory() as td:
            res = self._run(['fonts', 'Nope', '--font-dir', td], expect_success=False)
            self.assertEqual(res.returncode, 1)
            self.assertIn('not found', res.stdout)


if __name__ == '__main__':
    unittest.main()
