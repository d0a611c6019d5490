#!/usr/bin/env python3
"""Tests for percentage size resolution"""
import os
import sys
import unittest

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

from boxkit.geometry import Region
from boxkit.percent import SizeSpec, clamp_percentage, parse_size, resolve_percent


class TestParseSize(unittest.TestCase):
    def test_numbers_are_absolute(self):
        self.assertEqual(parse_size(120), SizeSpec(120, 'absolute'))
        self.assertEqual(parse_size(12.5), SizeSpec(12.5, 'absolute'))

    def test_numeric_string_is_absolute_float(self):
        self.assertEqual(parse_size("120"), SizeSpec(120.0, 'absolute'))

    def test_global_and_local(self):
        self.assertEqual(parse_size("50%"), SizeSpec(50.0, 'global'))
        self.assertEqual(parse_size("100%l"), SizeSpec(100.0, 'local'))
        self.assertEqual(parse_size(" 25.5 %L"), SizeSpec(25.5, 'local'))

    def test_non_numeric_percentage_is_zero(self):
        self.assertEqual(parse_size("abc%"), SizeSpec(0.0, 'global'))

    def test_non_numeric_text_passes_through(self):
        self.assertEqual(parse_size("wide"), SizeSpec("wide", 'absolute'))


class TestClampPercentage(unittest.TestCase):
    def test_bounds(self):
        self.assertEqual(clamp_percentage(-5), 0.0)
        self.assertEqual(clamp_percentage(150), 100.0)
        self.assertEqual(clamp_percentage(42), 42.0)
        self.assertEqual(clamp_percentage("30xyz"), 30.0)


class TestResolvePercent(unittest.TestCase):
    def setUp(self):
        # 200 wide, 100 high, top-left at (0, 100)
        self.region = Region(0, 100, 200, 100)

    def test_literal_returned_unchanged(self):
        self.assertEqual(resolve_percent(50, 'width', self.region, (0, 100)), 50)

    def test_global_width(self):
        self.assertEqual(resolve_percent("50%", 'width', self.region, (0, 100)), 100.0)

    def test_clamped(self):
        zero = resolve_percent("0%", 'width', self.region, (0, 100))
        full = resolve_percent("100%", 'width', self.region, (0, 100))
        self.assertEqual(resolve_percent("-20%", 'width', self.region, (0, 100)), zero)
        self.assertEqual(resolve_percent("250%", 'width', self.region, (0, 100)), full)
        self.assertEqual(full, 200.0)

    def test_local_width_uses_remaining_space(self):
        self.assertEqual(resolve_percent("100%l", 'width', self.region, (100, 100)), 100.0)
        self.assertEqual(resolve_percent("50%l", 'width', self.region, (100, 100)), 50.0)
        # global ignores the start position
        self.assertEqual(resolve_percent("100%", 'width', self.region, (100, 100)), 200.0)

    def test_local_height_uses_space_below_start(self):
        self.assertEqual(resolve_percent("100%l", 'height', self.region, (0, 40)), 40.0)
        self.assertEqual(resolve_percent("50%", 'height', self.region, (0, 40)), 50.0)

    def test_local_on_empty_reference(self):
        empty = Region(0, 0, 0, 0)
        self.assertEqual(resolve_percent("100%l", 'width', empty, (0, 0)), 0.0)
        self.assertEqual(resolve_percent("100%l", 'height', empty, (0, 0)), 0.0)

    def test_unknown_axis(self):
        with self.assertRaises(ValueError):
            resolve_percent("10%", 'depth', self.region, (0, 0))


if __name__ == '__main__':
    unittest.main()
