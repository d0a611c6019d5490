#!/usr/bin/env python3
"""Tests for beside/below positioning"""
import os
import sys
import unittest

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

from boxkit.geometry import Region
from boxkit.placement import position_below, position_beside, remaining_height


class TestPlacement(unittest.TestCase):
    def setUp(self):
        # bounds anchored at (50, 200), 400x300
        self.bounds = Region(50, 500, 400, 300)
        # origin box: top-left (60, 480), 100x50 -> bottom at 430
        self.origin = Region(60, 480, 100, 50)

    def test_no_origin_is_top_left(self):
        for gutter in (0, 7, 25):
            self.assertEqual(position_beside(self.bounds, None, gutter), (0, 300))
            self.assertEqual(position_below(self.bounds, None, gutter), (0, 300))
            self.assertEqual(position_beside(self.bounds, [], gutter), self.bounds.top_left)

    def test_beside(self):
        self.assertEqual(position_beside(self.bounds, self.origin), (110, 280))
        self.assertEqual(position_beside(self.bounds, self.origin, 5), (115, 280))

    def test_below(self):
        self.assertEqual(position_below(self.bounds, self.origin), (10, 230))
        self.assertEqual(position_below(self.bounds, self.origin, 5), (10, 225))

    def test_sequence_uses_first_region(self):
        other = Region(0, 0, 1, 1)
        self.assertEqual(position_beside(self.bounds, [self.origin, other]), (110, 280))
        self.assertEqual(position_below(self.bounds, (self.origin, other)), (10, 230))

    def test_remaining_height(self):
        self.assertEqual(remaining_height(self.bounds, self.origin), 230)


if __name__ == '__main__':
    unittest.main()
