#!/usr/bin/env python3
"""Tests for box creation, padding frames and chained placement"""
import os
import sys
import unittest

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

from boxkit.document import Document
from boxkit.errors import InvalidRegionError
from boxkit.layout import LayoutContext


class PointAssertions:
    def assertPointAlmostEqual(self, a, b):
        self.assertAlmostEqual(a[0], b[0])
        self.assertAlmostEqual(a[1], b[1])


class TestBox(PointAssertions, unittest.TestCase):
    def setUp(self):
        self.doc = Document(margin=0)
        self.layout = LayoutContext(self.doc)
        self.page = self.doc.bounds

    def test_box_returns_outer_region_and_tracks_it(self):
        box = self.layout.box((0, self.page.top), 200, 100)
        self.assertEqual(box.width, 200)
        self.assertEqual(box.height, 100)
        self.assertPointAlmostEqual(box.absolute_top_left, self.page.absolute_top_left)
        self.assertIs(self.layout.last_created_box, box)
        self.assertIs(box.parent, self.page)

    def test_padding_frame_is_active_inside_content(self):
        seen = []
        box = self.layout.box(
            (0, self.page.top), 200, 100, lambda: seen.append(self.doc.bounds), padding=[10, 20, 10, 20]
        )
        inner = seen[0]
        self.assertEqual((inner.width, inner.height), (160, 80))
        self.assertAlmostEqual(inner.absolute_left, box.absolute_left + 20)
        self.assertAlmostEqual(inner.absolute_top, box.absolute_top - 10)
        self.assertIs(self.doc.bounds, self.page)

    def test_untracked_box(self):
        first = self.layout.box((0, self.page.top), 50, 50)
        self.layout.box((100, self.page.top), 50, 50, track=False)
        self.assertIs(self.layout.last_created_box, first)

    def test_percentage_sizes(self):
        box = self.layout.box((0, self.page.top), '50%', '25%')
        self.assertAlmostEqual(box.width, self.page.width * 0.5)
        self.assertAlmostEqual(box.height, self.page.height * 0.25)

    def test_local_percentage_fills_remaining_width(self):
        start_x = self.page.width / 2
        box = self.layout.box((start_x, self.page.top), '100%l', 10)
        self.assertAlmostEqual(box.width, self.page.width / 2)
        self.assertAlmostEqual(box.absolute_right, self.page.absolute_right)

    def test_content_failure_restores_frame_and_skips_tracking(self):
        first = self.layout.box((0, self.page.top), 50, 50)

        def boom():
            raise RuntimeError("content failed")

        with self.assertRaises(RuntimeError):
            self.layout.box((0, self.page.top), 80, 80, boom, padding=5)
        self.assertIs(self.doc.bounds, self.page)
        self.assertIs(self.layout.last_created_box, first)

    def test_padding_larger_than_box_rejected_by_host(self):
        with self.assertRaises(InvalidRegionError):
            self.layout.box((0, self.page.top), 20, 20, padding=15)
        self.assertIs(self.doc.bounds, self.page)


class TestRelativePlacement(PointAssertions, unittest.TestCase):
    def setUp(self):
        self.doc = Document(margin=36)
        self.layout = LayoutContext(self.doc)
        self.page = self.doc.bounds

    def test_beside_previous_without_previous_is_top_left(self):
        box = self.layout.box_beside_previous(100, 50)
        self.assertPointAlmostEqual(box.absolute_top_left, self.page.absolute_top_left)

    def test_below_previous_without_previous_is_top_left(self):
        box = self.layout.box_below_previous(100, 50, gutter=10)
        self.assertPointAlmostEqual(box.absolute_top_left, self.page.absolute_top_left)

    def test_beside_previous_with_gutter(self):
        first = self.layout.box((0, self.page.top), 100, 50)
        second = self.layout.box_beside_previous(80, 50, gutter=10)
        self.assertAlmostEqual(second.absolute_left, first.absolute_right + 10)
        self.assertAlmostEqual(second.absolute_top, first.absolute_top)
        self.assertIs(self.layout.last_created_box, second)

    def test_below_with_gutter(self):
        first = self.layout.box((0, self.page.top), 100, 50)
        self.layout.box_beside(first, 80, 50)
        below = self.layout.box_below(first, 100, 30, gutter=5)
        self.assertAlmostEqual(below.absolute_left, first.absolute_left)
        self.assertAlmostEqual(below.absolute_top, first.absolute_bottom - 5)

    def test_beside_fills_rest_of_row(self):
        first = self.layout.box((0, self.page.top), '30%', 50)
        rest = self.layout.box_beside(first, '100%l', 50)
        self.assertAlmostEqual(rest.absolute_right, self.page.absolute_right)

    def test_placement_inside_nested_box(self):
        found = {}

        def content():
            a = self.layout.box((0, self.layout.bounds.top), 40, 20)
            b = self.layout.box_beside_previous(40, 20, gutter=4)
            c = self.layout.box_below(a, 40, 20)
            found.update(a=a, b=b, c=c)

        outer = self.layout.box((100, self.page.top - 100), 200, 100, content, padding=10)
        a, b, c = found['a'], found['b'], found['c']
        self.assertAlmostEqual(a.absolute_left, outer.absolute_left + 10)
        self.assertAlmostEqual(a.absolute_top, outer.absolute_top - 10)
        self.assertAlmostEqual(b.absolute_left, a.absolute_right + 4)
        self.assertAlmostEqual(c.absolute_top, a.absolute_bottom)
        # the outer box was created last
        self.assertIs(self.layout.last_created_box, outer)

    def test_remaining_height(self):
        first = self.layout.box((0, self.page.top), 100, 50)
        self.assertAlmostEqual(self.layout.remaining_height(first), self.page.height - 50)

    def test_contexts_are_independent(self):
        other = LayoutContext(Document())
        self.layout.box((0, self.page.top), 10, 10)
        self.assertIsNone(other.last_created_box)


class TestStandalonePadding(unittest.TestCase):
    def test_padding_runs_content_in_inset_frame(self):
        doc = Document(margin=0)
        layout = LayoutContext(doc)
        seen = []
        region = layout.padding(25, lambda: seen.append(doc.bounds))
        self.assertIs(seen[0], region)
        self.assertAlmostEqual(region.width, doc.bounds.width - 50)
        self.assertAlmostEqual(region.absolute_top, doc.bounds.absolute_top - 25)


if __name__ == '__main__':
    unittest.main()
