#!/usr/bin/env python3
"""Tests for catalog lookups"""
import os
import sys
import unittest
import warnings

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

from boxkit.i18n import I18nKey, Translator, key

CATALOG = {
    'invoice': {'total': 'Total', 'greeting': 'Hello {name}'},
    'common': {'page': 'Page'},
}


class TestTranslator(unittest.TestCase):
    def test_plain_strings_pass_through(self):
        t = Translator(CATALOG, scope='invoice')
        self.assertEqual(t.t('total'), 'total')
        self.assertEqual(t.t(42), '42')

    def test_scoped_key(self):
        t = Translator(CATALOG, scope='invoice')
        self.assertEqual(t.t(key('total')), 'Total')
        self.assertEqual(t.t(key('page'), scope='common'), 'Page')

    def test_dotted_key_without_scope(self):
        t = Translator(CATALOG)
        self.assertEqual(t.t(I18nKey('common.page')), 'Page')

    def test_interpolation(self):
        t = Translator(CATALOG, scope='invoice')
        self.assertEqual(t.t(key('greeting'), name='Ana'), 'Hello Ana')

    def test_missing_key_warns_and_falls_back(self):
        t = Translator(CATALOG, scope='invoice')
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            self.assertEqual(t.t(key('nope')), 'nope')
        self.assertIn('invoice.nope', str(caught[0].message))

    def test_non_string_leaf_is_missing(self):
        t = Translator(CATALOG)
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            self.assertEqual(t.t(key('invoice')), 'invoice')


if __name__ == '__main__':
    unittest.main()
