"""Minimal message catalog lookup for report labels."""

import warnings
from typing import Any, Dict, Optional


class I18nKey(str):
    """Marks a string as a catalog key; plain strings are never translated."""


def key(name: str) -> I18nKey:
    return I18nKey(name)


class Translator:
    """Resolve dotted keys in a nested ``catalog`` dict.

    scope: dotted prefix prepended to every lookup, e.g. 'reports.invoice'
    """

    def __init__(self, catalog: Optional[Dict[str, Any]] = None, scope: Optional[str] = None):
        self.catalog = catalog or {}
        self.scope = scope

    def lookup(self, name: str, scope: Optional[str] = None):
        node: Any = self.catalog
        path = f"{scope}.{name}" if scope else name
        for part in path.split('.'):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def t(self, text_or_key, scope: Optional[str] = None, **values) -> str:
        if not isinstance(text_or_key, I18nKey):
            return str(text_or_key)
        scope = self.scope if scope is None else scope
        message = self.lookup(str(text_or_key), scope)
        if message is None:
            warnings.warn(f"Translation missing: {scope + '.' if scope else ''}{text_or_key}")
            return str(text_or_key)
        if values:
            return message.format_map(values)
        return message
