"""Values that follow page numbers, for headers and footers.

Overlays registered with ``Document.repeat`` only run after every page has
been generated, so a variable changed during generation holds its last value
by then. Record the value per page while generating, read it back per page
in the overlay::

  for index, post in enumerate(posts):
      if index:
          doc.start_new_page()
      values.store('post_title', post.title)
      print_comments(post)

  doc.repeat(lambda: doc.text_box(values.lookup('post_title', doc.page_number)))

``store`` back-fills skipped pages with the value that was current before
the write, so every page up to the latest write resolves to something, and
pages past the latest write resolve to the latest value.
"""

import copy
from typing import Any, Dict, Hashable, Optional


class PageValueStore:
    """Page-indexed key/value repository for one document session.

    host: optional host engine whose ``page_number`` is used when ``store``
    is called without a page
    """

    def __init__(self, host=None):
        self.host = host
        self._values: Dict[Hashable, Dict[int, Any]] = {}

    def __contains__(self, key) -> bool:
        return bool(self._values.get(key))

    def keys(self):
        return [k for k, pages in self._values.items() if pages]

    def max_page(self, key) -> int:
        """Highest page recorded for ``key``; 0 when nothing was stored."""
        pages = self._values.get(key)
        return max(pages) if pages else 0

    def store(self, key, value, page: Optional[int] = None) -> None:
        """Record ``value`` for ``key`` from ``page`` onward.

        Pages between the previous highest page and ``page`` that hold no
        value get the value that was current before this call. A page that
        already holds a value is never overwritten.
        """
        if page is None:
            if self.host is None:
                raise TypeError("store() needs a page when the store has no host")
            page = self.host.page_number
        previous = self.lookup(key, page)
        pages = self._values.setdefault(key, {})
        for index in range(self.max_page(key) + 1, page):
            pages.setdefault(index, previous)
        pages.setdefault(page, value)

    def lookup(self, key, page: Optional[int] = None, default: Any = '') -> Any:
        """Value for ``key`` at ``page``; pages past the highest recorded page
        resolve to it, unknown keys and pages resolve to ``default``, as does a
        missing page on a store without host."""
        pages = self._values.get(key)
        if not pages:
            return default
        if page is None:
            if self.host is None:
                return default
            page = self.host.page_number
        return pages.get(min(page, max(pages)), default)

    def snapshot(self) -> Dict[Hashable, Dict[int, Any]]:
        return copy.deepcopy(self._values)
