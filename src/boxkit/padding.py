"""Padding specs and the inset frame they produce."""

import re
from dataclasses import dataclass
from typing import List, Tuple

from .percent import NUMBER_PREFIX_RE


def _to_int(value) -> int:
    """Truncate ``value`` to a non-negative int; unparseable values become 0."""
    if isinstance(value, (int, float)):
        num = int(value)
    else:
        m = NUMBER_PREFIX_RE.match(str(value))
        num = int(float(m.group(0))) if m else 0
    return max(num, 0)


@dataclass(frozen=True)
class Padding:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def parse(cls, values) -> 'Padding':
        """Normalize a padding spec.

        Accepts a scalar (all sides), a sequence in CSS shorthand order
        (1: all, 2: vertical/horizontal, 3: top/horizontal/bottom,
        4: top/right/bottom/left; extra items ignored), a string of comma and/or
        whitespace separated numbers, or an existing Padding. None means zero.
        """
        if isinstance(values, Padding):
            return values
        if values is None:
            return cls()
        if isinstance(values, str):
            parts: List = [p for p in re.split(r'[\s,\[\]()]+', values.strip()) if p != ""]
        elif isinstance(values, (list, tuple)):
            parts = list(values)
        else:
            parts = [values]
        nums = [_to_int(p) for p in parts]
        if not nums:
            return cls()
        if len(nums) == 1:
            t = r = b = left = nums[0]
        elif len(nums) == 2:
            t = b = nums[0]
            r = left = nums[1]
        elif len(nums) == 3:
            t = nums[0]
            r = left = nums[1]
            b = nums[2]
        else:
            t, r, b, left = nums[0], nums[1], nums[2], nums[3]
        return cls(t, r, b, left)

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.top, self.right, self.bottom, self.left)


def padding_position(bounds, padding: Padding) -> Tuple[float, float]:
    """Top-left of the padded frame in ``bounds``' local frame."""
    return (padding.left, bounds.top - padding.top)


def padding_size(bounds, padding: Padding) -> Tuple[float, float]:
    """Size of the padded frame. Not clamped: may be negative."""
    return (bounds.width - padding.horizontal, bounds.height - padding.vertical)


def apply_padding(bounds, values):
    """Return (position, width, height) of the frame inset into ``bounds``."""
    padding = Padding.parse(values)
    width, height = padding_size(bounds, padding)
    return padding_position(bounds, padding), width, height
