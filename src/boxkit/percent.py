"""Percentage-aware size resolution.

Sizes are either literal lengths (points) or strings ending in ``%``:

  "50%"   -> 50% of the reference region's full dimension (global)
  "100%l" -> 100% of the space left after the box's start coordinate (local)

Parsing is permissive: nothing here raises on malformed input.
"""

import re
from dataclasses import dataclass
from typing import Any, Tuple

NUMBER_PREFIX_RE = re.compile(r'^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)')

WIDTH_AXES = ('width', 'x', 'w')
HEIGHT_AXES = ('height', 'y', 'h')


@dataclass(frozen=True)
class SizeSpec:
    value: Any
    kind: str = 'absolute'  # 'absolute' | 'global' | 'local'

    @property
    def is_percentage(self) -> bool:
        return self.kind in ('global', 'local')


def _leading_number(text: str) -> float:
    m = NUMBER_PREFIX_RE.match(text)
    if not m:
        return 0.0
    return float(m.group(0))


def parse_size(value) -> SizeSpec:
    """Classify a width/height value.

    Numbers are absolute. Strings containing '%' are percentages, local when an
    'l' follows the '%'. Numeric strings become absolute floats; any other text
    is passed through unchanged as an absolute value.
    """
    if isinstance(value, SizeSpec):
        return value
    if value is None or isinstance(value, (int, float)):
        return SizeSpec(value, 'absolute')
    text = str(value)
    if '%' not in text:
        try:
            return SizeSpec(float(text), 'absolute')
        except ValueError:
            return SizeSpec(value, 'absolute')
    number, _, suffix = text.partition('%')
    kind = 'local' if 'l' in suffix.lower() else 'global'
    return SizeSpec(_leading_number(number), kind)


def clamp_percentage(value) -> float:
    """Clamp a percentage to [0, 100]; unparseable input counts as 0."""
    try:
        num = float(value)
    except (TypeError, ValueError):
        num = _leading_number(str(value))
    return min(max(num, 0.0), 100.0)


def percent_w(value, reference) -> float:
    """``value`` percent of the reference region's width."""
    return reference.width * (clamp_percentage(value) / 100.0)


def percent_h(value, reference) -> float:
    """``value`` percent of the reference region's height."""
    return reference.height * (clamp_percentage(value) / 100.0)


def resolve_percent(spec, axis: str, reference, start: Tuple[float, float]):
    """Resolve ``spec`` to an absolute length along ``axis``.

    reference: region percentages are taken from (usually the current bounds)
    start: the box's top-left in the reference's local frame; only used for
           local percentages
    """
    size = parse_size(spec)
    if not size.is_percentage:
        return size.value
    if axis in WIDTH_AXES:
        value = percent_w(size.value, reference)
        if size.kind == 'global':
            return value
        # Remaining space to the right of start
        if not reference.width:
            return 0.0
        return value * (1.0 - (start[0] / reference.width))
    if axis in HEIGHT_AXES:
        value = percent_h(size.value, reference)
        if size.kind == 'global':
            return value
        # Remaining space below start
        if not reference.height:
            return 0.0
        return value * (start[1] / reference.height)
    raise ValueError(f"Unknown axis '{axis}'")


def resolve_size(position, width, height, reference) -> Tuple[Any, Any]:
    """Resolve a (width, height) pair for a box starting at ``position``."""
    return (
        resolve_percent(width, 'width', reference, position),
        resolve_percent(height, 'height', reference, position),
    )
