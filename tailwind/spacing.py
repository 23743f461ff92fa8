"""
Spacing Matchers
Margin, padding, inset and gap utilities, including multi-value shorthands
and the 'margin: 0 auto' centering pattern.
"""

import re
from typing import List, Optional

from tailwind.constants import SPACING_PREFIXES, SPACING_SCALE, format_number, percentage_to_fraction
from tailwind.matcher import Matcher
from tailwind.tokenizer import split_whitespace

LENGTH_RE = re.compile(r'^-?(\d+(\.\d+)?|\.\d+)(px|rem|em|%)?$')
SHORTHAND_PART_RE = re.compile(r'^(-?(\d+(\.\d+)?|\.\d+)(px|rem|em|%)?|auto)$', re.IGNORECASE)


def spacing_suffix(value: str) -> str:
    """
    Tailwind suffix for a non-negative spacing value.

    '0' -> '0', '1px' -> 'px', '16px' -> '4', '50%' -> '1/2',
    anything off the scale -> '[value]'.
    """
    val = value.strip().lower()
    if val == 'auto':
        return 'auto'
    if val in ('0', '0px', '0rem', '0em', '0%'):
        return '0'
    if val == '1px':
        return 'px'
    if val in SPACING_SCALE:
        return SPACING_SCALE[val]
    if val.endswith('px'):
        try:
            step = format_number(float(val[:-2]) / 4)
        except ValueError:
            return f"[{value.strip()}]"
        if step in SPACING_SCALE:
            return step
    if val.endswith('%'):
        fraction = percentage_to_fraction(val)
        if fraction:
            return fraction
    return f"[{value.strip()}]"


def spacing_class(prefix: str, value: str) -> str:
    """Build prefix-suffix, moving a leading minus in front of the prefix."""
    val = value.strip()
    if val.startswith('-'):
        suffix = spacing_suffix(val[1:])
        if suffix.startswith('['):
            return f"{prefix}-[{val}]"
        return f"-{prefix}-{suffix}"
    return f"{prefix}-{spacing_suffix(val)}"


def _same(a: str, b: str) -> bool:
    return spacing_suffix(a) == spacing_suffix(b) and a.startswith('-') == b.startswith('-')


def convert_box_shorthand(base: str, parts: List[str]) -> List[str]:
    """
    Expand 1-4 value margin/padding into per-axis or per-side classes.
    Zero sides are emitted, not dropped.
    """
    if len(parts) == 1:
        return [spacing_class(base, parts[0])]
    if len(parts) == 2:
        vertical, horizontal = parts
        if _same(vertical, horizontal):
            return [spacing_class(base, vertical)]
        return [spacing_class(f"{base}y", vertical), spacing_class(f"{base}x", horizontal)]
    if len(parts) == 3:
        top, horizontal, bottom = parts
        if _same(top, bottom):
            return convert_box_shorthand(base, [top, horizontal])
        return [
            spacing_class(f"{base}t", top),
            spacing_class(f"{base}x", horizontal),
            spacing_class(f"{base}b", bottom),
        ]
    top, right, bottom, left = parts
    if _same(right, left):
        return convert_box_shorthand(base, [top, right, bottom])
    return [
        spacing_class(f"{base}t", top),
        spacing_class(f"{base}r", right),
        spacing_class(f"{base}b", bottom),
        spacing_class(f"{base}l", left),
    ]


def convert_margin_auto(value: str) -> Optional[List[str]]:
    """
    Centering margins: horizontal auto becomes mx-auto, vertical sides stay
    explicit. Returns None when the value is not a centering pattern.
    """
    parts = [p.lower() for p in split_whitespace(value)]
    if parts == ['auto']:
        return ['m-auto']
    if len(parts) == 2 and parts[1] == 'auto' and parts[0] != 'auto':
        return ['mx-auto', spacing_class('my', parts[0])]
    if len(parts) == 3 and parts[1] == 'auto':
        top, bottom = parts[0], parts[2]
        if _same(top, bottom):
            return ['mx-auto', spacing_class('my', top)]
        return ['mx-auto', spacing_class('mt', top), spacing_class('mb', bottom)]
    if len(parts) == 4 and parts[1] == 'auto' and parts[3] == 'auto':
        return convert_margin_auto(' '.join(parts[:3]))
    return None


class SpacingShorthandMatcher(Matcher):
    """Multi-value margin and padding."""

    name = 'spacing-shorthand'
    properties = frozenset(['margin', 'padding'])

    def predicate(self, prop, value):
        if prop not in self.properties:
            return False
        parts = split_whitespace(value)
        if prop == 'margin' and [p.lower() for p in parts] == ['auto']:
            return True
        return 2 <= len(parts) <= 4 and all(SHORTHAND_PART_RE.match(p) for p in parts)

    def convert(self, prop, value, settings):
        if prop == 'margin':
            centered = convert_margin_auto(value)
            if centered:
                return centered
        base = SPACING_PREFIXES[prop]
        return convert_box_shorthand(base, split_whitespace(value))


class SpacingMatcher(Matcher):
    """Single-value spacing: top/right/bottom/left, inset, margin*, padding*, gap*."""

    name = 'spacing'
    properties = frozenset(SPACING_PREFIXES)

    def predicate(self, prop, value):
        if prop not in self.properties:
            return False
        val = value.strip().lower()
        return val == 'auto' or bool(LENGTH_RE.match(val)) or val.startswith('var(')

    def convert(self, prop, value, settings):
        # rem/em and var() fall through to the arbitrary suffix
        return [spacing_class(SPACING_PREFIXES[prop], value)]
