"""
Size Matchers
width/height (with the joint size-* optimization) and min/max sizes.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from tailwind.constants import (CSS_WIDE_KEYWORDS, SIZE_PREFIXES, SPACING_SCALE, format_number,
                                percentage_to_fraction)
from tailwind.matcher import Matcher
from tailwind.tokenizer import underscore_spaces

logger = logging.getLogger(__name__)

SIZE_KEYWORDS = {
    'auto': 'auto',
    'max-content': 'max',
    'min-content': 'min',
    'fit-content': 'fit',
}

JOINT_SIZE_PROPERTIES = ('width', 'height')

NUMBER_RE = re.compile(r'^(\d+(\.\d+)?|\.\d+)$')
LENGTH_RE = re.compile(r'^-?(\d+(\.\d+)?|\.\d+)(px|rem|em|%|vw|vh|svh|dvh|lvh|vmin|vmax|ch|ex|cm|mm|in|pt|pc)$')
FUNCTION_RE = re.compile(r'^(calc|min|max|clamp|var|fit-content)\(.*\)$')


def normalize_size(value: str) -> str:
    """Unit-normalize for comparison: '0' -> '0px', '200' -> '200px'."""
    val = value.strip().lower()
    if NUMBER_RE.match(val):
        val = f"{format_number(float(val))}px"
    return val


def is_valid_size(value: str) -> bool:
    val = value.strip().lower()
    return (val in SIZE_KEYWORDS or val in CSS_WIDE_KEYWORDS or bool(LENGTH_RE.match(val))
            or bool(NUMBER_RE.match(val)) or bool(FUNCTION_RE.match(val)))


def size_suffix(prop: str, value: str) -> Optional[str]:
    val = normalize_size(value)
    if val in SIZE_KEYWORDS:
        return SIZE_KEYWORDS[val]
    if val == '0px':
        return '0'
    if val == '1px':
        return 'px'
    if val == '100%':
        return 'full'
    if val == '100vw' and prop.endswith('width'):
        return 'screen'
    if val == '100vh' and prop.endswith('height'):
        return 'screen'
    if val.endswith('%'):
        fraction = percentage_to_fraction(val)
        if fraction:
            return fraction
    if val.endswith('px'):
        step = format_number(float(val[:-2]) / 4) if NUMBER_RE.match(val[:-2]) else None
        if step in SPACING_SCALE:
            return step
    if val.endswith('rem') and NUMBER_RE.match(val[:-3]):
        step = format_number(float(val[:-3]) * 4)
        if step in SPACING_SCALE:
            return step
    if is_valid_size(value):
        return f"[{underscore_spaces(value.strip())}]"
    return None


class SizeMatcher(Matcher):
    """
    width/height and their min-/max- variants.

    width and height are normally converted together via convert_multiple so
    that equal values collapse into a single size-* class.
    """

    name = 'size'
    properties = frozenset(SIZE_PREFIXES)

    def predicate(self, prop, value):
        if prop not in self.properties:
            return False
        return is_valid_size(value) or (prop.startswith('max-') and value.strip().lower() == 'none')

    def convert(self, prop, value, settings):
        if prop.startswith('max-') and value.strip().lower() == 'none':
            return [f"{SIZE_PREFIXES[prop]}-none"]
        suffix = size_suffix(prop, value)
        if suffix is None:
            return None
        return [f"{SIZE_PREFIXES[prop]}-{suffix}"]

    def convert_multiple(self, declarations: Sequence, settings) -> Tuple[List[Tuple[object, List[str]]], List[object]]:
        """
        Convert width/height declarations as a group.

        Returns (converted, failed): converted pairs each declaration with
        its classes; failed lists declarations with no equivalent. When the
        last width and last height normalize to the same value and agree on
        !important, both map to one shared size-* class.
        """
        converted = []
        failed = []
        for declaration in declarations:
            prop = declaration.property.strip().lower()
            classes = self.convert(prop, declaration.value, settings) if self.predicate(prop, declaration.value) else None
            if classes:
                converted.append((declaration, classes))
            else:
                failed.append(declaration)

        if not settings.enable_size_optimization:
            return converted, failed

        widths = [(d, c) for d, c in converted if d.property.strip().lower() == 'width']
        heights = [(d, c) for d, c in converted if d.property.strip().lower() == 'height']
        if widths and heights:
            width_decl, width_classes = widths[-1]
            height_decl, height_classes = heights[-1]
            same_value = normalize_size(width_decl.value) == normalize_size(height_decl.value)
            same_priority = width_decl.important == height_decl.important
            if same_value and same_priority and width_classes[0][len('w-'):] == height_classes[0][len('h-'):]:
                shared = 'size-' + width_classes[0][len('w-'):]
                logger.debug(f"Collapsed width/height {width_decl.value} into {shared}")
                converted = [
                    (d, [shared]) if d is width_decl or d is height_decl else (d, c)
                    for d, c in converted
                ]
        return converted, failed
