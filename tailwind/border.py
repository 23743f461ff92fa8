"""
Border Matcher
border and outline shorthands plus their width/style longhands. Per-side
colors and border-radius belong to their own matchers.
"""

import re
from typing import List, Optional

from tailwind.color import color_suffix, is_color_value
from tailwind.matcher import Matcher, as_classes
from tailwind.tokenizer import arbitrary_property, split_whitespace, underscore_spaces

BORDER_WIDTHS = {
    '0': '0',
    '0px': '0',
    'thin': '',
    '1px': '',
    'medium': '2',
    '2px': '2',
    'thick': '4',
    '4px': '4',
    '8px': '8',
}

BORDER_STYLES = {
    'solid': 'border-solid',
    'dashed': 'border-dashed',
    'dotted': 'border-dotted',
    'double': 'border-double',
    'hidden': 'border-hidden',
    'none': 'border-none',
}

OUTLINE_WIDTHS = {'0': '0', '0px': '0', '1px': '1', 'thin': '1', '2px': '2', 'medium': '2',
                  '4px': '4', 'thick': '4', '8px': '8'}

OUTLINE_STYLES = {
    'none': 'outline-none',
    'solid': 'outline',
    'dashed': 'outline-dashed',
    'dotted': 'outline-dotted',
    'double': 'outline-double',
    'hidden': 'outline-hidden',
}

OUTLINE_OFFSETS = {'0': '0', '0px': '0', '1px': '1', '2px': '2', '4px': '4', '8px': '8'}

SIDES = {'top': 't', 'right': 'r', 'bottom': 'b', 'left': 'l'}

WIDTH_TOKEN_RE = re.compile(r'^(\d+(\.\d+)?|\.\d+)(px|rem|em)?$|^(thin|medium|thick)$', re.IGNORECASE)

BORDER_PROPERTIES = (
    ['border', 'border-width', 'border-style']
    + [f"border-{side}" for side in SIDES]
    + [f"border-{side}-width" for side in SIDES]
    + [f"border-{side}-style" for side in SIDES]
    + ['outline', 'outline-width', 'outline-style', 'outline-offset']
)


def border_width_class(prefix: str, value: str) -> str:
    val = value.strip().lower()
    if val in BORDER_WIDTHS:
        step = BORDER_WIDTHS[val]
        return f"{prefix}-{step}" if step else prefix
    return f"{prefix}-[{underscore_spaces(value.strip())}]"


def border_style_class(value: str, side: Optional[str] = None) -> str:
    val = value.strip().lower()
    if side:
        # Tailwind has no per-side style utilities
        return arbitrary_property(f"border-{side}-style", val)
    return BORDER_STYLES.get(val) or arbitrary_property('border-style', val)


def parse_border_shorthand(value: str):
    """Classify shorthand tokens as (width, style, color)."""
    width = style = color = None
    for token in split_whitespace(value):
        lowered = token.lower()
        if style is None and lowered in BORDER_STYLES:
            style = token
        elif width is None and WIDTH_TOKEN_RE.match(token):
            width = token
        elif color is None and is_color_value(token):
            color = token
    return width, style, color


def convert_border_shorthand(value: str, side: Optional[str] = None) -> Optional[List[str]]:
    val = value.strip().lower()
    prefix = f"border-{SIDES[side]}" if side else 'border'
    if val in ('none', '0'):
        return [f"{prefix}-0"] if side else ['border-0' if val == '0' else 'border-none']

    width, style, color = parse_border_shorthand(value)
    if not (width or style or color):
        return None
    classes = []
    if width:
        classes.append(border_width_class(prefix, width))
    if style:
        classes.append(border_style_class(style, side))
    if color:
        suffix = color_suffix(color)
        if suffix:
            classes.append(f"{prefix}-{suffix}")
    return as_classes(*classes)


def convert_outline(prop: str, value: str) -> Optional[List[str]]:
    val = value.strip().lower()
    if prop == 'outline-width':
        step = OUTLINE_WIDTHS.get(val)
        return [f"outline-{step}" if step else f"outline-[{underscore_spaces(value.strip())}]"]
    if prop == 'outline-style':
        return [OUTLINE_STYLES.get(val) or arbitrary_property('outline-style', val)]
    if prop == 'outline-offset':
        step = OUTLINE_OFFSETS.get(val)
        if step:
            return [f"outline-offset-{step}"]
        if val.startswith('-'):
            inner = OUTLINE_OFFSETS.get(val[1:])
            if inner:
                return [f"-outline-offset-{inner}"]
        return [f"outline-offset-[{value.strip()}]"]

    if val in ('none', '0'):
        return ['outline-none' if val == 'none' else 'outline-0']
    width, style, color = None, None, None
    for token in split_whitespace(value):
        lowered = token.lower()
        if style is None and lowered in OUTLINE_STYLES:
            style = lowered
        elif width is None and WIDTH_TOKEN_RE.match(token):
            width = token
        elif color is None and is_color_value(token):
            color = token
    if not (width or style or color):
        return None
    classes = []
    if width:
        classes.extend(convert_outline('outline-width', width))
    if style:
        classes.extend(convert_outline('outline-style', style))
    if color:
        suffix = color_suffix(color)
        if suffix:
            classes.append(f"outline-{suffix}")
    return as_classes(*classes)


class BorderMatcher(Matcher):
    name = 'border'
    properties = frozenset(BORDER_PROPERTIES)

    def convert(self, prop, value, settings):
        if prop.startswith('outline'):
            return convert_outline(prop, value)
        if prop == 'border':
            return convert_border_shorthand(value)
        if prop == 'border-width':
            return [border_width_class('border', value)]
        if prop == 'border-style':
            return [border_style_class(value)]

        side = prop.split('-')[1]
        prefix = f"border-{SIDES[side]}"
        if prop.endswith('-width'):
            return [border_width_class(prefix, value)]
        if prop.endswith('-style'):
            return [border_style_class(value, side)]
        return convert_border_shorthand(value, side)
