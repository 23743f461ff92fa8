"""
Color Matcher
Named CSS colors map to a fixed Tailwind palette step; hex, rgb(), hsl()
and var() values become arbitrary values (no spaces after commas,
remaining spaces as underscores).
"""

import re

from tailwind.matcher import Matcher
from tailwind.tokenizer import underscore_spaces

COLOR_PROPERTY_MAP = {
    'color': 'text',
    'background-color': 'bg',
    'border-color': 'border',
    'border-top-color': 'border-t',
    'border-right-color': 'border-r',
    'border-bottom-color': 'border-b',
    'border-left-color': 'border-l',
    'text-decoration-color': 'decoration',
    'outline-color': 'outline',
    'fill': 'fill',
    'stroke': 'stroke',
    'caret-color': 'caret',
    'accent-color': 'accent',
}

# Lossy: each CSS name picks one palette step
NAMED_COLOR_MAP = {
    'transparent': 'transparent',
    'currentcolor': 'current',
    'inherit': 'inherit',
    'black': 'black',
    'white': 'white',
    'red': 'red-500',
    'green': 'green-500',
    'blue': 'blue-500',
    'yellow': 'yellow-500',
    'orange': 'orange-500',
    'purple': 'purple-500',
    'pink': 'pink-500',
    'gray': 'gray-500',
    'grey': 'gray-500',
    'indigo': 'indigo-500',
    'cyan': 'cyan-500',
    'teal': 'teal-500',
    'lime': 'lime-500',
    'emerald': 'emerald-500',
    'sky': 'sky-500',
    'rose': 'rose-500',
    'fuchsia': 'fuchsia-500',
    'amber': 'amber-500',
    'violet': 'violet-500',
    'crimson': 'red-600',
    'darkred': 'red-800',
    'darkgreen': 'green-800',
    'darkblue': 'blue-800',
    'navy': 'blue-900',
    'maroon': 'red-900',
    'olive': 'yellow-600',
    'darkgray': 'gray-700',
    'darkgrey': 'gray-700',
    'lightgray': 'gray-300',
    'lightgrey': 'gray-300',
    'silver': 'gray-400',
    'gold': 'yellow-400',
    'coral': 'orange-400',
    'salmon': 'orange-300',
    'khaki': 'yellow-300',
    'plum': 'purple-400',
    'orchid': 'purple-300',
    'tan': 'yellow-200',
    'beige': 'yellow-100',
    'lavender': 'purple-200',
    'azure': 'blue-100',
    'ivory': 'yellow-50',
    'aqua': 'cyan-500',
    'magenta': 'fuchsia-500',
    'brown': 'amber-800',
}

HEX_RE = re.compile(r'^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$', re.IGNORECASE)
COLOR_FUNCTION_RE = re.compile(r'^(rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\(.*\)$', re.IGNORECASE)
VAR_RE = re.compile(r'^var\(--[\w-]+(,.*)?\)$', re.IGNORECASE)


def is_color_value(value: str) -> bool:
    val = value.strip()
    return (val.lower() in NAMED_COLOR_MAP or bool(HEX_RE.match(val))
            or bool(COLOR_FUNCTION_RE.match(val)) or bool(VAR_RE.match(val)))


def color_suffix(value: str):
    """'red' -> 'red-500', '#ff0000' -> '[#ff0000]', unknown -> None."""
    val = value.strip()
    named = NAMED_COLOR_MAP.get(val.lower())
    if named:
        return named
    if HEX_RE.match(val) or COLOR_FUNCTION_RE.match(val) or VAR_RE.match(val):
        compact = re.sub(r'\s*,\s*', ',', val)
        return f"[{underscore_spaces(compact)}]"
    return None


def convert_color(prop: str, value: str):
    prefix = COLOR_PROPERTY_MAP.get(prop)
    if not prefix:
        return None
    suffix = color_suffix(value)
    return f"{prefix}-{suffix}" if suffix else None


class ColorMatcher(Matcher):
    name = 'color'
    properties = frozenset(COLOR_PROPERTY_MAP)

    def predicate(self, prop, value):
        return prop in self.properties and is_color_value(value)

    def convert(self, prop, value, settings):
        converted = convert_color(prop, value)
        return [converted] if converted else None
