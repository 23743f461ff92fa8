"""
Shadow Matcher
box-shadow against Tailwind's built-in shadows, then a size heuristic,
then an arbitrary value. text-shadow is passed through as an arbitrary
property.
"""

import re
from typing import Optional

from tailwind.matcher import Matcher
from tailwind.tokenizer import arbitrary_property, split_commas, split_whitespace

TAILWIND_SHADOWS = {
    'shadow-sm': '0 1px 2px 0 rgb(0 0 0 / 0.05)',
    'shadow': '0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)',
    'shadow-md': '0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)',
    'shadow-lg': '0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)',
    'shadow-xl': '0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)',
    'shadow-2xl': '0 25px 50px -12px rgb(0 0 0 / 0.25)',
    'shadow-inner': 'inset 0 2px 4px 0 rgb(0 0 0 / 0.05)',
}

# (max offset-y, max blur) -> class, checked in order
SHADOW_BUCKETS = [
    (1, 3, 'shadow-sm'),
    (2, 4, 'shadow'),
    (6, 8, 'shadow-md'),
    (12, 20, 'shadow-lg'),
    (25, 35, 'shadow-xl'),
]

LENGTH_RE = re.compile(r'^(-?(\d+(\.\d+)?|\.\d+))(px)?$')
SPACE_RGB_RE = re.compile(r'rgba?\(\s*([\d.]+)\s+([\d.]+)\s+([\d.]+)\s*/\s*([\d.%]+)\s*\)')


def normalize_shadow(value: str) -> str:
    """Compare shadows by text: rgb(a b c / d) becomes rgba(a, b, c, d)."""
    text = ' '.join(value.strip().lower().split())
    text = SPACE_RGB_RE.sub(lambda m: f"rgba({m.group(1)}, {m.group(2)}, {m.group(3)}, {m.group(4)})", text)
    text = re.sub(r'\s*,\s*', ', ', text)
    return text


NORMALIZED_SHADOWS = {normalize_shadow(css): cls for cls, css in TAILWIND_SHADOWS.items()}


def classify_shadow(value: str) -> Optional[str]:
    """Bucket a single shadow layer by its y-offset and blur radius."""
    tokens = split_whitespace(value)
    if any(t.lower() == 'inset' for t in tokens):
        return 'shadow-inner'
    lengths = []
    for token in tokens:
        match = LENGTH_RE.match(token)
        if match:
            lengths.append(abs(float(match.group(1))))
    if len(lengths) < 2:
        return None
    offset_y = lengths[1]
    blur = lengths[2] if len(lengths) > 2 else 0
    for max_y, max_blur, cls in SHADOW_BUCKETS:
        if offset_y <= max_y and blur <= max_blur:
            return cls
    return 'shadow-2xl'


def arbitrary_shadow(value: str) -> str:
    layers = ['_'.join(split_whitespace(layer)) for layer in split_commas(value)]
    return f"shadow-[{',_'.join(layers)}]"


def convert_box_shadow(value: str) -> Optional[str]:
    val = value.strip().lower()
    if val == 'none':
        return 'shadow-none'
    known = NORMALIZED_SHADOWS.get(normalize_shadow(value))
    if known:
        return known
    if val.startswith('var('):
        return f"shadow-[{value.strip()}]"
    layers = split_commas(value)
    if len(layers) == 1:
        bucket = classify_shadow(layers[0])
        if bucket:
            return bucket
    return arbitrary_shadow(value)


class ShadowMatcher(Matcher):
    name = 'shadow'
    properties = frozenset(['box-shadow', 'text-shadow'])

    def convert(self, prop, value, settings):
        if prop == 'text-shadow':
            if value.strip().lower() == 'none':
                return ['text-shadow-none']
            return [arbitrary_property('text-shadow', value)]
        converted = convert_box_shadow(value)
        return [converted] if converted else None
