"""
Transform Matcher
Decomposes a transform list into translate, scale, rotate and skew utilities.
"""

import re
from typing import List, Optional

from tailwind.matcher import Matcher
from tailwind.spacing import spacing_suffix
from tailwind.tokenizer import split_commas, split_whitespace

FUNCTION_RE = re.compile(r'^([a-zA-Z0-9]+)\((.*)\)$', re.DOTALL)

SCALE_VALUES = {
    '0': '0',
    '0.5': '50',
    '.5': '50',
    '0.75': '75',
    '.75': '75',
    '0.9': '90',
    '.9': '90',
    '0.95': '95',
    '.95': '95',
    '1': '100',
    '1.05': '105',
    '1.1': '110',
    '1.25': '125',
    '1.5': '150',
}

DEGREE_VALUES = {'0', '1', '2', '3', '6', '12', '45', '90', '180'}

DEGREE_RE = re.compile(r'^(-?)(\d+(\.\d+)?)deg$')


def translate_class(axis: str, value: str) -> str:
    val = value.strip().lower()
    negative = val.startswith('-')
    magnitude = val[1:] if negative else val
    if magnitude.endswith('%'):
        suffix = {'50%': '1/2', '100%': 'full'}.get(magnitude, f"[{magnitude}]")
    else:
        suffix = spacing_suffix(magnitude)
    if negative:
        if suffix.startswith('['):
            return f"translate-{axis}-[{val}]"
        return f"-translate-{axis}-{suffix}"
    return f"translate-{axis}-{suffix}"


def scale_suffix(value: str) -> str:
    val = value.strip().lower()
    if val in SCALE_VALUES:
        return SCALE_VALUES[val]
    if val.endswith('%'):
        try:
            return str(int(float(val[:-1])))
        except ValueError:
            pass
    return f"[{value.strip()}]"


def degree_class(prefix: str, value: str) -> str:
    """rotate-45, -rotate-45, or rotate-[17deg] off the table."""
    val = value.strip().lower()
    match = DEGREE_RE.match(val)
    if match and match.group(2) in DEGREE_VALUES:
        sign, degrees = match.group(1), match.group(2)
        if degrees == '0':
            return f"{prefix}-0"
        return f"{sign}{prefix}-{degrees}"
    return f"{prefix}-[{value.strip()}]"


def _arguments(args: str) -> List[str]:
    return [a for a in split_commas(args) if a]


def convert_transform_function(name: str, args: str) -> Optional[List[str]]:
    name = name.lower()
    values = _arguments(args)
    if not values:
        return None

    if name == 'translatex':
        return [translate_class('x', values[0])]
    if name == 'translatey':
        return [translate_class('y', values[0])]
    if name in ('translate', 'translate3d'):
        x = values[0]
        y = values[1] if len(values) > 1 else '0'
        return [translate_class('x', x), translate_class('y', y)]

    if name == 'scalex':
        return [f"scale-x-{scale_suffix(values[0])}"]
    if name == 'scaley':
        return [f"scale-y-{scale_suffix(values[0])}"]
    if name in ('scale', 'scale3d'):
        x = scale_suffix(values[0])
        y = scale_suffix(values[1]) if len(values) > 1 else x
        if x == y:
            return [f"scale-{x}"]
        return [f"scale-x-{x}", f"scale-y-{y}"]

    if name in ('rotate', 'rotatez'):
        return [degree_class('rotate', values[0])]
    if name == 'skewx':
        return [degree_class('skew-x', values[0])]
    if name == 'skewy':
        return [degree_class('skew-y', values[0])]
    if name == 'skew':
        classes = [degree_class('skew-x', values[0])]
        if len(values) > 1:
            classes.append(degree_class('skew-y', values[1]))
        return classes
    return None


def convert_transform(value: str) -> Optional[List[str]]:
    val = value.strip()
    if val.lower() == 'none':
        return ['transform-none']
    classes: List[str] = []
    for token in split_whitespace(val):
        match = FUNCTION_RE.match(token)
        if not match:
            return None
        converted = convert_transform_function(match.group(1), match.group(2))
        if converted is None:
            compact = re.sub(r'\s+', '', token)
            converted = [f"transform-[{compact}]"]
        classes.extend(converted)
    return classes or None


class TransformMatcher(Matcher):
    name = 'transform'
    properties = frozenset(['transform'])

    def convert(self, prop, value, settings):
        return convert_transform(value)
