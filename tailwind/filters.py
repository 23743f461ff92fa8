"""
Filter Matcher
filter and backdrop-filter. Each function is converted on its own; the
backdrop variant prefixes every class with 'backdrop-'.
"""

import re
from typing import List, Optional

from tailwind.matcher import Matcher
from tailwind.tokenizer import split_whitespace

FUNCTION_RE = re.compile(r'^([a-zA-Z-]+)\((.*)\)$', re.DOTALL)
VAR_ARG_RE = re.compile(r'^var\(\s*(--[\w-]+)\s*\)$')
NUMBER_RE = re.compile(r'^(\d+(\.\d+)?|\.\d+)(%)?$')
DEGREE_RE = re.compile(r'^(-?\d+(\.\d+)?)deg$')

BLUR_SCALE = {
    '0': 'none',
    '0px': 'none',
    '4px': 'xs',
    '8px': 'sm',
    '12px': 'md',
    '16px': 'lg',
    '24px': 'xl',
    '40px': '2xl',
    '64px': '3xl',
}

BRIGHTNESS_STEPS = {0, 50, 75, 90, 95, 100, 105, 110, 125, 150, 200}
CONTRAST_STEPS = {0, 50, 75, 100, 125, 150, 200}
SATURATE_STEPS = {0, 50, 100, 150, 200}
HUE_ROTATE_STEPS = {0, 15, 30, 60, 90, 180}
# Functions where 100% (or 1) is the bare utility name
TOGGLE_FUNCTIONS = {'grayscale', 'invert', 'sepia'}

DROP_SHADOW_MAP = {
    '0 0 #0000': 'drop-shadow-none',
}

FILTER_FUNCTIONS = {
    'blur', 'brightness', 'contrast', 'grayscale', 'hue-rotate', 'invert',
    'opacity', 'saturate', 'sepia', 'drop-shadow',
}


def _arbitrary(name: str, value: str) -> str:
    return f"{name}-[{'_'.join(value.split())}]"


def _percentage(value: str) -> Optional[float]:
    """'75%' -> 75, '0.75' -> 75; None for anything else."""
    match = NUMBER_RE.match(value)
    if not match:
        return None
    number = float(match.group(1))
    return number if match.group(3) else round(number * 100, 6)


def _step(name: str, value: str, steps) -> str:
    percentage = _percentage(value)
    if percentage is not None and percentage.is_integer() and int(percentage) in steps:
        return f"{name}-{int(percentage)}"
    return _arbitrary(name, value)


def convert_filter_function(name: str, value: str, backdrop: bool) -> Optional[str]:
    value = value.strip()
    var = VAR_ARG_RE.match(value)
    if var:
        return f"{name}-({var.group(1)})"

    if name == 'blur':
        step = BLUR_SCALE.get(value.lower())
        if step:
            return f"blur-{step}"
        return _arbitrary('blur', value)
    if name == 'brightness':
        return _step('brightness', value, BRIGHTNESS_STEPS)
    if name == 'contrast':
        return _step('contrast', value, CONTRAST_STEPS)
    if name == 'saturate':
        return _step('saturate', value, SATURATE_STEPS)
    if name in TOGGLE_FUNCTIONS:
        percentage = _percentage(value)
        if percentage == 100:
            return name
        if percentage == 0:
            return f"{name}-0"
        if percentage is not None and percentage.is_integer():
            return f"{name}-{int(percentage)}"
        return _arbitrary(name, value)
    if name == 'opacity':
        percentage = _percentage(value)
        if percentage is not None and percentage.is_integer():
            return f"opacity-{int(percentage)}"
        return _arbitrary('opacity', value)
    if name == 'hue-rotate':
        match = DEGREE_RE.match(value.lower())
        if match and float(match.group(1)).is_integer():
            degrees = int(float(match.group(1)))
            if abs(degrees) in HUE_ROTATE_STEPS:
                return f"-hue-rotate-{abs(degrees)}" if degrees < 0 else f"hue-rotate-{degrees}"
        return _arbitrary('hue-rotate', value)
    if name == 'drop-shadow':
        if backdrop:
            return None
        return DROP_SHADOW_MAP.get(' '.join(value.lower().split())) or _arbitrary('drop-shadow', value)
    return None


def convert_filter(prop: str, value: str) -> List[str]:
    backdrop = prop == 'backdrop-filter'
    full_prefix = 'backdrop-filter' if backdrop else 'filter'
    val = value.strip()
    if val.lower() == 'none':
        return [f"{full_prefix}-none"]

    var = VAR_ARG_RE.match(val)
    if var:
        return [f"{full_prefix}-({var.group(1)})"]

    classes: List[str] = []
    for token in split_whitespace(val):
        match = FUNCTION_RE.match(token)
        if not match or match.group(1).lower() not in FILTER_FUNCTIONS:
            classes = []
            break
        converted = convert_filter_function(match.group(1).lower(), match.group(2), backdrop)
        if converted:
            classes.append(converted)

    if not classes:
        return [_arbitrary(full_prefix, val)]
    if backdrop:
        return [_backdrop(cls) for cls in classes]
    return classes


def _backdrop(cls: str) -> str:
    # Negative utilities keep the minus in front: -backdrop-hue-rotate-90
    if cls.startswith('-'):
        return f"-backdrop-{cls[1:]}"
    return f"backdrop-{cls}"


class FilterMatcher(Matcher):
    name = 'filter'
    properties = frozenset(['filter', 'backdrop-filter'])

    def convert(self, prop, value, settings):
        return convert_filter(prop, value)
