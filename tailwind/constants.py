"""
Tailwind Constants Module
Static scales and property families shared by the matchers.
"""

from fractions import Fraction
from typing import Dict

# Spacing scale steps. A pixel length lands on a step when px / 4 is a key here.
SPACING_SCALE: Dict[str, str] = {
    step: step for step in [
        '0', '0.5', '1', '1.5', '2', '2.5', '3', '3.5', '4', '5', '6', '7', '8', '9',
        '10', '11', '12', '14', '16', '20', '24', '28', '32', '36', '40', '44', '48',
        '52', '56', '60', '64', '72', '80', '96',
    ]
}

SPACING_PREFIXES: Dict[str, str] = {
    'top': 'top',
    'right': 'right',
    'bottom': 'bottom',
    'left': 'left',
    'inset': 'inset',
    'margin': 'm',
    'margin-top': 'mt',
    'margin-right': 'mr',
    'margin-bottom': 'mb',
    'margin-left': 'ml',
    'margin-inline': 'mx',
    'margin-block': 'my',
    'padding': 'p',
    'padding-top': 'pt',
    'padding-right': 'pr',
    'padding-bottom': 'pb',
    'padding-left': 'pl',
    'padding-inline': 'px',
    'padding-block': 'py',
    'gap': 'gap',
    'row-gap': 'gap-y',
    'column-gap': 'gap-x',
    'grid-gap': 'gap',
    'grid-row-gap': 'gap-y',
    'grid-column-gap': 'gap-x',
}

SIZE_PREFIXES: Dict[str, str] = {
    'width': 'w',
    'height': 'h',
    'min-width': 'min-w',
    'min-height': 'min-h',
    'max-width': 'max-w',
    'max-height': 'max-h',
}

GRID_PREFIXES: Dict[str, str] = {
    'grid-template-columns': 'grid-cols',
    'grid-template-rows': 'grid-rows',
    'grid-column': 'col',
    'grid-row': 'row',
}

GRID_PROPERTIES = list(GRID_PREFIXES) + [
    'grid-column-start', 'grid-column-end', 'grid-row-start', 'grid-row-end',
    'grid-auto-flow', 'grid-auto-columns', 'grid-auto-rows',
]

# Largest N with a built-in grid-cols-N / grid-rows-N utility
MAX_GRID_COLUMNS = 12
MAX_GRID_ROWS = 6

ASPECT_RATIO_PROPERTIES = ['aspect-ratio']

ASPECT_RATIO_PATTERNS: Dict[str, str] = {
    'auto': 'aspect-auto',
    '1 / 1': 'aspect-square',
    '1': 'aspect-square',
    '1.00': 'aspect-square',
    '16 / 9': 'aspect-video',
    '1.78': 'aspect-video',
    '1.7778': 'aspect-video',
    '4 / 3': 'aspect-[4/3]',
    '1.33': 'aspect-[4/3]',
    '3 / 2': 'aspect-[3/2]',
    '1.5': 'aspect-[3/2]',
    '1.50': 'aspect-[3/2]',
    '2 / 3': 'aspect-[2/3]',
    '0.67': 'aspect-[2/3]',
    '3 / 4': 'aspect-[3/4]',
    '0.75': 'aspect-[3/4]',
    '9 / 16': 'aspect-[9/16]',
    '0.56': 'aspect-[9/16]',
    '0.5625': 'aspect-[9/16]',
    '21 / 9': 'aspect-[21/9]',
    '2.33': 'aspect-[21/9]',
}

TRANSITION_PROPERTY_MAP: Dict[str, str] = {
    'all': 'transition-all',
    'none': 'transition-none',
    'color': 'transition-colors',
    'background-color': 'transition-colors',
    'border-color': 'transition-colors',
    'text-decoration-color': 'transition-colors',
    'fill': 'transition-colors',
    'stroke': 'transition-colors',
    'opacity': 'transition-opacity',
    'shadow': 'transition-shadow',
    'box-shadow': 'transition-shadow',
    'transform': 'transition-transform',
}

EASING_MAP: Dict[str, str] = {
    'ease': 'ease-in-out',
    'linear': 'ease-linear',
    'ease-in': 'ease-in',
    'ease-out': 'ease-out',
    'ease-in-out': 'ease-in-out',
}

DURATION_VALUES = [0, 75, 100, 150, 200, 300, 500, 700, 1000]

CSS_WIDE_KEYWORDS = {'inherit', 'initial', 'unset', 'revert', 'revert-layer'}


def _build_fraction_scale() -> Dict[str, str]:
    scale = {}
    for denominator in (2, 3, 4, 5, 6, 12):
        for numerator in range(1, denominator):
            fraction = Fraction(numerator, denominator)
            key = f"{round(float(fraction) * 100, 2):g}"
            # Lowest terms win: 50% is 1/2, never 2/4 or 6/12
            scale.setdefault(key, f"{fraction.numerator}/{fraction.denominator}")
    scale['100'] = 'full'
    return scale


# Percentage (rounded to 2 places, no trailing zeros) -> fraction suffix
FRACTION_SCALE: Dict[str, str] = _build_fraction_scale()


def percentage_to_fraction(value: str):
    """Map '50%' to '1/2', '100%' to 'full'. Returns None off the table."""
    text = value.strip()
    if not text.endswith('%'):
        return None
    try:
        number = float(text[:-1])
    except ValueError:
        return None
    return FRACTION_SCALE.get(f"{round(number, 2):g}")


def format_number(number: float) -> str:
    """Render 2.0 as '2' and 2.5 as '2.5'."""
    if float(number).is_integer():
        return str(int(number))
    return f"{number:g}"
