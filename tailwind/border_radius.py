"""
Border Radius Matcher
"""

from tailwind.matcher import Matcher
from tailwind.tokenizer import split_whitespace, underscore_spaces

RADIUS_SCALE = {
    '0': 'none',
    '0px': 'none',
    '2px': 'sm',
    '0.125rem': 'sm',
    '4px': '',
    '0.25rem': '',
    '6px': 'md',
    '0.375rem': 'md',
    '8px': 'lg',
    '0.5rem': 'lg',
    '12px': 'xl',
    '0.75rem': 'xl',
    '16px': '2xl',
    '1rem': '2xl',
    '24px': '3xl',
    '1.5rem': '3xl',
    '9999px': 'full',
    '50%': 'full',
    '100%': 'full',
}

RADIUS_PREFIXES = {
    'border-radius': 'rounded',
    'border-top-left-radius': 'rounded-tl',
    'border-top-right-radius': 'rounded-tr',
    'border-bottom-right-radius': 'rounded-br',
    'border-bottom-left-radius': 'rounded-bl',
    'border-start-start-radius': 'rounded-ss',
    'border-start-end-radius': 'rounded-se',
    'border-end-end-radius': 'rounded-ee',
    'border-end-start-radius': 'rounded-es',
}


def radius_class(prefix: str, value: str) -> str:
    val = value.strip().lower()
    if val in RADIUS_SCALE:
        step = RADIUS_SCALE[val]
        return f"{prefix}-{step}" if step else prefix
    return f"{prefix}-[{underscore_spaces(value.strip())}]"


def convert_radius_shorthand(value: str):
    """
    Four equal corners collapse to one class; otherwise a single arbitrary
    value keeps the whole shorthand, elliptical '/' forms included.
    """
    parts = split_whitespace(value)
    if '/' not in value and len(set(p.lower() for p in parts)) == 1:
        return [radius_class('rounded', parts[0])]
    return [f"rounded-[{'_'.join(parts)}]"]


class BorderRadiusMatcher(Matcher):
    """
    With shorthand=True only multi-value border-radius is accepted, so the
    instance can sit early in the chain ahead of single-value handling.
    """

    name = 'border-radius'
    properties = frozenset(RADIUS_PREFIXES)

    def __init__(self, shorthand: bool = False):
        self.shorthand = shorthand
        if shorthand:
            self.name = 'border-radius-shorthand'

    def predicate(self, prop, value):
        if prop not in self.properties:
            return False
        multi = prop == 'border-radius' and (len(split_whitespace(value)) > 1 or '/' in value)
        return multi if self.shorthand else True

    def convert(self, prop, value, settings):
        if prop == 'border-radius' and (len(split_whitespace(value)) > 1 or '/' in value):
            return convert_radius_shorthand(value)
        return [radius_class(RADIUS_PREFIXES[prop], value)]
