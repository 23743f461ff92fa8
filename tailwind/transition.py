"""
Transition Matcher
transition shorthand and its property/duration/timing-function/delay
longhands.
"""

import re
from typing import List, Optional

from tailwind.constants import DURATION_VALUES, EASING_MAP, TRANSITION_PROPERTY_MAP, format_number
from tailwind.matcher import Matcher, as_classes
from tailwind.tokenizer import split_commas, split_whitespace, underscore_spaces

TIME_RE = re.compile(r'^(\d*\.?\d+)(ms|s)$', re.IGNORECASE)

TRANSITION_PROPERTIES = [
    'transition', 'transition-property', 'transition-duration',
    'transition-timing-function', 'transition-delay',
]


def time_class(prefix: str, value: str) -> Optional[str]:
    """duration-300 for '0.3s'; duration-[250ms] off the scale."""
    match = TIME_RE.match(value.strip())
    if not match:
        return None
    ms = float(match.group(1))
    if match.group(2).lower() == 's':
        ms *= 1000
    ms = round(ms, 3)
    if ms in DURATION_VALUES:
        return f"{prefix}-{format_number(ms)}"
    return f"{prefix}-[{format_number(ms)}ms]"


def easing_class(value: str) -> Optional[str]:
    val = value.strip()
    if val.lower() in EASING_MAP:
        return EASING_MAP[val.lower()]
    if val.lower().startswith('cubic-bezier('):
        return f"ease-[{underscore_spaces(val)}]"
    return None


def convert_transition_shorthand(value: str) -> Optional[List[str]]:
    """
    Each comma-separated transition is classified token by token. The first
    time value is the duration and any later one the delay.
    """
    classes: List[str] = []
    for transition in split_commas(value):
        found_duration = False
        for token in split_whitespace(transition):
            lowered = token.lower()
            converted = None
            if lowered in TRANSITION_PROPERTY_MAP:
                converted = TRANSITION_PROPERTY_MAP[lowered]
            elif easing_class(token):
                converted = easing_class(token)
            elif TIME_RE.match(token):
                converted = time_class('delay' if found_duration else 'duration', token)
                found_duration = True
            if converted and converted not in classes:
                classes.append(converted)
    if not classes:
        return None
    if not any(c.startswith('transition') for c in classes):
        classes.append('transition-all')
    return classes


class TransitionMatcher(Matcher):
    name = 'transition'
    properties = frozenset(TRANSITION_PROPERTIES)

    def convert(self, prop, value, settings):
        if prop == 'transition':
            return convert_transition_shorthand(value)
        if prop == 'transition-property':
            mapped = [TRANSITION_PROPERTY_MAP.get(p.strip().lower()) for p in split_commas(value)]
            return as_classes(*dict.fromkeys(mapped))
        if prop == 'transition-duration':
            return as_classes(time_class('duration', value))
        if prop == 'transition-delay':
            return as_classes(time_class('delay', value))
        return as_classes(easing_class(value))
