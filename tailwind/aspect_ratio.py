"""
Aspect Ratio Matcher
Known ratios map to aspect-square / aspect-video / aspect-[n/m], matched as
fraction text or as the decimal rounded to two places. Other ratios are
reduced to lowest terms.
"""

import math
import re
from typing import Optional, Tuple

from tailwind.constants import ASPECT_RATIO_PATTERNS, ASPECT_RATIO_PROPERTIES, format_number
from tailwind.matcher import Matcher

RATIO_RE = re.compile(r'^(\d+(?:\.\d+)?)\s*[/:]\s*(\d+(?:\.\d+)?)$')
DECIMAL_RE = re.compile(r'^(\d+(?:\.\d+)?)$')


def parse_aspect_ratio(value: str) -> Optional[Tuple[float, float]]:
    val = value.strip().lower()
    match = RATIO_RE.match(val)
    if match:
        return float(match.group(1)), float(match.group(2))
    match = DECIMAL_RE.match(val)
    if match:
        return float(match.group(1)), 1.0
    return None


def ratio_to_fraction(width: float, height: float) -> str:
    w = round(width * 1000)
    h = round(height * 1000)
    divisor = math.gcd(w, h) or 1
    return f"{w // divisor}/{h // divisor}"


def convert_aspect_ratio(value: str) -> str:
    val = value.strip().lower()
    # '16/9' and '16 / 9' share a table entry
    spaced = RATIO_RE.sub(r'\1 / \2', val)
    if val in ASPECT_RATIO_PATTERNS:
        return ASPECT_RATIO_PATTERNS[val]
    if spaced in ASPECT_RATIO_PATTERNS:
        return ASPECT_RATIO_PATTERNS[spaced]

    parsed = parse_aspect_ratio(value)
    if not parsed or parsed[1] == 0:
        return f"aspect-[{''.join(value.split())}]"

    width, height = parsed
    decimal = width / height
    for key in (format_number(decimal), f"{decimal:.2f}", format_number(round(decimal, 2))):
        if key in ASPECT_RATIO_PATTERNS:
            return ASPECT_RATIO_PATTERNS[key]

    if height == 1:
        return f"aspect-[{format_number(width)}]"
    return f"aspect-[{ratio_to_fraction(width, height)}]"


class AspectRatioMatcher(Matcher):
    name = 'aspect-ratio'
    properties = frozenset(ASPECT_RATIO_PROPERTIES)

    def convert(self, prop, value, settings):
        return [convert_aspect_ratio(value)]
