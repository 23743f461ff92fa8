"""
Opacity Matcher
"""

import re

from tailwind.matcher import Matcher

OPACITY_SCALE = {
    '0': '0', '0.05': '5', '0.1': '10', '0.15': '15', '0.2': '20', '0.25': '25',
    '0.3': '30', '0.35': '35', '0.4': '40', '0.45': '45', '0.5': '50', '0.55': '55',
    '0.6': '60', '0.65': '65', '0.7': '70', '0.75': '75', '0.8': '80', '0.85': '85',
    '0.9': '90', '0.95': '95', '1': '100',
}

DECIMAL_RE = re.compile(r'^(0?\.\d+|0|1(\.0+)?)$')
PERCENT_RE = re.compile(r'^(\d+(\.\d+)?)%$')


def round_to_five(percentage: float) -> int:
    # Round half up; Python's round() would send 62.5 to 62
    return int((percentage + 2.5) // 5) * 5


def convert_opacity(value: str) -> str:
    val = value.strip().lower()
    if val in OPACITY_SCALE:
        return f"opacity-{OPACITY_SCALE[val]}"
    if DECIMAL_RE.match(val):
        percentage = round(float(val) * 100, 6)
        return f"opacity-{min(round_to_five(percentage), 100)}"
    match = PERCENT_RE.match(val)
    if match and float(match.group(1)) <= 100:
        return f"opacity-{round_to_five(float(match.group(1)))}"
    return f"opacity-[{value.strip()}]"


class OpacityMatcher(Matcher):
    name = 'opacity'
    properties = frozenset(['opacity'])

    def convert(self, prop, value, settings):
        return [convert_opacity(value)]
