"""
Z-Index Matcher
"""

import re

from tailwind.matcher import Matcher

Z_INDEX_SCALE = {'0', '10', '20', '30', '40', '50', 'auto'}
INTEGER_RE = re.compile(r'^-?\d+$')


def convert_z_index(value: str) -> str:
    val = value.strip().lower()
    if val in Z_INDEX_SCALE:
        return f"z-{val}"
    if INTEGER_RE.match(val):
        return f"z-[{int(val)}]"
    return f"z-[{value.strip()}]"


class ZIndexMatcher(Matcher):
    name = 'z-index'
    properties = frozenset(['z-index'])

    def convert(self, prop, value, settings):
        return [convert_z_index(value)]
