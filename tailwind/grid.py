"""
Grid Matcher
Template columns/rows, spans, start/end lines and the auto-flow/auto-size
properties.
"""

import re
from typing import List, Optional

from tailwind.constants import GRID_PREFIXES, GRID_PROPERTIES, MAX_GRID_COLUMNS, MAX_GRID_ROWS
from tailwind.matcher import Matcher
from tailwind.tokenizer import split_whitespace, underscore_spaces
from utils.repeater import analyze_repeated_values, convert_repeater_to_tailwind

REPEAT_FR_RE = re.compile(r'^repeat\(\s*(\d+)\s*,\s*(1fr|minmax\(\s*0(px)?\s*,\s*1fr\s*\))\s*\)$', re.IGNORECASE)
SPAN_RE = re.compile(r'^span\s+(\d+)$', re.IGNORECASE)
FULL_SPAN_RE = re.compile(r'^1\s*/\s*-1$')
LINE_RE = re.compile(r'^-?\d+$')

LINE_PREFIXES = {
    'grid-column-start': 'col-start',
    'grid-column-end': 'col-end',
    'grid-row-start': 'row-start',
    'grid-row-end': 'row-end',
}

AUTO_FLOW_MAP = {
    'row': 'grid-flow-row',
    'column': 'grid-flow-col',
    'dense': 'grid-flow-dense',
    'row dense': 'grid-flow-row-dense',
    'column dense': 'grid-flow-col-dense',
}

AUTO_SIZE_MAP = {
    'auto': 'auto',
    'min-content': 'min',
    'max-content': 'max',
    '1fr': 'fr',
    'minmax(0, 1fr)': 'fr',
}


def convert_template(prop: str, value: str, settings) -> Optional[List[str]]:
    prefix = GRID_PREFIXES[prop]
    limit = MAX_GRID_COLUMNS if prefix == 'grid-cols' else MAX_GRID_ROWS
    val = ' '.join(value.strip().split())
    lowered = val.lower()

    if lowered in ('none', 'subgrid'):
        return [f"{prefix}-{lowered}"]

    match = REPEAT_FR_RE.match(lowered)
    if match and 0 < int(match.group(1)) <= limit:
        return [f"{prefix}-{int(match.group(1))}"]

    tracks = split_whitespace(lowered)
    if tracks and all(track == '1fr' for track in tracks) and len(tracks) <= limit:
        return [f"{prefix}-{len(tracks)}"]

    if settings.enable_repeater_optimization:
        pattern = analyze_repeated_values(val, settings.repeater_threshold)
        if pattern:
            return [convert_repeater_to_tailwind(prop, pattern)]
    return [f"{prefix}-[{underscore_spaces(val)}]"]


def convert_placement(prop: str, value: str) -> Optional[List[str]]:
    """grid-column / grid-row: span N, 1 / -1, auto or a raw line range."""
    prefix = GRID_PREFIXES[prop]
    val = value.strip()
    if val.lower() == 'auto':
        return [f"{prefix}-auto"]
    match = SPAN_RE.match(val)
    if match:
        return [f"{prefix}-span-{match.group(1)}"]
    if FULL_SPAN_RE.match(val):
        return [f"{prefix}-span-full"]
    if '/' in val:
        start, _, end = (part.strip() for part in val.partition('/'))
        if LINE_RE.match(start) and LINE_RE.match(end):
            return [line_class(f"{prefix}-start", start), line_class(f"{prefix}-end", end)]
    return [f"{prefix}-[{underscore_spaces(val)}]"]


def line_class(prefix: str, value: str) -> str:
    val = value.strip().lower()
    if val == 'auto':
        return f"{prefix}-auto"
    if LINE_RE.match(val):
        if val.startswith('-'):
            return f"-{prefix}-{val[1:]}"
        return f"{prefix}-{val}"
    return f"{prefix}-[{underscore_spaces(val)}]"


class GridMatcher(Matcher):
    name = 'grid'
    properties = frozenset(GRID_PROPERTIES)

    def convert(self, prop, value, settings):
        if prop in ('grid-template-columns', 'grid-template-rows'):
            return convert_template(prop, value, settings)
        if prop in ('grid-column', 'grid-row'):
            return convert_placement(prop, value)
        if prop in LINE_PREFIXES:
            return [line_class(LINE_PREFIXES[prop], value)]
        val = ' '.join(value.strip().lower().split())
        if prop == 'grid-auto-flow':
            cls = AUTO_FLOW_MAP.get(val)
            return [cls] if cls else None
        prefix = 'auto-cols' if prop == 'grid-auto-columns' else 'auto-rows'
        suffix = AUTO_SIZE_MAP.get(val)
        return [f"{prefix}-{suffix}" if suffix else f"{prefix}-[{underscore_spaces(val)}]"]
