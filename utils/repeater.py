"""
Repeater Optimizer
Detects repeated grid track sizes and rewrites them with repeat().

'200px 200px 200px'          -> repeat(3, 200px)
'1fr 2fr 1fr 2fr 1fr 2fr'    -> repeat(3, 1fr 2fr)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tailwind.constants import MAX_GRID_COLUMNS, MAX_GRID_ROWS
from tailwind.tokenizer import split_whitespace

logger = logging.getLogger(__name__)

REPEATER_PROPERTIES = {'grid-template-columns': 'grid-cols', 'grid-template-rows': 'grid-rows'}


@dataclass
class RepeatPattern:
    value: str
    count: int
    property: str = ''
    original: str = ''

    def to_css(self) -> str:
        return f"repeat({self.count}, {self.value})"


def analyze_repeated_values(value: str, threshold: int) -> Optional[RepeatPattern]:
    """
    Find the shortest track sequence that tiles the whole value at least
    `threshold` times. Returns None when there is no such sequence.
    """
    parts = split_whitespace(value)
    if len(parts) < threshold:
        return None

    if all(part == parts[0] for part in parts):
        return RepeatPattern(parts[0], len(parts), original=value.strip())

    for length in range(2, len(parts) // 2 + 1):
        if len(parts) % length:
            continue
        count = len(parts) // length
        if count < threshold:
            break
        pattern = parts[:length]
        if pattern * count == parts:
            return RepeatPattern(' '.join(pattern), count, original=value.strip())
    return None


def optimize_repeater_value(value: str, threshold: int) -> str:
    """CSS-level rewrite; returns the value unchanged when nothing repeats."""
    pattern = analyze_repeated_values(value, threshold)
    return pattern.to_css() if pattern else value


def convert_repeater_to_tailwind(prop: str, pattern: RepeatPattern) -> Optional[str]:
    prefix = REPEATER_PROPERTIES.get(prop)
    if not prefix:
        return None
    limit = MAX_GRID_COLUMNS if prefix == 'grid-cols' else MAX_GRID_ROWS
    if pattern.value == '1fr' and pattern.count <= limit:
        return f"{prefix}-{pattern.count}"
    track = '_'.join(pattern.value.split())
    return f"{prefix}-[repeat({pattern.count},{track})]"


def detect_repeater_patterns(declarations: Iterable, threshold: int) -> List[RepeatPattern]:
    patterns = []
    for declaration in declarations:
        prop = declaration.property.strip().lower()
        if prop not in REPEATER_PROPERTIES:
            continue
        pattern = analyze_repeated_values(declaration.value, threshold)
        if pattern:
            pattern.property = prop
            patterns.append(pattern)
    return patterns


def get_optimization_suggestions(declarations: Iterable, settings) -> List[str]:
    """Human-readable hints for repeated tracks and equal width/height."""
    declarations = list(declarations)
    suggestions = []
    for pattern in detect_repeater_patterns(declarations, settings.repeater_threshold):
        tailwind_class = convert_repeater_to_tailwind(pattern.property, pattern)
        if tailwind_class:
            suggestions.append(f"{pattern.property}: {pattern.original} → {tailwind_class}")

    sizes = {d.property.strip().lower(): d.value.strip().lower() for d in declarations}
    if 'width' in sizes and sizes.get('height') == sizes['width']:
        suggestions.append(f"width and height are both {sizes['width']}: use a single size-* class")
    return suggestions
