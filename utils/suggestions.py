"""
Suggestion Utilities
Best-effort "did you mean" hints for declarations that could not be converted.
"""

import difflib
from typing import Iterable, List


def find_similar_items(target: str, items: Iterable[str], max_suggestions: int = 3) -> List[str]:
    """
    Rank candidates by similarity to target.

    Substring hits come first, then close matches by SequenceMatcher ratio.
    """
    target = target.strip().lower()
    candidates = list(dict.fromkeys(items))
    if not target or not candidates:
        return []

    substring_hits = [c for c in candidates if target in c.lower() or c.lower() in target]
    close = difflib.get_close_matches(target, candidates, n=max_suggestions, cutoff=0.6)

    ranked = sorted(
        substring_hits,
        key=lambda c: difflib.SequenceMatcher(None, target, c.lower()).ratio(),
        reverse=True,
    )
    return list(dict.fromkeys(ranked + close))[:max_suggestions]


def build_unconvertible_reason(prop: str, value: str, available_values: List[str],
                               available_properties: List[str]) -> str:
    if available_values:
        similar = find_similar_items(value, available_values)
        if similar:
            return f'Value "{value}" not supported. Try: {", ".join(similar)}'
        examples = ', '.join(available_values[:3])
        more = '...' if len(available_values) > 3 else ''
        return f'Value "{value}" not supported. Available values: {examples}{more}'

    similar = find_similar_items(prop, available_properties)
    if similar:
        return f'Property "{prop}" not supported. Try: {", ".join(similar)}'
    return f'Property "{prop}" not supported by this converter'
