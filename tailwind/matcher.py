"""
Matcher Base Module
Common interface for the per-property-family converters.
"""

from typing import FrozenSet, List, Optional


class Matcher:
    """
    One property family in the conversion chain.

    predicate() decides whether this matcher owns a declaration; convert()
    returns the Tailwind classes for it, or None when the value has no
    equivalent. The orchestrator walks matchers in order and stops at the
    first whose predicate accepts the declaration.
    """

    name = 'matcher'
    properties: FrozenSet[str] = frozenset()

    def predicate(self, prop: str, value: str) -> bool:
        return prop in self.properties

    def convert(self, prop: str, value: str, settings) -> Optional[List[str]]:
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name}>"


def normalize_property(prop: str) -> str:
    return prop.strip().lower()


def as_classes(*classes: Optional[str]) -> Optional[List[str]]:
    """Collect non-empty classes; None when nothing survived."""
    result = [c for c in classes if c]
    return result or None
