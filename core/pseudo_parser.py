"""
Pseudo Selector Parser Module
Extracts pseudo-classes and pseudo-elements from a selector and turns them
into Tailwind variant prefixes.
"""

import logging
import re
from typing import List, Tuple

from core.models import PseudoInfo
from core.pseudo_validator import sort_pseudo_tokens, validate_pseudo_combination

logger = logging.getLogger(__name__)

PSEUDO_CLASS_MAP = {
    # Interaction
    'hover': 'hover',
    'focus': 'focus',
    'focus-within': 'focus-within',
    'focus-visible': 'focus-visible',
    'active': 'active',
    'visited': 'visited',
    'target': 'target',
    # Form state
    'disabled': 'disabled',
    'enabled': 'enabled',
    'checked': 'checked',
    'indeterminate': 'indeterminate',
    'default': 'default',
    'required': 'required',
    'valid': 'valid',
    'invalid': 'invalid',
    'in-range': 'in-range',
    'out-of-range': 'out-of-range',
    'placeholder-shown': 'placeholder-shown',
    'autofill': 'autofill',
    'read-only': 'read-only',
    # Structural
    'first-child': 'first',
    'last-child': 'last',
    'only-child': 'only',
    'first-of-type': 'first-of-type',
    'last-of-type': 'last-of-type',
    'only-of-type': 'only-of-type',
    'empty': 'empty',
    'open': 'open',
    # Media-like
    'portrait': 'portrait',
    'landscape': 'landscape',
    'motion-safe': 'motion-safe',
    'motion-reduce': 'motion-reduce',
    'dark': 'dark',
    'light': 'light',
    'contrast-more': 'contrast-more',
    'contrast-less': 'contrast-less',
    'forced-colors': 'forced-colors',
    'print': 'print',
    'rtl': 'rtl',
    'ltr': 'ltr',
}

PSEUDO_ELEMENT_MAP = {
    'before': 'before',
    'after': 'after',
    'first-line': 'first-line',
    'first-letter': 'first-letter',
    'selection': 'selection',
    'file-selector-button': 'file',
    'placeholder': 'placeholder',
    'marker': 'marker',
    'backdrop': 'backdrop',
}

# CSS2 single-colon spellings that still denote pseudo-elements
LEGACY_PSEUDO_ELEMENTS = {'before', 'after', 'first-line', 'first-letter'}

NTH_PSEUDO_CLASSES = {'nth-child', 'nth-of-type'}

PSEUDO_NAME_RE = re.compile(r'[a-zA-Z-]+')


def _escape(text: str) -> str:
    return '_'.join(text.split())


def _closing_paren(selector: str, start: int):
    """Index of the ')' that balances the '(' at start, or None."""
    depth = 0
    for index in range(start, len(selector)):
        if selector[index] == '(':
            depth += 1
        elif selector[index] == ')':
            depth -= 1
            if depth == 0:
                return index
    return None


def _scan_pseudos(selector: str):
    """
    Yield (start, end, is_element, name, args) for each top-level pseudo in
    the selector. Functional arguments are matched with balanced
    parentheses, so ':not(:nth-child(2))' is one occurrence. Attribute
    selectors are skipped.
    """
    index = 0
    length = len(selector)
    while index < length:
        char = selector[index]
        if char == '[':
            close = selector.find(']', index)
            index = length if close == -1 else close + 1
            continue
        if char != ':':
            index += 1
            continue
        start = index
        is_element = selector.startswith('::', index)
        index += 2 if is_element else 1
        name = PSEUDO_NAME_RE.match(selector, index)
        if not name:
            continue
        index = name.end()
        args = None
        if index < length and selector[index] == '(':
            close = _closing_paren(selector, index)
            if close is not None:
                args = selector[index + 1:close]
                index = close + 1
        yield start, index, is_element, name.group(0), args


def _element_variant(name: str, args) -> str:
    lowered = name.lower()
    if args is None and lowered in PSEUDO_ELEMENT_MAP:
        return PSEUDO_ELEMENT_MAP[lowered]
    suffix = f"({_escape(args)})" if args is not None else ''
    return f"[&::{lowered}{suffix}]"


def _class_variant(name: str, args) -> str:
    lowered = name.lower()
    if lowered in NTH_PSEUDO_CLASSES and args is not None:
        expr = args.strip().lower()
        if expr in ('odd', 'even'):
            return expr
        return f"[&:{lowered}({_escape(expr)})]"
    if lowered == 'has' and args is not None:
        return f"has-[{_escape(args.strip())}]"
    if lowered == 'not' and args is not None:
        inner = args.strip()
        nested = parse_pseudo_selectors(inner)
        # Arbitrary [&:...] variants cannot nest inside not-[...]
        if nested.classes and not any('[' in c for c in nested.classes):
            return f"not-[{':'.join(nested.classes)}]"
        return f"not-[{_escape(inner)}]"
    if args is None and lowered in PSEUDO_CLASS_MAP:
        return PSEUDO_CLASS_MAP[lowered]
    suffix = f"({_escape(args)})" if args is not None else ''
    return f"[&:{lowered}{suffix}]"


def parse_pseudo_selectors(selector: str) -> PseudoInfo:
    """
    Collect pseudo variants from a selector, in source order.

    Only top-level occurrences count: the arguments of :not() or :has() are
    handed to the matching variant whole.
    """
    elements: List[str] = []
    classes: List[str] = []

    for _, _, is_element, name, args in _scan_pseudos(selector):
        if is_element:
            elements.append(_element_variant(name, args))
        elif args is None and name.lower() in LEGACY_PSEUDO_ELEMENTS:
            elements.append(PSEUDO_ELEMENT_MAP[name.lower()])
        else:
            classes.append(_class_variant(name, args))

    return PseudoInfo(classes=tuple(classes), elements=tuple(elements))


def get_base_selector(selector: str) -> str:
    """Strip every pseudo occurrence, leaving the tag/class/id chain."""
    parts = []
    last = 0
    for start, end, _, _, _ in _scan_pseudos(selector):
        parts.append(selector[last:start])
        last = end
    parts.append(selector[last:])
    return ''.join(parts).strip()


def apply_pseudo_to_classes(classes: List[str], pseudo_info: PseudoInfo) -> Tuple[List[str], List[str]]:
    """
    Prefix every class with the sorted variant chain of the rule.

    Returns (classes, warnings). An invalid combination leaves the classes
    unprefixed and reports why.
    """
    if pseudo_info.is_empty():
        return list(classes), []

    validation = validate_pseudo_combination(pseudo_info.classes, pseudo_info.elements)
    if not validation.is_valid:
        logger.warning(f"Invalid pseudo combination: {validation.reason}")
        return list(classes), [
            f"Invalid pseudo combination: {validation.reason}",
            f"Suggestion: {validation.suggestion}",
        ]

    prefix = ':'.join(sort_pseudo_tokens(list(pseudo_info.elements) + list(pseudo_info.classes)))
    return [f"{prefix}:{cls}" for cls in classes], []


def format_pseudo_for_display(pseudo_info: PseudoInfo) -> str:
    return ':'.join(list(pseudo_info.elements) + list(pseudo_info.classes))
