"""
Pseudo Validator Module
Checks whether pseudo-class and pseudo-element variants can be stacked in
Tailwind and orders them by Tailwind's variant-stacking convention.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

# Pseudo-elements that accept state variants (hover:before:...)
STATEFUL_PSEUDO_ELEMENTS = {'before', 'after', 'placeholder', 'file'}

NON_STATEFUL_PSEUDO_ELEMENTS = {'first-line', 'first-letter', 'selection', 'marker', 'backdrop'}

VALID_PSEUDO_ELEMENT_STATES = {'hover', 'focus', 'active', 'disabled', 'group-hover', 'group-focus'}

PSEUDO_ORDER: Dict[str, int] = {
    # Responsive
    'sm': 1, 'md': 2, 'lg': 3, 'xl': 4, '2xl': 5,
    # Color scheme
    'dark': 10, 'light': 11,
    # Motion preference
    'motion-safe': 15, 'motion-reduce': 16,
    # Structural
    'first': 20, 'last': 21, 'odd': 22, 'even': 23,
    # Interaction
    'hover': 30, 'focus': 31, 'active': 32, 'visited': 33,
    # Form state
    'disabled': 40, 'enabled': 41, 'checked': 42,
    # Pseudo-elements always last
    'before': 100, 'after': 101, 'placeholder': 102, 'file': 103, 'marker': 104, 'selection': 105,
    'first-line': 106, 'first-letter': 107, 'backdrop': 108,
}

DEFAULT_PSEUDO_ORDER = 50
ARBITRARY_ELEMENT_ORDER = 110


@dataclass
class PseudoValidation:
    is_valid: bool
    reason: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {'isValid': self.is_valid}
        if self.reason:
            data['reason'] = self.reason
        if self.suggestion:
            data['suggestion'] = self.suggestion
        return data


def _is_complex(pseudo_class: str) -> bool:
    return pseudo_class.startswith(('has-[', 'not-[')) or '[&:' in pseudo_class


def validate_pseudo_combination(classes: Sequence[str], elements: Sequence[str]) -> PseudoValidation:
    """Apply the stacking rules in order; the first failure wins."""
    if elements and classes:
        for element in elements:
            if element in NON_STATEFUL_PSEUDO_ELEMENTS:
                return PseudoValidation(
                    False,
                    f"Pseudo-element ::{element} cannot have state variants applied",
                    f"Move state variants to the base element or remove ::{element}",
                )
            if element not in STATEFUL_PSEUDO_ELEMENTS and not element.startswith('[&::'):
                return PseudoValidation(
                    False,
                    f"Pseudo-element ::{element} cannot be combined with state variants",
                    "Use only ::before, ::after, ::placeholder, or ::file with state variants",
                )
        for pseudo_class in classes:
            if pseudo_class.startswith('[&:'):
                continue
            if pseudo_class not in VALID_PSEUDO_ELEMENT_STATES:
                return PseudoValidation(
                    False,
                    f"State variant :{pseudo_class} cannot be applied to pseudo-elements",
                    "Use only hover, focus, active, or disabled states with pseudo-elements",
                )

    if len(elements) > 1:
        return PseudoValidation(
            False,
            'Multiple pseudo-elements cannot be combined',
            'Use only one pseudo-element per selector',
        )

    has_not = any(c.startswith('not-[') for c in classes)
    complex_count = sum(1 for c in classes if _is_complex(c))
    if has_not and complex_count >= 2 and len(classes) > 2:
        return PseudoValidation(
            False,
            'Complex :not() combinations with multiple pseudo-classes may not work as expected',
            'Simplify the selector or use separate rules',
        )

    return PseudoValidation(True)


def suggest_pseudo_fix(classes: Sequence[str], elements: Sequence[str]) -> List[str]:
    validation = validate_pseudo_combination(classes, elements)
    if validation.is_valid:
        return []
    suggestions = [validation.suggestion] if validation.suggestion else []
    if elements and classes:
        usable = [c for c in classes if c in VALID_PSEUDO_ELEMENT_STATES or c.startswith('[&:')]
        if len(usable) < len(classes):
            suggestions.append(
                f"Try using only these states with pseudo-elements: {', '.join(usable)}")
    return suggestions


def get_pseudo_order(pseudo: str) -> int:
    if pseudo in PSEUDO_ORDER:
        return PSEUDO_ORDER[pseudo]
    if pseudo.startswith('[&::'):
        return ARBITRARY_ELEMENT_ORDER
    return DEFAULT_PSEUDO_ORDER


def sort_pseudo_tokens(tokens: Sequence[str]) -> List[str]:
    # sorted() is stable, so equal priorities keep source order
    return sorted(tokens, key=get_pseudo_order)
