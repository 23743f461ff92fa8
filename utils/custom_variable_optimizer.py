"""
Custom Variable Optimizer
Rewrites bracketed CSS variables to Tailwind's parenthesis shorthand:
p-[var(--gap)] -> p-(--gap), for properties whose utilities accept it.
"""

import re
from typing import Iterable, List

# Properties whose Tailwind utilities accept the (--custom-property) form
CUSTOM_VARIABLE_SUPPORTED_PROPERTIES = frozenset([
    # Animation
    'animation',
    # Aspect ratio
    'aspect-ratio',
    # Backdrop filters
    'backdrop-filter',
    # Background
    'background-color', 'background-image', 'background-position', 'background-size',
    '--tw-gradient-from', '--tw-gradient-via', '--tw-gradient-to',
    # Border
    'border-color', 'border-inline-color', 'border-block-color',
    'border-inline-start-color', 'border-inline-end-color',
    'border-top-color', 'border-right-color', 'border-bottom-color', 'border-left-color',
    'border-width',
    # Border radius
    'border-radius',
    'border-start-start-radius', 'border-start-end-radius',
    'border-end-end-radius', 'border-end-start-radius',
    'border-top-left-radius', 'border-top-right-radius',
    'border-bottom-right-radius', 'border-bottom-left-radius',
    'border-spacing',
    # Shadows
    'box-shadow', '--tw-ring-shadow', '--tw-inset-ring-shadow',
    # Color and content
    'color', 'content', 'cursor', 'fill', 'stroke', 'caret-color', 'accent-color',
    'filter',
    # Flex
    'flex', 'flex-basis', 'flex-grow', 'flex-shrink', 'order',
    # Font
    'font-family', 'font-size', 'font-stretch', 'font-weight', 'line-height',
    'letter-spacing',
    # Gap
    'gap', 'column-gap', 'row-gap',
    # Grid
    'grid-auto-columns', 'grid-auto-rows',
    'grid-column', 'grid-column-start', 'grid-column-end',
    'grid-row', 'grid-row-start', 'grid-row-end',
    'grid-template-columns', 'grid-template-rows',
    # Sizing
    'height', 'width', 'max-height', 'max-width', 'min-height', 'min-width',
    # List
    'list-style-image', 'list-style-type',
    # Margin
    'margin', 'margin-inline', 'margin-block', 'margin-inline-start', 'margin-inline-end',
    'margin-top', 'margin-right', 'margin-bottom', 'margin-left',
    # Mask
    'mask-image', 'mask-position', 'mask-size',
    'object-position',
    'opacity',
    # Outline
    'outline-color', 'outline-offset', 'outline-width',
    # Padding
    'padding', 'padding-inline', 'padding-block', 'padding-inline-start', 'padding-inline-end',
    'padding-top', 'padding-right', 'padding-bottom', 'padding-left',
    # Perspective and transforms
    'perspective', 'perspective-origin',
    'rotate', 'scale', 'translate', 'transform', 'transform-origin',
    # Scroll margin
    'scroll-margin', 'scroll-margin-inline', 'scroll-margin-block',
    'scroll-margin-inline-start', 'scroll-margin-inline-end',
    'scroll-margin-top', 'scroll-margin-right', 'scroll-margin-bottom', 'scroll-margin-left',
    # Scroll padding
    'scroll-padding', 'scroll-padding-inline', 'scroll-padding-block',
    'scroll-padding-inline-start', 'scroll-padding-inline-end',
    'scroll-padding-top', 'scroll-padding-right', 'scroll-padding-bottom', 'scroll-padding-left',
    # Text
    'text-decoration-color', 'text-decoration-thickness', 'text-indent', 'text-shadow',
    'text-underline-offset',
    # Positioning
    'inset', 'inset-inline', 'inset-block', 'inset-inline-start', 'inset-inline-end',
    'top', 'right', 'bottom', 'left',
    # Transition
    'transition-delay', 'transition-duration', 'transition-property', 'transition-timing-function',
    'vertical-align',
    'z-index',
])

# Properties that keep bracket notation even though listed above
CUSTOM_VARIABLE_OPTIMIZATION_EXCEPTIONS: frozenset = frozenset()

BRACKETED_VAR_RE = re.compile(r'\[var\((--[\w-]+)\)\]')


def is_custom_variable_optimizable(prop: str) -> bool:
    normalized = prop.strip().lower()
    if normalized in CUSTOM_VARIABLE_OPTIMIZATION_EXCEPTIONS:
        return False
    return normalized in CUSTOM_VARIABLE_SUPPORTED_PROPERTIES


def has_custom_variable_in_brackets(tailwind_class: str) -> bool:
    return bool(BRACKETED_VAR_RE.search(tailwind_class))


def extract_custom_variable_name(var_declaration: str) -> str:
    """'var(--my-spacing)' -> '--my-spacing'"""
    match = re.search(r'var\((--[\w-]+)\)', var_declaration)
    return match.group(1) if match else ''


def optimize_custom_variable(prop: str, tailwind_class: str) -> str:
    """
    Rewrite [var(--x)] to (--x) when the property allows it.

    The leading '--' is kept, so the output no longer matches the bracket
    pattern and a second pass is a no-op.
    """
    if not is_custom_variable_optimizable(prop):
        return tailwind_class
    if not has_custom_variable_in_brackets(tailwind_class):
        return tailwind_class
    return BRACKETED_VAR_RE.sub(r'(\1)', tailwind_class)


def optimize_custom_variables(prop: str, tailwind_classes: Iterable[str]) -> List[str]:
    return [optimize_custom_variable(prop, cls) for cls in tailwind_classes]
