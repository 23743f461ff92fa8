"""
Static Tailwind Map
Exact property/value pairs with a single fixed utility class. Looked up
before any pattern matcher runs.
"""

import re
from typing import Dict, List, Optional

STATIC_MAP: Dict[str, Dict[str, str]] = {
    'display': {
        'block': 'block',
        'contents': 'contents',
        'inline-block': 'inline-block',
        'inline': 'inline',
        'inline-flex': 'inline-flex',
        'inline-grid': 'inline-grid',
        'inline-table': 'inline-table',
        'flex': 'flex',
        'flow-root': 'flow-root',
        'grid': 'grid',
        'table': 'table',
        'table-caption': 'table-caption',
        'table-column': 'table-column',
        'table-column-group': 'table-column-group',
        'table-footer-group': 'table-footer-group',
        'table-header-group': 'table-header-group',
        'table-row-group': 'table-row-group',
        'table-cell': 'table-cell',
        'table-row': 'table-row',
        'list-item': 'list-item',
        'none': 'hidden',
    },
    'position': {
        'static': 'static',
        'fixed': 'fixed',
        'absolute': 'absolute',
        'relative': 'relative',
        'sticky': 'sticky',
    },
    'visibility': {
        'visible': 'visible',
        'hidden': 'invisible',
        'collapse': 'collapse',
    },
    'overflow': {
        'auto': 'overflow-auto',
        'hidden': 'overflow-hidden',
        'clip': 'overflow-clip',
        'visible': 'overflow-visible',
        'scroll': 'overflow-scroll',
    },
    'overflow-x': {
        'auto': 'overflow-x-auto',
        'hidden': 'overflow-x-hidden',
        'clip': 'overflow-x-clip',
        'visible': 'overflow-x-visible',
        'scroll': 'overflow-x-scroll',
    },
    'overflow-y': {
        'auto': 'overflow-y-auto',
        'hidden': 'overflow-y-hidden',
        'clip': 'overflow-y-clip',
        'visible': 'overflow-y-visible',
        'scroll': 'overflow-y-scroll',
    },
    'justify-content': {
        'flex-start': 'justify-start',
        'start': 'justify-start',
        'flex-end': 'justify-end',
        'end': 'justify-end',
        'center': 'justify-center',
        'space-between': 'justify-between',
        'space-around': 'justify-around',
        'space-evenly': 'justify-evenly',
        'stretch': 'justify-stretch',
    },
    'align-items': {
        'flex-start': 'items-start',
        'start': 'items-start',
        'flex-end': 'items-end',
        'end': 'items-end',
        'center': 'items-center',
        'baseline': 'items-baseline',
        'stretch': 'items-stretch',
    },
    'align-self': {
        'auto': 'self-auto',
        'flex-start': 'self-start',
        'flex-end': 'self-end',
        'center': 'self-center',
        'stretch': 'self-stretch',
        'baseline': 'self-baseline',
    },
    'align-content': {
        'flex-start': 'content-start',
        'flex-end': 'content-end',
        'center': 'content-center',
        'space-between': 'content-between',
        'space-around': 'content-around',
        'space-evenly': 'content-evenly',
        'stretch': 'content-stretch',
    },
    'flex-direction': {
        'row': 'flex-row',
        'row-reverse': 'flex-row-reverse',
        'column': 'flex-col',
        'column-reverse': 'flex-col-reverse',
    },
    'flex-wrap': {
        'nowrap': 'flex-nowrap',
        'wrap': 'flex-wrap',
        'wrap-reverse': 'flex-wrap-reverse',
    },
    'flex': {
        '1': 'flex-1',
        '1 1 0%': 'flex-1',
        'auto': 'flex-auto',
        '1 1 auto': 'flex-auto',
        'initial': 'flex-initial',
        '0 1 auto': 'flex-initial',
        'none': 'flex-none',
    },
    'flex-grow': {
        '0': 'grow-0',
        '1': 'grow',
    },
    'flex-shrink': {
        '0': 'shrink-0',
        '1': 'shrink',
    },
    'cursor': {
        'auto': 'cursor-auto',
        'default': 'cursor-default',
        'pointer': 'cursor-pointer',
        'wait': 'cursor-wait',
        'text': 'cursor-text',
        'move': 'cursor-move',
        'help': 'cursor-help',
        'not-allowed': 'cursor-not-allowed',
        'none': 'cursor-none',
        'grab': 'cursor-grab',
        'grabbing': 'cursor-grabbing',
    },
    'pointer-events': {
        'none': 'pointer-events-none',
        'auto': 'pointer-events-auto',
    },
    'user-select': {
        'none': 'select-none',
        'text': 'select-text',
        'all': 'select-all',
        'auto': 'select-auto',
    },
    'box-sizing': {
        'border-box': 'box-border',
        'content-box': 'box-content',
    },
    'color': {
        '#000': 'text-black',
        '#000000': 'text-black',
        'black': 'text-black',
        '#fff': 'text-white',
        '#ffffff': 'text-white',
        'white': 'text-white',
        'transparent': 'text-transparent',
    },
    'background-color': {
        '#000': 'bg-black',
        '#000000': 'bg-black',
        'black': 'bg-black',
        '#fff': 'bg-white',
        '#ffffff': 'bg-white',
        'white': 'bg-white',
        'transparent': 'bg-transparent',
    },
    'font-size': {
        '12px': 'text-xs',
        '14px': 'text-sm',
        '16px': 'text-base',
        '18px': 'text-lg',
        '20px': 'text-xl',
        '24px': 'text-2xl',
        '30px': 'text-3xl',
        '36px': 'text-4xl',
        '48px': 'text-5xl',
        '60px': 'text-6xl',
    },
    'font-weight': {
        '100': 'font-thin',
        '200': 'font-extralight',
        '300': 'font-light',
        '400': 'font-normal',
        'normal': 'font-normal',
        '500': 'font-medium',
        '600': 'font-semibold',
        '700': 'font-bold',
        'bold': 'font-bold',
        '800': 'font-extrabold',
        '900': 'font-black',
    },
    'text-align': {
        'left': 'text-left',
        'center': 'text-center',
        'right': 'text-right',
        'justify': 'text-justify',
        'start': 'text-start',
        'end': 'text-end',
    },
    'text-decoration': {
        'underline': 'underline',
        'overline': 'overline',
        'line-through': 'line-through',
        'none': 'no-underline',
    },
    'word-break': {
        'normal': 'break-normal',
        'break-all': 'break-all',
        'keep-all': 'break-keep',
    },
    'object-fit': {
        'contain': 'object-contain',
        'cover': 'object-cover',
        'fill': 'object-fill',
        'none': 'object-none',
        'scale-down': 'object-scale-down',
    },
}

UNIT_RE = re.compile(r"(?<=\d)(px|rem|em|%|vh|vw|pt|pc|in|cm|mm|ex|ch|vmin|vmax)(?![a-z])")


def normalize_value(value: str) -> List[str]:
    """
    Lookup variants of a value, most specific first: as written, without
    units, spaces as commas, spaces as hyphens, and hex without '#'.
    """
    normalized = value.strip().lower()
    variations = [normalized]
    without_units = UNIT_RE.sub("", normalized)
    if without_units != normalized and without_units:
        variations.append(without_units)
    if ' ' in normalized:
        variations.append(re.sub(r'\s+', ',', normalized))
        variations.append(re.sub(r'\s+', '-', normalized))
    if normalized.startswith('#'):
        variations.append(normalized[1:])
    return list(dict.fromkeys(variations))


def lookup_static(prop: str, value: str) -> Optional[str]:
    table = STATIC_MAP.get(prop)
    if not table:
        return None
    for variation in normalize_value(value):
        if variation in table:
            return table[variation]
    return None


def get_available_values(prop: str) -> List[str]:
    return list(STATIC_MAP.get(prop, {}))
