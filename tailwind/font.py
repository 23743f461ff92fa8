"""
Font Matcher
The font shorthand plus family, size, weight, style, variant, stretch,
line-height, letter-spacing and word-spacing.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from tailwind.matcher import Matcher, as_classes
from tailwind.tokenizer import arbitrary_property, split_tokens, underscore_spaces

FONT_PROPERTIES = [
    'font', 'font-family', 'font-size', 'font-weight', 'font-style', 'font-variant',
    'font-stretch', 'line-height', 'letter-spacing', 'word-spacing',
]

FONT_FAMILY_MAP = {
    'serif': 'font-serif',
    'sans-serif': 'font-sans',
    'monospace': 'font-mono',
    'system-ui': 'font-sans',
    'ui-sans-serif': 'font-sans',
    'ui-serif': 'font-serif',
    'ui-monospace': 'font-mono',
    'arial': 'font-sans',
    'helvetica': 'font-sans',
    'helvetica neue': 'font-sans',
    'verdana': 'font-sans',
    'tahoma': 'font-sans',
    'trebuchet ms': 'font-sans',
    'comic sans ms': 'font-sans',
    'impact': 'font-sans',
    'avant garde': 'font-sans',
    'times': 'font-serif',
    'times new roman': 'font-serif',
    'georgia': 'font-serif',
    'palatino': 'font-serif',
    'garamond': 'font-serif',
    'bookman': 'font-serif',
    'courier': 'font-mono',
    'courier new': 'font-mono',
    'lucida console': 'font-mono',
}

FONT_SIZE_MAP = {
    'xx-small': 'text-xs',
    'x-small': 'text-xs',
    'small': 'text-sm',
    'medium': 'text-base',
    'large': 'text-lg',
    'x-large': 'text-xl',
    'xx-large': 'text-2xl',
    'xxx-large': 'text-3xl',
    '10px': 'text-xs',
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
    '72px': 'text-7xl',
    '96px': 'text-8xl',
    '128px': 'text-9xl',
    '0.75rem': 'text-xs',
    '0.875rem': 'text-sm',
    '1rem': 'text-base',
    '1.125rem': 'text-lg',
    '1.25rem': 'text-xl',
    '1.5rem': 'text-2xl',
    '1.875rem': 'text-3xl',
    '2.25rem': 'text-4xl',
    '3rem': 'text-5xl',
    '3.75rem': 'text-6xl',
    '4.5rem': 'text-7xl',
    '6rem': 'text-8xl',
    '8rem': 'text-9xl',
}

FONT_WEIGHT_MAP = {
    'normal': 'font-normal',
    'bold': 'font-bold',
    'bolder': 'font-bold',
    'lighter': 'font-light',
    '100': 'font-thin',
    '200': 'font-extralight',
    '300': 'font-light',
    '400': 'font-normal',
    '500': 'font-medium',
    '600': 'font-semibold',
    '700': 'font-bold',
    '800': 'font-extrabold',
    '900': 'font-black',
}

FONT_STYLE_MAP = {
    'normal': 'not-italic',
    'italic': 'italic',
    'oblique': 'italic',
}

FONT_VARIANT_MAP = {
    'normal': 'normal-nums',
}

LINE_HEIGHT_MAP = {
    'normal': 'leading-normal',
    '1': 'leading-none',
    '1.25': 'leading-tight',
    '1.375': 'leading-snug',
    '1.5': 'leading-normal',
    '1.625': 'leading-relaxed',
    '2': 'leading-loose',
    '12px': 'leading-3',
    '16px': 'leading-4',
    '20px': 'leading-5',
    '24px': 'leading-6',
    '28px': 'leading-7',
    '32px': 'leading-8',
    '36px': 'leading-9',
    '40px': 'leading-10',
    '0.75rem': 'leading-3',
    '1rem': 'leading-4',
    '1.25rem': 'leading-5',
    '1.5rem': 'leading-6',
    '1.75rem': 'leading-7',
    '2rem': 'leading-8',
    '2.25rem': 'leading-9',
    '2.5rem': 'leading-10',
}

LETTER_SPACING_MAP = {
    'normal': 'tracking-normal',
    '0': 'tracking-normal',
    '0px': 'tracking-normal',
    '-0.05em': 'tracking-tighter',
    '-0.025em': 'tracking-tight',
    '0.025em': 'tracking-wide',
    '0.05em': 'tracking-wider',
    '0.1em': 'tracking-widest',
    '-0.8px': 'tracking-tighter',
    '-0.4px': 'tracking-tight',
    '0.4px': 'tracking-wide',
    '0.8px': 'tracking-wider',
    '1.6px': 'tracking-widest',
}

STYLE_KEYWORDS = {'normal', 'italic', 'oblique'}
VARIANT_KEYWORDS = {'small-caps', 'all-small-caps', 'petite-caps', 'all-petite-caps', 'unicase', 'titling-caps'}
WEIGHT_KEYWORDS = {'bold', 'bolder', 'lighter', '100', '200', '300', '400', '500', '600', '700', '800', '900'}
STRETCH_KEYWORDS = {'ultra-condensed', 'extra-condensed', 'condensed', 'semi-condensed',
                    'semi-expanded', 'expanded', 'extra-expanded', 'ultra-expanded'}
SIZE_KEYWORDS = {'xx-small', 'x-small', 'small', 'medium', 'large', 'x-large', 'xx-large',
                 'xxx-large', 'smaller', 'larger'}
SIZE_RE = re.compile(r'^(\d+(\.\d+)?|\.\d+)(px|em|rem|%|vh|vw|cm|mm|in|pt|pc|ex|ch|vmin|vmax)$')
# System font keywords that make the shorthand a single named font
SYSTEM_FONTS = {'caption', 'icon', 'menu', 'message-box', 'small-caption', 'status-bar'}


@dataclass
class FontComponents:
    family: Optional[str] = None
    size: Optional[str] = None
    weight: Optional[str] = None
    style: Optional[str] = None
    variant: Optional[str] = None
    stretch: Optional[str] = None
    line_height: Optional[str] = None


def is_font_size(token: str) -> bool:
    return token.lower() in SIZE_KEYWORDS or bool(SIZE_RE.match(token.lower()))


def parse_font_shorthand(value: str) -> FontComponents:
    """
    font: [style] [variant] [weight] [stretch] size[/line-height] family

    The size token is mandatory and splits the modifiers before it from the
    family list after it.
    """
    tokens = split_tokens(value)
    components = FontComponents()
    size_index = next(
        (i for i, token in enumerate(tokens) if is_font_size(token) or ('/' in token and '(' not in token)),
        -1,
    )
    if size_index == -1:
        return components

    size_token = tokens[size_index]
    if '/' in size_token:
        size, _, line_height = size_token.partition('/')
        components.size = size.strip() or None
        components.line_height = line_height.strip() or None
        if not components.line_height and size_index + 1 < len(tokens):
            # 'font: 16px / 1.5 serif' splits the slash into its own token
            components.line_height = tokens[size_index + 1]
            size_index += 1
    else:
        components.size = size_token
        if size_index + 2 < len(tokens) and tokens[size_index + 1] == '/':
            components.line_height = tokens[size_index + 2]
            size_index += 2

    family = tokens[size_index + 1:]
    if family:
        components.family = ', '.join(family)

    for token in tokens[:size_index]:
        lowered = token.lower()
        if lowered in STYLE_KEYWORDS and components.style is None:
            components.style = lowered
        elif lowered in VARIANT_KEYWORDS:
            components.variant = lowered
        elif lowered in WEIGHT_KEYWORDS:
            components.weight = lowered
        elif lowered in STRETCH_KEYWORDS:
            components.stretch = lowered
    return components


def convert_font_family(family: str) -> str:
    """First family with a known stack wins; otherwise an arbitrary value."""
    names = [name.strip().strip('"\'').strip() for name in family.split(',')]
    names = [name for name in names if name]
    for name in names:
        mapped = FONT_FAMILY_MAP.get(name.lower())
        if mapped:
            return mapped
    return f"font-[{underscore_spaces(','.join(names))}]"


def convert_font_size(size: str) -> str:
    return FONT_SIZE_MAP.get(size.strip().lower()) or f"text-[{size.strip()}]"


def convert_font_weight(weight: str) -> str:
    return FONT_WEIGHT_MAP.get(weight.strip().lower()) or f"font-[{weight.strip()}]"


def convert_font_style(style: str) -> Optional[str]:
    return FONT_STYLE_MAP.get(style.strip().lower())


def convert_font_variant(variant: str) -> str:
    return FONT_VARIANT_MAP.get(variant.strip().lower()) or arbitrary_property('font-variant', variant)


def convert_font_stretch(stretch: str) -> str:
    return arbitrary_property('font-stretch', stretch)


def convert_line_height(line_height: str) -> str:
    return LINE_HEIGHT_MAP.get(line_height.strip().lower()) or f"leading-[{line_height.strip()}]"


def convert_letter_spacing(spacing: str) -> str:
    return LETTER_SPACING_MAP.get(spacing.strip().lower()) or f"tracking-[{spacing.strip()}]"


def convert_word_spacing(spacing: str) -> str:
    return arbitrary_property('word-spacing', spacing)


class FontMatcher(Matcher):
    name = 'font'
    properties = frozenset(FONT_PROPERTIES)

    def convert(self, prop, value, settings) -> Optional[List[str]]:
        if prop == 'font':
            if value.strip().lower() in SYSTEM_FONTS:
                return None
            parts = parse_font_shorthand(value)
            if not parts.size:
                return None
            return as_classes(
                convert_font_family(parts.family) if parts.family else None,
                convert_font_size(parts.size),
                convert_font_weight(parts.weight) if parts.weight else None,
                convert_font_style(parts.style) if parts.style else None,
                convert_font_variant(parts.variant) if parts.variant else None,
                convert_font_stretch(parts.stretch) if parts.stretch else None,
                convert_line_height(parts.line_height) if parts.line_height else None,
            )
        converters = {
            'font-family': convert_font_family,
            'font-size': convert_font_size,
            'font-weight': convert_font_weight,
            'font-style': convert_font_style,
            'font-variant': convert_font_variant,
            'font-stretch': convert_font_stretch,
            'line-height': convert_line_height,
            'letter-spacing': convert_letter_spacing,
            'word-spacing': convert_word_spacing,
        }
        return as_classes(converters[prop](value))
