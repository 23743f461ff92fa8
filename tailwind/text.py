"""
Text Matcher
Decoration, transform, alignment, indent, overflow, white-space, breaking,
hyphenation and vertical-align. Text color and decoration color are left to
the color matcher.
"""

import re
from typing import List, Optional

from tailwind.color import color_suffix, is_color_value
from tailwind.matcher import Matcher, as_classes
from tailwind.spacing import spacing_class
from tailwind.tokenizer import arbitrary_property, split_whitespace

TEXT_PROPERTIES = [
    'text-decoration', 'text-decoration-line', 'text-decoration-style',
    'text-decoration-thickness', 'text-underline-offset', 'text-transform',
    'text-align', 'text-indent', 'text-overflow', 'white-space', 'word-break',
    'overflow-wrap', 'hyphens', 'vertical-align', 'writing-mode', 'text-orientation',
]

DECORATION_LINE_MAP = {
    'underline': 'underline',
    'overline': 'overline',
    'line-through': 'line-through',
    'none': 'no-underline',
}

DECORATION_STYLE_MAP = {
    'solid': 'decoration-solid',
    'double': 'decoration-double',
    'dotted': 'decoration-dotted',
    'dashed': 'decoration-dashed',
    'wavy': 'decoration-wavy',
}

DECORATION_THICKNESS_MAP = {
    'auto': 'decoration-auto',
    'from-font': 'decoration-from-font',
    '0': 'decoration-0',
    '0px': 'decoration-0',
    '1px': 'decoration-1',
    '2px': 'decoration-2',
    '4px': 'decoration-4',
    '8px': 'decoration-8',
}

UNDERLINE_OFFSET_MAP = {
    'auto': 'underline-offset-auto',
    '0': 'underline-offset-0',
    '0px': 'underline-offset-0',
    '1px': 'underline-offset-1',
    '2px': 'underline-offset-2',
    '4px': 'underline-offset-4',
    '8px': 'underline-offset-8',
}

TEXT_TRANSFORM_MAP = {
    'uppercase': 'uppercase',
    'lowercase': 'lowercase',
    'capitalize': 'capitalize',
    'none': 'normal-case',
}

TEXT_ALIGN_MAP = {
    'left': 'text-left',
    'right': 'text-right',
    'center': 'text-center',
    'justify': 'text-justify',
    'start': 'text-start',
    'end': 'text-end',
}

TEXT_OVERFLOW_MAP = {
    'ellipsis': 'text-ellipsis',
    'clip': 'text-clip',
}

WHITE_SPACE_MAP = {
    'normal': 'whitespace-normal',
    'nowrap': 'whitespace-nowrap',
    'pre': 'whitespace-pre',
    'pre-line': 'whitespace-pre-line',
    'pre-wrap': 'whitespace-pre-wrap',
    'break-spaces': 'whitespace-break-spaces',
}

WORD_BREAK_MAP = {
    'normal': 'break-normal',
    'break-all': 'break-all',
    'keep-all': 'break-keep',
    'break-word': 'break-words',
}

OVERFLOW_WRAP_MAP = {
    'normal': 'wrap-normal',
    'break-word': 'wrap-break-word',
    'anywhere': 'wrap-anywhere',
}

HYPHENS_MAP = {
    'none': 'hyphens-none',
    'manual': 'hyphens-manual',
    'auto': 'hyphens-auto',
}

VERTICAL_ALIGN_MAP = {
    'baseline': 'align-baseline',
    'top': 'align-top',
    'middle': 'align-middle',
    'bottom': 'align-bottom',
    'text-top': 'align-text-top',
    'text-bottom': 'align-text-bottom',
    'sub': 'align-sub',
    'super': 'align-super',
}

LENGTH_RE = re.compile(r'^-?(\d+(\.\d+)?|\.\d+)(px|rem|em|%)?$')

KEYWORD_TABLES = {
    'text-decoration-line': DECORATION_LINE_MAP,
    'text-decoration-style': DECORATION_STYLE_MAP,
    'text-transform': TEXT_TRANSFORM_MAP,
    'text-align': TEXT_ALIGN_MAP,
    'text-overflow': TEXT_OVERFLOW_MAP,
    'white-space': WHITE_SPACE_MAP,
    'word-break': WORD_BREAK_MAP,
    'overflow-wrap': OVERFLOW_WRAP_MAP,
    'hyphens': HYPHENS_MAP,
}


def convert_decoration_thickness(value: str) -> str:
    val = value.strip().lower()
    return DECORATION_THICKNESS_MAP.get(val) or f"decoration-[{value.strip()}]"


def convert_underline_offset(value: str) -> str:
    val = value.strip().lower()
    return UNDERLINE_OFFSET_MAP.get(val) or f"underline-offset-[{value.strip()}]"


def convert_text_decoration(value: str) -> Optional[List[str]]:
    """text-decoration: <line>+ || <style> || <color> || <thickness>"""
    classes = []
    for token in split_whitespace(value):
        lowered = token.lower()
        if lowered in DECORATION_LINE_MAP:
            classes.append(DECORATION_LINE_MAP[lowered])
        elif lowered in DECORATION_STYLE_MAP:
            classes.append(DECORATION_STYLE_MAP[lowered])
        elif lowered in DECORATION_THICKNESS_MAP or LENGTH_RE.match(lowered):
            classes.append(convert_decoration_thickness(token))
        elif is_color_value(token):
            suffix = color_suffix(token)
            if suffix:
                classes.append(f"decoration-{suffix}")
        else:
            return None
    return as_classes(*classes)


def convert_vertical_align(value: str) -> str:
    val = value.strip().lower()
    return VERTICAL_ALIGN_MAP.get(val) or f"align-[{value.strip()}]"


class TextMatcher(Matcher):
    name = 'text'
    properties = frozenset(TEXT_PROPERTIES)

    def convert(self, prop, value, settings):
        val = value.strip().lower()
        if prop in KEYWORD_TABLES:
            cls = KEYWORD_TABLES[prop].get(val)
            return [cls] if cls else None
        if prop == 'text-decoration':
            return convert_text_decoration(value)
        if prop == 'text-decoration-thickness':
            return [convert_decoration_thickness(value)]
        if prop == 'text-underline-offset':
            return [convert_underline_offset(value)]
        if prop == 'text-indent':
            return [spacing_class('indent', value)]
        if prop == 'vertical-align':
            return [convert_vertical_align(value)]
        # writing-mode, text-orientation
        return [arbitrary_property(prop, value)]
