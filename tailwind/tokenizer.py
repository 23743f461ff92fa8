"""
Value Tokenizer Module
Splits CSS property values into top-level components.

Functions such as rgb(...) or cubic-bezier(...) and quoted strings are kept
intact, so '1px solid rgb(0, 0, 0)' splits into three pieces. The state
tracking (in-quote, in-parens) is delegated to tinycss2's component value
parser: function blocks and string tokens arrive as single nodes.
"""

from typing import List

import tinycss2


def _components(value: str):
    return tinycss2.parse_component_value_list(value, skip_comments=True)


def _flush(group: list, out: List[str]):
    text = tinycss2.serialize(group).strip()
    if text:
        out.append(text)
    group.clear()


def split_whitespace(value: str) -> List[str]:
    """Split on top-level whitespace. Commas stay attached to their neighbours."""
    parts: List[str] = []
    group: list = []
    for token in _components(value):
        if token.type == 'whitespace':
            _flush(group, parts)
        else:
            group.append(token)
    _flush(group, parts)
    return parts


def split_commas(value: str) -> List[str]:
    """Split on top-level commas, e.g. separate layers of a box-shadow."""
    parts: List[str] = []
    group: list = []
    for token in _components(value):
        if token.type == 'literal' and token.value == ',':
            _flush(group, parts)
        else:
            group.append(token)
    _flush(group, parts)
    return parts


def split_tokens(value: str) -> List[str]:
    """Split on top-level whitespace and commas alike (font shorthand)."""
    parts: List[str] = []
    group: list = []
    for token in _components(value):
        if token.type == 'whitespace' or (token.type == 'literal' and token.value == ','):
            _flush(group, parts)
        else:
            group.append(token)
    _flush(group, parts)
    return parts


def underscore_spaces(value: str) -> str:
    """Arbitrary-value brackets cannot hold literal spaces."""
    return '_'.join(value.split())


def arbitrary(prefix: str, value: str) -> str:
    return f"{prefix}-[{underscore_spaces(value.strip())}]"


def arbitrary_property(prop: str, value: str) -> str:
    return f"[{prop}:{underscore_spaces(value.strip())}]"
