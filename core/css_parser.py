"""
CSS Parser Module
Splits raw CSS text into rules and declarations for conversion.

This is deliberately not a full CSS parser: there is no at-rule or nesting
support, and a block with unbalanced braces is simply not matched. Whatever
text the rule pattern cannot match is ignored without an error.
"""

import logging
import re
from typing import List

import tinycss2

from core.models import CSSDeclaration, CSSRule
from core.pseudo_parser import get_base_selector, parse_pseudo_selectors

logger = logging.getLogger(__name__)

COMMENT_RE = re.compile(r'/\*[\s\S]*?\*/')
RULE_RE = re.compile(r'([^{}]+)\{([^{}]*)\}')


class CSSParser:
    def strip_comments(self, css_text: str) -> str:
        return COMMENT_RE.sub('', css_text)

    def parse_declarations(self, body: str) -> List[CSSDeclaration]:
        """
        Parse a block body into declarations, in order.

        Strings and url(...) values may contain ';' or ':' and stay whole.
        The '!important' flag is taken off the value and kept on the
        declaration.
        """
        declarations = []
        nodes = tinycss2.parse_declaration_list(body, skip_comments=True, skip_whitespace=True)
        for node in nodes:
            if node.type == 'error':
                logger.debug(f"Skipping invalid declaration: {node.message}")
                continue
            if node.type != 'declaration':
                continue
            value = tinycss2.serialize(node.value).strip()
            declarations.append(CSSDeclaration(node.name, value, node.important))
        return declarations

    def parse(self, css_text: str) -> List[CSSRule]:
        """Parse CSS text into CSSRule objects in source order."""
        logger.info(f"Parsing CSS, input length: {len(css_text)}")
        text = self.strip_comments(css_text)
        rules = []
        for match in RULE_RE.finditer(text):
            selector = match.group(1).strip()
            if not selector:
                continue
            rules.append(CSSRule(
                selector=selector,
                base_selector=get_base_selector(selector),
                pseudo_info=parse_pseudo_selectors(selector),
                declarations=self.parse_declarations(match.group(2)),
            ))
        logger.info(f"Parsed {len(rules)} rules")
        return rules


def parse(css_text: str) -> List[CSSRule]:
    return CSSParser().parse(css_text)
