"""
Tailwind Converter Module
Turns parsed CSS rules into Tailwind class lists.

Per rule: width/height are converted together first, every other
declaration goes through the static table and then the ordered matcher
chain, and whatever is left is recorded as unconvertible with a hint.
The rule's pseudo variants are applied to the combined class list last.
"""

import logging
from typing import List, Optional, Sequence

from core.css_parser import CSSParser
from core.models import CSSDeclaration, CSSRule, ConversionResult, UnconvertibleDeclaration
from core.pseudo_parser import apply_pseudo_to_classes
from core.settings import DEFAULT_SETTINGS, ConverterSettings
from tailwind.aspect_ratio import AspectRatioMatcher
from tailwind.background import BackgroundMatcher
from tailwind.border import BorderMatcher
from tailwind.border_radius import BorderRadiusMatcher
from tailwind.color import ColorMatcher
from tailwind.constants import GRID_PREFIXES, SPACING_PREFIXES
from tailwind.filters import FilterMatcher
from tailwind.font import FontMatcher
from tailwind.grid import GridMatcher
from tailwind.matcher import Matcher, normalize_property
from tailwind.opacity import OpacityMatcher
from tailwind.shadow import ShadowMatcher
from tailwind.size import JOINT_SIZE_PROPERTIES, SizeMatcher
from tailwind.spacing import SpacingMatcher, SpacingShorthandMatcher
from tailwind.static_map import STATIC_MAP, get_available_values, lookup_static
from tailwind.text import TextMatcher
from tailwind.tokenizer import arbitrary
from tailwind.transform import TransformMatcher
from tailwind.transition import TransitionMatcher
from tailwind.z_index import ZIndexMatcher
from utils.custom_variable_optimizer import optimize_custom_variables
from utils.repeater import get_optimization_suggestions
from utils.suggestions import build_unconvertible_reason

logger = logging.getLogger(__name__)

# Families that accept a generic prefix-[value] when no matcher claims the value
FALLBACK_PREFIXES = {**SPACING_PREFIXES, **GRID_PREFIXES}


def build_matcher_chain() -> List[Matcher]:
    """
    Matchers in dispatch order: shorthands, then property-specific families,
    then color and radius, then the generic spacing and grid catch-alls.
    """
    return [
        SpacingShorthandMatcher(),
        BorderRadiusMatcher(shorthand=True),
        BackgroundMatcher(),
        TransitionMatcher(),
        TextMatcher(),
        FontMatcher(),
        ShadowMatcher(),
        BorderMatcher(),
        OpacityMatcher(),
        ZIndexMatcher(),
        TransformMatcher(),
        FilterMatcher(),
        SizeMatcher(),
        ColorMatcher(),
        BorderRadiusMatcher(),
        AspectRatioMatcher(),
        SpacingMatcher(),
        GridMatcher(),
    ]


MATCHER_CHAIN = build_matcher_chain()


def get_available_properties() -> List[str]:
    """Every property name the converter recognizes, sorted."""
    properties = set(STATIC_MAP) | set(FALLBACK_PREFIXES) | set(JOINT_SIZE_PROPERTIES)
    for matcher in MATCHER_CHAIN:
        properties |= matcher.properties
    return sorted(properties)


def is_arbitrary_class(tailwind_class: str) -> bool:
    return '[' in tailwind_class or '(--' in tailwind_class


class TailwindConverter:
    def __init__(self, settings: Optional[ConverterSettings] = None,
                 matchers: Optional[Sequence[Matcher]] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.matchers = list(matchers) if matchers is not None else MATCHER_CHAIN
        self.size_matcher = SizeMatcher()

    def convert_declaration(self, prop: str, value: str) -> Optional[List[str]]:
        """
        Classes for one declaration: static table, then the first matcher
        whose predicate accepts it, then the generic family fallback.
        """
        static = lookup_static(prop, value)
        if static:
            logger.debug(f"Static hit {prop}: {value} -> {static}")
            return static.split()

        for matcher in self.matchers:
            if matcher.predicate(prop, value):
                classes = matcher.convert(prop, value, self.settings)
                if classes:
                    logger.debug(f"{matcher!r} converted {prop}: {value} -> {classes}")
                    return classes
                logger.debug(f"{matcher!r} accepted {prop}: {value} but produced nothing")
                break

        prefix = FALLBACK_PREFIXES.get(prop)
        if prefix and value:
            logger.debug(f"Arbitrary fallback for {prop}: {value}")
            return [arbitrary(prefix, value)]
        return None

    def _finish_classes(self, prop: str, classes: List[str], important: bool) -> List[str]:
        if not self.settings.enable_arbitrary_values:
            classes = [c for c in classes if not is_arbitrary_class(c)]
        if self.settings.prefer_short_class_names:
            classes = optimize_custom_variables(prop, classes)
        if important:
            classes = [f"{c}!" for c in classes]
        return classes

    def _unconvertible(self, declaration: CSSDeclaration, prop: str, value: str,
                       reason: Optional[str] = None) -> UnconvertibleDeclaration:
        if reason is None:
            reason = build_unconvertible_reason(
                prop, value, get_available_values(prop), get_available_properties())
        return UnconvertibleDeclaration(declaration.property, declaration.value, reason)

    def convert_rule(self, rule: CSSRule) -> ConversionResult:
        classes: List[str] = []
        unconvertible: List[UnconvertibleDeclaration] = []

        def record(declaration, prop, value, produced, important):
            if not produced:
                unconvertible.append(self._unconvertible(declaration, prop, value))
                return
            finished = self._finish_classes(prop, produced, important)
            if not finished:
                unconvertible.append(self._unconvertible(
                    declaration, prop, value, f'Arbitrary values are disabled for "{prop}"'))
                return
            classes.extend(finished)

        size_declarations = []
        other_declarations = []
        for declaration in rule.declarations:
            prop = normalize_property(declaration.property)
            entry = (declaration, prop, declaration.value.strip(), declaration.important)
            if prop in JOINT_SIZE_PROPERTIES:
                size_declarations.append(entry)
            else:
                other_declarations.append(entry)

        if size_declarations:
            normalized = [CSSDeclaration(prop, value, important) for _, prop, value, important in size_declarations]
            converted, _ = self.size_matcher.convert_multiple(normalized, self.settings)
            by_declaration = {id(d): c for d, c in converted}
            for (declaration, prop, value, important), plain in zip(size_declarations, normalized):
                record(declaration, prop, value, by_declaration.get(id(plain)), important)

        for declaration, prop, value, important in other_declarations:
            record(declaration, prop, value, self.convert_declaration(prop, value), important)

        prefixed, warnings = apply_pseudo_to_classes(classes, rule.pseudo_info)
        return ConversionResult(
            selector=rule.selector,
            base_selector=rule.base_selector,
            pseudo_info=rule.pseudo_info,
            tailwind_classes=list(dict.fromkeys(prefixed)),
            warnings=warnings,
            unconvertible=unconvertible,
        )

    def convert(self, rules: Sequence[CSSRule]) -> List[ConversionResult]:
        results = [self.convert_rule(rule) for rule in rules]
        class_count = sum(len(r.tailwind_classes) for r in results)
        unconvertible_count = sum(len(r.unconvertible) for r in results)
        logger.info(f"Converted {len(results)} rules: {class_count} classes, "
                    f"{unconvertible_count} unconvertible declarations")
        return results


def convert(rules: Sequence[CSSRule], settings: Optional[ConverterSettings] = None) -> List[ConversionResult]:
    return TailwindConverter(settings).convert(rules)


def optimization_suggestions(rules: Sequence[CSSRule], settings: Optional[ConverterSettings] = None) -> List[str]:
    settings = settings or DEFAULT_SETTINGS
    suggestions = []
    for rule in rules:
        for suggestion in get_optimization_suggestions(rule.declarations, settings):
            suggestions.append(f"{rule.selector}: {suggestion}")
    return suggestions


def convert_css(css_text: str, settings: Optional[ConverterSettings] = None,
                safe: bool = True) -> List[ConversionResult]:
    """
    Parse and convert in one call. With safe=True an unexpected failure is
    logged and yields an empty list.
    """
    try:
        return convert(CSSParser().parse(css_text), settings)
    except Exception as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        if not safe:
            raise
        return []
