import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.css_parser import CSSParser, parse
from core.settings import ConverterSettings
from core.tailwind_converter import (TailwindConverter, build_matcher_chain, convert, convert_css,
                                     get_available_properties, is_arbitrary_class, optimization_suggestions)

def convert_one(css, settings=None):
    results = convert(parse(css), settings)
    assert len(results) == 1
    return results[0]

def test_display_flex():
    result = convert_one(".a { display: flex; }")
    assert result.tailwind_classes == ['flex']
    assert result.unconvertible == []

def test_equal_width_and_height_collapse_to_size():
    result = convert_one(".a { width: 100%; height: 100%; }")
    assert result.tailwind_classes == ['size-full']

def test_size_optimization_disabled():
    result = convert_one(".a { width: 100%; height: 100%; }", ConverterSettings(enable_size_optimization=False))
    assert result.tailwind_classes == ['w-full', 'h-full']

def test_margin_centering():
    result = convert_one(".a { margin: 0 auto; }")
    assert result.tailwind_classes == ['mx-auto', 'my-0']

def test_hover_color():
    result = convert_one(".a:hover { color: red; }")
    assert result.base_selector == '.a'
    assert result.pseudo_info.classes == ('hover',)
    assert result.tailwind_classes == ['hover:text-red-500']

def test_repeated_grid_tracks():
    result = convert_one(".a { grid-template-columns: 200px 200px 200px; }",
                         ConverterSettings(repeater_threshold=3))
    assert result.tailwind_classes == ['grid-cols-[repeat(3,200px)]']

@pytest.mark.parametrize('value,expected', [('0.5', 'opacity-50'), ('.73', 'opacity-75')])
def test_opacity(value, expected):
    assert convert_one(f".a {{ opacity: {value}; }}").tailwind_classes == [expected]

def test_unknown_property_is_unconvertible():
    result = convert_one(".a { unknown-prop: weird-value; }")
    assert result.tailwind_classes == []
    assert len(result.unconvertible) == 1
    assert result.unconvertible[0].property == 'unknown-prop'
    assert result.unconvertible[0].value == 'weird-value'
    assert result.unconvertible[0].reason.startswith('Property "unknown-prop" not supported')

def test_unknown_value_suggests_known_values():
    result = convert_one(".a { display: flexx; }")
    assert result.unconvertible[0].reason == 'Value "flexx" not supported. Try: flex'

def test_every_declaration_is_accounted_for():
    css = ".card { display: flex; padding: 16px; color: red; foo: bar; }"
    rule = parse(css)[0]
    result = TailwindConverter().convert_rule(rule)
    assert result.tailwind_classes == ['flex', 'p-4', 'text-red-500']
    assert len(result.tailwind_classes) + len(result.unconvertible) == len(rule.declarations)

def test_conversion_is_pure():
    rules = parse(".a:hover { margin: 8px 16px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); } .b { top: 0 }")
    converter = TailwindConverter()
    first = [r.to_dict() for r in converter.convert(rules)]
    second = [r.to_dict() for r in converter.convert(rules)]
    assert first == second

def test_results_follow_rule_order():
    results = convert(parse(".b { display: block } .a { display: grid } .b { display: none }"))
    assert [r.selector for r in results] == ['.b', '.a', '.b']
    assert [r.class_string for r in results] == ['block', 'grid', 'hidden']

def test_pseudo_prefix_applies_to_whole_rule():
    result = convert_one(".btn:hover { background-color: blue; transform: scale(1.05); }")
    assert result.tailwind_classes == ['hover:bg-blue-500', 'hover:scale-105']

def test_invalid_pseudo_combination_keeps_plain_classes():
    result = convert_one(".a::marker:hover { color: red; }")
    assert result.tailwind_classes == ['text-red-500']
    assert result.warnings[0].startswith('Invalid pseudo combination')

def test_classes_are_deduplicated():
    result = convert_one(".a { display: flex; display: flex; color: red; }")
    assert result.tailwind_classes == ['flex', 'text-red-500']

def test_custom_variable_shorthand():
    result = convert_one(".a { padding: var(--space-4); fill: var(--icon); }")
    assert result.tailwind_classes == ['p-(--space-4)', 'fill-(--icon)']

def test_short_class_names_can_be_disabled():
    settings = ConverterSettings(prefer_short_class_names=False)
    result = convert_one(".a { padding: var(--space-4); }", settings)
    assert result.tailwind_classes == ['p-[var(--space-4)]']

def test_important_adds_suffix():
    result = convert_one(".a { color: red !important; width: 100% !important; height: 100% !important; }")
    assert result.tailwind_classes == ['size-full!', 'text-red-500!']

def test_arbitrary_values_can_be_disabled():
    settings = ConverterSettings(enable_arbitrary_values=False)
    result = convert_one(".a { width: 200px; display: block; }", settings)
    assert result.tailwind_classes == ['block']
    assert result.unconvertible[0].property == 'width'
    assert result.unconvertible[0].reason == 'Arbitrary values are disabled for "width"'

def test_failed_width_is_unconvertible():
    result = convert_one(".a { width: banana; height: 8px; }")
    assert result.tailwind_classes == ['h-2']
    assert [u.property for u in result.unconvertible] == ['width']

def test_accepting_matcher_without_output_falls_through():
    result = convert_one(".a { font: bold serif; grid-auto-flow: sideways; }")
    assert result.tailwind_classes == []
    assert [u.property for u in result.unconvertible] == ['font', 'grid-auto-flow']

def test_spacing_family_fallback_without_matchers():
    converter = TailwindConverter(matchers=[])
    assert converter.convert_declaration('padding', '13px') == ['p-[13px]']
    assert converter.convert_declaration('display', 'flex') == ['flex']
    assert converter.convert_declaration('color', 'red') is None

def test_matcher_chain_order():
    names = [m.name for m in build_matcher_chain()]
    assert names[0] == 'spacing-shorthand'
    assert names[1] == 'border-radius-shorthand'
    assert names.index('color') < names.index('border-radius') < names.index('aspect-ratio')
    assert names[-2:] == ['spacing', 'grid']

def test_available_properties():
    properties = get_available_properties()
    assert properties == sorted(properties)
    for prop in ('display', 'width', 'grid-template-columns', 'box-shadow', 'padding'):
        assert prop in properties

def test_helpers():
    assert is_arbitrary_class('w-[10px]')
    assert is_arbitrary_class('p-(--gap)')
    assert not is_arbitrary_class('p-4')

def test_optimization_suggestions_are_prefixed_with_selector():
    rules = parse(".grid { grid-template-columns: 1fr 1fr 1fr; } .box { width: 40px; height: 40px; }")
    suggestions = optimization_suggestions(rules)
    assert suggestions == [
        '.grid: grid-template-columns: 1fr 1fr 1fr → grid-cols-3',
        '.box: width and height are both 40px: use a single size-* class',
    ]

def test_convert_css_end_to_end():
    results = convert_css(".a { display: flex; } .a:hover { opacity: .5 }")
    assert [r.class_string for r in results] == ['flex', 'hover:opacity-50']

def test_convert_css_guards_unexpected_errors(monkeypatch):
    def boom(self, css_text):
        raise RuntimeError('parser exploded')
    monkeypatch.setattr(CSSParser, 'parse', boom)
    assert convert_css(".a { display: flex; }") == []
    with pytest.raises(RuntimeError):
        convert_css(".a { display: flex; }", safe=False)

def test_size_collapse_respects_important():
    result = convert_one(".a { width: 100% !important; height: 100%; }")
    assert result.tailwind_classes == ['w-full!', 'h-full']

def test_data_uri_background_survives_parsing():
    result = convert_one('.a { background-image: url("data:image/png;base64,AAAA"); color: red; }')
    assert result.tailwind_classes == ['bg-[image:url("data:image/png;base64,AAAA")]', 'text-red-500']
    assert result.unconvertible == []
