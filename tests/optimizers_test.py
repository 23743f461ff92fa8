import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.models import CSSDeclaration
from core.settings import ConverterSettings
from utils.custom_variable_optimizer import (extract_custom_variable_name, has_custom_variable_in_brackets,
                                             is_custom_variable_optimizable, optimize_custom_variable,
                                             optimize_custom_variables)
from utils.repeater import (analyze_repeated_values, convert_repeater_to_tailwind, detect_repeater_patterns,
                            get_optimization_suggestions, optimize_repeater_value)
from utils.suggestions import build_unconvertible_reason, find_similar_items

def test_bracketed_variable_is_shortened():
    assert optimize_custom_variable('padding', 'p-[var(--space-4)]') == 'p-(--space-4)'
    assert optimize_custom_variable('background-color', 'bg-[var(--brand)]') == 'bg-(--brand)'

def test_unsupported_property_keeps_brackets():
    assert not is_custom_variable_optimizable('display')
    assert optimize_custom_variable('display', 'x-[var(--a)]') == 'x-[var(--a)]'

def test_optimizer_is_idempotent():
    once = optimize_custom_variable('width', 'w-[var(--w)]')
    assert optimize_custom_variable('width', once) == once == 'w-(--w)'

def test_fallback_variable_is_not_rewritten():
    assert optimize_custom_variable('color', 'text-[var(--c,red)]') == 'text-[var(--c,red)]'

def test_variable_helpers():
    assert has_custom_variable_in_brackets('m-[var(--gap)]')
    assert not has_custom_variable_in_brackets('m-(--gap)')
    assert extract_custom_variable_name('var(--my-spacing)') == '--my-spacing'
    assert extract_custom_variable_name('12px') == ''
    assert optimize_custom_variables('margin', ['m-[var(--a)]', 'mx-auto']) == ['m-(--a)', 'mx-auto']

def test_identical_tracks():
    pattern = analyze_repeated_values('200px 200px 200px', 3)
    assert (pattern.value, pattern.count) == ('200px', 3)
    assert pattern.to_css() == 'repeat(3, 200px)'

def test_repeating_sequence():
    pattern = analyze_repeated_values('1fr 2fr 1fr 2fr 1fr 2fr', 3)
    assert (pattern.value, pattern.count) == ('1fr 2fr', 3)

def test_below_threshold():
    assert analyze_repeated_values('200px 200px', 3) is None
    assert analyze_repeated_values('200px 200px', 2).count == 2
    assert analyze_repeated_values('1fr 2fr 3fr', 2) is None

def test_optimize_repeater_value():
    assert optimize_repeater_value('100px 100px 100px 100px', 3) == 'repeat(4, 100px)'
    assert optimize_repeater_value('100px 1fr', 3) == '100px 1fr'

def test_convert_repeater_to_tailwind():
    pattern = analyze_repeated_values('1fr 1fr 1fr', 3)
    assert convert_repeater_to_tailwind('grid-template-columns', pattern) == 'grid-cols-3'
    pattern = analyze_repeated_values('80px 80px 80px', 3)
    assert convert_repeater_to_tailwind('grid-template-rows', pattern) == 'grid-rows-[repeat(3,80px)]'
    assert convert_repeater_to_tailwind('width', pattern) is None

def test_detect_repeater_patterns_only_grid_templates():
    declarations = [
        CSSDeclaration('grid-template-columns', '1fr 1fr 1fr'),
        CSSDeclaration('margin', '4px 4px 4px'),
    ]
    patterns = detect_repeater_patterns(declarations, 3)
    assert [p.property for p in patterns] == ['grid-template-columns']

def test_optimization_suggestions():
    declarations = [
        CSSDeclaration('grid-template-columns', '200px 200px 200px'),
        CSSDeclaration('width', '40px'),
        CSSDeclaration('height', '40px'),
    ]
    suggestions = get_optimization_suggestions(declarations, ConverterSettings())
    assert suggestions == [
        'grid-template-columns: 200px 200px 200px → grid-cols-[repeat(3,200px)]',
        'width and height are both 40px: use a single size-* class',
    ]

def test_find_similar_items():
    assert find_similar_items('colr', ['color', 'cursor', 'display'])[0] == 'color'
    assert find_similar_items('', ['color']) == []

def test_unconvertible_reason_for_value():
    reason = build_unconvertible_reason('display', 'flexx', ['flex', 'grid', 'block'], [])
    assert reason == 'Value "flexx" not supported. Try: flex'

def test_unconvertible_reason_lists_available_values():
    reason = build_unconvertible_reason('display', 'zzz', ['flex', 'grid', 'block', 'none'], [])
    assert reason == 'Value "zzz" not supported. Available values: flex, grid, block...'

def test_unconvertible_reason_for_property():
    reason = build_unconvertible_reason('paddin', '4px', [], ['padding', 'margin'])
    assert reason == 'Property "paddin" not supported. Try: padding'
    assert build_unconvertible_reason('zzz', '1', [], ['padding']) == 'Property "zzz" not supported by this converter'
