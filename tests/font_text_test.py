import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.settings import ConverterSettings
from tailwind.font import FontMatcher, convert_font_family, parse_font_shorthand
from tailwind.text import TextMatcher, convert_text_decoration

SETTINGS = ConverterSettings()

def test_parse_font_shorthand_full():
    parts = parse_font_shorthand('italic 700 24px/1.5 Georgia, serif')
    assert parts.style == 'italic'
    assert parts.weight == '700'
    assert parts.size == '24px'
    assert parts.line_height == '1.5'
    assert parts.family == 'Georgia, serif'

def test_parse_font_shorthand_spaced_slash():
    parts = parse_font_shorthand('16px / 1.5 serif')
    assert parts.size == '16px'
    assert parts.line_height == '1.5'
    assert parts.family == 'serif'

def test_parse_font_shorthand_without_size():
    assert parse_font_shorthand('bold serif').size is None

def test_font_shorthand_classes_in_order():
    classes = FontMatcher().convert('font', 'italic 700 24px/1.5 Georgia, serif', SETTINGS)
    assert classes == ['font-serif', 'text-2xl', 'font-bold', 'italic', 'leading-normal']

def test_font_shorthand_unknown_family_and_size():
    classes = FontMatcher().convert('font', '13px Inter', SETTINGS)
    assert classes == ['font-[Inter]', 'text-[13px]']

def test_font_shorthand_system_font_and_missing_size():
    matcher = FontMatcher()
    assert matcher.convert('font', 'caption', SETTINGS) is None
    assert matcher.convert('font', 'bold serif', SETTINGS) is None

@pytest.mark.parametrize('family,expected', [
    ('"Helvetica Neue", Arial, sans-serif', 'font-sans'),
    ('Georgia, serif', 'font-serif'),
    ('"Courier New", monospace', 'font-mono'),
    ('Inter, "Open Sans"', 'font-[Inter,Open_Sans]'),
])
def test_font_family(family, expected):
    assert convert_font_family(family) == expected

@pytest.mark.parametrize('prop,value,expected', [
    ('font-size', '14px', ['text-sm']),
    ('font-size', '1.25rem', ['text-xl']),
    ('font-size', 'large', ['text-lg']),
    ('font-size', '15px', ['text-[15px]']),
    ('font-weight', '600', ['font-semibold']),
    ('font-weight', '450', ['font-[450]']),
    ('font-style', 'normal', ['not-italic']),
    ('font-variant', 'small-caps', ['[font-variant:small-caps]']),
    ('line-height', '1', ['leading-none']),
    ('line-height', '24px', ['leading-6']),
    ('line-height', '1.8', ['leading-[1.8]']),
    ('letter-spacing', '-0.025em', ['tracking-tight']),
    ('letter-spacing', '2px', ['tracking-[2px]']),
    ('word-spacing', '4px', ['[word-spacing:4px]']),
])
def test_font_longhands(prop, value, expected):
    assert FontMatcher().convert(prop, value, SETTINGS) == expected

def test_text_decoration_shorthand():
    assert convert_text_decoration('underline dotted red') == ['underline', 'decoration-dotted', 'decoration-red-500']
    assert convert_text_decoration('underline 2px') == ['underline', 'decoration-2']
    assert convert_text_decoration('none') == ['no-underline']
    assert convert_text_decoration('blink') is None

@pytest.mark.parametrize('prop,value,expected', [
    ('text-transform', 'none', ['normal-case']),
    ('text-transform', 'uppercase', ['uppercase']),
    ('text-align', 'center', ['text-center']),
    ('text-overflow', 'ellipsis', ['text-ellipsis']),
    ('white-space', 'nowrap', ['whitespace-nowrap']),
    ('word-break', 'break-word', ['break-words']),
    ('overflow-wrap', 'anywhere', ['wrap-anywhere']),
    ('hyphens', 'auto', ['hyphens-auto']),
    ('text-indent', '16px', ['indent-4']),
    ('vertical-align', 'middle', ['align-middle']),
    ('vertical-align', '10px', ['align-[10px]']),
    ('text-underline-offset', '4px', ['underline-offset-4']),
    ('writing-mode', 'vertical-rl', ['[writing-mode:vertical-rl]']),
])
def test_text_properties(prop, value, expected):
    assert TextMatcher().convert(prop, value, SETTINGS) == expected

def test_unknown_keyword_returns_none():
    assert TextMatcher().convert('text-align', 'sideways', SETTINGS) is None

def test_text_matcher_leaves_decoration_color_to_color_matcher():
    assert not TextMatcher().predicate('text-decoration-color', 'red')
