import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.settings import ConverterSettings
from tailwind.border import BorderMatcher, convert_border_shorthand, convert_outline, parse_border_shorthand
from tailwind.border_radius import BorderRadiusMatcher, convert_radius_shorthand, radius_class
from tailwind.shadow import ShadowMatcher, classify_shadow, convert_box_shadow, normalize_shadow

SETTINGS = ConverterSettings()

def test_parse_border_shorthand_any_order():
    assert parse_border_shorthand('1px solid #e5e7eb') == ('1px', 'solid', '#e5e7eb')
    assert parse_border_shorthand('dashed red 2px') == ('2px', 'dashed', 'red')

def test_border_shorthand():
    assert convert_border_shorthand('1px solid #e5e7eb') == ['border', 'border-solid', 'border-[#e5e7eb]']
    assert convert_border_shorthand('2px dotted red') == ['border-2', 'border-dotted', 'border-red-500']
    assert convert_border_shorthand('none') == ['border-none']
    assert convert_border_shorthand('0') == ['border-0']

def test_border_side_shorthand_uses_arbitrary_style():
    assert convert_border_shorthand('1px solid #e5e7eb', 'bottom') == [
        'border-b', '[border-bottom-style:solid]', 'border-b-[#e5e7eb]']
    assert convert_border_shorthand('none', 'top') == ['border-t-0']

def test_border_longhands():
    matcher = BorderMatcher()
    assert matcher.convert('border-width', '3px', SETTINGS) == ['border-[3px]']
    assert matcher.convert('border-style', 'dashed', SETTINGS) == ['border-dashed']
    assert matcher.convert('border-left-width', '4px', SETTINGS) == ['border-l-4']
    assert matcher.convert('border-top-style', 'dotted', SETTINGS) == ['[border-top-style:dotted]']

def test_outline():
    assert convert_outline('outline', '2px dashed red') == ['outline-2', 'outline-dashed', 'outline-red-500']
    assert convert_outline('outline', 'none') == ['outline-none']
    assert convert_outline('outline-offset', '-2px') == ['-outline-offset-2']
    assert convert_outline('outline-offset', '3px') == ['outline-offset-[3px]']

@pytest.mark.parametrize('value,expected', [
    ('0', 'rounded-none'),
    ('2px', 'rounded-sm'),
    ('4px', 'rounded'),
    ('8px', 'rounded-lg'),
    ('0.5rem', 'rounded-lg'),
    ('9999px', 'rounded-full'),
    ('50%', 'rounded-full'),
    ('10px', 'rounded-[10px]'),
])
def test_radius_class(value, expected):
    assert radius_class('rounded', value) == expected

def test_radius_shorthand():
    assert convert_radius_shorthand('4px 4px 4px 4px') == ['rounded']
    assert convert_radius_shorthand('4px 8px') == ['rounded-[4px_8px]']
    assert convert_radius_shorthand('50% / 10%') == ['rounded-[50%_/_10%]']

def test_radius_matchers():
    shorthand = BorderRadiusMatcher(shorthand=True)
    single = BorderRadiusMatcher()
    assert not shorthand.predicate('border-radius', '8px')
    assert shorthand.predicate('border-radius', '4px 8px')
    assert single.predicate('border-radius', '8px')
    assert single.convert('border-top-left-radius', '8px', SETTINGS) == ['rounded-tl-lg']

def test_known_tailwind_shadows():
    assert convert_box_shadow('0 1px 2px 0 rgb(0 0 0 / 0.05)') == 'shadow-sm'
    assert convert_box_shadow('0 1px 2px 0 rgba(0, 0, 0, 0.05)') == 'shadow-sm'
    assert convert_box_shadow('inset 0 2px 4px 0 rgb(0 0 0 / 0.05)') == 'shadow-inner'
    assert convert_box_shadow('none') == 'shadow-none'

def test_normalize_shadow():
    assert normalize_shadow('0  1px 2px  RGB(0 0 0 / 0.05)') == '0 1px 2px rgba(0, 0, 0, 0.05)'

def test_shadow_heuristic_buckets():
    assert convert_box_shadow('0 2px 8px rgba(0,0,0,0.1)') == 'shadow-md'
    assert classify_shadow('0 1px 2px black') == 'shadow-sm'
    assert classify_shadow('0 10px 20px black') == 'shadow-lg'
    assert classify_shadow('0 30px 60px black') == 'shadow-2xl'
    assert classify_shadow('inset 0 0 4px red') == 'shadow-inner'
    assert classify_shadow('red') is None

def test_multi_layer_shadow_is_arbitrary():
    assert convert_box_shadow('0 1px red, 0 2px blue') == 'shadow-[0_1px_red,_0_2px_blue]'

def test_text_shadow():
    matcher = ShadowMatcher()
    assert matcher.convert('text-shadow', '1px 1px 2px black', SETTINGS) == ['[text-shadow:1px_1px_2px_black]']
    assert matcher.convert('text-shadow', 'none', SETTINGS) == ['text-shadow-none']
