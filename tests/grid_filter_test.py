import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.settings import ConverterSettings
from tailwind.aspect_ratio import convert_aspect_ratio, parse_aspect_ratio, ratio_to_fraction
from tailwind.filters import FilterMatcher, convert_filter
from tailwind.grid import GridMatcher, convert_placement, convert_template

SETTINGS = ConverterSettings()

@pytest.mark.parametrize('value,expected', [
    ('repeat(3, 1fr)', ['grid-cols-3']),
    ('repeat(4, minmax(0, 1fr))', ['grid-cols-4']),
    ('1fr 1fr 1fr 1fr 1fr', ['grid-cols-5']),
    ('200px 200px 200px', ['grid-cols-[repeat(3,200px)]']),
    ('200px 200px 200px 200px', ['grid-cols-[repeat(4,200px)]']),
    ('1fr 2fr 1fr 2fr 1fr 2fr', ['grid-cols-[repeat(3,1fr_2fr)]']),
    (' '.join(['1fr'] * 13), ['grid-cols-[repeat(13,1fr)]']),
    ('200px 1fr', ['grid-cols-[200px_1fr]']),
    ('none', ['grid-cols-none']),
    ('subgrid', ['grid-cols-subgrid']),
])
def test_template_columns(value, expected):
    assert convert_template('grid-template-columns', value, SETTINGS) == expected

def test_template_rows():
    assert convert_template('grid-template-rows', 'auto 1fr auto', SETTINGS) == ['grid-rows-[auto_1fr_auto]']
    assert convert_template('grid-template-rows', 'repeat(3, 1fr)', SETTINGS) == ['grid-rows-3']
    assert convert_template('grid-template-rows', 'repeat(8, 1fr)', SETTINGS) == ['grid-rows-[repeat(8,_1fr)]']

def test_repeater_respects_settings():
    disabled = ConverterSettings(enable_repeater_optimization=False)
    assert convert_template('grid-template-columns', '200px 200px 200px', disabled) == [
        'grid-cols-[200px_200px_200px]']
    strict = ConverterSettings(repeater_threshold=4)
    assert convert_template('grid-template-columns', '200px 200px 200px', strict) == [
        'grid-cols-[200px_200px_200px]']
    assert convert_template('grid-template-columns', '1fr 2fr 1fr 2fr 1fr 2fr', strict) == [
        'grid-cols-[1fr_2fr_1fr_2fr_1fr_2fr]']

@pytest.mark.parametrize('value,expected', [
    ('span 2', ['col-span-2']),
    ('1 / -1', ['col-span-full']),
    ('1 / 3', ['col-start-1', 'col-end-3']),
    ('auto', ['col-auto']),
    ('2 / span 3', ['col-[2_/_span_3]']),
])
def test_grid_column_placement(value, expected):
    assert convert_placement('grid-column', value) == expected

def test_grid_line_and_auto_properties():
    matcher = GridMatcher()
    assert matcher.convert('grid-row-start', '-1', SETTINGS) == ['-row-start-1']
    assert matcher.convert('grid-column-end', '4', SETTINGS) == ['col-end-4']
    assert matcher.convert('grid-auto-flow', 'row dense', SETTINGS) == ['grid-flow-row-dense']
    assert matcher.convert('grid-auto-flow', 'sideways', SETTINGS) is None
    assert matcher.convert('grid-auto-columns', 'minmax(0, 1fr)', SETTINGS) == ['auto-cols-fr']
    assert matcher.convert('grid-auto-rows', '200px', SETTINGS) == ['auto-rows-[200px]']

@pytest.mark.parametrize('value,expected', [
    ('auto', 'aspect-auto'),
    ('1', 'aspect-square'),
    ('1 / 1', 'aspect-square'),
    ('16/9', 'aspect-video'),
    ('16 / 9', 'aspect-video'),
    ('1.777', 'aspect-video'),
    ('4/3', 'aspect-[4/3]'),
    ('5/4', 'aspect-[5/4]'),
    ('2', 'aspect-[2]'),
    ('calc(1 + 1)', 'aspect-[calc(1+1)]'),
])
def test_convert_aspect_ratio(value, expected):
    assert convert_aspect_ratio(value) == expected

def test_parse_aspect_ratio():
    assert parse_aspect_ratio('16 / 9') == (16.0, 9.0)
    assert parse_aspect_ratio('1.5') == (1.5, 1.0)
    assert parse_aspect_ratio('wide') is None

def test_ratio_to_fraction_reduces():
    assert ratio_to_fraction(10, 4) == '5/2'
    assert ratio_to_fraction(1.5, 1) == '3/2'

@pytest.mark.parametrize('value,expected', [
    ('blur(8px) grayscale(100%)', ['blur-sm', 'grayscale']),
    ('blur(0)', ['blur-none']),
    ('blur(5px)', ['blur-[5px]']),
    ('brightness(1.1)', ['brightness-110']),
    ('contrast(125%)', ['contrast-125']),
    ('saturate(1.3)', ['saturate-[1.3]']),
    ('sepia(50%)', ['sepia-50']),
    ('invert(0)', ['invert-0']),
    ('hue-rotate(-90deg)', ['-hue-rotate-90']),
    ('hue-rotate(45deg)', ['hue-rotate-[45deg]']),
    ('drop-shadow(0 0 #0000)', ['drop-shadow-none']),
    ('blur(var(--soft))', ['blur-(--soft)']),
    ('var(--effects)', ['filter-(--effects)']),
    ('url(#noise)', ['filter-[url(#noise)]']),
    ('none', ['filter-none']),
])
def test_convert_filter(value, expected):
    assert convert_filter('filter', value) == expected

def test_backdrop_filter_prefixes_every_class():
    assert convert_filter('backdrop-filter', 'blur(4px) saturate(150%)') == [
        'backdrop-blur-xs', 'backdrop-saturate-150']
    assert convert_filter('backdrop-filter', 'hue-rotate(-90deg)') == ['-backdrop-hue-rotate-90']
    assert convert_filter('backdrop-filter', 'none') == ['backdrop-filter-none']

def test_backdrop_filter_drops_drop_shadow():
    assert convert_filter('backdrop-filter', 'blur(4px) drop-shadow(0 0 #0000)') == ['backdrop-blur-xs']

def test_filter_matcher():
    assert FilterMatcher().convert('filter', 'grayscale(1)', SETTINGS) == ['grayscale']
