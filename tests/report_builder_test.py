import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.tailwind_converter import convert_css
from report.report_builder import ReportBuilder

CSS = ".a { display: flex; foo: bar; } .b::marker:hover { color: red; } .c { color: <b>; }"

@pytest.fixture
def builder():
    report = ReportBuilder()
    report.collect_metrics(convert_css(CSS), ['.a: try something'], source='demo.css')
    return report

def test_collect_metrics_summary(builder):
    assert builder.data['source'] == 'demo.css'
    assert builder.data['summary'] == {'rules': 3, 'classes': 2, 'unconvertible': 2, 'warnings': 2}

def test_render_json(builder):
    data = json.loads(builder.render('json'))
    assert data['results'][0]['tailwindClasses'] == ['flex']
    assert data['suggestions'] == ['.a: try something']

def test_render_text(builder):
    text = builder.render('text')
    lines = text.splitlines()
    assert lines[0] == '.a {'
    assert lines[1] == '  flex'
    assert lines[2].startswith('  ✗ foo: bar (')
    assert lines[-1] == 'hint: .a: try something'

def test_render_html_escapes_values(builder):
    html = builder.render('html')
    assert '<title>CSS to Tailwind report - demo.css</title>' in html
    assert '3 rules, 2 classes' in html
    assert '&lt;b&gt;' in html
    assert '<b>' not in html

def test_unknown_format(builder):
    with pytest.raises(ValueError):
        builder.render('pdf')

def test_write_report_creates_directories(builder, tmp_path):
    target = tmp_path / 'out' / 'report.json'
    written = builder.write_report(target, 'json')
    assert written == target
    assert json.loads(target.read_text(encoding='utf-8'))['summary']['rules'] == 3
