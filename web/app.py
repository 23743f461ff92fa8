"""
Web Interface for CSS to Tailwind Conversion
"""

import logging
import os
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, jsonify, render_template, request

from core.css_parser import CSSParser
from core.settings import DEFAULT_SETTINGS, ConverterSettings, SettingsError
from core.tailwind_converter import TailwindConverter, optimization_suggestions
from tailwind.example_sets import get_example_set, list_example_sets

logger = logging.getLogger(__name__)

app = Flask(__name__)
parser = CSSParser()


@app.route('/')
def index():
    """Render the main page."""
    return render_template('index.html', example_names=list_example_sets())


@app.route('/convert', methods=['POST'])
def convert():
    """Convert the posted CSS with per-request settings."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or not isinstance(payload.get('css'), str):
        return jsonify({'error': 'Request body must be JSON with a "css" string'}), 400
    raw_settings = payload.get('settings')
    if raw_settings is None:
        raw_settings = {}
    if not isinstance(raw_settings, dict):
        return jsonify({'error': '"settings" must be an object'}), 400
    try:
        settings = ConverterSettings.from_dict(raw_settings)
    except (SettingsError, TypeError) as e:
        return jsonify({'error': str(e)}), 400

    try:
        rules = parser.parse(payload['css'])
        results = TailwindConverter(settings).convert(rules)
        return jsonify({
            'results': [r.to_dict() for r in results],
            'suggestions': optimization_suggestions(rules, settings),
        })
    except Exception as e:
        logger.error(f"Conversion request failed: {e}", exc_info=True)
        return jsonify({'error': str(e)}), 500


@app.route('/settings/defaults')
def settings_defaults():
    return jsonify(DEFAULT_SETTINGS.to_camel_dict())


@app.route('/examples')
def examples():
    return jsonify({'examples': list_example_sets()})


@app.route('/examples/<name>')
def example(name):
    try:
        css = get_example_set(name)
    except KeyError:
        return jsonify({'error': f'No example set named {name!r}'}), 404
    return jsonify({'name': name, 'css': css})


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=True)
