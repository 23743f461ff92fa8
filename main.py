#!/usr/bin/env python3
"""
CSS to Tailwind Converter
Main entry point for the command-line tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from core.css_parser import CSSParser
from core.models import CSSRule
from core.settings import SettingsError
from core.tailwind_converter import TailwindConverter, optimization_suggestions
from report.report_builder import ReportBuilder
from tailwind.config_reader import load_settings
from tailwind.example_sets import get_example_set, list_example_sets
from utils.file_utils import collect_css_files, read_file_content

logger = logging.getLogger(__name__)

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='css2tw',
        description='Convert CSS rules into Tailwind utility classes.',
    )
    parser.add_argument('source', nargs='?', default=None,
                        help='CSS file, directory of .css files, or - for stdin')
    parser.add_argument('--example', metavar='NAME', help='convert a bundled example set')
    parser.add_argument('--list-examples', action='store_true', help='list the bundled example sets')
    parser.add_argument('--config', metavar='PATH', help='JSON settings file')
    parser.add_argument('--format', choices=['text', 'json', 'html'], default='text', help='output format')
    parser.add_argument('-o', '--output', metavar='PATH', help='write the report to a file instead of stdout')
    parser.add_argument('--no-size-optimization', action='store_true',
                        help='keep separate w-*/h-* classes for equal width and height')
    parser.add_argument('--no-repeater-optimization', action='store_true',
                        help='do not rewrite repeated grid tracks with repeat()')
    parser.add_argument('--repeater-threshold', type=int, metavar='N',
                        help='minimum repeat count for the repeater optimization (>= 2)')
    parser.add_argument('--no-arbitrary-values', action='store_true',
                        help='drop classes that need arbitrary-value syntax')
    parser.add_argument('--suggest', action='store_true', help='include optimization suggestions')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def read_sources(args) -> List[Tuple[str, str]]:
    """(label, css text) pairs for every input."""
    if args.example:
        return [(f"example:{args.example}", get_example_set(args.example))]
    if args.source in (None, '-'):
        return [('<stdin>', sys.stdin.read())]
    return [(str(path), read_file_content(path)) for path in collect_css_files(args.source)]


def settings_from_args(args):
    overrides = {}
    if args.no_size_optimization:
        overrides['enable_size_optimization'] = False
    if args.no_repeater_optimization:
        overrides['enable_repeater_optimization'] = False
    if args.repeater_threshold is not None:
        overrides['repeater_threshold'] = args.repeater_threshold
    if args.no_arbitrary_values:
        overrides['enable_arbitrary_values'] = False
    return load_settings(args.config).merged(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.list_examples:
        print('\n'.join(list_example_sets()))
        return 0

    try:
        settings = settings_from_args(args)
        sources = read_sources(args)
    except KeyError as e:
        print(f"error: unknown example set {e}", file=sys.stderr)
        return EXIT_USAGE
    except (SettingsError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    parser = CSSParser()
    converter = TailwindConverter(settings)
    rules: List[CSSRule] = []
    for label, css_text in sources:
        logger.info(f"Converting {label}")
        rules.extend(parser.parse(css_text))
    results = converter.convert(rules)
    suggestions = optimization_suggestions(rules, settings) if args.suggest else []

    builder = ReportBuilder()
    builder.collect_metrics(results, suggestions, source=', '.join(label for label, _ in sources))
    if args.output:
        builder.write_report(Path(args.output), args.format)
    else:
        print(builder.render(args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
