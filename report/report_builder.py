"""
Report Builder Module
Renders conversion results as JSON or as an HTML report using Jinja2 templates.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.models import ConversionResult

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / 'templates'


class ReportBuilder:
    def __init__(self, template_dir: Optional[Path] = None):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(['html']),
        )
        self.data: Dict = {}

    def collect_metrics(self, results: Sequence[ConversionResult],
                        suggestions: Optional[List[str]] = None, source: str = '') -> Dict:
        """Summarize results into the dict both report formats render."""
        self.data = {
            'source': source,
            'summary': {
                'rules': len(results),
                'classes': sum(len(r.tailwind_classes) for r in results),
                'unconvertible': sum(len(r.unconvertible) for r in results),
                'warnings': sum(len(r.warnings) for r in results),
            },
            'results': [r.to_dict() for r in results],
            'suggestions': list(suggestions or []),
        }
        return self.data

    def render_json(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False)

    def render_html(self) -> str:
        template = self.env.get_template('report.html')
        return template.render(**self.data)

    def render_text(self) -> str:
        lines = []
        for result in self.data.get('results', []):
            lines.append(f"{result['selector']} {{")
            lines.append(f"  {' '.join(result['tailwindClasses'])}")
            for warning in result['warnings']:
                lines.append(f"  ! {warning}")
            for item in result['unconvertible']:
                lines.append(f"  ✗ {item['property']}: {item['value']} ({item['reason']})")
            lines.append('}')
        for suggestion in self.data.get('suggestions', []):
            lines.append(f"hint: {suggestion}")
        return '\n'.join(lines)

    def render(self, fmt: str) -> str:
        renderers = {'json': self.render_json, 'html': self.render_html, 'text': self.render_text}
        if fmt not in renderers:
            raise ValueError(f"Unknown report format: {fmt}")
        return renderers[fmt]()

    def write_report(self, output_path: Path, fmt: str) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.render(fmt))
        logger.info(f"Wrote {fmt} report to {output_path}")
        return output_path
