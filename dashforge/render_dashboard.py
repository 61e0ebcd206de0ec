"""
Render a Dashboard Template

Renders one dashboard template from the template root, resolving charts from a
JSON widget file, and writes the HTML to a file or stdout.

Widget file format:
    [
        {"id": "revenue", "chart_type": "line", "title": "Revenue"},
        {"id": "orders", "chart_type": "bar", "options": {"stacked": true}}
    ]

Usage:
    python -m dashforge.render_dashboard --root dashboards --widget sales \\
        --charts charts.json --output .tmp/sales.html
"""

import argparse
import json
import sys
from pathlib import Path

from .config import get_config
from .core import get_logger, setup_logging
from .dashboards import ScriptChartWidget, TemplateDashboardRenderer
from .domain import InMemoryWidgetSource, TemplateDashboardWidget

logger = get_logger(__name__)


def load_widget_source(path: Path | None) -> InMemoryWidgetSource:
    """
    Build a widget source from a JSON widget file.

    Args:
        path: JSON file listing chart widgets (None for an empty source)

    Returns:
        InMemoryWidgetSource of ScriptChartWidget

    Raises:
        ValueError: If the file is not a list of widget objects with an "id"
    """
    if path is None:
        return InMemoryWidgetSource()

    entries = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"Widget file must contain a JSON list: {path}")

    widgets = []
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("id"):
            raise ValueError(f"Widget entries need an 'id': {entry!r}")
        widgets.append(
            ScriptChartWidget(
                id=entry["id"],
                chart_type=entry.get("chart_type", "bar"),
                title=entry.get("title", ""),
                options=entry.get("options", {}),
            )
        )

    return InMemoryWidgetSource(widgets)


def main(
    root: Path,
    widget_id: str,
    template: str = "index.html",
    charts_file: Path | None = None,
    theme: str | None = None,
) -> str:
    """
    Render a dashboard template.

    Args:
        root: Template root directory
        widget_id: Dashboard widget (template directory) to render
        template: Template file name inside the widget directory
        charts_file: JSON widget file
        theme: Theme name for the theme directive

    Returns:
        Rendered HTML
    """
    config = get_config(template_root=root)
    renderer = TemplateDashboardRenderer(load_widget_source(charts_file), config=config)
    result = renderer.render(TemplateDashboardWidget(id=widget_id, template=template), theme=theme)
    return result.html


def parse_arguments(argv: list[str] | None = None):
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Render a dashboard template to HTML")

    parser.add_argument("--root", type=Path, required=True, help="Template root directory")
    parser.add_argument("--widget", type=str, required=True, help="Dashboard widget id (template directory)")
    parser.add_argument("--template", type=str, default="index.html", help="Template file (default: index.html)")
    parser.add_argument("--charts", type=Path, default=None, help="JSON file describing chart widgets")
    parser.add_argument("--theme", type=str, default=None, help="Theme name (light/dark)")
    parser.add_argument("--output", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument("--log-level", type=str, default="INFO", help="Log level (default: INFO)")

    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    # HTML goes to stdout when no output file is given
    setup_logging(level=args.log_level if args.output else "WARNING")

    try:
        html = main(args.root, args.widget, args.template, args.charts, args.theme)
    except Exception as e:
        logger.error(f"Dashboard render failed: {e}")
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        logger.info(f"Dashboard written to {args.output}")
    else:
        sys.stdout.write(html)

    return 0


if __name__ == "__main__":
    sys.exit(run())
