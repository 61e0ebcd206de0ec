"""
Tests for the render-dashboard command line
"""

import json
import logging

import pytest

from dashforge.render_dashboard import load_widget_source, main, parse_arguments, run


@pytest.fixture(autouse=True)
def restore_root_logger():
    """run() reconfigures the root logger"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def charts_file(tmp_path):
    path = tmp_path / "charts.json"
    path.write_text(
        json.dumps(
            [
                {"id": "revenue", "chart_type": "line", "title": "Revenue"},
                {"id": "orders", "options": {"stacked": True}},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestLoadWidgetSource:
    """Tests for widget file loading"""

    def test_loads_widgets(self, charts_file):
        source = load_widget_source(charts_file)

        assert source.ids() == ["orders", "revenue"]
        assert source.get("revenue").chart_type == "line"
        assert source.get("orders").chart_type == "bar"
        assert source.get("orders").options == {"stacked": True}

    def test_no_file(self):
        assert len(load_widget_source(None)) == 0

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "charts.json"
        path.write_text('{"id": "revenue"}', encoding="utf-8")

        with pytest.raises(ValueError, match="JSON list"):
            load_widget_source(path)

    def test_entry_without_id(self, tmp_path):
        path = tmp_path / "charts.json"
        path.write_text('[{"title": "Revenue"}]', encoding="utf-8")

        with pytest.raises(ValueError, match="need an 'id'"):
            load_widget_source(path)


class TestMain:
    """Tests for main()"""

    def test_renders_template(self, template_root, charts_file):
        html = main(template_root, "sales", charts_file=charts_file, theme="dark")

        assert "var salesDashboard = dashboardFactory.create(" in html
        assert 'data-theme-name="dark"' in html


class TestParseArguments:
    """Tests for argument parsing"""

    def test_defaults(self, tmp_path):
        args = parse_arguments(["--root", str(tmp_path), "--widget", "sales"])

        assert args.template == "index.html"
        assert args.charts is None
        assert args.output is None
        assert args.log_level == "INFO"

    def test_root_required(self):
        with pytest.raises(SystemExit):
            parse_arguments(["--widget", "sales"])


class TestRun:
    """Tests for run()"""

    def test_writes_output_file(self, template_root, charts_file, tmp_path):
        output = tmp_path / "out" / "sales.html"

        exit_code = run(
            ["--root", str(template_root), "--widget", "sales", "--charts", str(charts_file), "--output", str(output)]
        )

        assert exit_code == 0
        assert "salesDashboard.render();" in output.read_text(encoding="utf-8")

    def test_writes_stdout(self, template_root, charts_file, capsys):
        exit_code = run(["--root", str(template_root), "--widget", "sales", "--charts", str(charts_file)])

        assert exit_code == 0
        assert "salesDashboard.render();" in capsys.readouterr().out

    def test_missing_widget_fails(self, template_root, tmp_path):
        output = tmp_path / "sales.html"

        exit_code = run(["--root", str(template_root), "--widget", "sales", "--output", str(output)])

        assert exit_code == 1
        assert not output.exists()
