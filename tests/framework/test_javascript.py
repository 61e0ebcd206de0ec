"""
Tests for dashforge.framework.javascript module
"""

from dashforge.framework.javascript import (
    CHART_FACTORY,
    DASHBOARD_FACTORY,
    get_chart_factory_script,
    get_dashboard_factory_script,
    get_dashboard_javascript,
    get_theme_toggle_script,
)


class TestFactories:
    """Test the client-side factories the generated script calls"""

    def test_chart_factory(self):
        js = get_chart_factory_script()
        assert f"var {CHART_FACTORY} = {{" in js
        assert "create: function(options, renderContext)" in js
        assert "chart.render = function()" in js

    def test_dashboard_factory(self):
        js = get_dashboard_factory_script()
        assert f"var {DASHBOARD_FACTORY} = {{" in js
        assert "create: function(options)" in js
        assert "init: function(dashboard, renderContext, listener)" in js
        assert "dashboard.render = function()" in js

    def test_braces_balanced(self):
        for js in (get_chart_factory_script(), get_dashboard_factory_script()):
            assert js.count("{") == js.count("}")


class TestThemeToggle:
    """Test theme toggle script"""

    def test_toggle_function(self):
        js = get_theme_toggle_script()
        assert "function toggleTheme()" in js
        assert "localStorage.setItem('theme', newTheme)" in js

    def test_default_light(self):
        assert "|| 'light'" in get_theme_toggle_script()


class TestDashboardJavascript:
    """Test the complete runtime bundle"""

    def test_wrapped_in_script_tag(self):
        js = get_dashboard_javascript()
        assert '<script type="text/javascript">' in js
        assert js.strip().endswith("</script>")

    def test_includes_factories(self):
        js = get_dashboard_javascript()
        assert f"var {CHART_FACTORY}" in js
        assert f"var {DASHBOARD_FACTORY}" in js

    def test_theme_toggle_optional(self):
        assert "toggleTheme" in get_dashboard_javascript()
        assert "toggleTheme" not in get_dashboard_javascript(include_theme_toggle=False)
