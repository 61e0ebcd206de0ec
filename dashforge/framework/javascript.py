"""
Dashboard JavaScript Runtime

Provides the client-side objects the generated inline script talks to:
``dashboardFactory`` (create/init/render a dashboard) and ``chartFactory``
(create/render a chart), plus the theme toggle.
"""

DASHBOARD_FACTORY = "dashboardFactory"
CHART_FACTORY = "chartFactory"


def get_theme_toggle_script():
    """
    Returns theme toggle JavaScript for light/dark mode switching.

    Features:
    - Toggles between light and dark themes
    - Persists theme preference to localStorage

    Returns:
        String of JavaScript code
    """
    return """
    function toggleTheme() {
        const html = document.documentElement;
        const currentTheme = html.getAttribute('data-theme');
        const newTheme = currentTheme === 'dark' ? 'light' : 'dark';
        html.setAttribute('data-theme', newTheme);
        localStorage.setItem('theme', newTheme);
    }

    document.addEventListener('DOMContentLoaded', function() {
        const savedTheme = localStorage.getItem('theme') || 'light';
        document.documentElement.setAttribute('data-theme', savedTheme);
    });
    """


def get_chart_factory_script():
    """
    Returns the chart factory.

    ``chartFactory.create(options, renderContext)`` returns a chart object whose
    ``render()`` draws into ``options.elementId``.

    Returns:
        String of JavaScript code
    """
    return f"""
    var {CHART_FACTORY} = {{
        create: function(options, renderContext) {{
            var chart = Object.assign({{}}, options);
            chart.renderContext = renderContext || null;
            chart.element = function() {{
                return document.getElementById(chart.elementId);
            }};
            chart.render = function() {{
                var element = chart.element();
                if (element) {{
                    element.setAttribute('data-chart-type', chart.type || '');
                    element.classList.add('dg-chart-rendered');
                }}
                chart.rendered = true;
            }};
            return chart;
        }}
    }};
    """


def get_dashboard_factory_script():
    """
    Returns the dashboard factory.

    Lifecycle driven by the generated script:
        var d = dashboardFactory.create(options);   // declaration
        ... chart scripts reference d.renderContext ...
        dashboardFactory.init(d, renderContext, listener);
        d.render();

    Returns:
        String of JavaScript code
    """
    return f"""
    var {DASHBOARD_FACTORY} = {{
        create: function(options) {{
            var dashboard = Object.assign({{ charts: [] }}, options);
            dashboard.renderContext = {{ attributes: Object.assign({{}}, options.renderContext || {{}}) }};
            return dashboard;
        }},
        init: function(dashboard, renderContext, listener) {{
            dashboard.renderContext = renderContext || dashboard.renderContext;
            dashboard.listener = listener || null;
            dashboard.render = function() {{
                if (dashboard.listener && dashboard.listener.onRender) {{
                    dashboard.listener.onRender(dashboard);
                }}
                dashboard.charts.forEach(function(chart) {{
                    chart.dashboard = dashboard;
                    chart.render();
                }});
                if (dashboard.listener && dashboard.listener.onRendered) {{
                    dashboard.listener.onRendered(dashboard);
                }}
            }};
            return dashboard;
        }}
    }};
    """


def get_dashboard_javascript(include_theme_toggle=True):
    """
    Returns the complete runtime bundle wrapped in a <script> tag.

    Args:
        include_theme_toggle: Include the light/dark toggle script

    Returns:
        String of JavaScript code wrapped in <script> tags
    """
    js_parts = [get_chart_factory_script(), get_dashboard_factory_script()]

    if include_theme_toggle:
        js_parts.append(get_theme_toggle_script())

    javascript = f"""
    <script type="text/javascript">
    {chr(10).join(js_parts)}
    </script>
    """

    return javascript
