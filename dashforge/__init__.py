"""
Template Dashboard Renderer

Renders dashboard templates whose directives emit the HTML and inline script
that wire one dashboard controller to its embedded charts.

Package Structure:
    - core: Infrastructure (logging, errors)
    - domain: Render context, identifiers, dashboard/chart models, widget sources
    - dashboards: Directive engine, output emitter, template renderer
    - framework: Shared CSS/JS emitted by the import and theme directives
    - security: Input validation (identifiers, template paths, escaping)
"""

__version__ = "2.0.0"
__author__ = "Engineering Metrics Team"
