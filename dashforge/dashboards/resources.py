"""
Dashboard template resources

Templates live under one root directory, one sub-directory per dashboard
widget:

    <root>/
        sales/
            index.html
        operations/
            index.html
            detail.html

The resource manager maps a (widget id, template name) pair to the relative
path Jinja2's loader expects, rejecting anything that would escape the root.
"""

from pathlib import Path

from ..security import PathValidator


class DashboardWidgetResManager:
    """
    Locates dashboard template files.

    Args:
        root_directory: Directory containing one folder per dashboard widget

    Raises:
        ValidationError: If a widget id or template name would escape the root
    """

    def __init__(self, root_directory: Path | str):
        self.root_directory = Path(root_directory)

    def get_relative_path(self, widget_id: str, template_name: str) -> str:
        """
        Template path relative to the root, always with forward slashes.

        Example:
            >>> DashboardWidgetResManager("/srv/dashboards").get_relative_path("sales", "index.html")
            'sales/index.html'
        """
        PathValidator.validate_path_segment(widget_id, label="Widget id")
        relative = f"{widget_id}/{template_name.lstrip('/')}"
        PathValidator.validate_safe_path(str(self.root_directory / widget_id), template_name.lstrip("/"))
        return relative

    def get_file(self, widget_id: str, template_name: str) -> Path:
        """Absolute path of a template file (may not exist)."""
        relative = self.get_relative_path(widget_id, template_name)
        return Path(PathValidator.validate_safe_path(str(self.root_directory), relative))

    def exists(self, widget_id: str, template_name: str) -> bool:
        return self.get_file(widget_id, template_name).is_file()
