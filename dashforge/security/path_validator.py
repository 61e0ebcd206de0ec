"""
Path Validator for Preventing Traversal Attacks

Validates template locations so a (widget id, template name) pair can never
resolve to a file outside the template root directory.
"""

import os

from .validation import ValidationError


class PathValidator:
    """
    Validates file paths to prevent path traversal attacks.
    """

    @staticmethod
    def validate_path_segment(segment: str, label: str = "Path segment") -> str:
        """
        Validate a single path component (e.g. a widget id used as a directory name).

        Args:
            segment: User-supplied path component
            label: Name used in error messages

        Returns:
            The segment, unchanged

        Raises:
            ValidationError: If segment is empty, hidden or contains separators

        Example:
            >>> PathValidator.validate_path_segment("sales-dashboard")
            'sales-dashboard'
            >>> PathValidator.validate_path_segment("../etc")
            ValidationError: Widget id contains path separators
        """
        if not segment:
            raise ValidationError(f"{label} cannot be empty")

        if not isinstance(segment, str):
            raise ValidationError(f"{label} must be string, got {type(segment)}")

        if ".." in segment or "/" in segment or "\\" in segment:
            raise ValidationError(f"{label} contains path separators: '{segment}'")

        if segment.startswith("."):
            raise ValidationError(f"{label} cannot be hidden: '{segment}'")

        if len(segment) > 255:
            raise ValidationError(f"{label} too long: {len(segment)} chars (max 255)")

        return segment

    @staticmethod
    def validate_safe_path(base_dir: str, user_path: str) -> str:
        """
        Validate that user_path is within base_dir.

        Prevents directory traversal attacks by ensuring the resolved
        absolute path stays within the allowed base directory.

        Args:
            base_dir: Base directory
            user_path: User-supplied path (relative to base_dir)

        Returns:
            Absolute path if valid and within base_dir

        Raises:
            ValidationError: If path escapes base directory

        Example:
            >>> PathValidator.validate_safe_path('/srv/dashboards', 'sales/index.html')
            '/srv/dashboards/sales/index.html'
            >>> PathValidator.validate_safe_path('/srv/dashboards', '../../etc/passwd')
            ValidationError: Path traversal detected
        """
        if not base_dir:
            raise ValidationError("Base directory cannot be empty")

        if not user_path:
            raise ValidationError("User path cannot be empty")

        base_dir = os.path.abspath(base_dir)
        full_path = os.path.abspath(os.path.join(base_dir, user_path))

        try:
            common = os.path.commonpath([base_dir, full_path])
        except ValueError:
            # Paths on different drives (Windows)
            raise ValidationError("Path traversal detected: paths on different drives")

        if common != base_dir:
            raise ValidationError(f"Path traversal detected: '{user_path}' escapes base directory")

        return full_path
