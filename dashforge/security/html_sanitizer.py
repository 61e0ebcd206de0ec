"""
HTML Sanitizer for XSS Prevention

Escapes values written into generated markup and inline script. Template
text is escaped by Jinja2 auto-escaping; this module covers the fragments the
directive engine assembles itself.
"""

import json
from typing import Any


class HTMLSanitizer:
    """
    Escapes values for HTML, HTML attribute and JavaScript contexts.
    """

    # HTML entities that must be escaped
    HTML_ESCAPES = {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
    }

    # Characters that could terminate a <script> block or an HTML comment
    SCRIPT_JSON_ESCAPES = {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }

    @staticmethod
    def escape_html(text: str | None) -> str:
        """
        Escape HTML special characters to prevent XSS.

        Args:
            text: Text to escape (may be None)

        Returns:
            Escaped text safe for HTML context

        Example:
            >>> HTMLSanitizer.escape_html("<script>alert('XSS')</script>")
            '&lt;script&gt;alert(&#x27;XSS&#x27;)&lt;&#x2F;script&gt;'
        """
        if text is None:
            return ""

        text = str(text)

        # & must go first so existing entities are not double-decoded
        for char, escape in HTMLSanitizer.HTML_ESCAPES.items():
            text = text.replace(char, escape)

        return text

    @staticmethod
    def escape_html_attribute(text: str | None) -> str:
        """
        Escape text for use in HTML attributes.

        More strict than regular escaping - removes control characters.

        Args:
            text: Text to escape

        Returns:
            Escaped text safe for HTML attribute context
        """
        if text is None:
            return ""

        text = str(text)

        # Remove control characters (ASCII < 32, except space)
        text = "".join(char for char in text if ord(char) >= 32 or char == " ")

        return HTMLSanitizer.escape_html(text)

    @staticmethod
    def escape_javascript_string(text: str | None) -> str:
        """
        Escape text for use in JavaScript string context.

        Args:
            text: Text to escape

        Returns:
            Escaped text safe for JavaScript string context
        """
        if text is None:
            return ""

        text = str(text)

        js_escapes = {
            "\\": "\\\\",
            "'": "\\'",
            '"': '\\"',
            "\n": "\\n",
            "\r": "\\r",
            "\t": "\\t",
            "<": "\\x3C",  # Prevent </script> injection
            ">": "\\x3E",
        }

        for char, escape in js_escapes.items():
            text = text.replace(char, escape)

        return text

    @staticmethod
    def to_script_json(value: Any) -> str:
        """
        Serialize a value as a JSON literal safe to embed in a <script> block.

        Args:
            value: JSON-serializable value

        Returns:
            JSON text with markup-significant characters unicode-escaped

        Example:
            # "<" and ">" come out as unicode escapes, so the value
            # cannot close the surrounding script tag
            HTMLSanitizer.to_script_json({"title": "</script>"})
        """
        text = json.dumps(value, ensure_ascii=False, sort_keys=False)

        for char, escape in HTMLSanitizer.SCRIPT_JSON_ESCAPES.items():
            text = text.replace(char, escape)

        return text
