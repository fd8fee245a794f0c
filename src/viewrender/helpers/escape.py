from typing import Any

from markupsafe import Markup, escape


class EscapeHtml:
    """Escape value for HTML, strings already marked safe are kept."""

    def __call__(self, value: Any) -> Markup:
        return escape(value)
