"""Message template rendering and name humanization.

Templates use ``{{name}}`` placeholders:
- ``{{title}}`` - the display title of the field
- ``{{value}}`` - the checked value, or the compared value for comparisons
- any extra parameter a check supplies (``{{min}}``, ``{{regexp}}``, ...)

A placeholder with no matching parameter renders as empty text.
"""

import logging
import re
from typing import Any

from vouch.types import TypedValue

logger = logging.getLogger(__name__)

# Pattern: {{ name }} with optional inner whitespace
PLACEHOLDER = re.compile(r"\{\{\s*(?P<name>[\w.-]+)\s*\}\}")

_SEPARATORS = re.compile(r"[\s_.\-]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def render(template: str, params: dict[str, Any] | None = None) -> str:
    """Substitute placeholders in a template.

    Args:
        template: Message template with ``{{name}}`` placeholders
        params: Values to substitute, formatted through TypedValue

    Returns:
        The rendered message
    """
    params = params or {}

    def replace(match: re.Match) -> str:
        name = match.group("name")
        if name not in params:
            logger.debug("No parameter for placeholder '%s' in %r", name, template)
            return ""
        try:
            return TypedValue.of(params[name]).text()
        except Exception:
            logger.warning(
                "Could not render parameter '%s' in %r", name, template, exc_info=True
            )
            return ""

    return PLACEHOLDER.sub(replace, template)


def humanize(name: str) -> str:
    """Convert a field name to a display title.

    ``phone_number`` -> ``Phone Number``, ``firstName`` -> ``First Name``,
    ``value_0`` -> ``Value 0``.
    """
    spaced = _CAMEL_BOUNDARY.sub(" ", name)
    words = [w for w in _SEPARATORS.split(spaced) if w]
    return " ".join(w[0].upper() + w[1:] for w in words)
