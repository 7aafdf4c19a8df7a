"""String checks.

Comparisons use Python's ordering of ``str``; lengths count characters.
"""

from __future__ import annotations

import re
from typing import Any

from vouch import keys
from vouch.validators.base import BaseValidator


def _is_blank(value: str) -> bool:
    return value.strip() == ""


class StringValidator(BaseValidator):
    """Checks for a text value.

    Example:
        is_(string(status).in_slice(["idle", "paused", "stopped"]))
    """

    def equal_to(self, other: str, template: str | None = None) -> StringValidator:
        self._context.add_with_value(lambda: self.value == other, keys.EQUAL_TO, other, template)
        return self

    def greater_than(self, other: str, template: str | None = None) -> StringValidator:
        self._context.add_with_value(lambda: self.value > other, keys.GREATER_THAN, other, template)
        return self

    def greater_or_equal_to(self, other: str, template: str | None = None) -> StringValidator:
        self._context.add_with_value(
            lambda: self.value >= other, keys.GREATER_OR_EQUAL_TO, other, template
        )
        return self

    def less_than(self, other: str, template: str | None = None) -> StringValidator:
        self._context.add_with_value(lambda: self.value < other, keys.LESS_THAN, other, template)
        return self

    def less_or_equal_to(self, other: str, template: str | None = None) -> StringValidator:
        self._context.add_with_value(
            lambda: self.value <= other, keys.LESS_OR_EQUAL_TO, other, template
        )
        return self

    def between(self, min: str, max: str, template: str | None = None) -> StringValidator:
        """Inclusive range check."""
        self._context.add(
            lambda: min <= self.value <= max,
            keys.BETWEEN,
            {"min": min, "max": max},
            template,
        )
        return self

    def empty(self, template: str | None = None) -> StringValidator:
        """Zero length. ``" "`` is not empty; use ``blank`` for whitespace."""
        self._context.add(lambda: len(self.value) == 0, keys.EMPTY, template=template)
        return self

    def blank(self, template: str | None = None) -> StringValidator:
        """Empty or whitespace only."""
        self._context.add(lambda: _is_blank(self.value), keys.BLANK, template=template)
        return self

    def matching_to(self, pattern: str | re.Pattern, template: str | None = None) -> StringValidator:
        """Check the value against a regular expression (``re.search``)."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        self._context.add(
            lambda: regex.search(self.value) is not None,
            keys.MATCHING_TO,
            {"regexp": regex},
            template,
        )
        return self

    def max_length(self, length: int, template: str | None = None) -> StringValidator:
        self._context.add(
            lambda: len(self.value) <= length, keys.MAX_LENGTH, {"length": length}, template
        )
        return self

    def min_length(self, length: int, template: str | None = None) -> StringValidator:
        self._context.add(
            lambda: len(self.value) >= length, keys.MIN_LENGTH, {"length": length}, template
        )
        return self

    def length(self, length: int, template: str | None = None) -> StringValidator:
        self._context.add(
            lambda: len(self.value) == length, keys.LENGTH, {"length": length}, template
        )
        return self

    def length_between(self, min: int, max: int, template: str | None = None) -> StringValidator:
        self._context.add(
            lambda: min <= len(self.value) <= max,
            keys.LENGTH_BETWEEN,
            {"min": min, "max": max},
            template,
        )
        return self


def string(value: Any, name: str | None = None, title: str | None = None) -> StringValidator:
    """Start a chain of string checks.

    When no name is given the session names the value ``value_N``; when no
    title is given the name is humanized (``phone_number`` -> ``Phone Number``).
    """
    return StringValidator(value, name, title)
