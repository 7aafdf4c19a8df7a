"""Numeric checks for ints, floats and Decimals."""

from __future__ import annotations

from typing import Any

from vouch import keys
from vouch.validators.base import BaseValidator


class NumberValidator(BaseValidator):
    """Checks for a numeric value."""

    def equal_to(self, other: Any, template: str | None = None) -> NumberValidator:
        self._context.add_with_value(lambda: self.value == other, keys.EQUAL_TO, other, template)
        return self

    def greater_than(self, other: Any, template: str | None = None) -> NumberValidator:
        self._context.add_with_value(lambda: self.value > other, keys.GREATER_THAN, other, template)
        return self

    def greater_or_equal_to(self, other: Any, template: str | None = None) -> NumberValidator:
        self._context.add_with_value(
            lambda: self.value >= other, keys.GREATER_OR_EQUAL_TO, other, template
        )
        return self

    def less_than(self, other: Any, template: str | None = None) -> NumberValidator:
        self._context.add_with_value(lambda: self.value < other, keys.LESS_THAN, other, template)
        return self

    def less_or_equal_to(self, other: Any, template: str | None = None) -> NumberValidator:
        self._context.add_with_value(
            lambda: self.value <= other, keys.LESS_OR_EQUAL_TO, other, template
        )
        return self

    def between(self, min: Any, max: Any, template: str | None = None) -> NumberValidator:
        """Inclusive range check."""
        self._context.add(
            lambda: min <= self.value <= max,
            keys.BETWEEN,
            {"min": min, "max": max},
            template,
        )
        return self

    def zero(self, template: str | None = None) -> NumberValidator:
        self._context.add(lambda: self.value == 0, keys.ZERO, template=template)
        return self

    def positive(self, template: str | None = None) -> NumberValidator:
        self._context.add(lambda: self.value > 0, keys.POSITIVE, template=template)
        return self

    def negative(self, template: str | None = None) -> NumberValidator:
        self._context.add(lambda: self.value < 0, keys.NEGATIVE, template=template)
        return self


def number(value: Any, name: str | None = None, title: str | None = None) -> NumberValidator:
    """Start a chain of numeric checks."""
    return NumberValidator(value, name, title)
