"""Checks for values of any type."""

from __future__ import annotations

from typing import Any

from vouch import keys
from vouch.validators.base import BaseValidator


class AnyValidator(BaseValidator):
    """Checks that only need equality, identity with None, or the value's kind."""

    def equal_to(self, other: Any, template: str | None = None) -> AnyValidator:
        self._context.add_with_value(lambda: self.value == other, keys.EQUAL_TO, other, template)
        return self

    def nil(self, template: str | None = None) -> AnyValidator:
        self._context.add(lambda: self.value is None, keys.NIL, template=template)
        return self

    def a_number_type(self, template: str | None = None) -> AnyValidator:
        """Check that the value is an int, float or Decimal (not a bool)."""
        self._context.add(lambda: self._context.typed.is_number, keys.NUMBER_TYPE, template=template)
        return self


def any_value(value: Any, name: str | None = None, title: str | None = None) -> AnyValidator:
    """Start a chain of checks for a value of any type."""
    return AnyValidator(value, name, title)
