"""Boolean checks, for plain and optional (possibly None) booleans."""

from __future__ import annotations

from typing import Any

from vouch import keys
from vouch.validators.base import BaseValidator


class BoolValidator(BaseValidator):
    """Checks for a boolean value."""

    def equal_to(self, other: bool, template: str | None = None) -> BoolValidator:
        self._context.add_with_value(lambda: self.value == other, keys.EQUAL_TO, other, template)
        return self

    def true(self, template: str | None = None) -> BoolValidator:
        self._context.add(lambda: self.value is True, keys.TRUE, template=template)
        return self

    def false(self, template: str | None = None) -> BoolValidator:
        self._context.add(lambda: self.value is False, keys.FALSE, template=template)
        return self


class OptionalBoolValidator(BoolValidator):
    """Checks for a boolean that may be None.

    ``true``, ``false`` and ``equal_to`` fail for None.
    """

    def equal_to(self, other: bool, template: str | None = None) -> OptionalBoolValidator:
        self._context.add_with_value(
            lambda: self.value is not None and self.value == other,
            keys.EQUAL_TO,
            other,
            template,
        )
        return self

    def nil(self, template: str | None = None) -> OptionalBoolValidator:
        self._context.add(lambda: self.value is None, keys.NIL, template=template)
        return self


def boolean(value: Any, name: str | None = None, title: str | None = None) -> BoolValidator:
    """Start a chain of boolean checks."""
    return BoolValidator(value, name, title)


def optional_bool(
    value: bool | None, name: str | None = None, title: str | None = None
) -> OptionalBoolValidator:
    """Start a chain of checks for a boolean that may be None."""
    return OptionalBoolValidator(value, name, title)
