"""Base class for typed check adapters."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from vouch import keys
from vouch.context import EvaluationContext


class BaseValidator:
    """Wraps an evaluation context with a fluent check API.

    Subclasses add typed checks; each one registers a predicate through
    ``self._context.add`` and returns ``self``. Custom adapters can extend
    this class or expose their own ``context()``.
    """

    def __init__(self, value: Any, name: str | None = None, title: str | None = None):
        self._context = EvaluationContext(value, name, title)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._context!r})"

    def context(self) -> EvaluationContext:
        """The context the session binds. Needed only by custom adapters."""
        return self._context

    @property
    def value(self) -> Any:
        return self._context.value

    def not_(self):
        """Invert the outcome of the next check.

        Example:
            is_(string("").not_().blank())  # invalid: "" is blank
        """
        self._context.not_()
        return self

    def passing(self, function: Callable[[Any], Any], template: str | None = None):
        """Check that a custom function accepts the value."""
        self._context.add(lambda: function(self.value), keys.PASSING, template=template)
        return self

    def in_slice(self, items: Iterable[Any], template: str | None = None):
        """Check that the value is one of ``items``."""
        items = list(items)
        self._context.add(lambda: self.value in items, keys.IN_SLICE, template=template)
        return self
