"""Per-value evaluation context.

Every typed check funnels into two primitives on the context:
- ``not_()`` - invert the outcome of the next registered check
- ``add()`` - register a predicate with its error key and render parameters

A context is created by an adapter before the session knows whether the chain
is fail-fast or accumulate-all, so registrations are queued until the session
binds the context. Once bound, further registrations evaluate immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from vouch.errors import ContextBoundError, ErrorRecord, ErrorSet
from vouch.keys import negated_key
from vouch.template import humanize, render
from vouch.types import Mode, TypedValue

logger = logging.getLogger(__name__)

Predicate = Callable[[], Any]


@dataclass
class Fragment:
    """A registered check waiting to be evaluated.

    Attributes:
        predicate: Zero-argument callable, truthy when the check passes
        key: Error key used to look up the message template
        params: Extra template parameters
        template: Explicit template overriding the catalog lookup
        negated: Whether ``not_()`` preceded this registration
    """

    predicate: Predicate
    key: str
    params: dict[str, Any] = field(default_factory=dict)
    template: str | None = None
    negated: bool = False


class EvaluationContext:
    """Holds one value under validation and the outcome of its checks.

    Attributes:
        typed: Tagged view of the value, used for message formatting
        name: Field name; assigned by the session if not supplied
        title: Display title; humanized from the name if not supplied
        negation_pending: One-shot flag consumed by the next ``add``
        valid: False once any check has failed
        mode: Evaluation policy, None until bound to a session
        short_circuited: True once a fail-fast chain has failed
        error_record: Messages for this context, created on first failure
    """

    def __init__(self, value: Any, name: str | None = None, title: str | None = None):
        self._value = value
        self.typed = TypedValue.of(value)
        self.name = name
        self.title = title
        self.negation_pending = False
        self.valid = True
        self.mode: Mode | None = None
        self.short_circuited = False
        self.error_record: ErrorRecord | None = None
        self._fragments: list[Fragment] = []
        self._templates: dict[str, str] = {}
        self._errors: ErrorSet | None = None

    def __repr__(self) -> str:
        return (
            f"EvaluationContext(name={self.name!r}, value={self._value!r}, "
            f"valid={self.valid})"
        )

    @property
    def value(self) -> Any:
        return self._value

    @property
    def bound(self) -> bool:
        return self.mode is not None

    def not_(self) -> EvaluationContext:
        """Invert the outcome of the next registered check."""
        self.negation_pending = True
        return self

    def add(
        self,
        predicate: Predicate,
        key: str,
        params: dict[str, Any] | None = None,
        template: str | None = None,
    ) -> EvaluationContext:
        """Register a check.

        Args:
            predicate: Zero-argument callable, truthy when the check passes
            key: Error key for the catalog template
            params: Template parameters merged over ``title`` and ``value``
            template: Explicit template used instead of the catalog

        Returns:
            Self for chaining
        """
        fragment = Fragment(
            predicate=predicate,
            key=key,
            params=dict(params or {}),
            template=template,
            negated=self.negation_pending,
        )
        self.negation_pending = False

        if self.bound:
            self._evaluate(fragment)
        else:
            self._fragments.append(fragment)
        return self

    def add_with_value(
        self,
        predicate: Predicate,
        key: str,
        value: Any,
        template: str | None = None,
    ) -> EvaluationContext:
        """Register a check whose message shows a compared value as ``{{value}}``."""
        return self.add(predicate, key, {"value": value}, template)

    def bind(
        self,
        *,
        default_name: str,
        mode: Mode,
        templates: dict[str, str],
        errors: ErrorSet,
    ) -> None:
        """Attach the context to a session and evaluate queued checks.

        Args:
            default_name: Name used when the adapter was not given one
            mode: FAIL_FAST or ACCUMULATE
            templates: Effective key -> template mapping for the session
            errors: The session's ErrorSet, receiving every failure

        Raises:
            ContextBoundError: If the context is already bound
        """
        if self.bound:
            raise ContextBoundError(
                f"Context '{self.name}' has already been validated by a session"
            )

        if self.name is None:
            self.name = default_name
        if self.title is None:
            self.title = humanize(self.name)

        self.mode = mode
        self._templates = templates
        self._errors = errors

        fragments, self._fragments = self._fragments, []
        for fragment in fragments:
            self._evaluate(fragment)

    def _evaluate(self, fragment: Fragment) -> None:
        if self.short_circuited:
            logger.debug(
                "Skipping '%s' on '%s': chain already failed", fragment.key, self.name
            )
            return

        try:
            outcome = bool(fragment.predicate()) != fragment.negated
        except Exception:
            # A check that cannot run counts as failed, negated or not
            logger.warning(
                "Check '%s' on '%s' raised; recording it as failed",
                fragment.key,
                self.name,
                exc_info=True,
            )
            outcome = False
        if outcome:
            return

        key = negated_key(fragment.key) if fragment.negated else fragment.key
        self._fail(key, fragment.params, fragment.template)

        if self.mode is Mode.FAIL_FAST:
            self.short_circuited = True

    def _fail(self, key: str, params: dict[str, Any], template: str | None) -> None:
        if template is None:
            template = self._templates.get(key)
            if template is None:
                logger.warning("No template for error key '%s'", key)
                template = key

        message = render(template, {"title": self.title, "value": self._value, **params})

        if self.error_record is None:
            self.error_record = ErrorRecord(name=self.name, title=self.title, value=self._value)
        self.error_record.add(message)
        self.valid = False

        if self._errors is not None:
            self._errors.add_message(self.name, self.title, message, self._value)
