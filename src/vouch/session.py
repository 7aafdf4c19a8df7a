"""Validation sessions.

A Session is one unit of validation work: it binds adapter chains to names
and an evaluation mode, and collects their failures in one ErrorSet.

Usage:
    from vouch import check, is_
    from vouch.validators import number, string

    session = is_(string(form["email"], "email").not_().blank())
    session.check(number(form["age"], "age").greater_than(17))

    if not session.valid():
        raise session.error()
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from vouch.config import SessionOptions
from vouch.context import EvaluationContext
from vouch.errors import ErrorSet, Serializer, ValidationErrors
from vouch.messages import MessageCatalog, get_catalog
from vouch.template import humanize
from vouch.types import Mode

logger = logging.getLogger(__name__)


@runtime_checkable
class Validator(Protocol):
    """Anything exposing an evaluation context can be validated."""

    def context(self) -> EvaluationContext:
        ...


class Session:
    """Collects the outcome of one or more validation chains.

    Example:
        session = Session()
        session.is_(string("", "name").not_().blank())
        session.valid()            # False
        session.errors().to_dict() # {"name": ["Name can't be blank"]}
    """

    def __init__(self, options: SessionOptions | None = None):
        self.options = options or SessionOptions()
        self._errors = ErrorSet()
        self._contexts: list[EvaluationContext] = []
        self._templates: dict[str, str] | None = None

    def __repr__(self) -> str:
        return f"Session(valid={self.valid()}, errors={self._errors.to_dict()!r})"

    @property
    def catalog(self) -> MessageCatalog:
        return self.options.catalog or get_catalog()

    @property
    def contexts(self) -> list[EvaluationContext]:
        """Contexts validated so far, in registration order."""
        return list(self._contexts)

    def is_(self, *validators: Validator) -> Session:
        """Validate chains fail-fast: each chain keeps only its first failure."""
        return self._validate(Mode.FAIL_FAST, validators)

    def check(self, *validators: Validator) -> Session:
        """Validate chains accumulating every failure."""
        return self._validate(Mode.ACCUMULATE, validators)

    def _validate(self, mode: Mode, validators: tuple[Validator, ...]) -> Session:
        for validator in validators:
            ctx = _context_of(validator)
            ctx.bind(
                default_name=f"value_{len(self._contexts)}",
                mode=mode,
                templates=self._effective_templates(),
                errors=self._errors,
            )
            self._contexts.append(ctx)
            logger.debug("Validated '%s' (%s): valid=%s", ctx.name, mode.value, ctx.valid)
        return self

    def _effective_templates(self) -> dict[str, str]:
        if self._templates is None:
            self._templates = self.catalog.templates(self.options.locale, self.options.messages)
        return self._templates

    def is_valid(self, name: str) -> bool:
        """True unless the field has at least one recorded message."""
        return name not in self._errors

    def add_error_message(self, name: str, message: str) -> Session:
        """Record a message for a field without running a check."""
        self._errors.add_message(name, humanize(name), message)
        return self

    def merge(self, other: Session) -> Session:
        """Fold another session's errors into this one."""
        self._errors.merge(other.errors())
        return self

    def valid(self) -> bool:
        return self._errors.valid

    def errors(self) -> ErrorSet:
        """The session's ErrorSet.

        The set is live: it reflects checks bound later. Treat it as read-only
        and record messages through ``add_error_message``.
        """
        return self._errors

    def error(self, serializer: Serializer | None = None) -> ValidationErrors | None:
        """Error-shaped result, or None when the session is valid.

        Args:
            serializer: Overrides the serializer from the session options
        """
        if self.valid():
            return None
        return ValidationErrors(self._errors, serializer or self.options.serializer)


def _context_of(validator: Any) -> EvaluationContext:
    if isinstance(validator, EvaluationContext):
        return validator
    if not isinstance(validator, Validator):
        raise TypeError(
            f"Expected a validator exposing context(), got {type(validator).__name__}"
        )
    return validator.context()


# =============================================================================
# Module-level conveniences
# =============================================================================


def new(options: SessionOptions | None = None) -> Session:
    """Create an empty session."""
    return Session(options)


def is_(*validators: Validator) -> Session:
    """Create a session and validate chains fail-fast."""
    return Session().is_(*validators)


def check(*validators: Validator) -> Session:
    """Create a session and validate chains accumulating every failure."""
    return Session().check(*validators)


def add_error_message(name: str, message: str) -> Session:
    """Create a session holding one message."""
    return Session().add_error_message(name, message)
