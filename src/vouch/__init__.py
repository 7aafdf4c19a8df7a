"""vouch: fluent value validation.

Build chains of typed checks, validate them fail-fast (``is_``) or
accumulating every failure (``check``), and read back per-field messages.

Usage:
    import re

    from vouch import check, is_
    from vouch.validators import string

    session = check(string("", "email").not_().blank().matching_to(re.compile("a")))
    session.valid()            # False
    session.errors().to_dict() # {"email": ["Email can't be blank", 'Email must match to "a"']}
"""

from vouch.config import CatalogConfig, SessionOptions
from vouch.context import EvaluationContext
from vouch.errors import (
    CatalogError,
    ContextBoundError,
    ErrorRecord,
    ErrorSet,
    SerializationError,
    ValidationErrors,
    VouchError,
    default_serializer,
)
from vouch.messages import (
    MessageCatalog,
    configure_catalog,
    get_catalog,
    reset_messages,
)
from vouch.session import (
    Session,
    Validator,
    add_error_message,
    check,
    is_,
    new,
)
from vouch.template import humanize, render
from vouch.types import Mode, TypedValue, ValueKind

__all__ = [
    # Types
    "Mode",
    "TypedValue",
    "ValueKind",
    # Config
    "CatalogConfig",
    "SessionOptions",
    # Context
    "EvaluationContext",
    # Errors
    "CatalogError",
    "ContextBoundError",
    "ErrorRecord",
    "ErrorSet",
    "SerializationError",
    "ValidationErrors",
    "VouchError",
    "default_serializer",
    # Messages
    "MessageCatalog",
    "configure_catalog",
    "get_catalog",
    "reset_messages",
    "humanize",
    "render",
    # Sessions
    "Session",
    "Validator",
    "add_error_message",
    "check",
    "is_",
    "new",
]
