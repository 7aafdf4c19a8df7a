"""Typed check adapters.

Each factory returns an adapter whose checks register predicates with an
evaluation context; pass adapters to ``Session.is_`` or ``Session.check``.
"""

from vouch.validators.generic import AnyValidator, any_value
from vouch.validators.base import BaseValidator
from vouch.validators.boolean import (
    BoolValidator,
    OptionalBoolValidator,
    boolean,
    optional_bool,
)
from vouch.validators.number import NumberValidator, number
from vouch.validators.string import StringValidator, string

__all__ = [
    "AnyValidator",
    "BaseValidator",
    "BoolValidator",
    "NumberValidator",
    "OptionalBoolValidator",
    "StringValidator",
    "any_value",
    "boolean",
    "number",
    "optional_bool",
    "string",
]
