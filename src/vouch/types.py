"""Core types for the vouch validation engine.

This module defines the small closed vocabulary shared by every layer:
- ValueKind / TypedValue: a tagged view of a caller-supplied value, built once
  when the value enters an evaluation context
- Mode: the evaluation policy a session threads into each context
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from numbers import Integral, Real
from typing import Any


class ValueKind(Enum):
    """Closed set of value shapes the formatter knows how to print."""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOLEAN = "boolean"
    OTHER = "other"


class Mode(Enum):
    """Evaluation policy for a chain of checks.

    FAIL_FAST: stop evaluating a chain after its first failure (``is_``)
    ACCUMULATE: evaluate every check and record every failure (``check``)
    """

    FAIL_FAST = "fail_fast"
    ACCUMULATE = "accumulate"


@dataclass(frozen=True)
class TypedValue:
    """A value tagged with its kind.

    Attributes:
        kind: The classified kind of ``raw``
        raw: The original, untouched value
    """

    kind: ValueKind
    raw: Any

    @classmethod
    def of(cls, value: Any) -> TypedValue:
        """Classify a value. Booleans are checked first since bool is an int."""
        if isinstance(value, TypedValue):
            return value
        if isinstance(value, bool):
            return cls(ValueKind.BOOLEAN, value)
        if isinstance(value, Integral):
            return cls(ValueKind.INTEGER, value)
        if isinstance(value, (Real, Decimal)):
            return cls(ValueKind.FLOAT, value)
        if isinstance(value, str):
            return cls(ValueKind.TEXT, value)
        return cls(ValueKind.OTHER, value)

    @property
    def is_number(self) -> bool:
        return self.kind in (ValueKind.INTEGER, ValueKind.FLOAT)

    def text(self) -> str:
        """Display form used when the value is substituted into a message."""
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.raw else "false"
        if self.kind is ValueKind.INTEGER:
            return str(int(self.raw))
        if self.kind is ValueKind.FLOAT:
            return _format_float(self.raw)
        if self.kind is ValueKind.TEXT:
            return self.raw
        return _format_other(self.raw)


def _format_float(value: Any) -> str:
    """Plain positional notation, shortest round-trip digits."""
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return str(value)
    decimal = value if isinstance(value, Decimal) else Decimal(repr(float(value)))
    text = format(decimal, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_other(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return ", ".join(
            f"{TypedValue.of(k).text()}: {TypedValue.of(v).text()}"
            for k, v in value.items()
        )
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(TypedValue.of(item).text() for item in value)
    return str(value)
