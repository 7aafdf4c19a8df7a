"""Error aggregation for vouch sessions.

Validation failures are data, not exceptions: each failing field gets an
ErrorRecord with its ordered messages, and a session collects records in an
ErrorSet. ValidationErrors is the error-shaped result a session hands back
from ``error()``; callers may raise it when they want exception flow.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


class VouchError(Exception):
    """Base class for all vouch exceptions."""
    pass


class CatalogError(VouchError):
    """A locale file or message mapping could not be loaded."""
    pass


class ContextBoundError(VouchError):
    """An evaluation context was passed to a second session."""
    pass


class SerializationError(VouchError):
    """An error set could not be serialized."""
    pass


# Serializer signature: (ErrorSet) -> bytes, raising on failure
Serializer = Callable[["ErrorSet"], bytes]


@dataclass
class ErrorRecord:
    """Ordered failure messages for one field.

    Attributes:
        name: Field name, the key in the owning ErrorSet
        title: Display title used when the messages were rendered
        value: The value that failed
        messages: Rendered messages in the order the checks failed
    """

    name: str
    title: str
    value: Any = None
    messages: list[str] = field(default_factory=list)

    def add(self, message: str) -> None:
        self.messages.append(message)

    def extend(self, other: ErrorRecord) -> None:
        """Append another record's messages, keeping this record's identity."""
        self.messages.extend(other.messages)



class ErrorSet(Mapping[str, ErrorRecord]):
    """Field name -> ErrorRecord, in insertion order.

    The set is valid exactly when it holds no records. Adding a record under
    a name that is already present extends the existing record.
    """

    def __init__(self) -> None:
        self._records: dict[str, ErrorRecord] = {}

    def __getitem__(self, name: str) -> ErrorRecord:
        return self._records[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ErrorSet({self.to_dict()!r})"

    @property
    def valid(self) -> bool:
        return not self._records

    def add(self, record: ErrorRecord) -> ErrorRecord:
        """Merge a record into the set and return the stored record."""
        existing = self._records.get(record.name)
        if existing is None:
            stored = ErrorRecord(
                name=record.name,
                title=record.title,
                value=record.value,
                messages=list(record.messages),
            )
            self._records[record.name] = stored
            return stored
        existing.extend(record)
        return existing

    def add_message(self, name: str, title: str, message: str, value: Any = None) -> ErrorRecord:
        """Record a single message for a field."""
        return self.add(ErrorRecord(name=name, title=title, value=value, messages=[message]))

    def merge(self, other: ErrorSet) -> None:
        if other is self:
            return
        for record in other.values():
            self.add(record)

    def messages(self, name: str) -> list[str]:
        """Messages for a field, empty if the field has none."""
        record = self._records.get(name)
        return list(record.messages) if record else []

    def to_dict(self) -> dict[str, list[str]]:
        """Default shape: field name -> ordered messages."""
        return {name: list(record.messages) for name, record in self._records.items()}


def default_serializer(errors: ErrorSet) -> bytes:
    """Serialize an ErrorSet to the default JSON shape."""
    return json.dumps(errors.to_dict(), ensure_ascii=False).encode("utf-8")


class ValidationErrors(VouchError):
    """Error-shaped result of an invalid session.

    Attributes:
        errors: The session's ErrorSet
        serializer: Function used by ``to_json``; the default shape if None
    """

    def __init__(self, errors: ErrorSet, serializer: Serializer | None = None):
        self.errors = errors
        self.serializer = serializer
        super().__init__(self._summary())

    def _summary(self) -> str:
        count = len(self.errors)
        names = ", ".join(self.errors)
        noun = "field" if count == 1 else "fields"
        return f"Validation failed for {count} {noun}: {names}"

    def to_dict(self) -> dict[str, list[str]]:
        return self.errors.to_dict()

    def to_json(self) -> bytes:
        """Serialize the errors with the configured serializer.

        Raises:
            SerializationError: If the serializer fails or does not return bytes
        """
        serializer = self.serializer or default_serializer
        try:
            payload = serializer(self.errors)
        except SerializationError:
            raise
        except Exception as exc:
            raise SerializationError(f"Could not serialize validation errors: {exc}") from exc
        if isinstance(payload, str):
            return payload.encode("utf-8")
        if not isinstance(payload, (bytes, bytearray)):
            raise SerializationError(
                f"Serializer returned {type(payload).__name__}, expected bytes"
            )
        return bytes(payload)
