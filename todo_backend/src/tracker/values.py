from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .effect import Err, Ok, Result

TODO_ID_PREFIX = "todo-"
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

_ID_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TodoId:
    """
    Opaque identifier of a todo item.

    Format: todo-<epoch millis>-<7 base36 chars>. Only the prefix is checked
    when parsing external input.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.startswith(TODO_ID_PREFIX):
            raise ValueError("Invalid TodoId")

    @classmethod
    def generate(cls) -> "TodoId":
        suffix = "".join(random.choices(_ID_SUFFIX_ALPHABET, k=7))
        return cls(f"{TODO_ID_PREFIX}{time.time_ns() // 1_000_000}-{suffix}")

    @classmethod
    def parse(cls, raw: str) -> Result["TodoId", str]:
        if not isinstance(raw, str) or not raw.startswith(TODO_ID_PREFIX):
            return Err("Invalid TodoId")
        return Ok(cls(raw))

    def unwrap(self) -> str:
        return self.value


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TodoTitle:
    """Trimmed, non-empty title of at most 100 characters."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.value != self.value.strip():
            raise ValueError("Title required")
        if len(self.value) > TITLE_MAX_LENGTH:
            raise ValueError("Title too long")

    @classmethod
    def create(cls, raw: Optional[str]) -> Result["TodoTitle", str]:
        """
        Validate a raw title.

        Whitespace is trimmed first; the empty result and anything above the
        length bound are rejected with a message suitable for display.
        """
        trimmed = (raw or "").strip()
        if not trimmed:
            return Err("Title required")
        if len(trimmed) > TITLE_MAX_LENGTH:
            return Err("Title too long")
        return Ok(cls(trimmed))

    def unwrap(self) -> str:
        return self.value


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TodoDescription:
    """Optional free text attached to a todo; absent is modelled as None."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip() or len(self.value) > DESCRIPTION_MAX_LENGTH:
            raise ValueError("Invalid description")

    @classmethod
    def create(cls, raw: Optional[str]) -> Result[Optional["TodoDescription"], str]:
        """
        Validate a raw description.

        None, "" and whitespace-only input succeed with None. The length bound
        applies to the raw input, the stored value is trimmed.
        """
        if raw is None or not raw.strip():
            return Ok(None)
        if len(raw) > DESCRIPTION_MAX_LENGTH:
            return Err("Description too long")
        return Ok(cls(raw.strip()))

    def unwrap(self) -> str:
        return self.value


# PUBLIC_INTERFACE
class Priority(str, Enum):
    """Closed set of priorities. Missing input means MEDIUM."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def create(cls, raw: Optional[str]) -> Result["Priority", str]:
        if not raw:
            return Ok(cls.MEDIUM)
        for member in cls:
            if member.value == raw:
                return Ok(member)
        return Err("Invalid priority")

    def unwrap(self) -> str:
        return self.value


# PUBLIC_INTERFACE
@dataclass(frozen=True, order=True)
class Timestamp:
    """An aware UTC instant. Obtain one through Timestamp.now()."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise ValueError("Timestamp requires an aware datetime")

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(datetime.now(timezone.utc))

    def to_iso(self) -> str:
        """ISO-8601 in UTC with millisecond precision, e.g. 2025-01-31T13:45:00.123Z."""
        utc = self.value.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def unwrap(self) -> datetime:
        return self.value
