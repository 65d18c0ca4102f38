"""
Command errors, modelled as values.

Handlers return these through the Effect failure channel; nothing here is
raised. The HTTP layer reads `http_status` and `to_response()` to build the
error reply.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, List, Union


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationError:
    """One or more invalid input fields, always reported together."""

    tag: ClassVar[str] = "Validation"
    http_status: ClassVar[int] = 400

    errors: List[FieldError] = field(default_factory=list)

    def to_response(self) -> Dict[str, Any]:
        return {"_tag": self.tag, "errors": [asdict(e) for e in self.errors]}


@dataclass(frozen=True)
class InvalidIdError:
    """The identifier string is malformed."""

    tag: ClassVar[str] = "InvalidId"
    http_status: ClassVar[int] = 400

    message: str

    def to_response(self) -> Dict[str, Any]:
        return {"_tag": self.tag, "message": self.message}


@dataclass(frozen=True)
class NotFoundError:
    """No todo exists for a well-formed identifier."""

    tag: ClassVar[str] = "NotFound"
    http_status: ClassVar[int] = 404

    def to_response(self) -> Dict[str, Any]:
        return {"_tag": self.tag}


@dataclass(frozen=True)
class InvalidStateError:
    """
    The todo is not in a state the requested transition accepts.

    `expected` names the accepted state; several accepted states are joined
    with "|" (e.g. "Active|Completed").
    """

    tag: ClassVar[str] = "InvalidState"
    http_status: ClassVar[int] = 400

    expected: str
    actual: str

    def to_response(self) -> Dict[str, Any]:
        return {"_tag": self.tag, "expected": self.expected, "actual": self.actual}


CommandError = Union[ValidationError, InvalidIdError, NotFoundError, InvalidStateError]
