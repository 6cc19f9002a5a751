"""Exception primitives for problem construction and signalling."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .problems import Problem


class ValidationErrorKind(str, Enum):
    INVALID_DETAIL = "invalid_detail"
    INVALID_INSTANCE = "invalid_instance"
    INVALID_STATUS_TYPE = "invalid_status_type"
    UNSUPPORTED_STATUS = "unsupported_status"


@dataclass(eq=False)
class ProblemValidationError(ValueError):
    """Raised when a problem cannot be built from the supplied fields."""

    code: ValidationErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class HTTPError(Exception):
    """Base class for errors that map onto an HTTP response."""


@dataclass(eq=False)
class ProblemError(HTTPError):
    """Error carrying an RFC 7807 body and the status to respond with."""

    message: str
    status: int
    body: Problem = field(repr=False)

    def __str__(self) -> str:
        return self.message
