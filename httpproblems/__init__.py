"""Build and raise RFC 7807 Problem Details for HTTP APIs."""
from .config import settings
from .domain_errors import (
    HTTPError,
    ProblemError,
    ProblemValidationError,
    ValidationErrorKind,
)
from .problems import (
    Problem,
    bad_request,
    build_problem,
    conflict,
    forbidden,
    internal_server_error,
    not_found,
    unauthorized,
)
from .signals import (
    raise_bad_request,
    raise_conflict,
    raise_forbidden,
    raise_internal_server_error,
    raise_not_found,
    raise_problem,
    raise_unauthorized,
)
from .status_registry import STATUS_ENTRIES, StatusEntry, lookup_status, problem_types

PROBLEM_MEDIA_TYPE = settings.MEDIA_TYPE

__all__ = [
    "HTTPError",
    "PROBLEM_MEDIA_TYPE",
    "Problem",
    "ProblemError",
    "ProblemValidationError",
    "STATUS_ENTRIES",
    "StatusEntry",
    "ValidationErrorKind",
    "bad_request",
    "build_problem",
    "conflict",
    "forbidden",
    "internal_server_error",
    "lookup_status",
    "not_found",
    "problem_types",
    "raise_bad_request",
    "raise_conflict",
    "raise_forbidden",
    "raise_internal_server_error",
    "raise_not_found",
    "raise_problem",
    "raise_unauthorized",
    "unauthorized",
]
