"""RFC 7807 Problem Details construction.

``build_problem()`` creates the "Problem Details" structure defined in
https://tools.ietf.org/html/rfc7807, used for reporting errors from HTTP APIs
in a standard way. Helpers cover the most common problems: 400 Bad Request,
401 Unauthorized, 403 Forbidden, 404 Not Found, 409 Conflict and 500 Internal
Server Error.

``detail``, ``instance``, ``title`` and ``type`` accept a list or tuple in place
of a single value; only the first element is kept. Extension members are
stored exactly as given.
"""
from __future__ import annotations

import logging
import numbers
from typing import Any

from .domain_errors import ProblemValidationError, ValidationErrorKind
from .status_registry import lookup_status

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple)


class Problem(dict):
    """Problem details object.

    A plain ``dict`` underneath, so it can be handed to any JSON serializer;
    the subclass only marks it as a problem.
    """


def _rejected(code: ValidationErrorKind, message: str) -> ProblemValidationError:
    logger.debug("problem.rejected code=%s", code.value)
    return ProblemValidationError(code=code, message=message)


def _is_text(value: Any) -> bool:
    if isinstance(value, str):
        return True
    if isinstance(value, _SEQUENCE_TYPES):
        return all(isinstance(item, str) for item in value)
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _first(value: Any) -> Any:
    """Collapse a list/tuple to its first element; ``None`` when empty."""
    if isinstance(value, _SEQUENCE_TYPES):
        return value[0] if value else None
    return value


def _resolve_status(status: Any) -> int:
    candidates = list(status) if isinstance(status, _SEQUENCE_TYPES) else [status]
    if not candidates or not all(_is_number(item) for item in candidates):
        raise _rejected(
            ValidationErrorKind.INVALID_STATUS_TYPE,
            f"'status' must be an HTTP status code, not '{status}'.",
        )
    value = candidates[0]
    # NOTE: Unknown codes could be reported with an "about:blank" type, which
    # the RFC allows, but an unknown code is far more likely a programmer error.
    code = None
    # Integers go straight to the registry; huge ones do not fit in a float.
    if isinstance(value, numbers.Integral) or float(value).is_integer():
        code = int(value)
    if code is None or lookup_status(code) is None:
        raise _rejected(
            ValidationErrorKind.UNSUPPORTED_STATUS,
            f"Unsupported HTTP status code for reporting problems: '{value}'.",
        )
    return code


def build_problem(
    detail: str | list[str] | tuple[str, ...] | None = None,
    status: int = 500,
    type: str | list[str] | tuple[str, ...] | None = None,
    title: str | list[str] | tuple[str, ...] | None = None,
    instance: str | list[str] | tuple[str, ...] | None = None,
    **extensions: Any,
) -> Problem:
    """Describe a problem with an HTTP request.

    Args:
        detail: Human-readable explanation of this occurrence, if possible.
        status: HTTP status code appropriate for the response.
        type: URL of human-readable documentation for the problem type. When
            ``None`` it is derived from the status code; see
            ``problem_types()`` for the defaults.
        title: Short, human-readable summary of the problem type. When ``None``
            it is derived from the status code. Overrides of either field are
            stored as strings.
        instance: URL identifying this occurrence. Omitted when ``None``.
        **extensions: Extension members added to the problem in the order
            given. Unrecognized keywords always land here.

    Raises:
        ProblemValidationError: when ``detail``/``instance`` are not strings,
            ``status`` is not numeric or is not a supported status code.
    """
    if detail is not None and not _is_text(detail):
        raise _rejected(
            ValidationErrorKind.INVALID_DETAIL,
            f"'detail' must be a string or omitted, not '{detail}'.",
        )
    if instance is not None and not _is_text(instance):
        raise _rejected(
            ValidationErrorKind.INVALID_INSTANCE,
            f"'instance' must be a string or omitted, not '{instance}'.",
        )
    code = _resolve_status(status)
    entry = lookup_status(code)

    # When not present, use standard title/type fields based on the status code.
    title = _first(title)
    title = entry.reason if title is None else str(title)
    type = _first(type)
    type = entry.url if type is None else str(type)

    body = Problem(type=type, title=title, status=code)
    body.update(extensions)
    # Optional fields go last and only when present.
    detail = _first(detail)
    if detail is not None:
        body["detail"] = detail
    instance = _first(instance)
    if instance is not None:
        body["instance"] = instance
    return body


def bad_request(detail=None, instance=None, **extensions: Any) -> Problem:
    return build_problem(detail=detail, status=400, instance=instance, **extensions)


def unauthorized(detail=None, instance=None, **extensions: Any) -> Problem:
    return build_problem(detail=detail, status=401, instance=instance, **extensions)


def forbidden(detail=None, instance=None, **extensions: Any) -> Problem:
    return build_problem(detail=detail, status=403, instance=instance, **extensions)


def not_found(detail=None, instance=None, **extensions: Any) -> Problem:
    return build_problem(detail=detail, status=404, instance=instance, **extensions)


def conflict(detail=None, instance=None, **extensions: Any) -> Problem:
    return build_problem(detail=detail, status=409, instance=instance, **extensions)


def internal_server_error(detail=None, instance=None, **extensions: Any) -> Problem:
    return build_problem(detail=detail, status=500, instance=instance, **extensions)
