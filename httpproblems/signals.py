"""Raise problems as exceptions.

The ``raise_*`` functions build a problem and raise it as a ``ProblemError``,
so handlers can abort with a standard error body. A framework-level exception
handler is expected to catch ``ProblemError``, respond with ``exc.status`` and
serialize ``exc.body`` as ``application/problem+json``.
"""
from __future__ import annotations

import logging
from typing import Any, NoReturn

from .domain_errors import ProblemError
from .problems import build_problem

logger = logging.getLogger(__name__)


def raise_problem(
    detail=None,
    status: int = 500,
    type: str | None = None,
    title: str | None = None,
    instance=None,
    **extensions: Any,
) -> NoReturn:
    """Raise a ``ProblemError`` for the given status.

    ``type`` and ``title`` are accepted for parity with ``build_problem()`` but
    the raised body always uses the defaults for ``status``.
    """
    problem = build_problem(
        detail=detail,
        status=status,
        type=None,
        title=None,
        instance=instance,
        **extensions,
    )
    if "detail" in problem:
        message = f"{problem['title']} (HTTP {problem['status']}). {problem['detail']}"
    else:
        message = f"{problem['title']} (HTTP {problem['status']})."

    logger.debug("problem.raise status=%s title=%s", problem["status"], problem["title"])
    raise ProblemError(message=message, status=problem["status"], body=problem)


def raise_bad_request(detail=None, instance=None, **extensions: Any) -> NoReturn:
    raise_problem(detail=detail, status=400, instance=instance, **extensions)


def raise_unauthorized(detail=None, instance=None, **extensions: Any) -> NoReturn:
    raise_problem(detail=detail, status=401, instance=instance, **extensions)


def raise_forbidden(detail=None, instance=None, **extensions: Any) -> NoReturn:
    raise_problem(detail=detail, status=403, instance=instance, **extensions)


def raise_not_found(detail=None, instance=None, **extensions: Any) -> NoReturn:
    raise_problem(detail=detail, status=404, instance=instance, **extensions)


def raise_conflict(detail=None, instance=None, **extensions: Any) -> NoReturn:
    raise_problem(detail=detail, status=409, instance=instance, **extensions)


def raise_internal_server_error(detail=None, instance=None, **extensions: Any) -> NoReturn:
    raise_problem(detail=detail, status=500, instance=instance, **extensions)
