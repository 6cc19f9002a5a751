from __future__ import annotations

import logging

import pytest

from httpproblems.domain_errors import ProblemValidationError, ValidationErrorKind
from httpproblems.problems import (
    Problem,
    bad_request,
    build_problem,
    conflict,
    forbidden,
    internal_server_error,
    not_found,
    unauthorized,
)
from httpproblems.status_registry import STATUS_ENTRIES, lookup_status


def assert_problem(body, status: int = 500) -> None:
    entry = lookup_status(status)
    assert isinstance(body, Problem)
    assert isinstance(body["type"], str)
    assert isinstance(body["title"], str)
    assert body["status"] == status
    assert body["title"] == entry.reason
    assert body["type"] == entry.url


def test_problem_defaults() -> None:
    body = build_problem()

    assert_problem(body)
    assert "detail" not in body
    assert "instance" not in body
    assert list(body) == ["type", "title", "status"]


@pytest.mark.parametrize("entry", STATUS_ENTRIES, ids=lambda entry: str(entry.code))
def test_every_registered_status_gets_default_title_and_type(entry) -> None:
    assert_problem(build_problem(status=entry.code), entry.code)


def test_optional_fields_are_included_when_given() -> None:
    body = build_problem(detail="Unknown", instance="/widgets/101")

    assert body["detail"] == "Unknown"
    assert body["instance"] == "/widgets/101"
    assert list(body) == ["type", "title", "status", "detail", "instance"]


def test_empty_detail_string_is_kept() -> None:
    assert build_problem(detail="")["detail"] == ""


def test_vector_inputs_keep_first_element_only() -> None:
    body = build_problem(
        detail=["Unknown", "Known"],
        instance=["/w/101", "/w/102", "/w/103"],
        status=[404, 410],
    )

    assert_problem(body, 404)
    assert body["detail"] == "Unknown"
    assert body["instance"] == "/w/101"


def test_title_and_type_overrides_truncate_but_extensions_do_not() -> None:
    body = build_problem(
        title=["Too", "Long"],
        type=["about:this", "about:that"],
        custom=[1, 2, 3],
    )

    assert body["title"] == "Too"
    assert body["type"] == "about:this"
    assert body["custom"] == [1, 2, 3]


def test_scalar_title_and_type_overrides() -> None:
    body = build_problem(status=409, title="Widget exists", type="https://example.com/probs/dup")

    assert body["title"] == "Widget exists"
    assert body["type"] == "https://example.com/probs/dup"
    assert body["status"] == 409


def test_non_string_title_and_type_overrides_are_stored_as_strings() -> None:
    body = build_problem(title=42, type=[7, 8])

    assert body["title"] == "42"
    assert body["type"] == "7"


def test_empty_sequences_fall_back_to_defaults_or_absence() -> None:
    body = build_problem(title=[], type=(), detail=[], instance=())

    assert_problem(body)
    assert "detail" not in body
    assert "instance" not in body


def test_problem_can_be_extended() -> None:
    body = build_problem(random_code=46)

    assert_problem(body)
    assert body["random_code"] == 46


def test_extensions_sit_between_status_and_optional_fields() -> None:
    body = build_problem(detail="d", instance="/i", first=1, second=2)

    assert list(body) == ["type", "title", "status", "first", "second", "detail", "instance"]


def test_misspelled_detail_becomes_extension() -> None:
    body = build_problem(details="Unknown")

    assert body["details"] == "Unknown"
    assert "detail" not in body


def test_float_status_is_coerced_to_int() -> None:
    body = build_problem(status=404.0)

    assert body["status"] == 404
    assert type(body["status"]) is int


@pytest.mark.parametrize(
    ("kwargs", "code", "match"),
    [
        ({"detail": 42}, ValidationErrorKind.INVALID_DETAIL, "'detail' must be a string"),
        ({"detail": ["ok", 1]}, ValidationErrorKind.INVALID_DETAIL, "'detail' must be a string"),
        ({"instance": 42}, ValidationErrorKind.INVALID_INSTANCE, "'instance' must be a string"),
        ({"status": "none"}, ValidationErrorKind.INVALID_STATUS_TYPE, "'status' must be an HTTP status"),
        ({"status": True}, ValidationErrorKind.INVALID_STATUS_TYPE, "'status' must be an HTTP status"),
        ({"status": []}, ValidationErrorKind.INVALID_STATUS_TYPE, "'status' must be an HTTP status"),
        ({"status": 499}, ValidationErrorKind.UNSUPPORTED_STATUS, "Unsupported HTTP status code"),
        ({"status": 200}, ValidationErrorKind.UNSUPPORTED_STATUS, "Unsupported HTTP status code"),
        ({"status": 404.5}, ValidationErrorKind.UNSUPPORTED_STATUS, "Unsupported HTTP status code"),
        ({"status": 10**400}, ValidationErrorKind.UNSUPPORTED_STATUS, "Unsupported HTTP status code"),
        ({"status": float("inf")}, ValidationErrorKind.UNSUPPORTED_STATUS, "Unsupported HTTP status code"),
    ],
)
def test_invalid_fields_are_rejected(kwargs, code, match) -> None:
    with pytest.raises(ProblemValidationError, match=match) as exc:
        build_problem(**kwargs)

    assert exc.value.code == code
    assert isinstance(exc.value, ValueError)


def test_detail_is_checked_before_status() -> None:
    with pytest.raises(ProblemValidationError) as exc:
        build_problem(detail=42, instance=42, status="none")

    assert exc.value.code == ValidationErrorKind.INVALID_DETAIL


def test_rejection_is_logged_at_debug(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="httpproblems.problems")

    with pytest.raises(ProblemValidationError):
        build_problem(status=499)

    assert "problem.rejected code=unsupported_status" in caplog.text


def test_problem_helpers() -> None:
    assert_problem(bad_request(), 400)
    assert_problem(unauthorized(), 401)
    assert_problem(forbidden(), 403)
    assert_problem(not_found(), 404)
    assert_problem(conflict(), 409)
    assert_problem(internal_server_error(), 500)


def test_problem_helpers_forward_optional_fields_and_extensions() -> None:
    body = not_found("Widget 101 does not exist.", "/widgets/101", widget_id=101)

    assert_problem(body, 404)
    assert body["detail"] == "Widget 101 does not exist."
    assert body["instance"] == "/widgets/101"
    assert body["widget_id"] == 101
