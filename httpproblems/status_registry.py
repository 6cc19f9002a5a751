"""Default titles and types for the HTTP status codes problems may carry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusEntry:
    code: int
    reason: str
    url: str


# Adapted from the table at https://tools.ietf.org/html/rfc7231#section-6.1
STATUS_ENTRIES: tuple[StatusEntry, ...] = (
    StatusEntry(400, "Bad Request", "https://tools.ietf.org/html/rfc7231#section-6.5.1"),
    StatusEntry(401, "Unauthorized", "https://tools.ietf.org/html/rfc7235#section-3.1"),
    StatusEntry(402, "Payment Required", "https://tools.ietf.org/html/rfc7231#section-6.5.2"),
    StatusEntry(403, "Forbidden", "https://tools.ietf.org/html/rfc7231#section-6.5.3"),
    StatusEntry(404, "Not Found", "https://tools.ietf.org/html/rfc7231#section-6.5.4"),
    StatusEntry(405, "Method Not Allowed", "https://tools.ietf.org/html/rfc7231#section-6.5.5"),
    StatusEntry(406, "Not Acceptable", "https://tools.ietf.org/html/rfc7231#section-6.5.6"),
    StatusEntry(407, "Proxy Authentication Required", "https://tools.ietf.org/html/rfc7235#section-3.2"),
    StatusEntry(408, "Request Timeout", "https://tools.ietf.org/html/rfc7231#section-6.5.7"),
    StatusEntry(409, "Conflict", "https://tools.ietf.org/html/rfc7231#section-6.5.8"),
    StatusEntry(410, "Gone", "https://tools.ietf.org/html/rfc7231#section-6.5.9"),
    StatusEntry(411, "Length Required", "https://tools.ietf.org/html/rfc7231#section-6.5.10"),
    StatusEntry(412, "Precondition Failed", "https://tools.ietf.org/html/rfc7232#section-4.2"),
    StatusEntry(413, "Payload Too Large", "https://tools.ietf.org/html/rfc7231#section-6.5.11"),
    StatusEntry(414, "URI Too Long", "https://tools.ietf.org/html/rfc7231#section-6.5.12"),
    StatusEntry(415, "Unsupported Media Type", "https://tools.ietf.org/html/rfc7231#section-6.5.13"),
    StatusEntry(416, "Range Not Satisfiable", "https://tools.ietf.org/html/rfc7233#section-4.4"),
    StatusEntry(417, "Expectation Failed", "https://tools.ietf.org/html/rfc7231#section-6.5.14"),
    StatusEntry(426, "Upgrade Required", "https://tools.ietf.org/html/rfc7231#section-6.5.15"),
    StatusEntry(500, "Internal Server Error", "https://tools.ietf.org/html/rfc7231#section-6.6.1"),
    StatusEntry(501, "Not Implemented", "https://tools.ietf.org/html/rfc7231#section-6.6.2"),
    StatusEntry(502, "Bad Gateway", "https://tools.ietf.org/html/rfc7231#section-6.6.3"),
    StatusEntry(503, "Service Unavailable", "https://tools.ietf.org/html/rfc7231#section-6.6.4"),
    StatusEntry(504, "Gateway Timeout", "https://tools.ietf.org/html/rfc7231#section-6.6.5"),
    StatusEntry(505, "HTTP Version Not Supported", "https://tools.ietf.org/html/rfc7231#section-6.6.6"),
)

_BY_CODE: dict[int, StatusEntry] = {entry.code: entry for entry in STATUS_ENTRIES}


def lookup_status(code: int) -> StatusEntry | None:
    return _BY_CODE.get(code)


def problem_types() -> list[dict[str, object]]:
    """List the default type and title used for each supported status code.

    Rows are shaped the way they appear in a built problem, so they can be
    dropped straight into API documentation.
    """
    return [
        {"status": entry.code, "type": entry.url, "title": entry.reason}
        for entry in STATUS_ENTRIES
    ]
