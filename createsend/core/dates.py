"""Createsend: Date Format Translation.

The API emits timestamps as ``YYYY-MM-DD HH:MM:SS`` without a zone and
expects campaign send dates as ``YYYY-MM-DD HH:MM``. Callers get RFC3339.
"""

import re
from datetime import datetime, timezone

API_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SEND_DATE_FORMAT = "%Y-%m-%d %H:%M"
SEND_IMMEDIATELY = "Immediately"
RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3}|\.\d{6})?(Z|[+-]\d{2}:\d{2})$"
)


def parse_api_date(value: str) -> datetime:
    """Parse an API timestamp into an aware UTC datetime.

    Already-normalized RFC3339 strings are accepted too, so a record
    dumped by name and validated again keeps its date.
    """
    try:
        parsed = datetime.strptime(value, API_DATE_FORMAT)
    except ValueError:
        if not RFC3339_PATTERN.match(value):
            raise ValueError(f"Unrecognized API date: {value!r}") from None
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_rfc3339(value: datetime) -> str:
    """Render a datetime as RFC3339, using ``Z`` for UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.isoformat(timespec="seconds")
    if rendered.endswith("+00:00"):
        rendered = rendered[: -len("+00:00")] + "Z"
    return rendered


def normalize_api_date(value: str) -> str:
    """Translate an API timestamp into RFC3339. Empty stays empty."""
    if not value:
        return ""
    return to_rfc3339(parse_api_date(value))


def format_send_date(value: datetime | None) -> str:
    """Format a campaign send date, or ``Immediately`` when none is given."""
    if value is None:
        return SEND_IMMEDIATELY
    return value.strftime(SEND_DATE_FORMAT)
