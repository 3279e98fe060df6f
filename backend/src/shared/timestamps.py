"""Helpers for the serialized timestamps carried by backend payloads.

The backend formats times as RFC 3339 (``2006-01-02T15:04:05Z07:00``).
Payload fields keep them as opaque strings; parsing is opt-in.
"""

from datetime import UTC, datetime

from shared.exceptions import ValidationError


def parse_timestamp(value: str | None, field: str = "timestamp") -> datetime | None:
    """Parse an RFC 3339 / ISO-8601 string into a datetime.

    Returns None for an absent value. A string without an offset is
    assumed to be UTC.

    Raises:
        ValidationError: if the string is not a valid timestamp.
    """
    if value is None:
        return None

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid {field}: {value!r}",
            [{"field": field, "message": str(exc)}],
        ) from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
