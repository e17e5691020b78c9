"""Timestamp parsing utilities."""
from datetime import datetime, timezone


def parse_timestamp(s: str) -> datetime:
    """
    Parse a timestamp string into a timezone-aware datetime.

    Supports:
    - ISO format with "Z" suffix: "2021-10-27T20:29:54Z"
    - ISO format with offset: "2021-11-27T20:29:54+05:30"
    - ISO format without timezone: "2021-10-27T20:29:54" (assumed UTC)
    - Space-separated: "2021-10-27 20:29:54"
    - Date only: "2021-10-27"

    Raises:
        ValueError: If timestamp cannot be parsed
    """
    if not s:
        raise ValueError("Empty timestamp string")

    s = s.strip()

    # fromisoformat on older interpreters rejects a trailing "Z"
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        if " " in s and "T" not in s:
            dt = datetime.fromisoformat(s.replace(" ", "T"))
        else:
            raise ValueError(
                f"Unable to parse timestamp: {s}. Expected ISO format "
                "(e.g., '2021-10-27T20:29:54Z' or '2021-11-27T20:29:54+05:30')"
            )

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_utc(dt: datetime) -> datetime:
    """Return an aware datetime converted to UTC; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
