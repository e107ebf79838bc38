# src/kubedash/utils/date_utils.py
"""Timestamp conversions between the Kubernetes API, Prometheus and the dashboard wire format."""

from datetime import datetime, timezone
from typing import Optional, Union


def as_utc(dt: datetime) -> datetime:
    """Returns an aware UTC datetime; naive values are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_rfc3339(value: Optional[str]) -> Optional[datetime]:
    """
    Parses an RFC 3339 timestamp such as the Kubernetes ``creationTimestamp``.

    Returns None for empty or unparsable input instead of raising, so callers
    copying raw metadata never fail on a malformed timestamp.
    """
    if not value:
        return None
    # fromisoformat() only understands the 'Z' designator from Python 3.11 on.
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(value))
    except ValueError:
        return None


def format_rfc3339(dt: datetime) -> str:
    """Renders a datetime the way the Kubernetes API does, e.g. ``2024-01-02T03:04:05Z``."""
    return as_utc(dt).isoformat().replace("+00:00", "Z")


def from_epoch(seconds: Union[int, float, str]) -> datetime:
    """Converts a Unix timestamp (Prometheus sample time) to an aware UTC datetime."""
    return datetime.fromtimestamp(float(seconds), tz=timezone.utc)
