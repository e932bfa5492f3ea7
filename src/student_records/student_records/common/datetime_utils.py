from __future__ import annotations

from datetime import datetime, timezone


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into a naive UTC datetime.

    Accepts a trailing 'Z' and date-only strings. Offsets are converted to UTC.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def now_utc() -> datetime:
    """Current UTC time (naive, as stored in DATETIME columns).

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
