from __future__ import annotations

from typing import Any

from ..core.exceptions import MalformedTimeError


def time_to_minutes(value: Any) -> int:
    """Convert an "HH:MM" clock string into minutes since midnight.

    Raises MalformedTimeError unless the value splits on ':' into exactly two
    numeric parts. Callers comparing times should treat that as "undecidable".
    """
    if not isinstance(value, str):
        raise MalformedTimeError(f"Invalid time value: {value!r}")

    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise MalformedTimeError(f"Invalid time string: {value!r}")

    hours, minutes = int(parts[0]), int(parts[1])
    return hours * 60 + minutes


def minutes_difference(a: str, b: str) -> int:
    """Signed difference a - b in minutes (same-day, no wraparound)."""
    return time_to_minutes(a) - time_to_minutes(b)
