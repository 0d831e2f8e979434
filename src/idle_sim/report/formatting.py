"""Shared text formatting for reports."""

from __future__ import annotations

import math


def format_duration_hms(seconds: float) -> str:
    """Render a duration as ``HH:MM:SS``.

    Fractional seconds are truncated.  Hours are not wrapped at 24, so a
    25-hour duration renders as ``25:00:00``.

    >>> format_duration_hms(3661.9)
    '01:01:01'
    """
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Cannot format duration {seconds!r}")
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_amount(value: float) -> str:
    """Two-decimal rendering used for counts and gold."""
    return f"{value:.2f}"
