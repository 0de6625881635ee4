"""Calendar-date conversion between the backend's tuple encoding and ISO strings.

The backend transports dates as ``[year, month, day]`` with a 1-indexed
month. The console edits and displays them as ``YYYY-MM-DD``. Conversion
goes through :class:`datetime.date` only, never through a timestamp, so no
timezone can shift the day.
"""

from collections.abc import Sequence
from datetime import date

DateParts = tuple[int, int, int]


def date_to_string(parts: Sequence[int]) -> str:
    """Render ``[year, month, day]`` as an ISO calendar date string.

    Raises ``ValueError`` for sequences of the wrong length or impossible dates.
    """
    if isinstance(parts, (str, bytes)) or len(parts) != 3:
        raise ValueError(f"expected [year, month, day], got {parts!r}")
    year, month, day = (int(p) for p in parts)
    return date(year, month, day).isoformat()


def date_from_string(text: str) -> DateParts:
    """Parse ``YYYY-MM-DD`` into ``(year, month, day)``."""
    parsed = date.fromisoformat(text.strip())
    return parsed.year, parsed.month, parsed.day


def normalize_date(value: object) -> str:
    """Accept either wire encoding (tuple or ISO string) and return the ISO string."""
    if isinstance(value, str):
        return date_to_string(date_from_string(value))
    if isinstance(value, Sequence):
        return date_to_string(value)
    raise ValueError(f"unsupported date value {value!r}")
