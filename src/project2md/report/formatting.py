"""Human-readable formatting of sizes and timestamps."""

from datetime import datetime
from typing import Optional

_UNITS = ["B", "KB", "MB", "GB", "TB"]

MODIFIED_FORMAT = "%Y-%m-%d %H:%M"
GENERATED_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_bytes(size: int) -> str:
    """Format a byte count with a 1024 base, rounded to at most two decimals.

    Trailing zeros are trimmed and TB is the largest unit.

    Example:
        >>> format_bytes(50)
        '50 B'
        >>> format_bytes(1536)
        '1.5 KB'
        >>> format_bytes(1048576)
        '1 MB'
        >>> format_bytes(1234567)
        '1.18 MB'
    """
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"


def format_modified(moment: Optional[datetime]) -> Optional[str]:
    """Format a modification time to minute precision, keeping None for unknown times."""
    if moment is None:
        return None
    return moment.strftime(MODIFIED_FORMAT)


def format_generated(moment: datetime) -> str:
    return moment.strftime(GENERATED_FORMAT)
