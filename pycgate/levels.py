"""C-Bus brightness level conversion.

C-Bus transmits brightness as a raw byte (0-255) while C-Gate users think in
percent (0-100). The mapping is the vendor's lookup table, not a linear
formula: raw 43 is 17% but raw 44 is already 18%.
"""

from __future__ import annotations

from .const import (
    PERCENT_LEVEL_MAX,
    PERCENT_LEVEL_MIN,
    RAW_LEVEL_MAX,
    RAW_LEVEL_MIN,
    RAW_TO_PERCENT,
)
from .exceptions import InvalidType, OutOfRange


def _check_level(value: object, low: int, high: int, name: str) -> int:
    # bool is an int subclass but never a level
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidType(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    if not low <= value <= high:
        raise OutOfRange(f"{name} {value} is outside {low}-{high}")
    return value


def raw_to_percent(raw: int) -> int:
    """Convert a raw C-Bus level (0-255) to percent (0-100).

    Raises:
        InvalidType: raw is not an int (numeric strings included)
        OutOfRange: raw is outside 0-255
    """
    return RAW_TO_PERCENT[_check_level(raw, RAW_LEVEL_MIN, RAW_LEVEL_MAX, "raw level")]


def percent_to_raw(percent: int) -> int:
    """Convert a percent level (0-100) to the raw C-Bus level.

    Picks the raw value nearest to percent * 2.55, rounding halves up, so
    raw_to_percent(percent_to_raw(p)) == p for every p.
    """
    percent = _check_level(percent, PERCENT_LEVEL_MIN, PERCENT_LEVEL_MAX, "percent level")
    return (percent * RAW_LEVEL_MAX + PERCENT_LEVEL_MAX // 2) // PERCENT_LEVEL_MAX
