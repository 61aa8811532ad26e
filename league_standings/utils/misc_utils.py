# league_standings/utils/misc_utils.py
import math
import re
from typing import Any, Optional

WEEK_KEY_PATTERN = re.compile(r"^week(\d+)$")


def coerce_points(value: Any) -> int:
    """Turns free-form point input into a non-negative int, defaulting to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return int(number)


def week_key(week: int) -> str:
    return f"week{week}"


def parse_week_key(key: str) -> Optional[int]:
    """Returns the week number of a 'week<N>' key, or None for any other key."""
    match = WEEK_KEY_PATTERN.match(str(key).strip())
    if not match:
        return None
    return int(match.group(1))
