"""Integer parsing helpers for the numeric editors.

parse_int_safe follows the usual grid convention of reading the leading
integer of a string ("12a" -> 12) and returning None when there is none.
"""

import re
from typing import Any, Optional

_STRICT_INT = re.compile(r"^[+-]?\d+$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def can_parse_int(value: Any) -> bool:
    """Whether ``value`` is an integer or a string holding exactly one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if not isinstance(value, str):
        return False
    return _STRICT_INT.match(value.strip()) is not None


def parse_int(value: Any) -> int:
    """
    Strictly parse ``value`` as an integer.

    Raises:
        ValueError: If ``value`` is not an integer or integer string
    """
    if not can_parse_int(value):
        raise ValueError(f"Not an integer: {value!r}")
    return int(value.strip()) if isinstance(value, str) else int(value)


def parse_int_safe(value: Any) -> Optional[int]:
    """Best-effort parse of the leading integer of ``value``; None if there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))
