"""
Core editing utilities.

Edit lock, session orchestration, geometry and parsing helpers shared by
the editors and by host grids.
"""

from .edit_lock import EditController, EditLock, get_edit_lock, set_edit_lock, reset_edit_lock
from .edit_session import EditSession
from .geometry import widget_box
from .int_parsing import can_parse_int, parse_int, parse_int_safe

__all__ = [
    "EditController",
    "EditLock",
    "get_edit_lock",
    "set_edit_lock",
    "reset_edit_lock",
    "EditSession",
    "widget_box",
    "can_parse_int",
    "parse_int",
    "parse_int_safe",
]
