"""Base configuration for cell editors.

Provides hooks for applications to customize editor messages, ranges and
styling without subclassing the editors.
"""

from typing import Optional, Tuple
from dataclasses import dataclass, field

from pyqt_celledit.theming import EditorColorScheme


@dataclass
class EditorConfig:
    """Configuration for cell editor behavior.

    Attributes:
        validation_failed_msg: Aggregate message of a failed composite validation
        integer_error_msg: Message when integer input does not parse
        percent_error_msg: Message when percent input does not parse or is out of range
        percent_minimum: Lowest accepted percent-complete value
        percent_maximum: Highest accepted percent-complete value
        checkbox_legacy_dirty_check: Compare the checkbox's serialized string
            against the raw snapshot (always reports a change for bool items)
        date_format: Qt date format the date editor's calendar writes
        long_text_popup_size: (width, height) of the long-text text area
        color_scheme: Colors used for editor stylesheets
    """

    validation_failed_msg: str = "Some of the fields have failed validation"
    integer_error_msg: str = "Please enter a valid integer"
    percent_error_msg: str = "Please enter a valid positive number"
    percent_minimum: int = 0
    percent_maximum: int = 100
    checkbox_legacy_dirty_check: bool = False
    date_format: str = "MM/dd/yyyy"
    long_text_popup_size: Tuple[int, int] = (250, 80)
    color_scheme: EditorColorScheme = field(default_factory=EditorColorScheme)


# Global config instance (set by application)
_editor_config: Optional[EditorConfig] = None


def set_editor_config(config: Optional[EditorConfig]) -> None:
    """Set the global editor configuration.

    Args:
        config: EditorConfig instance, or None to restore defaults
    """
    global _editor_config
    _editor_config = config


def get_editor_config() -> EditorConfig:
    """Get the current editor configuration.

    Returns:
        Current EditorConfig or default if not set
    """
    if _editor_config is None:
        return EditorConfig()
    return _editor_config
