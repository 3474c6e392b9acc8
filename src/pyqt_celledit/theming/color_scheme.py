"""
Color scheme for cell editor controls.

Light defaults that read well over a typical grid canvas. Applications
override individual colors through EditorConfig.color_scheme.
"""

from dataclasses import dataclass
from typing import Tuple

from PyQt6.QtGui import QColor


@dataclass
class EditorColorScheme:
    """
    Semantic colors for cell editors.
    """

    # Inline inputs
    input_bg: Tuple[int, int, int] = (255, 255, 255)       # #ffffff
    input_text: Tuple[int, int, int] = (0, 0, 0)           # #000000
    input_border: Tuple[int, int, int] = (0, 0, 0)         # #000000
    input_focus_border: Tuple[int, int, int] = (0, 120, 212)  # #0078d4

    # Detached popups
    popup_bg: Tuple[int, int, int] = (255, 255, 255)       # #ffffff
    popup_border: Tuple[int, int, int] = (128, 128, 128)   # gray

    # Percent picker
    picker_bg: Tuple[int, int, int] = (240, 240, 240)      # #f0f0f0
    button_normal_bg: Tuple[int, int, int] = (225, 225, 225)
    button_hover_bg: Tuple[int, int, int] = (210, 210, 210)
    button_text: Tuple[int, int, int] = (0, 0, 0)

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        """
        Convert RGB tuple to QColor object.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            QColor: Qt color object
        """
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"
