"""
Theming and styling for cell editors.

Color schemes and stylesheet generation for inline editor controls
and detached editor popups.
"""

from .color_scheme import EditorColorScheme
from .style_generator import EditorStyleGenerator

__all__ = [
    "EditorColorScheme",
    "EditorStyleGenerator",
]
