"""
Concrete cell editors.

Importing this package registers the built-in editors by id:

    text, integer, date, yes_no_select, checkbox, percent_complete, long_text

so a host can build column prototypes with create_editor_prototype("text").
"""

from .text_editors import TextEditor, DateEditor
from .numeric_editors import IntegerEditor, PercentCompleteEditor, PERCENT_PRESETS
from .boolean_editors import YesNoSelectEditor, CheckboxEditor
from .long_text_editor import LongTextEditor
from .composite_editor import CompositeEditor, CompositeEditorOptions
from .validators import RequiredFieldValidator, IntegerRangeValidator

__all__ = [
    "TextEditor",
    "DateEditor",
    "IntegerEditor",
    "PercentCompleteEditor",
    "PERCENT_PRESETS",
    "YesNoSelectEditor",
    "CheckboxEditor",
    "LongTextEditor",
    "CompositeEditor",
    "CompositeEditorOptions",
    "RequiredFieldValidator",
    "IntegerRangeValidator",
]
