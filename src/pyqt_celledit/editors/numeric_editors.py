"""
Integer-family editors: plain integers and percent-complete.

Both validate parseability themselves, before any column validator, and
serialize to the decimal string of a best-effort parse. Out-of-range input
is rejected by validate(); nothing is clamped.
"""

from typing import Any, Optional
import logging

from PyQt6.QtWidgets import QFrame, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from pyqt_celledit.core import can_parse_int, parse_int, parse_int_safe
from pyqt_celledit.protocols import (
    Editor, EditorArgs, Item, ValidationResult, LineEditAdapter, get_editor_config
)
from pyqt_celledit.theming import EditorStyleGenerator
from .editor_support import (
    create_inline_input, display_text, mount, store_value, text_value_changed, unmount
)

logger = logging.getLogger(__name__)

# Quick-pick buttons of the percent-complete picker: (label, value)
PERCENT_PRESETS = (
    ("Not started", 0),
    ("In Progress", 50),
    ("Complete", 100),
)


def _serialize_int(text: str) -> str:
    parsed = parse_int_safe(text)
    return "" if parsed is None else str(parsed)


class IntegerEditor(Editor):
    """Integer editor backed by a line edit."""

    _editor_id = "integer"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._input: Optional[LineEditAdapter] = None
        self._default_value: Any = None
        if args is None:
            return
        self._input = create_inline_input(args.container, "editor-integer")

    def destroy(self) -> None:
        unmount(self._input)

    def focus(self) -> None:
        self._input.setFocus()

    def load_value(self, item: Item) -> None:
        self._default_value = item.get(self.column.field)
        self._input.set_value(display_text(self._default_value))
        self._input.select_all()

    def serialize_value(self) -> str:
        return _serialize_int(self._input.get_value())

    def apply_value(self, item: Item, value: Any) -> None:
        store_value(item, self.column.field, parse_int_safe(value))

    @property
    def is_value_changed(self) -> bool:
        return text_value_changed(self._input.get_value(), self._default_value)

    def validate(self) -> ValidationResult:
        text = self._input.get_value()
        if not can_parse_int(text):
            logger.debug(f"Column {self.column.id!r}: {text!r} is not an integer")
            return ValidationResult.invalid(get_editor_config().integer_error_msg)
        return self.validate_with_column(text)


class PercentCompleteEditor(Editor):
    """
    Percent-complete editor: a line edit plus quick-pick buttons.

    Accepts integers within EditorConfig.percent_minimum..percent_maximum.
    """

    _editor_id = "percent_complete"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._wrapper: Optional[QWidget] = None
        self._input: Optional[LineEditAdapter] = None
        self._picker: Optional[QFrame] = None
        self._default_value: Any = None
        if args is None:
            return

        self._wrapper = QWidget(args.container)
        layout = QHBoxLayout(self._wrapper)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._input = create_inline_input(self._wrapper, "editor-percentcomplete")
        self._picker = self._create_picker()
        layout.addWidget(self._picker)

        mount(self._wrapper, args.container)
        self._input.setFocus()
        self._input.select_all()

    def _create_picker(self) -> QFrame:
        picker = QFrame(self._wrapper)
        picker.setObjectName("editor-percentcomplete-picker")
        style = EditorStyleGenerator(get_editor_config().color_scheme)
        picker.setStyleSheet(style.generate_percent_picker_style())

        buttons = QVBoxLayout(picker)
        buttons.setContentsMargins(2, 2, 2, 2)
        buttons.setSpacing(1)
        for label, value in PERCENT_PRESETS:
            button = QPushButton(label, picker)
            button.clicked.connect(lambda _checked=False, v=value: self.pick(v))
            buttons.addWidget(button)
        return picker

    def pick(self, value: int) -> None:
        """Write a quick-pick value into the input."""
        self._input.set_value(value)
        self._input.setFocus()

    def destroy(self) -> None:
        unmount(self._wrapper)

    def focus(self) -> None:
        self._input.setFocus()

    def load_value(self, item: Item) -> None:
        self._default_value = item.get(self.column.field)
        self._input.set_value(display_text(self._default_value))
        self._input.select_all()

    def serialize_value(self) -> str:
        return _serialize_int(self._input.get_value())

    def apply_value(self, item: Item, value: Any) -> None:
        store_value(item, self.column.field, parse_int_safe(value))

    @property
    def is_value_changed(self) -> bool:
        text = self._input.get_value()
        if text == "" and self._default_value is None:
            return False
        return parse_int_safe(text) != parse_int_safe(self._default_value)

    def validate(self) -> ValidationResult:
        config = get_editor_config()
        text = self._input.get_value()
        if not can_parse_int(text):
            return ValidationResult.invalid(config.percent_error_msg)
        if not config.percent_minimum <= parse_int(text) <= config.percent_maximum:
            logger.debug(f"Column {self.column.id!r}: {text!r} is out of range")
            return ValidationResult.invalid(config.percent_error_msg)
        return self.validate_with_column(text)
