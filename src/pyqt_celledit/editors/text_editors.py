"""
Single-line text editors: plain text and dates.

Both keep the cell value as a string and compare it against the load-time
snapshot by string equality.
"""

from typing import Any, Optional
import logging

from PyQt6.QtCore import Qt, QDate
from PyQt6.QtWidgets import QCalendarWidget, QHBoxLayout, QToolButton, QWidget

from pyqt_celledit.protocols import (
    Editor, EditorArgs, Item, NodeBox, ValidationResult, LineEditAdapter, get_editor_config
)
from .editor_support import (
    create_inline_input, display_text, mount, store_value, text_value_changed, unmount
)

logger = logging.getLogger(__name__)

# Vertical distance between the top of the edited cell and the calendar popup
CALENDAR_OFFSET = 30


class TextEditor(Editor):
    """Free text editor. Runs the column validator against the raw text."""

    _editor_id = "text"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._input: Optional[LineEditAdapter] = None
        self._default_value: Any = None
        if args is None:
            return
        self._input = create_inline_input(args.container, "editor-text")

    @property
    def value(self) -> str:
        return self._input.get_value()

    @value.setter
    def value(self, value: Any) -> None:
        self._input.set_value(value)

    def destroy(self) -> None:
        unmount(self._input)

    def focus(self) -> None:
        self._input.setFocus()

    def load_value(self, item: Item) -> None:
        self._default_value = item.get(self.column.field)
        self._input.set_value(display_text(self._default_value))
        self._input.select_all()

    def serialize_value(self) -> str:
        return self._input.get_value()

    def apply_value(self, item: Item, value: Any) -> None:
        store_value(item, self.column.field, value)

    @property
    def is_value_changed(self) -> bool:
        return text_value_changed(self._input.get_value(), self._default_value)

    def validate(self) -> ValidationResult:
        return self.validate_with_column(self._input.get_value())


class DateEditor(Editor):
    """
    Date editor: a text input with a calendar button.

    The button opens a calendar popup that follows the typed text and writes
    the picked date back in EditorConfig.date_format. The popup is the only
    detached part, so show/hide/position only act while it is open.
    """

    _editor_id = "date"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._wrapper: Optional[QWidget] = None
        self._input: Optional[LineEditAdapter] = None
        self._calendar: Optional[QCalendarWidget] = None
        self._default_value: Any = None
        self.calendar_button: Optional[QToolButton] = None
        self.calendar_open = False
        if args is None:
            return

        self._wrapper = QWidget(args.container)
        layout = QHBoxLayout(self._wrapper)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._input = create_inline_input(self._wrapper, "editor-date")
        self._input.connect_change_signal(self._sync_calendar)

        self.calendar_button = QToolButton(self._wrapper)
        self.calendar_button.setObjectName("editor-date-button")
        self.calendar_button.setText("...")
        self.calendar_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.calendar_button.clicked.connect(self.open_calendar)
        layout.addWidget(self.calendar_button)

        mount(self._wrapper, args.container)
        self._input.setFocus()
        self._input.select_all()

    @property
    def calendar(self) -> Optional[QCalendarWidget]:
        return self._calendar

    def open_calendar(self) -> None:
        """Show the calendar popup below the cell, preselecting the current date."""
        if self._calendar is None:
            self._calendar = QCalendarWidget()
            self._calendar.setWindowFlag(Qt.WindowType.Popup)
            self._calendar.clicked.connect(self.pick_date)
        self.calendar_open = True
        self._sync_calendar(self._input.get_value())
        if self.args.position is not None:
            self.position(self.args.position)
        self._calendar.show()
        logger.debug(f"Opened calendar for column {self.column.id!r}")

    def close_calendar(self) -> None:
        if self._calendar is not None:
            self._calendar.hide()
        self.calendar_open = False

    def _sync_calendar(self, text: str) -> None:
        if not self.calendar_open:
            return
        date = QDate.fromString(text, get_editor_config().date_format)
        if date.isValid():
            self._calendar.setSelectedDate(date)

    def pick_date(self, date: QDate) -> None:
        self._input.set_value(date.toString(get_editor_config().date_format))
        self.close_calendar()
        self._input.setFocus()

    def destroy(self) -> None:
        if self._calendar is not None:
            self.close_calendar()
            self._calendar.deleteLater()
            self._calendar = None
        unmount(self._wrapper)

    def show(self) -> None:
        if self.calendar_open:
            self._calendar.show()

    def hide(self) -> None:
        if self.calendar_open:
            self._calendar.hide()

    def position(self, box: NodeBox) -> None:
        if not self.calendar_open:
            return
        self._calendar.move(box.left, box.top + CALENDAR_OFFSET)

    def focus(self) -> None:
        self._input.setFocus()

    def load_value(self, item: Item) -> None:
        self._default_value = item.get(self.column.field)
        self._input.set_value(display_text(self._default_value))
        self._input.select_all()

    def serialize_value(self) -> str:
        return self._input.get_value()

    def apply_value(self, item: Item, value: Any) -> None:
        store_value(item, self.column.field, value)

    @property
    def is_value_changed(self) -> bool:
        return text_value_changed(self._input.get_value(), self._default_value)

    def validate(self) -> ValidationResult:
        return ValidationResult.valid()
