"""
Long text editor: an example of a "detached" editor.

The UI is a popup frame on the grid's top-level window rather than a
control inside the cell, so it implements position(), show() and hide().

Keyboard handling inside the text area:
- Ctrl+Enter: commit (same as the Save button)
- Esc: restore the loaded text and cancel (same as the Cancel button)
- Tab / Shift+Tab: ask the grid to navigate to the next / previous cell
"""

from typing import Any, Callable, Optional
import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QPushButton, QVBoxLayout

from pyqt_celledit.protocols import (
    Editor, EditorArgs, Item, NodeBox, ValidationResult, PlainTextEditAdapter, get_editor_config
)
from pyqt_celledit.theming import EditorStyleGenerator
from .editor_support import display_text, store_value, text_value_changed, unmount

logger = logging.getLogger(__name__)

# Offset between the popup frame and the cell it edits
POPUP_OFFSET = 5


class _LongTextInput(PlainTextEditAdapter):
    """Text area that offers key presses to the owning editor first."""

    def __init__(self, key_handler: Callable[[QKeyEvent], bool], parent=None):
        super().__init__(parent)
        self._key_handler = key_handler

    def keyPressEvent(self, event: QKeyEvent):
        if self._key_handler(event):
            event.accept()
            return
        super().keyPressEvent(event)


class LongTextEditor(Editor):
    """Multi-line text editor shown in a popup with Save and Cancel buttons."""

    _editor_id = "long_text"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._wrapper: Optional[QFrame] = None
        self._input: Optional[_LongTextInput] = None
        self._default_value: Any = None
        if args is None:
            return

        config = get_editor_config()
        host = args.container.window() if args.container is not None else None
        self._wrapper = QFrame(host)
        self._wrapper.setObjectName("cellEditorPopup")
        if host is None:
            self._wrapper.setWindowFlags(Qt.WindowType.Tool | Qt.WindowType.FramelessWindowHint)
        self._wrapper.setStyleSheet(
            EditorStyleGenerator(config.color_scheme).generate_popup_style()
        )

        layout = QVBoxLayout(self._wrapper)
        layout.setContentsMargins(POPUP_OFFSET, POPUP_OFFSET, POPUP_OFFSET, POPUP_OFFSET)

        self._input = _LongTextInput(self.handle_key_event, self._wrapper)
        width, height = config.long_text_popup_size
        self._input.setFixedSize(width, height)
        layout.addWidget(self._input)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.save_button = QPushButton("Save", self._wrapper)
        self.cancel_button = QPushButton("Cancel", self._wrapper)
        self.save_button.clicked.connect(self.save)
        self.cancel_button.clicked.connect(self.cancel)
        buttons.addWidget(self.save_button)
        buttons.addWidget(self.cancel_button)
        layout.addLayout(buttons)

        if args.position is not None:
            self.position(args.position)
        self._wrapper.show()
        self._wrapper.raise_()
        self._input.setFocus()
        self._input.select_all()

    def handle_key_event(self, event: QKeyEvent) -> bool:
        """Handle the popup's editing keys. Returns True if the key was consumed."""
        key = event.key()
        modifiers = event.modifiers()
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and modifiers & Qt.KeyboardModifier.ControlModifier:
            self.save()
        elif key == Qt.Key.Key_Escape:
            self.cancel()
        elif key == Qt.Key.Key_Backtab or (key == Qt.Key.Key_Tab and modifiers & Qt.KeyboardModifier.ShiftModifier):
            self._navigate("navigate_prev")
        elif key == Qt.Key.Key_Tab:
            self._navigate("navigate_next")
        else:
            return False
        return True

    def _navigate(self, direction: str) -> None:
        grid = self.args.grid
        if grid is None:
            logger.debug(f"No grid to {direction} from column {self.column.id!r}")
            return
        getattr(grid, direction)()

    def save(self) -> None:
        if self.args.commit_changes is not None:
            self.args.commit_changes()

    def cancel(self) -> None:
        self._input.set_value(display_text(self._default_value))
        if self.args.cancel_changes is not None:
            self.args.cancel_changes()

    def hide(self) -> None:
        self._wrapper.hide()

    def show(self) -> None:
        self._wrapper.show()

    def position(self, box: NodeBox) -> None:
        self._wrapper.move(box.left - POPUP_OFFSET, box.top - POPUP_OFFSET)

    def destroy(self) -> None:
        unmount(self._wrapper)

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
