"""
Widget adapters that wrap Qt controls to implement the widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QComboBox.currentData() vs QCheckBox.isChecked()
- QLineEdit.selectAll() vs QPlainTextEdit.selectAll()
- textChanged vs currentIndexChanged vs stateChanged

All adapters implement a consistent interface via ABCs:
- get_value() / set_value() for all controls
- select_all() for text controls
- connect_change_signal() for all controls
"""

from typing import Any, Callable
from abc import ABCMeta

from PyQt6.QtWidgets import QLineEdit, QComboBox, QCheckBox, QPlainTextEdit
from PyQt6.QtCore import Qt, QObject
from PyQt6.QtGui import QKeyEvent

from .widget_protocols import (
    ValueGettable, ValueSettable, TextSelectable, ChangeSignalEmitter
)

# Qt's metaclass combined with ABCMeta so adapters can inherit both
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, TextSelectable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Single-line text control used by the text, integer, date and percent editors.

    Left/Right arrows are always consumed so the grid does not navigate away
    when the caret reaches either end of the text.
    """

    def get_value(self) -> str:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def select_all(self) -> None:
        """Implement TextSelectable ABC."""
        self.selectAll()

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textChanged.connect(lambda: callback(self.get_value()))

    def keyPressEvent(self, event: QKeyEvent):
        super().keyPressEvent(event)
        if event.key() in (Qt.Key.Key_Left, Qt.Key.Key_Right):
            event.accept()


class YesNoComboBoxAdapter(QComboBox, ValueGettable, ValueSettable,
                           ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Two-option combo box storing "yes"/"no" as item data.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.addItem("Yes", "yes")
        self.addItem("No", "no")

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.currentIndexChanged.connect(lambda: callback(self.get_value()))


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Check box returning bool values, treating None as unchecked.
    """

    def get_value(self) -> bool:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.stateChanged.connect(lambda: callback(self.get_value()))


class PlainTextEditAdapter(QPlainTextEdit, ValueGettable, ValueSettable, TextSelectable,
                           ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Multi-line text control used by the long-text popup editor.
    """

    def get_value(self) -> str:
        """Implement ValueGettable ABC."""
        return self.toPlainText()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setPlainText("" if value is None else str(value))

    def select_all(self) -> None:
        """Implement TextSelectable ABC."""
        self.selectAll()

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textChanged.connect(lambda: callback(self.get_value()))
