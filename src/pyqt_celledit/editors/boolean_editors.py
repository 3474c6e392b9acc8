"""
Boolean editors: yes/no select and checkbox.

Both serialize to "true"/"false" and coerce back to bool in apply_value.
They are always valid.

The checkbox keeps an opt-in legacy dirty check
(EditorConfig.checkbox_legacy_dirty_check) that compares its serialized
string against the raw bool snapshot. That comparison never matches, so a
freshly loaded checkbox reports a change. The default compares like types.
"""

from typing import Any, Optional

from pyqt_celledit.protocols import (
    Editor, EditorArgs, Item, ValidationResult,
    CheckBoxAdapter, YesNoComboBoxAdapter, get_editor_config
)
from pyqt_celledit.theming import EditorStyleGenerator
from .editor_support import coerce_bool, mount, unmount


def _serialize_bool(value: bool) -> str:
    return "true" if value else "false"


class YesNoSelectEditor(Editor):
    """Yes/No combo box editor."""

    _editor_id = "yes_no_select"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._select: Optional[YesNoComboBoxAdapter] = None
        self._default_value: Any = None
        if args is None:
            return
        self._select = YesNoComboBoxAdapter(args.container)
        self._select.setObjectName("editor-yesno")
        style = EditorStyleGenerator(get_editor_config().color_scheme)
        self._select.setStyleSheet(style.generate_inline_input_style())
        mount(self._select, args.container)
        self._select.setFocus()

    def destroy(self) -> None:
        unmount(self._select)

    def focus(self) -> None:
        self._select.setFocus()

    def load_value(self, item: Item) -> None:
        self._default_value = item.get(self.column.field)
        self._select.set_value("yes" if coerce_bool(self._default_value) else "no")

    def serialize_value(self) -> str:
        return _serialize_bool(self._select.get_value() == "yes")

    def apply_value(self, item: Item, value: Any) -> None:
        item[self.column.field] = coerce_bool(value)

    @property
    def is_value_changed(self) -> bool:
        loaded = "yes" if coerce_bool(self._default_value) else "no"
        return self._select.get_value() != loaded

    def validate(self) -> ValidationResult:
        return ValidationResult.valid()


class CheckboxEditor(Editor):
    """Checkbox editor."""

    _editor_id = "checkbox"

    def __init__(self, args: Optional[EditorArgs] = None):
        super().__init__(args)
        self._checkbox: Optional[CheckBoxAdapter] = None
        self._default_value: Optional[bool] = None
        self._legacy_dirty_check = get_editor_config().checkbox_legacy_dirty_check
        if args is None:
            return
        self._checkbox = CheckBoxAdapter(args.container)
        self._checkbox.setObjectName("editor-checkbox")
        mount(self._checkbox, args.container)
        self._checkbox.setFocus()

    @property
    def checked(self) -> bool:
        return self._checkbox.get_value()

    @checked.setter
    def checked(self, value: bool) -> None:
        self._checkbox.set_value(value)

    def destroy(self) -> None:
        unmount(self._checkbox)

    def focus(self) -> None:
        self._checkbox.setFocus()

    def load_value(self, item: Item) -> None:
        self._default_value = coerce_bool(item.get(self.column.field))
        self._checkbox.set_value(self._default_value)

    def serialize_value(self) -> str:
        return _serialize_bool(self._checkbox.get_value())

    def apply_value(self, item: Item, value: Any) -> None:
        item[self.column.field] = coerce_bool(value)

    @property
    def is_value_changed(self) -> bool:
        if self._legacy_dirty_check:
            # str vs bool: never equal
            return self.serialize_value() != self._default_value
        return self._checkbox.get_value() != self._default_value

    def validate(self) -> ValidationResult:
        return ValidationResult.valid()
