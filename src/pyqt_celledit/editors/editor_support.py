"""Helpers shared by the concrete editors: mounting controls and comparing values."""

from typing import Any, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_celledit.protocols import Item, LineEditAdapter, get_editor_config
from pyqt_celledit.theming import EditorStyleGenerator


def mount(control: QWidget, container: Optional[QWidget]) -> None:
    """Place ``control`` in ``container``, through its layout when it has one."""
    if container is None:
        return
    layout = container.layout()
    if layout is not None:
        layout.addWidget(control)
    else:
        control.setParent(container)
        control.setGeometry(container.rect())
    control.show()


def unmount(control: QWidget) -> None:
    """Detach ``control`` from its container and schedule its deletion."""
    control.hide()
    control.setParent(None)
    control.deleteLater()


def create_inline_input(container: Optional[QWidget], object_name: str) -> LineEditAdapter:
    """Build a styled line edit mounted in ``container``, focused and selected."""
    line_edit = LineEditAdapter(container)
    line_edit.setObjectName(object_name)
    style = EditorStyleGenerator(get_editor_config().color_scheme)
    line_edit.setStyleSheet(style.generate_inline_input_style())
    mount(line_edit, container)
    line_edit.setFocus()
    line_edit.select_all()
    return line_edit


def display_text(value: Any) -> str:
    return "" if value is None else str(value)


def text_value_changed(live: str, snapshot: Any) -> bool:
    """
    Dirty check for text-like editors.

    An empty control over an unset snapshot is not a change.
    """
    if live == "" and snapshot is None:
        return False
    return live != display_text(snapshot)


def store_value(item: Item, field: str, value: Any) -> None:
    """
    Write ``value`` into ``item[field]``.

    An empty value ("" or None) over an unset field leaves the item as it
    is, mirroring text_value_changed.
    """
    if (value is None or value == "") and item.get(field) is None:
        return
    item[field] = value


def coerce_bool(value: Any) -> bool:
    """Truthiness as grids store it: True, "true"/"yes" (any case), or a non-zero int."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes")
    if isinstance(value, int):
        return value != 0
    return False
