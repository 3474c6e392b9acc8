"""
Editor contract, value types and widget adapters.

ABC-based contracts that every cell editor and every wrapped Qt control
implements, plus the registries and configuration hooks around them.
"""

from .validation import ValidationResult, ValidationErrorSource, Validator
from .editor_types import Item, NodeBox, Column, EditorArgs
from .editor_registry import (
    EditorMeta,
    EDITOR_IMPLEMENTATIONS,
    get_editor_class,
    create_editor_prototype,
    get_editor_capabilities,
    list_editors_with_capability,
)
from .editor_protocols import Editor
from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    TextSelectable,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    LineEditAdapter,
    YesNoComboBoxAdapter,
    CheckBoxAdapter,
    PlainTextEditAdapter,
    PyQtWidgetMeta,
)
from .editor_config import EditorConfig, set_editor_config, get_editor_config

__all__ = [
    "ValidationResult",
    "ValidationErrorSource",
    "Validator",
    "Item",
    "NodeBox",
    "Column",
    "EditorArgs",
    "EditorMeta",
    "EDITOR_IMPLEMENTATIONS",
    "get_editor_class",
    "create_editor_prototype",
    "get_editor_capabilities",
    "list_editors_with_capability",
    "Editor",
    "ValueGettable",
    "ValueSettable",
    "TextSelectable",
    "ChangeSignalEmitter",
    "LineEditAdapter",
    "YesNoComboBoxAdapter",
    "CheckBoxAdapter",
    "PlainTextEditAdapter",
    "PyQtWidgetMeta",
    "EditorConfig",
    "set_editor_config",
    "get_editor_config",
]
