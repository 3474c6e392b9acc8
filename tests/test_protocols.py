"""Tests for the editor contract, value types, registry and widget adapters."""

import pytest


def test_validation_result_factories():
    """Test ValidationResult valid/invalid constructors."""
    from pyqt_celledit.protocols import ValidationResult

    ok = ValidationResult.valid()
    assert ok.is_valid
    assert ok.message is None
    assert ok.errors == []

    failed = ValidationResult.invalid("nope")
    assert not failed.is_valid
    assert failed.message == "nope"


def test_node_box_from_rect():
    """Test NodeBox derives bottom/right from top/left and size."""
    from pyqt_celledit.protocols import NodeBox

    box = NodeBox.from_rect(top=10, left=20, width=100, height=30)
    assert box.bottom == 40
    assert box.right == 120
    assert box.visible


def test_prototype_has_no_column():
    """Test an unbound prototype refuses session operations."""
    from pyqt_celledit.editors import TextEditor
    from pyqt_celledit.exceptions import EditorStateError

    prototype = TextEditor()
    assert prototype.is_prototype
    with pytest.raises(EditorStateError):
        prototype.column


def test_new_instance_builds_fresh_editor(container):
    """Test new_instance returns a distinct, bound editor without touching the item."""
    from pyqt_celledit.editors import TextEditor
    from pyqt_celledit.protocols import Column, EditorArgs

    prototype = TextEditor()
    column = Column(id="title", field="title", editor=prototype)
    item = {"title": "Task 1"}

    first = prototype.new_instance(EditorArgs(container=container, column=column, item=item))
    second = prototype.new_instance(EditorArgs(container=container, column=column, item=item))

    assert first is not prototype
    assert first is not second
    assert first.column is column
    assert item == {"title": "Task 1"}
    first.destroy()
    second.destroy()


def test_builtin_editors_registered():
    """Test importing the editors package registers every built-in id."""
    import pyqt_celledit.editors as editors
    from pyqt_celledit.protocols import EDITOR_IMPLEMENTATIONS, get_editor_class

    assert get_editor_class("text") is editors.TextEditor
    assert get_editor_class("integer") is editors.IntegerEditor
    assert get_editor_class("date") is editors.DateEditor
    assert get_editor_class("yes_no_select") is editors.YesNoSelectEditor
    assert get_editor_class("checkbox") is editors.CheckboxEditor
    assert get_editor_class("percent_complete") is editors.PercentCompleteEditor
    assert get_editor_class("long_text") is editors.LongTextEditor
    assert editors.CompositeEditor not in EDITOR_IMPLEMENTATIONS.values()


def test_unknown_editor_id_fails_loud():
    """Test resolving an unregistered id raises."""
    import pyqt_celledit.editors  # noqa: F401
    from pyqt_celledit.exceptions import EditorStateError
    from pyqt_celledit.protocols import get_editor_class

    with pytest.raises(EditorStateError):
        get_editor_class("spreadsheet")


def test_create_editor_prototype():
    """Test prototypes built from the registry are unbound."""
    from pyqt_celledit.editors import CheckboxEditor
    from pyqt_celledit.protocols import create_editor_prototype

    prototype = create_editor_prototype("checkbox")
    assert isinstance(prototype, CheckboxEditor)
    assert prototype.is_prototype


def test_editor_hook_capabilities():
    """Test the registry records which editors override show/hide/position."""
    from pyqt_celledit.editors import DateEditor, LongTextEditor, TextEditor
    from pyqt_celledit.protocols import get_editor_capabilities, list_editors_with_capability

    assert get_editor_capabilities(TextEditor) == set()
    assert get_editor_capabilities(LongTextEditor) == {"show", "hide", "position"}
    assert get_editor_capabilities(DateEditor) == {"show", "hide", "position"}
    assert set(list_editors_with_capability("position")) >= {DateEditor, LongTextEditor}


def test_line_edit_adapter(qapp):
    """Test LineEditAdapter implements protocols."""
    from pyqt_celledit.protocols import LineEditAdapter, TextSelectable, ValueGettable, ValueSettable

    adapter = LineEditAdapter()
    assert isinstance(adapter, ValueGettable)
    assert isinstance(adapter, ValueSettable)
    assert isinstance(adapter, TextSelectable)

    adapter.set_value(42)
    assert adapter.get_value() == "42"
    adapter.set_value(None)
    assert adapter.get_value() == ""


def test_yes_no_combo_box_adapter(qapp):
    """Test YesNoComboBoxAdapter stores yes/no as item data."""
    from pyqt_celledit.protocols import YesNoComboBoxAdapter

    adapter = YesNoComboBoxAdapter()
    assert adapter.count() == 2
    adapter.set_value("no")
    assert adapter.get_value() == "no"
    assert adapter.currentText() == "No"
    adapter.set_value("maybe")
    assert adapter.get_value() is None


def test_change_signal_reports_new_value(qapp):
    """Test ChangeSignalEmitter passes the new value to the callback."""
    from pyqt_celledit.protocols import CheckBoxAdapter

    seen = []
    adapter = CheckBoxAdapter()
    adapter.connect_change_signal(seen.append)
    adapter.set_value(True)
    assert seen == [True]


def test_editor_config_defaults_and_override():
    """Test get_editor_config falls back to defaults and honors set_editor_config."""
    from pyqt_celledit.protocols import EditorConfig, get_editor_config, set_editor_config

    assert get_editor_config().validation_failed_msg == "Some of the fields have failed validation"
    assert get_editor_config().checkbox_legacy_dirty_check is False

    set_editor_config(EditorConfig(integer_error_msg="Whole numbers only"))
    assert get_editor_config().integer_error_msg == "Whole numbers only"
