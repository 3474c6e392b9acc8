"""Tests for core utilities: integer parsing, geometry, edit lock and edit session."""

from unittest.mock import MagicMock

import pytest


def test_can_parse_int():
    """Test strict integer recognition."""
    from pyqt_celledit.core import can_parse_int

    assert can_parse_int("42")
    assert can_parse_int(" -7 ")
    assert can_parse_int(5)
    assert not can_parse_int("12a")
    assert not can_parse_int("")
    assert not can_parse_int("4.2")
    assert not can_parse_int(None)
    assert not can_parse_int(True)


def test_parse_int_strict():
    """Test parse_int raises on malformed input."""
    from pyqt_celledit.core import parse_int

    assert parse_int("+15") == 15
    with pytest.raises(ValueError):
        parse_int("abc")


def test_parse_int_safe_reads_leading_integer():
    """Test best-effort parsing never raises."""
    from pyqt_celledit.core import parse_int_safe

    assert parse_int_safe("12a") == 12
    assert parse_int_safe("  8 days") == 8
    assert parse_int_safe("abc") is None
    assert parse_int_safe("") is None
    assert parse_int_safe(None) is None
    assert parse_int_safe(9) == 9


def test_widget_box(qapp):
    """Test widget_box reports the widget's geometry."""
    from PyQt6.QtWidgets import QWidget
    from pyqt_celledit.core import widget_box

    parent = QWidget()
    parent.resize(300, 200)
    widget = QWidget(parent)
    widget.setGeometry(10, 20, 100, 30)
    box = widget_box(widget)
    assert (box.left, box.top, box.width, box.height) == (10, 20, 100, 30)
    assert (box.right, box.bottom) == (110, 50)
    assert box.visible


def _controller(commit=True, cancel=True):
    from pyqt_celledit.core import EditController

    return EditController(
        commit_current_edit=MagicMock(return_value=commit),
        cancel_current_edit=MagicMock(return_value=cancel),
    )


def test_edit_lock_single_holder():
    """Test only one controller can hold the lock."""
    from pyqt_celledit.core import EditLock
    from pyqt_celledit.exceptions import EditLockError

    lock = EditLock()
    first, second = _controller(), _controller()

    assert not lock.is_active()
    lock.activate(first)
    lock.activate(first)  # re-activating the holder is allowed
    assert lock.is_active()
    assert lock.is_active(first)
    assert not lock.is_active(second)

    with pytest.raises(EditLockError):
        lock.activate(second)
    with pytest.raises(EditLockError):
        lock.deactivate(second)

    lock.deactivate(first)
    assert not lock.is_active()
    lock.activate(second)
    assert lock.is_active(second)


def test_edit_lock_delegates_commit_and_cancel():
    """Test commit/cancel go to the active controller, and succeed when idle."""
    from pyqt_celledit.core import EditLock

    lock = EditLock()
    assert lock.commit_current_edit()
    assert lock.cancel_current_edit()

    controller = _controller(commit=False)
    lock.activate(controller)
    assert lock.commit_current_edit() is False
    assert lock.cancel_current_edit() is True
    controller.commit_current_edit.assert_called_once()
    controller.cancel_current_edit.assert_called_once()


def test_global_edit_lock_is_shared():
    """Test get_edit_lock returns the same instance until reset."""
    from pyqt_celledit.core import EditLock, get_edit_lock, reset_edit_lock, set_edit_lock

    assert get_edit_lock() is get_edit_lock()
    custom = EditLock()
    set_edit_lock(custom)
    assert get_edit_lock() is custom
    reset_edit_lock()
    assert get_edit_lock() is not custom


def _name_column(**kwargs):
    from pyqt_celledit.editors import TextEditor
    from pyqt_celledit.protocols import Column

    return Column(id="name", field="name", editor=TextEditor(), **kwargs)


def test_session_commit_applies_changed_value(container):
    """Test a successful commit writes the value, destroys the editor and releases the lock."""
    from pyqt_celledit.core import EditLock, EditSession

    lock = EditLock()
    item = {"name": "Make a list"}
    session = EditSession(_name_column(), item, container, lock=lock)

    editor = session.open()
    assert lock.is_active()
    editor.value = "Check it twice"

    assert session.commit()
    assert item == {"name": "Check it twice"}
    assert not session.is_open
    assert not lock.is_active()


def test_session_commit_skips_unchanged_value(container):
    """Test an unchanged blank cell is not written back."""
    from pyqt_celledit.core import EditLock, EditSession

    item = {}
    session = EditSession(_name_column(), item, container, lock=EditLock())
    session.open()

    assert session.commit()
    assert item == {}


def test_session_commit_rejected_by_validator(container):
    """Test a failed validation keeps the session open and the lock held."""
    from pyqt_celledit.core import EditLock, EditSession
    from pyqt_celledit.editors import RequiredFieldValidator

    lock = EditLock()
    item = {"name": "Find out who's nice"}
    column = _name_column(validator=RequiredFieldValidator())
    session = EditSession(column, item, container, lock=lock)
    editor = session.open()
    editor.value = ""

    assert session.commit() is False
    assert session.is_open
    assert lock.is_active()
    assert session.last_validation.message == "This is a required field"
    assert item == {"name": "Find out who's nice"}


def test_session_cancel_leaves_item(container):
    """Test cancel discards the edit."""
    from pyqt_celledit.core import EditLock, EditSession

    lock = EditLock()
    item = {"name": "Make a list"}
    session = EditSession(_name_column(), item, container, lock=lock)
    editor = session.open()
    editor.value = "Something else"

    assert session.cancel()
    assert item == {"name": "Make a list"}
    assert not lock.is_active()


def test_second_session_blocked_by_lock(container):
    """Test the lock refuses a second concurrent session."""
    from pyqt_celledit.core import EditLock, EditSession
    from pyqt_celledit.exceptions import EditLockError

    lock = EditLock()
    first = EditSession(_name_column(), {"name": "a"}, container, lock=lock)
    second = EditSession(_name_column(), {"name": "b"}, container, lock=lock)

    first.open()
    with pytest.raises(EditLockError):
        second.open()
    assert not second.is_open

    first.cancel()
    second.open()
    assert lock.is_active()
    second.cancel()


def test_lock_commits_active_session(container):
    """Test the host can commit through the lock alone."""
    from pyqt_celledit.core import EditLock, EditSession

    lock = EditLock()
    item = {"name": "old"}
    session = EditSession(_name_column(), item, container, lock=lock)
    editor = session.open()
    editor.value = "new"

    assert lock.commit_current_edit()
    assert item == {"name": "new"}
    assert not lock.is_active()


def test_session_context_manager_cancels(container):
    """Test leaving the with-block cancels an open session."""
    from pyqt_celledit.core import EditLock, EditSession

    lock = EditLock()
    item = {"name": "old"}
    with EditSession(_name_column(), item, container, lock=lock) as session:
        session.editor.value = "new"
        assert lock.is_active()

    assert item == {"name": "old"}
    assert not lock.is_active()


def test_session_requires_column_editor(container):
    """Test opening a session on a read-only column fails loud."""
    from pyqt_celledit.core import EditLock, EditSession
    from pyqt_celledit.exceptions import EditorStateError
    from pyqt_celledit.protocols import Column

    session = EditSession(Column(id="id", field="id"), {"id": 1}, container, lock=EditLock())
    with pytest.raises(EditorStateError):
        session.open()


def test_session_uses_global_lock_by_default(container):
    """Test sessions fall back to the process-wide lock."""
    from pyqt_celledit.core import EditSession, get_edit_lock

    session = EditSession(_name_column(), {"name": "x"}, container)
    assert session.lock is get_edit_lock()
    session.open()
    assert get_edit_lock().is_active()
    session.cancel()


@pytest.mark.parametrize("editor_name", ["IntegerEditor", "PercentCompleteEditor"])
def test_session_commits_untouched_blank_number_cell(container, editor_name):
    """Test committing an untouched blank numeric cell closes the session without validating."""
    import pyqt_celledit.editors as editors
    from pyqt_celledit.core import EditLock, EditSession
    from pyqt_celledit.protocols import Column

    lock = EditLock()
    item = {}
    column = Column(id="duration", field="duration", editor=getattr(editors, editor_name)())
    session = EditSession(column, item, container, lock=lock)
    editor = session.open()
    assert not editor.is_value_changed
    assert not editor.validate().is_valid

    assert session.commit()
    assert not session.is_open
    assert not lock.is_active()
    assert session.last_validation is None
    assert item == {}


def test_session_open_releases_lock_when_load_fails(container):
    """Test a failing load_value destroys the mounted editor and frees the lock."""
    from pyqt_celledit.core import EditLock, EditSession
    from pyqt_celledit.editors import TextEditor
    from pyqt_celledit.protocols import Column, LineEditAdapter

    class BrokenLoadEditor(TextEditor):
        def load_value(self, item):
            raise KeyError("name")

    lock = EditLock()
    column = Column(id="name", field="name", editor=BrokenLoadEditor())
    session = EditSession(column, {"name": "x"}, container, lock=lock)

    with pytest.raises(KeyError):
        session.open()
    assert not session.is_open
    assert not lock.is_active()
    assert container.findChild(LineEditAdapter) is None
