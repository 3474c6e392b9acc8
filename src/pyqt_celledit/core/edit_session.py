"""
Single cell edit session.

Drives one editor through its lifecycle on behalf of a host grid:

    session = EditSession(column, item, container, lock=lock)
    session.open()            # takes the lock, builds and loads the editor
    ...user types...
    if session.commit():      # validate -> serialize -> apply -> destroy
        refresh_row()

The session is also the EditController registered with the lock, so a host
that only knows the lock can still commit or cancel the active edit.
"""

from typing import Any, Optional
import logging

from PyQt6.QtWidgets import QWidget

from pyqt_celledit.exceptions import EditorStateError
from pyqt_celledit.protocols import Column, Editor, EditorArgs, Item, NodeBox, ValidationResult
from .edit_lock import EditController, EditLock, get_edit_lock

logger = logging.getLogger(__name__)


class EditSession:
    """
    Edit session for one cell (or one composite group).

    Usable as a context manager; leaving the block cancels a session that is
    still open.
    """

    def __init__(
        self,
        column: Column,
        item: Item,
        container: Optional[QWidget] = None,
        lock: Optional[EditLock] = None,
        grid: Any = None,
        position: Optional[NodeBox] = None,
        grid_position: Optional[NodeBox] = None,
    ):
        self.column = column
        self.item = item
        self.container = container
        self.grid = grid
        self.position = position
        self.grid_position = grid_position
        self._lock = lock if lock is not None else get_edit_lock()
        self._controller = EditController(
            commit_current_edit=self.commit,
            cancel_current_edit=self.cancel,
        )
        self.editor: Optional[Editor] = None
        self.last_validation: Optional[ValidationResult] = None

    @property
    def lock(self) -> EditLock:
        return self._lock

    @property
    def is_open(self) -> bool:
        return self.editor is not None

    def open(self) -> Editor:
        """
        Take the lock, build the editor and load the item into it.

        Raises:
            EditorStateError: If the session is already open or the column has no editor
            EditLockError: If another session holds the lock
        """
        if self.editor is not None:
            raise EditorStateError("Edit session is already open")
        if self.column.editor is None:
            raise EditorStateError(f"Column {self.column.id!r} has no editor")

        self._lock.activate(self._controller)
        args = EditorArgs(
            container=self.container,
            column=self.column,
            item=self.item,
            grid=self.grid,
            position=self.position,
            grid_position=self.grid_position,
            commit_changes=self.commit,
            cancel_changes=self.cancel,
        )
        editor = None
        try:
            editor = self.column.editor.new_instance(args)
            editor.load_value(self.item)
        except Exception:
            if editor is not None:
                editor.destroy()
            self._lock.deactivate(self._controller)
            raise

        self.editor = editor
        logger.debug(f"Opened edit session on column {self.column.id!r}")
        return editor

    def commit(self) -> bool:
        """
        Validate and, on success, write the editor's value into the item.

        An unchanged editor is closed without validation, so an untouched
        blank cell never blocks the grid.

        Returns:
            False if validation failed (the editor stays open and is refocused),
            True otherwise
        """
        if self.editor is None:
            return True

        if not self.editor.is_value_changed:
            self.last_validation = None
            self._close()
            return True

        result = self.editor.validate()
        self.last_validation = result
        if not result.is_valid:
            logger.debug(f"Commit on column {self.column.id!r} rejected: {result.message}")
            self.editor.focus()
            return False

        self.editor.apply_value(self.item, self.editor.serialize_value())
        logger.debug(f"Committed column {self.column.id!r}")
        self._close()
        return True

    def cancel(self) -> bool:
        """Discard the edit without touching the item."""
        if self.editor is None:
            return True
        self._close()
        logger.debug(f"Cancelled edit on column {self.column.id!r}")
        return True

    def _close(self) -> None:
        editor, self.editor = self.editor, None
        editor.destroy()
        self._lock.deactivate(self._controller)

    def __enter__(self) -> "EditSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.editor is not None:
            self.cancel()
