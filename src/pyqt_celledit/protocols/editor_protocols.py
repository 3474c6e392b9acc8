"""
Editor ABC contract for in-place cell editing.

Every editor, concrete or composite, implements this contract. A host grid
keeps one unbound *prototype* per column (``Column.editor``) and calls
``new_instance(args)`` on it to build the editor for each edit session.

Session lifecycle, driven by the host:
    new_instance -> load_value -> (is_value_changed | validate |
    serialize_value | apply_value)* -> destroy

The core does not enforce this ordering; it is a precondition on the host.

The show/hide/position hooks are optional. They default to no-ops so that
aggregating editors can delegate to any editor without capability checks.
"""

from abc import abstractmethod
from typing import Any, Optional
import logging

from pyqt_celledit.exceptions import EditorStateError
from .editor_registry import EditorMeta
from .editor_types import Column, EditorArgs, Item, NodeBox
from .validation import ValidationResult

logger = logging.getLogger(__name__)


class Editor(metaclass=EditorMeta):
    """
    ABC for cell editors.

    Constructed without args, an editor is a prototype: it only serves as a
    factory through new_instance(). Constructed with args, it is a session
    editor bound to one cell.
    """

    _is_editor_root = True

    def __init__(self, args: Optional[EditorArgs] = None):
        self.args = args

    def new_instance(self, args: EditorArgs) -> "Editor":
        """
        Build a new, focused editor bound to ``args``.

        Must not mutate ``args.item``.
        """
        editor = type(self)(args)
        logger.debug(f"Created {type(self).__name__} for column {editor.column.id!r}")
        return editor

    @property
    def is_prototype(self) -> bool:
        return self.args is None

    @property
    def column(self) -> Column:
        """Column this session editor is bound to."""
        if self.args is None or self.args.column is None:
            raise EditorStateError(
                f"{type(self).__name__} is not bound to a column; "
                f"use new_instance() to build a session editor"
            )
        return self.args.column

    def validate_with_column(self, value: Any) -> ValidationResult:
        """Run the column's validator (if any) against a live value."""
        validator = self.column.validator
        if validator is not None:
            result = validator(value)
            if not result.is_valid:
                logger.debug(f"Column {self.column.id!r} rejected {value!r}: {result.message}")
                return result
        return ValidationResult.valid()

    @abstractmethod
    def destroy(self) -> None:
        """Release mounted UI resources. Called exactly once per session."""
        pass

    @abstractmethod
    def load_value(self, item: Item) -> None:
        """
        Read the column's field from ``item`` into the control.

        Snapshots the value for is_value_changed and selects the control's
        content for quick overwrite.
        """
        pass

    @abstractmethod
    def serialize_value(self) -> Any:
        """
        Convert the control's state into the value the column expects.

        Side-effect free; never raises on empty or partial input.
        """
        pass

    @abstractmethod
    def apply_value(self, item: Item, value: Any) -> None:
        """Write ``value`` into ``item[column.field]`` with editor coercion."""
        pass

    @property
    @abstractmethod
    def is_value_changed(self) -> bool:
        """True iff the live value differs from the load-time snapshot."""
        pass

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Validate the live, pre-serialization value."""
        pass

    @abstractmethod
    def focus(self) -> None:
        """Move input focus to the primary control."""
        pass

    def show(self) -> None:
        """Show a detached editor. No-op by default."""
        pass

    def hide(self) -> None:
        """Hide a detached editor. No-op by default."""
        pass

    def position(self, box: NodeBox) -> None:
        """Reposition a detached editor. No-op by default."""
        pass
