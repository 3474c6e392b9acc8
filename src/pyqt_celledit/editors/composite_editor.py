"""
Composite editor: several column editors behind one Editor.

Each column that declares an editor gets its own sub-editor, mounted in an
externally supplied container rather than in the grid cell. The host grid
drives a single load/validate/commit/cancel cycle, which fans out to all
sub-editors; dirty state, validation and focus are aggregated back.

Sub-editors live at their column's index; columns without an editor leave
a hole (None). Lifecycle operations iterate from the last column to the
first, so after validate() ``first_invalid_editor`` is the failing
sub-editor with the lowest column index.

Detached editors are not supported: they position themselves relative to
the active cell, not to the supplied container.

Example:
    composite = CompositeEditor.prepare(
        columns,
        {"title": title_box, "duration": duration_box},
        CompositeEditorOptions(destroy=dialog.close),
    )
    editor = composite.new_instance(EditorArgs(item=item, commit_changes=save))
    editor.load_value(item)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional
import logging

from PyQt6.QtWidgets import QWidget

from pyqt_celledit.core import widget_box
from pyqt_celledit.exceptions import EditorStateError
from pyqt_celledit.protocols import (
    Column, Editor, EditorArgs, Item, NodeBox,
    ValidationErrorSource, ValidationResult, get_editor_config
)

logger = logging.getLogger(__name__)


def _default_validation_failed_msg() -> str:
    return get_editor_config().validation_failed_msg


@dataclass
class CompositeEditorOptions:
    """
    Options for CompositeEditor.

    Attributes:
        validation_failed_msg: Generic message set on the aggregated validation result
        show: Called when the grid asks the editor to show itself
        hide: Called when the grid asks the editor to hide itself
        position: Called with the new box when the grid asks the editor to reposition
        destroy: Called after all sub-editors have been destroyed
    """

    validation_failed_msg: str = field(default_factory=_default_validation_failed_msg)
    show: Optional[Callable[[], Any]] = None
    hide: Optional[Callable[[], Any]] = None
    position: Optional[Callable[[NodeBox], Any]] = None
    destroy: Optional[Callable[[], Any]] = None


class CompositeEditor(Editor):
    """
    Aggregate editor over one sub-editor per editor-bearing column.

    Built once through prepare() and reused: new_instance() returns the
    composite itself, creating the sub-editors if they do not exist yet.
    destroy() drops them so the next session starts fresh.
    """

    def __init__(
        self,
        columns: List[Column],
        containers: Mapping[str, QWidget],
        options: Optional[CompositeEditorOptions] = None,
    ):
        super().__init__(None)
        self.columns = list(columns)
        self.containers: Dict[str, QWidget] = dict(containers)
        self.options = options if options is not None else CompositeEditorOptions()
        self.editors: List[Optional[Editor]] = [None] * len(self.columns)
        self.first_invalid_editor: Optional[Editor] = None
        self._initialized = False

    @classmethod
    def prepare(
        cls,
        columns: List[Column],
        containers: Mapping[str, QWidget],
        options: Optional[CompositeEditorOptions] = None,
    ) -> "CompositeEditor":
        """
        Build a composite editor for ``columns``.

        Args:
            columns: Column definitions from which editors are pulled
            containers: Column id -> widget each sub-editor is mounted in
            options: Callbacks and the aggregate failure message
        """
        return cls(columns, containers, options)

    @property
    def is_prototype(self) -> bool:
        return False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _active_editors(self):
        """(index, editor) pairs for existing sub-editors, last column first."""
        for idx in range(len(self.editors) - 1, -1, -1):
            editor = self.editors[idx]
            if editor is not None:
                yield idx, editor

    def get_container_box(self, column_id: str) -> NodeBox:
        return widget_box(self.containers[column_id])

    def init(self) -> None:
        """Create one sub-editor per editor-bearing column. No-op once initialized."""
        if self._initialized:
            return

        self.editors = [None] * len(self.columns)
        for idx in range(len(self.columns) - 1, -1, -1):
            column = self.columns[idx]
            if column.editor is None:
                continue
            sub_args = EditorArgs(
                container=self.containers[column.id],
                column=column,
                position=self.get_container_box(column.id),
            )
            if self.args is not None:
                sub_args.item = self.args.item
                sub_args.grid = self.args.grid
                sub_args.grid_position = self.args.grid_position
                sub_args.commit_changes = self.args.commit_changes
                sub_args.cancel_changes = self.args.cancel_changes
            self.editors[idx] = column.editor.new_instance(sub_args)

        self._initialized = True
        logger.debug(
            f"Composite editor initialized with "
            f"{sum(1 for _ in self._active_editors())} of {len(self.columns)} column editors"
        )

    def new_instance(self, args: EditorArgs) -> "CompositeEditor":
        self.args = args
        self.init()
        return self

    def destroy(self) -> None:
        for _, editor in self._active_editors():
            editor.destroy()
        self.editors = [None] * len(self.columns)
        self.first_invalid_editor = None
        self._initialized = False
        logger.debug("Composite editor destroyed")

        if self.options.destroy is not None:
            self.options.destroy()

    def focus(self) -> None:
        # After a failed validation, land on the first invalid editor
        if self.first_invalid_editor is not None:
            self.first_invalid_editor.focus()
            return
        for editor in self.editors:
            if editor is not None:
                editor.focus()
                return

    @property
    def is_value_changed(self) -> bool:
        return any(editor.is_value_changed for _, editor in self._active_editors())

    def serialize_value(self) -> List[Any]:
        if not any(editor is not None for editor in self.editors):
            return []
        serialized: List[Any] = [None] * len(self.columns)
        for idx, editor in self._active_editors():
            serialized[idx] = editor.serialize_value()
        return serialized

    def apply_value(self, item: Item, state: Any) -> None:
        """
        Apply ``state`` (one entry per column) to ``item``.

        Raises:
            EditorStateError: If ``state`` is not a sequence aligned with the columns
        """
        if not isinstance(state, Sequence) or isinstance(state, (str, bytes)):
            raise EditorStateError(
                f"Composite state must be a sequence, got {type(state).__name__}"
            )
        has_editors = any(editor is not None for editor in self.editors)
        if len(state) != len(self.columns) and (has_editors or len(state) != 0):
            raise EditorStateError(
                f"Composite state has {len(state)} entries for {len(self.columns)} columns"
            )
        for idx, editor in self._active_editors():
            editor.apply_value(item, state[idx])

    def load_value(self, item: Item) -> None:
        for _, editor in self._active_editors():
            editor.load_value(item)

    def validate(self) -> ValidationResult:
        self.first_invalid_editor = None
        errors: List[ValidationErrorSource] = []

        for idx, editor in self._active_editors():
            result = editor.validate()
            if not result.is_valid:
                self.first_invalid_editor = editor
                errors.append(ValidationErrorSource(
                    index=idx,
                    editor=editor,
                    container=self.containers.get(self.columns[idx].id),
                    message=result.message,
                ))

        if not errors:
            return ValidationResult.valid()

        errors.reverse()
        logger.debug(
            f"Composite validation failed for columns "
            f"{[self.columns[error.index].id for error in errors]}"
        )
        return ValidationResult.invalid(self.options.validation_failed_msg, errors)

    def hide(self) -> None:
        for _, editor in self._active_editors():
            editor.hide()
        if self.options.hide is not None:
            self.options.hide()

    def show(self) -> None:
        for _, editor in self._active_editors():
            editor.show()
        if self.options.show is not None:
            self.options.show()

    def position(self, box: NodeBox) -> None:
        for _, editor in self._active_editors():
            editor.position(box)
        if self.options.position is not None:
            self.options.position(box)
