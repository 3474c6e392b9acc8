"""
Value types exchanged between the host grid and its cell editors.

The host grid owns columns and items; an editor only sees them through
EditorArgs, which is built fresh for every edit session.
"""

from dataclasses import dataclass
from typing import Any, Callable, MutableMapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QWidget
    from .editor_protocols import Editor
    from .validation import Validator

Item = MutableMapping[str, Any]


@dataclass(frozen=True)
class NodeBox:
    """Rectangle-like position descriptor for a cell or editor container."""

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0
    width: int = 0
    height: int = 0
    visible: bool = True

    @classmethod
    def from_rect(cls, top: int, left: int, width: int, height: int,
                  visible: bool = True) -> "NodeBox":
        return cls(
            top=top,
            left=left,
            bottom=top + height,
            right=left + width,
            width=width,
            height=height,
            visible=visible,
        )


@dataclass(frozen=True)
class Column:
    """
    Column descriptor as seen by the editors.

    Attributes:
        id: Unique column identifier (keys composite editor containers)
        field: Item key the column reads and writes
        name: Display name
        validator: Optional validator run against the editor's live value
        editor: Optional editor prototype; its new_instance() builds session editors
    """

    id: str
    field: str
    name: str = ""
    validator: Optional["Validator"] = None
    editor: Optional["Editor"] = None


@dataclass
class EditorArgs:
    """
    Per-session configuration handed to Editor.new_instance().

    Attributes:
        container: Widget the editor mounts its control(s) into
        column: Column being edited
        item: Item being edited
        grid: Owning grid (used by detached editors for navigation)
        position: Position of the edited cell
        grid_position: Position of the grid itself
        commit_changes: Callback asking the host to commit the edit
        cancel_changes: Callback asking the host to cancel the edit
    """

    container: Optional["QWidget"] = None
    column: Optional[Column] = None
    item: Optional[Item] = None
    grid: Any = None
    position: Optional[NodeBox] = None
    grid_position: Optional[NodeBox] = None
    commit_changes: Optional[Callable[[], Any]] = None
    cancel_changes: Optional[Callable[[], Any]] = None
