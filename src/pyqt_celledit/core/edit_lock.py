"""
Edit lock guaranteeing at most one active edit session.

The lock is a capability: the host acquires it before building an editor
and releases it when the editor is destroyed. Editors never touch it.

A process-wide default is available through get_edit_lock(), but sessions
take the lock explicitly so tests can hand in their own instance.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from pyqt_celledit.exceptions import EditLockError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class EditController:
    """
    Callbacks through which the lock asks the active session to finish.

    Attributes:
        commit_current_edit: Validate and commit; returns False if validation failed
        cancel_current_edit: Discard the edit; returns False if it could not be cancelled
    """

    commit_current_edit: Callable[[], bool]
    cancel_current_edit: Callable[[], bool]


class EditLock:
    """
    Tracks the single active EditController.

    Usage:
        lock = EditLock()
        lock.activate(controller)
        ...
        if not lock.commit_current_edit():
            return  # validation failed, keep editing
        lock.deactivate(controller)
    """

    def __init__(self):
        self._active: Optional[EditController] = None

    def is_active(self, controller: Optional[EditController] = None) -> bool:
        """
        Whether the lock is held.

        Args:
            controller: If given, whether the lock is held by this controller
        """
        if controller is not None:
            return self._active is controller
        return self._active is not None

    def activate(self, controller: EditController) -> None:
        """
        Take the lock for ``controller``.

        Raises:
            EditLockError: If another controller holds the lock
        """
        if self._active is controller:
            return
        if self._active is not None:
            logger.warning("Edit lock activation refused: another edit session is active")
            raise EditLockError(
                "An edit controller is still active, can't activate another one"
            )
        self._active = controller
        logger.debug(f"Edit lock activated by {controller!r}")

    def deactivate(self, controller: EditController) -> None:
        """
        Release the lock held by ``controller``.

        Raises:
            EditLockError: If ``controller`` is not the active one
        """
        if self._active is not controller:
            raise EditLockError(
                "The specified edit controller is not the currently active one"
            )
        self._active = None
        logger.debug(f"Edit lock released by {controller!r}")

    def commit_current_edit(self) -> bool:
        """Ask the active controller to commit. True when nothing is being edited."""
        if self._active is None:
            return True
        return self._active.commit_current_edit()

    def cancel_current_edit(self) -> bool:
        """Ask the active controller to cancel. True when nothing is being edited."""
        if self._active is None:
            return True
        return self._active.cancel_current_edit()


# Global lock instance (shared by the whole application)
_edit_lock: Optional[EditLock] = None


def get_edit_lock() -> EditLock:
    """Get the process-wide edit lock, creating it on first use."""
    global _edit_lock
    if _edit_lock is None:
        _edit_lock = EditLock()
    return _edit_lock


def set_edit_lock(lock: EditLock) -> None:
    """Replace the process-wide edit lock."""
    global _edit_lock
    _edit_lock = lock


def reset_edit_lock() -> None:
    """Drop the process-wide edit lock; the next get_edit_lock() builds a new one."""
    global _edit_lock
    _edit_lock = None
