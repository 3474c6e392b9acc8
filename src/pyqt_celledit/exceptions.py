"""Cell editing exceptions.

Only structural misuse raises; user-input problems come back as
ValidationResult values.
"""


class CellEditError(Exception):
    """Base class for cell editing errors."""


class EditorStateError(CellEditError):
    """Raised when an editor is driven in a way its contract does not allow."""


class EditLockError(CellEditError):
    """Raised when the edit lock is held by, or released from, the wrong controller."""
