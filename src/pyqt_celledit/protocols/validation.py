"""
Validation result types shared by editors and column validators.

Validation failures are data, never exceptions: editors return a
ValidationResult and the host decides how to surface the message.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional


@dataclass(frozen=True)
class ValidationErrorSource:
    """
    Identifies which sub-editor of a composite editor failed validation.

    Attributes:
        index: Column index of the failing sub-editor
        editor: The failing sub-editor instance
        container: Widget the sub-editor is mounted in
        message: The sub-editor's own failure message
    """

    index: int
    editor: Any
    container: Any
    message: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation check.

    Attributes:
        is_valid: Whether the value passed validation
        message: Optional human-readable failure message
        errors: Per-source failures (only set by aggregating editors)
    """

    is_valid: bool
    message: Optional[str] = None
    errors: List[ValidationErrorSource] = field(default_factory=list)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def invalid(cls, message: Optional[str] = None,
                errors: Optional[List[ValidationErrorSource]] = None) -> "ValidationResult":
        return cls(False, message, list(errors or []))


# A validator takes the editor's raw live value and returns a ValidationResult.
Validator = Callable[[Any], ValidationResult]
