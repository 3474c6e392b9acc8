"""
Reusable column validators.

A validator is any callable taking the editor's raw live value and
returning a ValidationResult; these are the common ones.
"""

from typing import Any, Optional

from pyqt_celledit.core import parse_int_safe
from pyqt_celledit.protocols import ValidationResult


class RequiredFieldValidator:
    """Rejects None and empty (or whitespace-only) strings."""

    def __init__(self, message: str = "This is a required field"):
        self.message = message

    def __call__(self, value: Any) -> ValidationResult:
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return ValidationResult.invalid(self.message)
        return ValidationResult.valid()


class IntegerRangeValidator:
    """
    Accepts integers (or integer strings) within an inclusive range.

    Either bound may be None to leave that side open.
    """

    def __init__(self, minimum: Optional[int] = None, maximum: Optional[int] = None,
                 message: Optional[str] = None):
        self.minimum = minimum
        self.maximum = maximum
        self.message = message or f"Please enter a value between {minimum} and {maximum}"

    def __call__(self, value: Any) -> ValidationResult:
        parsed = parse_int_safe(value)
        if parsed is None:
            return ValidationResult.invalid(self.message)
        if self.minimum is not None and parsed < self.minimum:
            return ValidationResult.invalid(self.message)
        if self.maximum is not None and parsed > self.maximum:
            return ValidationResult.invalid(self.message)
        return ValidationResult.valid()
