"""Error types raised by field arithmetic."""

from __future__ import annotations


class FieldValueError(ValueError):
    """Raised when a residue does not lie in ``[0, prime)``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FieldMismatchError(AssertionError):
    """Operands belong to different fields.

    Raised before any arithmetic takes place. Not meant to be caught.
    """

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Cannot combine elements of F_{left} and F_{right}")
        self.left = left
        self.right = right
