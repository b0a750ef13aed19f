"""Exceptions raised by zpset."""

from __future__ import annotations

from typing import Optional


class FieldMismatchError(AssertionError):
    """Raised when operands are not bound to the same finite field.

    This is a bug in the calling code, not a condition to recover from.
    """

    def __init__(self, expected: Optional[int], actual: Optional[int]) -> None:
        if actual is None:
            msg = "element is not bound to a finite field"
            if expected is not None:
                msg += f", expected Z({expected})"
        else:
            msg = f"expect finite field Z({expected}), was Z({actual})"
        super().__init__(msg)
        self.expected = expected
        self.actual = actual


class MalformedInputError(ValueError):
    """Raised when external data does not decode to an integer."""


class DivisionUndefinedError(ZeroDivisionError):
    """Raised when inverting zero or a non-unit of a composite modulus."""
