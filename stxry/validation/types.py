"""
Type definitions for stxry validation.

Provides the Result type (Ok/Err), the structural error record, the
exception raised by ``parse`` and the MISSING sentinel for absent values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")

# Error codes
INVALID_TYPE = "invalid_type"
TOO_SHORT = "too_short"
TOO_LONG = "too_long"
INVALID_EMAIL = "invalid_email"
INVALID_URL = "invalid_url"
INVALID_PATTERN = "invalid_pattern"
TOO_SMALL = "too_small"
TOO_BIG = "too_big"
INVALID_INTEGER = "invalid_integer"
INVALID_POSITIVE = "invalid_positive"
INVALID_ENUM = "invalid_enum"


class Missing(Enum):
    """
    Sentinel for a value that is absent, as opposed to present and None.

    Object validators hand MISSING to a field validator when the key is not
    in the input, and leave the key out of their output when a field
    validates to MISSING.
    """

    MISSING = 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING

Path = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single constraint violation at a structural path."""

    path: Path
    message: str
    code: str


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the validated (possibly coerced) value."""

    data: T

    @property
    def success(self) -> bool:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failure result containing every collected error."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        # Accept any iterable, store a tuple
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Err requires at least one ValidationError")

    @property
    def success(self) -> bool:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


ValidationResult = Union[Ok[T], Err]


def fail(path: Path, message: str, code: str) -> Err:
    """Shorthand for a single-error failure."""
    return Err((ValidationError(path, message, code),))


def format_errors(errors: tuple[ValidationError, ...] | list[ValidationError]) -> str:
    """Flatten errors to ``"a.b: message, c: message"``."""
    return ", ".join(f"{'.'.join(e.path)}: {e.message}" for e in errors)


class ValidationException(ValueError):
    """Raised by ``Validator.parse`` with the full list of errors."""

    def __init__(self, errors: tuple[ValidationError, ...] | list[ValidationError]):
        self.errors = tuple(errors)
        super().__init__(format_errors(self.errors))
