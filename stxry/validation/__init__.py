"""
Stxry Validation - composable validators with structured, path-qualified errors.

Usage:
    from stxry.validation import Array, EnumType, Number, Object, String

    schema = Object({
        "title": String(min=1, max=200, trim=True),
        "difficulty": EnumType(["easy", "medium", "hard"]),
        "tags": Array(String(min=1, max=50), max=10).optional(),
    })

    result = schema.safe_parse(data)   # Ok(data) | Err(errors)
    story = schema.parse(data)         # raises ValidationException
"""

from .core import DefaultV, NullableV, OptionalV, Validator
from .schema import field_errors, first_error, to_pydantic, validate
from .types import (
    MISSING,
    Err,
    Missing,
    Ok,
    Path,
    ValidationError,
    ValidationException,
    ValidationResult,
    format_errors,
)
from .validators import (
    Array,
    Boolean,
    BooleanV,
    DictV,
    EnumType,
    EnumV,
    ListV,
    Number,
    NumberV,
    Object,
    String,
    StringV,
    to_validator,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationResult",
    "ValidationError",
    "ValidationException",
    "Path",
    "MISSING",
    "Missing",
    "format_errors",
    # Core
    "Validator",
    "OptionalV",
    "NullableV",
    "DefaultV",
    "to_validator",
    # Validators
    "String",
    "Number",
    "Boolean",
    "EnumType",
    "Array",
    "Object",
    "StringV",
    "NumberV",
    "BooleanV",
    "EnumV",
    "ListV",
    "DictV",
    # Schema
    "validate",
    "field_errors",
    "first_error",
    "to_pydantic",
]
