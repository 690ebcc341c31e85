from .schemas import auth_schemas, common_schemas, story_schemas
from .validation import (
    MISSING,
    Array,
    Boolean,
    EnumType,
    Err,
    Number,
    Object,
    Ok,
    String,
    ValidationError,
    ValidationException,
    Validator,
    field_errors,
    first_error,
    to_pydantic,
    validate,
)

__all__ = [
    "Validator",
    "String",
    "Number",
    "Boolean",
    "EnumType",
    "Array",
    "Object",
    "Ok",
    "Err",
    "MISSING",
    "ValidationError",
    "ValidationException",
    "validate",
    "field_errors",
    "first_error",
    "to_pydantic",
    "common_schemas",
    "auth_schemas",
    "story_schemas",
]
