"""
Schema operations for stxry validation.

Provides validate(), field_errors(), first_error() and to_pydantic() functions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any
from typing import Optional as TypingOptional

from pydantic import BaseModel, create_model

from .core import DefaultV, NullableV, OptionalV, Validator
from .types import ValidationError, ValidationResult
from .validators import DictV, ListV, to_validator

logger = logging.getLogger(__name__)


def validate(data: Any, schema: dict[str, Any] | DictV) -> ValidationResult[dict[str, Any]]:
    """
    Validate data against a schema.

    Args:
        data: The dict to validate
        schema: Object validator or dict-like schema definition

    Returns:
        Ok(data) with the validated output if validation passes
        Err(errors) with every violation if validation fails

    Usage:
        schema = {
            "title": String(min=1, trim=True),
            "rating": Number(min=1, max=5).optional(),
            "tags": [str],
        }
        result = validate({"title": " Dune "}, schema)
    """
    validator = to_validator(schema)

    if not isinstance(validator, DictV):
        raise TypeError("Schema must be a dict")

    return validator.safe_parse(data)


def field_errors(errors: Iterable[ValidationError]) -> dict[str, str]:
    """
    Map each dotted path to the first message reported for it.

    The root path is reported under "". Handy for attaching errors to form
    fields:

        result = auth_schemas.register.safe_parse(form)
        if result.is_err():
            field_errors(result.errors)  # {"email": "Invalid email address"}
    """
    out: dict[str, str] = {}
    for error in errors:
        out.setdefault(".".join(error.path), error.message)
    return out


def first_error(errors: Iterable[ValidationError], field: str) -> str | None:
    """
    Return the first message reported under a top-level field, or None.

    Errors nested below the field count too, so "tags" matches an error at
    ("tags", "3").
    """
    for error in errors:
        if error.path[:1] == (field,):
            return error.message
    return None


def to_pydantic(name: str, schema: dict[str, Any] | DictV) -> type[BaseModel]:
    """
    Compile an object schema to a Pydantic model.

    Field types are derived from the validators; nested objects become
    nested models. The model describes the validated output, so it is meant
    to be fed the result of ``parse``.

    Args:
        name: Name of the generated model class
        schema: Object validator or dict-like schema definition

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        Story = to_pydantic("Story", story_schemas.create)
        story = Story.model_validate(story_schemas.create.parse(payload))
    """
    validator = to_validator(schema)
    if not isinstance(validator, DictV):
        raise TypeError("Schema must be a dict")

    fields: dict[str, Any] = {}

    for key, v in validator.fields:
        fields[key] = _extract_pydantic_field(f"{name}{_title(key)}", v)

    logger.debug("Generated model %s with fields %s", name, list(fields))
    return create_model(name, **fields)


def _title(key: str) -> str:
    return key[:1].upper() + key[1:]


def _extract_pydantic_field(name: str, v: Validator[Any]) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from validator."""
    match v:
        case OptionalV(inner=inner):
            field_type, _ = _extract_pydantic_field(name, inner)
            return (TypingOptional[field_type], None)
        case NullableV(inner=inner):
            field_type, default = _extract_pydantic_field(name, inner)
            return (TypingOptional[field_type], default)
        case DefaultV(inner=inner, default_value=default):
            field_type, _ = _extract_pydantic_field(name, inner)
            return (field_type, default)
        case DictV():
            return (to_pydantic(name, v), ...)
        case ListV(items=items):
            item_type, _ = _extract_pydantic_field(name, items)
            return (list[item_type], ...)  # type: ignore[valid-type]

    return (v.type_hint, ...)
