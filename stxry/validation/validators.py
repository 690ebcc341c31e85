"""
Built-in validators for stxry validation.

Provides the primitive validators (strings, numbers, booleans, enums), the
composite validators (arrays, objects) and the factory functions that
build them.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .core import Validator
from .types import (
    INVALID_EMAIL,
    INVALID_ENUM,
    INVALID_INTEGER,
    INVALID_PATTERN,
    INVALID_POSITIVE,
    INVALID_TYPE,
    INVALID_URL,
    MISSING,
    TOO_BIG,
    TOO_LONG,
    TOO_SHORT,
    TOO_SMALL,
    Err,
    Ok,
    Path,
    ValidationError,
    ValidationResult,
    fail,
)

# Leading/trailing whitespace plus BOM, as removed by JavaScript trim()
_TRIM_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_URL_ADAPTER = TypeAdapter(AnyUrl)

# Whole-string decimal literal, surrounding whitespace allowed
_STRICT_NUMBER_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*", re.ASCII
)
# Leading numeric prefix, the rest of the string is ignored
_LENIENT_NUMBER_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))", re.ASCII
)
_INTEGER_LITERAL_RE = re.compile(r"[+-]?\d+", re.ASCII)


# --- Primitives ---


@dataclass(frozen=True, slots=True)
class StringV(Validator[str]):
    """String validator with length, shape and pattern constraints."""

    min_length: int | None = None
    max_length: int | None = None
    email: bool = False
    url: bool = False
    pattern: re.Pattern[str] | None = None
    trim: bool = False

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[str]:
        if not isinstance(value, str):
            return fail(path, "Expected string", INVALID_TYPE)

        if self.trim:
            value = _TRIM_RE.sub("", value)

        errors: list[ValidationError] = []

        if self.min_length is not None and len(value) < self.min_length:
            errors.append(
                ValidationError(
                    path, f"Must be at least {self.min_length} characters", TOO_SHORT
                )
            )
        if self.max_length is not None and len(value) > self.max_length:
            errors.append(
                ValidationError(
                    path, f"Must be at most {self.max_length} characters", TOO_LONG
                )
            )
        if self.email and _EMAIL_RE.fullmatch(value) is None:
            errors.append(ValidationError(path, "Invalid email address", INVALID_EMAIL))
        if self.url and not _is_url(value):
            errors.append(ValidationError(path, "Invalid URL", INVALID_URL))
        if self.pattern is not None and self.pattern.search(value) is None:
            errors.append(ValidationError(path, "Invalid format", INVALID_PATTERN))

        return Err(errors) if errors else Ok(value)

    @property
    def type_hint(self) -> Any:
        return str


def _is_url(value: str) -> bool:
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class NumberV(Validator[float]):
    """Number validator; numeric strings are coerced before checking."""

    min: float | None = None
    max: float | None = None
    integer: bool = False
    positive: bool = False
    lenient: bool = False

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[float]:
        if isinstance(value, str):
            value = _parse_number(value, self.lenient)

        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or (isinstance(value, float) and math.isnan(value))
        ):
            return fail(path, "Expected number", INVALID_TYPE)

        errors: list[ValidationError] = []

        if self.min is not None and value < self.min:
            errors.append(ValidationError(path, f"Must be at least {self.min}", TOO_SMALL))
        if self.max is not None and value > self.max:
            errors.append(ValidationError(path, f"Must be at most {self.max}", TOO_BIG))
        if self.integer and isinstance(value, float) and not value.is_integer():
            errors.append(ValidationError(path, "Must be an integer", INVALID_INTEGER))
        if self.positive and value <= 0:
            errors.append(ValidationError(path, "Must be positive", INVALID_POSITIVE))

        return Err(errors) if errors else Ok(value)

    @property
    def type_hint(self) -> Any:
        return int if self.integer else float


def _parse_number(raw: str, lenient: bool = False) -> int | float | None:
    """
    Coerce a string to a number, or None when it is not numeric.

    Integral literals become int, everything else float. When ``lenient`` is
    set only the leading numeric prefix has to parse, otherwise the whole
    string must.
    """
    if lenient:
        match = _LENIENT_NUMBER_RE.match(raw)
    else:
        match = _STRICT_NUMBER_RE.fullmatch(raw)
    if match is None:
        return None

    literal = match.group(1)
    if literal.lstrip("+-") == "Infinity":
        return float(literal.replace("Infinity", "inf"))
    if _INTEGER_LITERAL_RE.fullmatch(literal):
        try:
            return int(literal)
        except ValueError:
            # Beyond the interpreter's int string conversion limit
            return float(literal)
    return float(literal)


@dataclass(frozen=True, slots=True)
class BooleanV(Validator[bool]):
    """Boolean validator; "true" and "false" strings are coerced."""

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[bool]:
        if isinstance(value, bool):
            return Ok(value)
        if isinstance(value, str) and value in ("true", "false"):
            return Ok(value == "true")
        return fail(path, "Expected boolean", INVALID_TYPE)

    @property
    def type_hint(self) -> Any:
        return bool


@dataclass(frozen=True, slots=True)
class EnumV(Validator[str]):
    """Accepts only strings from a fixed set of values."""

    values: tuple[str, ...]

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[str]:
        if not isinstance(value, str) or value not in self.values:
            return fail(path, f"Must be one of: {', '.join(self.values)}", INVALID_ENUM)
        return Ok(value)

    @property
    def type_hint(self) -> Any:
        return Literal[self.values]


# --- Composites ---


@dataclass(frozen=True, slots=True)
class ListV(Validator[list]):
    """Validator for list structures with item validation."""

    items: Validator[Any]
    min_length: int | None = None
    max_length: int | None = None

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[list]:
        if not isinstance(value, (list, tuple)):
            return fail(path, "Expected array", INVALID_TYPE)

        errors: list[ValidationError] = []

        if self.min_length is not None and len(value) < self.min_length:
            errors.append(
                ValidationError(
                    path, f"Must have at least {self.min_length} items", TOO_SHORT
                )
            )
        if self.max_length is not None and len(value) > self.max_length:
            errors.append(
                ValidationError(
                    path, f"Must have at most {self.max_length} items", TOO_LONG
                )
            )

        items = []
        for i, item in enumerate(value):
            result = self.items(item, (*path, str(i)))
            if isinstance(result, Err):
                errors.extend(result.errors)
            else:
                items.append(result.data)

        return Err(errors) if errors else Ok(items)

    @property
    def type_hint(self) -> Any:
        return list[self.items.type_hint]  # type: ignore[misc]


@dataclass(frozen=True, slots=True)
class DictV(Validator[dict]):
    """
    Validator for dict structures with nested field validators.

    Only declared fields are validated and copied; extra input keys are
    ignored. An absent key is validated as MISSING, and a field that
    validates to MISSING is left out of the output.
    """

    fields: tuple[tuple[str, Validator[Any]], ...]

    @property
    def shape(self) -> dict[str, Validator[Any]]:
        """Field name -> validator, in declaration order."""
        return dict(self.fields)

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[dict]:
        if not isinstance(value, Mapping):
            return fail(path, "Expected object", INVALID_TYPE)

        errors: list[ValidationError] = []
        data: dict[str, Any] = {}

        for key, validator in self.fields:
            result = validator(value.get(key, MISSING), (*path, key))
            if isinstance(result, Err):
                errors.extend(result.errors)
            elif result.data is not MISSING:
                data[key] = result.data

        return Err(errors) if errors else Ok(data)

    @property
    def type_hint(self) -> Any:
        return dict[str, Any]


# --- Factories ---


def String(
    min: int | None = None,
    max: int | None = None,
    *,
    email: bool = False,
    url: bool = False,
    pattern: str | re.Pattern[str] | None = None,
    trim: bool = False,
) -> StringV:
    """
    String validator.

    Usage:
        String()                        # Any string
        String(min=1, max=200, trim=True)
        String(email=True)
        String(pattern=r"^[a-z]+$")
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return StringV(
        min_length=min,
        max_length=max,
        email=email,
        url=url,
        pattern=pattern,
        trim=trim,
    )


def Number(
    min: float | None = None,
    max: float | None = None,
    *,
    integer: bool = False,
    positive: bool = False,
    lenient: bool = False,
) -> NumberV:
    """
    Number validator. Numeric strings are coerced.

    By default the whole string must be a decimal literal; with
    ``lenient=True`` only its leading numeric prefix is used ("12abc" -> 12).

    Usage:
        Number()
        Number(min=1, max=5, integer=True)
        Number(positive=True)
        Number(lenient=True)
    """
    return NumberV(
        min=min, max=max, integer=integer, positive=positive, lenient=lenient
    )


def Boolean() -> BooleanV:
    """Boolean validator accepting True/False and "true"/"false"."""
    return BooleanV()


def EnumType(values: Iterable[str] | type[Enum]) -> EnumV:
    """
    Validate value is one of a fixed set of strings.

    Usage:
        EnumType(["easy", "medium", "hard"])
        EnumType(Difficulty)    # str-valued Enum class
    """
    if isinstance(values, type) and issubclass(values, Enum):
        values = [member.value for member in values]
    allowed = tuple(values)
    if not allowed:
        raise ValueError("EnumType requires at least one value")
    for v in allowed:
        if not isinstance(v, str):
            raise TypeError(f"EnumType values must be strings, got {type(v).__name__}")
    return EnumV(values=allowed)


def Array(
    items: Validator[Any] | type | dict | list,
    min: int | None = None,
    max: int | None = None,
) -> ListV:
    """
    List validator; every item is validated by ``items``.

    Usage:
        Array(String(min=1))
        Array(str, max=10)
        Array({"name": String()}, min=1)
    """
    return ListV(items=to_validator(items), min_length=min, max_length=max)


def Object(shape: Mapping[str, Any]) -> DictV:
    """
    Dict validator built from a field name -> validator mapping.

    Usage:
        Object({
            "email": String(email=True),
            "age": Number(integer=True).optional(),
            "tags": [str],
        })
    """
    fields: list[tuple[str, Validator[Any]]] = []
    for key, v in shape.items():
        if not isinstance(key, str):
            raise TypeError(f"Object field names must be strings, got {key!r}")
        fields.append((key, to_validator(v)))
    return DictV(fields=tuple(fields))


def to_validator(v: Any) -> Validator[Any]:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        bool -> Boolean()
        str -> String()
        int -> Number(integer=True)
        float -> Number()
        dict -> Object with recursive conversion
        [item] -> Array with item validator from the single element
    """
    if isinstance(v, Validator):
        return v

    if isinstance(v, type):
        # bool before int: bool is an int subclass
        if issubclass(v, bool):
            return Boolean()
        if issubclass(v, str):
            return String()
        if issubclass(v, int):
            return Number(integer=True)
        if issubclass(v, float):
            return Number()
        raise TypeError(f"No validator for type {v.__name__}")

    if isinstance(v, dict):
        return Object(v)

    if isinstance(v, list):
        if len(v) != 1:
            raise ValueError(
                f"List shorthand takes exactly one item validator, got {len(v)}"
            )
        return Array(v[0])

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
