"""
Core validator classes for stxry validation.

Provides the Validator base class and the modifier wrappers produced by
``optional()``, ``nullable()`` and ``default()``.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .types import MISSING, Err, Ok, Path, ValidationException, ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """
    Stateless validator.

    Subclasses implement ``validate``; everything else is derived from it.
    Validators hold no mutable state and can be shared freely, including
    across threads.
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, value: Any, path: Path = ()) -> ValidationResult[T]:
        """
        Validate a value found at ``path``.

        Returns:
            Ok(data) with the validated (possibly coerced) value
            Err(errors) with every violation, paths rooted at ``path``
        """

    def __call__(self, value: Any = MISSING, path: Path = ()) -> ValidationResult[T]:
        return self.validate(value, path)

    @property
    def type_hint(self) -> Any:
        """Python type of the validated output, used for model generation."""
        return Any

    def safe_parse(self, value: Any = MISSING) -> ValidationResult[T]:
        """Validate without raising; failures are returned as Err."""
        return self.validate(value, ())

    def parse(self, value: Any = MISSING) -> T:
        """
        Validate and return the data.

        Raises:
            ValidationException: carrying every collected error
        """
        result = self.validate(value, ())
        if isinstance(result, Err):
            logger.debug(
                "%s rejected input with %d error(s)",
                type(self).__name__,
                len(result.errors),
            )
            raise ValidationException(result.errors)
        return result.data

    def optional(self) -> OptionalV:
        """Accept MISSING as a valid value."""
        return OptionalV(inner=self)

    def nullable(self) -> NullableV:
        """Accept None as a valid value."""
        return NullableV(inner=self)

    def default(self, value: Any) -> DefaultV:
        """Replace MISSING or None with ``value``."""
        return DefaultV(inner=self, default_value=value)


@dataclass(frozen=True, slots=True)
class OptionalV(Validator[Any]):
    """Passes MISSING through, delegates anything else."""

    inner: Validator[Any]

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[Any]:
        if value is MISSING:
            return Ok(MISSING)
        return self.inner.validate(value, path)

    @property
    def type_hint(self) -> Any:
        return Optional[self.inner.type_hint]


@dataclass(frozen=True, slots=True)
class NullableV(Validator[Any]):
    """Passes None through, delegates anything else."""

    inner: Validator[Any]

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[Any]:
        if value is None:
            return Ok(None)
        return self.inner.validate(value, path)

    @property
    def type_hint(self) -> Any:
        return Optional[self.inner.type_hint]


@dataclass(frozen=True, slots=True)
class DefaultV(Validator[Any]):
    """
    Substitutes a default for MISSING and for None.

    Both absence and an explicit None collapse into the default; the
    wrapped validator is not consulted in either case. Wrap the result in
    ``nullable()`` to keep an explicit None.
    """

    inner: Validator[Any]
    default_value: Any

    def validate(self, value: Any, path: Path = ()) -> ValidationResult[Any]:
        if value is MISSING or value is None:
            # Fresh copy per call so results never share a mutable default
            return Ok(copy.deepcopy(self.default_value))
        return self.inner.validate(value, path)

    @property
    def type_hint(self) -> Any:
        return self.inner.type_hint
