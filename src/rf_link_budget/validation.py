"""Form field validation.

Validation failures are returned as values rather than raised, so a caller
checks ``isinstance(result, ValidationFailure)`` and stops at the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
import re
from typing import Mapping

from .models import LinkBudgetInputs

# Optional sign, ASCII digits with optional fraction, optional exponent. Nothing else.
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ValidationErrorKind(str, Enum):
    """Ways a form field can be rejected."""

    MISSING_FIELD = "missing_field"
    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class ValidationFailure:
    """A rejected field with a user-facing message."""

    kind: ValidationErrorKind
    name: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class FieldSpec:
    """Form key, display name and inclusive bounds of one input."""

    field: str
    name: str
    minimum: float
    maximum: float


def _field_specs() -> tuple[FieldSpec, ...]:
    specs = []
    for field, info in LinkBudgetInputs.model_fields.items():
        minimum = next(item.ge for item in info.metadata if hasattr(item, "ge"))
        maximum = next(item.le for item in info.metadata if hasattr(item, "le"))
        specs.append(FieldSpec(field=field, name=info.title or field, minimum=minimum, maximum=maximum))
    return tuple(specs)


FIELD_SPECS = _field_specs()


def validate(
    name: str,
    raw_value: str | None,
    minimum: float,
    maximum: float,
    field: str | None = None,
) -> float | ValidationFailure:
    """Parse ``raw_value`` and check it lies in ``[minimum, maximum]``."""

    if not raw_value:
        return ValidationFailure(ValidationErrorKind.MISSING_FIELD, name, f"{name} is required.", field)
    if not _NUMBER.fullmatch(raw_value):
        return ValidationFailure(
            ValidationErrorKind.INVALID_NUMBER, name, f"{name} must be a valid number.", field
        )
    value = float(raw_value)
    if math.isinf(value):
        # Overflowed literal such as 1e999.
        return ValidationFailure(ValidationErrorKind.OUT_OF_RANGE, name, f"{name} is out of range.", field)
    if value < minimum or value > maximum:
        return ValidationFailure(
            ValidationErrorKind.OUT_OF_RANGE,
            name,
            f"{name} must be between {minimum:g} and {maximum:g}.",
            field,
        )
    return value


def validate_inputs(form: Mapping[str, str]) -> LinkBudgetInputs | ValidationFailure:
    """Validate every link budget field in order, stopping at the first failure."""

    values: dict[str, float] = {}
    for spec in FIELD_SPECS:
        result = validate(spec.name, form.get(spec.field), spec.minimum, spec.maximum, field=spec.field)
        if isinstance(result, ValidationFailure):
            return result
        values[spec.field] = result
    return LinkBudgetInputs(**values)
