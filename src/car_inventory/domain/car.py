from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from car_inventory.domain.errors import ValidationError


MAKE_MAX_LENGTH = 50
MODEL_MAX_LENGTH = 50
COLOR_MAX_LENGTH = 20
YEAR_MIN = 1900
YEAR_MAX = 2030


@dataclass(frozen=True, slots=True)
class Car:
    id: int
    make: str
    model: str
    year: int
    color: str
    price: Decimal
    is_available: bool
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class NewCar:
    """Attributes of a car that has not been stored yet (no id, no timestamps)."""

    make: str
    model: str
    year: int
    price: Decimal
    color: str = ""
    is_available: bool = True

    def validate(self) -> None:
        """
        Validate every attribute against the catalog bounds.

        Raises:
            ValidationError: With one entry per offending field
        """
        errors = _check_text("make", self.make, MAKE_MAX_LENGTH, required=True)
        errors += _check_text("model", self.model, MODEL_MAX_LENGTH, required=True)
        errors += _check_text("color", self.color, COLOR_MAX_LENGTH, required=False)
        errors += _check_year(self.year)
        errors += _check_price(self.price)

        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class CarChanges:
    """
    Partial update of a car.

    ``None`` means the field was not mentioned. Empty strings are treated the
    same way: a string field can never be cleared through an update.
    """

    make: str | None = None
    model: str | None = None
    year: int | None = None
    color: str | None = None
    price: Decimal | None = None
    is_available: bool | None = None

    def validate(self) -> None:
        """
        Validate only the fields that carry a change.

        Raises:
            ValidationError: With one entry per offending field
        """
        errors: list[dict[str, str]] = []
        if self.make:
            errors += _check_text("make", self.make, MAKE_MAX_LENGTH, required=True)
        if self.model:
            errors += _check_text("model", self.model, MODEL_MAX_LENGTH, required=True)
        if self.color:
            errors += _check_text("color", self.color, COLOR_MAX_LENGTH, required=False)
        if self.year is not None:
            errors += _check_year(self.year)
        if self.price is not None:
            errors += _check_price(self.price)

        if errors:
            raise ValidationError(errors=errors)


def _check_text(field: str, value: str, max_length: int, *, required: bool) -> list[dict[str, str]]:
    if required and not value.strip():
        return [{"field": field, "message": "Must not be empty", "code": "REQUIRED"}]
    if len(value) > max_length:
        return [
            {
                "field": field,
                "message": f"Must be at most {max_length} characters",
                "code": "TOO_LONG",
            }
        ]
    return []


def _check_year(year: int) -> list[dict[str, str]]:
    if not YEAR_MIN <= year <= YEAR_MAX:
        return [
            {
                "field": "year",
                "message": f"Must be between {YEAR_MIN} and {YEAR_MAX}",
                "code": "OUT_OF_RANGE",
            }
        ]
    return []


def _check_price(price: Decimal) -> list[dict[str, str]]:
    # Guardrail: prevent float leakage past boundary
    if not isinstance(price, Decimal):
        return [
            {
                "field": "price",
                "message": "Must be Decimal (no floats past the boundary)",
                "code": "INVALID_DECIMAL",
            }
        ]
    if price <= 0:
        return [{"field": "price", "message": "Must be greater than 0", "code": "NOT_POSITIVE"}]
    return []
