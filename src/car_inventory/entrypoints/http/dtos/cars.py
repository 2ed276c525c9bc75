from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from car_inventory.domain.car import (
    COLOR_MAX_LENGTH,
    MAKE_MAX_LENGTH,
    MODEL_MAX_LENGTH,
    YEAR_MAX,
    YEAR_MIN,
)

PRICE_PATTERN = r"^\d+(\.\d+)?$"


def _price_as_text(value: Any) -> Any:
    # JSON numbers are accepted and checked against the same pattern as strings
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class CarResponseDTO(BaseModel):
    id: int
    make: str
    model: str
    year: int
    color: str
    price: str
    is_available: bool
    created_at: datetime
    updated_at: datetime | None = None


class CarCreateDTO(BaseModel):
    """Request payload for adding a car to the inventory."""

    make: str = Field(
        description="Manufacturer",
        examples=["Toyota"],
        min_length=1,
        max_length=MAKE_MAX_LENGTH,
    )
    model: str = Field(
        description="Model name",
        examples=["Corolla"],
        min_length=1,
        max_length=MODEL_MAX_LENGTH,
    )
    year: int = Field(
        description="Model year",
        examples=[2020],
        ge=YEAR_MIN,
        le=YEAR_MAX,
    )
    color: str = Field(
        default="",
        description="Exterior color (may be empty)",
        examples=["Blue"],
        max_length=COLOR_MAX_LENGTH,
    )
    price: str = Field(
        description="Price as decimal string or number, must be greater than 0",
        examples=["25000.00"],
        pattern=PRICE_PATTERN,
    )
    is_available: bool = Field(
        default=True,
        description="Whether the car can be sold",
    )

    @field_validator("price", mode="before")
    @classmethod
    def price_from_number(cls, value: Any) -> Any:
        return _price_as_text(value)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Corolla",
                "year": 2020,
                "color": "Blue",
                "price": "25000.00",
                "is_available": True,
            }
        }
    )


class CarUpdateDTO(BaseModel):
    """
    Partial update payload.

    Omitted fields, nulls and empty strings all leave the stored value unchanged.
    """

    make: str | None = Field(default=None, max_length=MAKE_MAX_LENGTH)
    model: str | None = Field(default=None, max_length=MODEL_MAX_LENGTH)
    year: int | None = Field(default=None, ge=YEAR_MIN, le=YEAR_MAX)
    color: str | None = Field(default=None, max_length=COLOR_MAX_LENGTH)
    price: str | None = Field(
        default=None,
        description="Price as decimal string or number, must be greater than 0",
        pattern=PRICE_PATTERN,
    )
    is_available: bool | None = None

    @field_validator("price", mode="before")
    @classmethod
    def price_from_number(cls, value: Any) -> Any:
        return _price_as_text(value)

    model_config = ConfigDict(
        json_schema_extra={"example": {"color": "Red", "price": "23500.00"}}
    )


class AveragePriceResponseDTO(BaseModel):
    average_price: str = Field(
        description="Mean price of all cars as decimal string ('0' when there are none)",
        examples=["35000"],
    )
