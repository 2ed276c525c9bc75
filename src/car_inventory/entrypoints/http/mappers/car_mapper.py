from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_inventory.domain.car import Car, CarChanges, NewCar
from car_inventory.domain.errors import ValidationError
from car_inventory.entrypoints.http.dtos.cars import (
    AveragePriceResponseDTO,
    CarCreateDTO,
    CarResponseDTO,
    CarUpdateDTO,
)


class CarMapper:
    """Maps between REST DTOs and domain models for the car inventory."""

    @staticmethod
    def to_new_car(dto: CarCreateDTO) -> NewCar:
        """
        Converts create payload to a domain NewCar.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If price cannot be converted to a Decimal
        """
        return NewCar(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            color=dto.color,
            price=CarMapper._parse_price(dto.price),
            is_available=dto.is_available,
        )

    @staticmethod
    def to_car_changes(dto: CarUpdateDTO) -> CarChanges:
        return CarChanges(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            color=dto.color,
            price=CarMapper._parse_price(dto.price) if dto.price else None,
            is_available=dto.is_available,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Decimal → str at the boundary.
        """
        return CarResponseDTO(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            color=car.color,
            price=str(car.price),
            is_available=car.is_available,
            created_at=car.created_at,
            updated_at=car.updated_at,
        )

    @staticmethod
    def to_car_list(cars: list[Car]) -> list[CarResponseDTO]:
        return [CarMapper.to_car_response(car) for car in cars]

    @staticmethod
    def to_average_price_response(average_price: Decimal) -> AveragePriceResponseDTO:
        return AveragePriceResponseDTO(average_price=str(average_price))

    @staticmethod
    def _parse_price(raw: str) -> Decimal:
        try:
            return Decimal(raw)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "price",
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )
