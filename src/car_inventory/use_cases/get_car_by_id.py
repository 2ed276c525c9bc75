"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_inventory.domain.car import Car
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: int


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car, or None when it does not exist."""

    car: Car | None


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    A missing car is not an error here: the response simply carries ``None``
    and the caller decides how to present it.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        return GetCarByIdResponse(car=self._repository.get_by_id(request.car_id))
