from __future__ import annotations

from dataclasses import dataclass

from car_inventory.domain.car import Car
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class ListCarsResponse:
    cars: list[Car]


class ListCars:
    """List every car in the inventory, ordered by id."""

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self) -> ListCarsResponse:
        cars = sorted(self._repository.get_all(), key=lambda car: car.id)
        return ListCarsResponse(cars=cars)
