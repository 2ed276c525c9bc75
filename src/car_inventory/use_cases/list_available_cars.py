from __future__ import annotations

from dataclasses import dataclass

from car_inventory.domain.car import Car
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class ListAvailableCarsResponse:
    cars: list[Car]


class ListAvailableCars:
    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self) -> ListAvailableCarsResponse:
        return ListAvailableCarsResponse(cars=self._repository.get_available())
