from __future__ import annotations

from dataclasses import dataclass

from car_inventory.domain.car import Car
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class ListCarsByMakeRequest:
    make: str | None


@dataclass(frozen=True, slots=True)
class ListCarsByMakeResponse:
    cars: list[Car]


class ListCarsByMake:
    """
    Cars whose make matches exactly, ignoring case.

    An empty make matches nothing (it is not a wildcard).
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: ListCarsByMakeRequest) -> ListCarsByMakeResponse:
        return ListCarsByMakeResponse(cars=self._repository.get_by_make(request.make))
