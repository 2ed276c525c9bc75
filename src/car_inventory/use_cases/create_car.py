from __future__ import annotations

import logging
from dataclasses import dataclass

from car_inventory.domain.car import Car, NewCar
from car_inventory.domain.errors import DuplicateCarError
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class CreateCarRequest:
    car: NewCar


@dataclass(frozen=True, slots=True)
class CreateCarResponse:
    car: Car


class CreateCar:
    """
    Add a car to the inventory.

    Two cars are duplicates when make, model and color match ignoring case
    and the year is equal. The duplicate check reads the current inventory
    and then creates; it is not atomic against a concurrent create of the
    same car.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = car_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: CreateCarRequest) -> CreateCarResponse:
        """
        Validate, reject duplicates, then store the car.

        Raises:
            ValidationError: If an attribute is outside its bounds
            DuplicateCarError: If an equivalent car already exists
        """
        new_car = request.car
        new_car.validate()

        if any(self._is_duplicate(car, new_car) for car in self._repository.get_all()):
            self._logger.warning(
                "Attempt to create duplicate car",
                extra={
                    "make": new_car.make,
                    "model": new_car.model,
                    "year": new_car.year,
                    "color": new_car.color,
                },
            )
            raise DuplicateCarError(
                make=new_car.make,
                model=new_car.model,
                year=new_car.year,
                color=new_car.color,
            )

        car = self._repository.create(new_car)
        self._logger.info("Created car", extra={"car_id": car.id})

        return CreateCarResponse(car=car)

    @staticmethod
    def _is_duplicate(car: Car, new_car: NewCar) -> bool:
        return (
            car.make.casefold() == new_car.make.casefold()
            and car.model.casefold() == new_car.model.casefold()
            and car.year == new_car.year
            and car.color.casefold() == new_car.color.casefold()
        )
