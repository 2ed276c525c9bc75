from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from car_inventory.domain.car import Car
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class MarkCarUnavailableRequest:
    car_id: int


@dataclass(frozen=True, slots=True)
class MarkCarUnavailableResponse:
    car: Car | None


class MarkCarUnavailable:
    """Flag a car as not available (e.g. reserved or sold)."""

    def __init__(
        self,
        car_repository: CarRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = car_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: MarkCarUnavailableRequest) -> MarkCarUnavailableResponse:
        car = self._repository.get_by_id(request.car_id)
        if car is None:
            return MarkCarUnavailableResponse(car=None)

        updated = self._repository.update(
            request.car_id, dataclasses.replace(car, is_available=False)
        )
        if updated is not None:
            self._logger.info("Marked car as unavailable", extra={"car_id": request.car_id})

        return MarkCarUnavailableResponse(car=updated)
