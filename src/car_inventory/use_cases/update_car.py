from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from car_inventory.domain.car import Car, CarChanges
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class UpdateCarRequest:
    car_id: int
    changes: CarChanges


@dataclass(frozen=True, slots=True)
class UpdateCarResponse:
    car: Car | None  # None when the car does not exist


class UpdateCar:
    """
    Apply a partial update to an existing car.

    Merge rules:
    - A field set to None is left unchanged
    - A string field set to "" is left unchanged as well
    - Every other value overwrites the stored one
    - The merged car replaces the stored car as a whole (last write wins)

    The repository keeps the original ``created_at`` and refreshes ``updated_at``.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = car_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: UpdateCarRequest) -> UpdateCarResponse:
        """
        Raises:
            ValidationError: If a provided value is outside its bounds
        """
        request.changes.validate()

        existing = self._repository.get_by_id(request.car_id)
        if existing is None:
            return UpdateCarResponse(car=None)

        merged = self._merge(existing, request.changes)
        updated = self._repository.update(request.car_id, merged)

        if updated is not None:
            self._logger.info("Updated car", extra={"car_id": request.car_id})

        return UpdateCarResponse(car=updated)

    @staticmethod
    def _merge(car: Car, changes: CarChanges) -> Car:
        overrides: dict[str, Any] = {}

        for field in ("make", "model", "color"):
            value = getattr(changes, field)
            if value:
                overrides[field] = value

        if changes.year is not None:
            overrides["year"] = changes.year
        if changes.price is not None:
            overrides["price"] = changes.price
        if changes.is_available is not None:
            overrides["is_available"] = changes.is_available

        return dataclasses.replace(car, **overrides)
