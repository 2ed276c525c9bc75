from __future__ import annotations

import logging
from dataclasses import dataclass

from car_inventory.domain.errors import CarNotAvailableError
from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class DeleteCarRequest:
    car_id: int


@dataclass(frozen=True, slots=True)
class DeleteCarResponse:
    deleted: bool


class DeleteCar:
    """
    Remove a car from the inventory.

    Cars that are not available may be part of an ongoing sale and are
    never deleted.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = car_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: DeleteCarRequest) -> DeleteCarResponse:
        """
        Returns:
            DeleteCarResponse with deleted=False when the car does not exist

        Raises:
            CarNotAvailableError: If the car exists but is not available
        """
        car = self._repository.get_by_id(request.car_id)
        if car is None:
            return DeleteCarResponse(deleted=False)

        if not car.is_available:
            self._logger.warning(
                "Attempt to delete unavailable car", extra={"car_id": request.car_id}
            )
            raise CarNotAvailableError(car_id=request.car_id)

        deleted = self._repository.delete(request.car_id)
        if deleted:
            self._logger.info("Deleted car", extra={"car_id": request.car_id})

        return DeleteCarResponse(deleted=deleted)
