from __future__ import annotations

from abc import ABC, abstractmethod

from car_inventory.domain.car import Car, NewCar


class CarRepository(ABC):
    """
    Port for car storage.

    The repository is the only owner of stored cars. It assigns ids and
    timestamps; callers never set them.

    Contract:
        - A missing car is reported as ``None`` (or ``False`` for delete), never raised
        - Ids are assigned from a strictly increasing counter and never reused
        - ``update`` keeps the stored id and ``created_at`` whatever the caller passes
        - Implementations must be safe to call from several threads at once
    """

    @abstractmethod
    def get_all(self) -> list[Car]: ...

    @abstractmethod
    def get_by_id(self, car_id: int) -> Car | None: ...

    @abstractmethod
    def create(self, new_car: NewCar) -> Car:
        """Store a new car, assigning the next id and stamping ``created_at``."""
        ...

    @abstractmethod
    def update(self, car_id: int, car: Car) -> Car | None:
        """
        Replace the mutable fields of an existing car.

        Args:
            car_id: Id of the car to replace
            car: New field values; its ``id``, ``created_at`` and ``updated_at`` are ignored

        Returns:
            The stored car with ``updated_at`` refreshed, or None if ``car_id`` is unknown.
            An update never creates a car.
        """
        ...

    @abstractmethod
    def delete(self, car_id: int) -> bool:
        """Remove a car. Returns whether something was removed."""
        ...

    @abstractmethod
    def get_by_make(self, make: str | None) -> list[Car]:
        """Case-insensitive exact match on make. Empty or None input matches nothing."""
        ...

    @abstractmethod
    def get_available(self) -> list[Car]: ...
