from __future__ import annotations

import dataclasses
import threading
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable

from car_inventory.domain.car import Car, NewCar
from car_inventory.ports.car_repository import CarRepository


SEED_CATALOG: tuple[NewCar, ...] = (
    NewCar(make="Toyota", model="Camry", year=2022, color="Silver", price=Decimal("28000")),
    NewCar(make="Honda", model="Civic", year=2023, color="Blue", price=Decimal("25000")),
    NewCar(
        make="Ford",
        model="Mustang",
        year=2021,
        color="Red",
        price=Decimal("35000"),
        is_available=False,
    ),
    NewCar(make="BMW", model="X3", year=2023, color="Black", price=Decimal("45000")),
    NewCar(make="Audi", model="A4", year=2022, color="White", price=Decimal("42000")),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCarRepository(CarRepository):
    """
    Process-local car store.

    - Cars live in a dict keyed by id, guarded by a single lock
    - Ids come from a counter starting at 1 that only moves forward, so
      deleted ids are never handed out again
    - Stored cars are frozen dataclasses; every read returns a snapshot list
    - Seeded with SEED_CATALOG unless another seed (or an empty one) is given
    """

    def __init__(
        self,
        seed: Iterable[NewCar] = SEED_CATALOG,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._cars: dict[int, Car] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock

        for new_car in seed:
            self.create(new_car)

    def get_all(self) -> list[Car]:
        with self._lock:
            return list(self._cars.values())

    def get_by_id(self, car_id: int) -> Car | None:
        with self._lock:
            return self._cars.get(car_id)

    def create(self, new_car: NewCar) -> Car:
        with self._lock:
            car = Car(
                id=self._next_id,
                make=new_car.make,
                model=new_car.model,
                year=new_car.year,
                color=new_car.color,
                price=new_car.price,
                is_available=new_car.is_available,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._cars[car.id] = car
            return car

    def update(self, car_id: int, car: Car) -> Car | None:
        with self._lock:
            existing = self._cars.get(car_id)
            if existing is None:
                return None

            updated = dataclasses.replace(
                car,
                id=car_id,
                created_at=existing.created_at,
                updated_at=self._clock(),
            )
            self._cars[car_id] = updated
            return updated

    def delete(self, car_id: int) -> bool:
        with self._lock:
            return self._cars.pop(car_id, None) is not None

    def get_by_make(self, make: str | None) -> list[Car]:
        if not make:
            return []

        wanted = make.casefold()
        with self._lock:
            return [car for car in self._cars.values() if car.make.casefold() == wanted]

    def get_available(self) -> list[Car]:
        with self._lock:
            return [car for car in self._cars.values() if car.is_available]
