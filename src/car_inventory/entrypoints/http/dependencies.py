"""
Dependency injection for FastAPI routes.

The in-memory repository is the single owner of inventory state, so one
instance is shared by the whole process. Use cases are cheap and stateless
and are built per request on top of it, which keeps them easy to override
in tests through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from car_inventory.adapters.in_memory_car_repository import InMemoryCarRepository
from car_inventory.infra.config import Settings, load_settings
from car_inventory.ports.car_repository import CarRepository
from car_inventory.use_cases.calculate_average_price import CalculateAveragePrice
from car_inventory.use_cases.create_car import CreateCar
from car_inventory.use_cases.delete_car import DeleteCar
from car_inventory.use_cases.get_car_by_id import GetCarById
from car_inventory.use_cases.list_available_cars import ListAvailableCars
from car_inventory.use_cases.list_cars import ListCars
from car_inventory.use_cases.list_cars_by_make import ListCarsByMake
from car_inventory.use_cases.mark_car_unavailable import MarkCarUnavailable
from car_inventory.use_cases.update_car import UpdateCar


@lru_cache
def get_settings() -> Settings:
    return load_settings()


@lru_cache
def get_car_repository() -> CarRepository:
    """
    Process-wide car store.

    Seeded with the demo catalog unless CAR_INVENTORY_SEED is false.
    """
    if get_settings().seed_catalog:
        return InMemoryCarRepository()
    return InMemoryCarRepository(seed=())


def get_list_cars_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> ListCars:
    return ListCars(car_repository=repository)


def get_get_car_by_id_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> GetCarById:
    return GetCarById(car_repository=repository)


def get_create_car_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> CreateCar:
    return CreateCar(car_repository=repository)


def get_update_car_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> UpdateCar:
    return UpdateCar(car_repository=repository)


def get_delete_car_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> DeleteCar:
    return DeleteCar(car_repository=repository)


def get_mark_car_unavailable_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> MarkCarUnavailable:
    return MarkCarUnavailable(car_repository=repository)


def get_list_cars_by_make_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> ListCarsByMake:
    return ListCarsByMake(car_repository=repository)


def get_list_available_cars_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> ListAvailableCars:
    return ListAvailableCars(car_repository=repository)


def get_calculate_average_price_use_case(
    repository: CarRepository = Depends(get_car_repository),
) -> CalculateAveragePrice:
    return CalculateAveragePrice(car_repository=repository)
