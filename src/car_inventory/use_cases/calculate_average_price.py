from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from car_inventory.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class CalculateAveragePriceResponse:
    average_price: Decimal


class CalculateAveragePrice:
    """
    Arithmetic mean of the price of every car, using exact decimal arithmetic.

    - The sum and division use full precision Decimal, no rounding to cents
    - An empty inventory yields exactly Decimal("0")
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self) -> CalculateAveragePriceResponse:
        prices = [car.price for car in self._repository.get_all()]
        if not prices:
            return CalculateAveragePriceResponse(average_price=Decimal("0"))

        return CalculateAveragePriceResponse(
            average_price=sum(prices, Decimal("0")) / Decimal(len(prices))
        )
