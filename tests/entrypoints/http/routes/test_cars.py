"""
Test suite for the /v1/cars routes.

Routes are tested in isolation: use cases are replaced with mocks through
dependency overrides, so these tests cover parsing, mapping, status codes
and error translation only.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_inventory.domain.car import Car, CarChanges, NewCar
from car_inventory.domain.errors import CarNotAvailableError, DuplicateCarError
from car_inventory.entrypoints.http.dependencies import (
    get_calculate_average_price_use_case,
    get_create_car_use_case,
    get_delete_car_use_case,
    get_get_car_by_id_use_case,
    get_list_available_cars_use_case,
    get_list_cars_by_make_use_case,
    get_list_cars_use_case,
    get_mark_car_unavailable_use_case,
    get_update_car_use_case,
)
from car_inventory.entrypoints.http.exception_handlers import register_exception_handlers
from car_inventory.entrypoints.http.routes.cars import router
from car_inventory.use_cases.calculate_average_price import CalculateAveragePriceResponse
from car_inventory.use_cases.create_car import CreateCarRequest, CreateCarResponse
from car_inventory.use_cases.delete_car import DeleteCarRequest, DeleteCarResponse
from car_inventory.use_cases.get_car_by_id import GetCarByIdRequest, GetCarByIdResponse
from car_inventory.use_cases.list_available_cars import ListAvailableCarsResponse
from car_inventory.use_cases.list_cars import ListCarsResponse
from car_inventory.use_cases.list_cars_by_make import (
    ListCarsByMakeRequest,
    ListCarsByMakeResponse,
)
from car_inventory.use_cases.mark_car_unavailable import (
    MarkCarUnavailableRequest,
    MarkCarUnavailableResponse,
)
from car_inventory.use_cases.update_car import UpdateCarRequest, UpdateCarResponse


CREATED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


@pytest.fixture
def car() -> Car:
    return Car(
        id=6,
        make="Toyota",
        model="Corolla",
        year=2020,
        color="Blue",
        price=Decimal("25000.50"),
        is_available=True,
        created_at=CREATED_AT,
    )


def _override(app: FastAPI, dependency: object, use_case: Mock) -> None:
    app.dependency_overrides[dependency] = lambda: use_case  # type: ignore[index]


# ==============================================================================
# Reads
# ==============================================================================


def test_list_cars(app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car) -> None:
    mock_use_case.execute.return_value = ListCarsResponse(cars=[car])
    _override(app, get_list_cars_use_case, mock_use_case)

    response = client.get("/v1/cars")

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": 6,
            "make": "Toyota",
            "model": "Corolla",
            "year": 2020,
            "color": "Blue",
            "price": "25000.50",
            "is_available": True,
            "created_at": "2024-01-01T12:00:00Z",
            "updated_at": None,
        }
    ]


def test_get_car_by_id(app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car) -> None:
    mock_use_case.execute.return_value = GetCarByIdResponse(car=car)
    _override(app, get_get_car_by_id_use_case, mock_use_case)

    response = client.get("/v1/cars/6")

    assert response.status_code == 200
    assert response.json()["price"] == "25000.50"
    mock_use_case.execute.assert_called_once_with(GetCarByIdRequest(car_id=6))


def test_get_car_by_id_not_found(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = GetCarByIdResponse(car=None)
    _override(app, get_get_car_by_id_use_case, mock_use_case)

    response = client.get("/v1/cars/42")

    assert response.status_code == 404
    data = response.json()
    assert data["code"] == "NOT_FOUND"
    assert "42" in data["detail"]


def test_get_car_by_id_rejects_non_integer_id(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    _override(app, get_get_car_by_id_use_case, mock_use_case)

    response = client.get("/v1/cars/abc")

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
    mock_use_case.execute.assert_not_called()


def test_list_available_is_not_parsed_as_id(
    app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car
) -> None:
    mock_use_case.execute.return_value = ListAvailableCarsResponse(cars=[car])
    _override(app, get_list_available_cars_use_case, mock_use_case)

    response = client.get("/v1/cars/available")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [6]


def test_list_by_make(app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car) -> None:
    mock_use_case.execute.return_value = ListCarsByMakeResponse(cars=[car])
    _override(app, get_list_cars_by_make_use_case, mock_use_case)

    response = client.get("/v1/cars/make/toyota")

    assert response.status_code == 200
    assert len(response.json()) == 1
    mock_use_case.execute.assert_called_once_with(ListCarsByMakeRequest(make="toyota"))


def test_average_price(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = CalculateAveragePriceResponse(
        average_price=Decimal("15000.00")
    )
    _override(app, get_calculate_average_price_use_case, mock_use_case)

    response = client.get("/v1/cars/average-price")

    assert response.status_code == 200
    assert response.json() == {"average_price": "15000.00"}


# ==============================================================================
# Create
# ==============================================================================


def test_create_car(app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car) -> None:
    mock_use_case.execute.return_value = CreateCarResponse(car=car)
    _override(app, get_create_car_use_case, mock_use_case)

    response = client.post(
        "/v1/cars",
        json={
            "make": "Toyota",
            "model": "Corolla",
            "year": 2020,
            "color": "Blue",
            "price": "25000.50",
        },
    )

    assert response.status_code == 201
    assert response.headers["location"].endswith("/v1/cars/6")
    assert response.json()["id"] == 6
    mock_use_case.execute.assert_called_once_with(
        CreateCarRequest(
            car=NewCar(
                make="Toyota",
                model="Corolla",
                year=2020,
                color="Blue",
                price=Decimal("25000.50"),
                is_available=True,
            )
        )
    )


def test_create_duplicate_returns_conflict(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = DuplicateCarError(
        make="Toyota", model="Corolla", year=2020, color="Blue"
    )
    _override(app, get_create_car_use_case, mock_use_case)

    response = client.post(
        "/v1/cars",
        json={"make": "Toyota", "model": "Corolla", "year": 2020, "color": "Blue", "price": "1"},
    )

    assert response.status_code == 409
    assert response.json() == {
        "detail": "A car with the same make, model, year, and color already exists.",
        "code": "CONFLICT",
    }


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"model": "Corolla", "year": 2020, "price": "1"}, "make"),
        ({"make": "", "model": "Corolla", "year": 2020, "price": "1"}, "make"),
        ({"make": "x" * 51, "model": "Corolla", "year": 2020, "price": "1"}, "make"),
        ({"make": "Kia", "model": "Rio", "year": 1899, "price": "1"}, "year"),
        ({"make": "Kia", "model": "Rio", "year": 2031, "price": "1"}, "year"),
        ({"make": "Kia", "model": "Rio", "year": 2020, "color": "x" * 21, "price": "1"}, "color"),
        ({"make": "Kia", "model": "Rio", "year": 2020, "price": "abc"}, "price"),
        ({"make": "Kia", "model": "Rio", "year": 2020, "price": "-5"}, "price"),
        ({"make": "Kia", "model": "Rio", "year": 2020, "price": True}, "price"),
    ],
)
def test_create_rejects_invalid_payload(
    app: FastAPI,
    client: TestClient,
    mock_use_case: Mock,
    payload: dict[str, object],
    field: str,
) -> None:
    _override(app, get_create_car_use_case, mock_use_case)

    response = client.post("/v1/cars", json=payload)

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert [error["field"] for error in data["errors"]] == [field]
    mock_use_case.execute.assert_not_called()


@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (15000, Decimal("15000")),
        ("15000.125", Decimal("15000.125")),
        (15000.5, Decimal("15000.5")),
    ],
)
def test_create_accepts_numeric_and_precise_prices(
    app: FastAPI,
    client: TestClient,
    mock_use_case: Mock,
    car: Car,
    price: object,
    expected: Decimal,
) -> None:
    mock_use_case.execute.return_value = CreateCarResponse(car=car)
    _override(app, get_create_car_use_case, mock_use_case)

    response = client.post(
        "/v1/cars",
        json={"make": "Kia", "model": "Rio", "year": 2020, "price": price},
    )

    assert response.status_code == 201
    request = mock_use_case.execute.call_args.args[0]
    assert request.car.price == expected


def test_update_accepts_numeric_price(
    app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car
) -> None:
    mock_use_case.execute.return_value = UpdateCarResponse(car=car)
    _override(app, get_update_car_use_case, mock_use_case)

    response = client.put("/v1/cars/6", json={"price": 23500})

    assert response.status_code == 200
    request = mock_use_case.execute.call_args.args[0]
    assert request.changes.price == Decimal("23500")


# ==============================================================================
# Update / Delete / Mark unavailable
# ==============================================================================


def test_update_car_maps_partial_payload(
    app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car
) -> None:
    mock_use_case.execute.return_value = UpdateCarResponse(car=car)
    _override(app, get_update_car_use_case, mock_use_case)

    response = client.put("/v1/cars/6", json={"color": "Blue", "price": "25000.50"})

    assert response.status_code == 200
    mock_use_case.execute.assert_called_once_with(
        UpdateCarRequest(
            car_id=6,
            changes=CarChanges(color="Blue", price=Decimal("25000.50")),
        )
    )


def test_update_missing_car(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = UpdateCarResponse(car=None)
    _override(app, get_update_car_use_case, mock_use_case)

    response = client.put("/v1/cars/99", json={"make": "Kia"})

    assert response.status_code == 404


def test_delete_car(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = DeleteCarResponse(deleted=True)
    _override(app, get_delete_car_use_case, mock_use_case)

    response = client.delete("/v1/cars/6")

    assert response.status_code == 204
    assert response.content == b""
    mock_use_case.execute.assert_called_once_with(DeleteCarRequest(car_id=6))


def test_delete_missing_car(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = DeleteCarResponse(deleted=False)
    _override(app, get_delete_car_use_case, mock_use_case)

    assert client.delete("/v1/cars/99").status_code == 404


def test_delete_unavailable_car_is_bad_request(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = CarNotAvailableError(car_id=3)
    _override(app, get_delete_car_use_case, mock_use_case)

    response = client.delete("/v1/cars/3")

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Cannot delete a car that is not available.",
        "code": "INVALID_STATE",
    }


def test_mark_unavailable(app: FastAPI, client: TestClient, mock_use_case: Mock, car: Car) -> None:
    mock_use_case.execute.return_value = MarkCarUnavailableResponse(car=car)
    _override(app, get_mark_car_unavailable_use_case, mock_use_case)

    response = client.patch("/v1/cars/6/unavailable")

    assert response.status_code == 200
    mock_use_case.execute.assert_called_once_with(MarkCarUnavailableRequest(car_id=6))


def test_mark_unavailable_missing_car(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.return_value = MarkCarUnavailableResponse(car=None)
    _override(app, get_mark_car_unavailable_use_case, mock_use_case)

    assert client.patch("/v1/cars/99/unavailable").status_code == 404


def test_unexpected_error_is_generic_500(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = RuntimeError("secret internals")
    _override(app, get_list_cars_use_case, mock_use_case)

    response = client.get("/v1/cars")

    assert response.status_code == 500
    assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"}
    assert "secret" not in response.text
