from fastapi import APIRouter, Depends, Request, Response, status

from car_inventory.domain.errors import NotFoundError
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
from car_inventory.entrypoints.http.dtos.cars import (
    AveragePriceResponseDTO,
    CarCreateDTO,
    CarResponseDTO,
    CarUpdateDTO,
)
from car_inventory.entrypoints.http.error_responses import ErrorResponse
from car_inventory.entrypoints.http.mappers.car_mapper import CarMapper
from car_inventory.use_cases.calculate_average_price import CalculateAveragePrice
from car_inventory.use_cases.create_car import CreateCar, CreateCarRequest
from car_inventory.use_cases.delete_car import DeleteCar, DeleteCarRequest
from car_inventory.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from car_inventory.use_cases.list_available_cars import ListAvailableCars
from car_inventory.use_cases.list_cars import ListCars
from car_inventory.use_cases.list_cars_by_make import ListCarsByMake, ListCarsByMakeRequest
from car_inventory.use_cases.mark_car_unavailable import (
    MarkCarUnavailable,
    MarkCarUnavailableRequest,
)
from car_inventory.use_cases.update_car import UpdateCar, UpdateCarRequest


router = APIRouter(tags=["Cars"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Car not found"}}
VALIDATION_RESPONSE = {422: {"model": ErrorResponse, "description": "Validation error"}}


def _car_not_found(car_id: int) -> NotFoundError:
    return NotFoundError(resource="Car", identifier=str(car_id))


# Fixed paths are registered before /cars/{car_id} so they never reach the id route.


@router.get(
    "/cars",
    response_model=list[CarResponseDTO],
    summary="List all cars",
)
def list_cars(use_case: ListCars = Depends(get_list_cars_use_case)) -> list[CarResponseDTO]:
    result = use_case.execute()
    return CarMapper.to_car_list(result.cars)


@router.get(
    "/cars/available",
    response_model=list[CarResponseDTO],
    summary="List available cars",
)
def list_available_cars(
    use_case: ListAvailableCars = Depends(get_list_available_cars_use_case),
) -> list[CarResponseDTO]:
    result = use_case.execute()
    return CarMapper.to_car_list(result.cars)


@router.get(
    "/cars/average-price",
    response_model=AveragePriceResponseDTO,
    summary="Average price of all cars",
    description="""
    Exact mean price over the whole inventory (no rounding).

    Returns "0" when the inventory is empty.
    """,
)
def get_average_price(
    use_case: CalculateAveragePrice = Depends(get_calculate_average_price_use_case),
) -> AveragePriceResponseDTO:
    result = use_case.execute()
    return CarMapper.to_average_price_response(result.average_price)


@router.get(
    "/cars/make/{make}",
    response_model=list[CarResponseDTO],
    summary="List cars by make",
    description="Case-insensitive exact match on the make.",
)
def list_cars_by_make(
    make: str,
    use_case: ListCarsByMake = Depends(get_list_cars_by_make_use_case),
) -> list[CarResponseDTO]:
    result = use_case.execute(ListCarsByMakeRequest(make=make))
    return CarMapper.to_car_list(result.cars)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get a car",
    responses=NOT_FOUND_RESPONSE,
)
def get_car_by_id(
    car_id: int,
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    if result.car is None:
        raise _car_not_found(car_id)

    return CarMapper.to_car_response(result.car)


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a car",
    description="""
    Add a car to the inventory.

    ## Duplicates
    A car with the same make, model, year and color (case-insensitive)
    is rejected with 409 Conflict.

    ## Monetary Values
    Price is a decimal string or JSON number (e.g. "25000.00" or 25000).
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Duplicate car"},
        **VALIDATION_RESPONSE,
    },
)
def create_car(
    payload: CarCreateDTO,
    request: Request,
    response: Response,
    use_case: CreateCar = Depends(get_create_car_use_case),
) -> CarResponseDTO:
    """Create car endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request (string → Decimal)
    new_car = CarMapper.to_new_car(payload)

    # 2. Execute use case (validates and rejects duplicates)
    result = use_case.execute(CreateCarRequest(car=new_car))

    # 3. Map to response
    response.headers["Location"] = str(request.url_for("get_car_by_id", car_id=result.car.id))
    return CarMapper.to_car_response(result.car)


@router.put(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Update a car",
    description="""
    Partial update: only non-empty fields in the payload are applied.
    The creation timestamp is preserved and updated_at is refreshed.
    """,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_car(
    car_id: int,
    payload: CarUpdateDTO,
    use_case: UpdateCar = Depends(get_update_car_use_case),
) -> CarResponseDTO:
    changes = CarMapper.to_car_changes(payload)

    result = use_case.execute(UpdateCarRequest(car_id=car_id, changes=changes))
    if result.car is None:
        raise _car_not_found(car_id)

    return CarMapper.to_car_response(result.car)


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a car",
    description="Only available cars can be deleted; unavailable ones return 400.",
    responses={
        400: {"model": ErrorResponse, "description": "Car is not available"},
        **NOT_FOUND_RESPONSE,
    },
)
def delete_car(
    car_id: int,
    use_case: DeleteCar = Depends(get_delete_car_use_case),
) -> Response:
    result = use_case.execute(DeleteCarRequest(car_id=car_id))
    if not result.deleted:
        raise _car_not_found(car_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/cars/{car_id}/unavailable",
    response_model=CarResponseDTO,
    summary="Mark a car as unavailable",
    responses=NOT_FOUND_RESPONSE,
)
def mark_car_unavailable(
    car_id: int,
    use_case: MarkCarUnavailable = Depends(get_mark_car_unavailable_use_case),
) -> CarResponseDTO:
    result = use_case.execute(MarkCarUnavailableRequest(car_id=car_id))
    if result.car is None:
        raise _car_not_found(car_id)

    return CarMapper.to_car_response(result.car)
