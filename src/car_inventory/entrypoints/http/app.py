import uvicorn
from fastapi import FastAPI

from car_inventory.entrypoints.http.exception_handlers import register_exception_handlers
from car_inventory.entrypoints.http.routes.cars import router as cars_router
from car_inventory.entrypoints.http.routes.health import router as health_router
from car_inventory.infra.config import configure_logging, load_settings


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Inventory API",
        description="""
        Inventory service for car listings.

        ## Features
        - Create, read, update and delete cars
        - Filter by make or availability
        - Average price of the inventory

        ## Storage
        Cars are kept in memory and are lost when the process stops.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")

    return app


app = build_app()


def main() -> None:
    """Run the API with uvicorn using CAR_INVENTORY_* settings."""
    settings = load_settings()
    configure_logging(settings.log_level)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the root logging configuration
    )


if __name__ == "__main__":
    main()
