from fastapi import FastAPI

from cta_market.entrypoints.http.exception_handlers import register_exception_handlers
from cta_market.entrypoints.http.routes.admin import router as admin_router
from cta_market.entrypoints.http.routes.buyers import router as buyers_router
from cta_market.entrypoints.http.routes.cars import router as cars_router
from cta_market.entrypoints.http.routes.catalog import router as catalog_router
from cta_market.entrypoints.http.routes.dealerships import router as dealerships_router
from cta_market.entrypoints.http.routes.favorites import router as favorites_router
from cta_market.entrypoints.http.routes.health import router as health_router
from cta_market.entrypoints.http.routes.offers import router as offers_router
from cta_market.entrypoints.http.routes.purchases import router as purchases_router
from cta_market.infra.config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="CTA Market API",
        description="""
        Car dealership marketplace API.

        ## Features
        - Browse and search the catalog of cars with their dealership offers
        - Publish cars (administrators) and offers (dealerships)
        - Register dealerships and buyers
        - Record purchases and follow their status
        - Favorites, reviews and admin statistics

        ## Session
        Write operations read the caller from `X-User-Id` and `X-User-Role`
        (`BUYER`, `DEALERSHIP`, `ADMINISTRATOR`). Credentials are verified
        upstream.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "CTA Market Team",
            "email": "dev@cta-market.com",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(cars_router, prefix="/v1")
    app.include_router(offers_router, prefix="/v1")
    app.include_router(dealerships_router, prefix="/v1")
    app.include_router(buyers_router, prefix="/v1")
    app.include_router(purchases_router, prefix="/v1")
    app.include_router(favorites_router, prefix="/v1")
    app.include_router(admin_router, prefix="/v1")

    return app


app = build_app()
