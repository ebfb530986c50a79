"""
FastAPI application factory.

* Registers the distance API and the HTML form page.
* Maps ``InvalidCoordinate`` to a 400 JSON error.
* Applies ``LOG_LEVEL`` to the ``src`` loggers.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import distance, pages
from src.api.schemas import ErrorResponse
from src.config import Settings, settings as default_settings
from src.domain.distance import InvalidCoordinate

logging.basicConfig(level=logging.INFO)


async def invalid_coordinate_handler(request: Request, exc: InvalidCoordinate):
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=InvalidCoordinate.message).model_dump(),
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.getLogger("src").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Distance API",
        description="Euclidean distance of a 3D point from the origin.",
        version="1.0.0",
    )

    app.add_exception_handler(InvalidCoordinate, invalid_coordinate_handler)

    # Routers
    app.include_router(distance.router)
    app.include_router(pages.router)

    return app
