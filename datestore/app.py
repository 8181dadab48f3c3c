import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from datestore.core.config import Settings, get_settings
from datestore.core.logging_config import setup_logging
from datestore.repositories import DateStorage, JsonDateStorage
from datestore.routers import dates as dates_router
from datestore.services.date_service import DateService

logger = logging.getLogger(__name__)


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = dates_router.invalid_body_message(request.method, request.url.path)
    return JSONResponse({"error": message}, status_code=400)


def create_app(settings: Settings | None = None, storage: DateStorage | None = None) -> FastAPI:
    """Build the API. Storage defaults to the JSON file named in settings."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    storage = storage if storage is not None else JsonDateStorage(settings.data_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running on port %s", settings.port)
        yield
        logger.info("Shutting down...")

    app = FastAPI(title="Date Store API", lifespan=lifespan)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)

    app.state.settings = settings
    app.state.date_service = DateService(storage)
    app.include_router(dates_router.router)
    return app


app = create_app()
