import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gymbot.core.config import Settings, get_settings
from gymbot.core.log import configure_logging
from gymbot.repositories.json_storage import JSONExerciseStorage, StorageError
from gymbot.routers import exercises as exercises_router
from gymbot.routers import health as health_router
from gymbot.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": "Exercise storage unavailable"}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API with its storage and service wired from `settings`."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=f"{settings.app_name} API", version=settings.app_version)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            max_age=3600,
        )
    app.add_exception_handler(StorageError, _storage_error_handler)

    storage = JSONExerciseStorage(settings.data_storage_path)
    app.state.settings = settings
    app.state.exercise_service = ExerciseService(storage)

    app.include_router(health_router.router)
    app.include_router(exercises_router.router)

    logger.info("Exercise data file: %s (env=%s)", storage.path, settings.app_env)
    return app
