import time

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/check")
def health_check():
    return {
        "status": "ok",
        "timestamp": int(time.time() * 1000),
        "message": "GYMBot Backend is healthy",
    }


@router.get("/info")
def health_info(request: Request):
    settings = request.app.state.settings
    return {
        "application": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "features": "Exercise tracking by week and category",
    }
