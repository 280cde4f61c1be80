from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import create_engine, text

from src.config import Settings, get_settings

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {"status": "ok", "backend": "postgres"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {
                            "status": "error",
                            "backend": "postgres",
                            "message": "Connection error or unexpected result",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "storage": {"status": "ok", "backend": settings.STORAGE_BACKEND},
    }
    has_error = False

    # The in-memory backend has nothing to reach
    if settings.STORAGE_BACKEND == "postgres":
        try:
            engine = create_engine(settings.POSTGRES_URL)
            try:
                with engine.connect() as connection:
                    result = connection.execute(text("SELECT 1")).scalar()
                    if result != 1:
                        raise Exception("Postgres health check failed")
            finally:
                engine.dispose()
        except Exception as e:
            health_status["storage"].update({"status": "error", "message": str(e)})
            has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
