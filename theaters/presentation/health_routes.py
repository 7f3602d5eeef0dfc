"""Liveness and readiness probes."""

from typing import Final

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..config import settings
from ..infrastructure.database.database import get_session, ping_db
from ..logging_config import get_logger

logger: Final = get_logger(__name__)

health_router: Final = APIRouter(prefix="/health", tags=["health"])


@health_router.get("", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
    }


@health_router.get("/ready")
async def readiness_check(session: Session = Depends(get_session)):
    """Readiness probe, including database connectivity."""
    try:
        ping_db(session)
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
