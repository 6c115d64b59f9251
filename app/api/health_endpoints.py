"""
Health check endpoint.

GET /health reports the service version and probes the database with
``SELECT 1``. A failed probe marks the service unhealthy but still
answers 200 so orchestrators can read the body.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging
import time

from app.config.settings import get_settings
from app.core.db import get_db
from app.models.api_models import HealthCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Basic health check",
    description="Returns service status with a database connectivity probe"
)
def health_check(request: Request, db: Session = Depends(get_db)) -> HealthCheckResponse:
    settings = get_settings()
    request_id = getattr(request.state, 'request_id', 'unknown')

    try:
        start = time.time()
        db.execute(text("SELECT 1"))
        database = {
            "status": "healthy",
            "latency_ms": round((time.time() - start) * 1000, 2),
        }
    except SQLAlchemyError as e:
        logger.error(
            f"Database health check failed: {e}",
            extra={'request_id': request_id}
        )
        database = {"status": "unhealthy", "error": type(e).__name__}

    return HealthCheckResponse(
        status="healthy" if database["status"] == "healthy" else "unhealthy",
        version=settings.app_version,
        environment=settings.environment.value,
        database=database,
        uptime_seconds=int(time.time() - _app_start_time),
    )
