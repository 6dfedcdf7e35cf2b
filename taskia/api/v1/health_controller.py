"""
Health Controller
=================

Liveness and database reachability endpoints.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from taskia.api.v1.dependencies import get_mongo_client_manager
from taskia.application.dto.common_dto import DatabaseHealthResponse, HealthResponse
from taskia.infrastructure.db.mongo_connection import MongoClientManager
from taskia.utils.datetime_utils import now

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("", response_model=HealthResponse, summary="API liveness")
def health() -> HealthResponse:
    return HealthResponse(status="Healthy", message="API is running", timestamp=now())


@router.get(
    "/database",
    response_model=DatabaseHealthResponse,
    summary="Database reachability",
    description="Returns 503 when MongoDB does not answer.",
)
def database_health(mongo_client: MongoClientManager = Depends(get_mongo_client_manager)):
    try:
        mongo_client.ping()
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        body = DatabaseHealthResponse(
            status="Unhealthy",
            database=mongo_client.database_name,
            message="Database is unreachable",
        )
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=jsonable_encoder(body))

    return DatabaseHealthResponse(
        status="Healthy",
        database=mongo_client.database_name,
        message="Database connection is working",
    )
