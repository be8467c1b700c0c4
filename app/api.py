"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.schemas import (
    ErrorResponse,
    HealthResponse,
    IngestRequest,
    IngestResponse,
    LatestStateResponse,
    describe_validation_error,
)
from models.records import Reading
from services.sensor_service import SensorService, build_default_service
from settings import get_settings

logger = logging.getLogger(__name__)

PREDICT_PATH = "/api/predict"
HEALTH_PATH = "/api/health"

router = APIRouter()


def get_service() -> SensorService:
    return build_default_service()


def _error_response(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _method_not_allowed(allowed: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"error": "method not allowed"},
        headers={"Allow": allowed},
    )


def _parse_reading(payload: Any) -> Reading:
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object with mq, temperature and humidity.")
    try:
        request = IngestRequest.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(describe_validation_error(exc)) from exc
    return request.to_reading()


@router.post(
    PREDICT_PATH,
    response_model=IngestResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Ingest a sensor reading and return the spray decision.",
)
async def ingest_reading(
    request: Request,
    service: SensorService = Depends(get_service),
) -> IngestResponse | JSONResponse:
    try:
        payload = await request.json()
    except ValueError:
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "Request body must be valid JSON."
        )

    try:
        reading = _parse_reading(payload)
    except ValueError as exc:
        logger.warning("Rejected sensor payload", extra={"reason": str(exc)})
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    try:
        state = await run_in_threadpool(service.ingest, reading)
        return IngestResponse.from_state(state)
    except Exception as exc:  # noqa: BLE001 - every failure maps to a 500 body
        logger.exception("Ingest failed")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error", error=str(exc)
        )


@router.get(
    PREDICT_PATH,
    response_model=LatestStateResponse,
    summary="Latest reading, decision and prediction for the dashboard.",
)
async def latest_state(
    service: SensorService = Depends(get_service),
) -> LatestStateResponse | JSONResponse:
    try:
        return LatestStateResponse.from_state(service.latest())
    except Exception as exc:  # noqa: BLE001 - every failure maps to a 500 body
        logger.exception("Latest state query failed")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error", error=str(exc)
        )


@router.options(PREDICT_PATH, include_in_schema=False)
async def predict_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.api_route(
    PREDICT_PATH, methods=["PUT", "PATCH", "DELETE"], include_in_schema=False
)
async def predict_method_not_allowed() -> JSONResponse:
    return _method_not_allowed("GET, POST, OPTIONS")


@router.get(
    HEALTH_PATH,
    response_model=HealthResponse,
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        service=settings.service_name,
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version=settings.version,
    )


@router.options(HEALTH_PATH, include_in_schema=False)
async def health_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.api_route(
    HEALTH_PATH, methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False
)
async def health_method_not_allowed() -> JSONResponse:
    return _method_not_allowed("GET, OPTIONS")
