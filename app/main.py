from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response

from app.api import router
from app.web import router as web_router
from logging_config import configure_logging
from services.sensor_service import build_default_service
from settings import get_settings

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    service = build_default_service()
    if get_settings().train_on_startup:
        service.warm_up()
    try:
        yield
    finally:
        service.shutdown()
        build_default_service.cache_clear()


async def allow_any_origin(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def create_app() -> FastAPI:
    configure_logging()
    settings = get_settings()
    app = FastAPI(
        title=settings.service_name,
        description="Classifies gas, temperature and humidity readings and drives the odor spray.",
        version=settings.version,
        lifespan=lifespan,
    )
    app.middleware("http")(allow_any_origin)
    app.include_router(router)
    app.include_router(web_router)
    return app

app = create_app()
