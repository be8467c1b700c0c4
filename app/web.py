from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.schemas import LatestStateResponse
from services.sensor_service import SensorService, build_default_service


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

REFRESH_SECONDS = 5


def get_service() -> SensorService:
    return build_default_service()


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    service: SensorService = Depends(get_service),
) -> HTMLResponse:
    latest = LatestStateResponse.from_state(service.latest())
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {
            "latest": latest,
            "refresh_seconds": REFRESH_SECONDS,
        },
    )
