"""Observability endpoints (metrics)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from prometheus_client import generate_latest

from warehouse_shelving.enterprise.config.settings import AppSettings
from warehouse_shelving.observability.metrics import metrics_registry
from warehouse_shelving.server.dependencies import get_app_settings

router = APIRouter(prefix="/observability", tags=["observability"])


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics(settings: AppSettings = Depends(get_app_settings)) -> PlainTextResponse:
    if not settings.telemetry.metrics_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metrics are disabled")
    data = generate_latest(metrics_registry)
    return PlainTextResponse(data, media_type="text/plain; version=0.0.4")
