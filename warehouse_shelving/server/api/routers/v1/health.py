"""Liveness, readiness and configuration endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from warehouse_shelving.enterprise.config.settings import AppSettings
from warehouse_shelving.server.api.schemas.warehouses import AppConfigSchema
from warehouse_shelving.server.dependencies import get_app_settings, repository_backend

router = APIRouter(tags=["health"])


@router.get("/health/live")
async def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/ready")
async def ready(settings: AppSettings = Depends(get_app_settings)) -> dict[str, str]:
    return {"status": "ready", "repository": repository_backend(settings)}


@router.get("/config", response_model=AppConfigSchema)
async def get_configuration(settings: AppSettings = Depends(get_app_settings)) -> AppConfigSchema:
    return AppConfigSchema.from_settings(settings)
