"""Dependency providers for the API layer."""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends

from warehouse_shelving.enterprise.config.settings import AppSettings, get_settings
from warehouse_shelving.persistence import (
    InMemoryWarehouseRepository,
    SqlWarehouseRepository,
    WarehouseRepository,
    get_async_session,
    init_engine,
)
from warehouse_shelving.services import WarehouseService

__all__ = [
    "get_app_settings",
    "get_memory_repository",
    "get_repository",
    "get_warehouse_service",
    "repository_backend",
    "reset_repository",
]


_memory_repo: Optional[InMemoryWarehouseRepository] = None


def get_app_settings() -> AppSettings:
    return get_settings()


def repository_backend(settings: AppSettings) -> str:
    return "sql" if settings.database.enabled else "memory"


def get_memory_repository() -> InMemoryWarehouseRepository:
    global _memory_repo
    if _memory_repo is None:
        _memory_repo = InMemoryWarehouseRepository()
    return _memory_repo


async def get_repository(
    settings: AppSettings = Depends(get_app_settings),
) -> AsyncGenerator[WarehouseRepository, None]:
    if not settings.database.enabled:
        yield get_memory_repository()
        return

    init_engine(settings)
    async with get_async_session() as session:
        yield SqlWarehouseRepository(session)


def get_warehouse_service(
    repository: WarehouseRepository = Depends(get_repository),
    settings: AppSettings = Depends(get_app_settings),
) -> WarehouseService:
    return WarehouseService(repository, settings)


def reset_repository() -> None:
    """Drop the in-memory repository (useful for tests)."""

    global _memory_repo
    _memory_repo = None
