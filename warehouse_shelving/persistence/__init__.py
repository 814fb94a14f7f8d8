"""Persistence layer built on async SQLAlchemy, with an in-memory fallback."""

from .base import WarehouseRepository
from .database import create_schema, dispose_engine, get_async_session, init_engine, metadata
from .memory import InMemoryWarehouseRepository
from .repository import SqlWarehouseRepository

__all__ = [
    "init_engine",
    "create_schema",
    "dispose_engine",
    "get_async_session",
    "metadata",
    "InMemoryWarehouseRepository",
    "SqlWarehouseRepository",
    "WarehouseRepository",
]
