"""Versioned API routers."""

from .families import router as families
from .health import router as health
from .observability import router as observability
from .warehouses import router as warehouses

__all__ = ["families", "health", "observability", "warehouses"]
