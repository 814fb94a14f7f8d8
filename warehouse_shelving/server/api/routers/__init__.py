"""API routers exposed by the server package."""

from .v1.families import router as families_router
from .v1.health import router as health_router
from .v1.observability import router as observability_router
from .v1.warehouses import router as warehouses_router

__all__ = [
	"families_router",
	"health_router",
	"observability_router",
	"warehouses_router",
]
