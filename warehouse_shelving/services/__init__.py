"""Service layer exports for the warehouse shelving platform."""

from .errors import PermutationLimitError, ShelfConfigurationError, WarehouseNotFoundError
from .seed import demo_warehouses, seed_demo_warehouses
from .warehouses import WarehouseService

__all__ = [
	"PermutationLimitError",
	"ShelfConfigurationError",
	"WarehouseNotFoundError",
	"WarehouseService",
	"demo_warehouses",
	"seed_demo_warehouses",
]
