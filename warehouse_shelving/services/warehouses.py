"""Orchestration of warehouse use cases on top of the shelving rules."""

from __future__ import annotations

from typing import List, Optional

import structlog

from warehouse_shelving.enterprise.config.settings import AppSettings, get_settings
from warehouse_shelving.enterprise.core import (
    Warehouse,
    allowed_types,
    generate,
    permutation_count,
    validate_warehouse,
)
from warehouse_shelving.observability.metrics import (
    PERMUTATION_DURATION,
    record_rejection,
    record_warehouse_created,
)
from warehouse_shelving.observability.tracing import get_tracer
from warehouse_shelving.persistence.base import WarehouseRepository
from warehouse_shelving.services.errors import (
    PermutationLimitError,
    ShelfConfigurationError,
    WarehouseNotFoundError,
)

logger = structlog.get_logger(__name__)


class WarehouseService:
    """Validates warehouses before persisting them and enumerates their layouts.

    The repository is injected so callers can choose between the SQL backend
    and the in-memory one.
    """

    def __init__(self, repository: WarehouseRepository, settings: Optional[AppSettings] = None) -> None:
        self.repository = repository
        self.settings = settings or get_settings()

    def _ensure_valid(self, warehouse: Warehouse) -> None:
        result = validate_warehouse(warehouse)
        if result.error is not None:
            record_rejection(result.error.kind)
            logger.info(
                "warehouse_rejected",
                family=warehouse.family.value,
                kind=result.error.kind.value,
                reason=result.error.message,
            )
            raise ShelfConfigurationError(result.error)

    async def create_warehouse(self, warehouse: Warehouse) -> Warehouse:
        self._ensure_valid(warehouse)
        saved = await self.repository.save(warehouse.model_copy(update={"id": None}))
        record_warehouse_created()
        logger.info("warehouse_created", warehouse_id=saved.id, family=saved.family.value, shelves=len(saved.shelves))
        return saved

    async def get_warehouse(self, warehouse_id: int) -> Optional[Warehouse]:
        return await self.repository.find_by_id(warehouse_id)

    async def list_warehouses(self) -> List[Warehouse]:
        return await self.repository.find_all()

    async def update_warehouse(self, warehouse_id: int, warehouse: Warehouse) -> Warehouse:
        """Replace the stored aggregate, applying the same rules as creation."""

        if not await self.repository.exists_by_id(warehouse_id):
            raise WarehouseNotFoundError(warehouse_id)
        self._ensure_valid(warehouse)
        saved = await self.repository.save(warehouse.model_copy(update={"id": warehouse_id}))
        logger.info("warehouse_updated", warehouse_id=saved.id, shelves=len(saved.shelves))
        return saved

    async def delete_warehouse(self, warehouse_id: int) -> None:
        if not await self.repository.exists_by_id(warehouse_id):
            raise WarehouseNotFoundError(warehouse_id)
        await self.repository.delete_by_id(warehouse_id)
        logger.info("warehouse_deleted", warehouse_id=warehouse_id)

    async def calculate_permutations(self, warehouse_id: int) -> List[str]:
        warehouse = await self.repository.find_by_id(warehouse_id)
        if warehouse is None:
            raise WarehouseNotFoundError(warehouse_id)

        types = allowed_types(warehouse.family)
        limit = self.settings.permutations.max_length
        if warehouse.max_shelves > limit:
            raise PermutationLimitError(
                f"Warehouse capacity {warehouse.max_shelves} exceeds the permutation limit of {limit} "
                f"({permutation_count(len(types), warehouse.max_shelves)} combinations)."
            )

        with get_tracer(__name__).start_as_current_span("generate_shelf_permutations") as span:
            span.set_attribute("warehouse.family", warehouse.family.value)
            span.set_attribute("warehouse.max_shelves", warehouse.max_shelves)
            with PERMUTATION_DURATION.time():
                result = generate(types, warehouse.max_shelves)

        if result.error is not None:
            raise PermutationLimitError(result.error.message, violation=result.error)
        permutations = result.value or []
        logger.info("permutations_generated", warehouse_id=warehouse_id, count=len(permutations))
        return permutations
