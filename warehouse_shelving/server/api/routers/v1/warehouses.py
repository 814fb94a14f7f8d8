"""Warehouse management and shelf permutation endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from warehouse_shelving.server.api.schemas.warehouses import WarehouseRequestSchema, WarehouseSchema
from warehouse_shelving.server.dependencies import get_warehouse_service
from warehouse_shelving.services import (
    PermutationLimitError,
    ShelfConfigurationError,
    WarehouseNotFoundError,
    WarehouseService,
)

router = APIRouter(prefix="/warehouses", tags=["warehouses"])


def _not_found(warehouse_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Warehouse not found with id: {warehouse_id}",
    )


def _rejected(exc: ShelfConfigurationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": exc.violation.kind.value, "message": exc.violation.message},
    )


@router.post("", response_model=WarehouseSchema, status_code=status.HTTP_201_CREATED)
async def create_warehouse(
    payload: WarehouseRequestSchema,
    service: WarehouseService = Depends(get_warehouse_service),
) -> WarehouseSchema:
    try:
        warehouse = await service.create_warehouse(payload.to_domain())
    except ShelfConfigurationError as exc:
        raise _rejected(exc) from exc
    return WarehouseSchema.from_domain(warehouse)


@router.get("", response_model=List[WarehouseSchema])
async def list_warehouses(service: WarehouseService = Depends(get_warehouse_service)) -> List[WarehouseSchema]:
    warehouses = await service.list_warehouses()
    return [WarehouseSchema.from_domain(warehouse) for warehouse in warehouses]


@router.get("/{warehouse_id}", response_model=WarehouseSchema)
async def get_warehouse(
    warehouse_id: int,
    service: WarehouseService = Depends(get_warehouse_service),
) -> WarehouseSchema:
    warehouse = await service.get_warehouse(warehouse_id)
    if warehouse is None:
        raise _not_found(warehouse_id)
    return WarehouseSchema.from_domain(warehouse)


@router.put("/{warehouse_id}", response_model=WarehouseSchema)
async def update_warehouse(
    warehouse_id: int,
    payload: WarehouseRequestSchema,
    service: WarehouseService = Depends(get_warehouse_service),
) -> WarehouseSchema:
    try:
        warehouse = await service.update_warehouse(warehouse_id, payload.to_domain())
    except WarehouseNotFoundError as exc:
        raise _not_found(warehouse_id) from exc
    except ShelfConfigurationError as exc:
        raise _rejected(exc) from exc
    return WarehouseSchema.from_domain(warehouse)


@router.delete("/{warehouse_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_warehouse(
    warehouse_id: int,
    service: WarehouseService = Depends(get_warehouse_service),
) -> None:
    try:
        await service.delete_warehouse(warehouse_id)
    except WarehouseNotFoundError as exc:
        raise _not_found(warehouse_id) from exc


@router.get("/{warehouse_id}/shelf-permutations", response_model=List[str])
async def shelf_permutations(
    warehouse_id: int,
    service: WarehouseService = Depends(get_warehouse_service),
) -> List[str]:
    try:
        return await service.calculate_permutations(warehouse_id)
    except WarehouseNotFoundError as exc:
        raise _not_found(warehouse_id) from exc
    except PermutationLimitError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
