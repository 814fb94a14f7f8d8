"""Read-only view of the family shelf policy."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from warehouse_shelving.enterprise.core import families
from warehouse_shelving.server.api.schemas.warehouses import FamilySchema

router = APIRouter(prefix="/families", tags=["families"])


@router.get("", response_model=List[FamilySchema])
async def list_families() -> List[FamilySchema]:
    return [FamilySchema.from_family(family) for family in families()]
