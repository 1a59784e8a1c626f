"""Inventory group API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.config import settings
from app.schemas.base import DeleteResponse
from app.schemas.inventory_group import (
    InventoryGroupCreate,
    InventoryGroupUpdate,
    InventoryGroupResponse,
)
from app.services.inventory_group_service import InventoryGroupService


router = APIRouter()


@router.get("", response_model=List[InventoryGroupResponse])
async def list_inventory_groups(db: DB, user_id: CurrentUserId):
    """Get all inventory groups of the user."""
    return await InventoryGroupService(db, user_id).list_groups()


@router.post("", response_model=InventoryGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_group(
    data: InventoryGroupCreate,
    db: DB,
    user_id: CurrentUserId,
    seed_strategies: Optional[bool] = Query(
        None, description="Seed a default PICK + PUT allocation pair; defaults to AUTO_SEED_ALLOCATION_STRATEGIES"
    ),
):
    """
    Create an inventory group.

    Rejected with 400 when another group uses the same combination of
    storage/location instruction and identifiers.
    """
    seed = settings.AUTO_SEED_ALLOCATION_STRATEGIES if seed_strategies is None else seed_strategies
    return await InventoryGroupService(db, user_id).create_group(data, seed_strategies=seed)


@router.get("/{group_id}", response_model=InventoryGroupResponse)
async def get_inventory_group(group_id: int, db: DB, user_id: CurrentUserId):
    """Get inventory group by ID."""
    return await InventoryGroupService(db, user_id).get_group(group_id)


@router.put("/{group_id}", response_model=InventoryGroupResponse)
async def update_inventory_group(
    group_id: int,
    data: InventoryGroupUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    """Update an inventory group."""
    return await InventoryGroupService(db, user_id).update_group(
        group_id, data, expected_version=expected_version
    )


@router.delete("/{group_id}", response_model=DeleteResponse)
async def delete_inventory_group(group_id: int, db: DB, user_id: CurrentUserId):
    """Delete an inventory group together with everything configured under it."""
    deleted = await InventoryGroupService(db, user_id).delete_group(group_id)
    if not deleted:
        raise NotFoundError("Inventory group", group_id)
    deleted.pop("inventory_groups", None)
    return DeleteResponse(id=group_id, deleted_dependents=deleted)
