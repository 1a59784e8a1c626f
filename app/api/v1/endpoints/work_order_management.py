"""Work order management configuration API endpoints (one per pick strategy)."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.pick_strategy import (
    WorkOrderManagementCreate,
    WorkOrderManagementUpdate,
    WorkOrderManagementResponse,
)
from app.services.dependency_rules import DependencyRules, EntityType


router = APIRouter()


@router.get("", response_model=List[WorkOrderManagementResponse])
async def list_work_order_management(
    db: DB,
    user_id: CurrentUserId,
    pick_strategy_id: Optional[int] = Query(None),
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.WORK_ORDER_MANAGEMENT)
    return await gateway.list(user_id, pick_strategy_id=pick_strategy_id)


@router.post("", response_model=WorkOrderManagementResponse, status_code=status.HTTP_201_CREATED)
async def create_work_order_management(data: WorkOrderManagementCreate, db: DB, user_id: CurrentUserId):
    """Create work order settings; 400 if the strategy already has them."""
    return await DependencyRules(db, user_id).create_child(
        EntityType.WORK_ORDER_MANAGEMENT, data.pick_strategy_id, data
    )


@router.get("/by-strategy/{pick_strategy_id}", response_model=WorkOrderManagementResponse)
async def get_work_order_management_by_strategy(pick_strategy_id: int, db: DB, user_id: CurrentUserId):
    record = await DependencyRules(db, user_id).get_child_by_parent(
        EntityType.WORK_ORDER_MANAGEMENT, pick_strategy_id
    )
    if record is None:
        raise NotFoundError("Work order management configuration for pick strategy", pick_strategy_id)
    return record


@router.put("/by-strategy/{pick_strategy_id}", response_model=WorkOrderManagementResponse)
async def upsert_work_order_management_by_strategy(
    pick_strategy_id: int,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
    data: Dict[str, Any] = Body(...),
):
    """Create the strategy's work order settings, or update the existing ones."""
    record, _ = await DependencyRules(db, user_id).upsert_child(
        EntityType.WORK_ORDER_MANAGEMENT, pick_strategy_id, data, expected_version=expected_version
    )
    return record


@router.get("/{config_id}", response_model=WorkOrderManagementResponse)
async def get_work_order_management(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.WORK_ORDER_MANAGEMENT)
    return await gateway.get(config_id, user_id)


@router.put("/{config_id}", response_model=WorkOrderManagementResponse)
async def update_work_order_management(
    config_id: int,
    data: WorkOrderManagementUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.WORK_ORDER_MANAGEMENT)
    return await gateway.update(config_id, data, user_id, expected_version=expected_version)


@router.delete("/{config_id}", response_model=DeleteResponse)
async def delete_work_order_management(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.WORK_ORDER_MANAGEMENT)
    if not await gateway.delete(config_id, user_id):
        raise NotFoundError("Work order management configuration", config_id)
    return DeleteResponse(id=config_id)
