"""Stock allocation strategy API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.inventory_group import AllocationStatusResponse
from app.schemas.stock_allocation import StockAllocationCreate, StockAllocationUpdate, StockAllocationResponse
from app.services.dependency_rules import DependencyRules, EntityType
from app.services.inventory_group_service import InventoryGroupService


router = APIRouter()


@router.get("", response_model=List[StockAllocationResponse])
async def list_stock_allocation_strategies(
    db: DB,
    user_id: CurrentUserId,
    inventory_group_id: Optional[int] = Query(None),
    mode: Optional[str] = Query(None, description="PICK or PUT"),
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.STOCK_ALLOCATION)
    return await gateway.list(
        user_id,
        inventory_group_id=inventory_group_id,
        mode=mode.upper() if mode else None,
    )


@router.get("/allocation-status", response_model=AllocationStatusResponse)
async def get_allocation_status(db: DB, user_id: CurrentUserId):
    """PICK/PUT coverage per group; a group is configured with exactly one of each."""
    return await DependencyRules(db, user_id).allocation_status()


@router.get("/by-group/{inventory_group_id}", response_model=List[StockAllocationResponse])
async def get_strategies_by_group(inventory_group_id: int, db: DB, user_id: CurrentUserId):
    return await InventoryGroupService(db, user_id).allocation_strategies(inventory_group_id)


@router.post("", response_model=StockAllocationResponse, status_code=status.HTTP_201_CREATED)
async def create_stock_allocation_strategy(data: StockAllocationCreate, db: DB, user_id: CurrentUserId):
    return await DependencyRules(db, user_id).create_child(
        EntityType.STOCK_ALLOCATION, data.inventory_group_id, data
    )


@router.get("/{strategy_id}", response_model=StockAllocationResponse)
async def get_stock_allocation_strategy(strategy_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.STOCK_ALLOCATION)
    return await gateway.get(strategy_id, user_id)


@router.put("/{strategy_id}", response_model=StockAllocationResponse)
async def update_stock_allocation_strategy(
    strategy_id: int,
    data: StockAllocationUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.STOCK_ALLOCATION)
    return await gateway.update(strategy_id, data, user_id, expected_version=expected_version)


@router.delete("/{strategy_id}", response_model=DeleteResponse)
async def delete_stock_allocation_strategy(strategy_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.STOCK_ALLOCATION)
    if not await gateway.delete(strategy_id, user_id):
        raise NotFoundError("Stock allocation strategy", strategy_id)
    return DeleteResponse(id=strategy_id)
