"""Pick strategy API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.pick_strategy import PickStrategyCreate, PickStrategyUpdate, PickStrategyResponse
from app.services.dependency_rules import DependencyRules, EntityType


router = APIRouter()


@router.get("", response_model=List[PickStrategyResponse])
async def list_pick_strategies(
    db: DB,
    user_id: CurrentUserId,
    inventory_group_id: Optional[int] = Query(None),
):
    """Get pick strategies, optionally for one group."""
    gateway = DependencyRules(db, user_id).gateway(EntityType.PICK_STRATEGY)
    return await gateway.list(user_id, inventory_group_id=inventory_group_id)


@router.post("", response_model=PickStrategyResponse, status_code=status.HTTP_201_CREATED)
async def create_pick_strategy(data: PickStrategyCreate, db: DB, user_id: CurrentUserId):
    """Create a pick strategy for an existing inventory group."""
    return await DependencyRules(db, user_id).create_child(
        EntityType.PICK_STRATEGY, data.inventory_group_id, data
    )


@router.get("/{strategy_id}", response_model=PickStrategyResponse)
async def get_pick_strategy(strategy_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.PICK_STRATEGY)
    return await gateway.get(strategy_id, user_id)


@router.put("/{strategy_id}", response_model=PickStrategyResponse)
async def update_pick_strategy(
    strategy_id: int,
    data: PickStrategyUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.PICK_STRATEGY)
    return await gateway.update(strategy_id, data, user_id, expected_version=expected_version)


@router.delete("/{strategy_id}", response_model=DeleteResponse)
async def delete_pick_strategy(strategy_id: int, db: DB, user_id: CurrentUserId):
    """Delete a pick strategy with its HU formation and work order settings."""
    deleted = await DependencyRules(db, user_id).delete_with_dependents(EntityType.PICK_STRATEGY, strategy_id)
    if not deleted:
        raise NotFoundError("Pick strategy", strategy_id)
    deleted.pop(EntityType.PICK_STRATEGY.value, None)
    return DeleteResponse(id=strategy_id, deleted_dependents=deleted)
