"""HU formation configuration API endpoints (one per pick strategy)."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.pick_strategy import HUFormationCreate, HUFormationUpdate, HUFormationResponse
from app.services.dependency_rules import DependencyRules, EntityType


router = APIRouter()


@router.get("", response_model=List[HUFormationResponse])
async def list_hu_formations(
    db: DB,
    user_id: CurrentUserId,
    pick_strategy_id: Optional[int] = Query(None),
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.HU_FORMATION)
    return await gateway.list(user_id, pick_strategy_id=pick_strategy_id)


@router.post("", response_model=HUFormationResponse, status_code=status.HTTP_201_CREATED)
async def create_hu_formation(data: HUFormationCreate, db: DB, user_id: CurrentUserId):
    """Create HU formation settings; 400 if the strategy already has them."""
    return await DependencyRules(db, user_id).create_child(
        EntityType.HU_FORMATION, data.pick_strategy_id, data
    )


@router.get("/by-strategy/{pick_strategy_id}", response_model=HUFormationResponse)
async def get_hu_formation_by_strategy(pick_strategy_id: int, db: DB, user_id: CurrentUserId):
    record = await DependencyRules(db, user_id).get_child_by_parent(EntityType.HU_FORMATION, pick_strategy_id)
    if record is None:
        raise NotFoundError("HU formation configuration for pick strategy", pick_strategy_id)
    return record


@router.put("/by-strategy/{pick_strategy_id}", response_model=HUFormationResponse)
async def upsert_hu_formation_by_strategy(
    pick_strategy_id: int,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
    data: Dict[str, Any] = Body(...),
):
    """Create the strategy's HU formation settings, or update the existing ones."""
    record, _ = await DependencyRules(db, user_id).upsert_child(
        EntityType.HU_FORMATION, pick_strategy_id, data, expected_version=expected_version
    )
    return record


@router.get("/{config_id}", response_model=HUFormationResponse)
async def get_hu_formation(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.HU_FORMATION)
    return await gateway.get(config_id, user_id)


@router.put("/{config_id}", response_model=HUFormationResponse)
async def update_hu_formation(
    config_id: int,
    data: HUFormationUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.HU_FORMATION)
    return await gateway.update(config_id, data, user_id, expected_version=expected_version)


@router.delete("/{config_id}", response_model=DeleteResponse)
async def delete_hu_formation(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.HU_FORMATION)
    if not await gateway.delete(config_id, user_id):
        raise NotFoundError("HU formation configuration", config_id)
    return DeleteResponse(id=config_id)
