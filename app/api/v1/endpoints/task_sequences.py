"""Task sequence configuration API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.task_sequence import TaskSequenceCreate, TaskSequenceUpdate, TaskSequenceResponse
from app.services.dependency_rules import DependencyRules, EntityType


router = APIRouter()


@router.get("", response_model=List[TaskSequenceResponse])
async def list_task_sequences(
    db: DB,
    user_id: CurrentUserId,
    inventory_group_id: Optional[int] = Query(None),
):
    """Get task sequence configurations, optionally for one group."""
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_SEQUENCE)
    return await gateway.list(user_id, inventory_group_id=inventory_group_id)


@router.post("", response_model=TaskSequenceResponse, status_code=status.HTTP_201_CREATED)
async def create_task_sequence(data: TaskSequenceCreate, db: DB, user_id: CurrentUserId):
    """Create a task sequence configuration for an existing inventory group."""
    return await DependencyRules(db, user_id).create_child(
        EntityType.TASK_SEQUENCE, data.inventory_group_id, data
    )


@router.get("/{config_id}", response_model=TaskSequenceResponse)
async def get_task_sequence(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_SEQUENCE)
    return await gateway.get(config_id, user_id)


@router.put("/{config_id}", response_model=TaskSequenceResponse)
async def update_task_sequence(
    config_id: int,
    data: TaskSequenceUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_SEQUENCE)
    return await gateway.update(config_id, data, user_id, expected_version=expected_version)


@router.delete("/{config_id}", response_model=DeleteResponse)
async def delete_task_sequence(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_SEQUENCE)
    if not await gateway.delete(config_id, user_id):
        raise NotFoundError("Task sequence configuration", config_id)
    return DeleteResponse(id=config_id)
