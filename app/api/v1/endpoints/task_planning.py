"""Task planning configuration API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.task_planning import TaskPlanningCreate, TaskPlanningUpdate, TaskPlanningResponse
from app.services.dependency_rules import DependencyRules, EntityType


router = APIRouter()


@router.get("", response_model=List[TaskPlanningResponse])
async def list_task_planning(
    db: DB,
    user_id: CurrentUserId,
    inventory_group_id: Optional[int] = Query(None),
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_PLANNING)
    return await gateway.list(user_id, inventory_group_id=inventory_group_id)


@router.post("", response_model=TaskPlanningResponse, status_code=status.HTTP_201_CREATED)
async def create_task_planning(data: TaskPlanningCreate, db: DB, user_id: CurrentUserId):
    return await DependencyRules(db, user_id).create_child(
        EntityType.TASK_PLANNING, data.inventory_group_id, data
    )


@router.get("/{config_id}", response_model=TaskPlanningResponse)
async def get_task_planning(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_PLANNING)
    return await gateway.get(config_id, user_id)


@router.put("/{config_id}", response_model=TaskPlanningResponse)
async def update_task_planning(
    config_id: int,
    data: TaskPlanningUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_PLANNING)
    return await gateway.update(config_id, data, user_id, expected_version=expected_version)


@router.delete("/{config_id}", response_model=DeleteResponse)
async def delete_task_planning(config_id: int, db: DB, user_id: CurrentUserId):
    """Delete a task planning configuration and its task execution settings."""
    deleted = await DependencyRules(db, user_id).delete_with_dependents(EntityType.TASK_PLANNING, config_id)
    if not deleted:
        raise NotFoundError("Task planning configuration", config_id)
    deleted.pop(EntityType.TASK_PLANNING.value, None)
    return DeleteResponse(id=config_id, deleted_dependents=deleted)
