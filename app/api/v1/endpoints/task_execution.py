"""Task execution configuration API endpoints (one per task planning)."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, status, Query

from app.api.deps import DB, CurrentUserId, ExpectedVersion
from app.core.exceptions import NotFoundError
from app.schemas.base import DeleteResponse
from app.schemas.task_planning import TaskExecutionCreate, TaskExecutionUpdate, TaskExecutionResponse
from app.services.dependency_rules import DependencyRules, EntityType


router = APIRouter()


@router.get("", response_model=List[TaskExecutionResponse])
async def list_task_execution(
    db: DB,
    user_id: CurrentUserId,
    task_planning_id: Optional[int] = Query(None),
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_EXECUTION)
    return await gateway.list(user_id, task_planning_id=task_planning_id)


@router.post("", response_model=TaskExecutionResponse, status_code=status.HTTP_201_CREATED)
async def create_task_execution(data: TaskExecutionCreate, db: DB, user_id: CurrentUserId):
    return await DependencyRules(db, user_id).create_child(
        EntityType.TASK_EXECUTION, data.task_planning_id, data
    )


@router.get("/by-planning/{task_planning_id}", response_model=TaskExecutionResponse)
async def get_task_execution_by_planning(task_planning_id: int, db: DB, user_id: CurrentUserId):
    record = await DependencyRules(db, user_id).get_child_by_parent(EntityType.TASK_EXECUTION, task_planning_id)
    if record is None:
        raise NotFoundError("Task execution configuration for task planning", task_planning_id)
    return record


@router.put("/by-planning/{task_planning_id}", response_model=TaskExecutionResponse)
async def upsert_task_execution_by_planning(
    task_planning_id: int,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
    data: Dict[str, Any] = Body(...),
):
    record, _ = await DependencyRules(db, user_id).upsert_child(
        EntityType.TASK_EXECUTION, task_planning_id, data, expected_version=expected_version
    )
    return record


@router.get("/{config_id}", response_model=TaskExecutionResponse)
async def get_task_execution(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_EXECUTION)
    return await gateway.get(config_id, user_id)


@router.put("/{config_id}", response_model=TaskExecutionResponse)
async def update_task_execution(
    config_id: int,
    data: TaskExecutionUpdate,
    db: DB,
    user_id: CurrentUserId,
    expected_version: ExpectedVersion,
):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_EXECUTION)
    return await gateway.update(config_id, data, user_id, expected_version=expected_version)


@router.delete("/{config_id}", response_model=DeleteResponse)
async def delete_task_execution(config_id: int, db: DB, user_id: CurrentUserId):
    gateway = DependencyRules(db, user_id).gateway(EntityType.TASK_EXECUTION)
    if not await gateway.delete(config_id, user_id):
        raise NotFoundError("Task execution configuration", config_id)
    return DeleteResponse(id=config_id)
