"""
Configuration dependency graph.

Ownership (parent -> children):

    InventoryGroup
    +-- TaskSequenceConfiguration
    +-- PickStrategyConfiguration
    |   +-- HUFormationConfiguration          (1:1)
    |   +-- WorkOrderManagementConfiguration  (1:1)
    +-- StockAllocationStrategy
    +-- TaskPlanningConfiguration
        +-- TaskExecutionConfiguration        (1:1)

Children can only be created under an existing parent. One-to-one children
are written through upsert_child(), which updates the existing child for a
parent instead of creating a second one. Deletes cascade down the graph.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ChildAlreadyExistsError, NotFoundError, ValidationError
from app.models.inventory_group import InventoryGroup
from app.models.pick_strategy import (
    PickStrategyConfiguration,
    HUFormationConfiguration,
    WorkOrderManagementConfiguration,
)
from app.models.stock_allocation import StockAllocationStrategy, AllocationMode
from app.models.task_planning import TaskPlanningConfiguration, TaskExecutionConfiguration
from app.models.task_sequence import TaskSequenceConfiguration
from app.schemas.base import BaseCreateSchema, BaseUpdateSchema
from app.schemas.inventory_group import InventoryGroupCreate, InventoryGroupUpdate
from app.schemas.pick_strategy import (
    PickStrategyCreate, PickStrategyUpdate,
    HUFormationCreate, HUFormationUpdate,
    WorkOrderManagementCreate, WorkOrderManagementUpdate,
)
from app.schemas.stock_allocation import StockAllocationCreate, StockAllocationUpdate
from app.schemas.task_planning import (
    TaskPlanningCreate, TaskPlanningUpdate,
    TaskExecutionCreate, TaskExecutionUpdate,
)
from app.schemas.task_sequence import TaskSequenceCreate, TaskSequenceUpdate
from app.services.config_gateway import ConfigRecordGateway


logger = logging.getLogger(__name__)


# =============================================================================
# ENTITY REGISTRY
# =============================================================================

class EntityType(str, Enum):
    """Configuration entity types; values double as summary/export keys."""
    INVENTORY_GROUP = "inventory_groups"
    TASK_SEQUENCE = "task_sequences"
    PICK_STRATEGY = "pick_strategies"
    HU_FORMATION = "hu_formations"
    WORK_ORDER_MANAGEMENT = "work_order_management"
    STOCK_ALLOCATION = "stock_allocation_strategies"
    TASK_PLANNING = "task_planning"
    TASK_EXECUTION = "task_execution"


@dataclass(frozen=True)
class EntitySpec:
    model: type
    create_schema: Type[BaseCreateSchema]
    update_schema: Type[BaseUpdateSchema]
    label: str
    parent: Optional[EntityType] = None
    parent_key: Optional[str] = None
    one_to_one: bool = False


ENTITIES: Dict[EntityType, EntitySpec] = {
    EntityType.INVENTORY_GROUP: EntitySpec(
        InventoryGroup, InventoryGroupCreate, InventoryGroupUpdate, "Inventory group",
    ),
    EntityType.TASK_SEQUENCE: EntitySpec(
        TaskSequenceConfiguration, TaskSequenceCreate, TaskSequenceUpdate, "Task sequence configuration",
        parent=EntityType.INVENTORY_GROUP, parent_key="inventory_group_id",
    ),
    EntityType.PICK_STRATEGY: EntitySpec(
        PickStrategyConfiguration, PickStrategyCreate, PickStrategyUpdate, "Pick strategy",
        parent=EntityType.INVENTORY_GROUP, parent_key="inventory_group_id",
    ),
    EntityType.HU_FORMATION: EntitySpec(
        HUFormationConfiguration, HUFormationCreate, HUFormationUpdate, "HU formation configuration",
        parent=EntityType.PICK_STRATEGY, parent_key="pick_strategy_id", one_to_one=True,
    ),
    EntityType.WORK_ORDER_MANAGEMENT: EntitySpec(
        WorkOrderManagementConfiguration, WorkOrderManagementCreate, WorkOrderManagementUpdate,
        "Work order management configuration",
        parent=EntityType.PICK_STRATEGY, parent_key="pick_strategy_id", one_to_one=True,
    ),
    EntityType.STOCK_ALLOCATION: EntitySpec(
        StockAllocationStrategy, StockAllocationCreate, StockAllocationUpdate, "Stock allocation strategy",
        parent=EntityType.INVENTORY_GROUP, parent_key="inventory_group_id",
    ),
    EntityType.TASK_PLANNING: EntitySpec(
        TaskPlanningConfiguration, TaskPlanningCreate, TaskPlanningUpdate, "Task planning configuration",
        parent=EntityType.INVENTORY_GROUP, parent_key="inventory_group_id",
    ),
    EntityType.TASK_EXECUTION: EntitySpec(
        TaskExecutionConfiguration, TaskExecutionCreate, TaskExecutionUpdate, "Task execution configuration",
        parent=EntityType.TASK_PLANNING, parent_key="task_planning_id", one_to_one=True,
    ),
}


def children_of(entity_type: EntityType) -> List[EntityType]:
    """Direct child types of an entity type."""
    return [t for t, spec in ENTITIES.items() if spec.parent == entity_type]


def is_one_to_one(child_type: EntityType) -> bool:
    return ENTITIES[child_type].one_to_one


# =============================================================================
# RULES
# =============================================================================

class DependencyRules:
    """Dependency checks and parent-scoped writes for one user."""

    def __init__(self, db: AsyncSession, user_id: int):
        self.db = db
        self.user_id = user_id

    def gateway(self, entity_type: EntityType) -> ConfigRecordGateway:
        spec = ENTITIES[entity_type]
        return ConfigRecordGateway(self.db, spec.model, spec.create_schema, spec.update_schema, spec.label)

    def _child_spec(self, child_type: EntityType) -> EntitySpec:
        spec = ENTITIES[child_type]
        if spec.parent is None:
            raise ValidationError(f"{spec.label} has no parent", child_type=child_type.value)
        return spec

    async def parent_exists(self, child_type: EntityType, parent_id: int) -> bool:
        spec = self._child_spec(child_type)
        parent = await self.gateway(spec.parent).find(parent_id, self.user_id)
        return parent is not None

    async def get_child_by_parent(self, child_type: EntityType, parent_id: int):
        """The one-to-one child of a parent, or None."""
        spec = self._child_spec(child_type)
        stmt = select(spec.model).where(
            getattr(spec.model, spec.parent_key) == parent_id,
            spec.model.user_id == self.user_id,
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def can_create_child(self, child_type: EntityType, parent_id: int) -> bool:
        """True iff the parent exists and, for 1:1 children, has no child yet."""
        if not await self.parent_exists(child_type, parent_id):
            return False
        if is_one_to_one(child_type):
            return await self.get_child_by_parent(child_type, parent_id) is None
        return True

    @staticmethod
    def _without_parent(spec: EntitySpec, payload: Union[dict, BaseModel]) -> dict:
        """Drop the parent key under its field name and its alias."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=True)
        field = spec.create_schema.model_fields.get(spec.parent_key)
        keys = {spec.parent_key, field.alias if field is not None else None}
        return {k: v for k, v in payload.items() if k not in keys}

    def _with_parent(self, child_type: EntityType, parent_id: int, payload: Union[dict, BaseModel]) -> dict:
        spec = ENTITIES[child_type]
        return {**self._without_parent(spec, payload), spec.parent_key: parent_id}

    async def create_child(self, child_type: EntityType, parent_id: int, payload: Union[dict, BaseModel]):
        """
        Create a child under an existing parent.

        Raises:
            NotFoundError: parent does not exist
            ChildAlreadyExistsError: 1:1 child already present
        """
        spec = self._child_spec(child_type)
        if not await self.parent_exists(child_type, parent_id):
            raise NotFoundError(ENTITIES[spec.parent].label, parent_id)
        if spec.one_to_one:
            existing = await self.get_child_by_parent(child_type, parent_id)
            if existing is not None:
                raise ChildAlreadyExistsError(spec.label, parent_id, existing.id)
        return await self.gateway(child_type).create(
            self._with_parent(child_type, parent_id, payload), self.user_id
        )

    async def upsert_child(
        self,
        child_type: EntityType,
        parent_id: int,
        payload: Union[dict, BaseModel],
        expected_version: Optional[int] = None,
    ) -> Tuple[object, bool]:
        """
        Update the child of a parent if it exists, otherwise create it.

        Returns (record, created).

        Raises:
            ValidationError: child_type is not a one-to-one child
            NotFoundError: parent does not exist
        """
        spec = self._child_spec(child_type)
        if not spec.one_to_one:
            raise ValidationError(
                f"{spec.label} is not a one-to-one child; upsert is not supported",
                child_type=child_type.value,
            )
        if not await self.parent_exists(child_type, parent_id):
            raise NotFoundError(ENTITIES[spec.parent].label, parent_id)

        existing = await self.get_child_by_parent(child_type, parent_id)
        if existing is None:
            record = await self.gateway(child_type).create(
                self._with_parent(child_type, parent_id, payload), self.user_id
            )
            return record, True

        payload = self._without_parent(spec, payload)
        record = await self.gateway(child_type).update(
            existing.id, payload, self.user_id, expected_version=expected_version
        )
        logger.info("Updated %s %s for parent %s", spec.label, record.id, parent_id)
        return record, False

    # ==================== STOCK ALLOCATION ====================

    async def _allocation_counts(self, group_id: Optional[int] = None) -> Dict[int, Counter]:
        stmt = (
            select(
                StockAllocationStrategy.inventory_group_id,
                StockAllocationStrategy.mode,
                func.count(StockAllocationStrategy.id),
            )
            .where(StockAllocationStrategy.user_id == self.user_id)
            .group_by(StockAllocationStrategy.inventory_group_id, StockAllocationStrategy.mode)
        )
        if group_id is not None:
            stmt = stmt.where(StockAllocationStrategy.inventory_group_id == group_id)
        counts: Dict[int, Counter] = {}
        for gid, mode, count in (await self.db.execute(stmt)).all():
            counts.setdefault(gid, Counter())[mode] = count
        return counts

    @staticmethod
    def _fully_allocated(counts: Counter) -> bool:
        return counts[AllocationMode.PICK.value] == 1 and counts[AllocationMode.PUT.value] == 1

    async def is_group_fully_allocated(self, group_id: int) -> bool:
        """True iff the group has exactly one PICK and exactly one PUT strategy."""
        counts = await self._allocation_counts(group_id)
        return self._fully_allocated(counts.get(group_id, Counter()))

    async def any_group_fully_allocated(self) -> bool:
        counts = await self._allocation_counts()
        return any(self._fully_allocated(c) for c in counts.values())

    async def allocation_status(self) -> dict:
        """PICK/PUT counts and completeness for every group of the user."""
        groups = await self.gateway(EntityType.INVENTORY_GROUP).list(self.user_id)
        counts = await self._allocation_counts()
        rows = []
        for group in groups:
            c = counts.get(group.id, Counter())
            rows.append({
                "id": group.id,
                "name": group.name,
                "pick_strategies": c[AllocationMode.PICK.value],
                "put_strategies": c[AllocationMode.PUT.value],
                "fully_allocated": self._fully_allocated(c),
            })
        return {
            "groups": rows,
            "configured_groups": sum(1 for r in rows if r["fully_allocated"]),
            "total_groups": len(rows),
        }

    # ==================== COUNTS ====================

    async def count(self, entity_type: EntityType) -> int:
        model = ENTITIES[entity_type].model
        stmt = select(func.count(model.id)).where(model.user_id == self.user_id)
        return (await self.db.execute(stmt)).scalar() or 0

    # ==================== CASCADE DELETE ====================

    async def delete_with_dependents(self, entity_type: EntityType, record_id: int) -> Dict[str, int]:
        """
        Delete a record and everything below it in the ownership graph.

        Returns the number of deleted records per entity type; empty when
        the record did not exist.
        """
        record = await self.gateway(entity_type).find(record_id, self.user_id)
        if record is None:
            return {}
        counts: Counter = Counter()
        await self._delete_tree(entity_type, [record_id], counts)
        logger.info(
            "Deleted %s %s with dependents %s",
            ENTITIES[entity_type].label, record_id, dict(counts),
        )
        return dict(counts)

    async def _delete_tree(self, entity_type: EntityType, ids: List[int], counts: Counter) -> None:
        if not ids:
            return
        for child_type in children_of(entity_type):
            spec = ENTITIES[child_type]
            stmt = select(spec.model.id).where(getattr(spec.model, spec.parent_key).in_(ids))
            child_ids = list((await self.db.execute(stmt)).scalars().all())
            await self._delete_tree(child_type, child_ids, counts)

        model = ENTITIES[entity_type].model
        await self.db.execute(
            delete(model).where(model.id.in_(ids)).execution_options(synchronize_session="fetch")
        )
        counts[entity_type.value] += len(ids)
