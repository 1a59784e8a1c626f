"""Pydantic schemas for configuration bundles, one-click templates and quick setup."""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field, model_validator

from app.core.enum_utils import create_uppercase_validator, VALID_TASK_SEQUENCE_TOKENS
from app.models.task_sequence import TaskSequenceToken
from app.schemas.base import BaseCreateSchema, BaseResponseSchema
from app.schemas.inventory_group import InventoryGroupCreate
from app.schemas.pick_strategy import PickStrategyFields, HUFormationFields, WorkOrderManagementFields
from app.schemas.stock_allocation import StockAllocationFields
from app.schemas.task_planning import TaskPlanningFields, TaskExecutionFields


# ==================== BUNDLE SCHEMAS ====================

class BundleInventoryGroup(InventoryGroupCreate):
    """
    Inventory group entry of a bundle.
    An empty strategy list gets the default PICK + PUT pair.
    """
    stock_allocation_strategies: List[StockAllocationFields] = Field(
        default_factory=list,
        alias="stockAllocationStrategies"
    )

    def to_record(self) -> dict:
        data = super().to_record()
        data.pop("stock_allocation_strategies", None)
        return data


class BundleTaskSequence(BaseCreateSchema):
    """Task sequence entry; no group name means every group of the bundle."""
    inventory_group: Optional[str] = Field(None, alias="inventoryGroup")
    task_sequences: List[TaskSequenceToken] = Field(..., min_length=1, alias="taskSequences")
    shipment_acknowledgment: Optional[str] = Field(None, max_length=50, alias="shipmentAcknowledgment")

    normalize_tokens = create_uppercase_validator('task_sequences', VALID_TASK_SEQUENCE_TOKENS)


class BundlePickStrategy(PickStrategyFields):
    """Pick strategy entry with its optional HU formation and work order settings."""
    inventory_group: Optional[str] = Field(None, alias="inventoryGroup")
    hu_formation: Optional[HUFormationFields] = Field(None, alias="huFormation")
    work_order_management: Optional[WorkOrderManagementFields] = Field(None, alias="workOrderManagement")

    def to_record(self) -> dict:
        data = super().to_record()
        for key in ("inventory_group", "hu_formation", "work_order_management"):
            data.pop(key, None)
        return data


class ConfigurationBundle(BaseCreateSchema):
    """
    A complete outbound configuration, applied in one transaction.

    Children refer to their inventory group by name. Task planning and task
    execution, when present, are created for every group.
    """
    inventory_groups: List[BundleInventoryGroup] = Field(..., min_length=1, alias="inventoryGroups")
    task_sequences: List[BundleTaskSequence] = Field(default_factory=list, alias="taskSequences")
    pick_strategies: List[BundlePickStrategy] = Field(default_factory=list, alias="pickStrategies")
    task_planning: Optional[TaskPlanningFields] = Field(None, alias="taskPlanning")
    task_execution: Optional[TaskExecutionFields] = Field(None, alias="taskExecution")

    @model_validator(mode='after')
    def check_group_references(self):
        names = [g.name for g in self.inventory_groups]
        if len(set(names)) != len(names):
            raise ValueError("inventory group names must be unique within a bundle")
        for entry in [*self.task_sequences, *self.pick_strategies]:
            if entry.inventory_group is not None and entry.inventory_group not in names:
                raise ValueError(f"unknown inventory group '{entry.inventory_group}'")
        if self.task_execution is not None and self.task_planning is None:
            raise ValueError("task execution requires task planning")
        return self


# ==================== TEMPLATE SCHEMAS ====================

class TemplateCreate(BaseModel):
    """One-click template creation schema."""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    industry: Optional[str] = Field(None, max_length=100)
    complexity: Optional[str] = Field(None, max_length=50)
    is_active: bool = True
    template_data: ConfigurationBundle


class TemplateResponse(BaseResponseSchema):
    """One-click template response schema."""
    id: int
    name: str
    description: Optional[str] = None
    industry: Optional[str] = None
    complexity: Optional[str] = None
    is_active: bool
    template_data: dict
    created_at: datetime


class TemplateApplyRequest(BaseModel):
    """Options for applying a template or the quick setup bundle."""
    replace_existing: bool = True


# ==================== SETUP SUMMARY ====================

class SetupSummary(BaseModel):
    """Number of records created per entity type."""
    inventory_groups: int = 0
    task_sequences: int = 0
    pick_strategies: int = 0
    hu_formations: int = 0
    work_order_management: int = 0
    stock_allocation_strategies: int = 0
    task_planning: int = 0
    task_execution: int = 0


class SetupResponse(BaseModel):
    """Result of a template application or quick setup."""
    success: bool = True
    message: str
    template_name: Optional[str] = None
    summary: SetupSummary
