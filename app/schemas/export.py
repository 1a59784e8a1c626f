"""Nested export of a user's complete outbound configuration."""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel

from app.schemas.inventory_group import InventoryGroupResponse
from app.schemas.pick_strategy import PickStrategyResponse, HUFormationResponse, WorkOrderManagementResponse
from app.schemas.stock_allocation import StockAllocationResponse
from app.schemas.task_planning import TaskPlanningResponse, TaskExecutionResponse
from app.schemas.task_sequence import TaskSequenceResponse


class ExportedPickStrategy(PickStrategyResponse):
    hu_formation: Optional[HUFormationResponse] = None
    work_order_management: Optional[WorkOrderManagementResponse] = None


class ExportedTaskPlanning(TaskPlanningResponse):
    task_execution: Optional[TaskExecutionResponse] = None


class ExportedInventoryGroup(InventoryGroupResponse):
    fully_allocated: bool
    task_sequences: List[TaskSequenceResponse] = []
    pick_strategies: List[ExportedPickStrategy] = []
    stock_allocation_strategies: List[StockAllocationResponse] = []
    task_planning: List[ExportedTaskPlanning] = []


class OutboundConfigurationExport(BaseModel):
    """Full configuration graph, rooted at the inventory groups."""
    exported_at: datetime
    app_version: str
    user_id: int
    confirmed: bool
    inventory_groups: List[ExportedInventoryGroup]
