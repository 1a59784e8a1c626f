"""Pydantic schemas for stock allocation strategies."""
from typing import Optional, List

from pydantic import Field

from app.core.enum_utils import (
    create_uppercase_validator,
    VALID_ALLOCATION_MODES,
    VALID_SEARCH_SCOPES,
    VALID_STATE_PREFERENCES,
    VALID_BATCH_PREFERENCE_MODES,
    VALID_OPTIMIZATION_MODES,
)
from app.models.stock_allocation import (
    AllocationMode,
    SearchScope,
    StatePreference,
    BatchPreferenceMode,
    OptimizationMode,
    DEFAULT_STATE_PREFERENCE_SEQ,
)
from app.schemas.base import BaseCreateSchema, BaseUpdateSchema, ConfigRecordResponse


class StockAllocationFields(BaseCreateSchema):
    """Allocation settings, without the parent reference."""
    mode: AllocationMode
    priority: int = Field(100, ge=0)
    skip_zone_face: Optional[str] = Field(None, max_length=50, alias="skipZoneFace")
    order_by_quant_updated_at: bool = Field(False, alias="orderByQuantUpdatedAt")
    search_scope: SearchScope = Field(SearchScope.AREA, alias="searchScope")
    prefer_fixed: bool = Field(True, alias="preferFixed")
    prefer_non_fixed: bool = Field(False, alias="preferNonFixed")
    state_preference_seq: List[StatePreference] = Field(
        default_factory=lambda: [StatePreference(s) for s in DEFAULT_STATE_PREFERENCE_SEQ],
        alias="statePreferenceSeq"
    )
    batch_preference_mode: BatchPreferenceMode = Field(BatchPreferenceMode.NONE, alias="batchPreferenceMode")
    order_by_picking_position: bool = Field(False, alias="orderByPickingPosition")
    use_inventory_snapshot_for_pick_slotting: bool = Field(False, alias="useInventorySnapshotForPickSlotting")
    optimization_mode: OptimizationMode = Field(OptimizationMode.TOUCH, alias="optimizationMode")

    normalize_mode = create_uppercase_validator('mode', VALID_ALLOCATION_MODES)
    normalize_search_scope = create_uppercase_validator('search_scope', VALID_SEARCH_SCOPES)
    normalize_state_seq = create_uppercase_validator('state_preference_seq', VALID_STATE_PREFERENCES)
    normalize_batch_mode = create_uppercase_validator('batch_preference_mode', VALID_BATCH_PREFERENCE_MODES)
    normalize_optimization_mode = create_uppercase_validator('optimization_mode', VALID_OPTIMIZATION_MODES)


class StockAllocationCreate(StockAllocationFields):
    """Stock allocation strategy creation schema."""
    inventory_group_id: int = Field(..., alias="inventoryGroupId")


class StockAllocationUpdate(BaseUpdateSchema):
    """Stock allocation strategy update schema."""
    mode: Optional[AllocationMode] = None
    priority: Optional[int] = Field(None, ge=0)
    skip_zone_face: Optional[str] = Field(None, max_length=50, alias="skipZoneFace")
    order_by_quant_updated_at: Optional[bool] = Field(None, alias="orderByQuantUpdatedAt")
    search_scope: Optional[SearchScope] = Field(None, alias="searchScope")
    prefer_fixed: Optional[bool] = Field(None, alias="preferFixed")
    prefer_non_fixed: Optional[bool] = Field(None, alias="preferNonFixed")
    state_preference_seq: Optional[List[StatePreference]] = Field(None, alias="statePreferenceSeq")
    batch_preference_mode: Optional[BatchPreferenceMode] = Field(None, alias="batchPreferenceMode")
    order_by_picking_position: Optional[bool] = Field(None, alias="orderByPickingPosition")
    use_inventory_snapshot_for_pick_slotting: Optional[bool] = Field(
        None, alias="useInventorySnapshotForPickSlotting"
    )
    optimization_mode: Optional[OptimizationMode] = Field(None, alias="optimizationMode")

    normalize_mode = create_uppercase_validator('mode', VALID_ALLOCATION_MODES)
    normalize_search_scope = create_uppercase_validator('search_scope', VALID_SEARCH_SCOPES)
    normalize_state_seq = create_uppercase_validator('state_preference_seq', VALID_STATE_PREFERENCES)
    normalize_batch_mode = create_uppercase_validator('batch_preference_mode', VALID_BATCH_PREFERENCE_MODES)
    normalize_optimization_mode = create_uppercase_validator('optimization_mode', VALID_OPTIMIZATION_MODES)


class StockAllocationResponse(ConfigRecordResponse):
    """Stock allocation strategy response schema."""
    inventory_group_id: int
    mode: str
    priority: int
    skip_zone_face: Optional[str] = None
    order_by_quant_updated_at: bool
    search_scope: str
    prefer_fixed: bool
    prefer_non_fixed: bool
    state_preference_seq: List[str]
    batch_preference_mode: str
    order_by_picking_position: bool
    use_inventory_snapshot_for_pick_slotting: bool
    optimization_mode: str
