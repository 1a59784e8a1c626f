"""Pydantic schemas for pick strategies, HU formation and work order management."""
from typing import Optional, List

from pydantic import Field

from app.core.enum_utils import create_uppercase_validator, VALID_HU_KINDS, VALID_LOADING_UNITS
from app.schemas.base import BaseCreateSchema, BaseUpdateSchema, ConfigRecordResponse


# ==================== PICK STRATEGY SCHEMAS ====================

class PickStrategyFields(BaseCreateSchema):
    """Pick strategy settings, without the parent reference."""
    task_kind: str = Field(..., min_length=1, max_length=50, alias="taskKind")
    task_sub_kind: str = Field("", max_length=50, alias="taskSubKind")
    task_attrs: dict = Field(default_factory=dict, alias="taskAttrs")
    strat: str = Field(..., min_length=1, max_length=50, alias="strategy")
    sorting_strategy: str = Field(..., min_length=1, max_length=50, alias="sortingStrategy")
    loading_strategy: str = Field(..., min_length=1, max_length=50, alias="loadingStrategy")
    group_by: List[str] = Field(default_factory=list, alias="groupBy")
    task_label: str = Field(..., min_length=1, max_length=200, alias="taskLabel")
    storage_identifiers: dict = Field(default_factory=dict, alias="storageIdentifiers")
    line_identifiers: dict = Field(default_factory=dict, alias="lineIdentifiers")


class PickStrategyCreate(PickStrategyFields):
    """Pick strategy creation schema."""
    inventory_group_id: int = Field(..., alias="inventoryGroupId")


class PickStrategyUpdate(BaseUpdateSchema):
    """Pick strategy update schema."""
    task_kind: Optional[str] = Field(None, min_length=1, max_length=50, alias="taskKind")
    task_sub_kind: Optional[str] = Field(None, max_length=50, alias="taskSubKind")
    task_attrs: Optional[dict] = Field(None, alias="taskAttrs")
    strat: Optional[str] = Field(None, min_length=1, max_length=50, alias="strategy")
    sorting_strategy: Optional[str] = Field(None, min_length=1, max_length=50, alias="sortingStrategy")
    loading_strategy: Optional[str] = Field(None, min_length=1, max_length=50, alias="loadingStrategy")
    group_by: Optional[List[str]] = Field(None, alias="groupBy")
    task_label: Optional[str] = Field(None, min_length=1, max_length=200, alias="taskLabel")
    storage_identifiers: Optional[dict] = Field(None, alias="storageIdentifiers")
    line_identifiers: Optional[dict] = Field(None, alias="lineIdentifiers")


class PickStrategyResponse(ConfigRecordResponse):
    """Pick strategy response schema."""
    inventory_group_id: int
    task_kind: str
    task_sub_kind: str
    task_attrs: dict
    strat: str
    sorting_strategy: str
    loading_strategy: str
    group_by: List[str]
    task_label: str
    storage_identifiers: dict
    line_identifiers: dict


# ==================== HU FORMATION SCHEMAS ====================

class HUFormationFields(BaseCreateSchema):
    """HU formation settings, without the parent reference."""
    trip_type: str = Field(..., min_length=1, max_length=50, alias="tripType")
    hu_kinds: List[str] = Field(default_factory=list, alias="huKinds")
    scan_source_hu_kind: str = Field(..., max_length=50, alias="scanSourceHUKind")
    pick_source_hu_kind: str = Field(..., max_length=50, alias="pickSourceHUKind")
    carrier_hu_kind: str = Field(..., max_length=50, alias="carrierHUKind")
    hu_mapping_mode: str = Field(..., min_length=1, max_length=50, alias="huMappingMode")
    drop_hu_quant_threshold: int = Field(0, ge=0, alias="dropHUQuantThreshold")
    drop_uom: str = Field(..., min_length=1, max_length=20, alias="dropUOM")
    allow_complete: bool = Field(True, alias="allowComplete")
    swap_hu_threshold: int = Field(0, ge=0, alias="swapHUThreshold")
    drop_inner_hu: bool = Field(True, alias="dropInnerHU")
    allow_inner_hu_break: bool = Field(True, alias="allowInnerHUBreak")
    display_drop_uom: bool = Field(True, alias="displayDropUOM")
    auto_uom_conversion: bool = Field(True, alias="autoUOMConversion")
    mobile_sorting: bool = Field(True, alias="mobileSorting")
    sorting_param: str = Field("", max_length=100, alias="sortingParam")
    hu_weight_threshold: int = Field(0, ge=0, alias="huWeightThreshold")
    qc_mismatch_month_threshold: int = Field(0, ge=0, alias="qcMismatchMonthThreshold")
    quant_slotting_for_hus_in_drop: bool = Field(True, alias="quantSlottingForHUsInDrop")
    allow_picking_multi_batch_from_hu: bool = Field(True, alias="allowPickingMultiBatchfromHU")
    display_edit_pick_quantity: bool = Field(True, alias="displayEditPickQuantity")
    pick_bundles: bool = Field(True, alias="pickBundles")
    enable_edit_qty_in_pick_op: bool = Field(True, alias="enableEditQtyInPickOp")
    drop_slotting_mode: str = Field(..., min_length=1, max_length=50, alias="dropSlottingMode")
    enable_manual_dest_bin_selection: bool = Field(True, alias="enableManualDestBinSelection")

    normalize_hu_kinds = create_uppercase_validator('hu_kinds', VALID_HU_KINDS)


class HUFormationCreate(HUFormationFields):
    """HU formation creation schema."""
    pick_strategy_id: int = Field(..., alias="pickStrategyId")


class HUFormationUpdate(BaseUpdateSchema):
    """HU formation update schema."""
    trip_type: Optional[str] = Field(None, min_length=1, max_length=50, alias="tripType")
    hu_kinds: Optional[List[str]] = Field(None, alias="huKinds")
    scan_source_hu_kind: Optional[str] = Field(None, max_length=50, alias="scanSourceHUKind")
    pick_source_hu_kind: Optional[str] = Field(None, max_length=50, alias="pickSourceHUKind")
    carrier_hu_kind: Optional[str] = Field(None, max_length=50, alias="carrierHUKind")
    hu_mapping_mode: Optional[str] = Field(None, min_length=1, max_length=50, alias="huMappingMode")
    drop_hu_quant_threshold: Optional[int] = Field(None, ge=0, alias="dropHUQuantThreshold")
    drop_uom: Optional[str] = Field(None, min_length=1, max_length=20, alias="dropUOM")
    allow_complete: Optional[bool] = Field(None, alias="allowComplete")
    swap_hu_threshold: Optional[int] = Field(None, ge=0, alias="swapHUThreshold")
    drop_inner_hu: Optional[bool] = Field(None, alias="dropInnerHU")
    allow_inner_hu_break: Optional[bool] = Field(None, alias="allowInnerHUBreak")
    display_drop_uom: Optional[bool] = Field(None, alias="displayDropUOM")
    auto_uom_conversion: Optional[bool] = Field(None, alias="autoUOMConversion")
    mobile_sorting: Optional[bool] = Field(None, alias="mobileSorting")
    sorting_param: Optional[str] = Field(None, max_length=100, alias="sortingParam")
    hu_weight_threshold: Optional[int] = Field(None, ge=0, alias="huWeightThreshold")
    qc_mismatch_month_threshold: Optional[int] = Field(None, ge=0, alias="qcMismatchMonthThreshold")
    quant_slotting_for_hus_in_drop: Optional[bool] = Field(None, alias="quantSlottingForHUsInDrop")
    allow_picking_multi_batch_from_hu: Optional[bool] = Field(None, alias="allowPickingMultiBatchfromHU")
    display_edit_pick_quantity: Optional[bool] = Field(None, alias="displayEditPickQuantity")
    pick_bundles: Optional[bool] = Field(None, alias="pickBundles")
    enable_edit_qty_in_pick_op: Optional[bool] = Field(None, alias="enableEditQtyInPickOp")
    drop_slotting_mode: Optional[str] = Field(None, min_length=1, max_length=50, alias="dropSlottingMode")
    enable_manual_dest_bin_selection: Optional[bool] = Field(None, alias="enableManualDestBinSelection")

    normalize_hu_kinds = create_uppercase_validator('hu_kinds', VALID_HU_KINDS)


class HUFormationResponse(ConfigRecordResponse):
    """HU formation response schema."""
    pick_strategy_id: int
    trip_type: str
    hu_kinds: List[str]
    scan_source_hu_kind: str
    pick_source_hu_kind: str
    carrier_hu_kind: str
    hu_mapping_mode: str
    drop_hu_quant_threshold: int
    drop_uom: str
    allow_complete: bool
    swap_hu_threshold: int
    drop_inner_hu: bool
    allow_inner_hu_break: bool
    display_drop_uom: bool
    auto_uom_conversion: bool
    mobile_sorting: bool
    sorting_param: str
    hu_weight_threshold: int
    qc_mismatch_month_threshold: int
    quant_slotting_for_hus_in_drop: bool
    allow_picking_multi_batch_from_hu: bool
    display_edit_pick_quantity: bool
    pick_bundles: bool
    enable_edit_qty_in_pick_op: bool
    drop_slotting_mode: str
    enable_manual_dest_bin_selection: bool


# ==================== WORK ORDER MANAGEMENT SCHEMAS ====================

class WorkOrderManagementFields(BaseCreateSchema):
    """Work order management settings, without the parent reference."""
    map_segregation_groups_to_bins: bool = Field(True, alias="mapSegregationGroupsToBins")
    drop_hu_in_bin: bool = Field(True, alias="dropHUInBin")
    scan_dest_hu_in_drop: bool = Field(True, alias="scanDestHUInDrop")
    allow_hu_break_in_drop: bool = Field(True, alias="allowHUBreakInDrop")
    strict_batch_adherence: bool = Field(True, alias="strictBatchAdherence")
    allow_work_order_split: bool = Field(True, alias="allowWorkOrderSplit")
    undo_op: bool = Field(True, alias="undoOp")
    disable_work_order: bool = Field(False, alias="disableWorkOrder")
    allow_unpick: bool = Field(True, alias="allowUnpick")
    support_pallet_scan: bool = Field(True, alias="supportPalletScan")
    loading_units: List[str] = Field(default_factory=list, alias="loadingUnits")
    pick_mandatory_scan: bool = Field(True, alias="pickMandatoryScan")
    drop_mandatory_scan: bool = Field(True, alias="dropMandatoryScan")

    normalize_loading_units = create_uppercase_validator('loading_units', VALID_LOADING_UNITS)


class WorkOrderManagementCreate(WorkOrderManagementFields):
    """Work order management creation schema."""
    pick_strategy_id: int = Field(..., alias="pickStrategyId")


class WorkOrderManagementUpdate(BaseUpdateSchema):
    """Work order management update schema."""
    map_segregation_groups_to_bins: Optional[bool] = Field(None, alias="mapSegregationGroupsToBins")
    drop_hu_in_bin: Optional[bool] = Field(None, alias="dropHUInBin")
    scan_dest_hu_in_drop: Optional[bool] = Field(None, alias="scanDestHUInDrop")
    allow_hu_break_in_drop: Optional[bool] = Field(None, alias="allowHUBreakInDrop")
    strict_batch_adherence: Optional[bool] = Field(None, alias="strictBatchAdherence")
    allow_work_order_split: Optional[bool] = Field(None, alias="allowWorkOrderSplit")
    undo_op: Optional[bool] = Field(None, alias="undoOp")
    disable_work_order: Optional[bool] = Field(None, alias="disableWorkOrder")
    allow_unpick: Optional[bool] = Field(None, alias="allowUnpick")
    support_pallet_scan: Optional[bool] = Field(None, alias="supportPalletScan")
    loading_units: Optional[List[str]] = Field(None, alias="loadingUnits")
    pick_mandatory_scan: Optional[bool] = Field(None, alias="pickMandatoryScan")
    drop_mandatory_scan: Optional[bool] = Field(None, alias="dropMandatoryScan")

    normalize_loading_units = create_uppercase_validator('loading_units', VALID_LOADING_UNITS)


class WorkOrderManagementResponse(ConfigRecordResponse):
    """Work order management response schema."""
    pick_strategy_id: int
    map_segregation_groups_to_bins: bool
    drop_hu_in_bin: bool
    scan_dest_hu_in_drop: bool
    allow_hu_break_in_drop: bool
    strict_batch_adherence: bool
    allow_work_order_split: bool
    undo_op: bool
    disable_work_order: bool
    allow_unpick: bool
    support_pallet_scan: bool
    loading_units: List[str]
    pick_mandatory_scan: bool
    drop_mandatory_scan: bool
