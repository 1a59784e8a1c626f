"""Pydantic schemas for task planning and task execution configurations."""
from typing import Optional, List

from pydantic import Field

from app.schemas.base import BaseCreateSchema, BaseUpdateSchema, ConfigRecordResponse


# ==================== TASK PLANNING SCHEMAS ====================

class TaskPlanningFields(BaseCreateSchema):
    """Planning settings, without the parent reference."""
    configuration_name: str = Field(..., min_length=1, max_length=200, alias="configurationName")
    description: Optional[str] = None

    task_kind: str = Field("AUTO_REPLEN", max_length=50, alias="taskKind")
    task_sub_kind: str = Field("", max_length=50, alias="taskSubKind")
    task_attrs: dict = Field(default_factory=dict, alias="taskAttrs")
    task_label: str = Field("", max_length=200, alias="taskLabel")
    strat: str = Field("PICK_ALL_TRIPS", max_length=50, alias="strategy")
    sorting_strategy: str = Field("SORT_BY_INVOICE", max_length=50, alias="sortingStrategy")
    loading_strategy: str = Field("LOAD_BY_CUSTOMER", max_length=50, alias="loadingStrategy")
    group_by: List[str] = Field(default_factory=lambda: ["category"], alias="groupBy")

    mode: str = Field("PICK", max_length=10)
    priority: int = Field(0, ge=0)
    skip_zone_face: str = Field("PICK", max_length=50, alias="skipZoneFace")
    order_by_quant_updated_at: bool = Field(True, alias="orderByQuantUpdatedAt")
    search_scope: str = Field("WH", max_length=20, alias="searchScope")
    state_preference_order: List[str] = Field(default_factory=lambda: ["PURE"], alias="statePreferenceOrder")
    prefer_fixed: bool = Field(True, alias="preferFixed")
    prefer_non_fixed: bool = Field(True, alias="preferNonFixed")
    state_preference_seq: List[str] = Field(default_factory=lambda: ["PURE"], alias="statePreferenceSeq")
    batch_preference_mode: str = Field("CLOSEST_PREVIOUS", max_length=30, alias="batchPreferenceMode")
    area_types: List[str] = Field(default_factory=lambda: ["INVENTORY"], alias="areaTypes")
    areas: List[str] = Field(default_factory=list)
    order_by_picking_position: bool = Field(True, alias="orderByPickingPosition")
    use_inventory_snapshot_for_pick_slotting: bool = Field(True, alias="useInventorySnapshotForPickSlotting")
    optimization_mode: str = Field("TOUCH", max_length=20, alias="optimizationMode")


class TaskPlanningCreate(TaskPlanningFields):
    """Task planning creation schema."""
    inventory_group_id: int = Field(..., alias="inventoryGroupId")


class TaskPlanningUpdate(BaseUpdateSchema):
    """Task planning update schema."""
    configuration_name: Optional[str] = Field(None, min_length=1, max_length=200, alias="configurationName")
    description: Optional[str] = None

    task_kind: Optional[str] = Field(None, max_length=50, alias="taskKind")
    task_sub_kind: Optional[str] = Field(None, max_length=50, alias="taskSubKind")
    task_attrs: Optional[dict] = Field(None, alias="taskAttrs")
    task_label: Optional[str] = Field(None, max_length=200, alias="taskLabel")
    strat: Optional[str] = Field(None, max_length=50, alias="strategy")
    sorting_strategy: Optional[str] = Field(None, max_length=50, alias="sortingStrategy")
    loading_strategy: Optional[str] = Field(None, max_length=50, alias="loadingStrategy")
    group_by: Optional[List[str]] = Field(None, alias="groupBy")

    mode: Optional[str] = Field(None, max_length=10)
    priority: Optional[int] = Field(None, ge=0)
    skip_zone_face: Optional[str] = Field(None, max_length=50, alias="skipZoneFace")
    order_by_quant_updated_at: Optional[bool] = Field(None, alias="orderByQuantUpdatedAt")
    search_scope: Optional[str] = Field(None, max_length=20, alias="searchScope")
    state_preference_order: Optional[List[str]] = Field(None, alias="statePreferenceOrder")
    prefer_fixed: Optional[bool] = Field(None, alias="preferFixed")
    prefer_non_fixed: Optional[bool] = Field(None, alias="preferNonFixed")
    state_preference_seq: Optional[List[str]] = Field(None, alias="statePreferenceSeq")
    batch_preference_mode: Optional[str] = Field(None, max_length=30, alias="batchPreferenceMode")
    area_types: Optional[List[str]] = Field(None, alias="areaTypes")
    areas: Optional[List[str]] = None
    order_by_picking_position: Optional[bool] = Field(None, alias="orderByPickingPosition")
    use_inventory_snapshot_for_pick_slotting: Optional[bool] = Field(
        None, alias="useInventorySnapshotForPickSlotting"
    )
    optimization_mode: Optional[str] = Field(None, max_length=20, alias="optimizationMode")


class TaskPlanningResponse(ConfigRecordResponse):
    """Task planning response schema."""
    inventory_group_id: int
    configuration_name: str
    description: Optional[str] = None
    task_kind: str
    task_sub_kind: str
    task_attrs: dict
    task_label: str
    strat: str
    sorting_strategy: str
    loading_strategy: str
    group_by: List[str]
    mode: str
    priority: int
    skip_zone_face: str
    order_by_quant_updated_at: bool
    search_scope: str
    state_preference_order: List[str]
    prefer_fixed: bool
    prefer_non_fixed: bool
    state_preference_seq: List[str]
    batch_preference_mode: str
    area_types: List[str]
    areas: List[str]
    order_by_picking_position: bool
    use_inventory_snapshot_for_pick_slotting: bool
    optimization_mode: str


# ==================== TASK EXECUTION SCHEMAS ====================

class TaskExecutionFields(BaseCreateSchema):
    """Execution settings, without the parent reference."""
    configuration_name: str = Field(..., min_length=1, max_length=200, alias="configurationName")
    description: Optional[str] = None

    # HU formation
    trip_type: str = Field("LM", max_length=50, alias="tripType")
    hu_kinds: List[str] = Field(default_factory=list, alias="huKinds")
    scan_source_hu_kind: str = Field("NONE", max_length=50, alias="scanSourceHUKind")
    pick_source_hu_kind: str = Field("NONE", max_length=50, alias="pickSourceHUKind")
    carrier_hu_kind: str = Field("NONE", max_length=50, alias="carrierHUKind")
    hu_mapping_mode: str = Field("BIN", max_length=50, alias="huMappingMode")
    drop_hu_quant_threshold: int = Field(0, ge=0, alias="dropHUQuantThreshold")
    drop_uom: str = Field("L0", max_length=20, alias="dropUOM")
    swap_hu_threshold: int = Field(0, ge=0, alias="swapHUThreshold")
    sorting_param: str = Field("", max_length=100, alias="sortingParam")
    hu_weight_threshold: int = Field(0, ge=0, alias="huWeightThreshold")
    qc_mismatch_month_threshold: int = Field(0, ge=0, alias="qcMismatchMonthThreshold")
    drop_slotting_mode: str = Field("BIN", max_length=50, alias="dropSlottingMode")
    allow_complete: bool = Field(True, alias="allowComplete")
    drop_inner_hu: bool = Field(True, alias="dropInnerHU")
    allow_inner_hu_break: bool = Field(True, alias="allowInnerHUBreak")
    display_drop_uom: bool = Field(True, alias="displayDropUOM")
    auto_uom_conversion: bool = Field(True, alias="autoUOMConversion")
    mobile_sorting: bool = Field(True, alias="mobileSorting")
    quant_slotting_for_hus_in_drop: bool = Field(True, alias="quantSlottingForHUsInDrop")
    allow_picking_multi_batch_from_hu: bool = Field(True, alias="allowPickingMultiBatchfromHU")
    display_edit_pick_quantity: bool = Field(True, alias="displayEditPickQuantity")
    pick_bundles: bool = Field(True, alias="pickBundles")
    enable_edit_qty_in_pick_op: bool = Field(True, alias="enableEditQtyInPickOp")
    enable_manual_dest_bin_selection: bool = Field(True, alias="enableManualDestBinSelection")

    # Work order management
    map_segregation_groups_to_bins: bool = Field(True, alias="mapSegregationGroupsToBins")
    drop_hu_in_bin: bool = Field(True, alias="dropHUInBin")
    scan_dest_hu_in_drop: bool = Field(True, alias="scanDestHUInDrop")
    allow_hu_break_in_drop: bool = Field(True, alias="allowHUBreakInDrop")
    strict_batch_adherence: bool = Field(True, alias="strictBatchAdherence")
    allow_work_order_split: bool = Field(True, alias="allowWorkOrderSplit")
    undo_op: bool = Field(True, alias="undoOp")
    disable_work_order: bool = Field(True, alias="disableWorkOrder")
    allow_unpick: bool = Field(True, alias="allowUnpick")
    support_pallet_scan: bool = Field(True, alias="supportPalletScan")
    loading_units: List[str] = Field(default_factory=lambda: ["CRATE"], alias="loadingUnits")
    pick_mandatory_scan: bool = Field(True, alias="pickMandatoryScan")
    drop_mandatory_scan: bool = Field(True, alias="dropMandatoryScan")


class TaskExecutionCreate(TaskExecutionFields):
    """Task execution creation schema."""
    task_planning_id: int = Field(..., alias="taskPlanningId")


class TaskExecutionUpdate(BaseUpdateSchema):
    """Task execution update schema."""
    configuration_name: Optional[str] = Field(None, min_length=1, max_length=200, alias="configurationName")
    description: Optional[str] = None

    trip_type: Optional[str] = Field(None, max_length=50, alias="tripType")
    hu_kinds: Optional[List[str]] = Field(None, alias="huKinds")
    scan_source_hu_kind: Optional[str] = Field(None, max_length=50, alias="scanSourceHUKind")
    pick_source_hu_kind: Optional[str] = Field(None, max_length=50, alias="pickSourceHUKind")
    carrier_hu_kind: Optional[str] = Field(None, max_length=50, alias="carrierHUKind")
    hu_mapping_mode: Optional[str] = Field(None, max_length=50, alias="huMappingMode")
    drop_hu_quant_threshold: Optional[int] = Field(None, ge=0, alias="dropHUQuantThreshold")
    drop_uom: Optional[str] = Field(None, max_length=20, alias="dropUOM")
    swap_hu_threshold: Optional[int] = Field(None, ge=0, alias="swapHUThreshold")
    sorting_param: Optional[str] = Field(None, max_length=100, alias="sortingParam")
    hu_weight_threshold: Optional[int] = Field(None, ge=0, alias="huWeightThreshold")
    qc_mismatch_month_threshold: Optional[int] = Field(None, ge=0, alias="qcMismatchMonthThreshold")
    drop_slotting_mode: Optional[str] = Field(None, max_length=50, alias="dropSlottingMode")
    allow_complete: Optional[bool] = Field(None, alias="allowComplete")
    drop_inner_hu: Optional[bool] = Field(None, alias="dropInnerHU")
    allow_inner_hu_break: Optional[bool] = Field(None, alias="allowInnerHUBreak")
    display_drop_uom: Optional[bool] = Field(None, alias="displayDropUOM")
    auto_uom_conversion: Optional[bool] = Field(None, alias="autoUOMConversion")
    mobile_sorting: Optional[bool] = Field(None, alias="mobileSorting")
    quant_slotting_for_hus_in_drop: Optional[bool] = Field(None, alias="quantSlottingForHUsInDrop")
    allow_picking_multi_batch_from_hu: Optional[bool] = Field(None, alias="allowPickingMultiBatchfromHU")
    display_edit_pick_quantity: Optional[bool] = Field(None, alias="displayEditPickQuantity")
    pick_bundles: Optional[bool] = Field(None, alias="pickBundles")
    enable_edit_qty_in_pick_op: Optional[bool] = Field(None, alias="enableEditQtyInPickOp")
    enable_manual_dest_bin_selection: Optional[bool] = Field(None, alias="enableManualDestBinSelection")

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


class TaskExecutionResponse(ConfigRecordResponse):
    """Task execution response schema."""
    task_planning_id: int
    configuration_name: str
    description: Optional[str] = None
    trip_type: str
    hu_kinds: List[str]
    scan_source_hu_kind: str
    pick_source_hu_kind: str
    carrier_hu_kind: str
    hu_mapping_mode: str
    drop_hu_quant_threshold: int
    drop_uom: str
    swap_hu_threshold: int
    sorting_param: str
    hu_weight_threshold: int
    qc_mismatch_month_threshold: int
    drop_slotting_mode: str
    allow_complete: bool
    drop_inner_hu: bool
    allow_inner_hu_break: bool
    display_drop_uom: bool
    auto_uom_conversion: bool
    mobile_sorting: bool
    quant_slotting_for_hus_in_drop: bool
    allow_picking_multi_batch_from_hu: bool
    display_edit_pick_quantity: bool
    pick_bundles: bool
    enable_edit_qty_in_pick_op: bool
    enable_manual_dest_bin_selection: bool
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
