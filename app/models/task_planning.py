"""Task planning and task execution configuration models."""
from typing import Optional, List

from sqlalchemy import String, Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, ConfigRecordMixin
from app.db_types import JSONType


class TaskPlanningConfiguration(ConfigRecordMixin, Base):
    """
    Task planning configuration.
    Planning-side view of the pick strategy and allocation concerns for a group.
    """
    __tablename__ = "task_planning_configurations"

    inventory_group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("inventory_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    configuration_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Task selectors
    task_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="AUTO_REPLEN")
    task_sub_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    task_attrs: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)
    task_label: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    strat: Mapped[str] = mapped_column(String(50), nullable=False, default="PICK_ALL_TRIPS")
    sorting_strategy: Mapped[str] = mapped_column(String(50), nullable=False, default="SORT_BY_INVOICE")
    loading_strategy: Mapped[str] = mapped_column(String(50), nullable=False, default="LOAD_BY_CUSTOMER")
    group_by: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=lambda: ["category"])

    # Allocation selectors
    mode: Mapped[str] = mapped_column(String(10), nullable=False, default="PICK")
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    skip_zone_face: Mapped[str] = mapped_column(String(50), nullable=False, default="PICK")
    order_by_quant_updated_at: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    search_scope: Mapped[str] = mapped_column(String(20), nullable=False, default="WH")
    state_preference_order: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=lambda: ["PURE"])
    prefer_fixed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    prefer_non_fixed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    state_preference_seq: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=lambda: ["PURE"])
    batch_preference_mode: Mapped[str] = mapped_column(String(30), nullable=False, default="CLOSEST_PREVIOUS")
    area_types: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=lambda: ["INVENTORY"])
    areas: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    order_by_picking_position: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    use_inventory_snapshot_for_pick_slotting: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    optimization_mode: Mapped[str] = mapped_column(String(20), nullable=False, default="TOUCH")

    def __repr__(self) -> str:
        return f"<TaskPlanningConfiguration(id={self.id}, name='{self.configuration_name}')>"


class TaskExecutionConfiguration(ConfigRecordMixin, Base):
    """
    Task execution configuration.
    Execution-side HU formation and work order settings; one per task planning.
    """
    __tablename__ = "task_execution_configurations"

    task_planning_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("task_planning_configurations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    configuration_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # HU formation
    trip_type: Mapped[str] = mapped_column(String(50), nullable=False, default="LM")
    hu_kinds: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    scan_source_hu_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="NONE")
    pick_source_hu_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="NONE")
    carrier_hu_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="NONE")
    hu_mapping_mode: Mapped[str] = mapped_column(String(50), nullable=False, default="BIN")
    drop_hu_quant_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    drop_uom: Mapped[str] = mapped_column(String(20), nullable=False, default="L0")
    swap_hu_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sorting_param: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    hu_weight_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    qc_mismatch_month_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    drop_slotting_mode: Mapped[str] = mapped_column(String(50), nullable=False, default="BIN")
    allow_complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    drop_inner_hu: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_inner_hu_break: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_drop_uom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    auto_uom_conversion: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    mobile_sorting: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    quant_slotting_for_hus_in_drop: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_picking_multi_batch_from_hu: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_edit_pick_quantity: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    pick_bundles: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    enable_edit_qty_in_pick_op: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    enable_manual_dest_bin_selection: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Work order management
    map_segregation_groups_to_bins: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    drop_hu_in_bin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    scan_dest_hu_in_drop: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_hu_break_in_drop: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    strict_batch_adherence: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_work_order_split: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    undo_op: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    disable_work_order: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_unpick: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    support_pallet_scan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    loading_units: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=lambda: ["CRATE"])
    pick_mandatory_scan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    drop_mandatory_scan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<TaskExecutionConfiguration(id={self.id}, task_planning={self.task_planning_id})>"
