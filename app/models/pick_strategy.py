"""Pick strategy models with their one-to-one HU formation and work order settings."""
from typing import Optional, List

from sqlalchemy import String, Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, ConfigRecordMixin
from app.db_types import JSONType


class PickStrategyConfiguration(ConfigRecordMixin, Base):
    """
    Pick strategy for an inventory group.
    Decides how pick tasks are planned, sorted, grouped and loaded.
    """
    __tablename__ = "pick_strategy_configurations"

    inventory_group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("inventory_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Task identification
    task_kind: Mapped[str] = mapped_column(String(50), nullable=False)
    task_sub_kind: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    task_attrs: Mapped[dict] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
        comment="Free-form task attributes e.g. destUOM"
    )
    task_label: Mapped[str] = mapped_column(String(200), nullable=False)

    # Strategy selectors
    strat: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="PICK_ALL_TRIPS, PICK_BY_ZONE, PICK_BY_BATCH, OPTIMIZE_PICK_PATH, ..."
    )
    sorting_strategy: Mapped[str] = mapped_column(String(50), nullable=False)
    loading_strategy: Mapped[str] = mapped_column(String(50), nullable=False)
    group_by: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)

    # Scope identifiers copied from the setup bundle
    storage_identifiers: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)
    line_identifiers: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<PickStrategyConfiguration(id={self.id}, label='{self.task_label}')>"


class HUFormationConfiguration(ConfigRecordMixin, Base):
    """
    Handling-unit formation settings.
    At most one per pick strategy.
    """
    __tablename__ = "hu_formation_configurations"

    pick_strategy_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pick_strategy_configurations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    trip_type: Mapped[str] = mapped_column(String(50), nullable=False, comment="LM, DIRECT, CROSS_DOCK, BULK, EXPRESS")
    hu_kinds: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    scan_source_hu_kind: Mapped[str] = mapped_column(String(50), nullable=False)
    pick_source_hu_kind: Mapped[str] = mapped_column(String(50), nullable=False)
    carrier_hu_kind: Mapped[str] = mapped_column(String(50), nullable=False)
    hu_mapping_mode: Mapped[str] = mapped_column(String(50), nullable=False, comment="BIN, MANUAL, AUTO, FIXED")

    # Thresholds
    drop_hu_quant_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    swap_hu_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    hu_weight_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    qc_mismatch_month_threshold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    drop_uom: Mapped[str] = mapped_column(String(20), nullable=False)
    sorting_param: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    drop_slotting_mode: Mapped[str] = mapped_column(String(50), nullable=False, comment="BIN, ZONE, LOCATION, MANUAL")

    # Operational flags
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

    def __repr__(self) -> str:
        return f"<HUFormationConfiguration(id={self.id}, pick_strategy={self.pick_strategy_id})>"


class WorkOrderManagementConfiguration(ConfigRecordMixin, Base):
    """
    Work order management settings.
    At most one per pick strategy.
    """
    __tablename__ = "work_order_management_configurations"

    pick_strategy_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pick_strategy_configurations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    map_segregation_groups_to_bins: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    drop_hu_in_bin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    scan_dest_hu_in_drop: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_hu_break_in_drop: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    strict_batch_adherence: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_work_order_split: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    undo_op: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    disable_work_order: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allow_unpick: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    support_pallet_scan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    pick_mandatory_scan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    drop_mandatory_scan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    loading_units: Mapped[List[str]] = mapped_column(
        JSONType,
        nullable=False,
        default=list,
        comment="CRATE, PALLET, BOX, TOTE, CONTAINER, CART"
    )

    def __repr__(self) -> str:
        return f"<WorkOrderManagementConfiguration(id={self.id}, pick_strategy={self.pick_strategy_id})>"
