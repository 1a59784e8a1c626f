"""Stock allocation strategy model (PICK and PUT slotting rules per inventory group)."""
from enum import Enum
from typing import Optional, List

from sqlalchemy import String, Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enum_utils import enum_comment
from app.database import Base, ConfigRecordMixin
from app.db_types import JSONType


class AllocationMode(str, Enum):
    """Direction of the allocation strategy."""
    PICK = "PICK"   # Where stock is taken from
    PUT = "PUT"     # Where stock is put to


class SearchScope(str, Enum):
    """How wide the slotting search goes."""
    AREA = "AREA"
    ZONE = "ZONE"
    BIN = "BIN"
    LOCATION = "LOCATION"
    WH = "WH"  # Whole warehouse


class StatePreference(str, Enum):
    """Bin state, in order of preference."""
    PURE = "PURE"
    IMPURE = "IMPURE"
    EMPTY = "EMPTY"
    SKU_EMPTY = "SKU_EMPTY"
    RESERVED = "RESERVED"
    BLOCKED = "BLOCKED"


class BatchPreferenceMode(str, Enum):
    """Batch selection rule."""
    NONE = "NONE"
    FIFO = "FIFO"
    LIFO = "LIFO"
    EXPIRY = "EXPIRY"
    BATCH_NUMBER = "BATCH_NUMBER"
    CLOSEST_PREVIOUS = "CLOSEST_PREVIOUS"


class OptimizationMode(str, Enum):
    """What the slotting search minimises."""
    TOUCH = "TOUCH"
    DISTANCE = "DISTANCE"
    TIME = "TIME"
    COST = "COST"
    EFFICIENCY = "EFFICIENCY"


DEFAULT_STATE_PREFERENCE_SEQ = ["PURE", "IMPURE", "EMPTY", "SKU_EMPTY"]


class StockAllocationStrategy(ConfigRecordMixin, Base):
    """
    Stock allocation strategy.
    A group is fully allocated when it has exactly one PICK and one PUT strategy.
    """
    __tablename__ = "stock_allocation_strategies"

    inventory_group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("inventory_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    mode: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        index=True,
        comment=enum_comment(AllocationMode)
    )

    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    skip_zone_face: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        comment="Zone face to skip e.g. RESERVE"
    )
    order_by_quant_updated_at: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    search_scope: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=SearchScope.AREA.value,
        comment=enum_comment(SearchScope)
    )

    prefer_fixed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    prefer_non_fixed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    state_preference_seq: Mapped[List[str]] = mapped_column(
        JSONType,
        nullable=False,
        default=lambda: list(DEFAULT_STATE_PREFERENCE_SEQ)
    )

    batch_preference_mode: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        default=BatchPreferenceMode.NONE.value,
        comment=enum_comment(BatchPreferenceMode)
    )
    order_by_picking_position: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    use_inventory_snapshot_for_pick_slotting: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    optimization_mode: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=OptimizationMode.TOUCH.value,
        comment=enum_comment(OptimizationMode)
    )

    def __repr__(self) -> str:
        return f"<StockAllocationStrategy(id={self.id}, group={self.inventory_group_id}, mode='{self.mode}')>"
