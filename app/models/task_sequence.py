"""Task sequence configuration model."""
from enum import Enum
from typing import Optional, List

from sqlalchemy import String, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, ConfigRecordMixin
from app.db_types import JSONType


class TaskSequenceToken(str, Enum):
    """Outbound task sequence token."""
    OUTBOUND_REPLEN = "OUTBOUND_REPLEN"
    OUTBOUND_PICK = "OUTBOUND_PICK"
    OUTBOUND_LOAD = "OUTBOUND_LOAD"
    OUTBOUND_PACK = "OUTBOUND_PACK"
    OUTBOUND_SHIP = "OUTBOUND_SHIP"
    OUTBOUND_SPECIAL = "OUTBOUND_SPECIAL"
    HAZMAT_PROCESS = "HAZMAT_PROCESS"
    QUALITY_CHECK = "QUALITY_CHECK"


class TaskSequenceConfiguration(ConfigRecordMixin, Base):
    """Ordered outbound task sequence for an inventory group."""
    __tablename__ = "task_sequence_configurations"

    inventory_group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("inventory_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    task_sequences: Mapped[List[str]] = mapped_column(
        JSONType,
        nullable=False,
        default=list,
        comment="Ordered TaskSequenceToken values"
    )

    shipment_acknowledgment: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        comment="Trigger for shipment acknowledgment e.g. SHIPMENT, SHIP_CONFIRM"
    )

    def __repr__(self) -> str:
        return f"<TaskSequenceConfiguration(id={self.id}, group={self.inventory_group_id})>"
