"""Inventory group model: the root of the outbound configuration graph."""
from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, ConfigRecordMixin
from app.db_types import JSONType


# Documented key vocabulary for the identifier maps.
STORAGE_IDENTIFIER_KEYS = (
    "category",
    "sku_class_type",
    "sku_class",
    "uom",
    "bucket",
    "special_storage_indicator",
)

LINE_IDENTIFIER_KEYS = (
    "channel",
    "customer",
)


class InventoryGroup(ConfigRecordMixin, Base):
    """
    Inventory group.
    Scopes task sequences, pick strategies, stock allocation and task planning
    to a combination of storage and line identifiers.
    """
    __tablename__ = "inventory_groups"

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    storage_identifiers: Mapped[dict] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
        comment=", ".join(STORAGE_IDENTIFIER_KEYS)
    )
    line_identifiers: Mapped[dict] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
        comment=", ".join(LINE_IDENTIFIER_KEYS)
    )

    storage_instruction: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Storage instruction code e.g. L0, L2"
    )
    location_instruction: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Location instruction code e.g. BIN, AREA"
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    @property
    def identity_key(self) -> tuple:
        """Identifier combination that must be unique among a user's groups."""
        return group_identity_key(
            self.storage_instruction,
            self.location_instruction,
            self.storage_identifiers,
            self.line_identifiers,
        )

    def __repr__(self) -> str:
        return f"<InventoryGroup(id={self.id}, name='{self.name}')>"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def group_identity_key(
    storage_instruction: Optional[str],
    location_instruction: Optional[str],
    storage_identifiers: Optional[dict],
    line_identifiers: Optional[dict],
) -> tuple:
    """
    Build the comparable identity of a group; blank values are ignored.

    A group with a storage or location instruction is identified by that
    pair alone. Groups without instructions are told apart by their
    identifier maps.
    """
    storage_instruction = _clean(storage_instruction)
    location_instruction = _clean(location_instruction)
    if storage_instruction is not None or location_instruction is not None:
        return (storage_instruction, location_instruction)

    def _items(mapping: Optional[dict]) -> tuple:
        return tuple(sorted(
            (key, _clean(val)) for key, val in (mapping or {}).items()
            if _clean(val) is not None
        ))

    return (None, None, _items(storage_identifiers), _items(line_identifiers))
