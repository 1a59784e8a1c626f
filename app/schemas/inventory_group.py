"""Pydantic schemas for inventory groups."""
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.base import BaseCreateSchema, BaseUpdateSchema, ConfigRecordResponse


# ==================== IDENTIFIER SCHEMAS ====================

class StorageIdentifiers(BaseModel):
    """Storage-side identifiers; blank values mean "any"."""
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    category: Optional[str] = None
    sku_class_type: Optional[str] = Field(None, alias="skuClassType")
    sku_class: Optional[str] = Field(None, alias="skuClass")
    uom: Optional[str] = None
    bucket: Optional[str] = None
    special_storage_indicator: Optional[str] = Field(None, alias="specialStorageIndicator")

    @field_validator('*', mode='before')
    @classmethod
    def stringify(cls, v):
        if isinstance(v, bool):
            return "Y" if v else None
        return v

    def as_dict(self) -> dict:
        return {k: v for k, v in self.model_dump().items() if v not in (None, "")}


class LineIdentifiers(BaseModel):
    """Order-line identifiers; blank values mean "any"."""
    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    channel: Optional[str] = None
    customer: Optional[str] = None

    def as_dict(self) -> dict:
        return {k: v for k, v in self.model_dump().items() if v not in (None, "")}


# ==================== INVENTORY GROUP SCHEMAS ====================

class InventoryGroupCreate(BaseCreateSchema):
    """Inventory group creation schema."""
    name: str = Field(..., min_length=1, max_length=200)
    storage_identifiers: StorageIdentifiers = Field(default_factory=StorageIdentifiers, alias="storageIdentifiers")
    line_identifiers: LineIdentifiers = Field(default_factory=LineIdentifiers, alias="lineIdentifiers")
    storage_instruction: Optional[str] = Field(None, max_length=100, alias="storageInstruction")
    location_instruction: Optional[str] = Field(None, max_length=100, alias="locationInstruction")
    description: Optional[str] = None

    def to_record(self) -> dict:
        data = self.model_dump()
        data["storage_identifiers"] = self.storage_identifiers.as_dict()
        data["line_identifiers"] = self.line_identifiers.as_dict()
        return data


class InventoryGroupUpdate(BaseUpdateSchema):
    """Inventory group update schema."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    storage_identifiers: Optional[StorageIdentifiers] = Field(None, alias="storageIdentifiers")
    line_identifiers: Optional[LineIdentifiers] = Field(None, alias="lineIdentifiers")
    storage_instruction: Optional[str] = Field(None, max_length=100, alias="storageInstruction")
    location_instruction: Optional[str] = Field(None, max_length=100, alias="locationInstruction")
    description: Optional[str] = None

    def to_record(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if self.storage_identifiers is not None:
            data["storage_identifiers"] = self.storage_identifiers.as_dict()
        if self.line_identifiers is not None:
            data["line_identifiers"] = self.line_identifiers.as_dict()
        return data


class InventoryGroupResponse(ConfigRecordResponse):
    """Inventory group response schema."""
    name: str
    storage_identifiers: dict
    line_identifiers: dict
    storage_instruction: Optional[str] = None
    location_instruction: Optional[str] = None
    description: Optional[str] = None


class InventoryGroupBrief(BaseModel):
    """Group with its allocation status, for the stock allocation step."""
    id: int
    name: str
    pick_strategies: int
    put_strategies: int
    fully_allocated: bool


class AllocationStatusResponse(BaseModel):
    """Allocation status for every group of the user."""
    groups: List[InventoryGroupBrief]
    configured_groups: int
    total_groups: int
