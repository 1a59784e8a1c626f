"""
Base Schema Classes for Pydantic Models

This module provides base classes that handle common patterns like ORM reads
and forward-compatible input parsing, ensuring consistency across all schemas.

RULE: All response schemas that use `from_attributes=True` MUST inherit from BaseResponseSchema.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict


class BaseResponseSchema(BaseModel):
    """
    Base class for all response schemas that read from ORM models.

    Features:
    - Enables from_attributes for ORM compatibility
    - Consistent datetime serialization

    Usage:
        class InventoryGroupResponse(ConfigRecordResponse):
            name: str
    """
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={
            datetime: lambda v: v.isoformat() if v else None,
        },
        # Allow population by field name or alias
        populate_by_name=True,
    )


class ConfigRecordResponse(BaseResponseSchema):
    """Fields every configuration record carries."""
    id: int
    user_id: int
    version: int
    created_at: datetime
    updated_at: datetime


class BaseCreateSchema(BaseModel):
    """
    Base class for create/input schemas.

    Unknown fields are ignored so template bundles written against older
    field sets still load.
    """
    model_config = ConfigDict(
        extra='ignore',
        populate_by_name=True,
    )

    def to_record(self) -> dict:
        """Column values for a new record (enums as their string values)."""
        return self.model_dump(mode="json")


class BaseUpdateSchema(BaseModel):
    """
    Base class for update/patch schemas.

    All fields are optional by default for partial updates.
    """
    model_config = ConfigDict(
        extra='ignore',
        populate_by_name=True,
    )

    def to_record(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(mode="json", exclude_unset=True)


class DeleteResponse(BaseModel):
    """Delete acknowledgement."""
    success: bool = True
    id: int
    deleted_dependents: dict[str, int] = {}
