"""Pydantic schemas for task sequence configurations."""
from typing import Optional, List

from pydantic import Field

from app.core.enum_utils import create_uppercase_validator, VALID_TASK_SEQUENCE_TOKENS
from app.models.task_sequence import TaskSequenceToken
from app.schemas.base import BaseCreateSchema, BaseUpdateSchema, ConfigRecordResponse


class TaskSequenceCreate(BaseCreateSchema):
    """Task sequence configuration creation schema."""
    inventory_group_id: int = Field(..., alias="inventoryGroupId")
    task_sequences: List[TaskSequenceToken] = Field(..., min_length=1, alias="taskSequences")
    shipment_acknowledgment: Optional[str] = Field(None, max_length=50, alias="shipmentAcknowledgment")

    normalize_tokens = create_uppercase_validator('task_sequences', VALID_TASK_SEQUENCE_TOKENS)


class TaskSequenceUpdate(BaseUpdateSchema):
    """Task sequence configuration update schema."""
    task_sequences: Optional[List[TaskSequenceToken]] = Field(None, min_length=1, alias="taskSequences")
    shipment_acknowledgment: Optional[str] = Field(None, max_length=50, alias="shipmentAcknowledgment")

    normalize_tokens = create_uppercase_validator('task_sequences', VALID_TASK_SEQUENCE_TOKENS)


class TaskSequenceResponse(ConfigRecordResponse):
    """Task sequence configuration response schema."""
    inventory_group_id: int
    task_sequences: List[str]
    shipment_acknowledgment: Optional[str] = None
