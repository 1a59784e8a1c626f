"""Pydantic schemas for wizard navigation and per-step draft data."""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field

from app.schemas.base import BaseResponseSchema


class StepInfo(BaseModel):
    """One wizard step as shown in the sidebar."""
    number: int
    key: str
    title: str
    completed: bool
    current: bool


class WizardStateResponse(BaseModel):
    """Wizard navigation state for the current user."""
    current_step: int
    current_step_key: str
    step_count: int
    completed_steps: List[int]
    confirmed: bool
    steps: List[StepInfo]


class TransitionResponse(BaseModel):
    """Outcome of a navigation action; a blocked move carries a message."""
    advanced: bool
    message: Optional[str] = None
    state: WizardStateResponse


class JumpRequest(BaseModel):
    step: int


class StepStatus(BaseModel):
    """Live completion check of one step."""
    number: int
    key: str
    title: str
    complete: bool
    message: Optional[str] = None


class WizardStatusResponse(BaseModel):
    steps: List[StepStatus]
    all_complete: bool


class WizardStepConfigurationSave(BaseModel):
    """Draft form data for a step."""
    step: int = Field(..., ge=1)
    data: dict = Field(default_factory=dict)
    is_complete: bool = Field(False, alias="isComplete")

    model_config = {"populate_by_name": True}


class WizardStepConfigurationResponse(BaseResponseSchema):
    id: int
    user_id: int
    step: int
    data: dict
    is_complete: bool
    updated_at: datetime
