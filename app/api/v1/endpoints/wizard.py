"""Wizard navigation and step draft data endpoints."""
from typing import List

from fastapi import APIRouter

from app.api.deps import DB, CurrentUserId
from app.core.exceptions import NotFoundError
from app.schemas.wizard import (
    JumpRequest,
    TransitionResponse,
    WizardStateResponse,
    WizardStatusResponse,
    WizardStepConfigurationSave,
    WizardStepConfigurationResponse,
)
from app.services.wizard_service import WizardService


router = APIRouter()


# ==================== NAVIGATION ====================

@router.get("/state", response_model=WizardStateResponse)
async def get_wizard_state(db: DB, user_id: CurrentUserId):
    service = WizardService(db, user_id)
    return service.describe(await service.get_state())


@router.get("/status", response_model=WizardStatusResponse)
async def get_wizard_status(db: DB, user_id: CurrentUserId):
    """Live completion check of every step."""
    return await WizardService(db, user_id).status()


@router.post("/next", response_model=TransitionResponse)
async def next_step(db: DB, user_id: CurrentUserId):
    """
    Advance past the current step.

    When the step is incomplete the response has advanced=false and a
    warning message; this is not an error.
    """
    service = WizardService(db, user_id)
    return service.describe_transition(await service.go_next())


@router.post("/previous", response_model=TransitionResponse)
async def previous_step(db: DB, user_id: CurrentUserId):
    service = WizardService(db, user_id)
    return service.describe_transition(await service.go_previous())


@router.post("/jump", response_model=TransitionResponse)
async def jump_to_step(data: JumpRequest, db: DB, user_id: CurrentUserId):
    """Go directly to a step; 400 when it is outside the wizard."""
    service = WizardService(db, user_id)
    return service.describe_transition(await service.jump_to(data.step))


@router.post("/reset", response_model=TransitionResponse)
async def reset_wizard(db: DB, user_id: CurrentUserId):
    service = WizardService(db, user_id)
    return service.describe_transition(await service.reset())


@router.post("/confirm", response_model=TransitionResponse)
async def confirm_configuration(db: DB, user_id: CurrentUserId):
    """Confirm the configuration; only accepted on the review step."""
    service = WizardService(db, user_id)
    return service.describe_transition(await service.confirm())


# ==================== STEP DATA ====================

@router.get("/configurations", response_model=List[WizardStepConfigurationResponse])
async def list_step_configurations(db: DB, user_id: CurrentUserId):
    return await WizardService(db, user_id).list_step_configurations()


@router.post("/configurations", response_model=WizardStepConfigurationResponse)
async def save_step_configuration(data: WizardStepConfigurationSave, db: DB, user_id: CurrentUserId):
    """Save the draft form data of a step, replacing any earlier save."""
    return await WizardService(db, user_id).save_step_configuration(
        data.step, data.data, data.is_complete
    )


@router.get("/configurations/{step}", response_model=WizardStepConfigurationResponse)
async def get_step_configuration(step: int, db: DB, user_id: CurrentUserId):
    config = await WizardService(db, user_id).get_step_configuration(step)
    if config is None:
        raise NotFoundError("Step configuration", step)
    return config
