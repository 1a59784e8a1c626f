"""One-click template API endpoints."""
from typing import List, Optional

from fastapi import APIRouter, status, Query

from app.api.deps import DB, CurrentUserId
from app.schemas.template import (
    TemplateCreate,
    TemplateResponse,
    TemplateApplyRequest,
    SetupResponse,
)
from app.services.template_service import TemplateService


router = APIRouter()


@router.get("", response_model=List[TemplateResponse])
async def list_templates(
    db: DB,
    user_id: CurrentUserId,
    active_only: bool = Query(False),
):
    """Get all one-click templates."""
    return await TemplateService(db, user_id).list_templates(active_only=active_only)


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(data: TemplateCreate, db: DB, user_id: CurrentUserId):
    """Store a new template. The bundle is validated up front."""
    return await TemplateService(db, user_id).create_template(data)


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(template_id: int, db: DB, user_id: CurrentUserId):
    return await TemplateService(db, user_id).get_template(template_id)


@router.post("/{template_id}/apply", response_model=SetupResponse)
async def apply_template(
    template_id: int,
    db: DB,
    user_id: CurrentUserId,
    options: Optional[TemplateApplyRequest] = None,
):
    """
    Apply a template to the user's configuration.

    All records are created in one transaction; by default the existing
    configuration is replaced.
    """
    options = options or TemplateApplyRequest()
    template, summary = await TemplateService(db, user_id).apply_template(
        template_id, replace_existing=options.replace_existing
    )
    return SetupResponse(
        message=f"Template '{template.name}' applied successfully",
        template_name=template.name,
        summary=summary,
    )
