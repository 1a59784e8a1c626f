"""Quick setup and configuration export endpoints."""
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.api.deps import DB, CurrentUserId
from app.config import settings
from app.schemas.template import TemplateApplyRequest, SetupResponse
from app.services.template_service import TemplateService


router = APIRouter()


@router.post("/quick-setup", response_model=SetupResponse)
async def quick_setup(
    db: DB,
    user_id: CurrentUserId,
    options: Optional[TemplateApplyRequest] = None,
):
    """Apply the built-in default configuration and report what was created."""
    options = options or TemplateApplyRequest()
    summary = await TemplateService(db, user_id).quick_setup(replace_existing=options.replace_existing)
    return SetupResponse(message="Quick setup completed successfully", summary=summary)


async def _export(db, user_id: int) -> JSONResponse:
    export = await TemplateService(db, user_id).export_configuration()
    prefix = settings.EXPORT_FILENAME_PREFIX or "outbound-configuration"
    filename = f"{prefix}-{export.exported_at:%Y%m%d-%H%M%S}.json"
    return JSONResponse(
        content=export.model_dump(mode="json"),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/export/outbound")
async def export_outbound(db: DB, user_id: CurrentUserId):
    """Download the full outbound configuration graph as JSON."""
    return await _export(db, user_id)


@router.get("/export-configuration")
async def export_configuration(db: DB, user_id: CurrentUserId):
    """Same document as /export/outbound."""
    return await _export(db, user_id)
