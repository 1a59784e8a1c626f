from typing import Annotated, Optional

from fastapi import Depends, Header, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import ValidationError
from app.database import get_db


async def get_current_user_id() -> int:
    """
    Dependency returning the acting user.

    There is no authentication layer: every request acts as the configured
    mock user.
    """
    return settings.MOCK_USER_ID


async def get_expected_version(
    if_match: Optional[str] = Header(None, alias="If-Match"),
    expected_version: Optional[int] = Query(None, ge=1),
) -> Optional[int]:
    """
    Version the client last read, from the If-Match header or the
    expected_version query parameter. None disables the check.
    """
    if if_match is None:
        return expected_version
    value = if_match.strip()
    if value.startswith("W/"):
        value = value[2:]
    value = value.strip('"')
    if value == "*":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError("If-Match must carry a record version", if_match=if_match)


# Type aliases for cleaner dependency injection
DB = Annotated[AsyncSession, Depends(get_db)]
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
ExpectedVersion = Annotated[Optional[int], Depends(get_expected_version)]
