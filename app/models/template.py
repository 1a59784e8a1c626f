"""One-click template model."""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.db_types import JSONType


class OneClickTemplate(Base):
    """
    Canned configuration bundle.
    Applying it seeds a full configuration set for the user in one transaction.
    Templates are global, not user scoped.
    """
    __tablename__ = "one_click_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    complexity: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        comment="Basic, Intermediate, Advanced"
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    template_data: Mapped[dict] = mapped_column(
        JSONType,
        nullable=False,
        comment="ConfigurationBundle payload"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<OneClickTemplate(id={self.id}, name='{self.name}')>"
