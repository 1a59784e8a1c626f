"""Wizard session and per-step draft data models."""
from datetime import datetime, timezone
from typing import List

from sqlalchemy import Boolean, DateTime, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.db_types import JSONType


class WizardSession(Base):
    """
    Navigation state of the wizard for one user.
    Holds the current step pointer and the set of completed steps.
    """
    __tablename__ = "wizard_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    current_step: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    completed_steps: Mapped[List[int]] = mapped_column(JSONType, nullable=False, default=list)
    confirmed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<WizardSession(user={self.user_id}, step={self.current_step})>"


class WizardStepConfiguration(Base):
    """
    Draft form data saved for a wizard step.
    One row per (user, step); saving again replaces the data.
    """
    __tablename__ = "wizard_step_configurations"
    __table_args__ = (
        UniqueConstraint("user_id", "step", name="uq_wizard_step_configuration_user_step"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    step: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)
    is_complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<WizardStepConfiguration(user={self.user_id}, step={self.step})>"
