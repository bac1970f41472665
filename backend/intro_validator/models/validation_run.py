"""Validation run audit log model."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from intro_validator.models.base import Base, CreatedAtMixin, IdMixin


class ValidationRun(Base, IdMixin, CreatedAtMixin):
    """One introduction verdict produced by the API, webhook, or CLI."""

    __tablename__ = "validation_runs"

    source: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    sender_id: Mapped[str | None] = mapped_column(String(255), index=True, nullable=True)
    sender_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_valid: Mapped[bool] = mapped_column(Boolean, index=True, nullable=False)
    error_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    errors_json: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    evaluated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)
