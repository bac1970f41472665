"""SQLAlchemy metadata registry import for Alembic."""

from intro_validator.models import ValidationRun
from intro_validator.models.base import Base

__all__ = ["Base", "ValidationRun"]
