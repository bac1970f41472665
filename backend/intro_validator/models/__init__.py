"""ORM models package exports."""

from intro_validator.models.base import Base
from intro_validator.models.validation_run import ValidationRun

__all__ = ["Base", "ValidationRun"]
