"""Introduction validation request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntroductionValidateRequest(BaseModel):
    """Payload for validating one introduction."""

    text: str = Field(min_length=1)
    evaluated_at: datetime | None = None
    record: bool = True
    sender_name: str | None = None

    @field_validator("evaluated_at")
    @classmethod
    def _require_timezone(cls, value: datetime | None) -> datetime | None:
        if value is not None and (value.tzinfo is None or value.utcoffset() is None):
            raise ValueError("evaluated_at must include a timezone offset")
        return value


class IntroductionVerdict(BaseModel):
    """Verdict returned to callers."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    expected_greeting: str
    evaluated_at: datetime
    validation_run_id: int | None = None


class ExpectedGreetingRead(BaseModel):
    """Greeting expected at a given instant."""

    expected_greeting: str
    time_of_day: str
    timezone: str
    evaluated_at: datetime


class ValidationStatsRead(BaseModel):
    """Running totals across recorded validations."""

    total: int
    valid: int
    invalid: int


class ValidationRunRead(BaseModel):
    """Serialized validation run."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    source: str
    sender_id: str | None = None
    sender_name: str | None = None
    is_valid: bool
    error_count: int
    errors_json: list[str]
    evaluated_at: datetime
    created_at: datetime
