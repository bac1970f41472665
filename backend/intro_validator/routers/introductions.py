"""Introduction validation routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from intro_validator.db.dependencies import get_db
from intro_validator.schemas.common import ApiResponse
from intro_validator.schemas.introduction import (
    ExpectedGreetingRead,
    IntroductionValidateRequest,
    IntroductionVerdict,
    ValidationRunRead,
    ValidationStatsRead,
)
from intro_validator.services.introductions import (
    get_validation_stats,
    get_validator,
    list_validation_runs,
    validate_and_record,
)
from intro_validator.validation import IntroductionValidator


router = APIRouter(prefix="/introductions")


@router.post("/validate", response_model=ApiResponse[IntroductionVerdict])
def validate_introduction(
    payload: IntroductionValidateRequest,
    db: Session = Depends(get_db),
    validator: IntroductionValidator = Depends(get_validator),
) -> ApiResponse[IntroductionVerdict]:
    """Validate an introduction and optionally record the verdict."""

    evaluated_at = payload.evaluated_at or datetime.now(timezone.utc)
    verdict, run = validate_and_record(
        db if payload.record else None,
        payload.text,
        source="api",
        evaluated_at=evaluated_at,
        sender_name=payload.sender_name,
        validator=validator,
    )
    return ApiResponse(
        data=IntroductionVerdict(
            is_valid=verdict.is_valid,
            errors=verdict.messages,
            expected_greeting=validator.expected_greeting(evaluated_at),
            evaluated_at=evaluated_at,
            validation_run_id=run.id if run is not None else None,
        )
    )


@router.get("/greeting", response_model=ApiResponse[ExpectedGreetingRead])
def get_expected_greeting(
    validator: IntroductionValidator = Depends(get_validator),
) -> ApiResponse[ExpectedGreetingRead]:
    """Return the greeting expected right now."""

    now = datetime.now(timezone.utc)
    checker = validator.greeting_checker
    return ApiResponse(
        data=ExpectedGreetingRead(
            expected_greeting=checker.expected_greeting(now),
            time_of_day=checker.get_current_time_of_day(now).value,
            timezone=checker.timezone_name,
            evaluated_at=checker.localize(now),
        )
    )


@router.get("/stats", response_model=ApiResponse[ValidationStatsRead])
def get_stats(db: Session = Depends(get_db)) -> ApiResponse[ValidationStatsRead]:
    """Return running validation totals."""

    return ApiResponse(data=get_validation_stats(db))


@router.get("/runs", response_model=ApiResponse[list[ValidationRunRead]])
def get_runs(
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> ApiResponse[list[ValidationRunRead]]:
    """List recent validation runs, newest first."""

    return ApiResponse(data=[ValidationRunRead.model_validate(run) for run in list_validation_runs(db, limit)])
