"""Introduction validation services shared by the API, webhook relay, and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import Literal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from intro_validator.config import get_settings
from intro_validator.models.validation_run import ValidationRun
from intro_validator.schemas.introduction import ValidationStatsRead
from intro_validator.validation import (
    DEFAULT_TAXONOMY,
    IntroductionValidator,
    Taxonomy,
    ValidationResult,
    load_taxonomy,
)

logger = logging.getLogger(__name__)

ValidationSource = Literal["api", "webhook", "cli"]

INTRODUCTION_KEYWORDS: tuple[str, ...] = (
    "good morning respected seniors",
    "good afternoon respected seniors",
    "good evening respected seniors",
    "my name is",
    "i am from",
    "i am pursuing",
    "my hobby is",
)

THUMBS_UP = "\N{THUMBS UP SIGN}"
REPEAT_REPLY = "repeat"


@dataclass(frozen=True, slots=True)
class ReplyAction:
    """What a transport should do in response to a verdict."""

    reaction: str | None = None
    reply_text: str | None = None
    welcome_text: str | None = None


@lru_cache
def get_taxonomy() -> Taxonomy:
    """Return the built-in tables, or the JSON override named by ``taxonomy_path``."""

    settings = get_settings()
    if not settings.taxonomy_path:
        return DEFAULT_TAXONOMY
    logger.info("Loading taxonomy override from %s", settings.taxonomy_path)
    return load_taxonomy(settings.taxonomy_path)


@lru_cache
def get_validator() -> IntroductionValidator:
    """Return the process-wide validator built from settings."""

    return IntroductionValidator(get_taxonomy(), timezone_name=get_settings().timezone)


def is_introduction_message(text: str, threshold: int = 3) -> bool:
    """Heuristic: the text mentions at least ``threshold`` template phrases."""

    lowered = text.lower()
    return sum(1 for keyword in INTRODUCTION_KEYWORDS if keyword in lowered) >= threshold


def decide_reply(
    verdict: ValidationResult,
    *,
    is_group: bool = False,
    sender_name: str | None = None,
    send_group_welcome: bool = True,
) -> ReplyAction:
    """Map a verdict to the acknowledgement or corrective prompt."""

    if not verdict.is_valid:
        return ReplyAction(reply_text=REPEAT_REPLY)
    welcome = None
    if is_group and send_group_welcome:
        welcome = (
            f"Welcome to the group, {sender_name or 'Unknown'}! \N{WAVING HAND SIGN} "
            "Your introduction has been validated successfully."
        )
    return ReplyAction(reaction=THUMBS_UP, welcome_text=welcome)


def validate_and_record(
    db: Session | None,
    text: str,
    *,
    source: ValidationSource,
    evaluated_at: datetime | None = None,
    sender_id: str | None = None,
    sender_name: str | None = None,
    validator: IntroductionValidator | None = None,
) -> tuple[ValidationResult, ValidationRun | None]:
    """Validate ``text`` and, when a session is given, store the verdict."""

    active_validator = validator or get_validator()
    now = evaluated_at or datetime.now(timezone.utc)
    verdict = active_validator.validate(text, now)

    if verdict.is_valid:
        logger.info("Introduction accepted (source=%s sender=%s)", source, sender_name or sender_id)
    else:
        logger.info(
            "Introduction rejected (source=%s sender=%s): %s",
            source,
            sender_name or sender_id,
            "; ".join(verdict.messages),
        )

    if db is None:
        return verdict, None

    run = ValidationRun(
        source=source,
        sender_id=sender_id,
        sender_name=sender_name,
        is_valid=verdict.is_valid,
        error_count=len(verdict.errors),
        errors_json=verdict.messages,
        evaluated_at=now,
    )
    db.add(run)
    db.commit()
    db.refresh(run)
    return verdict, run


def get_validation_stats(db: Session) -> ValidationStatsRead:
    """Return total/valid/invalid counts across recorded runs."""

    total = db.scalar(select(func.count(ValidationRun.id))) or 0
    valid = db.scalar(select(func.count(ValidationRun.id)).where(ValidationRun.is_valid.is_(True))) or 0
    return ValidationStatsRead(total=total, valid=valid, invalid=total - valid)


def list_validation_runs(db: Session, limit: int = 50) -> list[ValidationRun]:
    """Return the most recent runs, newest first."""

    stmt = (
        select(ValidationRun)
        .order_by(ValidationRun.created_at.desc(), ValidationRun.id.desc())
        .limit(limit)
    )
    return list(db.scalars(stmt).all())
