"""Top-level introduction validation combining greeting and structure checks."""

from __future__ import annotations

import logging
from datetime import datetime

from intro_validator.validation.greeting import DEFAULT_TIMEZONE, GreetingChecker
from intro_validator.validation.structure import StructuralValidator
from intro_validator.validation.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from intro_validator.validation.types import ValidationResult

logger = logging.getLogger(__name__)


class IntroductionValidator:
    """Pure ``(text, now) -> ValidationResult`` validation engine.

    Instances hold only immutable configuration and are safe to share across
    threads. Both sub-validators always run; greeting errors come first.
    """

    def __init__(
        self,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        *,
        timezone_name: str = DEFAULT_TIMEZONE,
    ) -> None:
        self.taxonomy = taxonomy
        self.greeting_checker = GreetingChecker(timezone_name)
        self.structural_validator = StructuralValidator(taxonomy)

    def validate(self, text: str, now: datetime) -> ValidationResult:
        if not isinstance(text, str):
            raise TypeError("Introduction text must be a string")

        greeting = self.greeting_checker.validate_greeting(text, now)
        structure = self.structural_validator.validate_format(text)
        result = ValidationResult(errors=tuple(greeting.errors) + tuple(structure.errors))

        logger.debug(
            "Introduction validated: is_valid=%s errors=%d time_of_day=%s",
            result.is_valid,
            len(result.errors),
            greeting.current_time_of_day.value if greeting.current_time_of_day else None,
        )
        return result

    def expected_greeting(self, now: datetime) -> str:
        return self.greeting_checker.expected_greeting(now)
