"""Typed validation outputs independent of transport and persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class SentenceSlot(IntEnum):
    """Fixed sentence positions of an introduction."""

    GREETING = 0
    NAME = 1
    LOCATION = 2
    EDUCATION = 3
    HOBBY = 4


class TimeOfDay(str, Enum):
    """Greeting period of the 24-hour clock."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    @property
    def greeting_word(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One rule violation, tagged with the slot it belongs to when known."""

    message: str
    slot: SentenceSlot | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class CheckResult:
    """Outcome of a single field checker."""

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


@dataclass(slots=True)
class SlotResult(CheckResult):
    """Outcome of one sentence slot with the fields pulled out of it."""

    slot: SentenceSlot = SentenceSlot.GREETING
    sentence: str = ""
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class FormatResult(CheckResult):
    """Structural validation outcome with per-slot detail."""

    slot_results: dict[SentenceSlot, SlotResult] = field(default_factory=dict)


@dataclass(slots=True)
class GreetingResult(CheckResult):
    """Greeting/time-of-day validation outcome."""

    current_time_of_day: TimeOfDay | None = None
    greeting_time: TimeOfDay | None = None


@dataclass(slots=True)
class HobbyDetails:
    """Diagnostic breakdown of every hobby sub-check."""

    is_known_hobby: bool
    can_be_pursued_as_career: bool
    can_be_done_alone: bool
    is_forbidden: bool
    contains_forbidden_keywords: bool
    has_multiple_hobbies: bool


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Final verdict for one introduction."""

    errors: tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]
