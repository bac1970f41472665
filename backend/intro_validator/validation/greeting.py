"""Time-of-day greeting checks in a single fixed timezone."""

from __future__ import annotations

import re
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from intro_validator.validation.types import GreetingResult, SentenceSlot, TimeOfDay, ValidationError

DEFAULT_TIMEZONE = "Asia/Kolkata"

# ASCII-only matching keeps dotted and dotless i from folding onto "i".
GREETING_PATTERN = re.compile(
    r"Good (Morning|Afternoon|Evening) Respected Seniors", re.IGNORECASE | re.ASCII
)

# (start_hour, end_hour) half-open; evening also covers [0, 5)
_TIME_RANGES: tuple[tuple[TimeOfDay, int, int], ...] = (
    (TimeOfDay.MORNING, 5, 12),
    (TimeOfDay.AFTERNOON, 12, 17),
)


class GreetingChecker:
    """Compares the greeting word against the evaluation instant."""

    def __init__(self, timezone_name: str = DEFAULT_TIMEZONE) -> None:
        try:
            self._zone = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {timezone_name!r}") from exc
        self.timezone_name = timezone_name

    def localize(self, now: datetime) -> datetime:
        """Convert an aware timestamp into the configured zone."""

        if not isinstance(now, datetime):
            raise TypeError("Evaluation timestamp must be a datetime")
        if now.tzinfo is None or now.utcoffset() is None:
            raise ValueError("Evaluation timestamp must be timezone-aware")
        return now.astimezone(self._zone)

    def get_current_time_of_day(self, now: datetime) -> TimeOfDay:
        hour = self.localize(now).hour
        for time_of_day, start, end in _TIME_RANGES:
            if start <= hour < end:
                return time_of_day
        return TimeOfDay.EVENING

    def expected_greeting(self, now: datetime) -> str:
        """Return the full greeting sentence expected at ``now``."""

        return f"Good {self.get_current_time_of_day(now).greeting_word} Respected Seniors"

    def extract_greeting(self, text: str) -> re.Match[str] | None:
        first_sentence = text.split(".")[0].strip()
        return GREETING_PATTERN.search(first_sentence)

    def validate_greeting(self, text: str, now: datetime) -> GreetingResult:
        current = self.get_current_time_of_day(now)
        result = GreetingResult(current_time_of_day=current)

        match = self.extract_greeting(text)
        if match is None:
            result.errors.append(
                _greeting_error('Message must start with "Good Morning/Afternoon/Evening Respected Seniors."')
            )
            return result

        greeting_time = TimeOfDay(match.group(1).lower())
        result.greeting_time = greeting_time

        if greeting_time is not current:
            result.errors.append(
                _greeting_error(f'Greeting should be "Good {current.greeting_word}" based on current time')
            )

        if match.group(0) != f"Good {greeting_time.greeting_word} Respected Seniors":
            result.errors.append(
                _greeting_error(
                    'Greeting must be exactly "Good Morning/Afternoon/Evening Respected Seniors." '
                    "with proper capitalization"
                )
            )

        return result


def _greeting_error(message: str) -> ValidationError:
    return ValidationError(message, SentenceSlot.GREETING)
