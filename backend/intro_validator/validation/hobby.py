"""Hobby classification against the solo, career-viable hobby taxonomy."""

from __future__ import annotations

import random

from intro_validator.validation.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from intro_validator.validation.types import CheckResult, HobbyDetails, ValidationError


class HobbyClassifier:
    """Accepts a single hobby that can be done alone and pursued as a career.

    All checks run independently so a rejected hobby reports every reason at
    once. Matching is substring based in both directions ("oil painting"
    matches "painting").
    """

    def __init__(self, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> None:
        self._taxonomy = taxonomy

    def validate_hobby(self, hobby: str) -> CheckResult:
        hobby_lower = hobby.lower().strip()
        result = CheckResult()

        if self.contains_multiple_hobbies(hobby):
            result.errors.append(ValidationError("Only one hobby should be mentioned"))

        if self.is_forbidden(hobby_lower):
            result.errors.append(
                ValidationError(
                    f'"{hobby}" is not allowed as it\'s either coding, sports, or typical college activity'
                )
            )

        keyword = self.find_forbidden_keyword(hobby_lower)
        if keyword is not None:
            result.errors.append(ValidationError(f'Hobby contains forbidden keyword "{keyword}"'))

        if not self.is_known_hobby(hobby_lower):
            result.errors.append(
                ValidationError(f'"{hobby}" must be something that can be pursued as a career and done alone')
            )

        if not self.can_be_pursued_as_career(hobby_lower):
            result.errors.append(ValidationError(f'"{hobby}" cannot be realistically pursued as a career'))

        if not self.can_be_done_alone(hobby_lower):
            result.errors.append(
                ValidationError(f'"{hobby}" typically requires other people or is a group activity')
            )

        return result

    def get_validation_details(self, hobby: str) -> HobbyDetails:
        """Expose each sub-check for diagnostics."""

        hobby_lower = hobby.lower().strip()
        return HobbyDetails(
            is_known_hobby=self.is_known_hobby(hobby_lower),
            can_be_pursued_as_career=self.can_be_pursued_as_career(hobby_lower),
            can_be_done_alone=self.can_be_done_alone(hobby_lower),
            is_forbidden=self.is_forbidden(hobby_lower),
            contains_forbidden_keywords=self.find_forbidden_keyword(hobby_lower) is not None,
            has_multiple_hobbies=self.contains_multiple_hobbies(hobby),
        )

    def contains_multiple_hobbies(self, hobby: str) -> bool:
        lowered = hobby.lower()
        return any(indicator in lowered for indicator in self._taxonomy.multiple_hobby_indicators)

    def is_forbidden(self, hobby_lower: str) -> bool:
        return hobby_lower in self._taxonomy.forbidden_hobbies

    def find_forbidden_keyword(self, hobby_lower: str) -> str | None:
        """Return the first forbidden keyword contained in the hobby."""

        return next(
            (keyword for keyword in self._taxonomy.forbidden_keywords if keyword in hobby_lower),
            None,
        )

    def is_known_hobby(self, hobby_lower: str) -> bool:
        if hobby_lower in self._taxonomy.valid_hobbies:
            return True
        return any(
            valid in hobby_lower or hobby_lower in valid
            for valid in self._taxonomy.valid_hobbies
        )

    def can_be_pursued_as_career(self, hobby_lower: str) -> bool:
        if hobby_lower in self._taxonomy.valid_hobbies:
            return True
        return any(category in hobby_lower for category in self._taxonomy.careerable_categories)

    def can_be_done_alone(self, hobby_lower: str) -> bool:
        return not any(activity in hobby_lower for activity in self._taxonomy.group_activities)

    def suggest_alternative_hobby(self, rng: random.Random | None = None) -> str:
        """Pick one acceptable hobby to offer as an alternative."""

        return (rng or random).choice(self._taxonomy.suggested_hobbies)
