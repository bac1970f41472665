"""Five-sentence structural validation of an introduction."""

from __future__ import annotations

import re

from intro_validator.validation.capitalization import CapitalizationChecker
from intro_validator.validation.hobby import HobbyClassifier
from intro_validator.validation.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from intro_validator.validation.types import (
    CheckResult,
    FormatResult,
    SentenceSlot,
    SlotResult,
    ValidationError,
)

EXPECTED_SENTENCE_COUNT = len(SentenceSlot)
SENTENCE_TERMINATOR = "."

# Matched against the sentence with its terminator restored.
SLOT_PATTERNS: dict[SentenceSlot, re.Pattern[str]] = {
    SentenceSlot.GREETING: re.compile(r"^Good (Morning|Afternoon|Evening) Respected Seniors\."),
    SentenceSlot.NAME: re.compile(r"My name is (?P<name>[^.]+)\."),
    SentenceSlot.LOCATION: re.compile(r"I am from (?P<city>[^,]+), (?P<state>[^.]+)\."),
    SentenceSlot.EDUCATION: re.compile(
        r"I am pursuing (?P<degree>Bachelor|Integrated Master) of Technology in (?P<branch>[^.]+)\."
    ),
    SentenceSlot.HOBBY: re.compile(r"My hobby is (?P<hobby>[^.]+)\."),
}

SLOT_TEMPLATES: dict[SentenceSlot, str] = {
    SentenceSlot.GREETING: 'First sentence must be "Good Morning/Afternoon/Evening Respected Seniors."',
    SentenceSlot.NAME: 'Second sentence must be "My name is [Full Name]."',
    SentenceSlot.LOCATION: 'Third sentence must be "I am from [City/Town], [State]."',
    SentenceSlot.EDUCATION: (
        'Fourth sentence must be "I am pursuing Bachelor/Integrated Master of Technology in '
        '[Branch Name in full]."'
    ),
    SentenceSlot.HOBBY: 'Fifth sentence must be "My hobby is [Hobby]."',
}


def split_into_sentences(text: str) -> list[str]:
    """Split on the terminator, trimming and dropping empty pieces."""

    return [piece.strip() for piece in text.split(SENTENCE_TERMINATOR) if piece.strip()]


class StructuralValidator:
    """Checks the sentence layout and hands each extracted field to its checker."""

    def __init__(
        self,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        *,
        capitalization: CapitalizationChecker | None = None,
        hobbies: HobbyClassifier | None = None,
    ) -> None:
        self._taxonomy = taxonomy
        self._capitalization = capitalization or CapitalizationChecker(taxonomy)
        self._hobbies = hobbies or HobbyClassifier(taxonomy)

    def validate_format(self, text: str) -> FormatResult:
        """Validate every slot and collect all errors in slot order.

        A wrong sentence count is reported but does not stop slot checks;
        missing slots are validated as empty sentences.
        """

        sentences = split_into_sentences(text)
        result = FormatResult()
        if len(sentences) != EXPECTED_SENTENCE_COUNT:
            result.errors.append(
                ValidationError(
                    f"Introduction must contain exactly {EXPECTED_SENTENCE_COUNT} sentences, "
                    f"found {len(sentences)}"
                )
            )

        slot_checks = {
            SentenceSlot.GREETING: self.validate_greeting_sentence,
            SentenceSlot.NAME: self.validate_name_sentence,
            SentenceSlot.LOCATION: self.validate_location_sentence,
            SentenceSlot.EDUCATION: self.validate_education_sentence,
            SentenceSlot.HOBBY: self.validate_hobby_sentence,
        }
        for slot in SentenceSlot:
            sentence = sentences[slot] if slot < len(sentences) else ""
            slot_result = slot_checks[slot](sentence)
            result.slot_results[slot] = slot_result
            result.errors.extend(slot_result.errors)
        return result

    def validate_greeting_sentence(self, sentence: str) -> SlotResult:
        slot_result, _match = self._match_slot(SentenceSlot.GREETING, sentence)
        return slot_result

    def validate_name_sentence(self, sentence: str) -> SlotResult:
        slot_result, match = self._match_slot(SentenceSlot.NAME, sentence)
        if match is None:
            return slot_result

        name = match.group("name").strip()
        slot_result.fields["name"] = name
        _absorb(slot_result, self._capitalization.validate_name(name))
        return slot_result

    def validate_location_sentence(self, sentence: str) -> SlotResult:
        slot_result, match = self._match_slot(SentenceSlot.LOCATION, sentence)
        if match is None:
            return slot_result

        city = match.group("city").strip()
        state = match.group("state").strip()
        slot_result.fields.update(city=city, state=state)
        _absorb(slot_result, self._capitalization.validate_location(city))
        _absorb(slot_result, self._capitalization.validate_location(state))

        if self.is_town(city) and not self.mentions_district(sentence):
            slot_result.errors.append(
                ValidationError("If from a town, mention the nearest district", SentenceSlot.LOCATION)
            )
        return slot_result

    def validate_education_sentence(self, sentence: str) -> SlotResult:
        slot_result, match = self._match_slot(SentenceSlot.EDUCATION, sentence)
        if match is None:
            return slot_result

        branch = match.group("branch").strip()
        slot_result.fields.update(degree=match.group("degree"), branch=branch)
        _absorb(slot_result, self._capitalization.validate_branch_name(branch))
        return slot_result

    def validate_hobby_sentence(self, sentence: str) -> SlotResult:
        slot_result, match = self._match_slot(SentenceSlot.HOBBY, sentence)
        if match is None:
            return slot_result

        hobby = match.group("hobby").strip()
        slot_result.fields["hobby"] = hobby
        _absorb(slot_result, self._hobbies.validate_hobby(hobby))
        return slot_result

    def is_town(self, location: str) -> bool:
        """Major cities are never towns; otherwise a town keyword decides."""

        location_lower = location.lower().strip()
        if location_lower in self._taxonomy.major_cities:
            return False
        return any(keyword in location_lower for keyword in self._taxonomy.town_keywords)

    def mentions_district(self, sentence: str) -> bool:
        sentence_lower = sentence.lower()
        return any(keyword in sentence_lower for keyword in self._taxonomy.district_keywords)

    @staticmethod
    def _match_slot(slot: SentenceSlot, sentence: str) -> tuple[SlotResult, re.Match[str] | None]:
        slot_result = SlotResult(slot=slot, sentence=sentence)
        match = SLOT_PATTERNS[slot].search(sentence + SENTENCE_TERMINATOR)
        if match is None:
            slot_result.errors.append(ValidationError(SLOT_TEMPLATES[slot], slot))
        return slot_result, match


def _absorb(slot_result: SlotResult, check: CheckResult) -> None:
    slot_result.errors.extend(ValidationError(error.message, slot_result.slot) for error in check.errors)
