"""Word-level capitalization rules for names, places, and branch names."""

from __future__ import annotations

from enum import Enum

from intro_validator.validation.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from intro_validator.validation.types import CheckResult, ValidationError


class _WordIssue(str, Enum):
    ABBREVIATION = "abbreviation"
    LOWERCASE = "lowercase"
    TITLE = "title"


class CapitalizationChecker:
    """Checks phrases word by word against the capitalization rules.

    Each word is classified in order: known abbreviations must be fully
    uppercase; lowercase-exception words must be fully lowercase unless they
    open the phrase; everything else must be title case. Every offending word
    yields its own error.
    """

    def __init__(self, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> None:
        self._taxonomy = taxonomy

    def validate_name(self, name: str) -> CheckResult:
        """Validate a full name; at least first and last name are required."""

        words = _split_words(name)
        result = CheckResult()
        if len(words) < 2:
            result.errors.append(ValidationError("Name must contain at least first and last name"))
        result.errors.extend(self._check_words(words, 'Name "{word}" must start with capital letter'))
        return result

    def validate_location(self, location: str) -> CheckResult:
        """Validate one part of a location (city or state)."""

        return CheckResult(
            errors=self._check_words(
                _split_words(location),
                'Location word "{word}" must be properly capitalized',
            )
        )

    def validate_branch_name(self, branch: str) -> CheckResult:
        """Validate an academic branch name such as "Computer Science and Engineering"."""

        return CheckResult(
            errors=self._check_words(
                _split_words(branch),
                'Branch name word "{word}" must start with capital letter',
            )
        )

    def proper_capitalization(self, word: str, *, is_first: bool = False) -> str:
        """Return ``word`` rewritten to satisfy the rules."""

        if word.upper() in self._taxonomy.uppercase_abbreviations:
            return word.upper()
        if not is_first and word.lower() in self._taxonomy.lowercase_words:
            return word.lower()
        return word[:1].upper() + word[1:].lower()

    def suggest_capitalization(self, phrase: str) -> str:
        """Suggest a properly capitalized version of ``phrase``; advisory only."""

        return " ".join(
            self.proper_capitalization(word, is_first=index == 0)
            for index, word in enumerate(_split_words(phrase))
        )

    def _check_words(self, words: list[str], title_template: str) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for index, word in enumerate(words):
            issue = self._classify(word, is_first=index == 0)
            if issue is None:
                continue
            if issue is _WordIssue.ABBREVIATION:
                message = f'Abbreviation "{word}" should be in uppercase'
            elif issue is _WordIssue.LOWERCASE:
                message = f'Word "{word}" should be lowercase'
            else:
                message = title_template.format(word=word)
            errors.append(ValidationError(message))
        return errors

    def _classify(self, word: str, *, is_first: bool) -> _WordIssue | None:
        if word.upper() in self._taxonomy.uppercase_abbreviations:
            return None if word == word.upper() else _WordIssue.ABBREVIATION
        if not is_first and word.lower() in self._taxonomy.lowercase_words:
            return None if word == word.lower() else _WordIssue.LOWERCASE
        return None if _is_title_case(word) else _WordIssue.TITLE


def _split_words(phrase: str) -> list[str]:
    return [word for word in phrase.split(" ") if word]


def _is_title_case(word: str) -> bool:
    return word[0] == word[0].upper() and word[1:] == word[1:].lower()
