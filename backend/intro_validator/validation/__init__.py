"""Introduction validation engine."""

from intro_validator.validation.capitalization import CapitalizationChecker
from intro_validator.validation.greeting import DEFAULT_TIMEZONE, GreetingChecker
from intro_validator.validation.hobby import HobbyClassifier
from intro_validator.validation.structure import StructuralValidator, split_into_sentences
from intro_validator.validation.taxonomy import DEFAULT_TAXONOMY, Taxonomy, TaxonomyLoadError, load_taxonomy
from intro_validator.validation.types import (
    CheckResult,
    FormatResult,
    GreetingResult,
    HobbyDetails,
    SentenceSlot,
    SlotResult,
    TimeOfDay,
    ValidationError,
    ValidationResult,
)
from intro_validator.validation.validator import IntroductionValidator

__all__ = [
    "DEFAULT_TAXONOMY",
    "DEFAULT_TIMEZONE",
    "CapitalizationChecker",
    "CheckResult",
    "FormatResult",
    "GreetingChecker",
    "GreetingResult",
    "HobbyClassifier",
    "HobbyDetails",
    "IntroductionValidator",
    "SentenceSlot",
    "SlotResult",
    "StructuralValidator",
    "Taxonomy",
    "TaxonomyLoadError",
    "TimeOfDay",
    "ValidationError",
    "ValidationResult",
    "load_taxonomy",
    "split_into_sentences",
]
