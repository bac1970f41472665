"""Sample introductions used by the CLI and the test suite."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleIntroduction:
    title: str
    text: str
    # time of day at which the sample passes; None if it never does
    expected_valid_at: str | None


SAMPLE_INTRODUCTIONS: tuple[SampleIntroduction, ...] = (
    SampleIntroduction(
        title="Valid morning introduction",
        text=(
            "Good Morning Respected Seniors. My name is John Doe. I am from Mumbai, Maharashtra. "
            "I am pursuing Bachelor of Technology in Computer Science Engineering. My hobby is painting."
        ),
        expected_valid_at="morning",
    ),
    SampleIntroduction(
        title="Valid evening introduction",
        text=(
            "Good Evening Respected Seniors. My name is Jane Smith. I am from Delhi, Delhi. "
            "I am pursuing Integrated Master of Technology in Electronics and Communication Engineering. "
            "My hobby is photography."
        ),
        expected_valid_at="evening",
    ),
    SampleIntroduction(
        title="Invalid - wrong capitalization",
        text=(
            "Good Morning Respected Seniors. My name is john doe. I am from mumbai, maharashtra. "
            "I am pursuing Bachelor of Technology in computer science engineering. My hobby is painting."
        ),
        expected_valid_at=None,
    ),
    SampleIntroduction(
        title="Invalid - forbidden hobby",
        text=(
            "Good Morning Respected Seniors. My name is John Doe. I am from Mumbai, Maharashtra. "
            "I am pursuing Bachelor of Technology in Computer Science Engineering. My hobby is coding."
        ),
        expected_valid_at=None,
    ),
    SampleIntroduction(
        title="Invalid - wrong format",
        text="Hello seniors, I am John from Mumbai studying computer science and my hobby is painting.",
        expected_valid_at=None,
    ),
)
