"""Tests for introduction validation services and stats persistence."""

from __future__ import annotations

import unittest
from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy import create_engine, delete
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from intro_validator.models.base import Base
from intro_validator.models.validation_run import ValidationRun
from intro_validator.samples import SAMPLE_INTRODUCTIONS
from intro_validator.services.introductions import (
    REPEAT_REPLY,
    THUMBS_UP,
    decide_reply,
    get_validation_stats,
    is_introduction_message,
    list_validation_runs,
    validate_and_record,
)
from intro_validator.validation import IntroductionValidator, ValidationError, ValidationResult

IST = ZoneInfo("Asia/Kolkata")
MORNING = datetime(2026, 2, 24, 9, 0, tzinfo=IST)
VALID_TEXT = SAMPLE_INTRODUCTIONS[0].text
FORBIDDEN_HOBBY_TEXT = SAMPLE_INTRODUCTIONS[3].text


class IntroductionHeuristicTests(unittest.TestCase):
    def test_template_heavy_text_is_an_introduction(self) -> None:
        self.assertTrue(is_introduction_message(VALID_TEXT))
        self.assertTrue(is_introduction_message("good evening respected seniors, my name is X, i am from Y"))

    def test_casual_chat_is_not_an_introduction(self) -> None:
        self.assertFalse(is_introduction_message("My name is Ravi, see you at lunch"))
        self.assertFalse(is_introduction_message("My name is Ravi. I am from Pune.", threshold=3))
        self.assertTrue(is_introduction_message("My name is Ravi. I am from Pune.", threshold=2))


class ReplyDecisionTests(unittest.TestCase):
    def test_valid_direct_message_gets_a_reaction_only(self) -> None:
        action = decide_reply(ValidationResult())

        self.assertEqual(action.reaction, THUMBS_UP)
        self.assertIsNone(action.reply_text)
        self.assertIsNone(action.welcome_text)

    def test_valid_group_message_also_gets_a_welcome(self) -> None:
        action = decide_reply(ValidationResult(), is_group=True, sender_name="Asha")

        self.assertEqual(action.reaction, THUMBS_UP)
        self.assertIn("Asha", action.welcome_text or "")

        quiet = decide_reply(ValidationResult(), is_group=True, sender_name="Asha", send_group_welcome=False)
        self.assertIsNone(quiet.welcome_text)

    def test_invalid_message_gets_repeat(self) -> None:
        action = decide_reply(ValidationResult(errors=(ValidationError("bad"),)), is_group=True)

        self.assertIsNone(action.reaction)
        self.assertEqual(action.reply_text, REPEAT_REPLY)
        self.assertIsNone(action.welcome_text)


class ValidationRecordingTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)
        Base.metadata.create_all(cls.engine)
        cls.validator = IntroductionValidator()

    @classmethod
    def tearDownClass(cls) -> None:
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        self.db: Session = self.SessionLocal()
        self.db.execute(delete(ValidationRun))
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()

    def test_verdicts_are_recorded_and_counted(self) -> None:
        verdict, run = validate_and_record(
            self.db,
            VALID_TEXT,
            source="api",
            evaluated_at=MORNING,
            sender_name="John Doe",
            validator=self.validator,
        )
        self.assertTrue(verdict.is_valid)
        self.assertIsNotNone(run)
        self.assertTrue(run.is_valid)
        self.assertEqual(run.errors_json, [])

        verdict, run = validate_and_record(
            self.db,
            FORBIDDEN_HOBBY_TEXT,
            source="webhook",
            evaluated_at=MORNING,
            sender_id="919999999999",
            validator=self.validator,
        )
        self.assertFalse(verdict.is_valid)
        self.assertEqual(run.error_count, len(verdict.errors))
        self.assertEqual(run.errors_json, verdict.messages)

        stats = get_validation_stats(self.db)
        self.assertEqual((stats.total, stats.valid, stats.invalid), (2, 1, 1))

        runs = list_validation_runs(self.db, limit=10)
        self.assertEqual([r.source for r in runs], ["webhook", "api"])
        self.assertEqual(len(list_validation_runs(self.db, limit=1)), 1)

    def test_validation_without_session_is_not_recorded(self) -> None:
        verdict, run = validate_and_record(
            None, VALID_TEXT, source="cli", evaluated_at=MORNING, validator=self.validator
        )

        self.assertTrue(verdict.is_valid)
        self.assertIsNone(run)
        self.assertEqual(get_validation_stats(self.db).total, 0)


if __name__ == "__main__":
    unittest.main()
