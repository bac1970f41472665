"""HTTP-level tests for the introduction and webhook routes."""

from __future__ import annotations

import asyncio
import json
import unittest
from typing import Any
from unittest import mock

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from intro_validator.config import Settings, get_settings
from intro_validator.db.dependencies import get_db
from intro_validator.main import app
from intro_validator.models.base import Base
from intro_validator.models.validation_run import ValidationRun
from intro_validator.routers.webhook import get_messaging_client
from intro_validator.samples import SAMPLE_INTRODUCTIONS
from intro_validator.schemas.webhook import WebhookProcessingSummary
from intro_validator.services.webhook import compute_signature

VALID_TEXT = SAMPLE_INTRODUCTIONS[0].text
INVALID_TEXT = SAMPLE_INTRODUCTIONS[3].text
MORNING = "2026-02-24T09:00:00+05:30"


class _RecordingClient:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def send_message(self, to: str, text: str, reply_to_message_id: str | None = None) -> dict[str, Any]:
        self.calls.append(("send", to, text))
        return {}

    def react_to_message(self, to: str, message_id: str, emoji: str) -> dict[str, Any]:
        self.calls.append(("react", to, emoji))
        return {}


class ApiRouteTests(unittest.TestCase):
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

    @classmethod
    def tearDownClass(cls) -> None:
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        with self.SessionLocal() as db:
            db.execute(delete(ValidationRun))
            db.commit()

        def _get_test_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        self.settings = Settings(_env_file=None, webhook_secret="s3cret", webhook_verify_token="verify-me")
        self.messaging = _RecordingClient()
        app.dependency_overrides[get_db] = _get_test_db
        app.dependency_overrides[get_settings] = lambda: self.settings
        app.dependency_overrides[get_messaging_client] = lambda: self.messaging
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_health(self) -> None:
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_validate_records_and_reports_verdict(self) -> None:
        response = self.client.post("/introductions/validate", json={"text": VALID_TEXT, "evaluated_at": MORNING})

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertTrue(data["is_valid"])
        self.assertEqual(data["errors"], [])
        self.assertEqual(data["expected_greeting"], "Good Morning Respected Seniors")
        self.assertIsNotNone(data["validation_run_id"])

        response = self.client.post(
            "/introductions/validate",
            json={"text": INVALID_TEXT, "evaluated_at": MORNING, "record": True},
        )
        data = response.json()["data"]
        self.assertFalse(data["is_valid"])
        self.assertTrue(any("coding" in error for error in data["errors"]))

        stats = self.client.get("/introductions/stats").json()["data"]
        self.assertEqual(stats, {"total": 2, "valid": 1, "invalid": 1})

        runs = self.client.get("/introductions/runs", params={"limit": 5}).json()["data"]
        self.assertEqual(len(runs), 2)
        self.assertFalse(runs[0]["is_valid"])

    def test_validate_without_recording(self) -> None:
        response = self.client.post(
            "/introductions/validate",
            json={"text": VALID_TEXT, "evaluated_at": MORNING, "record": False},
        )

        self.assertIsNone(response.json()["data"]["validation_run_id"])
        self.assertEqual(self.client.get("/introductions/stats").json()["data"]["total"], 0)

    def test_naive_evaluation_time_is_rejected(self) -> None:
        response = self.client.post(
            "/introductions/validate",
            json={"text": VALID_TEXT, "evaluated_at": "2026-02-24T09:00:00"},
        )

        self.assertEqual(response.status_code, 422)

    def test_expected_greeting_endpoint(self) -> None:
        data = self.client.get("/introductions/greeting").json()["data"]

        self.assertIn(data["time_of_day"], {"morning", "afternoon", "evening"})
        self.assertEqual(data["expected_greeting"], f"Good {data['time_of_day'].capitalize()} Respected Seniors")

    def test_webhook_verification(self) -> None:
        params = {"hub.mode": "subscribe", "hub.verify_token": "verify-me", "hub.challenge": "42"}
        response = self.client.get("/webhook", params=params)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "42")

        params["hub.verify_token"] = "nope"
        self.assertEqual(self.client.get("/webhook", params=params).status_code, 403)

    def test_webhook_rejects_bad_signature(self) -> None:
        body = json.dumps({"object": "whatsapp_business_account", "entry": []}).encode("utf-8")
        response = self.client.post(
            "/webhook",
            content=body,
            headers={"Content-Type": "application/json", "X-Hub-Signature-256": "sha256=deadbeef"},
        )

        self.assertEqual(response.status_code, 401)

    def test_webhook_processes_signed_notification(self) -> None:
        body = json.dumps(
            {
                "object": "whatsapp_business_account",
                "entry": [
                    {
                        "changes": [
                            {
                                "field": "messages",
                                "value": {
                                    "messages": [
                                        {
                                            "id": "wamid.1",
                                            "from": "919000000001",
                                            "type": "text",
                                            "text": {"body": "Hello seniors. my name is X. i am from Y."},
                                        }
                                    ]
                                },
                            }
                        ]
                    }
                ],
            }
        ).encode("utf-8")
        response = self.client.post(
            "/webhook",
            content=body,
            headers={
                "Content-Type": "application/json",
                "X-Hub-Signature-256": compute_signature(body, "s3cret"),
            },
        )

        self.assertEqual(response.status_code, 200)
        summary = response.json()
        self.assertEqual(summary["messages_seen"], 1)
        self.assertEqual(summary["skipped"], 1)
        self.assertEqual(self.messaging.calls, [])

    def test_webhook_processing_runs_off_the_event_loop(self) -> None:
        observed: list[bool] = []

        def _fake_process(db, payload, client, *, settings):
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                observed.append(False)
            else:
                observed.append(True)
            return WebhookProcessingSummary()

        body = json.dumps({"object": "whatsapp_business_account", "entry": []}).encode("utf-8")
        with mock.patch("intro_validator.routers.webhook.process_webhook", _fake_process):
            response = self.client.post(
                "/webhook",
                content=body,
                headers={"X-Hub-Signature-256": compute_signature(body, "s3cret")},
            )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(observed, [False])

    def test_webhook_rejects_malformed_payload(self) -> None:
        body = b'{"entry": []}'
        response = self.client.post(
            "/webhook",
            content=body,
            headers={"X-Hub-Signature-256": compute_signature(body, "s3cret")},
        )

        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
