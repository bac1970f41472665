"""Minimal WhatsApp Business (Graph API) client for replies and reactions."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol
from urllib import error as urllib_error
from urllib import request as urllib_request

from intro_validator.config import get_settings

logger = logging.getLogger(__name__)


class WhatsAppAPIError(RuntimeError):
    """Raised when the WhatsApp API is misconfigured or rejects a request."""


class MessagingClient(Protocol):
    """Protocol for outbound messaging used by the webhook relay."""

    def send_message(self, to: str, text: str, reply_to_message_id: str | None = None) -> dict[str, Any]:
        """Send a text message, optionally as a reply."""

    def react_to_message(self, to: str, message_id: str, emoji: str) -> dict[str, Any]:
        """React to an existing message."""


@dataclass(slots=True)
class WhatsAppBusinessClient:
    """WhatsApp Cloud API client using stdlib HTTP."""

    access_token: str
    phone_number_id: str
    api_version: str = "v18.0"
    base_url: str = "https://graph.facebook.com"
    timeout_seconds: int = 30

    def send_message(self, to: str, text: str, reply_to_message_id: str | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": to,
            "type": "text",
            "text": {"body": text},
        }
        if reply_to_message_id:
            payload["context"] = {"message_id": reply_to_message_id}
        response = self._post_message(payload)
        logger.info("Sent WhatsApp message to %s", to)
        return response

    def react_to_message(self, to: str, message_id: str, emoji: str) -> dict[str, Any]:
        payload = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": to,
            "type": "reaction",
            "reaction": {"message_id": message_id, "emoji": emoji},
        }
        response = self._post_message(payload)
        logger.info("Reacted to WhatsApp message %s", message_id)
        return response

    def _post_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url.rstrip('/')}/{self.api_version}/{self.phone_number_id}/messages"
        req = urllib_request.Request(
            url=url,
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={
                "Authorization": f"Bearer {self.access_token}",
                "Content-Type": "application/json",
            },
        )
        try:
            with urllib_request.urlopen(req, timeout=self.timeout_seconds) as resp:
                raw = resp.read().decode("utf-8")
        except urllib_error.HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="replace")
            raise WhatsAppAPIError(f"WhatsApp HTTP {exc.code}: {detail}") from exc
        except urllib_error.URLError as exc:
            raise WhatsAppAPIError(f"WhatsApp request failed: {exc.reason}") from exc

        try:
            decoded = json.loads(raw) if raw else {}
        except json.JSONDecodeError as exc:
            raise WhatsAppAPIError("WhatsApp returned a non-JSON response") from exc
        if not isinstance(decoded, dict):
            raise WhatsAppAPIError("WhatsApp returned an unexpected response")
        return decoded


def get_default_messaging_client() -> MessagingClient:
    """Return the configured WhatsApp client."""

    settings = get_settings()
    if not settings.whatsapp_access_token or not settings.whatsapp_phone_number_id:
        raise WhatsAppAPIError(
            "WHATSAPP_ACCESS_TOKEN and WHATSAPP_PHONE_NUMBER_ID must be configured to send replies."
        )
    return WhatsAppBusinessClient(
        access_token=settings.whatsapp_access_token,
        phone_number_id=settings.whatsapp_phone_number_id,
        api_version=settings.whatsapp_api_version,
        base_url=settings.whatsapp_base_url,
        timeout_seconds=settings.whatsapp_timeout_seconds,
    )
