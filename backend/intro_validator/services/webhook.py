"""WhatsApp webhook verification and message relay."""

from __future__ import annotations

import hashlib
import hmac
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from intro_validator.config import Settings, get_settings
from intro_validator.schemas.webhook import (
    WebhookPayload,
    WebhookProcessingSummary,
    WhatsAppContact,
    WhatsAppMessage,
)
from intro_validator.services.introductions import decide_reply, is_introduction_message, validate_and_record
from intro_validator.services.whatsapp import MessagingClient, WhatsAppAPIError
from intro_validator.validation import IntroductionValidator

logger = logging.getLogger(__name__)

WHATSAPP_OBJECT = "whatsapp_business_account"
SIGNATURE_PREFIX = "sha256="


def verify_subscription(mode: str | None, token: str | None, challenge: str | None, expected_token: str | None) -> str | None:
    """Return the challenge to echo when the subscription handshake is valid."""

    if mode == "subscribe" and expected_token and token == expected_token:
        return challenge or ""
    return None


def compute_signature(raw_body: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(raw_body: bytes, signature_header: str | None, secret: str | None) -> bool:
    """Check ``X-Hub-Signature-256`` against the raw request body."""

    if not signature_header or not secret:
        return False
    return hmac.compare_digest(signature_header, compute_signature(raw_body, secret))


def should_monitor_group(group_id: str, settings: Settings) -> bool:
    if not settings.target_group_id:
        return settings.monitor_group_chats
    return group_id == settings.target_group_id


def process_webhook(
    db: Session | None,
    payload: WebhookPayload,
    client: MessagingClient,
    *,
    settings: Settings | None = None,
    validator: IntroductionValidator | None = None,
    now: datetime | None = None,
) -> WebhookProcessingSummary:
    """Validate every introduction in a notification and send the replies.

    A failure on one message is logged and counted; the rest of the batch
    still runs.
    """

    active_settings = settings or get_settings()
    summary = WebhookProcessingSummary()
    if payload.object != WHATSAPP_OBJECT:
        logger.info("Ignoring webhook for object %r", payload.object)
        return summary

    for entry in payload.entry:
        for change in entry.changes:
            if change.field != "messages":
                continue
            for message in change.value.messages:
                summary.messages_seen += 1
                try:
                    outcome = _process_message(
                        db,
                        message,
                        change.value.contacts,
                        client,
                        settings=active_settings,
                        validator=validator,
                        now=now,
                    )
                except WhatsAppAPIError:
                    logger.exception("Failed to reply to WhatsApp message %s", message.id)
                    summary.failed += 1
                    continue
                except SQLAlchemyError:
                    logger.exception("Failed to record validation for WhatsApp message %s", message.id)
                    if db is not None:
                        db.rollback()
                    summary.failed += 1
                    continue
                if outcome is None:
                    summary.skipped += 1
                    continue
                summary.introductions_validated += 1
                if outcome:
                    summary.accepted += 1
                else:
                    summary.rejected += 1
    return summary


def _process_message(
    db: Session | None,
    message: WhatsAppMessage,
    contacts: list[WhatsAppContact],
    client: MessagingClient,
    *,
    settings: Settings,
    validator: IntroductionValidator | None,
    now: datetime | None,
) -> bool | None:
    """Return the verdict, or ``None`` when the message is skipped."""

    if message.type != "text" or message.text is None:
        return None

    text = message.text.body
    sender_id = message.from_
    sender = next((contact for contact in contacts if contact.wa_id == sender_id), None)
    sender_name = sender.profile.name if sender and sender.profile and sender.profile.name else "Unknown"
    is_group = message.is_group_message

    if is_group and not should_monitor_group(sender_id, settings):
        logger.info("Group %s is not monitored, skipping", sender_id)
        return None
    if not is_introduction_message(text, settings.introduction_keyword_threshold):
        logger.info("Message %s does not look like an introduction, skipping", message.id)
        return None

    verdict, _run = validate_and_record(
        db,
        text,
        source="webhook",
        evaluated_at=now,
        sender_id=sender_id,
        sender_name=sender_name,
        validator=validator,
    )
    action = decide_reply(
        verdict,
        is_group=is_group,
        sender_name=sender_name,
        send_group_welcome=settings.send_group_welcome,
    )
    if action.reaction:
        client.react_to_message(sender_id, message.id, action.reaction)
    if action.reply_text:
        client.send_message(sender_id, action.reply_text, reply_to_message_id=message.id)
    if action.welcome_text:
        try:
            client.send_message(sender_id, action.welcome_text)
        except WhatsAppAPIError:
            logger.exception("Failed to send group welcome message to %s", sender_name)
    return verdict.is_valid
