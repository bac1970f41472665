"""WhatsApp Business webhook routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from intro_validator.config import Settings, get_settings
from intro_validator.db.dependencies import get_db
from intro_validator.schemas.webhook import WebhookPayload, WebhookProcessingSummary
from intro_validator.services.webhook import process_webhook, verify_signature, verify_subscription
from intro_validator.services.whatsapp import MessagingClient, WhatsAppAPIError, get_default_messaging_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook")

def get_messaging_client() -> MessagingClient:
    """Resolve the outbound client, surfacing misconfiguration as 503."""

    try:
        return get_default_messaging_client()
    except WhatsAppAPIError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

@router.get("", response_class=PlainTextResponse)
def verify_webhook(
    mode: str | None = Query(None, alias="hub.mode"),
    token: str | None = Query(None, alias="hub.verify_token"),
    challenge: str | None = Query(None, alias="hub.challenge"),
    settings: Settings = Depends(get_settings),
) -> str:
    """Answer the subscription handshake."""

    echoed = verify_subscription(mode, token, challenge, settings.webhook_verify_token)
    if echoed is None:
        logger.warning("Webhook verification failed (mode=%s)", mode)
        raise HTTPException(status_code=403, detail="Forbidden")
    logger.info("Webhook verified successfully")
    return echoed

@router.post("", response_model=WebhookProcessingSummary)
async def receive_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
    client: MessagingClient = Depends(get_messaging_client),
) -> WebhookProcessingSummary:
    """Validate introductions delivered by the WhatsApp webhook."""

    raw_body = await request.body()
    if not verify_signature(raw_body, request.headers.get("x-hub-signature-256"), settings.webhook_secret):
        logger.warning("Invalid webhook signature")
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        payload = WebhookPayload.model_validate_json(raw_body)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Malformed webhook payload") from exc

    # Commits and Graph API calls block; keep them off the event loop.
    return await run_in_threadpool(process_webhook, db, payload, client, settings=settings)
