"""WhatsApp Business webhook payload schemas."""

from pydantic import BaseModel, ConfigDict, Field


class WhatsAppText(BaseModel):
    model_config = ConfigDict(extra="ignore")

    body: str = ""


class WhatsAppMessage(BaseModel):
    """Inbound message as delivered in ``changes[].value.messages``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    from_: str = Field(alias="from")
    type: str
    text: WhatsAppText | None = None

    @property
    def is_group_message(self) -> bool:
        return "@g.us" in self.from_


class WhatsAppProfile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class WhatsAppContact(BaseModel):
    model_config = ConfigDict(extra="ignore")

    wa_id: str
    profile: WhatsAppProfile | None = None


class WebhookValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: list[WhatsAppMessage] = Field(default_factory=list)
    contacts: list[WhatsAppContact] = Field(default_factory=list)


class WebhookChange(BaseModel):
    model_config = ConfigDict(extra="ignore")

    field: str
    value: WebhookValue = Field(default_factory=WebhookValue)


class WebhookEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    changes: list[WebhookChange] = Field(default_factory=list)


class WebhookPayload(BaseModel):
    """Top-level webhook notification body."""

    model_config = ConfigDict(extra="ignore")

    object: str
    entry: list[WebhookEntry] = Field(default_factory=list)


class WebhookProcessingSummary(BaseModel):
    """What the relay did with one notification."""

    messages_seen: int = 0
    introductions_validated: int = 0
    accepted: int = 0
    rejected: int = 0
    skipped: int = 0
    failed: int = 0
