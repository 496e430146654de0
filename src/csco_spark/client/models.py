"""Request body models for Spark endpoints that the client shapes itself."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WebhookRequest(BaseModel):
    """Webhook firing on every message created in one room."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Webhook name")
    target_url: str = Field(
        ..., alias="targetUrl", description="URL the platform POSTs events to"
    )
    resource: str = Field("messages", description="Resource to watch")
    event: str = Field("created", description="Event on the resource")
    filter: str = Field(..., description="Resource filter, e.g. roomId=<room id>")

    @classmethod
    def for_room(cls, name: str, hook_url: str, room_id: str) -> "WebhookRequest":
        return cls(name=name, target_url=hook_url, filter=f"roomId={room_id}")

    def to_body(self) -> dict[str, str]:
        """Wire representation (camelCase keys)."""
        return self.model_dump(by_alias=True)
