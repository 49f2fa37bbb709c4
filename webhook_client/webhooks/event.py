"""Webhook event envelope and typed payload dispatch."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from webhook_client.config import get_settings
from webhook_client.models import EndpointCreatedEventData
from webhook_client.webhooks.signer import WebhookSigner

logger = logging.getLogger(__name__)

ENDPOINT_CREATED = "endpoint.created"

# Payload models registered for dispatch
EventData = EndpointCreatedEventData

# Event type -> payload model
EVENT_DATA_TYPES: dict[str, type[EventData]] = {
    ENDPOINT_CREATED: EndpointCreatedEventData,
}


class UnknownEventTypeError(ValueError):
    """Raised when no payload model is registered for an event type."""


@dataclass
class WebhookEvent:
    """Represents a received webhook event."""

    event_type: str
    data: dict[str, Any]

    def to_payload(self) -> dict[str, Any]:
        """Convert to JSON-serializable payload."""
        return {
            "type": self.event_type,
            "data": self.data,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> WebhookEvent:
        """Create WebhookEvent from JSON payload."""
        data = payload["data"]
        if not isinstance(data, dict):
            raise ValueError(f"Event data must be an object, got {type(data).__name__}")
        return cls(event_type=payload["type"], data=data)

    @classmethod
    def from_json(cls, raw: str | bytes) -> WebhookEvent:
        """Create WebhookEvent from JSON text."""
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise ValueError("Event envelope must be a JSON object")
        return cls.from_payload(payload)

    @classmethod
    def from_request(
        cls,
        payload: str | bytes,
        headers: Mapping[str, str],
        secret: str | None = None,
    ) -> WebhookEvent:
        """
        Verify a delivered payload's signature and parse it.

        Args:
            payload: The raw request body (text or UTF-8 bytes)
            headers: The request headers
            secret: The signing secret; defaults to the configured secret

        Returns:
            The parsed WebhookEvent
        """
        if secret is None:
            secret = get_settings().WEBHOOK_SECRET
        WebhookSigner.verify(payload, headers, secret)
        return cls.from_json(payload)

    def typed_data(self, strict: bool | None = None) -> EventData:
        """
        Decode ``data`` into the payload model registered for the event type.

        Args:
            strict: Reject payloads missing required fields; defaults to the
                configured STRICT_REQUIRED_FIELDS

        Raises:
            UnknownEventTypeError: If no model is registered for the event type
            pydantic.ValidationError: If ``data`` does not match the model
        """
        model = EVENT_DATA_TYPES.get(self.event_type)
        if model is None:
            raise UnknownEventTypeError(f"Unknown event type: {self.event_type}")

        if strict is None:
            strict = get_settings().STRICT_REQUIRED_FIELDS

        logger.debug("Decoding %s payload as %s", self.event_type, model.__name__)
        return model.from_dict(self.data, strict=strict)
