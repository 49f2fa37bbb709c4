from .event import EVENT_DATA_TYPES, UnknownEventTypeError, WebhookEvent
from .signer import WebhookSigner, WebhookVerificationError

__all__ = [
    "WebhookEvent",
    "EVENT_DATA_TYPES",
    "UnknownEventTypeError",
    "WebhookSigner",
    "WebhookVerificationError",
]
