"""Webhook payload signature verification using HMAC-SHA256."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging
import time
from collections.abc import Mapping

from webhook_client.config import get_settings

logger = logging.getLogger(__name__)


class WebhookVerificationError(Exception):
    """Raised when a webhook payload fails signature verification."""


class WebhookSigner:
    """Signs and verifies webhook payloads."""

    SECRET_PREFIX = "whsec_"
    SIGNATURE_VERSION = "v1"
    HEADER_PREFIXES = ("webhook-", "svix-")

    @staticmethod
    def _secret_key(secret: str) -> bytes:
        if secret.startswith(WebhookSigner.SECRET_PREFIX):
            secret = secret[len(WebhookSigner.SECRET_PREFIX) :]
        try:
            key = base64.b64decode(secret, validate=True)
        except binascii.Error as e:
            raise WebhookVerificationError("Signing secret is not valid base64") from e
        if not key:
            logger.warning(
                "Webhook signing secret is empty. Set WEBHOOK_SECRET to verify deliveries."
            )
            raise WebhookVerificationError("Signing secret is empty")
        return key

    @staticmethod
    def _text(payload: str | bytes) -> str:
        if isinstance(payload, bytes):
            try:
                return payload.decode("utf-8")
            except UnicodeDecodeError as e:
                raise WebhookVerificationError("Payload is not valid UTF-8") from e
        return payload

    @staticmethod
    def sign(
        msg_id: str, payload: str | bytes, secret: str, timestamp: int | None = None
    ) -> tuple[str, int]:
        """
        Generate the signature for a webhook payload.

        Args:
            msg_id: The message ID from the webhook-id header
            payload: The raw JSON payload (text or UTF-8 bytes)
            secret: The signing secret (base64, optionally ``whsec_`` prefixed)
            timestamp: Unix timestamp (defaults to current time)

        Returns:
            Tuple of (signature, timestamp)
        """
        if timestamp is None:
            timestamp = int(time.time())

        # Signature is computed over: msg_id + "." + timestamp + "." + payload
        message = f"{msg_id}.{timestamp}.{WebhookSigner._text(payload)}"
        digest = hmac.new(
            WebhookSigner._secret_key(secret),
            message.encode("utf-8"),
            hashlib.sha256,
        ).digest()

        signature = base64.b64encode(digest).decode("ascii")
        return f"{WebhookSigner.SIGNATURE_VERSION},{signature}", timestamp

    @staticmethod
    def _header(headers: Mapping[str, str], name: str) -> str:
        lowered = {key.lower(): value for key, value in headers.items()}
        for prefix in WebhookSigner.HEADER_PREFIXES:
            value = lowered.get(f"{prefix}{name}")
            if value:
                return value
        raise WebhookVerificationError(f"Missing required header: webhook-{name}")

    @staticmethod
    def verify(
        payload: str | bytes,
        headers: Mapping[str, str],
        secret: str,
        tolerance_seconds: int | None = None,
    ) -> None:
        """
        Verify a webhook signature.

        Args:
            payload: The raw request body (text or UTF-8 bytes)
            headers: The request headers (case-insensitive names)
            secret: The signing secret
            tolerance_seconds: Allowed clock skew; defaults to the configured value

        Raises:
            WebhookVerificationError: If the secret is empty or malformed, a header
                is missing, the timestamp is outside the tolerance window, or no
                signature matches
        """
        # An empty or malformed secret never verifies
        WebhookSigner._secret_key(secret)

        if tolerance_seconds is None:
            tolerance_seconds = get_settings().WEBHOOK_TOLERANCE_SECONDS

        msg_id = WebhookSigner._header(headers, "id")
        raw_timestamp = WebhookSigner._header(headers, "timestamp")
        signatures = WebhookSigner._header(headers, "signature")

        try:
            timestamp = int(raw_timestamp)
        except ValueError as e:
            raise WebhookVerificationError(f"Invalid timestamp header: {raw_timestamp}") from e

        now = int(time.time())
        if abs(now - timestamp) > tolerance_seconds:
            logger.warning(
                "Rejected webhook %s: timestamp %d outside tolerance of %ds",
                msg_id,
                timestamp,
                tolerance_seconds,
            )
            raise WebhookVerificationError("Message timestamp outside tolerance window")

        expected, _ = WebhookSigner.sign(msg_id, payload, secret, timestamp)
        _, expected_signature = expected.split(",", 1)

        # Header may carry several space-separated "version,signature" entries
        for entry in signatures.split(" "):
            version, _, signature = entry.partition(",")
            if version != WebhookSigner.SIGNATURE_VERSION:
                continue
            if hmac.compare_digest(expected_signature, signature):
                return

        logger.warning("Rejected webhook %s: no matching signature", msg_id)
        raise WebhookVerificationError("No matching signature found")

    @staticmethod
    def get_headers(msg_id: str, payload: str | bytes, secret: str) -> dict[str, str]:
        """
        Generate all webhook HTTP headers including signature.

        Args:
            msg_id: The message ID
            payload: The JSON payload (text or UTF-8 bytes)
            secret: The signing secret

        Returns:
            Dictionary of HTTP headers
        """
        signature, timestamp = WebhookSigner.sign(msg_id, payload, secret)

        return {
            "Content-Type": "application/json",
            "webhook-id": msg_id,
            "webhook-timestamp": str(timestamp),
            "webhook-signature": signature,
        }
