"""Endpoint created event data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, model_validator

# Wire keys the API schema marks as required
REQUIRED_KEYS = ("appId", "endpointId")


class EndpointCreatedEventData(BaseModel):
    """Payload of the ``endpoint.created`` event.

    ``app_id`` and ``endpoint_id`` are required by the API schema, but only
    :meth:`new` enforces that. ``app_uid`` is optional: ``None`` means the
    field is absent, which is not the same as an empty string.
    """

    app_id: str = Field("", alias="appId", description="Application ID")
    app_uid: str | None = Field(
        None, alias="appUid", description="Optional unique identifier for the application"
    )
    endpoint_id: str = Field("", alias="endpointId", description="Endpoint ID")

    model_config = {"populate_by_name": True}

    @classmethod
    def new(cls, app_id: str, endpoint_id: str, **data: Any) -> EndpointCreatedEventData:
        """Create an instance with the required fields set."""
        return cls(app_id=app_id, endpoint_id=endpoint_id, **data)

    @classmethod
    def with_defaults(cls) -> EndpointCreatedEventData:
        """Create a zero-valued instance, for field-by-field population.

        Required fields are left empty.
        """
        return cls.model_construct()

    @model_validator(mode="before")
    @classmethod
    def _check_required_keys(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context and info.context.get("strict_required")):
            return data
        if isinstance(data, dict):
            missing = [
                key
                for key in REQUIRED_KEYS
                if key not in data and cls._field_name(key) not in data
            ]
            if missing:
                raise ValueError(f"missing required field(s): {', '.join(missing)}")
        return data

    @classmethod
    def _field_name(cls, alias: str) -> str:
        for name, info in cls.model_fields.items():
            if info.alias == alias:
                return name
        return alias

    # App ID

    def get_app_id(self) -> str:
        """Return the app id, or ``""`` when called without an instance."""
        if self is None:
            return ""
        return self.app_id

    def get_app_id_ok(self) -> tuple[str | None, bool]:
        """Return ``(app_id, True)``, or ``(None, False)`` without an instance."""
        if self is None:
            return None, False
        return self.app_id, True

    def set_app_id(self, value: str) -> None:
        self.app_id = value

    # App UID

    def get_app_uid(self) -> str:
        """Return the app uid if set, ``""`` otherwise.

        Use :meth:`has_app_uid` to tell an unset field from an empty one.
        """
        if self is None or self.app_uid is None:
            return ""
        return self.app_uid

    def get_app_uid_ok(self) -> tuple[str | None, bool]:
        """Return ``(app_uid, True)`` if set, ``(None, False)`` otherwise."""
        if self is None or self.app_uid is None:
            return None, False
        return self.app_uid, True

    def has_app_uid(self) -> bool:
        return self is not None and self.app_uid is not None

    def set_app_uid(self, value: str) -> None:
        self.app_uid = value

    # Endpoint ID

    def get_endpoint_id(self) -> str:
        """Return the endpoint id, or ``""`` when called without an instance."""
        if self is None:
            return ""
        return self.endpoint_id

    def get_endpoint_id_ok(self) -> tuple[str | None, bool]:
        """Return ``(endpoint_id, True)``, or ``(None, False)`` without an instance."""
        if self is None:
            return None, False
        return self.endpoint_id, True

    def set_endpoint_id(self, value: str) -> None:
        self.endpoint_id = value

    # Serialization

    def _exclude(self) -> set[str] | None:
        # appUid is omitted when unset, never written as null
        return None if self.has_app_uid() else {"app_uid"}

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable payload."""
        return self.model_dump(by_alias=True, exclude=self._exclude())

    def to_json(self) -> str:
        """Serialize to compact JSON text."""
        return self.model_dump_json(by_alias=True, exclude=self._exclude())

    def to_bytes(self) -> bytes:
        """Serialize to UTF-8 encoded JSON, as sent on the wire."""
        return self.to_json().encode("utf-8")

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, strict: bool = False) -> EndpointCreatedEventData:
        """Create EndpointCreatedEventData from a decoded JSON payload.

        Missing required fields are zero-filled unless ``strict`` is set.
        Raises ``pydantic.ValidationError`` on a shape mismatch.
        """
        return cls.model_validate(data, context={"strict_required": strict})

    @classmethod
    def from_json(cls, raw: str | bytes, *, strict: bool = False) -> EndpointCreatedEventData:
        """Create EndpointCreatedEventData from JSON text."""
        return cls.model_validate_json(raw, context={"strict_required": strict})
