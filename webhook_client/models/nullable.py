"""Tri-state nullable wrappers for generated models.

A field embedded in another payload can be absent from the wire data,
present as ``null``, or present with a value. Plain ``Optional`` cannot tell
the first two apart, so the slot is held as one of three tagged states.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter

from .endpoint_created_event_data import EndpointCreatedEventData

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Unset:
    """Slot was never set, or was cleared."""


@dataclass(frozen=True)
class Null:
    """Slot was explicitly set to null."""


@dataclass(frozen=True)
class Present(Generic[T]):
    """Slot holds a value."""

    value: T


Slot = Unset | Null | Present


class Nullable(Generic[T]):
    """Holds a model value in one of the states ``Unset``, ``Null`` or ``Present``.

    Subclasses bind ``value_type`` to the model they wrap.
    """

    value_type: ClassVar[type[BaseModel]]
    _adapter: ClassVar[TypeAdapter[Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "value_type" in cls.__dict__:
            cls._adapter = TypeAdapter(cls.value_type | None)

    def __init__(self) -> None:
        self._slot: Slot = Unset()

    @classmethod
    def of(cls, value: T | None) -> Nullable[T]:
        """Create a box already set to ``value`` (``None`` sets it to null)."""
        box = cls()
        box.set(value)
        return box

    @property
    def slot(self) -> Slot:
        return self._slot

    def get(self) -> T | None:
        """Return the held value, or None when unset or null."""
        if isinstance(self._slot, Present):
            return self._slot.value
        return None

    def set(self, value: T | None) -> None:
        self._slot = Null() if value is None else Present(value)

    def is_set(self) -> bool:
        return not isinstance(self._slot, Unset)

    def unset(self) -> None:
        self._slot = Unset()

    def to_json(self) -> str:
        """Serialize the held value; unset and null both serialize as ``null``."""
        value = self.get()
        if value is None:
            return "null"
        if hasattr(value, "to_json"):
            return value.to_json()
        return value.model_dump_json(by_alias=True)

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")

    def from_json(self, raw: str | bytes) -> None:
        """Parse ``raw`` into the slot and mark it set.

        Raises ``pydantic.ValidationError`` when ``raw`` is not valid JSON or
        does not match the wrapped model. The slot is unchanged on failure.
        """
        value = self._adapter.validate_json(raw)
        self.set(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        return type(self) is type(other) and self._slot == other._slot

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._slot!r})"


class NullableEndpointCreatedEventData(Nullable[EndpointCreatedEventData]):
    """Nullable slot for an embedded EndpointCreatedEventData."""

    value_type = EndpointCreatedEventData
