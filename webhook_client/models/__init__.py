from .endpoint_created_event_data import EndpointCreatedEventData
from .nullable import Null, Nullable, NullableEndpointCreatedEventData, Present, Unset

__all__ = [
    "EndpointCreatedEventData",
    "Nullable",
    "NullableEndpointCreatedEventData",
    "Unset",
    "Null",
    "Present",
]
