"""Conversion between the restaurant JSON shape and the ``Restaurant`` model.

The wire format uses camelCase keys::

    {"id": 1, "name": "...", "description": "...",
     "createdAt": "2024-05-01T12:00:00+00:00", "updatedAt": null}

Only ``name`` and ``description`` are accepted from clients. Server managed
keys (``id``, ``createdAt``, ``updatedAt``) and unknown keys are ignored.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

WRITABLE_FIELDS = ("name", "description")

# Swagger definitions for the shapes above, published through flasgger.
RESTAURANT_DEFINITIONS = {
    "RestaurantInput": {
        "type": "object",
        "properties": {
            "name": {"type": "string", "example": "Restaurant name"},
            "description": {"type": "string", "example": "Restaurant description"},
        },
    },
    "Restaurant": {
        "type": "object",
        "properties": {
            "id": {"type": "integer", "example": 1},
            "name": {"type": "string", "example": "Restaurant name"},
            "description": {"type": "string", "example": "Restaurant description"},
            "createdAt": {"type": "string", "format": "date-time"},
            "updatedAt": {"type": "string", "format": "date-time", "x-nullable": True},
        },
    },
}


class PayloadError(ValueError):
    """Raised when a request body cannot be decoded into restaurant fields."""


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def serialize_restaurant(restaurant) -> Dict[str, Any]:
    return {
        "id": restaurant.id,
        "name": restaurant.name,
        "description": restaurant.description,
        "createdAt": format_timestamp(restaurant.created_at),
        "updatedAt": format_timestamp(restaurant.updated_at),
    }


def decode_restaurant_fields(payload: Any) -> Dict[str, str]:
    """Pick the writable fields out of a decoded JSON body.

    ``payload`` is what ``request.get_json(silent=True)`` returned, so
    ``None`` means the body was missing or not JSON. Fields missing from the
    body are missing from the result, so the same function serves full
    creates and partial updates.
    """
    if not isinstance(payload, dict):
        raise PayloadError("Request body must be a JSON object")

    fields: Dict[str, str] = {}
    for key in WRITABLE_FIELDS:
        if key not in payload:
            continue
        value = payload[key]
        if not isinstance(value, str):
            raise PayloadError(f"Field '{key}' must be a string")
        fields[key] = value
    return fields
