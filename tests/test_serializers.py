from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from restaurant.serializers import (
    PayloadError,
    decode_restaurant_fields,
    format_timestamp,
    serialize_restaurant,
)


def test_serialize_uses_camel_case_keys():
    restaurant = SimpleNamespace(
        id=3,
        name="A",
        description="B",
        created_at=datetime(2024, 5, 1, 12, 0, 0),
        updated_at=None,
    )

    assert serialize_restaurant(restaurant) == {
        "id": 3,
        "name": "A",
        "description": "B",
        "createdAt": "2024-05-01T12:00:00+00:00",
        "updatedAt": None,
    }


def test_format_timestamp_keeps_existing_offset():
    value = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(value) == "2024-05-01T14:00:00+02:00"


def test_decode_keeps_only_writable_fields():
    payload = {"id": 9, "name": "A", "description": "B", "createdAt": "x", "extra": 1}

    assert decode_restaurant_fields(payload) == {"name": "A", "description": "B"}


def test_decode_partial_body():
    assert decode_restaurant_fields({"name": "C"}) == {"name": "C"}
    assert decode_restaurant_fields({}) == {}


@pytest.mark.parametrize("payload", [None, [1, 2], "name", 3])
def test_decode_rejects_non_object_bodies(payload):
    with pytest.raises(PayloadError):
        decode_restaurant_fields(payload)


@pytest.mark.parametrize("value", [12, None, ["A"], {"x": 1}])
def test_decode_rejects_non_string_values(value):
    with pytest.raises(PayloadError, match="name"):
        decode_restaurant_fields({"name": value})
