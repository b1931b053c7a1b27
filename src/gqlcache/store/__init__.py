"""Normalized store value types and key helpers."""

from .keys import store_key_name
from .values import (
    IdValue,
    JsonValue,
    NormalizedCache,
    StoredValueKind,
    classify_stored_value,
    id_of,
    is_id_value,
    is_json_value,
    json_of,
)

__all__ = [
    "IdValue",
    "JsonValue",
    "NormalizedCache",
    "StoredValueKind",
    "classify_stored_value",
    "id_of",
    "is_id_value",
    "is_json_value",
    "json_of",
    "store_key_name",
]
