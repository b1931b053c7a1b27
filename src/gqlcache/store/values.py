"""
Stored value variants of the normalized cache.

A record field holds one of: a scalar, a JSON-wrapped blob, an identity
reference to another record, or a list of those. Nested entities are always
expressed through identity references.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Object identifier -> record; record store key -> stored value
NormalizedCache = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class IdValue:
    """Reference to another record in the store."""

    id: str
    generated: bool = False


@dataclass(frozen=True)
class JsonValue:
    """Opaque JSON payload that must not be read as a nested entity."""

    json: Any


class StoredValueKind(Enum):
    """Closed set of stored value variants."""

    SCALAR = "scalar"
    JSON = "json"
    ID = "id"
    LIST = "list"


def is_id_value(value: Any) -> bool:
    """Check for an identity reference, either typed or as a tagged dict."""
    if isinstance(value, IdValue):
        return True
    return isinstance(value, Mapping) and value.get("type") == "id" and "id" in value


def is_json_value(value: Any) -> bool:
    """Check for a JSON-wrapped value, either typed or as a tagged dict."""
    if isinstance(value, JsonValue):
        return True
    return isinstance(value, Mapping) and value.get("type") == "json" and "json" in value


def classify_stored_value(value: Any) -> StoredValueKind:
    if is_json_value(value):
        return StoredValueKind.JSON
    if is_id_value(value):
        return StoredValueKind.ID
    if isinstance(value, list | tuple):
        return StoredValueKind.LIST
    return StoredValueKind.SCALAR


def id_of(value: IdValue | Mapping[str, Any]) -> str:
    """Return the target identifier of an identity reference."""
    if isinstance(value, IdValue):
        return value.id
    return value["id"]


def json_of(value: JsonValue | Mapping[str, Any]) -> Any:
    """Return the raw payload of a JSON-wrapped value."""
    if isinstance(value, JsonValue):
        return value.json
    return value["json"]
