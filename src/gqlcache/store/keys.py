"""Store key canonicalization."""

import json
from collections.abc import Mapping
from typing import Any


def store_key_name(field_name: str, args: Mapping[str, Any] | None = None) -> str:
    """Build the record key for a field invoked with the given arguments.

    Argument keys are sorted at every level, so two argument sets that differ
    only in insertion order map to the same key:

        store_key_name("users", {"first": 10, "after": "x"})
        -> 'users({"after":"x","first":10})'
    """
    if not args:
        return field_name

    serialized = json.dumps(args, sort_keys=True, separators=(",", ":"), default=str)
    return f"{field_name}({serialized})"
