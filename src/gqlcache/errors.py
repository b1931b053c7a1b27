"""Exceptions raised while reading query results from the store."""

import json
from typing import Any


class CacheError(Exception):
    """Base exception for store read operations.

    ``extra_info`` carries structured markers so callers can tell error kinds
    apart without matching on messages.
    """

    def __init__(self, message: str, extra_info: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.extra_info = extra_info or {}


class MissingFieldError(CacheError):
    """A field required by the query has never been written to the store."""

    def __init__(self, store_key: str, object_id: Any, record: Any):
        self.store_key = store_key
        self.object_id = object_id
        self.record = record
        super().__init__(
            f"Can't find field {store_key} on object ({object_id}) {_dump_record(record)}.\n"
            "Perhaps you want to use the `return_partial_data` option?",
            extra_info={"is_field_error": True},
        )


class InvalidDocumentError(CacheError):
    """The query document cannot be walked."""

    pass


def is_field_error(error: BaseException) -> bool:
    """Return True if the error is marked as a field-level error."""
    extra_info = getattr(error, "extra_info", None) or {}
    return bool(extra_info.get("is_field_error"))


def _dump_record(record: Any) -> str:
    return json.dumps(record, indent=2, default=repr)
