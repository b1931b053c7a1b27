"""
gqlcache
Read GraphQL query results out of a normalized client-side cache
"""

__version__ = "0.1.0"

from .config import settings
from .errors import CacheError, InvalidDocumentError, MissingFieldError
from .read_from_store import (
    DiffResult,
    StoreReadOptions,
    diff_query_against_store,
    handle_fragment_errors,
    read_query_from_store,
)
from .store import IdValue, JsonValue, store_key_name

__all__ = [
    "CacheError",
    "DiffResult",
    "IdValue",
    "InvalidDocumentError",
    "JsonValue",
    "MissingFieldError",
    "StoreReadOptions",
    "__version__",
    "diff_query_against_store",
    "handle_fragment_errors",
    "read_query_from_store",
    "settings",
    "store_key_name",
]
