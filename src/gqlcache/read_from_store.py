"""
Resolve query results solely from the normalized store (never hits the server).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from graphql import DocumentNode
from pydantic import BaseModel, ConfigDict, Field

from .config import settings
from .errors import MissingFieldError
from .graphql.document import get_main_definition, get_operation_name, parse_document
from .graphql.executor import MISSING, execute, identity_mapper
from .logging import get_logger, operation_context
from .store.keys import store_key_name
from .store.values import (
    NormalizedCache,
    StoredValueKind,
    classify_stored_value,
    id_of,
    json_of,
)

logger = get_logger(__name__)


class StoreReadOptions(BaseModel):
    """Options for reading from the store.

    return_partial_data: If True, the query is resolved even when some of the
        data it needs is not in the store; the keys that are not found are left
        out of the result. If False, a MissingFieldError is raised for the first
        field that cannot be resolved. Also accepted as returnPartialData;
        unknown option names are rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    return_partial_data: bool = Field(False, alias="returnPartialData")


class DiffResult(BaseModel):
    """As much of the result as the store holds, and whether anything was missing."""

    result: Any = None
    is_missing: bool = False


@dataclass
class ReadStoreContext:
    store: NormalizedCache
    throw_on_missing_field: bool

    # Filled in during execution
    has_missing_field: bool = False


def read_query_from_store(
    store: NormalizedCache,
    query: DocumentNode | str,
    variables: Mapping[str, Any] | None = None,
    options: StoreReadOptions | Mapping[str, Any] | None = None,
) -> Any:
    """Resolve the result of a query solely from the store.

    Strict unless told otherwise: with no options a missing field raises.

    Args:
        store: The normalized cache holding the query data
        query: The query document to resolve
        variables: Values for the variables the query references
        options: See StoreReadOptions

    Raises:
        MissingFieldError: If a field is absent and partial data was not requested
    """
    if options is None:
        options = StoreReadOptions(return_partial_data=False)

    diff = diff_query_against_store(store, query, variables=variables, options=options)
    return diff.result


def handle_fragment_errors(fragment_errors: Mapping[str, BaseException | None]) -> None:
    """Raise if every type's fragment failed.

    Takes a map of errors for fragments of each type. If all of the types have
    raised an error, the error associated with the first of them is raised
    again. A type that resolved is recorded as None.
    """
    typenames = list(fragment_errors)

    # This is a no-op.
    if not typenames:
        return

    error_types = [typename for typename in typenames if fragment_errors[typename] is not None]

    if len(error_types) == len(typenames):
        logger.debug("No fragment type could be resolved", typenames=error_types)
        raise fragment_errors[error_types[0]]


def read_store_resolver(
    field_name: str,
    object_id: str,
    args: dict[str, Any] | None,
    context: ReadStoreContext,
) -> Any:
    """Produce the stored value of one field of one record."""
    # Only string ids name records; an unwrapped JSON blob has none
    record = context.store.get(object_id) if isinstance(object_id, str) else None
    key = store_key_name(field_name, args)
    field_value = (record or {}).get(key, MISSING)

    if field_value is MISSING:
        if context.throw_on_missing_field:
            raise MissingFieldError(key, object_id, record)

        logger.debug("Field missing from store", store_key=key, object_id=object_id)
        context.has_missing_field = True
        return field_value

    return _unwrap_stored_value(field_value)


def _unwrap_stored_value(value: Any) -> Any:
    kind = classify_stored_value(value)

    if kind is StoredValueKind.JSON:
        # Opaque JSON blob, handed back as is
        return json_of(value)
    if kind is StoredValueKind.ID:
        return id_of(value)
    if kind is StoredValueKind.LIST:
        return [_unwrap_stored_value(item) for item in value]
    return value


def diff_query_against_store(
    store: NormalizedCache,
    query: DocumentNode | str,
    variables: Mapping[str, Any] | None = None,
    options: StoreReadOptions | Mapping[str, Any] | None = None,
) -> DiffResult:
    """Return as much of the result as possible and flag missing data.

    Tolerant unless told otherwise: with no options missing fields are left
    out of the result and reported through ``is_missing``.

    Args:
        store: The normalized cache holding the query data
        query: The query document to resolve
        variables: Values for the variables the query references
        options: See StoreReadOptions

    Returns:
        DiffResult with the (possibly partial) result tree
    """
    if options is None:
        options = StoreReadOptions(return_partial_data=True)
    elif not isinstance(options, StoreReadOptions):
        options = StoreReadOptions.model_validate(options)

    document = parse_document(query)
    context = ReadStoreContext(
        store=store,
        throw_on_missing_field=not options.return_partial_data,
    )

    with operation_context(get_operation_name(get_main_definition(document))):
        result = execute(
            read_store_resolver,
            document,
            settings.root_query_id,
            context,
            variables,
            identity_mapper,
            fragment_error_handler=handle_fragment_errors,
        )

        logger.debug(
            "Diffed query against store",
            is_missing=context.has_missing_field,
            return_partial_data=options.return_partial_data,
        )

    return DiffResult(result=result, is_missing=context.has_missing_field)
