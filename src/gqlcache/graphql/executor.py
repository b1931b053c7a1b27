"""
Generic GraphQL tree walker.

The walker knows nothing about where values come from. A resolver callback
produces the value of one field for one root value; when the field has a
sub-selection, the walker recurses using that value as the next root value.
Swapping the resolver swaps the data source.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionSetNode,
)

from ..errors import InvalidDocumentError, is_field_error
from .document import (
    FragmentMap,
    argument_values,
    get_default_values,
    get_fragment_map,
    get_main_definition,
    parse_document,
    result_key,
    should_include,
)


class _Missing:
    """Marker for a value that was never written."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class Resolver(Protocol):
    def __call__(
        self,
        field_name: str,
        root_value: Any,
        args: dict[str, Any] | None,
        context: Any,
    ) -> Any: ...


class ResultMapper(Protocol):
    def __call__(self, child_values: dict[str, Any], root_value: Any, context: Any) -> Any: ...


FragmentErrorHandler = Callable[[dict[str, BaseException | None]], None]


def identity_mapper(child_values: dict[str, Any], root_value: Any, context: Any) -> Any:
    """Result mapper that returns the collected child values unchanged."""
    return child_values


@dataclass
class ExecutionContext:
    """State shared by one walk over a document."""

    resolver: Resolver
    context: Any
    variables: Mapping[str, Any]
    fragment_map: FragmentMap
    result_mapper: ResultMapper
    fragment_error_handler: FragmentErrorHandler | None = None


def execute(
    resolver: Resolver,
    document: DocumentNode | str,
    root_value: Any,
    context: Any = None,
    variables: Mapping[str, Any] | None = None,
    result_mapper: ResultMapper | None = None,
    fragment_error_handler: FragmentErrorHandler | None = None,
) -> Any:
    """Walk a query document depth-first, in field declaration order.

    Args:
        resolver: Produces the value of a single field
        document: Parsed document or query source
        root_value: Value passed to the resolver for top-level fields
        context: Opaque value handed through to every resolver call
        variables: Variable values; operation defaults fill in the rest
        result_mapper: Post-processes each selection set's collected values
        fragment_error_handler: Receives, after each selection set, the field
            errors raised inside typed fragments keyed by type condition (None
            for fragments that resolved). Without a handler those errors
            propagate.

    Returns:
        The result tree built from the resolved values. Fields resolving to
        MISSING are left out.
    """
    document = parse_document(document)
    main_definition = get_main_definition(document)

    exec_context = ExecutionContext(
        resolver=resolver,
        context=context,
        variables={**get_default_values(main_definition), **(variables or {})},
        fragment_map=get_fragment_map(document),
        result_mapper=result_mapper or identity_mapper,
        fragment_error_handler=fragment_error_handler,
    )

    return execute_selection_set(main_definition.selection_set, root_value, exec_context)


def execute_selection_set(
    selection_set: SelectionSetNode, root_value: Any, exec_context: ExecutionContext
) -> Any:
    result: dict[str, Any] = {}
    fragment_errors: dict[str, BaseException | None] = {}

    for selection in selection_set.selections:
        if not should_include(selection, exec_context.variables):
            continue

        if isinstance(selection, FieldNode):
            field_result = execute_field(selection, root_value, exec_context)
            if field_result is MISSING:
                continue

            key = result_key(selection)
            if key in result:
                result[key] = merge_results(result[key], field_result)
            else:
                result[key] = field_result
            continue

        if isinstance(selection, InlineFragmentNode):
            fragment = selection
        elif isinstance(selection, FragmentSpreadNode):
            fragment = exec_context.fragment_map.get(selection.name.value)
            if fragment is None:
                raise InvalidDocumentError(f"No fragment named {selection.name.value}")
        else:
            raise InvalidDocumentError(f"Unsupported selection kind: {selection.kind}")

        typename = fragment.type_condition.name.value if fragment.type_condition else None

        if exec_context.fragment_error_handler is None or typename is None:
            fragment_result = execute_selection_set(fragment.selection_set, root_value, exec_context)
        else:
            try:
                fragment_result = execute_selection_set(
                    fragment.selection_set, root_value, exec_context
                )
            except Exception as e:
                if not is_field_error(e):
                    raise
                fragment_errors[typename] = e
                continue
            fragment_errors.setdefault(typename, None)

        result = merge_results(result, fragment_result)

    if exec_context.fragment_error_handler is not None:
        exec_context.fragment_error_handler(fragment_errors)

    return exec_context.result_mapper(result, root_value, exec_context.context)


def execute_field(field: FieldNode, root_value: Any, exec_context: ExecutionContext) -> Any:
    args = argument_values(field, exec_context.variables)
    value = exec_context.resolver(field.name.value, root_value, args, exec_context.context)

    if field.selection_set is None:
        return value

    return execute_sub_selection(field.selection_set, value, exec_context)


def execute_sub_selection(
    selection_set: SelectionSetNode, value: Any, exec_context: ExecutionContext
) -> Any:
    if value is MISSING or value is None:
        return value

    if isinstance(value, list | tuple):
        return [execute_sub_selection(selection_set, item, exec_context) for item in value]

    return execute_selection_set(selection_set, value, exec_context)


def merge_results(target: Any, source: Any) -> Any:
    """Deep-merge two results for the same position in the tree."""
    if isinstance(target, dict) and isinstance(source, dict):
        merged = dict(target)
        for key, value in source.items():
            merged[key] = merge_results(merged[key], value) if key in merged else value
        return merged

    if isinstance(target, list) and isinstance(source, list) and len(target) == len(source):
        return [merge_results(left, right) for left, right in zip(target, source, strict=True)]

    return source
