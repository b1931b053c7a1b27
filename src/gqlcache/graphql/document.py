"""
Helpers for walking parsed GraphQL query documents.

Documents are graphql-core ASTs; a raw query string is parsed on the way in.
"""

from collections.abc import Mapping
from typing import Any

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    SelectionNode,
    Undefined,
    parse,
    value_from_ast_untyped,
)

from ..errors import InvalidDocumentError

FragmentMap = dict[str, FragmentDefinitionNode]


def parse_document(query: DocumentNode | str) -> DocumentNode:
    """Return a document AST, parsing the query if it is still source text.

    Raises:
        graphql.GraphQLError: If the source text is not valid GraphQL
    """
    if isinstance(query, DocumentNode):
        return query
    return parse(query)


def get_main_definition(
    document: DocumentNode,
) -> OperationDefinitionNode | FragmentDefinitionNode:
    """Return the definition execution starts from.

    The first operation wins. A document holding only fragments starts from
    its first fragment, which lets a fragment be read on its own.
    """
    fragment: FragmentDefinitionNode | None = None
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            return definition
        if fragment is None and isinstance(definition, FragmentDefinitionNode):
            fragment = definition

    if fragment is not None:
        return fragment

    raise InvalidDocumentError(
        "Expected a parsed GraphQL query with a query, mutation, subscription, or a fragment."
    )


def get_operation_name(definition: OperationDefinitionNode | FragmentDefinitionNode) -> str | None:
    if definition.name is None:
        return None
    return definition.name.value


def get_fragment_map(document: DocumentNode) -> FragmentMap:
    """Map fragment names to their definitions."""
    return {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }


def get_default_values(
    definition: OperationDefinitionNode | FragmentDefinitionNode,
) -> dict[str, Any]:
    """Collect the default values declared for the operation's variables."""
    if not isinstance(definition, OperationDefinitionNode):
        return {}

    defaults: dict[str, Any] = {}
    for variable_definition in definition.variable_definitions or ():
        if variable_definition.default_value is not None:
            defaults[variable_definition.variable.name.value] = value_from_ast_untyped(
                variable_definition.default_value
            )
    return defaults


def argument_values(
    field: FieldNode, variables: Mapping[str, Any] | None = None
) -> dict[str, Any] | None:
    """Evaluate a field's arguments against the supplied variables.

    Returns None for a field without arguments. An argument bound to a
    variable that was never supplied is left out, as GraphQL does.
    """
    if not field.arguments:
        return None

    args: dict[str, Any] = {}
    for argument in field.arguments:
        value = value_from_ast_untyped(argument.value, variables)
        if value is Undefined:
            continue
        args[argument.name.value] = value
    return args


def should_include(selection: SelectionNode, variables: Mapping[str, Any] | None = None) -> bool:
    """Apply @skip and @include directives to a selection."""
    for directive in selection.directives or ():
        directive_name = directive.name.value
        if directive_name not in ("skip", "include"):
            continue

        condition = Undefined
        for argument in directive.arguments or ():
            if argument.name.value == "if":
                condition = value_from_ast_untyped(argument.value, variables)

        if not isinstance(condition, bool):
            raise InvalidDocumentError(
                f"Invalid 'if' argument for @{directive_name} directive: {condition!r}"
            )

        if directive_name == "skip" and condition:
            return False
        if directive_name == "include" and not condition:
            return False

    return True


def result_key(field: FieldNode) -> str:
    """Key a field's value is stored under in the result object."""
    if field.alias is not None:
        return field.alias.value
    return field.name.value
