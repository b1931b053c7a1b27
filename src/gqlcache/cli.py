#!/usr/bin/env python3
"""
Command line entry point for reading queries out of a store dump.
"""

import json
from typing import Any

import click
from graphql import GraphQLError

from gqlcache import __version__
from gqlcache.config import settings
from gqlcache.errors import CacheError
from gqlcache.logging import configure_logging, get_logger
from gqlcache.read_from_store import (
    StoreReadOptions,
    diff_query_against_store,
    read_query_from_store,
)

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gqlcache")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: from GQLCACHE_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """gqlcache CLI - resolve GraphQL queries against a normalized store."""
    level = log_level or settings.log_level
    configure_logging(debug=settings.debug or level.lower() == "debug", log_level=level)


def _load_json_file(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _load_inputs(store_file: str, query_file: str, variables: str | None) -> tuple:
    store = _load_json_file(store_file)
    if not isinstance(store, dict):
        raise click.BadParameter("store file must hold a JSON object", param_hint="STORE_FILE")

    with open(query_file, encoding="utf-8") as f:
        query = f.read()

    parsed_variables = None
    if variables:
        try:
            parsed_variables = json.loads(variables)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--variables") from e

    return store, query, parsed_variables


@cli.command()
@click.argument("store_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("query_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--variables", default=None, help="Query variables as a JSON object")
@click.option(
    "--partial",
    is_flag=True,
    default=False,
    help="Leave missing fields out instead of failing",
)
def read(store_file: str, query_file: str, variables: str | None, partial: bool) -> None:
    """Print the result of QUERY_FILE read from STORE_FILE."""
    store, query, parsed_variables = _load_inputs(store_file, query_file, variables)

    try:
        result = read_query_from_store(
            store,
            query,
            variables=parsed_variables,
            options=StoreReadOptions(return_partial_data=partial),
        )
    except (CacheError, GraphQLError) as e:
        logger.error("Failed to read query from store", error=str(e))
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(result, indent=2))


@cli.command()
@click.argument("store_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("query_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--variables", default=None, help="Query variables as a JSON object")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on the first missing field",
)
def diff(store_file: str, query_file: str, variables: str | None, strict: bool) -> None:
    """Print what the store holds for QUERY_FILE and whether anything is missing."""
    store, query, parsed_variables = _load_inputs(store_file, query_file, variables)

    try:
        diff_result = diff_query_against_store(
            store,
            query,
            variables=parsed_variables,
            options=StoreReadOptions(return_partial_data=not strict),
        )
    except (CacheError, GraphQLError) as e:
        logger.error("Failed to diff query against store", error=str(e))
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(diff_result.model_dump(), indent=2))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
