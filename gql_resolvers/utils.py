"""Utility functions for loading GraphQL schemas.

This module builds graphql-core schemas from SDL files, introspection
results saved as JSON, or a live GraphQL endpoint.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    get_introspection_query,
)

from .logging_config import get_logger

logger = get_logger(__name__)

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def build_schema_from_sdl(sdl: str) -> GraphQLSchema:
    """Build a schema from SDL text.

    Raises:
        SchemaLoaderError: If the SDL cannot be parsed or built.
    """
    try:
        return build_schema(sdl)
    except GraphQLError as e:
        raise SchemaLoaderError(f"Invalid GraphQL schema: {e}") from e


def build_schema_from_introspection(result: Any) -> GraphQLSchema:
    """Build a schema from an introspection result.

    Accepts the bare ``{"__schema": ...}`` object or a full response with
    a ``data`` envelope.

    Raises:
        SchemaLoaderError: If the result is not a usable introspection result.
    """
    if isinstance(result, dict) and "data" in result:
        result = result["data"]

    if not isinstance(result, dict) or "__schema" not in result:
        raise SchemaLoaderError("Introspection result has no __schema entry")

    try:
        return build_client_schema(result)
    except (GraphQLError, TypeError) as e:
        raise SchemaLoaderError(f"Invalid introspection result: {e}") from e


def load_schema_from_file(file_path: str | Path) -> tuple[str, GraphQLSchema]:
    """Load a schema from a local SDL or introspection JSON file.

    Args:
        file_path: Path to a .graphql/.graphqls/.gql or .json file.

    Returns:
        Tuple of (source description, built schema).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or holds no valid schema.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schema from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    suffix = file_path.suffix.lower()
    if suffix == ".json":
        try:
            schema = build_schema_from_introspection(json.loads(content))
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in file {file_path}: {e}")
            raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    else:
        if suffix not in SDL_SUFFIXES:
            logger.warning(f"Unexpected schema file extension, parsing as SDL: {file_path}")
        schema = build_schema_from_sdl(content)

    logger.info(f"Successfully loaded schema from {file_path}")
    return str(file_path), schema


def load_schema_from_url(url: str, timeout: int = 30) -> tuple[str, GraphQLSchema]:
    """Load a schema by running the introspection query against an endpoint.

    Args:
        url: GraphQL endpoint URL.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, built schema).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or the response
            is not an introspection result.
    """
    logger.debug(f"Attempting to introspect schema from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.post(
            url, json={"query": get_introspection_query()}, timeout=timeout
        )
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}")
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    if isinstance(payload, dict) and payload.get("errors"):
        messages = "; ".join(str(err.get("message", err)) for err in payload["errors"])
        raise SchemaLoaderError(f"Introspection failed for {url}: {messages}")

    schema = build_schema_from_introspection(payload)
    logger.info(f"Successfully introspected schema from {url}")
    return url, schema


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, GraphQLSchema]:
    """Load a schema from either a file or an endpoint URL.

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    else:
        return load_schema_from_url(url, timeout)
