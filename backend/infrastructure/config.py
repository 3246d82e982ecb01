"""Configuration utilities for infrastructure layer."""

import os

_TRUTHY = {"1", "true", "yes", "on"}


def get_log_level() -> str:
    """
    Get logging level name.

    Returns:
        Upper-cased level from LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """
    Get application version.

    Set by the Docker build (ARG -> ENV APP_VERSION).

    Returns:
        Version string, defaults to "0.0.0-dev"
    """
    return os.getenv("APP_VERSION", "0.0.0-dev")


def is_graphiql_enabled() -> bool:
    """
    Whether the GraphiQL IDE is served at /graphql.

    Returns:
        True unless GRAPHIQL_ENABLED is set to a false-like value
    """
    return os.getenv("GRAPHIQL_ENABLED", "true").strip().lower() in _TRUTHY
