"""Process-wide defaults for new queries."""

import logging

from .dialects import Dialect, PostgresDialect, get_dialect_for_scheme

logger = logging.getLogger("sqlselect")

_settings: dict[str, Dialect] = {}


def configure(dialect: str | Dialect) -> None:
    """Set the dialect used by queries created without an explicit one.

    Args:
        dialect: A URL scheme (e.g. ``"postgresql"``, ``"sqlite"``) or a Dialect instance.

    Raises:
        ValueError: If the scheme is not supported.
    """
    if not isinstance(dialect, Dialect):
        dialect = get_dialect_for_scheme(dialect)
    logger.debug("Default dialect set to %s", type(dialect).__name__)
    _settings["dialect"] = dialect


def get_default_dialect() -> Dialect:
    """Return the configured default dialect (PostgreSQL unless configured otherwise)."""
    try:
        return _settings["dialect"]
    except KeyError:
        return PostgresDialect()


def reset() -> None:
    """Forget any configured default."""
    _settings.clear()
