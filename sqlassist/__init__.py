"""Query helpers over a psycopg2 connection with argument checks and query logging."""

from .assister import Assister
from .connection import ephemeral_connection, get_connection
from .errors import (
    MissingArgsError,
    MissingQueryAndArgsError,
    MissingQueryError,
    NoRowsError,
    RowsAffectedMismatchError,
    RowsAffectedUnavailableError,
    SQLAssistError,
    StructScanError,
)
from .log_config import setup_logging
from .row import Row

__all__ = [
    "Assister",
    "Row",
    "ephemeral_connection",
    "get_connection",
    "setup_logging",
    "SQLAssistError",
    "MissingQueryError",
    "MissingArgsError",
    "MissingQueryAndArgsError",
    "RowsAffectedMismatchError",
    "RowsAffectedUnavailableError",
    "NoRowsError",
    "StructScanError",
]
