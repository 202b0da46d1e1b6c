"""Argument presence and affected-row validation."""

import logging

from .errors import (
    MissingArgsError,
    MissingQueryAndArgsError,
    MissingQueryError,
    RowsAffectedMismatchError,
    RowsAffectedUnavailableError,
)

logger = logging.getLogger(__name__)


def _has_query(query) -> bool:
    # psycopg2.sql Composable queries are built, never blank
    if isinstance(query, str):
        return bool(query.strip())
    return query is not None


def check_query(query) -> None:
    if not _has_query(query):
        raise MissingQueryError()


def check_query_with_args(query, args: tuple) -> None:
    has_query = _has_query(query)
    has_args = len(args or ()) > 0

    if not has_query and not has_args:
        raise MissingQueryAndArgsError()
    if not has_query:
        raise MissingQueryError()
    if not has_args:
        raise MissingArgsError()


def check_rows_affected(result, expected: int = 1) -> int:
    """Compare the affected-row count against the expected count.

    `result` is either a cursor that just ran a mutating statement or the
    integer count itself. Returns the actual count on a match.
    """
    actual = result if isinstance(result, int) else result.rowcount
    if actual is None or actual < 0:
        err = RowsAffectedUnavailableError()
        logger.error("ERROR: %s", err)
        raise err

    if actual != expected:
        err = RowsAffectedMismatchError(actual, expected)
        logger.error("ERROR: %s", err)
        raise err

    logger.info("Rows affected: %d / %d", actual, expected)
    return actual
