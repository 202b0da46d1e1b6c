"""Query helpers that take the connection on every call.

Use these when the caller opens a connection, runs one operation and
closes it again:

    with ephemeral_connection() as conn:
        update_single_row(conn, "DELETE FROM books WHERE id = %s", book_id)

The connection is never closed here.
"""

from .assister import Assister
from .row import Row


def update_rows(conn, expected: int, query: str, *args) -> int:
    return Assister(conn).update_rows(expected, query, *args)


def update_single_row(conn, query: str, *args) -> None:
    """Execute any statement except a read against exactly one record."""
    Assister(conn).update_single_row(query, *args)


def scan_single_row(conn, query: str, *args) -> Row:
    return Assister(conn).scan_single_row(query, *args)


def scan_single_row_with_args(conn, query: str, *args) -> Row:
    return Assister(conn).scan_single_row_with_args(query, *args)


def scan_multiple_rows(conn, query: str, *args):
    """Execute a read returning zero or more records; the caller closes the cursor."""
    return Assister(conn).scan_multiple_rows(query, *args)


def scan_multiple_rows_with_args(conn, query: str, *args):
    return Assister(conn).scan_multiple_rows_with_args(query, *args)


def scan_struct(conn, cls, query: str, *args):
    return Assister(conn).scan_struct(cls, query, *args)


def scan_structs(conn, cls, query: str, *args) -> list:
    return Assister(conn).scan_structs(cls, query, *args)
