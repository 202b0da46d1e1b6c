"""Connection factory for callers that open a connection per operation."""

import os
from contextlib import contextmanager

import psycopg2


def get_connection(dsn=None):
    """Create database connection from `dsn` or DATABASE_URL."""
    database_url = dsn or os.environ.get("DATABASE_URL")
    if not database_url:
        raise ValueError("DATABASE_URL must be set")
    return psycopg2.connect(database_url)


@contextmanager
def ephemeral_connection(dsn=None):
    """Context manager yielding a fresh connection that is always closed.

    Commit and rollback stay with the helpers that run statements on it.
    """
    conn = get_connection(dsn)
    try:
        yield conn
    finally:
        conn.close()
