"""Shared test fixtures for the sqlassist test suite."""

from unittest.mock import MagicMock

import pytest


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_cursor():
    """Mock database cursor that tracks executed SQL."""
    cursor = MagicMock()
    cursor.fetchone.return_value = {"id": 1, "name": "Dune"}
    cursor.fetchall.return_value = []
    cursor.rowcount = 1
    return cursor


@pytest.fixture
def mock_conn(mock_cursor):
    """Mock psycopg2 connection whose cursor() returns mock_cursor."""
    conn = MagicMock()
    conn.cursor.return_value = mock_cursor
    return conn
