"""Tests for sqlassist/ephemeral.py - per-call connection helpers."""

from dataclasses import dataclass

import pytest

from sqlassist import ephemeral
from sqlassist.errors import MissingArgsError, MissingQueryError, RowsAffectedMismatchError


@dataclass
class Book:
    id: int
    name: str


class TestEphemeralUpdates:
    def test_update_single_row(self, mock_conn, mock_cursor):
        mock_cursor.rowcount = 1
        ephemeral.update_single_row(mock_conn, "UPDATE t SET x = %s WHERE id = %s", 5, 1)
        mock_cursor.execute.assert_called_once_with("UPDATE t SET x = %s WHERE id = %s", (5, 1))
        mock_conn.commit.assert_called_once()

    def test_update_single_row_no_match(self, mock_conn, mock_cursor):
        mock_cursor.rowcount = 0
        with pytest.raises(RowsAffectedMismatchError):
            ephemeral.update_single_row(mock_conn, "UPDATE t SET x = %s WHERE id = %s", 5, 1)
        mock_conn.rollback.assert_called_once()

    def test_update_rows(self, mock_conn, mock_cursor):
        mock_cursor.rowcount = 4
        assert ephemeral.update_rows(mock_conn, 4, "DELETE FROM t") == 4

    def test_empty_query(self, mock_conn, mock_cursor):
        with pytest.raises(MissingQueryError):
            ephemeral.update_single_row(mock_conn, "")

    def test_leaves_connection_open(self, mock_conn, mock_cursor):
        ephemeral.update_single_row(mock_conn, "DELETE FROM t WHERE id = %s", 1)
        mock_conn.close.assert_not_called()


class TestEphemeralReads:
    def test_scan_single_row(self, mock_conn, mock_cursor):
        mock_cursor.fetchone.return_value = {"id": 1, "name": "Dune"}
        row = ephemeral.scan_single_row(mock_conn, "SELECT * FROM books WHERE id = %s", 1)
        assert row.scan()["name"] == "Dune"

    def test_scan_single_row_with_args_requires_args(self, mock_conn, mock_cursor):
        with pytest.raises(MissingArgsError):
            ephemeral.scan_single_row_with_args(mock_conn, "SELECT * FROM books WHERE id = %s")

    def test_scan_multiple_rows(self, mock_conn, mock_cursor):
        cur = ephemeral.scan_multiple_rows(mock_conn, "SELECT * FROM books")
        assert cur is mock_cursor

    def test_scan_multiple_rows_with_args_requires_args(self, mock_conn, mock_cursor):
        with pytest.raises(MissingArgsError):
            ephemeral.scan_multiple_rows_with_args(mock_conn, "SELECT * FROM books")

    def test_scan_multiple_rows_with_args(self, mock_conn, mock_cursor):
        cur = ephemeral.scan_multiple_rows_with_args(mock_conn, "SELECT * FROM books WHERE id > %s", 0)
        mock_cursor.execute.assert_called_once_with("SELECT * FROM books WHERE id > %s", (0,))
        assert cur is mock_cursor

    def test_scan_struct(self, mock_conn, mock_cursor):
        mock_cursor.fetchone.return_value = {"id": 3, "name": "Emma"}
        book = ephemeral.scan_struct(mock_conn, Book, "SELECT id, name FROM books WHERE id = %s", 3)
        assert book == Book(3, "Emma")

    def test_scan_structs(self, mock_conn, mock_cursor):
        mock_cursor.fetchall.return_value = [{"id": 3, "name": "Emma"}]
        assert ephemeral.scan_structs(mock_conn, Book, "SELECT id, name FROM books") == [Book(3, "Emma")]
