"""Query helpers bound to one long-lived connection.

Example:

    conn = get_connection()
    assist = Assister(conn)

    assist.update_single_row(
        "UPDATE books SET name = %s WHERE id = %s", "Dune", book_id
    )
    book = assist.scan_single_row_with_args(
        "SELECT id, name FROM books WHERE id = %s", book_id
    ).scan()
"""

import logging

from psycopg2.extras import RealDictCursor

from .checks import check_query, check_query_with_args, check_rows_affected
from .errors import SQLAssistError
from .row import Row
from .struct_scanner import scan_structs

logger = logging.getLogger(__name__)


class Assister:
    """Runs statements on a connection it does not own.

    With `manage_transactions` on, a successful update commits and a
    failed statement rolls back. Single-row and dataclass reads end their
    transaction once the rows are fetched. `scan_multiple_rows` hands back
    an open cursor, so its transaction is left to the caller.
    """

    def __init__(self, conn, cursor_factory=RealDictCursor, manage_transactions: bool = True):
        self.conn = conn
        self.cursor_factory = cursor_factory
        self.manage_transactions = manage_transactions

    def _new_cursor(self):
        if self.cursor_factory is None:
            return self.conn.cursor()
        return self.conn.cursor(cursor_factory=self.cursor_factory)

    def _rollback(self):
        if self.manage_transactions:
            self.conn.rollback()

    def _end_read(self, ok: bool = True):
        if not self.manage_transactions:
            return
        if ok:
            self.conn.commit()
        else:
            self.conn.rollback()

    def _execute(self, query, args: tuple):
        logger.info("Query: %s", query)
        cur = self._new_cursor()
        try:
            cur.execute(query, args or None)
        except Exception as e:
            logger.error("ERROR: %s", e)
            cur.close()
            self._rollback()
            raise
        return cur

    # --- Writes ---

    def update_rows(self, expected: int, query, *args) -> int:
        """Execute a mutating statement that must affect `expected` rows."""
        check_query(query)
        cur = self._execute(query, args)
        try:
            actual = check_rows_affected(cur, expected)
            if self.manage_transactions:
                self.conn.commit()
        except SQLAssistError:
            self._rollback()
            raise
        except Exception as e:
            logger.error("ERROR: %s", e)
            self._rollback()
            raise
        finally:
            cur.close()
        return actual

    def update_single_row(self, query, *args) -> None:
        """Execute any statement except a read against exactly one record."""
        self.update_rows(1, query, *args)

    # --- Reads ---

    def scan_single_row(self, query, *args) -> Row:
        """Execute a read expected to return exactly one record."""
        check_query(query)
        return Row(self._execute(query, args), on_done=self._end_read)

    def scan_single_row_with_args(self, query, *args) -> Row:
        check_query_with_args(query, args)
        return Row(self._execute(query, args), on_done=self._end_read)

    def scan_multiple_rows(self, query, *args):
        """Execute a read returning zero or more records.

        Returns the open cursor. The caller iterates it, closes it and
        ends the transaction. Prefer scan_single_row when only one record
        is expected, or scan_structs to have the transaction ended here.
        """
        check_query(query)
        return self._execute(query, args)

    def scan_multiple_rows_with_args(self, query, *args):
        check_query_with_args(query, args)
        return self._execute(query, args)

    # --- Dataclass scanning ---

    def scan_struct(self, cls, query, *args):
        """Read one record straight into dataclass `cls`."""
        return self.scan_single_row(query, *args).scan_into(cls)

    def scan_structs(self, cls, query, *args) -> list:
        cur = self.scan_multiple_rows(query, *args)
        ok = False
        try:
            rows = cur.fetchall()
            description = cur.description
            ok = True
        finally:
            cur.close()
            self._end_read(ok)
        return scan_structs(cls, rows, description)
