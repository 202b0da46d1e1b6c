"""Single-row query result."""

from .errors import NoRowsError
from .struct_scanner import scan_struct


class Row:
    """Result of a query expected to return exactly one row.

    Wraps the executed cursor. The row is fetched on the first `scan()`
    and the cursor is closed right after; later calls return the same row,
    or re-raise the error the fetch failed with.

    `on_done(ok)` runs once the cursor is closed, with `ok` false when the
    fetch failed. The executor uses it to end the read's transaction.
    """

    def __init__(self, cursor, on_done=None):
        self._cursor = cursor
        self._on_done = on_done
        self._done = False
        self._row = None
        self._error = None
        self._description = None

    def _finish(self, ok: bool):
        if self._done:
            return
        self._done = True
        try:
            self._cursor.close()
        finally:
            if self._on_done is not None:
                self._on_done(ok)

    def scan(self):
        if self._error is not None:
            raise self._error
        if not self._done:
            try:
                self._description = self._cursor.description
                self._row = self._cursor.fetchone()
            except Exception as e:
                self._error = e
                self._finish(False)
                raise
            self._finish(True)
        if self._row is None:
            raise NoRowsError()
        return self._row

    def scan_into(self, cls):
        row = self.scan()
        return scan_struct(cls, row, self._description)

    def close(self):
        self._finish(True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
