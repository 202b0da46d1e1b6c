"""Exceptions raised by the query helpers."""


class SQLAssistError(Exception):
    """Base class for every error raised by sqlassist."""


class MissingQueryError(SQLAssistError):
    def __init__(self, message="no query present"):
        super().__init__(message)


class MissingArgsError(SQLAssistError):
    def __init__(self, message="no args present"):
        super().__init__(message)


class MissingQueryAndArgsError(MissingQueryError, MissingArgsError):
    def __init__(self, message="both query & args are not present"):
        SQLAssistError.__init__(self, message)


class RowsAffectedMismatchError(SQLAssistError):
    """The statement changed a different number of rows than expected."""

    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(
            "number of rows affected does not match the expected number "
            f"of rows affected: {actual} / {expected}"
        )


class RowsAffectedUnavailableError(SQLAssistError):
    def __init__(self, message="driver did not report a row count"):
        super().__init__(message)


class NoRowsError(SQLAssistError):
    def __init__(self, message="no rows in result set"):
        super().__init__(message)


class StructScanError(SQLAssistError):
    pass
