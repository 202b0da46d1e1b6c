"""Map result rows onto dataclasses.

Rows may be mappings (as produced by RealDictCursor) or plain tuples, in
which case the cursor description supplies the column names.
"""

from collections.abc import Mapping
from dataclasses import MISSING, fields, is_dataclass
from typing import Optional, Sequence

from .errors import StructScanError


def _column_name(column) -> str:
    # psycopg2 Column objects and plain 7-tuples both index name at 0
    return getattr(column, "name", None) or column[0]


def row_to_mapping(row, description: Optional[Sequence] = None) -> dict:
    if isinstance(row, Mapping):
        return dict(row)
    if description is None:
        raise StructScanError("tuple rows need a cursor description to scan by name")

    names = [_column_name(col) for col in description]
    if len(names) != len(row):
        raise StructScanError(
            f"row has {len(row)} values but description names {len(names)} columns"
        )
    return dict(zip(names, row))


def scan_struct(cls, row, description: Optional[Sequence] = None):
    """Build an instance of dataclass `cls` from a single row.

    Columns without a matching field are ignored. A field that has no
    column and no default raises StructScanError.
    """
    if not (isinstance(cls, type) and is_dataclass(cls)):
        raise StructScanError(f"{cls!r} is not a dataclass type")
    if row is None:
        raise StructScanError(f"cannot scan an empty row into {cls.__name__}")

    values = row_to_mapping(row, description)
    kwargs = {}
    for f in fields(cls):
        if not f.init:
            continue
        if f.name in values:
            kwargs[f.name] = values[f.name]
        elif f.default is MISSING and f.default_factory is MISSING:
            raise StructScanError(f"no column for field {cls.__name__}.{f.name}")
    return cls(**kwargs)


def scan_structs(cls, rows, description: Optional[Sequence] = None) -> list:
    return [scan_struct(cls, row, description) for row in rows]
