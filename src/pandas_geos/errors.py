"""
errors.py

Typed failures raised by the column operators. Every error derives from
`PandasGeosError` and from the builtin exception closest in meaning, so
callers may catch either the package family or e.g. ``ValueError``.

Row-scoped errors carry ``row`` (zero-based position in the column, or
``None`` when the failure is not tied to one row).
"""
from typing import Optional


class PandasGeosError(Exception):
    """Base class for all pandas_geos failures."""


class DecodeError(PandasGeosError, ValueError):
    """A present cell does not parse as WKB."""

    def __init__(self, row: Optional[int], message: str):
        super().__init__(f"row {row}: unable to decode geometry: {message}")
        self.row = row


class EncodeError(PandasGeosError, ValueError):
    """A computed geometry could not be serialized back to WKB."""

    def __init__(self, row: Optional[int], message: str):
        super().__init__(f"row {row}: unable to encode geometry: {message}")
        self.row = row


class GeometricOperationError(PandasGeosError, RuntimeError):
    """The geometry library rejected an operation for one row."""

    def __init__(self, operation: str, row: Optional[int], message: str):
        super().__init__(f"{operation} failed at row {row}: {message}")
        self.operation = operation
        self.row = row


class UnequalLengths(PandasGeosError, ValueError):
    """Two columns of a pairwise operation differ in row count."""

    def __init__(self, left: int, right: int):
        super().__init__(f"columns have unequal lengths ({left} != {right})")
        self.left = left
        self.right = right


class NoGeometries(PandasGeosError, ValueError):
    """A reduction found no present geometry in the column."""

    def __init__(self, message: str = "column contains no geometries"):
        super().__init__(message)


class ColumnConstructionError(PandasGeosError, RuntimeError):
    """An output buffer could not be wrapped into the result column."""


class MismatchedGeometry(PandasGeosError, TypeError):
    """An argument or cell is not of the expected kind."""

    def __init__(self, expected: str, found: str):
        super().__init__(f"Expected {expected} (found {found})")
        self.expected = expected
        self.found = found
