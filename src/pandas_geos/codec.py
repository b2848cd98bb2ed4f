"""
codec.py

WKB decoding and encoding for geometry columns.

A geometry column is any sized, ordered container of WKB cells: a
`pandas.Series`, a `pyarrow.Array`, a `pyarrow.ChunkedArray`, or a plain
sequence. A cell is absent when it is ``None``, ``pandas.NA`` or a float NaN.

Public functions:
- `is_missing(cell)` -> bool
- `decode(cell, row=None)` -> shapely geometry or None
- `encode(geometry, row=None)` -> bytes
- `iter_geometries(column)` -> lazy iterator of shapely geometry or None
- `column_length(column)` -> int
- `ensure_geometry(obj, name)` -> shapely geometry
- `from_geoseries(geoseries, name=None)` / `to_geoseries(column, crs=None)`
"""
from typing import Any, Iterator, Optional
import logging

import numpy as np
import pandas as pd
import pyarrow as pa
import geopandas as gpd
from shapely import wkb
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from pandas_geos import config
from pandas_geos.errors import DecodeError, EncodeError, MismatchedGeometry
from pandas_geos.utils import log_failure

logger = logging.getLogger(__name__)

_WKB_TYPES = (bytes, bytearray, memoryview, str)


def is_missing(cell: Any) -> bool:
    """True for ``None``, ``pandas.NA`` and float NaN cells."""
    if cell is None or cell is pd.NA:
        return True
    if isinstance(cell, (float, np.floating)):
        return bool(np.isnan(cell))
    return False


def decode(cell: Any, row: Optional[int] = None) -> Optional[BaseGeometry]:
    """Decode one stored cell.

    Returns ``None`` for an absent cell. Hex-encoded strings are accepted
    alongside raw bytes. Raises `DecodeError`, carrying ``row``, when the cell
    is not WKB bytes or the bytes do not parse.
    """
    if is_missing(cell):
        return None
    if not isinstance(cell, _WKB_TYPES):
        raise DecodeError(row, f'expected WKB bytes, found {type(cell).__name__}')
    if isinstance(cell, (bytearray, memoryview)):
        cell = bytes(cell)
    try:
        return wkb.loads(cell, hex=isinstance(cell, str))
    except (ShapelyError, ValueError, TypeError) as exc:
        log_failure('WKB decode failed', exc, row=row)
        raise DecodeError(row, str(exc)) from exc


def encode(geometry: BaseGeometry, row: Optional[int] = None) -> bytes:
    """Serialize ``geometry`` to WKB using `config.WKB_OPTIONS`."""
    try:
        return wkb.dumps(geometry, **config.WKB_OPTIONS)
    except (ShapelyError, ValueError, TypeError) as exc:
        log_failure('WKB encode failed', exc, row=row, geom_type=getattr(geometry, 'geom_type', None))
        raise EncodeError(row, str(exc)) from exc


def column_length(column: Any) -> int:
    """Number of rows in ``column``, nulls included."""
    try:
        return len(column)
    except TypeError:
        raise MismatchedGeometry('sized geometry column', type(column).__name__) from None


def _iter_cells(column: Any) -> Iterator[Any]:
    if isinstance(column, pa.ChunkedArray):
        # one chunk at a time
        for chunk in column.iterchunks():
            for scalar in chunk:
                yield scalar.as_py()
    elif isinstance(column, pa.Array):
        for scalar in column:
            yield scalar.as_py()
    else:
        yield from column


def iter_geometries(column: Any) -> Iterator[Optional[BaseGeometry]]:
    """Lazily decode ``column`` one row at a time.

    Each call returns a fresh generator, so a column may be walked more than
    once. Decoded geometries are not retained between steps.
    """
    for row, cell in enumerate(_iter_cells(column)):
        yield decode(cell, row=row)


def ensure_geometry(obj: Any, name: str = 'geometry') -> BaseGeometry:
    """Return ``obj`` if it is a shapely geometry, else raise `MismatchedGeometry`."""
    if not isinstance(obj, BaseGeometry):
        raise MismatchedGeometry(f'shapely geometry for {name!r}', type(obj).__name__)
    return obj


def from_geoseries(geoseries: gpd.GeoSeries, name: Optional[str] = None) -> pd.Series:
    """Convert a GeoSeries into a WKB column, keeping its index.

    Missing geometries stay missing.
    """
    cells = [None if geom is None else encode(geom, row=row) for row, geom in enumerate(geoseries)]
    name = name or geoseries.name or config.COLUMN_NAMES['geometry']
    return pd.Series(cells, index=geoseries.index, name=name, dtype=object)


def to_geoseries(column: Any, crs: Any = None) -> gpd.GeoSeries:
    """Decode a whole WKB column into a GeoSeries."""
    index = column.index if isinstance(column, pd.Series) else None
    name = column.name if isinstance(column, pd.Series) else None
    return gpd.GeoSeries(list(iter_geometries(column)), index=index, crs=crs, name=name)
