"""
operations.py

Column-wide geometry operators. Each operator walks its input column(s)
row by row through `codec.iter_geometries`, applies one shapely primitive per
present row, encodes the result and materializes a new column. Absent rows
stay absent. Any failure aborts the whole call with a typed error from
`pandas_geos.errors`; no partial column is returned.

Public functions:
- `is_valid(column)` -> boolean column
- `make_valid(column)` -> geometry column
- `buffer(column, width, quad_segs=8, ...)` -> geometry column
- `intersection(column_a, column_b)` -> geometry column
- `geometry_intersection(column, reference)` -> geometry column
- `difference(column_a, column_b)` -> geometry column
- `geometry_difference(column, reference)` -> geometry column
- `self_union(column)` -> shapely geometry

Pairwise operators align rows by position, not by pandas index label.
"""
from contextlib import contextmanager
from typing import Any, Optional
import logging

from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry
from shapely.prepared import prep
from shapely.validation import make_valid as _shapely_make_valid

from pandas_geos import config
from pandas_geos.codec import column_length, encode, ensure_geometry, iter_geometries
from pandas_geos.errors import GeometricOperationError, NoGeometries, PandasGeosError, UnequalLengths
from pandas_geos.materialize import BOOLEAN, GEOMETRY, materialize, new_buffer
from pandas_geos.utils import count_missing, log_failure

logger = logging.getLogger(__name__)


@contextmanager
def _primitive(operation: str, row: Optional[int]):
    """Turn a shapely failure inside the block into `GeometricOperationError`."""
    try:
        yield
    except PandasGeosError:
        raise
    except (ShapelyError, ValueError, TypeError) as exc:
        log_failure('geometry primitive failed', exc, operation=operation, row=row)
        raise GeometricOperationError(operation, row, str(exc)) from exc


def _check_lengths(column_a: Any, column_b: Any) -> int:
    left = column_length(column_a)
    right = column_length(column_b)
    if left != right:
        raise UnequalLengths(left, right)
    return left


def _finish(operation: str, out, like: Any, kind: str = GEOMETRY, **extra: Any):
    name = config.COLUMN_NAMES['is_valid' if kind == BOOLEAN else 'geometry']
    logger.debug('%s: %d rows, %d null %s', operation, len(out), count_missing(out),
                 ' '.join(f'{k}={v}' for k, v in extra.items()))
    return materialize(out, name, like, kind=kind)


def is_valid(column: Any):
    """Validity of each geometry; null where the row is absent."""
    out = new_buffer(column_length(column))
    for row, geom in enumerate(iter_geometries(column)):
        if geom is None:
            continue
        with _primitive('is_valid', row):
            out[row] = bool(geom.is_valid)
    return _finish('is_valid', out, column, kind=BOOLEAN)


def make_valid(column: Any):
    """Repair each geometry with shapely's `make_valid`.

    A repair the library cannot perform fails the whole call.
    """
    out = new_buffer(column_length(column))
    for row, geom in enumerate(iter_geometries(column)):
        if geom is None:
            continue
        with _primitive('make_valid', row):
            out[row] = encode(_shapely_make_valid(geom), row=row)
    return _finish('make_valid', out, column)


def buffer(column: Any, width: float, quad_segs: int = config.BUFFER_DEFAULTS['quad_segs'],
           cap_style: str = config.BUFFER_DEFAULTS['cap_style'],
           join_style: str = config.BUFFER_DEFAULTS['join_style'],
           mitre_limit: float = config.BUFFER_DEFAULTS['mitre_limit']):
    """Buffer each geometry by ``width``.

    Parameters:
    - width: buffer distance; negative erodes, zero is allowed.
    - quad_segs: segments used to approximate a quarter circle.
    - cap_style, join_style, mitre_limit: passed through to shapely.

    Argument checking is left to shapely; a rejected argument surfaces as
    `GeometricOperationError` on the first present row.
    """
    out = new_buffer(column_length(column))
    for row, geom in enumerate(iter_geometries(column)):
        if geom is None:
            continue
        with _primitive('buffer', row):
            buffered = geom.buffer(width, quad_segs=quad_segs, cap_style=cap_style,
                                   join_style=join_style, mitre_limit=mitre_limit)
            out[row] = encode(buffered, row=row)
    return _finish('buffer', out, column, width=width, quad_segs=quad_segs)


def intersection(column_a: Any, column_b: Any):
    """Pairwise intersection.

    Null when either row is absent or when the intersection is empty.
    """
    out = new_buffer(_check_lengths(column_a, column_b))
    pairs = zip(iter_geometries(column_a), iter_geometries(column_b))
    for row, (geom_a, geom_b) in enumerate(pairs):
        if geom_a is None or geom_b is None:
            continue
        with _primitive('intersection', row):
            intersected = geom_a.intersection(geom_b)
            if not intersected.is_empty:
                out[row] = encode(intersected, row=row)
    return _finish('intersection', out, column_a)


def geometry_intersection(column: Any, reference: BaseGeometry):
    """Intersect every row with one ``reference`` geometry.

    The reference is prepared once. Rows the prepared reference does not
    intersect are nulled without computing the intersection; empty
    intersections are nulled as well.
    """
    reference = ensure_geometry(reference, 'reference')
    with _primitive('geometry_intersection', None):
        prepared = prep(reference)

    out = new_buffer(column_length(column))
    rejected = 0
    for row, geom in enumerate(iter_geometries(column)):
        if geom is None:
            continue
        with _primitive('geometry_intersection', row):
            if not prepared.intersects(geom):
                rejected += 1
                continue
            intersected = geom.intersection(reference)
            if not intersected.is_empty:
                out[row] = encode(intersected, row=row)
    return _finish('geometry_intersection', out, column, rejected=rejected)


def difference(column_a: Any, column_b: Any):
    """Pairwise difference ``a - b``.

    A row with ``b`` absent keeps ``a`` unchanged; a row with ``a`` absent is
    null. Empty differences are kept as empty geometries.
    """
    out = new_buffer(_check_lengths(column_a, column_b))
    pairs = zip(iter_geometries(column_a), iter_geometries(column_b))
    for row, (geom_a, geom_b) in enumerate(pairs):
        if geom_a is None:
            continue
        if geom_b is None:
            out[row] = encode(geom_a, row=row)
            continue
        with _primitive('difference', row):
            out[row] = encode(geom_a.difference(geom_b), row=row)
    return _finish('difference', out, column_a)


def geometry_difference(column: Any, reference: BaseGeometry):
    """Subtract one ``reference`` geometry from every row.

    The reference is prepared once; rows it does not intersect are emitted
    unchanged.
    """
    reference = ensure_geometry(reference, 'reference')
    with _primitive('geometry_difference', None):
        prepared = prep(reference)

    out = new_buffer(column_length(column))
    untouched = 0
    for row, geom in enumerate(iter_geometries(column)):
        if geom is None:
            continue
        with _primitive('geometry_difference', row):
            if prepared.intersects(geom):
                value = geom.difference(reference)
            else:
                untouched += 1
                value = geom
            out[row] = encode(value, row=row)
    return _finish('geometry_difference', out, column, untouched=untouched)


def self_union(column: Any) -> BaseGeometry:
    """Union every present row into a single geometry.

    The first present row seeds the accumulator and each later present row
    is folded in with a pairwise union, in row order. Shared boundaries are
    only dissolved as far as shapely's union does so.

    Raises `NoGeometries` when the column has no present row.
    """
    accumulator = None
    present = 0
    for row, geom in enumerate(iter_geometries(column)):
        if geom is None:
            continue
        present += 1
        if accumulator is None:
            accumulator = geom
            continue
        with _primitive('self_union', row):
            accumulator = accumulator.union(geom)

    if accumulator is None:
        raise NoGeometries()
    logger.debug('self_union: %d geometries merged into %s', present, accumulator.geom_type)
    return accumulator
