import pandas as pd
import pyarrow as pa
from shapely import wkb
from shapely.geometry import Point, Polygon, box


def to_cells(geoms):
    """WKB bytes for each geometry, None passed through."""
    return [None if g is None else wkb.dumps(g) for g in geoms]


def wkb_series(geoms, index=None, name='geometry'):
    """Build a pandas WKB column from shapely geometries (None for missing rows)."""
    return pd.Series(to_cells(geoms), index=index, name=name, dtype=object)


def wkb_chunked(chunks):
    """Build a pyarrow ChunkedArray, one chunk per list of geometries."""
    return pa.chunked_array([to_cells(c) for c in chunks], type=pa.binary())


def decoded(column):
    """Decode an output column (pandas or pyarrow) into a list of geometries."""
    cells = column.to_pylist() if isinstance(column, (pa.Array, pa.ChunkedArray)) else list(column)
    return [None if c is None else wkb.loads(c) for c in cells]


def unit_squares(n, spacing=3.0):
    """``n`` disjoint 1x1 squares laid along the x axis."""
    return [box(i * spacing, 0.0, i * spacing + 1.0, 1.0) for i in range(n)]


def bowtie():
    """Self-intersecting polygon; invalid until repaired."""
    return Polygon([(0, 0), (2, 2), (2, 0), (0, 2), (0, 0)])


def sample_points():
    return [Point(1.0, 2.0), Point(3.0, 4.0)]
