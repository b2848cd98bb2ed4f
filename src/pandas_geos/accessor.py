"""Series accessor exposing the column operators as ``series.geos.<op>``.

Registered on import of `pandas_geos`:

    import pandas_geos
    buffered = wkb_series.geos.buffer(1.0, quad_segs=8)
"""
from typing import Any

import pandas as pd
from shapely.geometry.base import BaseGeometry

from pandas_geos import codec, config, operations


@pd.api.extensions.register_series_accessor('geos')
class GeosSeriesAccessor:
    """Geometry operations over a Series of WKB cells."""

    def __init__(self, series: pd.Series):
        self._series = series

    def is_valid(self) -> pd.Series:
        return operations.is_valid(self._series)

    def make_valid(self) -> pd.Series:
        return operations.make_valid(self._series)

    def buffer(self, width: float, quad_segs: int = config.BUFFER_DEFAULTS['quad_segs'], **kwargs: Any) -> pd.Series:
        return operations.buffer(self._series, width, quad_segs=quad_segs, **kwargs)

    def intersection(self, other: Any) -> pd.Series:
        return operations.intersection(self._series, other)

    def geometry_intersection(self, reference: BaseGeometry) -> pd.Series:
        return operations.geometry_intersection(self._series, reference)

    def difference(self, other: Any) -> pd.Series:
        return operations.difference(self._series, other)

    def geometry_difference(self, reference: BaseGeometry) -> pd.Series:
        return operations.geometry_difference(self._series, reference)

    def self_union(self) -> BaseGeometry:
        return operations.self_union(self._series)

    def decode(self) -> pd.Series:
        """Decoded shapely geometries (or None), same index and name."""
        s = self._series
        return pd.Series(list(codec.iter_geometries(s)), index=s.index, name=s.name, dtype=object)

    def to_geoseries(self, crs: Any = None):
        return codec.to_geoseries(self._series, crs=crs)
