"""
pandas_geos

Column-wide shapely operations over WKB geometry columns held in pandas
Series or pyarrow arrays. Importing the package registers the
``Series.geos`` accessor.
"""
import logging

import shapely

from pandas_geos import config
from pandas_geos.errors import (
    PandasGeosError,
    DecodeError,
    EncodeError,
    GeometricOperationError,
    UnequalLengths,
    NoGeometries,
    ColumnConstructionError,
    MismatchedGeometry,
)
from pandas_geos.codec import decode, encode, iter_geometries, from_geoseries, to_geoseries
from pandas_geos.operations import (
    is_valid,
    make_valid,
    buffer,
    intersection,
    geometry_intersection,
    difference,
    geometry_difference,
    self_union,
)
from pandas_geos.accessor import GeosSeriesAccessor

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
for _name in config.QUIET_LOGGERS:
    logging.getLogger(_name).setLevel(logging.ERROR)
