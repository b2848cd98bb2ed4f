"""Wrap populated output buffers into the caller's column type.

Output follows the kind of the input column:
- pandas Series (or a plain sequence) -> pandas Series, input index kept
- pyarrow Array -> pyarrow Array
- pyarrow ChunkedArray -> single-chunk pyarrow ChunkedArray

pyarrow arrays carry no name, so ``name`` only applies to pandas output.
"""
from typing import Any
import logging

import numpy as np
import pandas as pd
import pyarrow as pa

from pandas_geos.errors import ColumnConstructionError
from pandas_geos.utils import log_failure

logger = logging.getLogger(__name__)

GEOMETRY = 'geometry'
BOOLEAN = 'boolean'


def new_buffer(length: int) -> np.ndarray:
    """Allocate an object buffer of ``length`` null cells."""
    return np.full(length, None, dtype=object)


def _arrow_type(like: Any, kind: str) -> pa.DataType:
    if kind == BOOLEAN:
        return pa.bool_()
    if pa.types.is_large_binary(like.type):
        return pa.large_binary()
    return pa.binary()


def materialize(buffer: np.ndarray, name: str, like: Any, kind: str = GEOMETRY):
    """Build the result column from ``buffer``.

    ``like`` is the input column whose type (and pandas index) the result
    mirrors. Raises `ColumnConstructionError` if the column library rejects
    the buffer.
    """
    if kind not in (GEOMETRY, BOOLEAN):
        raise ColumnConstructionError(f'unknown column kind {kind!r}')
    try:
        if isinstance(like, (pa.Array, pa.ChunkedArray)):
            arr = pa.array(buffer, type=_arrow_type(like, kind))
            if isinstance(like, pa.ChunkedArray):
                return pa.chunked_array([arr], type=arr.type)
            return arr
        index = like.index if isinstance(like, pd.Series) else None
        if kind == BOOLEAN:
            return pd.Series(pd.array(buffer, dtype='boolean'), index=index, name=name)
        return pd.Series(buffer, index=index, name=name, dtype=object)
    except (TypeError, ValueError, pa.ArrowException) as exc:
        log_failure('column construction failed', exc, name=name, kind=kind, length=len(buffer))
        raise ColumnConstructionError(f'unable to build {kind} column {name!r}: {exc}') from exc
