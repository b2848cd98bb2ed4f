import numpy as np
import pandas as pd
import pyarrow as pa
import pytest

from pandas_geos.errors import ColumnConstructionError
from pandas_geos.materialize import BOOLEAN, GEOMETRY, materialize, new_buffer


def test_new_buffer_all_null():
    buf = new_buffer(3)
    assert buf.dtype == object
    assert all(v is None for v in buf)


def test_pandas_geometry_column_keeps_index():
    like = pd.Series([b'a', b'b'], index=['x', 'y'])
    buf = new_buffer(2)
    buf[0] = b'\x01'
    out = materialize(buf, 'geometry', like)
    assert out.name == 'geometry'
    assert list(out.index) == ['x', 'y']
    assert out.iloc[0] == b'\x01'
    assert out.iloc[1] is None


def test_pandas_boolean_column_is_nullable():
    buf = new_buffer(3)
    buf[0] = True
    buf[2] = False
    out = materialize(buf, 'is_valid', [None, None, None], kind=BOOLEAN)
    assert str(out.dtype) == 'boolean'
    assert out.isna().tolist() == [False, True, False]
    assert isinstance(out.index, pd.RangeIndex)


def test_arrow_outputs_follow_input_kind():
    buf = np.array([b'\x01', None], dtype=object)
    arr = materialize(buf, 'geometry', pa.array([b'', None], type=pa.large_binary()))
    assert isinstance(arr, pa.Array)
    assert arr.type == pa.large_binary()

    chunked = pa.chunked_array([[b''], [None]], type=pa.binary())
    out = materialize(buf, 'geometry', chunked, kind=GEOMETRY)
    assert isinstance(out, pa.ChunkedArray)
    assert out.to_pylist() == [b'\x01', None]


def test_length_mismatch_raises_column_construction_error():
    like = pd.Series([b'a', b'b', b'c'])
    with pytest.raises(ColumnConstructionError):
        materialize(new_buffer(2), 'geometry', like)


def test_bad_cells_for_arrow_raise():
    buf = np.array([1.5], dtype=object)
    with pytest.raises(ColumnConstructionError):
        materialize(buf, 'geometry', pa.array([b''], type=pa.binary()))


def test_unknown_kind():
    with pytest.raises(ColumnConstructionError):
        materialize(new_buffer(1), 'x', [None], kind='float')
