import pytest
from shapely.geometry import Point, box

from pandas_geos.operations import self_union
from pandas_geos.errors import NoGeometries
from pandas_geos.tests.fixtures import unit_squares, wkb_chunked, wkb_series


def test_self_union_empty_column():
    with pytest.raises(NoGeometries):
        self_union(wkb_series([]))


def test_self_union_all_null():
    with pytest.raises(NoGeometries):
        self_union(wkb_series([None, None]))


def test_self_union_single_present_row_unchanged():
    g = box(0, 0, 1, 1)
    out = self_union(wkb_series([None, g, None]))
    assert out.equals(g)
    assert out.geom_type == 'Polygon'


def test_self_union_overlapping_merges_area():
    out = self_union(wkb_series([box(0, 0, 2, 2), None, box(1, 1, 3, 3)]))
    assert out.area == pytest.approx(7.0)
    assert out.geom_type == 'Polygon'


def test_self_union_disjoint_is_multi():
    out = self_union(wkb_series(unit_squares(3)))
    assert out.geom_type == 'MultiPolygon'
    assert len(out.geoms) == 3
    assert out.area == pytest.approx(3.0)


def test_self_union_order_does_not_change_result():
    geoms = [box(0, 0, 2, 2), Point(5, 5).buffer(1.0), box(1, 1, 3, 3)]
    forward = self_union(wkb_series(geoms))
    backward = self_union(wkb_series(list(reversed(geoms))))
    assert forward.symmetric_difference(backward).area == pytest.approx(0.0, abs=1e-9)


def test_self_union_chunked():
    out = self_union(wkb_chunked([[None], [box(0, 0, 1, 1), box(1, 0, 2, 1)]]))
    assert out.area == pytest.approx(2.0)
