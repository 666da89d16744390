import pytest

from gsjp import Extent, MeshRecord


def test_extent_is_half_open():
    ext = Extent(north=36.0, south=35.0, east=140.0, west=139.0)
    assert ext.contains(35.0, 139.0)
    assert ext.contains(35.5, 139.5)
    assert not ext.contains(36.0, 139.5)
    assert not ext.contains(35.5, 140.0)
    assert ext.center() == (35.5, 139.5)
    assert ext.width() == 1.0
    assert ext.height() == 1.0


def test_extent_intersection():
    a = Extent(north=36.0, south=35.0, east=140.0, west=139.0)
    b = Extent(north=37.0, south=35.5, east=139.5, west=138.0)
    assert a.intersection(b) == Extent(north=36.0, south=35.5, east=139.5, west=139.0)
    c = Extent(north=40.0, south=39.0, east=140.0, west=139.0)
    assert a.intersection(c) is None


def test_extent_polygon():
    ext = Extent(north=36.0, south=35.0, east=140.0, west=139.0)
    poly = ext.to_polygon()
    assert poly.bounds == (139.0, 35.0, 140.0, 36.0)
    assert poly.area == pytest.approx(1.0)


def test_mesh_record_extent():
    rec = MeshRecord(code="5339", north=36.0, south=35.0 + 1.0 / 3.0, east=140.0, west=139.0)
    assert rec.extent.west == 139.0
