import dataclasses
import math

import pytest

from gsjp import Coordinate, OutOfRangeError


def test_coordinate_accessors():
    coord = Coordinate(35.0, 139.0)
    assert coord.lat == 35.0
    assert coord.lon == 139.0
    assert coord.as_tuple() == (35.0, 139.0)


@pytest.mark.parametrize(
    "lat, lon, axis",
    [
        (90.1, 139.0, "latitude"),
        (-90.1, 139.0, "latitude"),
        (35.0, 180.1, "longitude"),
        (35.0, -180.1, "longitude"),
        (math.nan, 139.0, "latitude"),
        (35.0, math.inf, "longitude"),
        # 両方が範囲外なら緯度を報告する
        (100.0, 200.0, "latitude"),
    ],
)
def test_coordinate_out_of_range(lat, lon, axis):
    with pytest.raises(OutOfRangeError) as excinfo:
        Coordinate(lat, lon)
    assert excinfo.value.axis == axis


def test_coordinate_is_immutable():
    coord = Coordinate(35.0, 139.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        coord.lat = 36.0


def test_coordinate_outside_mesh_domain_is_allowed():
    # 地域メッシュの範囲外でも緯度経度として正しければ生成できる
    assert Coordinate(49.0, 117.0).lat == 49.0
