from __future__ import annotations
import math

from ..config import (
    CODE_LENGTHS, DOMAIN, EASTERNMOST, MESH1_SIZE, NORTHERNMOST, SOUTHERNMOST, WESTERNMOST,
)
from ..coordinate import Coordinate
from ..errors import InvalidCodeError, OutOfRangeError
from .base import Mesh, NeighborDirection

# メッシュコードの緯度部分と経度部分が取りうる範囲
LAT_FIELD_MIN = math.floor(SOUTHERNMOST * 1.5)
LAT_FIELD_MAX = math.ceil(NORTHERNMOST * 1.5) - 1
LON_FIELD_MIN = math.floor(WESTERNMOST) - 100
LON_FIELD_MAX = math.ceil(EASTERNMOST) - 100 - 1


def check_domain(coord: Coordinate) -> None:
    """座標が地域メッシュの範囲に含まれることを確認する"""
    if not DOMAIN.south <= coord.lat < DOMAIN.north:
        raise OutOfRangeError("latitude", coord.lat, DOMAIN.south, DOMAIN.north)
    if not DOMAIN.west <= coord.lon < DOMAIN.east:
        raise OutOfRangeError("longitude", coord.lon, DOMAIN.west, DOMAIN.east)


class Mesh1(Mesh):
    """第1次地域区画

    辺の長さは約80km。メッシュコードは南西端の緯度を1.5倍した2桁と、
    経度から100を引いた2桁で構成する。
    例えば南西端が北緯36度、東経138度の区画は 54 と 38 で "5438" となる。

    * 北東端の区画は "7149"
    * 南東端の区画は "3049"
    * 南西端の区画は "3018"
    * 北西端の区画は "7118"
    """
    LEVEL = 1
    SIZE = MESH1_SIZE
    CODE_LENGTH = CODE_LENGTHS[1]

    @classmethod
    def validate_code(cls, code: str) -> None:
        cls._check_digits(code)
        lat, lon = int(code[0:2]), int(code[2:4])
        if not LAT_FIELD_MIN <= lat <= LAT_FIELD_MAX:
            raise InvalidCodeError(code, f"latitude part must be {LAT_FIELD_MIN}..{LAT_FIELD_MAX}")
        if not LON_FIELD_MIN <= lon <= LON_FIELD_MAX:
            raise InvalidCodeError(code, f"longitude part must be {LON_FIELD_MIN}..{LON_FIELD_MAX}")

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> "Mesh1":
        # 範囲の確認はここだけで行い、下位の階層はこれに依存する
        check_domain(coord)
        lat = math.floor(coord.lat * 1.5)
        # 南端は south と同じ式で比べ、南端ちょうどの緯度をこの区画に入れる
        if (lat + 1) / 1.5 <= coord.lat:
            lat += 1
        elif lat / 1.5 > coord.lat:
            lat -= 1
        lon = math.floor(coord.lon - 100.0)
        return cls(f"{lat:02d}{lon:02d}")

    @property
    def lat_field(self) -> int:
        return int(self.code[0:2])

    @property
    def lon_field(self) -> int:
        return int(self.code[2:4])

    @property
    def south(self) -> float:
        return self.lat_field / 1.5

    @property
    def west(self) -> float:
        return self.lon_field + 100.0

    @property
    def north(self) -> float:
        return (self.lat_field + 1) / 1.5

    @property
    def east(self) -> float:
        return self.lon_field + 101.0

    def _shift(self, direction: NeighborDirection, d_lat: int, d_lon: int) -> "Mesh1":
        code = f"{self.lat_field + d_lat:02d}{self.lon_field + d_lon:02d}"
        try:
            return Mesh1(code)
        except InvalidCodeError as exc:
            raise self._no_neighbor(direction, exc) from exc

    def north_mesh(self) -> "Mesh1":
        return self._shift(NeighborDirection.NORTH, 1, 0)

    def east_mesh(self) -> "Mesh1":
        return self._shift(NeighborDirection.EAST, 0, 1)

    def south_mesh(self) -> "Mesh1":
        return self._shift(NeighborDirection.SOUTH, -1, 0)

    def west_mesh(self) -> "Mesh1":
        return self._shift(NeighborDirection.WEST, 0, -1)
