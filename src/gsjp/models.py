from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from shapely.geometry import Polygon, box

LatLon = Tuple[float, float]


# --- 範囲 -------------------------------------------------------------

@dataclass(frozen=True)
class Extent:
    """緯度経度の矩形範囲（単位は度）

    南端と西端を含み、北端と東端を含まない半開区間として扱う。
    """
    north: float
    south: float
    east: float
    west: float

    def width(self) -> float:
        return self.east - self.west

    def height(self) -> float:
        return self.north - self.south

    def center(self) -> LatLon:
        return ((self.north + self.south) * 0.5, (self.east + self.west) * 0.5)

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat < self.north and self.west <= lon < self.east

    def intersection(self, other: "Extent") -> "Extent | None":
        north = min(self.north, other.north)
        south = max(self.south, other.south)
        east = min(self.east, other.east)
        west = max(self.west, other.west)
        if north <= south or east <= west:
            return None
        return Extent(north=north, south=south, east=east, west=west)

    def to_polygon(self) -> Polygon:
        # x=経度, y=緯度
        return box(self.west, self.south, self.east, self.north)


# --- 出力用レコード ---------------------------------------------------

@dataclass(frozen=True)
class MeshRecord:
    """メッシュコードと四隅の境界（シェープファイル出力などの利用側向け）"""
    code: str
    north: float
    south: float
    east: float
    west: float

    @property
    def extent(self) -> Extent:
        return Extent(north=self.north, south=self.south, east=self.east, west=self.west)


__all__ = [
    "Extent",
    "MeshRecord",
    "LatLon",
]
