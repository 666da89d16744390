# geodesy.py
from dataclasses import dataclass
from typing import Tuple

from .coordinate import Coordinate
from .mesh import Mesh


@dataclass(frozen=True)
class GeodesicMeasurer:
    """楕円体（既定は JGD2011 の GRS80）上でメッシュの大きさを測る"""
    ellps: str = "GRS80"

    def __post_init__(self):
        from pyproj import Geod
        object.__setattr__(self, "_geod", Geod(ellps=self.ellps))

    def distance_m(self, a: Coordinate, b: Coordinate) -> float:
        _, _, dist = self._geod.inv(a.lon, a.lat, b.lon, b.lat)
        return dist

    def cell_size_m(self, mesh: Mesh) -> Tuple[float, float]:
        """(東西の長さ, 南北の長さ) を返す。東西は中心の緯度で測る。"""
        lat = mesh.center().lat
        width = self.distance_m(Coordinate(lat, mesh.west), Coordinate(lat, mesh.east))
        height = self.distance_m(mesh.south_west(), mesh.north_west())
        return width, height

    def cell_area_m2(self, mesh: Mesh) -> float:
        area, _ = self._geod.geometry_area_perimeter(mesh.polygon())
        # 頂点の並びが時計回りだと負になる
        return abs(area)
