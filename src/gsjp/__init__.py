"""
gsjp: 地域メッシュ（JIS X 0410 の標準地域メッシュ・分割地域メッシュ）

- Coordinate: 緯度経度
- Mesh1 .. Mesh6: 第1次地域区画から8分の1地域メッシュまで
- mesh_from_code / mesh_from_coordinate: 階層を判定・指定して生成
- iter_meshes / mesh_records: 範囲内のメッシュの走査
"""
from .coordinate import Coordinate
from .errors import InvalidCodeError, MeshError, NoNeighborError, OutOfRangeError
from .models import Extent, MeshRecord
from .mesh import (
    Mesh,
    Mesh1,
    Mesh2,
    Mesh3,
    Mesh4,
    Mesh5,
    Mesh6,
    MeshLevel,
    NeighborDirection,
    mesh_from_code,
    mesh_from_coordinate,
)
from .grid import iter_meshes, mesh_records
from .geodesy import GeodesicMeasurer

__all__ = [
    "Coordinate",
    "Extent",
    "MeshRecord",
    "MeshError",
    "OutOfRangeError",
    "InvalidCodeError",
    "NoNeighborError",
    "Mesh",
    "Mesh1",
    "Mesh2",
    "Mesh3",
    "Mesh4",
    "Mesh5",
    "Mesh6",
    "MeshLevel",
    "NeighborDirection",
    "mesh_from_code",
    "mesh_from_coordinate",
    "iter_meshes",
    "mesh_records",
    "GeodesicMeasurer",
]
