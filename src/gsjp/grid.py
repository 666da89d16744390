# grid.py
from __future__ import annotations
import logging
from typing import Iterator

import numpy as np

from .config import DOMAIN
from .coordinate import Coordinate
from .mesh import Mesh, MeshLevel
from .models import Extent, MeshRecord

logger = logging.getLogger(__name__)


def iter_meshes(level: int | MeshLevel, area: Extent) -> Iterator[Mesh]:
    """
    area に中心が含まれる指定階層のメッシュを、西から東、南から北の順に返す。
    area は地域メッシュの範囲で切り取ってから走査する。
    """
    cls = MeshLevel(level).mesh_class
    clipped = area.intersection(DOMAIN)
    if clipped is None:
        logger.debug("area %s is outside the mesh domain", area)
        return

    height, width = cls.SIZE.height, cls.SIZE.width
    # 南西端を含むメッシュの中心から走査を始める
    first = cls.from_coordinate(Coordinate(clipped.south, clipped.west))
    lats = np.arange(first.south + height / 2.0, clipped.north, height)
    lons = np.arange(first.west + width / 2.0, clipped.east, width)
    logger.debug("scanning level %d: %d x %d centers", cls.LEVEL, len(lats), len(lons))

    for lat in lats:
        for lon in lons:
            lat_f, lon_f = float(lat), float(lon)
            if not clipped.contains(lat_f, lon_f):
                continue
            yield cls.from_coordinate(Coordinate(lat_f, lon_f))


def mesh_records(level: int | MeshLevel, area: Extent) -> Iterator[MeshRecord]:
    """iter_meshes と同じ順で、メッシュコードと境界のレコードを返す"""
    for mesh in iter_meshes(level, area):
        yield mesh.to_record()
