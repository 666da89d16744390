from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Tuple

from .config import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from .errors import OutOfRangeError


@dataclass(frozen=True)
class Coordinate:
    """緯度経度（度単位）

    生成時に緯度と経度をそれぞれ検証し、範囲外なら OutOfRangeError を送出する。
    """
    lat: float
    lon: float

    def __post_init__(self):
        lat, lon = float(self.lat), float(self.lon)
        if not (math.isfinite(lat) and MIN_LATITUDE <= lat <= MAX_LATITUDE):
            raise OutOfRangeError("latitude", lat, MIN_LATITUDE, MAX_LATITUDE)
        if not (math.isfinite(lon) and MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            raise OutOfRangeError("longitude", lon, MIN_LONGITUDE, MAX_LONGITUDE)
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lon", lon)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lon)
