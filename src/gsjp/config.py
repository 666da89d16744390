# config.py
from __future__ import annotations
from dataclasses import dataclass

from .models import Extent


@dataclass(frozen=True)
class CellSize:
    """メッシュの南北（height）と東西（width）の大きさ。単位は度。"""
    height: float
    width: float


# 緯度経度として取りうる範囲
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# 地域メッシュで表現する範囲（北緯20度から48度、東経118度から150度）
SOUTHERNMOST = 20.0
NORTHERNMOST = 48.0
WESTERNMOST = 118.0
EASTERNMOST = 150.0

DOMAIN = Extent(north=NORTHERNMOST, south=SOUTHERNMOST, east=EASTERNMOST, west=WESTERNMOST)

# 階層ごとの区画の大きさ
MESH1_SIZE = CellSize(height=40.0 / 60.0, width=1.0)                    # 40分 x 1度
MESH2_SIZE = CellSize(height=5.0 / 60.0, width=7.0 / 60.0 + 30.0 / 3600.0)  # 5分 x 7分30秒
MESH3_SIZE = CellSize(height=30.0 / 3600.0, width=45.0 / 3600.0)        # 30秒 x 45秒
MESH4_SIZE = CellSize(height=15.0 / 3600.0, width=22.5 / 3600.0)        # 15秒 x 22.5秒
MESH5_SIZE = CellSize(height=7.5 / 3600.0, width=11.25 / 3600.0)        # 7.5秒 x 11.25秒
MESH6_SIZE = CellSize(height=3.75 / 3600.0, width=5.625 / 3600.0)       # 3.75秒 x 5.625秒

# 階層ごとのメッシュコードの桁数
CODE_LENGTHS = {1: 4, 2: 6, 3: 8, 4: 9, 5: 10, 6: 11}
