from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
import logging
from typing import ClassVar, Optional, TypeVar

from shapely.geometry import Polygon

from ..config import CellSize
from ..coordinate import Coordinate
from ..errors import InvalidCodeError, NoNeighborError
from ..models import Extent, MeshRecord

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="Mesh")


class NeighborDirection(Enum):
    """隣にあるメッシュの方向"""
    NONE = "none"
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


@dataclass(frozen=True)
class Mesh(ABC):
    """地域メッシュの共通部分

    メッシュコードだけを保持し、上位のメッシュや境界はコードから都度求める。
    派生クラスは LEVEL / SIZE / CODE_LENGTH を定義し、
    南端・西端と東西南北への移動を実装する。
    """
    code: str

    LEVEL: ClassVar[int]
    SIZE: ClassVar[CellSize]
    CODE_LENGTH: ClassVar[int]

    def __post_init__(self):
        self.validate_code(self.code)

    # --- 生成・検証 -----------------------------------------------------

    @classmethod
    @abstractmethod
    def validate_code(cls, code: str) -> None:
        """不正なメッシュコードなら InvalidCodeError を送出する"""

    @classmethod
    @abstractmethod
    def from_coordinate(cls: type[M], coord: Coordinate) -> M:
        """座標を含むメッシュを返す"""

    @classmethod
    def _check_digits(cls, code: str) -> None:
        if not isinstance(code, str):
            raise InvalidCodeError(code, "mesh code must be a str")
        if len(code) != cls.CODE_LENGTH:
            raise InvalidCodeError(code, f"level {cls.LEVEL} code must be {cls.CODE_LENGTH} digits")
        if not (code.isascii() and code.isdigit()):
            raise InvalidCodeError(code, "mesh code must consist of digits")

    # --- 境界 -----------------------------------------------------------

    @property
    @abstractmethod
    def south(self) -> float: ...

    @property
    @abstractmethod
    def west(self) -> float: ...

    @property
    def north(self) -> float:
        return self.south + self.SIZE.height

    @property
    def east(self) -> float:
        return self.west + self.SIZE.width

    @property
    def level(self) -> int:
        return self.LEVEL

    def extent(self) -> Extent:
        return Extent(north=self.north, south=self.south, east=self.east, west=self.west)

    def center(self) -> Coordinate:
        lat, lon = self.extent().center()
        return Coordinate(lat, lon)

    def north_east(self) -> Coordinate:
        return Coordinate(self.north, self.east)

    def south_east(self) -> Coordinate:
        return Coordinate(self.south, self.east)

    def south_west(self) -> Coordinate:
        return Coordinate(self.south, self.west)

    def north_west(self) -> Coordinate:
        return Coordinate(self.north, self.west)

    def contains(self, coord: Coordinate) -> bool:
        return self.extent().contains(coord.lat, coord.lon)

    def polygon(self) -> Polygon:
        return self.extent().to_polygon()

    def to_record(self) -> MeshRecord:
        return MeshRecord(code=self.code, north=self.north, south=self.south,
                          east=self.east, west=self.west)

    # --- 階層 -----------------------------------------------------------

    def parent(self) -> Optional["Mesh"]:
        """1つ上の階層のメッシュ（第1次地域区画は None）"""
        return None

    def ancestor(self, level: int) -> "Mesh":
        if not 1 <= level <= self.LEVEL:
            raise ValueError(f"level must be between 1 and {self.LEVEL}: {level}")
        mesh: Mesh = self
        while mesh.LEVEL > level:
            mesh = mesh.parent()
        return mesh

    # --- 隣接 -----------------------------------------------------------

    @abstractmethod
    def north_mesh(self: M) -> M: ...

    @abstractmethod
    def east_mesh(self: M) -> M: ...

    @abstractmethod
    def south_mesh(self: M) -> M: ...

    @abstractmethod
    def west_mesh(self: M) -> M: ...

    # 斜め方向は縦→横の順に移動を合成する
    def north_east_mesh(self: M) -> M:
        return self.north_mesh().east_mesh()

    def south_east_mesh(self: M) -> M:
        return self.south_mesh().east_mesh()

    def south_west_mesh(self: M) -> M:
        return self.south_mesh().west_mesh()

    def north_west_mesh(self: M) -> M:
        return self.north_mesh().west_mesh()

    def is_neighboring(self, other: "Mesh") -> NeighborDirection:
        """other が東西南北のどの方向に隣接しているかを返す。

        隣のメッシュのコードとの一致で判定するため、斜め隣や2つ以上離れた
        メッシュは NeighborDirection.NONE となる。
        """
        moves = (
            (NeighborDirection.NORTH, self.north_mesh),
            (NeighborDirection.EAST, self.east_mesh),
            (NeighborDirection.SOUTH, self.south_mesh),
            (NeighborDirection.WEST, self.west_mesh),
        )
        for direction, move in moves:
            try:
                neighbor = move()
            except NoNeighborError:
                # 範囲外の方向には隣接するメッシュがない
                continue
            if neighbor.code == other.code:
                return direction
        return NeighborDirection.NONE

    def _no_neighbor(self, direction: NeighborDirection, exc: Exception) -> NoNeighborError:
        logger.debug("no %s neighbor for %s: %s", direction.value, self.code, exc)
        return NoNeighborError(self.code, direction.value)
