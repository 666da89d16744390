from __future__ import annotations
from enum import IntEnum

from ..config import CellSize
from ..coordinate import Coordinate
from ..errors import InvalidCodeError
from .base import Mesh
from .divided import Mesh4, Mesh5, Mesh6
from .mesh1 import Mesh1
from .standard import Mesh2, Mesh3

_CLASSES: dict[int, type[Mesh]] = {
    1: Mesh1,
    2: Mesh2,
    3: Mesh3,
    4: Mesh4,
    5: Mesh5,
    6: Mesh6,
}
_BY_LENGTH: dict[int, type[Mesh]] = {cls.CODE_LENGTH: cls for cls in _CLASSES.values()}


class MeshLevel(IntEnum):
    """地域メッシュの階層"""
    MESH1 = 1  # 第1次地域区画
    MESH2 = 2  # 第2次地域区画
    MESH3 = 3  # 基準地域メッシュ（第3次地域区画）
    MESH4 = 4  # 2分の1地域メッシュ
    MESH5 = 5  # 4分の1地域メッシュ
    MESH6 = 6  # 8分の1地域メッシュ

    @property
    def mesh_class(self) -> type[Mesh]:
        return _CLASSES[int(self)]

    @property
    def size(self) -> CellSize:
        return self.mesh_class.SIZE

    def width(self) -> float:
        return self.size.width

    def height(self) -> float:
        return self.size.height

    @property
    def code_length(self) -> int:
        return self.mesh_class.CODE_LENGTH


def mesh_from_code(code: str) -> Mesh:
    """桁数から階層を判定してメッシュを生成する"""
    if not isinstance(code, str):
        raise InvalidCodeError(code, "mesh code must be a str")
    cls = _BY_LENGTH.get(len(code))
    if cls is None:
        raise InvalidCodeError(code, f"unknown code length {len(code)}")
    return cls(code)


def mesh_from_coordinate(coord: Coordinate, level: int | MeshLevel) -> Mesh:
    """座標を含む指定階層のメッシュを返す"""
    return MeshLevel(level).mesh_class.from_coordinate(coord)
