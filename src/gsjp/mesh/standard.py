from __future__ import annotations

from ..config import CODE_LENGTHS, MESH2_SIZE, MESH3_SIZE
from .mesh1 import Mesh1
from .subdivision import DecimalMesh


class Mesh2(DecimalMesh):
    """第2次地域区画（統合地域メッシュ）

    第1次地域区画を南北・東西にそれぞれ8等分した区画。辺の長さは約10km。
    """
    LEVEL = 2
    SIZE = MESH2_SIZE
    CODE_LENGTH = CODE_LENGTHS[2]
    PARENT = Mesh1
    DIVISIONS = 8


class Mesh3(DecimalMesh):
    """基準地域メッシュ（第3次地域区画）

    第2次地域区画を南北・東西にそれぞれ10等分した区画。辺の長さは約1km。
    """
    LEVEL = 3
    SIZE = MESH3_SIZE
    CODE_LENGTH = CODE_LENGTHS[3]
    PARENT = Mesh2
    DIVISIONS = 10
