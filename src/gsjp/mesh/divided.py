# 分割地域メッシュ
from __future__ import annotations

from ..config import CODE_LENGTHS, MESH4_SIZE, MESH5_SIZE, MESH6_SIZE
from .standard import Mesh3
from .subdivision import QuadrantMesh


class Mesh4(QuadrantMesh):
    """2分の1地域メッシュ。基準地域メッシュを 2x2 に分けた区画（約500m）"""
    LEVEL = 4
    SIZE = MESH4_SIZE
    CODE_LENGTH = CODE_LENGTHS[4]
    PARENT = Mesh3


class Mesh5(QuadrantMesh):
    """4分の1地域メッシュ。2分の1地域メッシュを 2x2 に分けた区画（約250m）"""
    LEVEL = 5
    SIZE = MESH5_SIZE
    CODE_LENGTH = CODE_LENGTHS[5]
    PARENT = Mesh4


class Mesh6(QuadrantMesh):
    """8分の1地域メッシュ。4分の1地域メッシュを 2x2 に分けた区画（約125m）"""
    LEVEL = 6
    SIZE = MESH6_SIZE
    CODE_LENGTH = CODE_LENGTHS[6]
    PARENT = Mesh5
