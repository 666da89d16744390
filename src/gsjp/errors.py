# errors.py
from __future__ import annotations
from typing import Optional


class MeshError(Exception):
    """地域メッシュ関連の例外の基底クラス"""


class OutOfRangeError(MeshError, ValueError):
    """座標が範囲外であることを示す例外

    axis には "latitude" または "longitude" が入る。
    """

    def __init__(self, axis: str, value: float, minimum: float, maximum: float):
        self.axis = axis
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"{axis} {value} is out of range [{minimum}, {maximum})")


class InvalidCodeError(MeshError, ValueError):
    """メッシュコードが不正であることを示す例外"""

    def __init__(self, code: object, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"invalid mesh code: {code!r} ({reason})")


class NoNeighborError(InvalidCodeError):
    """隣のメッシュが区画の範囲外にあって存在しない"""

    def __init__(self, code: str, direction: str, reason: Optional[str] = None):
        self.direction = direction
        super().__init__(code, reason or f"no {direction} neighbor inside the covered domain")


__all__ = ["MeshError", "OutOfRangeError", "InvalidCodeError", "NoNeighborError"]
