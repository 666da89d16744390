"""
上位のメッシュを南北・東西に等分して作る階層の共通実装。

- SubdividedMesh: 行（南北）と列（東西）の番号を持つ区画。隣への移動で
  上位メッシュの外に出るときは上位メッシュの隣へ繰り上げ、反対側の端に入る。
- DecimalMesh: 行番号と列番号を1桁ずつ並べる（第2次地域区画、基準地域メッシュ）
- QuadrantMesh: 2x2 の区画を 1=南西, 2=南東, 3=北西, 4=北東 の1桁で表す
  （分割地域メッシュ）
"""
from __future__ import annotations
from abc import abstractmethod
import logging
import math
from typing import ClassVar, Tuple

from ..coordinate import Coordinate
from ..errors import InvalidCodeError, NoNeighborError
from .base import Mesh, NeighborDirection

logger = logging.getLogger(__name__)


class SubdividedMesh(Mesh):
    PARENT: ClassVar[type[Mesh]]
    DIVISIONS: ClassVar[int]

    # --- 符号化（派生クラスで実装） --------------------------------------

    @classmethod
    @abstractmethod
    def _encode(cls, row: int, col: int) -> str: ...

    @classmethod
    @abstractmethod
    def _decode(cls, suffix: str) -> Tuple[int, int]: ...

    @classmethod
    @abstractmethod
    def _validate_suffix(cls, code: str, suffix: str) -> None: ...

    # --- 生成・検証 -----------------------------------------------------

    @classmethod
    def validate_code(cls, code: str) -> None:
        cls._check_digits(code)
        prefix_len = cls.PARENT.CODE_LENGTH
        try:
            cls.PARENT.validate_code(code[:prefix_len])
        except InvalidCodeError as exc:
            raise InvalidCodeError(code, f"invalid level {cls.PARENT.LEVEL} prefix: {exc.reason}") from exc
        cls._validate_suffix(code, code[prefix_len:])

    @classmethod
    def from_coordinate(cls, coord: Coordinate):
        parent = cls.PARENT.from_coordinate(coord)
        row = cls._bin(coord.lat, parent.south, cls.SIZE.height)
        col = cls._bin(coord.lon, parent.west, cls.SIZE.width)
        return cls(parent.code + cls._encode(row, col))

    @classmethod
    def _bin(cls, value: float, origin: float, step: float) -> int:
        """value を含む区画の番号

        境界の判定は south / west と同じ式 origin + index * step で行うので、
        区画の南端・西端ちょうどの座標はその区画に入る。
        """
        last = cls.DIVISIONS - 1
        # 座標は上位メッシュに含まれるので、はみ出すのは浮動小数点の誤差だけ
        index = min(max(math.floor((value - origin) / step), 0), last)
        while index < last and origin + (index + 1) * step <= value:
            index += 1
        while index > 0 and origin + index * step > value:
            index -= 1
        return index

    # --- 階層 -----------------------------------------------------------

    def parent(self) -> Mesh:
        return self.PARENT(self.code[:self.PARENT.CODE_LENGTH])

    @property
    def row(self) -> int:
        """上位メッシュ内の南北方向の番号（南端が0）"""
        return self._decode(self.code[self.PARENT.CODE_LENGTH:])[0]

    @property
    def col(self) -> int:
        """上位メッシュ内の東西方向の番号（西端が0）"""
        return self._decode(self.code[self.PARENT.CODE_LENGTH:])[1]

    # --- 境界 -----------------------------------------------------------

    @property
    def south(self) -> float:
        return self.parent().south + self.row * self.SIZE.height

    @property
    def west(self) -> float:
        return self.parent().west + self.col * self.SIZE.width

    # 北端・東端は北隣・東隣の南端・西端と同じ式で求める。
    # 上位メッシュの端の区画は上位メッシュの端をそのまま使う。

    @property
    def north(self) -> float:
        parent = self.parent()
        if self.row == self.DIVISIONS - 1:
            return parent.north
        return parent.south + (self.row + 1) * self.SIZE.height

    @property
    def east(self) -> float:
        parent = self.parent()
        if self.col == self.DIVISIONS - 1:
            return parent.east
        return parent.west + (self.col + 1) * self.SIZE.width

    # --- 隣接 -----------------------------------------------------------

    def _move(self, direction: NeighborDirection, d_row: int, d_col: int):
        parent = self.parent()
        row, col = self.row + d_row, self.col + d_col
        last = self.DIVISIONS - 1
        try:
            if row > last:
                parent, row = parent.north_mesh(), 0
            elif row < 0:
                parent, row = parent.south_mesh(), last
            if col > last:
                parent, col = parent.east_mesh(), 0
            elif col < 0:
                parent, col = parent.west_mesh(), last
        except NoNeighborError as exc:
            raise self._no_neighbor(direction, exc) from exc

        code = parent.code + self._encode(row, col)
        if not code.startswith(self.code[:self.PARENT.CODE_LENGTH]):
            logger.debug("carry %s -> %s (%s)", self.code, code, direction.value)
        return type(self)(code)

    def north_mesh(self):
        return self._move(NeighborDirection.NORTH, 1, 0)

    def east_mesh(self):
        return self._move(NeighborDirection.EAST, 0, 1)

    def south_mesh(self):
        return self._move(NeighborDirection.SOUTH, -1, 0)

    def west_mesh(self):
        return self._move(NeighborDirection.WEST, 0, -1)


class DecimalMesh(SubdividedMesh):
    """行番号・列番号を 0 から DIVISIONS-1 の1桁ずつで表す区画"""

    @classmethod
    def _encode(cls, row: int, col: int) -> str:
        return f"{row}{col}"

    @classmethod
    def _decode(cls, suffix: str) -> Tuple[int, int]:
        return int(suffix[0]), int(suffix[1])

    @classmethod
    def _validate_suffix(cls, code: str, suffix: str) -> None:
        last = cls.DIVISIONS - 1
        for axis, digit in (("latitude", suffix[0]), ("longitude", suffix[1])):
            if not 0 <= int(digit) <= last:
                raise InvalidCodeError(code, f"{axis} digit must be 0..{last}")


class QuadrantMesh(SubdividedMesh):
    """上位メッシュを 2x2 に分けた区画

    番号は 2 * 行 + 1 + 列 で、1=南西, 2=南東, 3=北西, 4=北東。
    """
    DIVISIONS = 2

    @classmethod
    def _encode(cls, row: int, col: int) -> str:
        return str(2 * row + 1 + col)

    @classmethod
    def _decode(cls, suffix: str) -> Tuple[int, int]:
        n = int(suffix) - 1
        return n // 2, n % 2

    @classmethod
    def _validate_suffix(cls, code: str, suffix: str) -> None:
        if suffix not in ("1", "2", "3", "4"):
            raise InvalidCodeError(code, "quadrant digit must be 1..4")

    @property
    def quadrant(self) -> int:
        return int(self.code[-1])
