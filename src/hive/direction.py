"""
ハイブの方向と格子上の移動量を定義するモジュール

        _____(UP)_____
       /              \\
  (UPPER_LEFT)     (UPPER_RIGHT)
     /                  \\
     \\                  /
  (LOWER_LEFT)     (LOWER_RIGHT)
       \\____(DOWN)____/

水平方向6つに加えて、積み重ね用の BOTTOM / TOP の2方向を持つ
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from .errors import DirectionError

# 水平方向の数
HORIZONTAL_COUNT = 6


@dataclass(frozen=True)
class Translation:
    """方向を適用したときの3次元の移動量（x, y: 水平, z: 高さ）"""
    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: 'Translation') -> 'Translation':
        return Translation(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> 'Translation':
        return Translation(-self.x, -self.y, -self.z)

    def same_column(self, other: 'Translation') -> bool:
        """高さを無視して水平位置が同じか確認"""
        return self.x == other.x and self.y == other.y


ZERO = Translation()


class Direction(Enum):
    """方向の定義（値はNeighborsのスロット番号）"""
    UP = 0
    UPPER_RIGHT = 1
    LOWER_RIGHT = 2
    DOWN = 3
    LOWER_LEFT = 4
    UPPER_LEFT = 5
    BOTTOM = 6  # 真下の駒（この駒が乗っている駒）
    TOP = 7     # 真上の駒（この駒に乗っている駒）

    @property
    def is_horizontal(self) -> bool:
        return self.value < HORIZONTAL_COUNT

    @property
    def opposite(self) -> 'Direction':
        """反対方向を返す"""
        if self == Direction.BOTTOM:
            return Direction.TOP
        if self == Direction.TOP:
            return Direction.BOTTOM
        return Direction((self.value + 3) % HORIZONTAL_COUNT)

    @property
    def adjacent(self) -> List['Direction']:
        """
        60度隣の2方向を返す
        [0]が反時計回り、[1]が時計回り
        例: Direction.UP.adjacent == [UPPER_LEFT, UPPER_RIGHT]
        """
        if not self.is_horizontal:
            raise DirectionError(f"{self.name} has no adjacent directions")
        return [
            Direction((self.value - 1) % HORIZONTAL_COUNT),
            Direction((self.value + 1) % HORIZONTAL_COUNT),
        ]

    @property
    def translation(self) -> Translation:
        return _TRANSLATIONS[self]

    def horizontal_flip(self) -> 'Direction':
        """縦軸を中心に左右反転した方向を返す"""
        if not self.is_horizontal:
            raise DirectionError(f"{self.name} cannot be flipped horizontally")
        return _FLIPS.get(self, self)


# 水平方向は "doubled" 座標（上下は y に ±2）
_TRANSLATIONS = {
    Direction.UP: Translation(0, 2, 0),
    Direction.UPPER_RIGHT: Translation(1, 1, 0),
    Direction.LOWER_RIGHT: Translation(1, -1, 0),
    Direction.DOWN: Translation(0, -2, 0),
    Direction.LOWER_LEFT: Translation(-1, -1, 0),
    Direction.UPPER_LEFT: Translation(-1, 1, 0),
    Direction.BOTTOM: Translation(0, 0, -1),
    Direction.TOP: Translation(0, 0, 1),
}

_FLIPS = {
    Direction.UPPER_RIGHT: Direction.UPPER_LEFT,
    Direction.UPPER_LEFT: Direction.UPPER_RIGHT,
    Direction.LOWER_RIGHT: Direction.LOWER_LEFT,
    Direction.LOWER_LEFT: Direction.LOWER_RIGHT,
}

ALL_DIRECTIONS = list(Direction)
HORIZONTAL_DIRECTIONS = [d for d in Direction if d.is_horizontal]
