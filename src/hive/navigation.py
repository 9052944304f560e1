"""
ルート・位置・パスを扱うモジュール

ハイブには絶対座標がないため、場所はすべて「ある駒から方向をたどった先」で表す。
- Route: 方向の列。移動量の合計が同じなら同じ場所を指す
- Position: 駒と方向の組。その駒の隣の（多くは空いている）スロット
- Path: ルートとその行き先の駒
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, NamedTuple, Optional

from .direction import ALL_DIRECTIONS, HORIZONTAL_COUNT, Direction, Translation, ZERO
from .errors import BrokenRouteError

if TYPE_CHECKING:
    from .node import HexNode


class Route:
    """基準となる駒からの方向の列"""

    def __init__(self, directions: Optional[Iterable[Direction]] = None):
        self.directions: List[Direction] = list(directions or [])

    @property
    def translation(self) -> Translation:
        total = ZERO
        for direction in self.directions:
            total = total + direction.translation
        return total

    def append(self, directions: Iterable[Direction]) -> 'Route':
        """方向を後ろに付け足した新しいルートを返す"""
        return Route(self.directions + list(directions))

    def simplified(self) -> 'Route':
        """
        同じ場所へ最短で行く正規化されたルートを返す
        - 反対方向の組は打ち消す
        - 120度離れた2方向はその間の1方向にまとめる
        - 垂直方向は水平方向と独立に打ち消す
        これ以上まとめられなくなるまで繰り返すと、水平成分は隣り合う
        高々2方向だけになり、移動量が同じなら結果も同じになる。
        注意: 結果は比較用で、実際にたどれるルートとは限らない。
        """
        counts = [0] * len(ALL_DIRECTIONS)
        for direction in self.directions:
            counts[direction.value] += 1

        changed = True
        while changed:
            changed = False
            for i in range(HORIZONTAL_COUNT // 2):
                cancel = min(counts[i], counts[i + 3])
                if cancel:
                    counts[i] -= cancel
                    counts[i + 3] -= cancel
                    changed = True
            # 例: UPPER_LEFT + UPPER_RIGHT = UP
            for i in range(HORIZONTAL_COUNT):
                j = (i + 2) % HORIZONTAL_COUNT
                merge = min(counts[i], counts[j])
                if merge:
                    counts[i] -= merge
                    counts[j] -= merge
                    counts[(i + 1) % HORIZONTAL_COUNT] += merge
                    changed = True

        bottom, top = Direction.BOTTOM.value, Direction.TOP.value
        cancel = min(counts[bottom], counts[top])
        counts[bottom] -= cancel
        counts[top] -= cancel

        return Route(d for d in ALL_DIRECTIONS for _ in range(counts[d.value]))

    def __eq__(self, other):
        # 方向の並びではなく、たどり着く場所が同じかを比較する
        if not isinstance(other, Route):
            return NotImplemented
        return self.translation == other.translation

    def __hash__(self):
        return hash(self.translation)

    def __len__(self):
        return len(self.directions)

    def __iter__(self):
        return iter(self.directions)

    def __repr__(self):
        return f"Route([{', '.join(d.name for d in self.directions)}])"


@dataclass(frozen=True)
class Position:
    """駒の隣のスロット（駒の置き場所・移動先）"""
    node: 'HexNode'
    direction: Direction

    @classmethod
    def resolve(cls, start: 'HexNode', route: Route) -> 'Position':
        """
        startからルートをたどって位置を求める
        最後の方向以外は既存の隣接をたどり、最後の方向は空きスロットを指す
        """
        if not route.directions:
            raise BrokenRouteError("Cannot resolve an empty route")
        current = start
        for step, direction in enumerate(route.directions[:-1]):
            nxt = current.neighbors[direction]
            if nxt is None:
                raise BrokenRouteError(
                    "Route leads through a missing neighbor",
                    context={"route": route, "step": step, "direction": direction.name},
                )
            current = nxt
        return cls(current, route.directions[-1])

    @property
    def occupant(self) -> Optional['HexNode']:
        """このスロットにいる駒（空きならNone）"""
        return self.node.neighbors[self.direction]

    def __repr__(self):
        return f"Position({self.node!r}, {self.direction.name})"


class Path(NamedTuple):
    """行き先が分かっているルート"""
    route: Route
    destination: 'HexNode'
