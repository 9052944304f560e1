"""
駒ごとの隣接テーブルを管理するモジュール

対称性（AのD方向にBがいればBのopposite(D)方向にAがいる）の維持は
HexNode側の責務で、ここでは保存と問い合わせのみを行う。
"""

from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .direction import ALL_DIRECTIONS, Direction

if TYPE_CHECKING:
    from .node import HexNode


class Neighbors:
    """方向ごとに隣の駒を1つずつ持つ8スロットのテーブル"""

    def __init__(self):
        self.nodes: List[Optional['HexNode']] = [None] * len(ALL_DIRECTIONS)

    def __getitem__(self, direction: Direction) -> Optional['HexNode']:
        return self.nodes[direction.value]

    def __setitem__(self, direction: Direction, node: Optional['HexNode']):
        self.nodes[direction.value] = node

    def present(self) -> List[Tuple[Direction, 'HexNode']]:
        """隣に駒がある (方向, 駒) の組をすべて返す"""
        return [
            (direction, node)
            for direction, node in zip(ALL_DIRECTIONS, self.nodes)
            if node is not None
        ]

    def empty(self) -> List[Direction]:
        """隣に駒がない方向をすべて返す"""
        return [
            direction
            for direction, node in zip(ALL_DIRECTIONS, self.nodes)
            if node is None
        ]

    def adjacent(self, direction: Direction) -> List[Tuple[Direction, Optional['HexNode']]]:
        """
        指定方向の両隣のスロットを返す
        例: adjacent(DOWN) -> [(LOWER_RIGHT, ...), (LOWER_LEFT, ...)]
        """
        return [(d, self[d]) for d in direction.adjacent]

    def remove(self, node: 'HexNode') -> 'Neighbors':
        """指定した駒への参照をすべて消したコピーを返す"""
        copied = self.copy()
        copied.nodes = [None if n is node else n for n in copied.nodes]
        return copied

    def remove_all(self, nodes: Iterable['HexNode']) -> 'Neighbors':
        copied = self.copy()
        for node in nodes:
            copied = copied.remove(node)
        return copied

    def contains(self, node: 'HexNode') -> Optional[Direction]:
        """指定した駒がいる方向を返す（いなければNone）"""
        for direction, n in zip(ALL_DIRECTIONS, self.nodes):
            if n is node:
                return direction
        return None

    def equals(self, other: 'Neighbors') -> bool:
        """各スロットが同じ駒（同一インスタンス）を参照しているか"""
        return all(a is b for a, b in zip(self.nodes, other.nodes))

    def copy(self) -> 'Neighbors':
        copied = Neighbors()
        copied.nodes = list(self.nodes)
        return copied

    def __eq__(self, other):
        if not isinstance(other, Neighbors):
            return NotImplemented
        return self.equals(other)

    def __len__(self):
        return sum(1 for n in self.nodes if n is not None)

    def __repr__(self):
        slots = ", ".join(f"{d.name}={n!r}" for d, n in self.present())
        return f"Neighbors({slots})"
