"""
ハイブ全体を管理するモジュール

実際のゲームには盤面がないが、駒のつながりをたどったり
変更したりするための見えない盤面としてこのクラスを使う。
"""

import logging
from typing import List, Optional

from .direction import Direction
from .navigation import Position
from .node import HexNode

logger = logging.getLogger(__name__)


class Hive:
    """駒どうしのつながりで表されるハイブを扱うクラス"""

    def __init__(self, root: Optional[HexNode] = None):
        # 最初に置かれた駒。どの駒からでもハイブ全体をたどれる
        self.root = root

    def __len__(self):
        return len(self.nodes())

    def __contains__(self, node: HexNode) -> bool:
        return any(n is node for n in self.nodes())

    def is_empty(self) -> bool:
        return self.root is None

    def nodes(self) -> List[HexNode]:
        """ハイブ上のすべての駒"""
        if self.root is None:
            return []
        return self.root.connected_nodes()

    def connected_nodes(self, node: HexNode) -> List[HexNode]:
        return node.connected_nodes()

    def can_disconnect(self, node: HexNode) -> bool:
        return node.can_disconnect()

    def available_moves(self, node: HexNode) -> List[Position]:
        """指定した駒の移動先（物理的な重複なし）"""
        return node.unique_available_moves()

    def can_place(self, node: HexNode, position: Optional[Position] = None) -> bool:
        """
        手駒を指定位置に置けるか確認
        - 最初の駒は位置を指定せずに置く
        - 2つ目の駒だけは相手の駒に接してもよい
        """
        if node in self:
            return False
        if self.root is None:
            return position is None
        if position is None:
            return False
        if len(self) == 1:
            return (
                position.direction.is_horizontal
                and position.node is self.root
                and position.occupant is None
            )
        return node.can_place(position)

    def place(self, node: HexNode, position: Optional[Position] = None) -> bool:
        """
        手駒をハイブに置く
        返り値: 成功したらTrue、置けない位置ならFalse
        """
        if not self.can_place(node, position):
            return False

        if self.root is None:
            self.root = node
        else:
            node.move(position)
        logger.info("placed %r at %r", node, position)
        return True

    def move(self, node: HexNode, position: Position) -> bool:
        """
        駒を移動する
        返り値: 成功したらTrue、移動できない位置ならFalse
        """
        if not node.can_move_to(position):
            return False
        node.move(position)
        logger.info("moved %r to %r", node, position)
        return True

    def copy(self) -> 'Hive':
        """ハイブ全体の複製を作成"""
        if self.root is None:
            return Hive()
        return Hive(HexNode.clone_structure(self.root))

    @staticmethod
    def traverse(node: HexNode, direction: Direction) -> HexNode:
        """指定方向にたどれる一番先の駒"""
        return node.traverse(direction)

    def __str__(self):
        """rootからの相対座標つきの駒の一覧"""
        if self.root is None:
            return "<empty hive>"
        lines = [f"{self.root} (0, 0, 0)"]
        for route, destination in self.root.derive_paths():
            t = route.translation
            lines.append(f"{destination} ({t.x}, {t.y}, {t.z})")
        return "\n".join(lines)
