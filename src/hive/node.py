"""
ハイブを構成する駒（六角形のノード）と接続判定を行うモジュール

盤面は存在せず、駒どうしが方向ごとの参照で互いにつながっている。
同じ種類・色の駒でも別の駒として扱う（等価性はインスタンスの同一性）。
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from . import moves
from .direction import ALL_DIRECTIONS, Direction
from .errors import IllegalPlacementError, OccupiedSlotError
from .navigation import Path, Position, Route
from .neighbors import Neighbors
from .piece import PIECE_SYMBOLS, Color, PieceType

logger = logging.getLogger(__name__)


class HexNode:
    """ハイブの駒を表すクラス"""

    def __init__(self, piece_type: PieceType, color: Color = Color.BLACK):
        self.piece_type = piece_type
        self.color = color
        self.neighbors = Neighbors()

    def __str__(self):
        """駒の文字列表現（例: 'b♕', 'w♖'）"""
        prefix = 'b' if self.color == Color.BLACK else 'w'
        return f"{prefix}{PIECE_SYMBOLS[self.piece_type]}"

    def __repr__(self):
        return f"HexNode({self.piece_type.name}, {self.color.name})"

    def value_equals(self, other: 'HexNode') -> bool:
        """種類と色が同じか（同一の駒かどうかではない）"""
        return self.piece_type == other.piece_type and self.color == other.color

    # ---------------------------------------------------------
    # 1. 接続の基本操作
    # ---------------------------------------------------------
    def connect(self, node: 'HexNode', direction: Direction):
        """
        nodeのdirection方向に自分をつなぐ（双方向の参照のみ）
        注意: ハイブ全体との整合は取らない。それは move() が行う
        """
        if node.neighbors[direction] is not None:
            raise OccupiedSlotError(
                "Slot is already occupied",
                context={"node": node, "direction": direction.name},
            )
        node.neighbors[direction] = self
        self.neighbors[direction.opposite] = node

    def remove(self, node: 'HexNode'):
        """隣接テーブルからnodeへの参照を消す（片方向のみ）"""
        self.neighbors = self.neighbors.remove(node)

    def disconnect_from(self, node: 'HexNode'):
        """指定した駒との双方向の接続だけを切る"""
        node.remove(self)
        self.remove(node)

    def disconnect(self):
        """すべての隣の駒との接続を切り、ハイブから取り除く"""
        for _, node in self.neighbors.present():
            self.disconnect_from(node)

    def has_neighbor(self, other: 'HexNode') -> Optional[Direction]:
        return self.neighbors.contains(other)

    def traverse(self, direction: Direction) -> 'HexNode':
        """指定方向にたどれる一番先の駒（例: TOP なら積み重ねの一番上）"""
        current = self
        while current.neighbors[direction] is not None:
            current = current.neighbors[direction]
        return current

    # ---------------------------------------------------------
    # 2. 連結性
    # ---------------------------------------------------------
    def connected_nodes(self) -> List['HexNode']:
        """自分を含め、つながっているすべての駒（ハイブ全体）"""
        visited = {self}
        ordered = [self]
        queue = deque([self])
        while queue:
            current = queue.popleft()
            for _, neighbor in current.neighbors.present():
                if neighbor not in visited:
                    visited.add(neighbor)
                    ordered.append(neighbor)
                    queue.append(neighbor)
        return ordered

    def num_connected(self) -> int:
        return len(self.connected_nodes())

    def derive_paths(self) -> List[Path]:
        """
        自分以外のすべての駒へのパスを返す
        幅優先なので、各パスの途中の駒へのパスは必ずそれより前に並ぶ
        """
        paths: List[Path] = []
        visited = {self}
        queue = deque([(self, Route())])
        while queue:
            current, route = queue.popleft()
            for direction, neighbor in current.neighbors.present():
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                path = Path(route.append([direction]), neighbor)
                paths.append(path)
                queue.append((neighbor, path.route))
        return paths

    def can_disconnect(self) -> bool:
        """
        この駒を持ち上げてもハイブが分断されないか確認
        一時的に接続を切って各隣の駒から数え直し、必ず元に戻す
        """
        # 上に駒が乗っている駒は動かせない
        if self.neighbors[Direction.TOP] is not None:
            return False

        present = self.neighbors.present()
        total = self.num_connected()
        self.disconnect()
        try:
            result = all(node.num_connected() == total - 1 for _, node in present)
        finally:
            for direction, node in present:
                self.connect(node, direction.opposite)

        logger.debug("can_disconnect(%r) = %s", self, result)
        return result

    # ---------------------------------------------------------
    # 3. 移動と配置
    # ---------------------------------------------------------
    def move(self, position: Position):
        """
        駒をハイブから外して指定位置につなぎ直す
        指定位置の駒以外にも隣になる駒があれば、それらとも接続する
        注意: 移動が合法かどうかは確認しない
        """
        self.disconnect()
        self.connect(position.node, position.direction)
        self._infer_additional_connections(position.node, position.direction)

    def move_to(self, direction: Direction, node: 'HexNode'):
        self.move(Position(node, direction))

    def move_by(self, route: Route):
        """自分からのルートをたどった位置へ移動"""
        self.move(Position.resolve(self, route))

    def _infer_additional_connections(self, node: 'HexNode', direction: Direction):
        # nodeへの方向は接続済みなので除く
        candidates = {
            d.translation: d for d in ALL_DIRECTIONS if d != direction.opposite
        }
        for route, destination in self.derive_paths():
            d = candidates.get(route.translation)
            if d is not None:
                destination.connect(self, d)

    def can_place(self, position: Position) -> bool:
        """
        手駒をこの位置に新しく置けるか確認
        置いた位置で相手の色の駒（各列の一番上）に接してはいけない
        """
        if not position.direction.is_horizontal:
            return False
        if position.occupant is not None:
            return False
        # 積み重ねの上の段には直接置けない
        if position.node.neighbors[Direction.BOTTOM] is not None:
            return False

        dummy = HexNode(PieceType.DUMMY, self.color)
        dummy.move(position)
        try:
            opponents = [
                node for _, node in dummy.neighbors.present()
                if node.traverse(Direction.TOP).color != self.color
            ]
        finally:
            dummy.disconnect()
        return len(opponents) == 0

    def place(self, position: Position):
        """
        手駒をハイブに置く
        置けない位置の場合は IllegalPlacementError
        """
        if len(self.neighbors) != 0:
            raise IllegalPlacementError(
                "Piece is still connected to the hive", context={"node": self}
            )
        if not self.can_place(position):
            raise IllegalPlacementError(
                "Cannot place piece here", context={"node": self, "position": position}
            )
        self.move(position)

    def place_at(self, direction: Direction, node: 'HexNode'):
        self.place(Position(node, direction))

    # ---------------------------------------------------------
    # 4. 移動先の生成
    # ---------------------------------------------------------
    def available_moves(self) -> List[Position]:
        """移動先の候補（同じマスを別の駒から指す候補を含むことがある）"""
        if not self.can_disconnect():
            return []
        return moves.generate_moves(self)

    def unique_available_moves(self) -> List[Position]:
        """物理的に重複しない移動先を返す"""
        candidates = self.available_moves()
        if not candidates:
            return []

        routes = self._routes_by_node()
        unique: Dict[Tuple[Direction, ...], Route] = {}
        for position in candidates:
            route = routes[position.node].append([position.direction])
            unique.setdefault(self._route_key(route), route)

        logger.debug(
            "%r: %d candidates collapsed to %d", self, len(candidates), len(unique)
        )
        return [Position.resolve(self, route) for route in unique.values()]

    def can_move(self) -> bool:
        """この駒が動ける場所があるか"""
        return len(self.available_moves()) > 0

    def can_move_to(self, position: Position) -> bool:
        """指定位置が物理的に移動先のどれかと一致するか"""
        candidates = self.available_moves()
        if not candidates:
            return False

        routes = self._routes_by_node()
        if position.node not in routes:
            return False
        target = self._route_key(routes[position.node].append([position.direction]))
        return any(
            self._route_key(routes[c.node].append([c.direction])) == target
            for c in candidates
        )

    def _routes_by_node(self) -> Dict['HexNode', Route]:
        return {path.destination: path.route for path in self.derive_paths()}

    @staticmethod
    def _route_key(route: Route) -> Tuple[Direction, ...]:
        return tuple(route.simplified().directions)

    # ---------------------------------------------------------
    # 5. 複製
    # ---------------------------------------------------------
    def clone(self) -> 'HexNode':
        """同じ種類・色の新しい駒（接続は含まない）"""
        return HexNode(self.piece_type, self.color)

    @staticmethod
    def clone_structure(root: 'HexNode') -> 'HexNode':
        """
        rootにつながるハイブ全体を同じ形で複製し、複製後のrootを返す
        rootからのパスを順にたどり直して各駒の複製を置いていく
        """
        new_root = root.clone()
        for route, destination in root.derive_paths():
            destination.clone().move(Position.resolve(new_root, route))
        return new_root
