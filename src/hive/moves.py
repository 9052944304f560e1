"""
駒の種類ごとの移動先を生成するモジュール

すべての生成関数は「駒を持ち上げてもハイブが分断されない」ことが
確認済みの状態で呼ばれる前提（HexNode.available_moves が確認する）。
蜘蛛と兵隊蟻は実際に駒を動かして探索し、必ず元の位置に戻す。
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Callable, Dict, List

from .direction import HORIZONTAL_DIRECTIONS, Direction, ZERO
from .navigation import Position, Route
from .piece import SPIDER_STEPS, PieceType

if TYPE_CHECKING:
    from .node import HexNode

logger = logging.getLogger(__name__)


def can_get_in(node: 'HexNode', direction: Direction) -> bool:
    """
    指定方向の隣のマスへ滑り込めるか確認
    両隣が両方とも埋まっている隙間には入れない（甲虫は例外）
    例: UPPER_LEFT と UPPER_RIGHT に駒があれば UP には動けない
    """
    if node.piece_type == PieceType.BEETLE:
        return True
    return any(occupant is None for _, occupant in node.neighbors.adjacent(direction))


def one_step_moves(node: 'HexNode') -> List[Route]:
    """
    隣の駒に沿って1マス滑る移動をすべて返す
    返り値のルートは [隣の駒への方向, 隣の駒から見た空きマスの方向] の2手
    """
    routes: List[Route] = []
    for direction, neighbor in node.neighbors.present():
        if not direction.is_horizontal:
            continue
        # 自分と隣の駒の両方に接する空きマス
        for side, occupant in neighbor.neighbors.adjacent(direction.opposite):
            if occupant is not None:
                continue
            route = Route([direction, side])
            if not can_get_in(node, route.simplified().directions[0]):
                continue
            # 別の駒経由で同じマスに行くルートは1つにまとめる
            if route not in routes:
                routes.append(route)
    return routes


def anchor_position(node: 'HexNode') -> Position:
    """現在の位置を、動かない隣の駒から見た Position で表す"""
    for direction, neighbor in node.neighbors.present():
        if direction.is_horizontal:
            return Position(neighbor, direction.opposite)
    direction, neighbor = node.neighbors.present()[0]
    return Position(neighbor, direction.opposite)


def _queen_bee_moves(node: 'HexNode') -> List[Position]:
    return [Position.resolve(node, route) for route in one_step_moves(node)]


def _beetle_moves(node: 'HexNode') -> List[Position]:
    """
    甲虫の移動先
    - 隣の列に駒があればその一番上に乗る
    - 積まれている場合は土台の隣の空きマスに降りる
    - 地面にいる場合は通常の1マス移動（隙間の制限なし）
    """
    base = node.traverse(Direction.BOTTOM)
    moves = []
    for direction in HORIZONTAL_DIRECTIONS:
        column = base.neighbors[direction]
        if column is not None:
            moves.append(Position(column.traverse(Direction.TOP), Direction.TOP))
        elif base is not node:
            moves.append(Position(base, direction))
    if base is node:
        moves.extend(Position.resolve(node, route) for route in one_step_moves(node))
    return moves


def _grasshopper_moves(node: 'HexNode') -> List[Position]:
    """隣に駒がある方向へ、連続する駒を飛び越えた最初の空きマス"""
    moves = []
    for direction in HORIZONTAL_DIRECTIONS:
        current = node.neighbors[direction]
        if current is None:
            continue
        while current.neighbors[direction] is not None:
            current = current.neighbors[direction]
        moves.append(Position(current, direction))
    return moves


def _spider_moves(node: 'HexNode') -> List[Position]:
    """
    ちょうど SPIDER_STEPS 回の1マス移動でたどり着くマス
    同じ移動の中で一度通ったマス（出発地点を含む）には戻れない
    """
    destinations: List[Position] = []

    def walk(offset, visited, remaining):
        if remaining == 0:
            destinations.append(anchor_position(node))
            return
        for route in one_step_moves(node):
            step = offset + route.translation
            if step in visited:
                continue
            target = Position.resolve(node, route)
            back = anchor_position(node)
            node.move(target)
            try:
                walk(step, visited | {step}, remaining - 1)
            finally:
                node.move(back)

    walk(ZERO, frozenset([ZERO]), SPIDER_STEPS)
    return destinations


def _soldier_ant_moves(node: 'HexNode') -> List[Position]:
    """ハイブの外周を1マス移動の連鎖で行ける限り進んだすべてのマス"""
    if not one_step_moves(node):
        return []

    origin = anchor_position(node)
    visited = {ZERO}
    frontier = deque([(ZERO, origin)])
    destinations: List[Position] = []
    try:
        while frontier:
            offset, position = frontier.popleft()
            node.move(position)
            for route in one_step_moves(node):
                step = offset + route.translation
                if step in visited:
                    continue
                visited.add(step)
                target = Position.resolve(node, route)
                destinations.append(target)
                frontier.append((step, target))
    finally:
        node.move(origin)
    return destinations


def _dummy_moves(node: 'HexNode') -> List[Position]:
    return []


MOVE_GENERATORS: Dict[PieceType, Callable[['HexNode'], List[Position]]] = {
    PieceType.QUEEN_BEE: _queen_bee_moves,
    PieceType.BEETLE: _beetle_moves,
    PieceType.GRASSHOPPER: _grasshopper_moves,
    PieceType.SPIDER: _spider_moves,
    PieceType.SOLDIER_ANT: _soldier_ant_moves,
    PieceType.DUMMY: _dummy_moves,
}


def generate_moves(node: 'HexNode') -> List[Position]:
    """
    駒の種類に応じた移動先を返す（同一の Position は1つにまとめる）
    注意: ハイブ分断の確認は行わない
    """
    moves = list(dict.fromkeys(MOVE_GENERATORS[node.piece_type](node)))
    logger.debug("%r: %d candidate moves", node, len(moves))
    return moves
