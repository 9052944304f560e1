"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def make_node():
    """駒を作るファクトリ"""
    from src.hive import HexNode, PieceType, Color

    def _make(piece_type=PieceType.QUEEN_BEE, color=Color.BLACK):
        return HexNode(piece_type, color)
    return _make


@pytest.fixture
def line_of_three(make_node):
    """縦一列に並んだ3つの駒 A-B-C（B は A の UP、C は B の UP）"""
    from src.hive import Direction
    a, b, c = make_node(), make_node(), make_node()
    b.move_to(Direction.UP, a)
    c.move_to(Direction.UP, b)
    return a, b, c


@pytest.fixture
def gated_queen(make_node):
    """
    女王蜂の UP のマスが周りを5つの駒に囲まれた穴になっている配置
    女王蜂から UP へは UPPER_LEFT と UPPER_RIGHT の間を通れない
    返り値: (女王蜂, UPPER_LEFTの駒, UPPER_RIGHTの駒)
    """
    from src.hive import Direction
    queen = make_node()
    left, arc1, arc2, arc3, right = (make_node() for _ in range(5))
    left.move_to(Direction.UPPER_LEFT, queen)    # (-1, 1)
    arc1.move_to(Direction.UP, left)             # (-1, 3)
    arc2.move_to(Direction.UPPER_RIGHT, arc1)    # (0, 4)
    arc3.move_to(Direction.LOWER_RIGHT, arc2)    # (1, 3)
    right.move_to(Direction.DOWN, arc3)          # (1, 1)
    return queen, left, right


@pytest.fixture
def snapshot():
    """すべての駒の隣接テーブルを写し取る関数"""
    def _snapshot(nodes):
        return [(node, node.neighbors.copy()) for node in nodes]
    return _snapshot


@pytest.fixture
def offset_of():
    """origin から見た Position の相対移動量を求める関数"""
    from src.hive import Route

    def _offset(origin, position):
        routes = {path.destination: path.route for path in origin.derive_paths()}
        routes[origin] = Route()
        return routes[position.node].append([position.direction]).translation
    return _offset


@pytest.fixture
def layout_of():
    """root からの相対座標 -> (種類, 色) の辞書を作る関数"""
    from src.hive import Translation

    def _layout(root):
        layout = {Translation(): (root.piece_type, root.color)}
        for route, destination in root.derive_paths():
            layout[route.translation] = (destination.piece_type, destination.color)
        return layout
    return _layout
