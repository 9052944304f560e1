"""
ハイブの駒の種類と色を定義するモジュール
"""

from enum import Enum, auto


class Color(Enum):
    """駒の色"""
    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> 'Color':
        """相手の色を返す"""
        return Color.WHITE if self == Color.BLACK else Color.BLACK


class PieceType(Enum):
    """駒の種類"""
    QUEEN_BEE = auto()    # 女王蜂 - 1マスずつ滑る
    BEETLE = auto()       # 甲虫 - 1マス移動、他の駒に乗れる
    GRASSHOPPER = auto()  # バッタ - 一直線に飛び越える
    SPIDER = auto()       # 蜘蛛 - ちょうど3マス滑る
    SOLDIER_ANT = auto()  # 兵隊蟻 - 外周を何マスでも滑る
    DUMMY = auto()        # 配置判定用の仮の駒


# 各プレイヤーが持つ駒の初期数（手駒の管理はゲーム側の責務）
PIECE_COUNTS = {
    PieceType.QUEEN_BEE: 1,
    PieceType.BEETLE: 2,
    PieceType.GRASSHOPPER: 3,
    PieceType.SPIDER: 2,
    PieceType.SOLDIER_ANT: 3,
}

# 駒の表示記号
PIECE_SYMBOLS = {
    PieceType.QUEEN_BEE: "♕",
    PieceType.BEETLE: "♙",
    PieceType.GRASSHOPPER: "♘",
    PieceType.SPIDER: "♗",
    PieceType.SOLDIER_ANT: "♖",
    PieceType.DUMMY: "♔",
}

# 蜘蛛が1手で滑るマス数
SPIDER_STEPS = 3
