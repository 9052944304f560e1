"""
ハイブのゲームエンジン - パッケージ初期化
"""

from .direction import Direction, Translation, ALL_DIRECTIONS, HORIZONTAL_DIRECTIONS
from .piece import Color, PieceType, PIECE_COUNTS, PIECE_SYMBOLS, SPIDER_STEPS
from .neighbors import Neighbors
from .navigation import Route, Position, Path
from .node import HexNode
from .hive import Hive
from .errors import (
    HiveError,
    StructureError,
    OccupiedSlotError,
    BrokenRouteError,
    DirectionError,
    RulesViolationError,
    IllegalPlacementError,
)

__all__ = [
    'Direction',
    'Translation',
    'ALL_DIRECTIONS',
    'HORIZONTAL_DIRECTIONS',
    'Color',
    'PieceType',
    'PIECE_COUNTS',
    'PIECE_SYMBOLS',
    'SPIDER_STEPS',
    'Neighbors',
    'Route',
    'Position',
    'Path',
    'HexNode',
    'Hive',
    'HiveError',
    'StructureError',
    'OccupiedSlotError',
    'BrokenRouteError',
    'DirectionError',
    'RulesViolationError',
    'IllegalPlacementError',
]
