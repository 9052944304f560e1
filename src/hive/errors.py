"""
ハイブエンジンの例外階層

StructureError 系は呼び出し側のバグ（契約違反）を表し、捕捉を想定しない。
ルール違反は基本的に can_place / can_disconnect などの真偽値で報告し、
例外になるのは確認を省略して place() を呼んだ場合のみ。
"""

from typing import Any, Dict, Optional

__all__ = [
    "HiveError",
    "StructureError",
    "OccupiedSlotError",
    "BrokenRouteError",
    "DirectionError",
    "RulesViolationError",
    "IllegalPlacementError",
]


class HiveError(Exception):
    """ハイブエンジンの例外の基底クラス"""
    code: str = "HIVE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"


class StructureError(HiveError):
    """隣接構造の不変条件を壊す操作（契約違反）"""
    code: str = "STRUCTURE_ERROR"


class OccupiedSlotError(StructureError):
    """既に駒があるスロットへの接続"""
    code: str = "OCCUPIED_SLOT"


class BrokenRouteError(StructureError):
    """途中に隣接駒がないルートの解決"""
    code: str = "BROKEN_ROUTE"


class DirectionError(StructureError, ValueError):
    """水平方向専用の操作に垂直方向が渡された"""
    code: str = "DIRECTION_ERROR"


class RulesViolationError(HiveError):
    """ゲームルールに反する操作"""
    code: str = "RULES_VIOLATION"


class IllegalPlacementError(RulesViolationError):
    """配置ルールに反する位置への配置"""
    code: str = "ILLEGAL_PLACEMENT"
