"""
暗棋核心类型定义

定义暗棋（翻棋）中所有基础数据类型
"""

from enum import Enum
from typing import NamedTuple

# 棋盘尺寸：4 行 8 列，正好容纳 32 枚棋子
ROWS = 4
COLS = 8


class Color(Enum):
    """棋子颜色/阵营"""

    RED = "red"
    BLACK = "black"

    @property
    def opposite(self) -> "Color":
        """获取对方阵营"""
        return Color.BLACK if self == Color.RED else Color.RED


class Turn(Enum):
    """当前走棋方

    开局第一步是翻棋，翻出之前无法确定谁先走，所以有第三种状态
    """

    RED = "red"
    BLACK = "black"
    # 显示为 "?"
    UNKNOWN = "?"

    @classmethod
    def of(cls, color: Color) -> "Turn":
        """由阵营得到回合"""
        return cls.RED if color == Color.RED else cls.BLACK

    @property
    def color(self) -> Color | None:
        """回合对应的阵营，未确定时为 None"""
        if self == Turn.RED:
            return Color.RED
        if self == Turn.BLACK:
            return Color.BLACK
        return None

    def after_flip(self, revealed: Color) -> "Turn":
        """翻棋之后轮到谁

        - 首次翻棋：轮到翻出棋子的对方
        - 之后：严格红黑交替
        """
        if self == Turn.UNKNOWN:
            return Turn.of(revealed.opposite)
        return self.next()

    def next(self) -> "Turn":
        """交换回合（未确定时保持不变）"""
        if self == Turn.RED:
            return Turn.BLACK
        if self == Turn.BLACK:
            return Turn.RED
        return Turn.UNKNOWN


class PieceKind(Enum):
    """棋子种类（红黑共用）"""

    # 将/帅
    GENERAL = "general"
    # 士/仕
    ADVISOR = "advisor"
    # 象/相
    ELEPHANT = "elephant"
    # 車/俥
    CHARIOT = "chariot"
    # 馬/傌
    HORSE = "horse"
    # 包/炮
    CANNON = "cannon"
    # 卒/兵
    SOLDIER = "soldier"

    @property
    def rank(self) -> int:
        """等级：1 最强，7 最弱"""
        return _KIND_RANKS[self]


_KIND_RANKS: dict[PieceKind, int] = {
    PieceKind.GENERAL: 1,
    PieceKind.ADVISOR: 2,
    PieceKind.ELEPHANT: 3,
    PieceKind.CHARIOT: 4,
    PieceKind.HORSE: 5,
    PieceKind.CANNON: 6,
    PieceKind.SOLDIER: 7,
}


class GameStatus(Enum):
    """游戏状态"""

    ONGOING = "ongoing"
    RED_WINS = "red wins"
    BLACK_WINS = "black wins"

    @property
    def is_over(self) -> bool:
        return self != GameStatus.ONGOING


class Position(NamedTuple):
    """棋盘位置 (row, col)

    row: 0-3
    col: 0-7
    """

    row: int
    col: int

    def is_valid(self) -> bool:
        """检查位置是否在棋盘范围内"""
        return 0 <= self.row < ROWS and 0 <= self.col < COLS

    def to_notation(self) -> str:
        """转换为 "row,col" 记法"""
        return f"{self.row},{self.col}"

    @classmethod
    def from_notation(cls, notation: str) -> "Position":
        """从 "row,col" 记法解析"""
        row, col = notation.split(",")
        return cls(int(row.strip()), int(col.strip()))
