"""
暗棋棋子定义

棋子目录：14 种字形、等级表和每方的棋子数量。
红黑双方各有一套字形，但同一种类的等级相同，吃子比较的是等级而不是字形。
"""

from __future__ import annotations

from dataclasses import dataclass

from banqi.types import Color, PieceKind

# 字形 -> 等级（1 最强，7 最弱）
PIECE_NUMBER: dict[str, int] = {
    "將": 1, "士": 2, "象": 3, "車": 4, "馬": 5, "包": 6, "卒": 7,
    "帥": 1, "仕": 2, "相": 3, "俥": 4, "傌": 5, "炮": 6, "兵": 7,
}  # fmt: skip

# 每方的棋子数量（按目录顺序）
BLACK_PIECE_COUNTS: dict[str, int] = {
    "將": 1, "士": 2, "象": 2, "車": 2, "馬": 2, "包": 2, "卒": 5,
}  # fmt: skip

RED_PIECE_COUNTS: dict[str, int] = {
    "帥": 1, "仕": 2, "相": 2, "俥": 2, "傌": 2, "炮": 2, "兵": 5,
}  # fmt: skip

PIECE_COUNTS: dict[Color, dict[str, int]] = {
    Color.BLACK: BLACK_PIECE_COUNTS,
    Color.RED: RED_PIECE_COUNTS,
}

# (种类, 阵营) -> 字形
GLYPHS: dict[tuple[PieceKind, Color], str] = {
    (PieceKind.GENERAL, Color.BLACK): "將",
    (PieceKind.ADVISOR, Color.BLACK): "士",
    (PieceKind.ELEPHANT, Color.BLACK): "象",
    (PieceKind.CHARIOT, Color.BLACK): "車",
    (PieceKind.HORSE, Color.BLACK): "馬",
    (PieceKind.CANNON, Color.BLACK): "包",
    (PieceKind.SOLDIER, Color.BLACK): "卒",
    (PieceKind.GENERAL, Color.RED): "帥",
    (PieceKind.ADVISOR, Color.RED): "仕",
    (PieceKind.ELEPHANT, Color.RED): "相",
    (PieceKind.CHARIOT, Color.RED): "俥",
    (PieceKind.HORSE, Color.RED): "傌",
    (PieceKind.CANNON, Color.RED): "炮",
    (PieceKind.SOLDIER, Color.RED): "兵",
}

# 字形 -> 种类
PIECE_KINDS: dict[str, PieceKind] = {glyph: kind for (kind, _), glyph in GLYPHS.items()}


def piece_rank(glyph: str) -> int:
    """查询字形的等级，未知字形抛出 KeyError"""
    return PIECE_NUMBER[glyph]


def piece_kind(glyph: str) -> PieceKind:
    """查询字形的种类，未知字形抛出 KeyError"""
    return PIECE_KINDS[glyph]


@dataclass(frozen=True)
class Piece:
    """暗棋棋子

    身份在洗牌时确定，之后不再改变。

    Attributes:
        type: 字形，如 "車"、"炮"
        player: 所属阵营
    """

    type: str
    player: Color

    def __post_init__(self) -> None:
        if self.type not in PIECE_NUMBER:
            raise ValueError(f"Unknown piece glyph: {self.type!r}")

    @property
    def kind(self) -> PieceKind:
        return piece_kind(self.type)

    @property
    def rank(self) -> int:
        return PIECE_NUMBER[self.type]

    @property
    def is_cannon(self) -> bool:
        return self.kind == PieceKind.CANNON

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {"type": self.type, "player": self.player.value}

    def __repr__(self) -> str:
        return f"Piece({self.player.value}, {self.type})"
