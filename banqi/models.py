"""
暗棋状态数据模型

Pydantic 模型用于导出对局快照（CLI JSON 输出、界面层读取）
"""

from pydantic import BaseModel


class PositionModel(BaseModel):
    """位置模型"""

    row: int
    col: int


class CellModel(BaseModel):
    """格子模型

    暗子只暴露 flipped=False，不暴露字形和阵营
    """

    row: int
    col: int
    flipped: bool
    type: str | None = None
    player: str | None = None


class CapturedModel(BaseModel):
    """被吃棋子（按被吃棋子的阵营分组）"""

    red: list[str] = []
    black: list[str] = []


class GameStateModel(BaseModel):
    """对局状态快照"""

    game_id: str
    current_player: str  # "red" / "black" / "?"
    status: str  # "ongoing" / "red wins" / "black wins"
    cells: list[CellModel]
    selected: PositionModel | None = None
    captured: CapturedModel
    flipped_count: int
    remaining: dict[str, int]
