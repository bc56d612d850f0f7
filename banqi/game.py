"""
暗棋对局管理类

管理棋盘、翻开的格子、回合、选中的棋子和被吃棋子。
界面层每次点击调用 click()，由这里决定是翻棋、选子还是走棋。
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from banqi.board import (
    Board,
    copy_board,
    count_pieces,
    create_board,
    get_piece,
    in_bounds,
    initialize_pieces,
)
from banqi.logging import logger
from banqi.models import CapturedModel, CellModel, GameStateModel, PositionModel
from banqi.rules import is_valid_move, legal_targets
from banqi.types import COLS, ROWS, Color, GameStatus, Position, Turn
from banqi.winner import check_winner, status_for


class ClickOutcome(Enum):
    """一次点击的结果"""

    # 对局已结束或坐标越界，什么都没发生
    IGNORED = "ignored"
    FLIPPED = "flipped"
    SELECTED = "selected"
    MOVED = "moved"
    CAPTURED = "captured"
    # 不允许的操作，状态不变（走法非法时会清除选中）
    REJECTED = "rejected"


@dataclass
class GameConfig:
    """游戏配置"""

    seed: int | None = None  # 随机种子（用于复现棋局）


class DarkChessGame:
    """暗棋对局"""

    def __init__(self, game_id: str | None = None, config: GameConfig | None = None):
        self.game_id = game_id or str(uuid4())
        self.config = config or GameConfig()
        self._rng = random.Random(self.config.seed) if self.config.seed is not None else None
        self.reset()

    @classmethod
    def from_board(
        cls,
        board: Board,
        flipped: set[Position] | None = None,
        turn: Turn = Turn.UNKNOWN,
        game_id: str | None = None,
    ) -> DarkChessGame:
        """用指定的棋盘创建对局（残局、测试用），不会洗牌"""
        game = cls.__new__(cls)
        game.game_id = game_id or str(uuid4())
        game.config = GameConfig()
        game._rng = None
        game._load(copy_board(board), set(flipped or ()), turn)
        return game

    def reset(self) -> None:
        """重新开局：重新洗牌摆子，清空所有状态"""
        self._load(create_board(initialize_pieces(self._rng)), set(), Turn.UNKNOWN)
        logger.debug(f"Game {self.game_id} reset (seed={self.config.seed})")

    def _load(self, board: Board, flipped: set[Position], turn: Turn) -> None:
        self.board: Board = board
        self.flipped: set[Position] = flipped
        self.current_player = turn
        self.selected: Position | None = None
        self.captured: dict[Color, list[str]] = {Color.RED: [], Color.BLACK: []}
        self.status = status_for(check_winner(board))

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    def is_flipped(self, row: int, col: int) -> bool:
        return Position(row, col) in self.flipped

    def snapshot(self) -> Board:
        """当前棋盘的副本"""
        return copy_board(self.board)

    def click(self, row: int, col: int) -> ClickOutcome:
        """处理一次点击

        - 点击暗子：翻开
        - 已选中棋子：尝试走到点击位置，无论成败都清除选中
        - 未选中：选中当前走棋方已翻开的棋子
        """
        if self.is_over or not in_bounds(row, col):
            return ClickOutcome.IGNORED

        pos = Position(row, col)
        piece = self.board[row][col]

        if piece is not None and pos not in self.flipped:
            self.flip(row, col)
            return ClickOutcome.FLIPPED

        if self.selected is not None:
            start = self.selected
            moved = self.move(start.row, start.col, row, col)
            self.selected = None
            if not moved:
                return ClickOutcome.REJECTED
            return ClickOutcome.CAPTURED if piece is not None else ClickOutcome.MOVED

        if self.select(row, col):
            return ClickOutcome.SELECTED
        return ClickOutcome.REJECTED

    def flip(self, row: int, col: int) -> bool:
        """翻开暗子

        首次翻棋后轮到翻出棋子的对方，之后红黑交替。翻开后清除选中。

        Returns:
            是否成功翻开
        """
        if self.is_over:
            return False

        piece = get_piece(self.board, row, col)
        pos = Position(row, col)
        if piece is None or pos in self.flipped:
            return False

        self.flipped.add(pos)
        self.current_player = self.current_player.after_flip(piece.player)
        self.selected = None
        logger.debug(f"Flip {pos.to_notation()}: {piece.player.value} {piece.type}")
        self._update_status()
        return True

    def select(self, row: int, col: int) -> bool:
        """选中当前走棋方已翻开的棋子

        对方棋子、暗子、空格都不能选中，状态不变。
        """
        if self.is_over:
            return False

        piece = get_piece(self.board, row, col)
        if piece is None or not self.is_flipped(row, col):
            return False
        if piece.player != self.current_player.color:
            return False

        self.selected = Position(row, col)
        return True

    def move(self, start_row: int, start_col: int, end_row: int, end_col: int) -> bool:
        """走棋（包括吃子）

        起点必须是当前走棋方已翻开的棋子，终点必须是空格或已翻开的棋子。
        被吃的棋子记在其所属阵营名下。

        Returns:
            是否成功
        """
        if self.is_over:
            return False

        piece = get_piece(self.board, start_row, start_col)
        if piece is None or not self.is_flipped(start_row, start_col):
            return False
        if piece.player != self.current_player.color:
            return False

        target = get_piece(self.board, end_row, end_col)
        if target is not None and not self.is_flipped(end_row, end_col):
            return False

        if not is_valid_move(self.board, start_row, start_col, end_row, end_col):
            logger.debug(
                f"Rejected {piece.type} {start_row},{start_col}-{end_row},{end_col}"
            )
            return False

        self.board[start_row][start_col] = None
        if target is not None:
            self.captured[target.player].append(target.type)
            logger.debug(f"{piece.type} captures {target.type} at {end_row},{end_col}")
        self.board[end_row][end_col] = piece
        self.flipped.add(Position(end_row, end_col))

        self.current_player = self.current_player.next()
        self._update_status()
        return True

    def targets_from(self, row: int, col: int) -> list[Position]:
        """某棋子的合法目标（暗子不能被吃，排除在外）"""
        return [
            pos
            for pos in legal_targets(self.board, row, col)
            if self.board[pos.row][pos.col] is None or pos in self.flipped
        ]

    def legal_targets_for_selection(self) -> list[Position]:
        """已选中棋子的所有合法目标"""
        if self.selected is None:
            return []
        return self.targets_from(self.selected.row, self.selected.col)

    def remaining(self, color: Color) -> int:
        """某方剩余棋子数"""
        return count_pieces(self.board, color)

    def _update_status(self) -> None:
        self.status = status_for(check_winner(self.board))
        if self.is_over:
            logger.info(f"Game {self.game_id} over: {self.status.value}")

    def to_state(self) -> GameStateModel:
        """导出对局快照（不暴露暗子身份）"""
        cells = []
        for row in range(ROWS):
            for col in range(COLS):
                piece = self.board[row][col]
                flipped = Position(row, col) in self.flipped
                if piece is not None and flipped:
                    cells.append(CellModel(row=row, col=col, flipped=True, **piece.to_dict()))
                else:
                    cells.append(CellModel(row=row, col=col, flipped=flipped))

        return GameStateModel(
            game_id=self.game_id,
            current_player=self.current_player.value,
            status=self.status.value,
            cells=cells,
            selected=(
                PositionModel(row=self.selected.row, col=self.selected.col)
                if self.selected
                else None
            ),
            captured=CapturedModel(
                red=list(self.captured[Color.RED]),
                black=list(self.captured[Color.BLACK]),
            ),
            flipped_count=len(self.flipped),
            remaining={
                "red": self.remaining(Color.RED),
                "black": self.remaining(Color.BLACK),
            },
        )

    def to_dict(self) -> dict:
        """序列化为字典（不暴露暗子身份）"""
        return self.to_state().model_dump()

    def __repr__(self) -> str:
        return (
            f"DarkChessGame({self.game_id}, player={self.current_player.value}, "
            f"status={self.status.value}, flipped={len(self.flipped)})"
        )
