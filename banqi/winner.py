"""
暗棋胜负判定

胜负规则是全歼：一方棋盘上没有任何棋子即告负，吃掉将/帥并不直接获胜。
"""

from __future__ import annotations

from banqi.board import Board
from banqi.types import Color, GameStatus


def check_winner(board: Board) -> Color | None:
    """判断胜者

    Returns:
        红方无子返回 BLACK，黑方无子返回 RED，双方都有子返回 None。
        双方都无子的局面走棋无法达到，此时先检查红方，返回 BLACK。
    """
    red_found = False
    black_found = False

    for row in board:
        for piece in row:
            if piece is None:
                continue
            if piece.player == Color.BLACK:
                black_found = True
            elif piece.player == Color.RED:
                red_found = True

    if not red_found:
        return Color.BLACK
    if not black_found:
        return Color.RED
    return None


def status_for(winner: Color | None) -> GameStatus:
    """把胜者转换为游戏状态"""
    if winner == Color.RED:
        return GameStatus.RED_WINS
    if winner == Color.BLACK:
        return GameStatus.BLACK_WINS
    return GameStatus.ONGOING
