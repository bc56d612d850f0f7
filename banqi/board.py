"""
暗棋棋盘

负责生成洗好的 32 枚棋子并摆进 4x8 棋盘。
棋盘就是一个二维列表，空格为 None；规则判断只读取它，不修改它。
"""

from __future__ import annotations

import random
from typing import Iterator

from banqi.pieces import PIECE_COUNTS, Piece
from banqi.types import COLS, ROWS, Color, Position

Board = list[list[Piece | None]]


def initialize_pieces(rng: random.Random | None = None) -> list[Piece]:
    """生成并洗乱全部棋子

    先黑后红按目录顺序生成 32 枚棋子，然后 Fisher-Yates 洗牌：
    从最后一个下标往前到 1，每次与 [0, i] 中均匀选出的下标交换。

    Args:
        rng: 随机数生成器（可选，用于复现棋局）；默认使用全局 random

    Returns:
        洗乱后的棋子列表
    """
    rand = rng or random
    all_pieces: list[Piece] = []

    for color in [Color.BLACK, Color.RED]:
        for glyph, count in PIECE_COUNTS[color].items():
            all_pieces.extend(Piece(glyph, color) for _ in range(count))

    for i in range(len(all_pieces) - 1, 0, -1):
        j = rand.randint(0, i)
        all_pieces[i], all_pieces[j] = all_pieces[j], all_pieces[i]

    return all_pieces


def empty_board() -> Board:
    """创建空棋盘"""
    return [[None for _ in range(COLS)] for _ in range(ROWS)]


def create_board(pieces: list[Piece]) -> Board:
    """按行优先顺序把棋子摆进 4x8 棋盘

    棋子不够时剩余格子留空，多出的棋子忽略。
    """
    board = empty_board()
    piece_iter = iter(pieces)

    for row in range(ROWS):
        for col in range(COLS):
            piece = next(piece_iter, None)
            if piece is None:
                return board
            board[row][col] = piece

    return board


def copy_board(board: Board) -> Board:
    """复制棋盘（棋子不可变，浅拷贝每一行即可）"""
    return [list(row) for row in board]


def in_bounds(row: int, col: int) -> bool:
    """坐标是否在棋盘内"""
    return 0 <= row < ROWS and 0 <= col < COLS


def get_piece(board: Board, row: int, col: int) -> Piece | None:
    """获取指定位置的棋子

    越界坐标视为没有棋子（负数下标不会回绕）。
    """
    if not in_bounds(row, col):
        return None
    return board[row][col]


def iter_pieces(board: Board) -> Iterator[tuple[Position, Piece]]:
    """按行优先顺序遍历棋盘上的棋子"""
    for row, cells in enumerate(board):
        for col, piece in enumerate(cells):
            if piece is not None:
                yield Position(row, col), piece


def count_pieces(board: Board, color: Color | None = None) -> int:
    """统计棋子数量，可按阵营过滤"""
    return sum(1 for _, piece in iter_pieces(board) if color is None or piece.player == color)
