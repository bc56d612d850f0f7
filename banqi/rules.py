"""
暗棋走法规则

- 普通棋子：上下左右走一格，吃子按等级比较（兵/卒吃将/帥，将/帥不能吃兵/卒）
- 炮/包：必须沿同一行或同一列隔一个棋子（炮架）吃对方棋子，不能空走

所有函数都是纯函数，只读棋盘；非法输入一律返回 False，不抛异常。
"""

from __future__ import annotations

from banqi.board import Board, get_piece, in_bounds
from banqi.pieces import Piece, piece_rank
from banqi.types import COLS, ROWS, Position

GENERAL_RANK = 1
SOLDIER_RANK = 7


def is_adjacent_move(start_row: int, start_col: int, end_row: int, end_col: int) -> bool:
    """是否为上下左右一格的走法"""
    row_diff = end_row - start_row
    col_diff = end_col - start_col
    return (abs(row_diff) == 1 and col_diff == 0) or (abs(col_diff) == 1 and row_diff == 0)


def can_capture_rank(attacker_rank: int, target_rank: int) -> bool:
    """按等级判断能否吃子

    数字小的等级高，等级相同也可以互吃。两个例外：
    - 兵/卒 (7) 可以吃将/帥 (1)
    - 将/帥 (1) 不能吃兵/卒 (7)
    """
    if attacker_rank == SOLDIER_RANK and target_rank == GENERAL_RANK:
        return True
    if attacker_rank == GENERAL_RANK and target_rank == SOLDIER_RANK:
        return False
    return attacker_rank <= target_rank


def can_capture(attacker_type: str, target_type: str) -> bool:
    """按字形判断能否吃子"""
    return can_capture_rank(piece_rank(attacker_type), piece_rank(target_type))


def count_pieces_between(
    board: Board, start_row: int, start_col: int, end_row: int, end_col: int
) -> int:
    """统计同一行或同一列两点之间（不含两端）的棋子数

    不在同一直线上时返回 0。
    """
    count = 0

    if start_row == end_row:
        lo, hi = sorted((start_col, end_col))
        for col in range(lo + 1, hi):
            if get_piece(board, start_row, col) is not None:
                count += 1
    elif start_col == end_col:
        lo, hi = sorted((start_row, end_row))
        for row in range(lo + 1, hi):
            if get_piece(board, row, start_col) is not None:
                count += 1

    return count


def is_valid_cannon_move(
    board: Board,
    piece1: Piece,
    piece2: Piece | None,
    start_row: int,
    start_col: int,
    end_row: int,
    end_col: int,
) -> bool:
    """炮/包走法：只能吃子，且必须恰好隔一个棋子"""
    # 必须吃对方棋子
    if piece2 is None or piece1.player == piece2.player:
        return False

    # 必须在同一直线上
    if start_row != end_row and start_col != end_col:
        return False

    return count_pieces_between(board, start_row, start_col, end_row, end_col) == 1


def is_valid_move(
    board: Board, start_row: int, start_col: int, end_row: int, end_col: int
) -> bool:
    """检查走法是否合法

    调用方负责检查棋子是否已翻开、是否属于当前走棋方；
    这里只要求起点有棋子。越界坐标视为没有棋子。
    """
    if not in_bounds(end_row, end_col):
        return False

    piece1 = get_piece(board, start_row, start_col)
    piece2 = get_piece(board, end_row, end_col)

    if piece1 is None:
        return False

    if piece1.is_cannon:
        return is_valid_cannon_move(
            board, piece1, piece2, start_row, start_col, end_row, end_col
        )

    if not is_adjacent_move(start_row, start_col, end_row, end_col):
        return False

    # 走到空格
    if piece2 is None:
        return True

    # 不能吃自己的棋子
    if piece1.player == piece2.player:
        return False

    return can_capture(piece1.type, piece2.type)


def legal_targets(board: Board, row: int, col: int) -> list[Position]:
    """获取指定棋子所有合法的目标位置（行优先顺序）"""
    if get_piece(board, row, col) is None:
        return []
    return [
        Position(r, c)
        for r in range(ROWS)
        for c in range(COLS)
        if is_valid_move(board, row, col, r, c)
    ]
