"""
暗棋 (Banqi / Dark Chess) - 中国象棋变体

32 枚棋子反面朝上随机摆在 4x8 棋盘上，玩家轮流翻棋或走棋，
按等级吃子，炮隔子吃子，吃光对方全部棋子者胜。
"""

from banqi.types import Color, GameStatus, PieceKind, Position, Turn
from banqi.pieces import BLACK_PIECE_COUNTS, PIECE_NUMBER, RED_PIECE_COUNTS, Piece
from banqi.board import Board, create_board, initialize_pieces
from banqi.rules import (
    can_capture,
    can_capture_rank,
    count_pieces_between,
    is_adjacent_move,
    is_valid_cannon_move,
    is_valid_move,
    legal_targets,
)
from banqi.winner import check_winner
from banqi.game import ClickOutcome, DarkChessGame, GameConfig

__all__ = [
    "Color",
    "GameStatus",
    "PieceKind",
    "Position",
    "Turn",
    "BLACK_PIECE_COUNTS",
    "PIECE_NUMBER",
    "RED_PIECE_COUNTS",
    "Piece",
    "Board",
    "create_board",
    "initialize_pieces",
    "can_capture",
    "can_capture_rank",
    "count_pieces_between",
    "is_adjacent_move",
    "is_valid_cannon_move",
    "is_valid_move",
    "legal_targets",
    "check_winner",
    "ClickOutcome",
    "DarkChessGame",
    "GameConfig",
]
