"""
暗棋命令行

- new: 洗牌并显示新棋盘
- play: 依次执行点击并显示结果局面
- moves: 显示某个已翻开棋子的合法目标
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from banqi.game import DarkChessGame, GameConfig
from banqi.types import COLS, ROWS, Color, Position

console = Console()
app = typer.Typer(help="Dark Chess (Banqi) rule engine")

# 暗子和空格的显示字符
HIDDEN_CHAR = "暗"
EMPTY_CHAR = "十"


def render_board(game: DarkChessGame, reveal: bool = False) -> Table:
    """生成棋盘表格

    Args:
        game: 对局
        reveal: 是否显示暗子真实身份（调试用）
    """
    table = Table(show_header=True, show_lines=True)
    table.add_column("")
    for col in range(COLS):
        table.add_column(str(col), justify="center")

    targets = set(game.legal_targets_for_selection())
    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            piece = game.board[row][col]
            pos = Position(row, col)
            if piece is None:
                text = "·" if pos in targets else EMPTY_CHAR
            elif pos in game.flipped or reveal:
                style = "bold red" if piece.player == Color.RED else "bold"
                if pos == game.selected:
                    style += " reverse"
                elif pos in targets:
                    style += " underline"
                text = f"[{style}]{piece.type}[/]"
                if pos not in game.flipped:
                    text = f"({text})"
            else:
                text = HIDDEN_CHAR
            cells.append(text)
        table.add_row(str(row), *cells)
    return table


def print_status(game: DarkChessGame) -> None:
    """打印当前玩家、状态和被吃棋子"""
    console.print(f"Current Player: {game.current_player.value}")
    console.print(f"Game Status: {game.status.value}")
    console.print(f"Captured Pieces: Red  : {', '.join(game.captured[Color.RED])}")
    console.print(f"Captured Pieces: Black: {', '.join(game.captured[Color.BLACK])}")


def parse_clicks(clicks: list[str]) -> list[Position]:
    """解析 "row,col" 列表，格式错误抛出 ValueError"""
    positions = []
    for click in clicks:
        try:
            positions.append(Position.from_notation(click))
        except ValueError:
            raise ValueError(f"Invalid click {click!r}, expected ROW,COL") from None
    return positions


def replay(seed: int | None, clicks: list[str] | None) -> DarkChessGame:
    """按种子开局并依次执行点击；点击格式错误时退出"""
    try:
        positions = parse_clicks(clicks or [])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1)

    game = DarkChessGame(config=GameConfig(seed=seed))
    for pos in positions:
        game.click(pos.row, pos.col)
    return game


@app.command()
def new(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="随机种子"),
    reveal: bool = typer.Option(False, "--reveal", help="显示暗子身份"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """洗牌并显示新棋盘"""
    game = DarkChessGame(config=GameConfig(seed=seed))
    if output_json:
        print(game.to_state().model_dump_json(indent=2))
        return
    console.print(render_board(game, reveal=reveal))
    print_status(game)


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="随机种子"),
    clicks: Optional[list[str]] = typer.Option(None, "--click", "-c", help="点击位置 ROW,COL（可重复）"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """依次执行点击并显示结果局面"""
    game = replay(seed, clicks)
    if output_json:
        print(game.to_state().model_dump_json(indent=2))
        return
    console.print(render_board(game))
    print_status(game)


@app.command()
def moves(
    row: int = typer.Argument(..., help="行 0-3"),
    col: int = typer.Argument(..., help="列 0-7"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="随机种子"),
    clicks: Optional[list[str]] = typer.Option(None, "--click", "-c", help="点击位置 ROW,COL（可重复）"),
) -> None:
    """显示某个已翻开棋子的合法目标"""
    game = replay(seed, clicks)
    piece = game.board[row][col] if Position(row, col).is_valid() else None
    if piece is None:
        print(f"Error: no piece at {row},{col}", file=sys.stderr)
        raise typer.Exit(1)
    if not game.is_flipped(row, col):
        print(f"Error: piece at {row},{col} is face-down", file=sys.stderr)
        raise typer.Exit(1)

    targets = game.targets_from(row, col)
    print(f"Legal moves for {piece.type} at {row},{col} ({len(targets)}):")
    for pos in targets:
        print(f"  {pos.to_notation()}")


if __name__ == "__main__":
    app()
