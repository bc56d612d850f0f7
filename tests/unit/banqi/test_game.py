"""
暗棋对局测试
"""

import pytest
from banqi.board import empty_board
from banqi.game import ClickOutcome, DarkChessGame, GameConfig
from banqi.pieces import Piece
from banqi.types import Color, GameStatus, Position, Turn

RED = Color.RED
BLACK = Color.BLACK


def make_game(cells: dict, flipped=None, turn=Turn.RED) -> DarkChessGame:
    """用 {(row, col): Piece} 创建残局，默认全部翻开"""
    board = empty_board()
    for (row, col), piece in cells.items():
        board[row][col] = piece
    if flipped is None:
        flipped = {Position(row, col) for row, col in cells}
    return DarkChessGame.from_board(board, flipped=flipped, turn=turn, game_id="test-game")


class TestDarkChessGameInit:
    """测试游戏初始化"""

    def test_game_creates_with_id(self):
        game = DarkChessGame()
        assert game.game_id

    def test_initial_state(self):
        """开局：32 枚暗子，回合未定，进行中"""
        game = DarkChessGame()
        assert game.remaining(RED) == 16
        assert game.remaining(BLACK) == 16
        assert game.flipped == set()
        assert game.current_player == Turn.UNKNOWN
        assert game.status == GameStatus.ONGOING
        assert game.selected is None
        assert game.captured == {RED: [], BLACK: []}

    def test_game_with_seed(self):
        """相同种子产生相同棋盘"""
        game1 = DarkChessGame(config=GameConfig(seed=42))
        game2 = DarkChessGame(config=GameConfig(seed=42))
        assert game1.board == game2.board

    def test_from_board_does_not_shuffle(self, monkeypatch):
        """残局直接使用给定棋盘，不洗牌"""

        def no_shuffle(rng=None):
            raise AssertionError("from_board must not shuffle")

        monkeypatch.setattr("banqi.game.initialize_pieces", no_shuffle)
        board = empty_board()
        board[0][0] = Piece("俥", RED)
        board[3][7] = Piece("卒", BLACK)
        game = DarkChessGame.from_board(board, flipped={Position(0, 0)}, turn=Turn.RED)
        assert game.board == board
        assert game.board is not board
        assert game.flipped == {Position(0, 0)}
        assert game.current_player == Turn.RED
        assert game.selected is None
        assert game.captured == {RED: [], BLACK: []}
        assert game.status == GameStatus.ONGOING
        assert game.game_id

    def test_reset(self):
        game = DarkChessGame(config=GameConfig(seed=5))
        game.click(0, 0)
        game.click(0, 1)
        game.reset()
        assert game.flipped == set()
        assert game.current_player == Turn.UNKNOWN
        assert game.status == GameStatus.ONGOING
        assert game.remaining(RED) + game.remaining(BLACK) == 32


class TestFlip:
    """测试翻棋"""

    @pytest.fixture
    def game(self):
        return DarkChessGame(config=GameConfig(seed=42))

    def test_first_flip_sets_turn_to_opponent(self, game: DarkChessGame):
        """首次翻棋后轮到翻出棋子的对方"""
        piece = game.board[0][0]
        assert game.click(0, 0) == ClickOutcome.FLIPPED
        assert game.is_flipped(0, 0)
        assert game.current_player == Turn.of(piece.player.opposite)

    def test_later_flips_alternate(self, game: DarkChessGame):
        game.click(0, 0)
        first = game.current_player
        game.click(0, 1)
        assert game.current_player == first.next()
        game.click(0, 2)
        assert game.current_player == first

    def test_flip_is_permanent(self, game: DarkChessGame):
        """再次点击已翻开的格子不会翻回去"""
        game.click(0, 0)
        game.click(0, 0)
        assert game.is_flipped(0, 0)

    def test_flip_does_not_move_pieces(self, game: DarkChessGame):
        before = game.snapshot()
        game.click(2, 3)
        assert game.board == before

    def test_flip_method_rejects_flipped_cell(self, game: DarkChessGame):
        assert game.flip(1, 1)
        assert not game.flip(1, 1)

    def test_out_of_range_click_ignored(self, game: DarkChessGame):
        assert game.click(4, 0) == ClickOutcome.IGNORED
        assert game.click(-1, 0) == ClickOutcome.IGNORED
        assert game.flipped == set()


class TestSelect:
    """测试选子"""

    def test_select_own_piece(self):
        game = make_game({(1, 1): Piece("馬", RED), (2, 2): Piece("卒", BLACK)})
        assert game.click(1, 1) == ClickOutcome.SELECTED
        assert game.selected == Position(1, 1)

    def test_cannot_select_opponent_piece(self):
        game = make_game({(1, 1): Piece("馬", RED), (2, 2): Piece("卒", BLACK)})
        assert game.click(2, 2) == ClickOutcome.REJECTED
        assert game.selected is None

    def test_cannot_select_before_turn_known(self):
        game = make_game({(1, 1): Piece("馬", RED), (2, 2): Piece("卒", BLACK)}, turn=Turn.UNKNOWN)
        assert not game.select(1, 1)

    def test_click_on_face_down_piece_flips_it(self):
        game = make_game(
            {(1, 1): Piece("馬", RED), (2, 2): Piece("卒", BLACK)},
            flipped={Position(2, 2)},
        )
        assert game.click(1, 1) == ClickOutcome.FLIPPED
        assert game.selected is None
        assert game.current_player == Turn.BLACK

    def test_click_empty_cell_without_selection(self):
        game = make_game({(1, 1): Piece("馬", RED), (2, 2): Piece("卒", BLACK)})
        assert game.click(0, 0) == ClickOutcome.REJECTED


class TestMove:
    """测试走棋和吃子"""

    @pytest.fixture
    def game(self):
        return make_game(
            {
                (0, 0): Piece("俥", RED),
                (0, 1): Piece("卒", BLACK),
                (3, 7): Piece("馬", BLACK),
            }
        )

    def test_capture(self, game: DarkChessGame):
        """车吃卒：被吃棋子记在黑方名下，回合交换"""
        game.click(0, 0)
        assert game.click(0, 1) == ClickOutcome.CAPTURED
        assert game.board[0][0] is None
        assert game.board[0][1] == Piece("俥", RED)
        assert game.captured[BLACK] == ["卒"]
        assert game.captured[RED] == []
        assert game.current_player == Turn.BLACK
        assert game.selected is None
        assert game.status == GameStatus.ONGOING

    def test_move_to_empty(self, game: DarkChessGame):
        game.click(0, 0)
        assert game.click(1, 0) == ClickOutcome.MOVED
        assert game.board[1][0] == Piece("俥", RED)
        assert game.board[0][0] is None
        assert game.is_flipped(1, 0)
        assert game.current_player == Turn.BLACK

    def test_illegal_move_changes_nothing(self, game: DarkChessGame):
        """非法走法：棋盘不变，回合不变，清除选中"""
        before = game.snapshot()
        game.click(0, 0)
        assert game.click(1, 1) == ClickOutcome.REJECTED
        assert game.board == before
        assert game.current_player == Turn.RED
        assert game.selected is None

    def test_clicking_selected_piece_again_deselects(self, game: DarkChessGame):
        game.click(0, 0)
        assert game.click(0, 0) == ClickOutcome.REJECTED
        assert game.selected is None

    def test_flip_with_selection_clears_it(self):
        game = make_game(
            {(0, 0): Piece("俥", RED), (0, 1): Piece("卒", BLACK), (2, 0): Piece("兵", RED)},
            flipped={Position(0, 0), Position(0, 1)},
        )
        game.click(0, 0)
        assert game.click(2, 0) == ClickOutcome.FLIPPED
        assert game.selected is None
        assert game.current_player == Turn.BLACK

    def test_cannon_cannot_capture_face_down_piece(self):
        """点击暗子总是翻棋，不会被炮吃掉"""
        game = make_game(
            {(1, 0): Piece("炮", RED), (1, 1): Piece("兵", RED), (1, 2): Piece("將", BLACK)},
            flipped={Position(1, 0), Position(1, 1)},
        )
        game.click(1, 0)
        assert game.click(1, 2) == ClickOutcome.FLIPPED
        assert game.board[1][2] == Piece("將", BLACK)
        assert game.selected is None
        assert game.current_player == Turn.BLACK

    def test_move_method_rejects_face_down_target(self):
        game = make_game(
            {(1, 0): Piece("炮", RED), (1, 1): Piece("兵", RED), (1, 2): Piece("將", BLACK)},
            flipped={Position(1, 0), Position(1, 1)},
        )
        assert not game.move(1, 0, 1, 2)
        assert game.board[1][2] == Piece("將", BLACK)

    def test_cannon_capture(self):
        game = make_game(
            {(1, 0): Piece("炮", RED), (1, 1): Piece("兵", RED), (1, 2): Piece("將", BLACK),
             (3, 3): Piece("卒", BLACK)},
        )  # fmt: skip
        game.click(1, 0)
        assert game.click(1, 2) == ClickOutcome.CAPTURED
        assert game.board[1][2] == Piece("炮", RED)
        assert game.captured[BLACK] == ["將"]

    def test_cannot_move_opponent_piece(self, game: DarkChessGame):
        assert not game.move(0, 1, 1, 1)

    def test_legal_targets_for_selection(self, game: DarkChessGame):
        assert game.legal_targets_for_selection() == []
        game.click(0, 0)
        assert game.legal_targets_for_selection() == [Position(0, 1), Position(1, 0)]


class TestGameOver:
    """测试胜负"""

    @pytest.fixture
    def game(self):
        return make_game({(0, 0): Piece("俥", RED), (0, 1): Piece("卒", BLACK)})

    def test_last_capture_wins(self, game: DarkChessGame):
        game.click(0, 0)
        game.click(0, 1)
        assert game.status == GameStatus.RED_WINS
        assert game.is_over

    def test_clicks_ignored_after_game_over(self, game: DarkChessGame):
        game.click(0, 0)
        game.click(0, 1)
        before = game.snapshot()
        turn = game.current_player
        assert game.click(0, 1) == ClickOutcome.IGNORED
        assert game.click(1, 1) == ClickOutcome.IGNORED
        assert game.board == before
        assert game.current_player == turn

    def test_black_wins(self):
        game = make_game(
            {(2, 2): Piece("卒", BLACK), (2, 3): Piece("帥", RED)},
            turn=Turn.BLACK,
        )
        game.click(2, 2)
        assert game.click(2, 3) == ClickOutcome.CAPTURED
        assert game.status == GameStatus.BLACK_WINS
        assert game.captured[RED] == ["帥"]

    def test_from_board_detects_finished_position(self):
        game = make_game({(0, 0): Piece("俥", RED)})
        assert game.status == GameStatus.RED_WINS


class TestGameSerialization:
    """测试对局快照"""

    def test_hidden_pieces_not_exposed(self):
        game = DarkChessGame(game_id="g1", config=GameConfig(seed=1))
        state = game.to_state()
        assert state.game_id == "g1"
        assert state.current_player == "?"
        assert state.status == "ongoing"
        assert len(state.cells) == 32
        assert all(cell.type is None and cell.player is None for cell in state.cells)
        assert state.remaining == {"red": 16, "black": 16}

    def test_flipped_piece_exposed(self):
        game = DarkChessGame(config=GameConfig(seed=1))
        piece = game.board[0][3]
        game.click(0, 3)
        cell = game.to_state().cells[3]
        assert cell.flipped
        assert cell.type == piece.type
        assert cell.player == piece.player.value

    def test_to_dict(self):
        game = make_game({(0, 0): Piece("俥", RED), (0, 1): Piece("卒", BLACK)})
        game.click(0, 0)
        data = game.to_dict()
        assert data["game_id"] == "test-game"
        assert data["current_player"] == "red"
        assert data["selected"] == {"row": 0, "col": 0}
        assert data["captured"] == {"red": [], "black": []}
        game.click(0, 1)
        data = game.to_dict()
        assert data["status"] == "red wins"
        assert data["captured"]["black"] == ["卒"]
        assert data["selected"] is None
