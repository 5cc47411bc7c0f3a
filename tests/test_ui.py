"""
Offscreen tests for the board widget and main window.
Skipped when Qt cannot be loaded on this machine.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from tictactoe.app import parse_args
from tictactoe.commands import CommandBridge
from tictactoe.game_logic import GameEngine, GameState
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow


def release_at(widget, x, y):
    # real left-button release routed through QWidget.event
    pt = QPointF(x, y)
    ev = QMouseEvent(QEvent.MouseButtonRelease, pt, pt,
                     Qt.LeftButton, Qt.LeftButton, Qt.NoModifier)
    QtWidgets.QApplication.sendEvent(widget, ev)


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    w = TicTacToeWindow(CommandBridge(GameEngine()))
    yield w
    w.close()


class TestBoardWidget:
    def test_position_at(self, qapp):
        w = BoardWidget()
        w.resize(300, 300)
        assert w.position_at(50, 50) == 0
        assert w.position_at(150, 50) == 1
        assert w.position_at(50, 150) == 3
        assert w.position_at(250, 250) == 8

    def test_position_at_centers_square(self, qapp):
        w = BoardWidget()
        w.resize(500, 300)
        # 100px margin left and right
        assert w.position_at(50, 150) is None
        assert w.position_at(150, 50) == 0
        assert w.position_at(450, 250) is None

    def test_paints_finished_game(self, qapp):
        w = BoardWidget()
        w.resize(200, 200)
        board = ('X', 'X', 'X', 'O', 'O', ' ', ' ', ' ', ' ')
        w.set_state(GameState(board=board, game_over=True, winner='X'))
        assert not w.grab().isNull()

    def test_click_emits_position(self, qapp):
        w = BoardWidget()
        w.resize(300, 300)
        clicked = []
        w.cell_clicked.connect(clicked.append)
        release_at(w, 250, 50)
        release_at(w, 150, 150)
        assert clicked == [2, 4]

    def test_click_on_occupied_cell_dropped(self, qapp):
        w = BoardWidget()
        w.resize(300, 300)
        board = ('X',) + (' ',) * 8
        w.set_state(GameState(board=board, current_player='O'))
        clicked = []
        w.cell_clicked.connect(clicked.append)
        release_at(w, 50, 50)
        assert clicked == []
        release_at(w, 150, 50)
        assert clicked == [1]

    def test_click_after_game_over_dropped(self, qapp):
        w = BoardWidget()
        w.resize(300, 300)
        board = ('X', 'X', 'X', 'O', 'O', ' ', ' ', ' ', ' ')
        w.set_state(GameState(board=board, game_over=True, winner='X'))
        clicked = []
        w.cell_clicked.connect(clicked.append)
        release_at(w, 250, 250)
        assert clicked == []

    def test_click_ignored_when_disabled(self, qapp):
        w = BoardWidget()
        w.resize(300, 300)
        w.set_accept_clicks(False)
        clicked = []
        w.cell_clicked.connect(clicked.append)
        release_at(w, 150, 150)
        assert clicked == []


class TestMainWindow:
    def test_initial_status(self, window):
        assert window.message_label.text() == "Player X's turn"
        assert window.reset_button.text() == "Reset"

    def test_click_places_mark(self, window):
        window.board_widget.cell_clicked.emit(4)
        assert window.state.board[4] == 'X'
        assert window.board_widget.state.board[4] == 'X'
        assert window.message_label.text() == "Player O's turn"

    def test_rejected_click_shows_error(self, window):
        window.board_widget.cell_clicked.emit(4)
        window.board_widget.cell_clicked.emit(4)
        assert window.message_label.text() == "Invalid move"
        assert window.state.current_player == 'O'

    def test_win_then_play_again(self, window):
        for p in (0, 3, 1, 4, 2):
            window.board_widget.cell_clicked.emit(p)
        assert window.message_label.text() == "Player X wins!"
        assert window.reset_button.text() == "Play Again"

        window.reset_button.click()
        assert window.state == GameState()
        assert window.message_label.text() == "Player X's turn"

    def test_draw(self, window):
        for p in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            window.board_widget.cell_clicked.emit(p)
        assert window.message_label.text() == "It's a draw!"

    def test_picks_up_existing_game(self, qapp):
        engine = GameEngine()
        engine.apply_move(8)
        w = TicTacToeWindow(CommandBridge(engine))
        assert w.state.board[8] == 'X'
        assert w.state.current_player == 'O'
        w.close()

    def test_real_click_through_window(self, window):
        window.board_widget.resize(300, 300)
        release_at(window.board_widget, 150, 150)
        assert window.state.board[4] == 'X'
        # second click on the same cell never reaches the bridge
        release_at(window.board_widget, 150, 150)
        assert window.message_label.text() == "Player O's turn"


class TestParseArgs:
    def test_defaults(self):
        config = parse_args([])
        assert config.log_level == "INFO"
        assert config.window_title == "Tic-Tac-Toe"
        assert config.dark_theme is True

    def test_flags(self):
        config = parse_args(["--log-level", "debug", "--title", "TTT", "--light"])
        assert config.log_level == "DEBUG"
        assert config.window_title == "TTT"
        assert config.dark_theme is False
