from ..commands import CommandError
from ..config import (
    INACTIVE_PLAYER_COLOR, O_COLOR, STATUS_ERROR_COLOR,
    STATUS_SUCCESS_COLOR, STATUS_TEXT_COLOR, WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH, WINDOW_TITLE, X_COLOR,
)
from ..game_logic import DRAW, GameState
from ..logging_config import get_logger
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = get_logger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: talks to the game only through the command bridge
    """
    def __init__(self, bridge, title=WINDOW_TITLE):
        """
        init ui widgets, signals, then pull the current game state
        """
        super().__init__()
        self.bridge = bridge
        self.state = GameState()
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui(title)
        self._apply(self.bridge.invoke("get_game_state"))

    def _setup_ui(self, title):
        '''window look + layout'''
        self.setWindowTitle(title)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.setStyleSheet("""
            QMainWindow { background-color: #0b0e14; }
            QPushButton {
                background-color: #1f2937; color: #e5e7eb;
                border: 1px solid #374151; border-radius: 8px; padding: 6px 14px;
            }
            QPushButton:hover { background-color: #374151; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_player_bar()          # X / O indicator
        self.main_layout.addWidget(self.player_bar)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_player_bar(self):
        # one label per player, the active one gets its color
        self.player_bar = QWidget()
        hl = QHBoxLayout(self.player_bar)
        f = QFont(); f.setPointSize(11); f.setBold(True)
        self.player_labels = {}
        for sym in ('X', 'O'):
            lbl = QLabel(f"PLAYER {sym}")
            lbl.setFont(f)
            lbl.setAlignment(Qt.AlignCenter)
            self.player_labels[sym] = lbl
            hl.addWidget(lbl)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _update_message(self, text, is_error=False, is_success=False):
        # set message text + style
        style = f"color: {STATUS_TEXT_COLOR};"
        if is_error:     style = f"color: {STATUS_ERROR_COLOR}; font-weight: bold;"
        elif is_success: style = f"color: {STATUS_SUCCESS_COLOR}; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_player_bar(self):
        colors = {'X': X_COLOR, 'O': O_COLOR}
        for sym, lbl in self.player_labels.items():
            active = not self.state.game_over and self.state.current_player == sym
            color = colors[sym] if active else INACTIVE_PLAYER_COLOR
            lbl.setStyleSheet(f"color: {color};")

    def _apply(self, data):
        """
        show a snapshot dict returned by the bridge
        """
        self.state = GameState.from_dict(data)
        self.board_widget.set_state(self.state)
        self.board_widget.set_accept_clicks(not self.state.game_over)
        self._update_player_bar()
        if not self.state.game_over:
            self._update_message(f"Player {self.state.current_player}'s turn")
            self.reset_button.setText("Reset")
        else:
            if self.state.winner == DRAW:
                self._update_message("It's a draw!", is_success=True)
            else:
                self._update_message(f"Player {self.state.winner} wins!", is_success=True)
            self.reset_button.setText("Play Again")

    @Slot(int)
    def _on_cell_clicked(self, position):
        try:
            data = self.bridge.invoke("make_move", position=position)
        except CommandError as e:
            self._update_message(str(e), is_error=True)
            return
        self._apply(data)

    @Slot()
    def reset_game(self):
        # fresh game via the bridge
        self._apply(self.bridge.invoke("reset_game"))
        log.debug("ui_reset")
