import threading
from dataclasses import dataclass, field
from typing import Optional

from .logging_config import get_logger

log = get_logger(__name__)

EMPTY = ' '
PLAYER_X = 'X'
PLAYER_O = 'O'
DRAW = 'D'
BOARD_CELLS = 9

# rows top-to-bottom, cols left-to-right, then both diagonals
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class GameError(Exception):
    """
    base for rejected moves
    """
    message = "Game error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidMove(GameError):
    # out of range or cell already taken
    message = "Invalid move"


class GameOver(GameError):
    # move attempted after win/draw
    message = "Game over"


def winning_line(board):
    """
    first completed triple, or None
    """
    for a, b, c in WIN_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def check_winner(board):
    """
    'X' / 'O' for a completed line, 'D' for a full board, else None
    """
    line = winning_line(board)
    if line:
        return board[line[0]]
    if EMPTY not in board:
        return DRAW
    return None


@dataclass(frozen=True)
class GameState:
    """
    immutable snapshot of one game
    """
    board: tuple = field(default=(EMPTY,) * BOARD_CELLS)
    current_player: str = PLAYER_X
    game_over: bool = False
    winner: Optional[str] = None      # 'X', 'O', 'D' or None

    def empty_cells(self):
        # positions still open
        return [i for i, cell in enumerate(self.board) if cell == EMPTY]

    def to_dict(self):
        """
        wire shape for the ui side
        """
        return {
            "board": list(self.board),
            "current_player": self.current_player,
            "game_over": self.game_over,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            board=tuple(data["board"]),
            current_player=data["current_player"],
            game_over=bool(data["game_over"]),
            winner=data.get("winner"),
        )


class GameEngine:
    """
    tic-tac-toe rules and the one live game, guarded by a lock.
    every call returns a snapshot, never the live state.
    """
    def __init__(self):
        """
        fresh board, X to move
        """
        self._lock = threading.Lock()
        self._board = [EMPTY] * BOARD_CELLS
        self._current_player = PLAYER_X
        self._game_over = False
        self._winner = None

    def _snapshot(self):
        # caller must hold the lock
        return GameState(
            board=tuple(self._board),
            current_player=self._current_player,
            game_over=self._game_over,
            winner=self._winner,
        )

    def apply_move(self, position):
        """
        place current player's mark at position (0-8), check result
        raises GameOver if finished, InvalidMove for bad/taken cells
        """
        with self._lock:
            if self._game_over:
                log.warning("move_rejected", position=position, reason="game over")
                raise GameOver()
            # bool is an int subclass, don't accept True/False as cells
            if not isinstance(position, int) or isinstance(position, bool) \
               or not 0 <= position < BOARD_CELLS \
               or self._board[position] != EMPTY:
                log.warning("move_rejected", position=position, reason="invalid move")
                raise InvalidMove()

            player = self._current_player
            self._board[position] = player
            log.info("move_applied", position=position, player=player)

            result = check_winner(self._board)
            if result:
                self._game_over = True; self._winner = result
                log.info("game_finished", winner=result)
            else:
                self._current_player = PLAYER_O if player == PLAYER_X else PLAYER_X
            return self._snapshot()

    def get_state(self):
        with self._lock:
            return self._snapshot()

    def reset(self):
        """
        back to a fresh game, returns the new snapshot
        """
        with self._lock:
            self._board = [EMPTY] * BOARD_CELLS
            self._current_player = PLAYER_X
            self._game_over = False; self._winner = None
            log.info("game_reset")
            return self._snapshot()
