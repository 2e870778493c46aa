import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

log = logging.getLogger(__name__)

BOARD_CELLS = 9                           # fixed 3x3 grid, row-major

# rows, then columns, then diagonals
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Player(Enum):
    """
    the two marks; value is what gets drawn
    """
    X = "X"
    O = "O"

    def opposite(self):
        return Player.O if self is Player.X else Player.X


Cell = Optional[Player]                   # None means empty
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (None,) * BOARD_CELLS


@dataclass(frozen=True)
class GameState:
    """
    immutable snapshot handed to the view layer
    """
    board: Board = EMPTY_BOARD
    current_player: Player = Player.X
    winner: Optional[Player] = None
    is_draw: bool = False

    @property
    def game_over(self):
        return self.winner is not None or self.is_draw


def winning_line(board):
    """
    first completed line in row/col/diag order, or None
    """
    for line in WINNING_LINES:
        a, b, c = line
        v = board[a]
        if v is not None and v == board[b] and v == board[c]:
            return line
    return None


def compute_winner(board):
    """
    mark owning the first completed line, or None
    """
    line = winning_line(board)
    return board[line[0]] if line else None


def _is_valid_index(index):
    # bool is an int subclass but never a cell
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < BOARD_CELLS


class GameEngine:
    """
    tic-tac-toe rules and state

    Owns exactly one GameState. Every successful mutation swaps in a new
    snapshot, so consumers can detect changes by identity. Invalid moves
    are absorbed: nothing changes and nobody is notified.
    """
    def __init__(self):
        self._state = GameState()
        self._listeners: List[Callable[[GameState], None]] = []

    # --- read accessors ---

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    @property
    def is_draw(self) -> bool:
        return self._state.is_draw

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    # --- observers ---

    def subscribe(self, callback: Callable[[GameState], None]) -> Callable[[], None]:
        """
        call `callback(state)` after every state replacement;
        returns a function that removes the subscription
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)
        return unsubscribe

    def _commit(self, state):
        self._state = state
        for cb in list(self._listeners):
            cb(state)

    # --- operations ---

    def reset(self) -> None:
        """
        back to a fresh game: empty board, X to move
        """
        log.debug("game reset")
        self._commit(GameState())

    def apply_move(self, index) -> bool:
        """
        place the current player's mark at `index` (0-8)
        returns True if applied, False if silently rejected
        """
        state = self._state
        if state.game_over:
            log.debug("ignoring move %r: game is over", index)
            return False
        if not _is_valid_index(index):
            log.debug("ignoring move %r: not a cell index", index)
            return False
        if state.board[index] is not None:
            log.debug("ignoring move %d: cell taken by %s",
                      index, state.board[index].value)
            return False

        player = state.current_player
        board = state.board[:index] + (player,) + state.board[index + 1:]
        log.debug("player %s takes cell %d", player.value, index)

        winner = compute_winner(board)
        if winner is not None:
            log.info("player %s wins", winner.value)
            self._commit(GameState(board, player, winner, False))
        elif all(cell is not None for cell in board):
            log.info("game drawn")
            self._commit(GameState(board, player, None, True))
        else:
            self._commit(GameState(board, player.opposite(), None, False))
        return True

    def get_cell_label(self, index) -> str:
        """
        accessible description, e.g. "Row 2, Column 2, empty"
        """
        row, col = index // 3 + 1, index % 3 + 1
        value = self._state.board[index]
        mark = value.value if value is not None else "empty"
        return f"Row {row}, Column {col}, {mark}"
