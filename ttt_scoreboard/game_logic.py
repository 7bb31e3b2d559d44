import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, then columns, then the two diagonals
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Player(str, Enum):
    X = 'X'
    O = 'O'

    @property
    def other(self):
        return Player.O if self is Player.X else Player.X


# -----------------------------------------------------------------------------
# STATUS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InProgress:
    next_player: Player


@dataclass(frozen=True)
class Won:
    winner: Player
    line: tuple


@dataclass(frozen=True)
class Draw:
    pass


def empty_board():
    return [None] * CELL_COUNT


def empty_score():
    return {Player.X: 0, Player.O: 0}


def compute_status(board, next_player):
    """
    derive round status from a 9-cell board
    first complete line wins, in WIN_LINES order
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Won(Player(board[a]), line)
    if all(cell is not None for cell in board):
        return Draw()
    return InProgress(next_player)


def status_text(status):
    if isinstance(status, InProgress):
        return f"Turn: {status.next_player.value}"
    if isinstance(status, Won):
        return f"Winner: {status.winner.value}"
    return "Draw"


def subtitle_text(status):
    if isinstance(status, InProgress):
        return "Place a mark to continue."
    if isinstance(status, Won):
        return "Nice play. Start a new round?"
    return "No more moves. Start a new round?"


def square_label(index):
    # 1-based row/column for screen readers
    row, col = divmod(index, BOARD_SIZE)
    return f"Row {row + 1}, Column {col + 1}"


# -----------------------------------------------------------------------------
# ENGINE
# -----------------------------------------------------------------------------

class GameLogic:
    """
    tic-tac-toe rules, turn order and running score
    """
    def __init__(self, store=None):
        """
        init board and load score from store (if any)
        """
        self.store = store                # ScoreStore or None
        self.board = empty_board()        # 9 cells, row-major
        self.next_player = Player.X
        self.score = self._load_score()

    @property
    def status(self):
        return compute_status(self.board, self.next_player)

    @property
    def game_over(self):
        return not isinstance(self.status, InProgress)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        # bools are ints, but not board indexes
        if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT:
            return self.board[index] is None
        return False

    def apply_move(self, index):
        """
        place next player's mark at index
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        # only if cell empty and round still running
        if not self.is_cell_empty(index) or self.game_over:
            logger.debug("ignored move at %r", index)
            return "invalid"

        player = self.next_player
        self.board[index] = player
        upcoming = player.other
        status = compute_status(self.board, upcoming)
        # also on win/draw: upcoming player opens the next round
        self.next_player = upcoming

        if isinstance(status, Won):
            self.score[status.winner] += 1
            self._save_score()
            logger.info("player %s wins on line %s", status.winner.value, status.line)
            return "win"
        if isinstance(status, Draw):
            logger.info("round ended in a draw")
            return "draw"
        return "continue"

    def reset_round(self, starting_player=None):
        """
        clear board, keep score
        """
        if starting_player is None:
            starting_player = self.next_player
        self.board = empty_board()
        self.next_player = Player(starting_player)

    def reset_all(self):
        """
        zero the score and start a fresh round with X
        """
        self.score = empty_score()
        self._save_score()
        self.reset_round(Player.X)
        logger.info("score reset")

    def _load_score(self):
        if self.store is None:
            return empty_score()
        try:
            return self.store.load_score()
        except Exception as exc:
            logger.warning("could not load score, starting from zero: %s", exc)
            return empty_score()

    def _save_score(self):
        # best effort: in-memory score stays authoritative
        if self.store is None:
            return
        try:
            self.store.save_score(dict(self.score))
        except Exception as exc:
            logger.warning("could not save score: %s", exc)
