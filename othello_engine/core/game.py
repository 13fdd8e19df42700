"""Game wrapper over the immutable board providing turn and history tracking."""

from typing import List, Optional, Tuple

from .board import Board, Move, Side
from .movegen import has_legal_move, legal_moves
from .transition import apply_move


class OthelloGame:
    def __init__(self, board: Optional[Board] = None, turn: Side = Side.ONE):
        """Initialize from a board or the standard opening."""
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self._pass_if_stuck()
        # (board before, side to move before, move played) for undo
        self.move_history: List[Tuple[Board, Side, Move]] = []

    def reset(self):
        """Reset to the opening position with side one to move."""
        self.board = Board.initial()
        self.turn = Side.ONE
        self.move_history.clear()

    def set_position(self, board: Board, turn: Side):
        """Set an arbitrary position. History is cleared; a stuck side passes."""
        self.board = board
        self.turn = turn
        self.move_history.clear()
        self._pass_if_stuck()

    def get_legal_moves(self) -> List[Move]:
        """Distinct legal moves for the side to move."""
        return legal_moves(self.board, self.turn, unique=True)

    def make_move(self, row: int, col: int) -> bool:
        """Play (row, col) for the side to move. Returns True if legal.

        When the opponent has no reply the turn stays with the mover.
        """
        move = Move(row, col)
        if move not in self.get_legal_moves():
            return False
        self.move_history.append((self.board, self.turn, move))
        self.board = apply_move(self.board, move, self.turn)
        self.turn = self.turn.other
        self._pass_if_stuck()
        return True

    def _pass_if_stuck(self):
        """Hand the turn over when the side to move has no move but the other side does."""
        if not has_legal_move(self.board, self.turn) and has_legal_move(self.board, self.turn.other):
            self.turn = self.turn.other

    def undo_move(self):
        """Pop the last move."""
        if self.move_history:
            self.board, self.turn, _ = self.move_history.pop()

    def is_game_over(self) -> bool:
        """Neither side can move."""
        return not has_legal_move(self.board, Side.ONE) and not has_legal_move(self.board, Side.TWO)

    def score(self) -> Tuple[int, int]:
        """Disc counts (side one, side two)."""
        return self.board.count(Side.ONE), self.board.count(Side.TWO)

    def winner(self) -> Optional[Side]:
        """Side with more discs once the game is over; None for a draw or a game in progress."""
        if not self.is_game_over():
            return None
        one, two = self.score()
        if one == two:
            return None
        return Side.ONE if one > two else Side.TWO

    def print_board(self):
        """Print ASCII representation."""
        print(self.board)
