from typing import Optional, Sequence

from othello_engine.config import CONFIG
from .board import EMPTY, SIZE, Board, Side


class Evaluator:
    """Static positional heuristic.

    Scores a board from ``side``'s point of view: the weights under
    ``side``'s discs minus the weights under the opponent's. Corners are
    worth the most, the diagonal neighbours of the corners the least.
    Future positions and mobility are never looked at.
    """

    def __init__(self, weights: Optional[Sequence[Sequence[int]]] = None):
        weights = weights if weights is not None else CONFIG.eval.weights
        if len(weights) != SIZE or any(len(row) != SIZE for row in weights):
            raise ValueError(f"Weight table must be {SIZE}x{SIZE}")
        self.weights = tuple(tuple(int(w) for w in row) for row in weights)

    def evaluate(self, board: Board, side: Side) -> int:
        own_score = 0
        opponent_score = 0
        for r in range(SIZE):
            weight_row = self.weights[r]
            for c in range(SIZE):
                tile = board.get(r, c)
                if tile == side:
                    own_score += weight_row[c]
                elif tile != EMPTY:
                    opponent_score += weight_row[c]
        return own_score - opponent_score
