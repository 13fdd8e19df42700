import logging
import time
from typing import List, Optional, Tuple

from othello_engine.config import CONFIG
from othello_engine.core.board import Board, Move, Side
from othello_engine.core.evaluator import Evaluator
from othello_engine.core.movegen import legal_moves
from othello_engine.core.transition import apply_move
from othello_engine.core.utils import format_info

logger = logging.getLogger(__name__)

INF = float("inf")


class SearchEngine:
    """Fixed-depth minimax with alpha-beta pruning.

    Scores always come from the side that is choosing the root move, so even
    depths maximize and odd depths minimize without negating at each ply.
    Boards are never mutated; every child is a fresh board.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = None,
                 unique_moves: bool = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth if depth is not None else CONFIG.search.depth
        self.unique_moves = CONFIG.search.unique_moves if unique_moves is None else unique_moves
        self.nodes = 0
        self._root_side: Optional[Side] = None

    def best_move(self, board: Board, side: Side) -> Optional[Move]:
        """Best move for ``side``, or None when ``side`` has no legal move."""
        move, _ = self.search_best_move(board, side)
        return move

    def search_best_move(self, board: Board, side: Side) -> Tuple[Optional[Move], Optional[float]]:
        candidates = self._moves(board, side)
        if not candidates:
            logger.info("no legal move for side %d", side)
            return None, None

        self.nodes = 0
        self._root_side = side
        start_time = time.time()

        best_move = None
        best_score = -INF
        for move in candidates:
            child = apply_move(board, move, side)
            score = self._alpha_beta(child, side.other, 1, -INF, INF)
            # strict comparison keeps the first maximum
            if best_move is None or score > best_score:
                best_move, best_score = move, score

        elapsed = (time.time() - start_time) * 1000
        logger.info(format_info(self.max_depth, best_score, self.nodes, elapsed, best_move))
        return best_move, best_score

    def score_moves(self, board: Board, side: Side) -> List[Tuple[Move, float]]:
        """Root score of every candidate, in enumeration order."""
        self.nodes = 0
        self._root_side = side
        return [
            (move, self._alpha_beta(apply_move(board, move, side), side.other, 1, -INF, INF))
            for move in self._moves(board, side)
        ]

    def _moves(self, board: Board, side: Side) -> List[Move]:
        return legal_moves(board, side, unique=self.unique_moves)

    def _alpha_beta(self, board: Board, to_move: Side, depth: int, alpha: float, beta: float) -> float:
        self.nodes += 1

        if depth >= self.max_depth:
            return self.evaluator.evaluate(board, self._root_side)
        children = self._moves(board, to_move)
        if not children:
            return self.evaluator.evaluate(board, self._root_side)

        if depth % 2 == 0:
            best_score = -INF
            for move in children:
                score = self._alpha_beta(apply_move(board, move, to_move), to_move.other,
                                         depth + 1, alpha, beta)
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    return alpha
            return best_score

        best_score = INF
        for move in children:
            score = self._alpha_beta(apply_move(board, move, to_move), to_move.other,
                                     depth + 1, alpha, beta)
            best_score = min(best_score, score)
            beta = min(beta, best_score)
            if beta <= alpha:
                return beta
        return best_score
