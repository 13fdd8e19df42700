"""Core engine components: board, move generation, evaluator and search."""

from .board import Board, Move, Side
from .evaluator import Evaluator
from .game import OthelloGame
from .movegen import legal_moves
from .search import SearchEngine
from .transition import apply_move, captured_tiles
