from othello_engine.core.game import OthelloGame
from othello_engine.core.search import SearchEngine
from othello_engine.core.evaluator import Evaluator

class Engine:
    def __init__(self, depth=None):
        self.game = OthelloGame()
        self.search = SearchEngine(Evaluator(), depth=depth)

    def get_best_move(self):
        return self.search.search_best_move(self.game.board, self.game.turn)

    def make_move(self, row: int, col: int):
        return self.game.make_move(row, col)

    def print_board(self):
        self.game.print_board()
