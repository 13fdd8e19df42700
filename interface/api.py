"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from othello_engine.core.board import Board, Side
from othello_engine.core.game import OthelloGame
from othello_engine.core.search import SearchEngine
from othello_engine.core.evaluator import Evaluator
from othello_engine.config import CONFIG

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

engine = SearchEngine(Evaluator(), depth=CONFIG.search.depth)
game = OthelloGame()
_game_lock = threading.Lock()


class PositionRequest(BaseModel):
    board: List[List[int]]
    player: int = 1


class MoveRequest(BaseModel):
    row: int
    col: int


class SearchRequest(BaseModel):
    depth: Optional[int] = None


def _parse_position(req: PositionRequest):
    try:
        return Board.from_rows(req.board), Side.parse(req.player)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid position: {e}")


def _move_json(move):
    return [move.row, move.col] if move is not None else None


def _board_state():
    one, two = game.score()
    winner = game.winner()
    return {
        "board": game.board.to_rows(),
        "turn": int(game.turn),
        "legal_moves": [_move_json(m) for m in game.get_legal_moves()],
        "score": {"1": one, "2": two},
        "is_game_over": game.is_game_over(),
        "winner": int(winner) if winner is not None else None,
    }


@app.post("/best-move")
def best_move(req: PositionRequest):
    """Stateless: choose a move for ``player`` on ``board``."""
    board, side = _parse_position(req)
    search = SearchEngine(engine.evaluator, depth=CONFIG.search.depth)
    move, score = search.search_best_move(board, side)
    return {"move": _move_json(move), "score": score}


@app.get("/board")
def get_board():
    with _game_lock:
        return _board_state()


@app.post("/position")
def set_position(req: PositionRequest):
    board, side = _parse_position(req)
    with _game_lock:
        game.set_position(board, side)
        return _board_state()


@app.post("/move")
def make_move(req: MoveRequest):
    with _game_lock:
        if not game.make_move(req.row, req.col):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.row} {req.col}")
        return _board_state()


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _game_lock:
        if game.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        depth = req.depth or CONFIG.search.depth
        search_board, side = game.board, game.turn

    search = SearchEngine(engine.evaluator, depth=depth)
    move, score = search.search_best_move(search_board, side)
    return {
        "best_move": _move_json(move),
        "score": score,
        "turn": int(side),
        "nodes": search.nodes,
    }


@app.post("/reset")
def reset_board():
    with _game_lock:
        game.reset()
        return _board_state()
