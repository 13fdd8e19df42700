"""
Integration tests for the Othello engine.

Covers:
- Full engine-vs-engine games
- Line-delimited socket client (decode, search, respond, EOF)
- REST API endpoints
- Terminal play loop
"""

import json
import socket
from unittest.mock import patch

import pytest

from othello_engine.core.board import Board, Move, Side, SIZE
from othello_engine.core.evaluator import Evaluator
from othello_engine.core.game import OthelloGame
from othello_engine.core.movegen import legal_moves
from othello_engine.core.search import SearchEngine
from othello_engine.main import Engine


def full_board_rows():
    return [[1 if (r + c) % 2 == 0 else 2 for c in range(SIZE)] for r in range(SIZE)]


# ════════════════════════════════════════════════════════════════════════════
#  FULL GAME
# ════════════════════════════════════════════════════════════════════════════


class TestFullGame:
    def test_engine_vs_engine_completes(self):
        """Two engines play to the end; every move is legal and counts add up."""
        game = OthelloGame()
        engines = {Side.ONE: SearchEngine(Evaluator(), depth=3),
                   Side.TWO: SearchEngine(Evaluator(), depth=2)}
        plies = 0
        while not game.is_game_over():
            side = game.turn
            move = engines[side].best_move(game.board, side)
            assert move in legal_moves(game.board, side)
            pieces = game.board.piece_count()
            assert game.make_move(*move)
            assert game.board.piece_count() == pieces + 1
            plies += 1
            assert plies <= 60
        one, two = game.score()
        assert one + two == game.board.piece_count()
        assert engines[Side.ONE].best_move(game.board, Side.ONE) is None
        assert engines[Side.TWO].best_move(game.board, Side.TWO) is None

    def test_engine_wrapper(self):
        engine = Engine(depth=2)
        move, score = engine.get_best_move()
        assert move in engine.game.get_legal_moves()
        assert isinstance(score, int)
        assert engine.make_move(move.row, move.col) is True
        assert engine.game.turn is Side.TWO

    def test_engine_wrapper_print(self, capsys):
        Engine(depth=1).print_board()
        assert "X" in capsys.readouterr().out


# ════════════════════════════════════════════════════════════════════════════
#  SOCKET CLIENT
# ════════════════════════════════════════════════════════════════════════════


class TestSocketClient:
    def _run(self, lines):
        """Feed ``lines`` to a client over a socket pair and collect its replies."""
        from interface.client import Client

        server, client_sock = socket.socketpair()
        with server, client_sock:
            server.sendall(b"".join(
                (line if isinstance(line, bytes) else line.encode()) + b"\n" for line in lines
            ))
            server.shutdown(socket.SHUT_WR)
            Client(client_sock, SearchEngine(Evaluator(), depth=3)).start()
            client_sock.close()  # EOF for the reader below
            reader = server.makefile("r")
            replies = reader.read().splitlines()
            reader.close()
        return [json.loads(r) for r in replies]

    def test_opening_state(self):
        state = {"board": Board.initial().to_rows(), "player": 1, "maxTurnTime": 15000}
        assert self._run([json.dumps(state)]) == [[3, 2]]

    def test_multiple_states_until_eof(self):
        opening = Board.initial().to_rows()
        replies = self._run([
            json.dumps({"board": opening, "player": 1}),
            json.dumps({"board": opening, "player": 2}),
        ])
        assert len(replies) == 2
        assert tuple(replies[0]) in set(legal_moves(Board.initial(), Side.ONE))
        assert tuple(replies[1]) in set(legal_moves(Board.initial(), Side.TWO))

    def test_no_move_is_null(self):
        state = {"board": full_board_rows(), "player": 2}
        assert self._run([json.dumps(state)]) == [None]

    def test_bad_state_does_not_block_next(self):
        good = json.dumps({"board": Board.initial().to_rows(), "player": 1})
        replies = self._run([
            "not json",
            json.dumps({"board": [[0] * 8], "player": 1}),
            json.dumps({"board": Board.initial().to_rows(), "player": 3}),
            good,
        ])
        assert replies == [None, None, None, [3, 2]]

    def test_invalid_utf8_line_answered_with_null(self):
        good = json.dumps({"board": Board.initial().to_rows(), "player": 1})
        assert self._run([b"\xff\xfe garbage", good]) == [None, [3, 2]]

    def test_blank_lines_skipped(self):
        good = json.dumps({"board": Board.initial().to_rows(), "player": 1})
        assert self._run(["", "   ", good]) == [[3, 2]]

    def test_empty_stream(self):
        assert self._run([]) == []

    def test_game_state_model(self):
        from interface.client import GameState

        state = GameState.model_validate_json(
            json.dumps({"board": Board.initial().to_rows(), "player": 2, "extra": True})
        )
        assert state.side is Side.TWO
        assert state.to_board() == Board.initial()

    def test_encode_move(self):
        from interface.client import encode_move

        assert encode_move(Move(4, 5)) == "[4, 5]"
        assert encode_move(None) == "null"

    def test_parse_args_defaults(self):
        from interface.client import parse_args

        args = parse_args([])
        assert args.host == "127.0.0.1"
        assert args.port == 1337
        args = parse_args(["10.0.0.5", "9000", "--depth", "2"])
        assert (args.host, args.port, args.depth) == ("10.0.0.5", 9000, 2)

    def test_main_connection_refused(self):
        from interface import client

        with patch.object(client.socket, "create_connection", side_effect=ConnectionRefusedError("refused")):
            assert client.main(["127.0.0.1", "1"]) == 1

    def test_main_runs_client(self):
        from interface import client

        server, client_sock = socket.socketpair()
        with server:
            server.sendall((json.dumps({"board": Board.initial().to_rows(), "player": 1}) + "\n").encode())
            server.shutdown(socket.SHUT_WR)
            with patch.object(client.socket, "create_connection", return_value=client_sock):
                assert client.main(["--depth", "1"]) == 0
            reader = server.makefile("r")
            assert json.loads(reader.readline()) in [list(m) for m in legal_moves(Board.initial(), Side.ONE)]
            reader.close()


# ════════════════════════════════════════════════════════════════════════════
#  REST API INTEGRATION
# ════════════════════════════════════════════════════════════════════════════


class TestAPIIntegration:
    """Tests FastAPI REST API endpoints."""

    @pytest.fixture(autouse=True)
    def setup_client(self):
        from fastapi.testclient import TestClient
        from interface.api import app, game

        self.client = TestClient(app)
        # Reset state before each test
        game.reset()

    def test_get_board_initial(self):
        response = self.client.get("/board")
        assert response.status_code == 200
        data = response.json()
        assert data["board"] == Board.initial().to_rows()
        assert data["turn"] == 1
        assert data["is_game_over"] is False
        assert len(data["legal_moves"]) == 4
        assert data["score"] == {"1": 2, "2": 2}

    def test_board_reports_winner(self):
        board = Board.empty().with_cells([(0, 0), (0, 1)], Side.ONE).with_cells([(7, 7)], Side.TWO)
        data = self.client.post("/position", json={"board": board.to_rows(), "player": 2}).json()
        assert data["is_game_over"] is True
        assert data["winner"] == 1
        assert self.client.post("/reset").json()["winner"] is None

    def test_best_move_stateless(self):
        response = self.client.post("/best-move", json={"board": Board.initial().to_rows(), "player": 1})
        assert response.status_code == 200
        assert response.json()["move"] == [3, 2]

    def test_best_move_no_move(self):
        response = self.client.post("/best-move", json={"board": full_board_rows(), "player": 1})
        assert response.status_code == 200
        assert response.json() == {"move": None, "score": None}

    def test_best_move_invalid_board(self):
        response = self.client.post("/best-move", json={"board": [[0] * 8], "player": 1})
        assert response.status_code == 400

    def test_best_move_invalid_player(self):
        response = self.client.post("/best-move", json={"board": Board.initial().to_rows(), "player": 5})
        assert response.status_code == 400

    def test_post_move_valid(self):
        response = self.client.post("/move", json={"row": 2, "col": 3})
        assert response.status_code == 200
        data = response.json()
        assert data["turn"] == 2
        assert data["board"][3][3] == 1

    def test_post_move_illegal(self):
        response = self.client.post("/move", json={"row": 0, "col": 0})
        assert response.status_code == 400

    def test_post_move_bad_payload(self):
        response = self.client.post("/move", json={"row": "a"})
        assert response.status_code == 422

    def test_set_position(self):
        board = Board.initial().to_rows()
        response = self.client.post("/position", json={"board": board, "player": 2})
        assert response.status_code == 200
        assert response.json()["turn"] == 2

    def test_search_returns_move(self):
        response = self.client.post("/search", json={"depth": 2})
        assert response.status_code == 200
        data = response.json()
        assert tuple(data["best_move"]) in set(legal_moves(Board.initial(), Side.ONE))
        assert data["nodes"] > 0

    def test_search_default_depth(self):
        response = self.client.post("/search")
        assert response.status_code == 200
        assert response.json()["best_move"] == [3, 2]

    def test_position_with_stuck_side_passes(self):
        board = Board.empty().with_cells([(0, 0)], Side.ONE).with_cells([(0, 1)], Side.TWO)
        response = self.client.post("/position", json={"board": board.to_rows(), "player": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["turn"] == 1
        assert data["legal_moves"] == [[0, 2]]
        assert data["is_game_over"] is False
        search = self.client.post("/search").json()
        assert search["best_move"] == [0, 2]
        assert self.client.post("/move", json={"row": 0, "col": 2}).status_code == 200

    def test_search_game_over_returns_400(self):
        self.client.post("/position", json={"board": full_board_rows(), "player": 1})
        response = self.client.post("/search")
        assert response.status_code == 400

    def test_reset_board(self):
        self.client.post("/move", json={"row": 2, "col": 3})
        response = self.client.post("/reset")
        assert response.status_code == 200
        assert response.json()["board"] == Board.initial().to_rows()

    def test_full_api_game_flow(self):
        r = self.client.get("/board")
        assert r.json()["turn"] == 1
        self.client.post("/move", json={"row": 2, "col": 3})
        r = self.client.post("/search", json={"depth": 2})
        row, col = r.json()["best_move"]
        r = self.client.post("/move", json={"row": row, "col": col})
        assert r.status_code == 200
        assert r.json()["turn"] == 1


# ════════════════════════════════════════════════════════════════════════════
#  TERMINAL PLAY
# ════════════════════════════════════════════════════════════════════════════


class TestCLI:
    def test_parse_move(self):
        from interface.cli import parse_move

        assert parse_move("2 3") == (2, 3)
        assert parse_move("2,3") == (2, 3)
        assert parse_move("zz") is None
        assert parse_move("1") is None

    def test_play_to_completion(self, capsys):
        from interface.cli import play

        engine = Engine(depth=1)
        answers = iter(["nonsense", "0 0"])

        def read(prompt):
            # two bad inputs first, then always the first legal move
            try:
                return next(answers)
            except StopIteration:
                m = engine.game.get_legal_moves()[0]
                return f"{m.row} {m.col}"

        play(engine, read=read)
        out = capsys.readouterr().out
        assert out.count("Illegal move, try again.") == 2
        assert "Game Over" in out
        assert engine.game.is_game_over()
