"""Line-delimited JSON client for a remote game server.

The server sends one game state per line::

    {"board": [[0, 0, ...], ...], "player": 1, "maxTurnTime": 15000}

and expects one move per line, ``[row, col]``, or ``null`` when the player
has no legal move.
"""

import argparse
import json
import logging
import socket
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from othello_engine.config import CONFIG
from othello_engine.core.board import Board, Move, Side
from othello_engine.core.search import SearchEngine
from othello_engine.log import configure_logging

logger = logging.getLogger(__name__)


class GameState(BaseModel):
    model_config = ConfigDict(extra="ignore")

    board: List[List[int]]
    player: int

    @field_validator("player")
    @classmethod
    def _check_player(cls, v: int) -> int:
        if v not in (Side.ONE, Side.TWO):
            raise ValueError("player must be 1 or 2")
        return v

    def to_board(self) -> Board:
        return Board.from_rows(self.board)

    @property
    def side(self) -> Side:
        return Side(self.player)


def encode_move(move: Optional[Move]) -> str:
    return json.dumps(None if move is None else [move.row, move.col])


class Client:
    def __init__(self, sock: socket.socket, engine: Optional[SearchEngine] = None):
        self.engine = engine or SearchEngine()
        self.input = sock.makefile("rb")
        self.out = sock.makefile("w", encoding="utf-8", newline="\n")

    def start(self):
        logger.info("Starting client processing ...")
        try:
            while True:
                line = self.read_line()
                if line is None:
                    break
                if not line:
                    continue
                self.respond_with_move(self.compute_move(line))
        except OSError as e:
            logger.error("Connection error: %s", e)
        finally:
            self.close_streams()
        logger.info("Client stopped")

    def read_line(self) -> Optional[bytes]:
        """Next stripped raw line, or None at end of stream."""
        logger.debug("Reading from server ...")
        next_line = self.input.readline()
        logger.debug("Read data: %r", next_line.rstrip(b"\n"))
        if not next_line:
            return None
        return next_line.strip()

    def compute_move(self, line: bytes) -> Optional[Move]:
        try:
            state = GameState.model_validate_json(line.decode("utf-8"))
            board = state.to_board()
        except (UnicodeDecodeError, ValidationError, ValueError) as e:
            logger.warning("Could not decode game state: %s", e)
            return None
        return self.engine.best_move(board, state.side)

    def respond_with_move(self, move: Optional[Move]):
        encoded = encode_move(move)
        logger.debug("Sending response: %s", encoded)
        self.out.write(encoded)
        self.out.write("\n")
        self.out.flush()

    def close_streams(self):
        for stream in (self.input, self.out):
            try:
                stream.close()
            except OSError as e:
                logger.warning("Error closing stream: %s", e)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Connect the Othello engine to a game server.")
    parser.add_argument("host", nargs="?", default=CONFIG.client.host)
    parser.add_argument("port", nargs="?", type=int, default=CONFIG.client.port)
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth, help="search depth in plies")
    parser.add_argument("--log-level", default=CONFIG.log_level)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger.info("Connecting to %s at %d", args.host, args.port)
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as e:
        logger.error("Could not connect: %s", e)
        return 1
    with sock:
        Client(sock, SearchEngine(depth=args.depth)).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
