from othello_engine.core.board import Side
from othello_engine.main import Engine


def parse_move(text: str):
    """'2 3' or '2,3' -> (2, 3); None if malformed."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        return None
    return int(parts[0]), int(parts[1])


def play(engine: Engine, human: Side = Side.ONE, read=input):
    game = engine.game
    while not game.is_game_over():
        print(game.board)
        print("----------------------------")

        if game.turn == human:  # human plays side one (X)
            move = parse_move(read("Enter your move (row col, e.g. 2 3): "))
            if move is None or not game.make_move(*move):
                print("Illegal move, try again.")
                continue
        else:
            move, score = engine.get_best_move()
            print(f"Engine plays: {move} | Eval: {score}")
            game.make_move(move.row, move.col)

    print(game.board)
    print("Game Over")
    one, two = game.score()
    print(f"Result: X {one} - O {two}")


if __name__ == "__main__":
    play(Engine())
