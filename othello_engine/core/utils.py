def format_info(depth, score, nodes, elapsed, move):
        nps = int(nodes * 1000 / elapsed) if elapsed > 0 else 0
        move_str = str(move) if move is not None else "none"
        return f"info depth {depth} score {score} nodes {nodes} nps {nps} time {int(elapsed)} move {move_str}"
