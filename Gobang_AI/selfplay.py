"""Arena: play the search engine against simple baselines and summarise the results."""

from __future__ import annotations

import argparse
import json
import random
import statistics
import time
from collections import Counter
from pathlib import Path

try:
    from Board import HUMAN
    from GobangEngine import GobangEngine, AI_WON, HUMAN_WON, DRAW
    from Player import Player
    from ai import move_selector, heuristic
    from engine import gobang_rules
    from utils.config import EngineConfig
except ImportError:
    from .Board import HUMAN
    from .GobangEngine import GobangEngine, AI_WON, HUMAN_WON, DRAW
    from .Player import Player
    from .ai import move_selector, heuristic
    from .engine import gobang_rules
    from .utils.config import EngineConfig


def baseline_candidates(board):
    """Neighbour candidates, or the centre on an empty board."""
    candidates = move_selector.generate_candidates(board)
    if not candidates and not board.occupied:
        center = board.size // 2
        return [(center, center)]
    return candidates or board.empty_cells()


class RandomBaseline(Player):
    """Random move next to an existing stone."""

    def __init__(self, side=HUMAN, rng=None):
        super().__init__(side)
        self.rng = rng or random.Random()

    def next_move(self, board):
        candidates = baseline_candidates(board)
        if not candidates:
            raise ValueError("No moves left for baseline player")
        return self.rng.choice(candidates)


class GreedyBaseline(Player):
    """Greedy baseline: pick the move with the best one-ply heuristic score."""

    def __init__(self, side=HUMAN, patterns=None):
        super().__init__(side)
        self.patterns = patterns

    def next_move(self, board):
        candidates = baseline_candidates(board)
        if not candidates:
            raise ValueError("No moves left for baseline player")

        best_score = None
        best_move = candidates[0]
        for mv in candidates:
            with gobang_rules.simulate(board, self.side, mv):
                score = heuristic.evaluate(board, self.side, patterns=self.patterns)
            if best_score is None or score > best_score:
                best_score = score
                best_move = mv
        return best_move


def make_baseline_player(kind: str, patterns=None, rng=None):
    if kind == "random":
        return RandomBaseline(HUMAN, rng=rng)
    if kind == "greedy":
        return GreedyBaseline(HUMAN, patterns)
    raise ValueError(f"Unknown baseline: {kind}")


def play_game(engine: GobangEngine, opponent: Player):
    """
    Play one game between engine (computer side) and opponent (human side).
    Returns (final_state, info).
    """
    search_times = []
    steps = 0
    first_move = None

    if engine.config.ai_black:
        first_move = engine.opening_move()
        steps += 1

    while not engine.is_game_over():
        if engine.human_to_move():
            move = opponent.next_move(engine.board)
            engine.record_human_move(move)
        else:
            start = time.time()
            move = engine.compute_computer_move()
            search_times.append(time.time() - start)
        if first_move is None:
            first_move = move
        steps += 1

    info = {
        "steps": steps,
        "first_move": first_move,
        "search_time_mean": statistics.mean(search_times) if search_times else 0.0,
        "search_time_max": max(search_times) if search_times else 0.0,
    }
    return engine.state, info


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the Gobang engine against a baseline")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--depth", type=int, default=2, help="Search depth for the engine (1-4)")
    parser.add_argument("--baseline", choices=["random", "greedy"], default="greedy", help="Opponent type")
    parser.add_argument("--swap-colors", action="store_true", help="Alternate which side plays black each game")
    parser.add_argument("--ai-black", action="store_true", help="Engine plays black (first game when swapping)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for baseline randomness and Zobrist tables")
    parser.add_argument("--output", default="selfplay_stats.json", help="Summary JSON path")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    patterns = heuristic.load_patterns()

    results = Counter()
    lengths = []
    openings = Counter()
    time_means = []

    for g in range(args.games):
        ai_black = args.ai_black != (args.swap_colors and g % 2 == 1)
        config = EngineConfig(depth=args.depth, ai_black=ai_black, seed=args.seed)
        engine = GobangEngine(config, patterns=patterns, logger=None)
        opponent = make_baseline_player(args.baseline, patterns=patterns, rng=rng)

        state, info = play_game(engine, opponent)
        results[state] += 1
        lengths.append(info["steps"])
        openings[info["first_move"]] += 1
        time_means.append(info["search_time_mean"])

        print(
            f"[{g+1}/{args.games}] result={state} (engine {'black' if ai_black else 'white'}, "
            f"depth={args.depth}, baseline={args.baseline}), steps={info['steps']}, "
            f"search_time_mean={info['search_time_mean']:.3f}s"
        )

    if lengths:
        print(f"Steps: mean={statistics.mean(lengths):.1f}, min={min(lengths)}, max={max(lengths)}")
    print(f"Results: {dict(results)}")

    games = sum(results.values())
    summary = {
        "games": games,
        "depth": args.depth,
        "baseline": args.baseline,
        "ai_wins": results[AI_WON],
        "human_wins": results[HUMAN_WON],
        "draws": results[DRAW],
        "ai_points": (results[AI_WON] + 0.5 * results[DRAW]) / games if games else 0.0,
        "avg_steps": statistics.mean(lengths) if lengths else 0,
        "search_time_mean": statistics.mean(time_means) if time_means else 0.0,
        "top_openings": [[list(mv), c] for mv, c in openings.most_common(5) if mv is not None],
    }
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
    print(f"Saved stats for {games} games to {output_path}")
    return summary


if __name__ == "__main__":
    main()
