#!/usr/bin/env python3
from __future__ import annotations

import logging
import math
import os
import statistics as stats
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from tictactoe.playouts import random_game, replay


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    games: int = field(default_factory=lambda: int(os.getenv("TTT_BENCH_GAMES", "1000")))
    rounds: int = field(default_factory=lambda: int(os.getenv("TTT_BENCH_ROUNDS", "10")))


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    playout_times: List[float] = []
    replay_times: List[float] = []
    for s in range(cfg.rounds):
        t0 = time.perf_counter()
        games = [random_game(seed=s * cfg.games + i) for i in range(cfg.games)]
        t1 = time.perf_counter()
        playout_times.append(t1 - t0)
        t2 = time.perf_counter()
        for moves in games:
            replay(moves)
        t3 = time.perf_counter()
        replay_times.append(t3 - t2)
    m_play, h_play = ci95(playout_times)
    m_replay, h_replay = ci95(replay_times)
    logging.info("rounds=%d games_per_round=%d", cfg.rounds, cfg.games)
    logging.info("random_game: mean=%.4fs ± %.4fs (95%% CI)", m_play, h_play)
    logging.info("replay: mean=%.4fs ± %.4fs (95%% CI)", m_replay, h_replay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
