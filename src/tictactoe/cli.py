from __future__ import annotations

import argparse
import logging

from .encoding import deserialize_board, format_moves, parse_moves, serialize_board
from .errors import TicTacToeError
from .model import TicTacToeModel, render_board
from .playouts import random_game, replay


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Replay a move sequence and report the outcome")
    p_play.add_argument("--moves", help='Moves as row,col pairs, e.g. "0,0 1,1 0,1" (omit with --stdin)')
    p_play.add_argument(
        "--stdin", action="store_true", help="Read one move sequence per line and stream CSV output"
    )

    p_sim = sub.add_parser("simulate", help="Generate random games and stream CSV output")
    p_sim.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")
    p_sim.add_argument("--seed", type=int, default=0, help="Base seed; game i uses seed+i")

    p_ren = sub.add_parser("render", help="Render a board (9 digits, 0=empty,1=X,2=O)")
    p_ren.add_argument("--board", required=True, help="Board string, e.g., 100020000")

    return p


def _status(game: TicTacToeModel) -> str:
    if game.is_game_over():
        w = game.get_winner()
        return f"status=over winner={'none' if w is None else w}"
    return f"status=in_progress turn={game.get_turn()}"


def _cmd_play(ns: argparse.Namespace) -> int:
    import sys as _sys

    if ns.stdin:
        import csv as _csv
        w = _csv.writer(_sys.stdout)
        w.writerow(["moves", "board", "status", "winner"])
        for line in _sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                moves = parse_moves(raw)
                game = replay(moves)
            except (ValueError, TicTacToeError) as e:
                logging.debug("skipping %r: %s", raw, e)
                continue
            winner = game.get_winner()
            w.writerow([
                format_moves(moves),
                serialize_board(game.get_board()),
                "over" if game.is_game_over() else "in_progress",
                "" if winner is None else str(winner),
            ])
        return 0

    try:
        moves = parse_moves(ns.moves or "")
    except ValueError as e:
        logging.error("%s", e)
        return 2
    game = TicTacToeModel()
    for i, (r, c) in enumerate(moves, start=1):
        try:
            game.move(r, c)
        except TicTacToeError as e:
            logging.error("Move %d (%d,%d) rejected: %s", i, r, c, e)
            return 2
    logging.info("board:\n%s", game)
    logging.info("moves=%d %s", game.move_count, _status(game))
    return 0


def _cmd_simulate(ns: argparse.Namespace) -> int:
    import csv as _csv
    import sys as _sys

    if ns.games < 0:
        logging.error("--games must be non-negative: %s", ns.games)
        return 2
    if ns.seed < 0:
        logging.error("--seed must be non-negative: %s", ns.seed)
        return 2
    w = _csv.writer(_sys.stdout)
    w.writerow(["game", "moves", "board", "winner"])
    for i in range(ns.games):
        moves = random_game(seed=ns.seed + i)
        game = replay(moves)
        winner = game.get_winner()
        w.writerow([i, format_moves(moves), serialize_board(game.get_board()), "" if winner is None else str(winner)])
    logging.debug("simulated games=%d seed=%d", ns.games, ns.seed)
    return 0


def _cmd_render(ns: argparse.Namespace) -> int:
    try:
        board = deserialize_board(ns.board)
    except ValueError as e:
        logging.error("%s", e)
        return 2
    logging.info("board:\n%s", render_board(board))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("tictactoe"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if ns.cmd == "play":
        if not ns.stdin and ns.moves is None:
            logging.error("play needs --moves or --stdin")
            return 2
        return _cmd_play(ns)
    if ns.cmd == "simulate":
        return _cmd_simulate(ns)
    if ns.cmd == "render":
        return _cmd_render(ns)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
