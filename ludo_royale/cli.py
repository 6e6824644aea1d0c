import argparse
import sys

from loguru import logger

from .config import config
from .simulator import Simulator


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play seeded Ludo Royale games headlessly and report the results"
    )
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument(
        "--games", type=int, default=1, help="Number of games to simulate"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Turn cap per game",
    )
    parser.add_argument(
        "--log-level", type=str, default=config.LOG_LEVEL, help="loguru sink level"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    wins: dict[str, int] = {}
    for i in range(args.games):
        seed = None if args.seed is None else args.seed + i
        sim = Simulator.seeded(seed)
        report = sim.run(max_turns=args.max_turns)
        logger.info(f"Game {i + 1}/{args.games} (seed={seed}): {report.summary()}")
        key = report.winner.display_name if report.winner is not None else "none"
        wins[key] = wins.get(key, 0) + 1

    logger.info(f"Wins: {wins}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
