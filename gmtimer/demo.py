"""Demonstration: time a burst of console output and a Monte Carlo PI estimate."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from gmtimer.timer import AutoTimer, ManualTimer

_AUTO_FORMAT = "[{time}] ({label}) <{commitID-s}> {duration} seconds."
_MANUAL_FORMAT = "[{time}] ({label}) {duration} seconds."


def estimate_pi(total_points: int, rng: random.Random | None = None) -> float:
    """Estimate PI from the share of random unit-square points inside the circle."""
    if total_points <= 0:
        raise ValueError("total_points must be positive")
    generator = random.Random() if rng is None else rng
    inside = sum(
        1
        for _ in range(total_points)
        if generator.random() ** 2 + generator.random() ** 2 <= 1.0
    )
    return 4.0 * inside / total_points


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gmtimer-demo", description="Time two pieces of work."
    )
    parser.add_argument("--points", type=int, default=10_000_000,
                        help="random points for the PI estimate")
    parser.add_argument("--count", type=int, default=10_000,
                        help="random numbers to print")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random generator")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print the timer reports."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    print("Estimating PI...")

    with AutoTimer("auto", "std", _AUTO_FORMAT, "none", 6), \
            ManualTimer("manual1", "std", _MANUAL_FORMAT, "none", 6) as first, \
            ManualTimer("manual2", "std", _MANUAL_FORMAT, "none", 6) as second:
        first.start()
        print("".join(f"{i} {rng.randint(0, 100)} " for i in range(args.count)))
        first.end()

        second.start()
        pi = estimate_pi(args.points, rng)
        second.end()

        print(f"Estimated PI: {pi:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())