"""Run the selection verification scenarios or select from a given list."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from ..config import load_settings
from ..logging_setup import get_logger, setup_logging
from .selector import SelectionStrategy, select
from .verification import run_default_scenarios

log = get_logger(__name__)


def _parse_values(raw: str) -> List[float]:
    values: List[float] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.append(int(token))
        except ValueError:
            try:
                values.append(float(token))
            except ValueError:
                raise argparse.ArgumentTypeError(f"not a number: {token!r}") from None
    return values


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m algorithms.selection",
        description="Find the n-th smallest value, or verify both selection strategies.",
    )
    parser.add_argument("--values", type=_parse_values, help="comma separated numbers, e.g. 3,1,4,1,5")
    parser.add_argument("--rank", type=int, default=1, help="1-based rank to select (default: 1)")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in SelectionStrategy],
        default=None,
        help="selection strategy (default: from settings, normally 'partition')",
    )
    parser.add_argument("--config", default=None, help="YAML settings file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config)
    setup_logging(settings.logging)

    if args.values is None:
        report = run_default_scenarios()
        summary = report.summary()
        log.info("verification finished", **summary)
        print(f"{summary['passed']}/{summary['total']} checks passed")
        return 0 if report.passed else 1

    strategy = args.strategy or settings.default_strategy
    result = select(args.values, args.rank, strategy)
    log.debug("selected", strategy=str(strategy), rank=args.rank, ok=result.ok)
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        return 2
    print(result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
