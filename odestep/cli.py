"""Command line selector of the demo scenarios."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from odestep.core.errors import ODEError
from odestep.demos import DEMOS, get_demo

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="odestep",
        description="Run the demonstration scenarios of the ODE solver.",
    )
    parser.add_argument("-l", "--list", action="store_true",
                        help="list the existing demos")
    parser.add_argument("-d", "--demo", default="",
                        help="name of the demo to execute")
    parser.add_argument("-p", "--plot", action="store_true",
                        help="plot results after the simulation process (requires matplotlib)")
    parser.add_argument("-o", "--outdir", type=Path, default=Path("."),
                        help="directory receiving the data and figure files")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for demo in DEMOS:
            print(f"{demo.label:<10}: {demo.comment}")
        return 0

    if not args.demo:
        parser.print_usage()
        return 0

    try:
        demo = get_demo(args.demo)
        args.outdir.mkdir(parents=True, exist_ok=True)
        logger.info("Execution of the demo %s ...", args.demo)
        demo.function(args.outdir, args.plot)
    except (ODEError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
