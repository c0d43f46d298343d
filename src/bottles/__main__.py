from __future__ import annotations

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from . import __version__
from .config import SongConfig, load_song_config
from .song import Bottles

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bottles",
        description="Sing 99 Bottles of Beer",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Path to a YAML song config (start/end)")
    parser.add_argument("--start", type=int, default=None, help="Bottles on the wall in the first verse")
    parser.add_argument("--end", type=int, default=None, help="Bottles on the wall in the last verse")
    parser.add_argument("--verse", type=int, default=None, help="Print only the verse for N bottles")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    bottles = Bottles()
    if args.verse is not None:
        if args.verse < 0:
            print(f"bottles: error: --verse must be >= 0, got {args.verse}", file=sys.stderr)
            return 2
        sys.stdout.write(bottles.verse(args.verse))
        return 0

    try:
        config = load_song_config(args.config)
        # CLI flags override the file
        overrides = {k: v for k, v in (("start", args.start), ("end", args.end)) if v is not None}
        if overrides:
            config = SongConfig.model_validate({**config.model_dump(), **overrides})
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        logger.debug("Invalid configuration", exc_info=True)
        print(f"bottles: error: {exc}", file=sys.stderr)
        return 2

    sys.stdout.write(bottles.verses(config.start, config.end))
    return 0


if __name__ == "__main__":
    sys.exit(main())
