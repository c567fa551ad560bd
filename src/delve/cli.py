from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Settings
from .core.grid import Direction
from .debug.ascii_map import render_ascii
from .errors import ConfigError, DelveError
from .game import build_session, explore
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def parse_moves(text: str) -> List[Direction]:
    """Parse "u r r d" or "urrd" into directions."""
    tokens = text.replace(",", " ").split()
    if len(tokens) == 1 and len(tokens[0]) > 1 and tokens[0].lower() not in {d.name.lower() for d in Direction}:
        tokens = list(tokens[0])
    return [Direction.parse(t) for t in tokens]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="delve", description="Explore a procedurally generated tile dungeon headlessly.")
    p.add_argument("moves", nargs="?", default="", help='Moves to attempt, e.g. "u r r d" or "urrd"')
    p.add_argument("--seed", type=int, default=None, help="Seed for the tile generator")
    p.add_argument("--tile-size", type=int, default=None, help="Distance between tile centers")
    p.add_argument("--config", type=Path, default=None, help="YAML settings file")
    p.add_argument("--map", action="store_true", help="Print an ASCII map after the summary")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.load(args.config)
    if args.seed is not None:
        settings.seed = args.seed
    if args.tile_size is not None:
        settings.tile_size = args.tile_size
    settings.validate()
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(debug=args.debug, default_level=logging.WARNING)

    try:
        moves = parse_moves(args.moves)
        settings = build_settings(args)
        session = build_session(settings)
        summary = explore(session, moves)
    except ConfigError as exc:
        logger.error("%s", exc.to_human())
        return 2
    except (DelveError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(summary, indent=2, sort_keys=True))
    if args.map:
        print(render_ascii(session.store, session.controller.current_coordinate(), settings.tile_size))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
