"""
Knights Tournament: entry point.

Usage:
    python tournament_main.py [--config config.yaml] [--quiet]

Wires together:
    config → logging → roster → tournament loop → CLI display
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path

from knights.cli.display import console, display_tournament_event, render_tournament
from knights.config import LoggingConfig, load_config
from knights.events import BoutCompleteEvent

logger = logging.getLogger("knights")


def _setup_logging(cfg: LoggingConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if cfg.file:
        log_file = Path(cfg.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=2 * 1024 * 1024, backupCount=3,  # 2 MB × 3 files
                encoding="utf-8",
            )
        )
    logging.basicConfig(
        level=cfg.level_number,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        handlers=handlers,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a knights elimination tournament.")
    parser.add_argument("--config", default="config.yaml", help="path to config.yaml")
    parser.add_argument(
        "--quiet", action="store_true", help="only show the start and the champion"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as exc:
        console.print(f"[red]Error:[/] {exc}")
        sys.exit(1)
    except ValueError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        sys.exit(1)

    _setup_logging(config.logging)

    tournament = config.build_tournament()
    logger.info(
        "Starting tournament with %d knights (draws: %s)",
        tournament.size(),
        tournament.draw_handling,
    )

    for event in tournament.rounds():
        if args.quiet and isinstance(event, BoutCompleteEvent):
            continue
        display_tournament_event(event)

    console.print()
    console.print(render_tournament(tournament))
    console.print()


if __name__ == "__main__":
    main()
