"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from roshambo.settings import AppSettings

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def parse_settings(argv: list[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from command-line flags."""
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="roshambo",
        description="Play a self-narrating rock-paper-scissors style match.",
    )
    parser.add_argument(
        "--mode",
        default=defaults.game_mode,
        help="built-in mode name or path to a JSON mode file",
    )
    parser.add_argument(
        "--spectate",
        action="store_true",
        help="computer vs computer instead of player vs computer",
    )
    parser.add_argument("--rounds", type=int, default=defaults.rounds)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--tick-ms", type=int, default=defaults.tick_interval_ms)
    parser.add_argument("--log-level", default=defaults.log_level)
    args = parser.parse_args(argv)

    if args.rounds < 0:
        parser.error("--rounds must be >= 0")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be > 0")

    return AppSettings(
        game_mode=args.mode,
        player_mode=not args.spectate,
        rounds=args.rounds,
        seed=args.seed,
        tick_interval_ms=args.tick_ms,
        log_level=args.log_level.upper(),
    )


def setup_logging(level: str) -> None:
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        numeric = logging.INFO
        logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
        logging.getLogger(__name__).warning("Unknown log level %r, using INFO", level)
        return
    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def main() -> None:
    """Launch the Roshambo application."""
    settings = parse_settings(sys.argv[1:])
    setup_logging(settings.log_level)

    from roshambo.core.errors import GameModeError
    from roshambo.ui.bootstrap import run_application

    try:
        code = run_application([sys.argv[0]], settings)
    except (GameModeError, KeyError, OSError, ValueError) as exc:
        logging.getLogger(__name__).error("Cannot start: %s", exc)
        code = 2
    sys.exit(code)


if __name__ == "__main__":
    main()
