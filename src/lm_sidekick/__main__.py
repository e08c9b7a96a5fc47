"""Command line entry point: ``lm-sidekick`` or ``python -m lm_sidekick``."""
from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace
from typing import Optional, Sequence

from lm_sidekick.logging_config import configure_logging
from lm_sidekick.server import serve
from lm_sidekick.settings import Settings

logger = logging.getLogger("lm_sidekick")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lm-sidekick",
        description="MCP server that offloads context and menial tasks to a local LM Studio model.",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file (defaults to the nearest .env)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Overrides LOG_LEVEL",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env(args.env_file)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)

    try:
        configure_logging(settings.log_level, settings.log_dir)
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Received SIGINT, shutting down gracefully...")
    except Exception:
        logger.exception("Failed to start server")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
