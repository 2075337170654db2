"""CLI interface for SlashVibeRepo."""

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from slashviberepo.core.config import Config, load_config, load_config_from_env
from slashviberepo.core.logging import setup_logging
from slashviberepo.main import RelayRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SlashVibeRepo - relay Slack /new-repo requests to Poppit",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a YAML configuration file (default: read the environment)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def resolve_config(config_path: Path | None) -> Config:
    """Load configuration from ``config_path`` or, when absent, the environment."""
    if config_path is not None:
        return load_config(config_path)
    return load_config_from_env()


async def run_relay(config: Config) -> None:
    """Run the relay until SIGINT or SIGTERM."""
    runner = RelayRunner(config)

    loop = asyncio.get_running_loop()
    stop_event = asyncio.Event()

    def signal_handler() -> None:
        logger.info("Received shutdown signal, cleaning up...")
        stop_event.set()

    loop.add_signal_handler(signal.SIGINT, signal_handler)
    loop.add_signal_handler(signal.SIGTERM, signal_handler)

    try:
        await runner.start()
        await stop_event.wait()
    finally:
        await runner.stop()


async def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    load_dotenv()

    try:
        config = resolve_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        setup_logging("INFO")
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(1)

    setup_logging("DEBUG" if args.verbose else config.logging.level)
    logger.info("Starting SlashVibeRepo service...")

    try:
        await run_relay(config)
    except RuntimeError as e:
        logger.error(f"{e}")
        sys.exit(1)


def run() -> None:
    """Entry point for the console script."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
