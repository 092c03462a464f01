#!/usr/bin/env python3
"""Entrypoint resolving and printing the scheduler simulator configuration."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import cast

from rich.console import Console
from rich.logging import RichHandler

from simulator import constants
from simulator.config import ConfigError, new_config


class Args(argparse.Namespace):
    config: Path
    log_level: str
    rich_logs: bool


logger = logging.getLogger(__name__)


def parse_args() -> Args:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Resolve the kube-scheduler simulator configuration",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=Path(constants.CONFIG_FILE),
        help="Path to the YAML settings file (optional, defaults apply when missing)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )

    parser.add_argument(
        "--rich-logs",
        action="store_true",
        help="Enable rich colored logging output",
    )

    return cast(Args, parser.parse_args())


def configure_logging(log_level: str, use_rich: bool = False) -> None:
    """Configure logging with optional rich formatting.

    Logs go to stderr so stdout only carries the printed configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Whether to use rich colored logging
    """
    if use_rich:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[
                RichHandler(
                    console=Console(stderr=True),
                    show_path=True,
                    show_time=True,
                    show_level=True,
                    markup=True,
                    rich_tracebacks=True,
                )
            ],
        )
    else:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(asctime)s [%(name)s:%(filename)s:%(lineno)d] %(levelname)s: %(message)s",
        )

    # silence libs logging
    # - kubernetes - prints resources content when debug
    # - urllib3 - we don't care about those debug posts
    logging.getLogger("kubernetes").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main() -> int:
    """Main function."""
    args = parse_args()

    configure_logging(args.log_level, args.rich_logs)

    logger.info("Resolving simulator configuration from %s", args.config)

    try:
        config = new_config(args.config)
    except ConfigError as e:
        logger.error("Invalid configuration (step %s): %s", e.step, e)
        return 1
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        return 0
    except Exception as e:
        logger.error("Error resolving configuration: %s", e, exc_info=True)
        return 1

    print(json.dumps(config.to_summary(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
