"""pr-post entry point.

Reads pull request JSON (e.g. from `gh pr view --json
title,body,url,files,comments`) and prints a review-request message for
chat. Usage: pr-post '<json>' | pr-post - (read from stdin).
"""

import argparse
import logging
import sys
from pathlib import Path

from pr_post.config import DEFAULT_CONFIG_PATH, LoggingConfig, load_config
from pr_post.formatter import MessageFormatter
from pr_post.logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="pr-post",
        description="Format a review request chat message from pull request JSON",
    )
    parser.add_argument("payload", help="Pull request JSON, or - to read it from stdin")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the tracker comment has no ticket link",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: render the message and write it to stdout."""
    args = parse_args(argv)
    log = logging.getLogger(__name__)
    try:
        config = load_config(args.config)
    except Exception as e:
        setup_logging(LoggingConfig())
        log.exception("Failed to load config %s: %s", args.config, e)
        return 1
    setup_logging(config.logging)

    message_config = config.message
    if args.strict:
        message_config = message_config.model_copy(update={"strict_tracker_match": True})

    raw = sys.stdin.read() if args.payload == "-" else args.payload
    try:
        message = MessageFormatter(message_config).render(raw)
    except Exception as e:
        log.exception("Failed to format message: %s", e)
        return 1

    sys.stdout.write(message)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
