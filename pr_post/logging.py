"""Root logger setup for the pr-post CLI.

Records go to stderr so stdout carries only the rendered message. Level and
format come from the ``logging`` section of pr-post.yaml or from
LOGGING_LEVEL / LOGGING_FORMAT.
"""

import logging
import sys

from pr_post.config import LoggingConfig

DEFAULT_LEVEL = logging.WARNING


def resolve_level(name: str) -> int:
    """Return the numeric level for DEBUG, INFO, WARNING or ERROR (any case).

    Anything else maps to WARNING.
    """
    level = logging.getLevelName(name.strip().upper())
    if level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
        return level
    return DEFAULT_LEVEL


def setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger on stderr, replacing existing handlers."""
    logging.basicConfig(
        level=resolve_level(config.level),
        format=config.format or LoggingConfig.model_fields["format"].default,
        stream=sys.stderr,
        force=True,
    )
