"""Render the review-request message from a pull request payload."""

import json
import logging

from pydantic import ValidationError

from pr_post.config import MessageConfig
from pr_post.errors import ParseError
from pr_post.links import find_linear_url, find_loom_url
from pr_post.models import PullRequestPayload

log = logging.getLogger(__name__)


def _default_config() -> MessageConfig:
    """MessageConfig field defaults, without reading the environment."""
    return MessageConfig.model_construct()


def parse_payload(raw: str) -> PullRequestPayload:
    """Decode JSON text into a PullRequestPayload.

    Raises ParseError for malformed JSON and for JSON that is not a pull
    request object (missing title/url, wrong field types).
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"Payload is not valid JSON: {e}") from e
    try:
        return PullRequestPayload.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Payload is not a pull request object: {e}") from e


def file_label(count: int) -> str:
    """Return 'file' or 'files'; only counts above one are plural."""
    return "files" if count > 1 else "file"


def format_message(payload: PullRequestPayload, config: MessageConfig | None = None) -> str:
    """Build the chat message for a review request.

    Ticket and Loom lines are included only when the link was found.
    Without a config the field defaults are used; MESSAGE_* env vars are
    only read when the caller builds MessageConfig (as the CLI does).
    """
    config = config or _default_config()
    linear_url = find_linear_url(
        payload.comments,
        author_login=config.tracker_author,
        strict=config.strict_tracker_match,
    )
    loom_url = find_loom_url(payload.body)
    count = payload.file_change_count
    log.debug("PR %s: %d files, ticket=%s, loom=%s", payload.url, count, linear_url, loom_url)

    lines = [
        f"*{config.header}*",
        "",
        f"{config.title_marker} {payload.title}",
        f"{config.pr_marker} PR ({count} {file_label(count)} changed) - {payload.url}",
    ]
    if linear_url:
        lines.append(f"{config.ticket_marker} Ticket - {linear_url}")
    if loom_url:
        lines.append(f"{config.loom_marker} Loom - {loom_url}")
    return "\n".join(lines).strip()


class MessageFormatter:
    """Decode a raw JSON payload and render the message with a fixed config."""

    def __init__(self, config: MessageConfig | None = None) -> None:
        self._config = config or _default_config()

    def render(self, raw: str) -> str:
        """Parse raw JSON text and return the formatted message."""
        return format_message(parse_payload(raw), self._config)
