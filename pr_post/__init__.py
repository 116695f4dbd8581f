"""pr-post: format a review-request chat message from pull request JSON."""

from pr_post.errors import ConfigError, MatchError, ParseError, PrPostError
from pr_post.formatter import MessageFormatter, format_message, parse_payload

__all__ = [
    "ConfigError",
    "MatchError",
    "MessageFormatter",
    "ParseError",
    "PrPostError",
    "format_message",
    "parse_payload",
]
