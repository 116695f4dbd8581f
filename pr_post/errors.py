"""Errors raised while turning a pull request payload into a message."""


class PrPostError(Exception):
    """Base error for pr-post."""

    pass


class ParseError(PrPostError):
    """Raised when the payload is not valid JSON or not a pull request object."""

    pass


class MatchError(PrPostError):
    """Raised in strict mode when the tracker comment has no ticket link."""

    pass


class ConfigError(PrPostError):
    """Raised when the YAML config file cannot be used."""

    pass
