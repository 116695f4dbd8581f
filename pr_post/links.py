"""Locate the Linear ticket and Loom recording links.

Both patterns accept http, https and ftp, require the literal host and then a
path of URL-safe characters. The path must not end in ``.``, ``,`` or ``:``,
so sentence punctuation right after a link is left out of the match.
"""

import logging
import re
from typing import Iterable

from pr_post.errors import MatchError
from pr_post.models import Comment

log = logging.getLogger(__name__)

# (scheme)://(host)(path)
_PATH = r"([\w.,@?^=%&:/~+#-]*[\w@?^=%&/~+#-])"

LINEAR_URL_RE = re.compile(r"(http|ftp|https)://(linear\.app)" + _PATH, re.ASCII)
LOOM_URL_RE = re.compile(r"(http|ftp|https)://(www\.loom\.com)" + _PATH, re.ASCII)

LINEAR_BOT_LOGIN = "linear"


def find_linear_url(
    comments: Iterable[Comment],
    author_login: str = LINEAR_BOT_LOGIN,
    strict: bool = False,
) -> str | None:
    """Return the ticket link from the first comment posted by the tracker bot.

    Returns None when no comment is authored by ``author_login``. When such a
    comment exists but holds no Linear link, returns None (logging a warning),
    or raises MatchError if ``strict`` is set.
    """
    comment = next((c for c in comments if c.author.login == author_login), None)
    if comment is None:
        log.debug("No comment from %s", author_login)
        return None

    match = LINEAR_URL_RE.search(comment.body)
    if match is None:
        if strict:
            raise MatchError(f"Comment from {author_login} has no Linear link")
        log.warning("Comment from %s has no Linear link; ticket line omitted", author_login)
        return None
    return match.group(0)


def find_loom_url(body: str) -> str | None:
    """Return the first Loom link in the PR body, or None."""
    match = LOOM_URL_RE.search(body or "")
    return match.group(0) if match else None
