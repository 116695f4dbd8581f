"""Data models for the pull request payload (Pydantic)."""

from pr_post.models.comment import Author, Comment
from pr_post.models.pr import PullRequestPayload

__all__ = ["Author", "Comment", "PullRequestPayload"]
