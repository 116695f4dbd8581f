"""Pull request payload model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pr_post.models.comment import Comment


class PullRequestPayload(BaseModel):
    """Pull request metadata: title, body, url, changed files and comments.

    Extra keys from the `gh` JSON output are ignored. Only the number of
    entries in `files` is used, so their shape is not checked.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    url: str
    body: str = Field(default="", description="PR description (may contain a Loom link)")
    files: list[Any] = Field(default_factory=list, description="Changed files")
    comments: list[Comment] = Field(default_factory=list, description="Comments in thread order")

    @field_validator("body", mode="before")
    @classmethod
    def _none_body_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("files", "comments", mode="before")
    @classmethod
    def _none_list_to_empty(cls, v: object) -> object:
        return [] if v is None else v

    @property
    def file_change_count(self) -> int:
        """Number of changed files."""
        return len(self.files)
