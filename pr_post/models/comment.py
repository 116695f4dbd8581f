"""Comment on a pull request, as emitted by `gh pr view --json comments`."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Author(BaseModel):
    """Comment author."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = Field(..., description="Author login, e.g. linear")


class Comment(BaseModel):
    """Comment on a PR."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    author: Author
    body: str = Field(default="", description="Comment body (markdown)")

    @field_validator("body", mode="before")
    @classmethod
    def _none_body_to_empty(cls, v: object) -> object:
        return "" if v is None else v
