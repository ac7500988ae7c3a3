"""Data models for release notes composition."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class CommitCategory(str, Enum):
    """Changelog group a commit is listed under."""

    FEATURE = "feature"
    FIX = "fix"
    OTHER = "other"
    IGNORED = "ignored"


class PullRequestInfo(BaseModel):
    """The parts of a pull request the release notes are built from."""

    model_config = ConfigDict(frozen=True)

    number: int
    author: str
    title: str
    body: str = ""
    merge_commit_sha: str | None = None
    merged: bool = False

    @classmethod
    def from_api(cls, pull_request: Any) -> "PullRequestInfo":
        """Build from a githubkit pull request model."""
        user = getattr(pull_request, "user", None)
        return cls(
            number=pull_request.number,
            author=getattr(user, "login", None) or "",
            title=pull_request.title,
            body=pull_request.body or "",
            merge_commit_sha=pull_request.merge_commit_sha,
            merged=pull_request.merged_at is not None,
        )


class CommitInfo(BaseModel):
    """A commit listed in a comparison between two references."""

    model_config = ConfigDict(frozen=True)

    message: str
    author_login: str | None = None
    author_name: str = ""

    @property
    def subject(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]

    @property
    def attribution(self) -> str:
        """Account handle of the author, or the git author name when GitHub has no account for it."""
        return self.author_login or self.author_name

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CommitInfo":
        """Build from a raw commit entry of the compare API."""
        account = data.get("author") or {}
        git_commit = data.get("commit") or {}
        git_author = git_commit.get("author") or {}
        return cls(
            message=git_commit.get("message") or "",
            author_login=account.get("login") or None,
            author_name=git_author.get("name") or "",
        )


class ClassifiedCommit(BaseModel):
    """A commit as it appears in the changelog."""

    model_config = ConfigDict(frozen=True)

    category: CommitCategory
    text: str
    attribution: str

    def as_list_item(self) -> str:
        """Markdown list item for the changelog."""
        return f"- {self.text} ({self.attribution})"
