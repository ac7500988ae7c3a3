"""Base ABC for the source-hosting client used by the release steps."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class SourceHostingClient(ABC):
    """The source-hosting operations the release workflow steps depend on."""

    # Pull Requests
    @abstractmethod
    async def list_pull_requests(
        self,
        state: Literal["open", "closed", "all"] = "closed",
        sort: Literal["created", "updated", "popularity", "long-running"] = "updated",
        direction: Literal["asc", "desc"] = "desc",
        per_page: int = 10,
    ) -> list[Any]:
        """List one page of pull requests for the repository."""
        pass

    # Tags and Commits
    @abstractmethod
    async def list_tags(self, per_page: int = 1) -> list[Any]:
        """List the most recent tags of the repository."""
        pass

    @abstractmethod
    async def compare_commits(self, base: str, head: str) -> list[dict[str, Any]]:
        """List the commits reachable from head but not from base, oldest first."""
        pass

    # Releases
    @abstractmethod
    async def create_release(
        self,
        tag_name: str,
        name: str,
        body: str,
        draft: bool = False,
        prerelease: bool = False,
        target_commitish: str | None = None,
    ) -> Any:
        """Create a release and its tag."""
        pass

    @abstractmethod
    async def upload_release_asset(self, release_id: int, name: str, data: bytes, upload_url: str | None = None) -> Any:
        """Upload a binary asset to a release, through its upload URL when one is given."""
        pass

    # Issues
    @abstractmethod
    async def create_issue(self, title: str, body: str | None = None, labels: list[str] | None = None) -> Any:
        """Create an issue for the repository."""
        pass
