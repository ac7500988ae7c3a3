"""GitHub client adapter for the githubkit library."""

from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import (
    Issue,
    PullRequestSimple,
    Release,
    ReleaseAsset,
    Tag,
)

from github_release_ops.configuration.models import GitHubAuthenticationType
from github_release_ops.utils.github import expand_upload_url, split_repository
from github_release_ops.utils.retry import retry_on_rate_limit

from .abc import SourceHostingClient
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

COMPARE_PAGE_SIZE = 100


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code != 422:
                raise
            try:
                error_data = exc.response.json()
            except Exception:
                error_data = {}
            message = error_data.get("message", "Unprocessable Entity")
            errors = error_data.get("errors", [])
            logger.error(
                "GitHub 422 Unprocessable Entity",
                function=func.__name__,
                message=message,
                errors=errors,
                status_code=422,
            )
            raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(SourceHostingClient):
    """Source-hosting client backed by the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub client adapter for a repository in 'owner/repo' format."""
        owner, repo_name = split_repository(repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
            auth_type=github_auth_type.value,
        )
        client = get_github_client(
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    # Pull Requests
    @retry_on_rate_limit()
    async def list_pull_requests(
        self,
        state: Literal["open", "closed", "all"] = "closed",
        sort: Literal["created", "updated", "popularity", "long-running"] = "updated",
        direction: Literal["asc", "desc"] = "desc",
        per_page: int = 10,
    ) -> list[PullRequestSimple]:
        """List the first page of pull requests in the given order."""
        response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
            owner=self.owner,
            repo=self.repo_name,
            state=state,
            sort=sort,
            direction=direction,
            per_page=per_page,
        )
        pull_requests = response.parsed_data
        logger.debug("Fetched pull requests", state=state, count=len(pull_requests))
        return pull_requests

    # Tags and Commits
    @retry_on_rate_limit()
    async def list_tags(self, per_page: int = 1) -> list[Tag]:
        """List the most recent tags of the repository."""
        response: Response[list[Tag]] = await self.client.rest.repos.async_list_tags(
            owner=self.owner,
            repo=self.repo_name,
            per_page=per_page,
        )
        return response.parsed_data

    @retry_on_rate_limit()
    async def compare_commits(self, base: str, head: str) -> list[dict[str, Any]]:
        """List the commits between two references, handling pagination.

        Returns the raw commit data as dictionaries; the author of a commit may
        be null when GitHub cannot map the commit email to an account, which
        the raw payload represents faithfully.
        """
        all_commits: list[dict[str, Any]] = []
        page: int = 1
        while True:
            response = await self.client.rest.repos.async_compare_commits(
                owner=self.owner,
                repo=self.repo_name,
                basehead=f"{base}...{head}",
                per_page=COMPARE_PAGE_SIZE,
                page=page,
            )
            payload: dict[str, Any] = response.json()
            commits: list[dict[str, Any]] = payload.get("commits") or []
            all_commits.extend(commits)
            total_commits = payload.get("total_commits", len(all_commits))
            if not commits or len(commits) < COMPARE_PAGE_SIZE or len(all_commits) >= total_commits:
                break
            page += 1
        logger.info("Compared commits", base=base, head=head, total_commits=len(all_commits))
        return all_commits

    # Releases
    @handle_github_422
    @retry_on_rate_limit()
    async def create_release(
        self,
        tag_name: str,
        name: str,
        body: str,
        draft: bool = False,
        prerelease: bool = False,
        target_commitish: str | None = None,
    ) -> Release:
        """Create a release and its tag."""
        params = self._omit_null_parameters(target_commitish=target_commitish)
        response: Response[Release] = await self.client.rest.repos.async_create_release(
            owner=self.owner,
            repo=self.repo_name,
            tag_name=tag_name,
            name=name,
            body=body,
            draft=draft,
            prerelease=prerelease,
            **params,
        )
        return response.parsed_data

    @handle_github_422
    @retry_on_rate_limit()
    async def upload_release_asset(self, release_id: int, name: str, data: bytes, upload_url: str | None = None) -> ReleaseAsset:
        """Upload a binary asset to a release.

        When the release's hypermedia ``upload_url`` is known the asset is sent
        to that host (uploads.github.com on github.com). Otherwise the request
        goes through the REST endpoint on the API host.
        """
        if upload_url:
            response: Response[ReleaseAsset] = await self.client.arequest(
                "POST",
                expand_upload_url(upload_url),
                params={"name": name},
                content=data,
                headers={"Content-Type": "application/octet-stream"},
                response_model=ReleaseAsset,
            )
        else:
            response = await self.client.rest.repos.async_upload_release_asset(
                owner=self.owner,
                repo=self.repo_name,
                release_id=release_id,
                name=name,
                data=data,
            )
        logger.debug("Uploaded release asset", release_id=release_id, name=name, size=len(data))
        return response.parsed_data

    # Issues
    @handle_github_422
    @retry_on_rate_limit()
    async def create_issue(self, title: str, body: str | None = None, labels: list[str] | None = None) -> Issue:
        """Create an issue for the repository."""
        params = self._omit_null_parameters(body=body, labels=labels)
        response: Response[Issue] = await self.client.rest.issues.async_create(
            owner=self.owner,
            repo=self.repo_name,
            title=title,
            **params,
        )
        return response.parsed_data
