"""Compose the release notes for the commit being released."""

import structlog

from github_release_ops.configuration.models import ReleaseNotesConfig
from github_release_ops.github.abc import SourceHostingClient
from github_release_ops.utils.constants import CHANGELOG_FALLBACK, EMPTY_TREE_SHA
from github_release_ops.utils.github import build_compare_url

from .changelog import render_changelog
from .description import build_release_description
from .models import CommitInfo, PullRequestInfo

logger = structlog.get_logger(__name__)


def join_release_notes(description: str, changelog: str, pull_request: PullRequestInfo | None) -> str:
    """Join the description block, the changelog and the pull request footer."""
    notes = description
    if changelog:
        notes = f"{notes}\n\n{changelog}" if notes else changelog
    if pull_request is not None:
        notes += f"\n\n---\nPR: #{pull_request.number} by @{pull_request.author}"
    return notes


class ReleaseNotesComposer:
    """Builds the Markdown release notes from the merged pull request and the commit history.

    Composition never fails: a pull request that cannot be looked up is
    treated as absent, and a changelog that cannot be built is replaced by a
    fixed pointer to the commit history.
    """

    def __init__(self, client: SourceHostingClient, config: ReleaseNotesConfig) -> None:
        """Initialize with the source-hosting client and the step configuration."""
        self.client = client
        self.config = config

    async def find_merged_pull_request(self) -> PullRequestInfo | None:
        """Find the recently merged pull request whose merge commit is being released."""
        try:
            pull_requests = await self.client.list_pull_requests(
                state="closed",
                sort="updated",
                direction="desc",
                per_page=self.config.pull_request_page_size,
            )
        except Exception as exc:
            logger.warning("Cannot look up merged pull request", error=str(exc), sha=self.config.sha)
            return None

        for pull_request in pull_requests:
            info = PullRequestInfo.from_api(pull_request)
            if info.merged and info.merge_commit_sha == self.config.sha:
                logger.info(f"Found merged PR #{info.number}: {info.title}")
                return info
        logger.info("No merged pull request found for commit", sha=self.config.sha)
        return None

    async def resolve_baseline(self) -> str:
        """Return the most recent tag, or the empty tree when nothing was tagged yet."""
        tags = await self.client.list_tags(per_page=1)
        previous_tag = tags[0].name if tags else ""
        logger.info("Resolved comparison baseline", previous_tag=previous_tag or "none", sha=self.config.sha)
        return previous_tag or EMPTY_TREE_SHA

    async def build_changelog(self) -> str:
        """Build the conventional commit changelog since the baseline."""
        base = await self.resolve_baseline()
        compare_url = build_compare_url(self.config.github_server_url, self.config.repo, base, self.config.sha)
        raw_commits = await self.client.compare_commits(base=base, head=self.config.sha)
        commits = [CommitInfo.from_api(raw_commit) for raw_commit in raw_commits]
        return render_changelog(commits, compare_url)

    async def changelog_or_fallback(self) -> str:
        """Build the changelog, degrading to the fixed fallback line on any error."""
        try:
            return await self.build_changelog()
        except Exception as exc:
            logger.warning("Cannot generate changelog", error=str(exc), error_type=type(exc).__name__)
            return CHANGELOG_FALLBACK

    async def compose(self) -> str:
        """Compose the full release notes."""
        logger.info("Extracting release notes", repo=self.config.repo, sha=self.config.sha)
        pull_request = await self.find_merged_pull_request()
        description = build_release_description(pull_request) if pull_request is not None else ""
        changelog = await self.changelog_or_fallback()
        return join_release_notes(description, changelog, pull_request)
