"""File an issue documenting a failed release and its rollback status."""

from typing import Any

import structlog

from github_release_ops.configuration.models import RollbackRecordConfig
from github_release_ops.github.abc import SourceHostingClient
from github_release_ops.utils.constants import ROLLBACK_ISSUE_LABELS
from github_release_ops.utils.templates import load_packaged_template, render_template_with_model

from .models import RollbackIssueContext

logger = structlog.get_logger(__name__)

ROLLBACK_ISSUE_TEMPLATE = "rollback_issue.md.j2"


def rollback_issue_title(sha_short: str) -> str:
    """Title of the issue tracking a failed release."""
    return f"⚠️ Release failed for {sha_short}"


def render_rollback_issue(context: RollbackIssueContext) -> str:
    """Render the issue body: build status, registry pushes and rollbacks.

    Rollback lines are only rendered for registries that received a push.
    """
    return render_template_with_model(model=context, template=load_packaged_template(ROLLBACK_ISSUE_TEMPLATE))


class RollbackRecorder:
    """Creates the issue tracking a failed release.

    Issue creation failures propagate to the workflow step.
    """

    def __init__(self, client: SourceHostingClient, config: RollbackRecordConfig) -> None:
        """Initialize with the source-hosting client and the step configuration."""
        self.client = client
        self.config = config

    @property
    def title(self) -> str:
        """Title of the tracking issue."""
        return rollback_issue_title(self.config.sha_short)

    def render_body(self) -> str:
        """Render the issue body for this failure."""
        return render_rollback_issue(RollbackIssueContext.from_config(self.config))

    async def record(self) -> Any:
        """Create the tracking issue and return it."""
        issue = await self.client.create_issue(title=self.title, body=self.render_body(), labels=list(ROLLBACK_ISSUE_LABELS))
        logger.info("Created rollback tracking issue", issue_number=getattr(issue, "number", None))
        return issue
