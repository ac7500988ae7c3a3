"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_release_ops.configuration.env import WorkflowSettings
from github_release_ops.configuration.reconcile import validate_github_authentication_configuration
from github_release_ops.github.adapter import GitHubKitAdapter
from github_release_ops.release.body import render_release_body
from github_release_ops.release.models import ReleaseBodyContext
from github_release_ops.release.publisher import ReleasePublisher
from github_release_ops.release_notes.composer import ReleaseNotesComposer
from github_release_ops.rollback.issue import RollbackRecorder, render_rollback_issue, rollback_issue_title
from github_release_ops.rollback.models import RollbackIssueContext
from github_release_ops.utils.actions import set_output
from github_release_ops.utils.constants import (
    DEFAULT_ARTIFACTS_DIR,
    OUTPUT_RELEASE_ID,
    OUTPUT_RELEASE_NOTES,
    OUTPUT_RELEASE_SUCCESS,
)
from github_release_ops.utils.logging_config import configure_logging

load_dotenv()

logger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Steps of the container image release workflow.")


@typer_app.callback()
def main_callback(
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug logging.")] = False,
) -> None:
    """Configure logging before any command runs."""
    configure_logging(debug)


def build_adapter(settings: WorkflowSettings, repo: str, github_api_url: str) -> GitHubKitAdapter:
    """Create the GitHub adapter from the authentication settings of the workflow."""
    github_auth_type = validate_github_authentication_configuration(
        github_pat_token=settings.github_pat_token,
        github_app_id=settings.GITHUB_APP_ID,
        github_app_private_key_path=settings.GITHUB_APP_PRIVATE_KEY_PATH,
        github_app_installation_id=settings.GITHUB_APP_INSTALLATION_ID,
    )
    return GitHubKitAdapter.create(
        repo=repo,
        github_auth_type=github_auth_type,
        github_pat_token=settings.github_pat_token,
        github_app_id=settings.GITHUB_APP_ID,
        github_app_private_key_path=settings.GITHUB_APP_PRIVATE_KEY_PATH,
        github_app_installation_id=settings.GITHUB_APP_INSTALLATION_ID,
        github_api_url=github_api_url,
    )


@typer_app.command(name="generate-release-notes")
def generate_release_notes_cli(
    pull_request_page_size: Annotated[
        int, Option(envvar="PULL_REQUEST_PAGE_SIZE", help="Number of recently updated closed pull requests to search for the merged one.")
    ] = 10,
) -> None:
    """Compose the release notes for the commit being released and print them.

    The notes are also published as the RELEASE_NOTES step output.
    """
    settings = WorkflowSettings()
    config = settings.release_notes_config()
    config.pull_request_page_size = pull_request_page_size
    adapter = build_adapter(settings, config.repo, config.github_api_url)

    notes = asyncio.run(ReleaseNotesComposer(adapter, config).compose())
    typer.echo(notes)
    set_output(OUTPUT_RELEASE_NOTES, notes, settings.GITHUB_OUTPUT)


@typer_app.command(name="create-release")
def create_release_cli(
    artifacts_dir: Annotated[
        Path, Option(envvar="ARTIFACTS_DIR", help="Directory whose files are uploaded as release assets.")
    ] = Path(DEFAULT_ARTIFACTS_DIR),
    cosign: Annotated[bool, Option(help="Include cosign verification instructions in the release body.")] = True,
    dry_run: Annotated[bool, Option(help="Print the release body instead of creating the release.")] = False,
) -> None:
    """Create the tagged release and upload the signed artifacts.

    Sets the RELEASE_SUCCESS and RELEASE_ID step outputs when a release was made.
    """
    settings = WorkflowSettings()
    config = settings.create_release_config(artifacts_dir=artifacts_dir, include_cosign=cosign)

    if dry_run:
        logger.info("Dry run mode - not creating release", tag_name=config.tag_name)
        typer.echo(render_release_body(ReleaseBodyContext.from_config(config)))
        return

    adapter = build_adapter(settings, config.repo, config.github_api_url)
    result = asyncio.run(ReleasePublisher(adapter, config).publish())
    if result is None:
        return

    set_output(OUTPUT_RELEASE_SUCCESS, True, settings.GITHUB_OUTPUT)
    set_output(OUTPUT_RELEASE_ID, result.release_id, settings.GITHUB_OUTPUT)
    typer.echo(result.html_url)


@typer_app.command(name="create-rollback-record")
def create_rollback_record_cli(
    dry_run: Annotated[bool, Option(help="Print the issue instead of creating it.")] = False,
) -> None:
    """Open an issue documenting a failed release and the registry rollback status."""
    settings = WorkflowSettings()
    config = settings.rollback_record_config()

    if dry_run:
        typer.echo(rollback_issue_title(config.sha_short))
        typer.echo(render_rollback_issue(RollbackIssueContext.from_config(config)))
        return

    adapter = build_adapter(settings, config.repo, config.github_api_url)
    issue = asyncio.run(RollbackRecorder(adapter, config).record())
    typer.echo(getattr(issue, "html_url", ""))


if __name__ == "__main__":
    typer_app()
