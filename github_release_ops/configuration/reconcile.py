"""Reconcile GitHub authentication configuration."""

from pathlib import Path

from github_release_ops.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_release_ops.configuration.models import GitHubAuthenticationType

APP_SETTINGS = (
    ("GitHub App ID", "GITHUB_APP_ID"),
    ("GitHub App private key path", "GITHUB_APP_PRIVATE_KEY_PATH"),
    ("GitHub App installation ID", "GITHUB_APP_INSTALLATION_ID"),
)


def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Release steps normally authenticate with the workflow's GITHUB_TOKEN. A
    GitHub App is accepted as well, for workflows that must trigger other
    workflows with the release they create.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If neither or both
            methods are configured, or the App configuration is incomplete.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_values = (github_app_id, github_app_private_key_path, github_app_installation_id)

    if github_pat_token and any(app_values):
        raise GitHubAuthenticationConfigurationUndefinedError("Both token and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if all(app_values):
        return GitHubAuthenticationType.APP

    if any(app_values):
        missing = [f"{name} (environment variable {env_name})" for (name, env_name), value in zip(APP_SETTINGS, app_values) if not value]
        raise GitHubAuthenticationConfigurationUndefinedError("Incomplete GitHub App configuration - missing settings include " + ", ".join(missing))

    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either GITHUB_TOKEN or a GitHub App configuration."
    )
