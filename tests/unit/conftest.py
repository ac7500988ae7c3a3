"""Fixtures for unit tests."""

from typing import Any, Callable, Generator
from unittest.mock import MagicMock

import pytest
import structlog

WORKFLOW_ENVIRONMENT_VARIABLES = (
    "DEBUG",
    "GITHUB_SHA",
    "GITHUB_REPOSITORY",
    "GITHUB_SERVER_URL",
    "GITHUB_API_URL",
    "GITHUB_ACTOR",
    "GITHUB_OUTPUT",
    "GITHUB_TOKEN",
    "GITHUB_PAT_TOKEN",
    "GITHUB_APP_ID",
    "GITHUB_APP_PRIVATE_KEY_PATH",
    "GITHUB_APP_INSTALLATION_ID",
    "BUILD_TIMESTAMP",
    "BUILD_SHA_SHORT",
    "BUILD_SUCCESS",
    "IMAGE_NAME",
    "IMAGE_ID",
    "IMAGE_MATCH",
    "DO_REGISTRY_NAME",
    "DH_USERNAME",
    "GHCR_DIGEST",
    "DH_DIGEST",
    "DO_DIGEST",
    "GHCR_ROLLBACK_SUCCESS",
    "DH_ROLLBACK_SUCCESS",
    "DO_ROLLBACK_SUCCESS",
    "RELEASE_SUCCESS",
    "RELEASE_NOTES",
    "GPG_PUBLIC_KEY",
    "ARTIFACTS_DIR",
    "PULL_REQUEST_PAGE_SIZE",
)


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clean_workflow_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Isolate tests from the workflow environment of the machine running them."""
    for name in WORKFLOW_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env file in the working directory out of the settings.
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def make_pull_request() -> Callable[..., MagicMock]:
    """Factory for githubkit-like pull request objects."""

    def _make(
        number: int = 42,
        login: str = "octocat",
        title: str = "Improve startup",
        body: str | None = None,
        merge_commit_sha: str | None = "abc123",
        merged: bool = True,
    ) -> MagicMock:
        pull_request = MagicMock()
        pull_request.number = number
        pull_request.user.login = login
        pull_request.title = title
        pull_request.body = body
        pull_request.merge_commit_sha = merge_commit_sha
        pull_request.merged_at = "2024-05-01T12:00:00Z" if merged else None
        return pull_request

    return _make


@pytest.fixture
def make_commit() -> Callable[..., dict[str, Any]]:
    """Factory for raw compare API commit entries."""

    def _make(message: str, login: str | None = "octocat", name: str = "The Octocat") -> dict[str, Any]:
        return {
            "sha": "0" * 40,
            "commit": {"message": message, "author": {"name": name, "email": "octocat@example.com"}},
            "author": {"login": login} if login else None,
        }

    return _make
