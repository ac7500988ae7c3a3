"""Unit tests for the Typer command line interface."""

from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from typer.testing import CliRunner

from github_release_ops.configuration import cli

runner = CliRunner()


@pytest.fixture
def github_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Step output file of the current workflow step."""
    output = tmp_path / "github_output"
    output.touch()
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo-org/app")
    monkeypatch.setenv("GITHUB_SHA", "abc123")
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    return output


@pytest.fixture
def adapter(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace the GitHub adapter created by the commands."""
    mock_adapter = MagicMock()
    monkeypatch.setattr(cli.GitHubKitAdapter, "create", MagicMock(return_value=mock_adapter))
    return mock_adapter


@pytest.fixture
def release_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Populate the environment of a create-release step."""
    for name, value in {
        "BUILD_TIMESTAMP": "20240501120000",
        "BUILD_SHA_SHORT": "0123456",
        "IMAGE_NAME": "app",
        "IMAGE_ID": "sha256:feedface",
        "IMAGE_MATCH": "true",
        "DO_REGISTRY_NAME": "octo-registry",
        "DH_USERNAME": "octo",
        "GHCR_DIGEST": "sha256:aaa",
        "DH_DIGEST": "sha256:bbb",
        "DO_DIGEST": "sha256:ccc",
        "RELEASE_NOTES": "### Description\n\nFix the thing",
        "GPG_PUBLIC_KEY": "key",
    }.items():
        monkeypatch.setenv(name, value)


def test_generate_release_notes(
    github_output: Path, adapter: MagicMock, make_pull_request: Callable[..., MagicMock], make_commit: Callable[..., dict[str, Any]]
) -> None:
    """Test that the notes are printed and published as a step output."""
    adapter.list_pull_requests = AsyncMock(return_value=[make_pull_request(number=12, login="alice", body="## Description\nFix the thing")])
    adapter.list_tags = AsyncMock(return_value=[])
    adapter.compare_commits = AsyncMock(return_value=[make_commit("fix: crash on startup", login="alice")])

    result = runner.invoke(cli.typer_app, ["generate-release-notes"])

    assert result.exit_code == 0, result.output
    assert "### Description\n\nFix the thing" in result.output
    assert "PR: #12 by @alice" in result.output
    written = github_output.read_text(encoding="utf-8")
    assert written.startswith("RELEASE_NOTES<<")
    assert "- crash on startup (alice)" in written


def test_generate_release_notes_requires_authentication(github_output: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the command fails without any GitHub credentials."""
    monkeypatch.delenv("GITHUB_TOKEN")

    result = runner.invoke(cli.typer_app, ["generate-release-notes"])

    assert result.exit_code != 0


def test_create_release_dry_run(github_output: Path, release_environment: None) -> None:
    """Test that a dry run prints the body without creating anything."""
    result = runner.invoke(cli.typer_app, ["create-release", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "## Release Notes" in result.output
    assert "docker pull octo/app@sha256:bbb" in result.output
    assert github_output.read_text(encoding="utf-8") == ""


def test_create_release_sets_outputs(github_output: Path, release_environment: None, adapter: MagicMock, tmp_path: Path) -> None:
    """Test that a created release publishes its success flag and identifier."""
    artifacts_dir = tmp_path / "release-artifacts"
    artifacts_dir.mkdir()
    (artifacts_dir / "image-digests.txt").write_text("digests")
    release = MagicMock(
        id=99,
        html_url="https://github.com/octo-org/app/releases/99",
        upload_url="https://uploads.github.com/repos/octo-org/app/releases/99/assets{?name,label}",
    )
    adapter.create_release = AsyncMock(return_value=release)
    adapter.upload_release_asset = AsyncMock()

    result = runner.invoke(cli.typer_app, ["create-release", "--artifacts-dir", str(artifacts_dir)])

    assert result.exit_code == 0, result.output
    assert github_output.read_text(encoding="utf-8") == "RELEASE_SUCCESS=true\nRELEASE_ID=99\n"
    adapter.upload_release_asset.assert_awaited_once_with(
        release_id=99, name="image-digests.txt", data=b"digests", upload_url=release.upload_url
    )


def test_create_release_skipped_without_all_digests(
    github_output: Path, release_environment: None, adapter: MagicMock, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a missing registry push skips the release without failing."""
    monkeypatch.setenv("DO_DIGEST", "")
    adapter.create_release = AsyncMock()

    result = runner.invoke(cli.typer_app, ["create-release"])

    assert result.exit_code == 0, result.output
    adapter.create_release.assert_not_awaited()
    assert github_output.read_text(encoding="utf-8") == ""


def test_create_rollback_record_dry_run(github_output: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a dry run prints the issue title and body."""
    monkeypatch.setenv("BUILD_SHA_SHORT", "0123456")
    monkeypatch.setenv("GITHUB_ACTOR", "octocat")

    result = runner.invoke(cli.typer_app, ["create-rollback-record", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "⚠️ Release failed for 0123456" in result.output
    assert "Attention @octocat" in result.output


def test_create_rollback_record(github_output: Path, adapter: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the tracking issue is filed."""
    monkeypatch.setenv("BUILD_SHA_SHORT", "0123456")
    monkeypatch.setenv("GHCR_DIGEST", "sha256:aaa")
    adapter.create_issue = AsyncMock(return_value=MagicMock(number=17, html_url="https://github.com/octo-org/app/issues/17"))

    result = runner.invoke(cli.typer_app, ["create-rollback-record"])

    assert result.exit_code == 0, result.output
    assert "https://github.com/octo-org/app/issues/17" in result.output
    assert adapter.create_issue.await_args.kwargs["labels"] == ["release-failure", "needs-investigation"]
