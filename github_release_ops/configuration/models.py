"""Explicit configuration structures passed into each workflow operation."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from github_release_ops.utils.constants import DEFAULT_ARTIFACTS_DIR, DEFAULT_PULL_REQUEST_PAGE_SIZE


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    APP = "app"


@dataclass
class BaseConfig:
    """Settings shared by every release workflow step."""

    repo: str
    github_api_url: str = "https://api.github.com"
    github_server_url: str = "https://github.com"
    debug: bool = False


@dataclass
class ReleaseNotesConfig(BaseConfig):
    """Configuration for the generate-release-notes step."""

    sha: str = ""
    pull_request_page_size: int = DEFAULT_PULL_REQUEST_PAGE_SIZE


@dataclass
class CreateReleaseConfig(BaseConfig):
    """Configuration for the create-release step."""

    sha: str = ""
    build_timestamp: str = ""
    sha_short: str = ""
    image_name: str = ""
    image_id: str = ""
    image_match: bool = False
    do_registry_name: str = ""
    dh_username: str = ""
    ghcr_digest: str | None = None
    dh_digest: str | None = None
    do_digest: str | None = None
    release_notes: str = ""
    gpg_public_key: str = ""
    include_cosign: bool = True
    artifacts_dir: Path = field(default_factory=lambda: Path(DEFAULT_ARTIFACTS_DIR))

    @property
    def tag_name(self) -> str:
        """Tag created for the release."""
        return f"{self.build_timestamp}-{self.sha_short}"

    @property
    def release_name(self) -> str:
        """Display name of the release."""
        return f"{self.image_name} {self.sha_short}"


@dataclass
class RollbackRecordConfig(BaseConfig):
    """Configuration for the create-rollback-record step."""

    sha_short: str = ""
    build_timestamp: str = ""
    actor: str = ""
    build_success: bool = False
    release_success: bool = False
    ghcr_digest: str | None = None
    dh_digest: str | None = None
    do_digest: str | None = None
    ghcr_rollback_success: bool = False
    dh_rollback_success: bool = False
    do_rollback_success: bool = False
