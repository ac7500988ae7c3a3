"""Pydantic Settings model for the release workflow environment."""

from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_release_ops.configuration.exceptions import RequiredConfigurationElementError
from github_release_ops.configuration.models import (
    CreateReleaseConfig,
    ReleaseNotesConfig,
    RollbackRecordConfig,
)

FLAG_FIELDS = (
    "DEBUG",
    "IMAGE_MATCH",
    "BUILD_SUCCESS",
    "RELEASE_SUCCESS",
    "GHCR_ROLLBACK_SUCCESS",
    "DH_ROLLBACK_SUCCESS",
    "DO_ROLLBACK_SUCCESS",
)


class WorkflowSettings(BaseSettings):
    """Environment variable settings populated by the release workflow."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Workflow context provided by GitHub Actions
    GITHUB_SHA: str | None = None
    GITHUB_REPOSITORY: str | None = None
    GITHUB_SERVER_URL: str = "https://github.com"
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_ACTOR: str = ""
    GITHUB_OUTPUT: Path | None = None

    # Authentication
    GITHUB_TOKEN: str | None = None
    GITHUB_PAT_TOKEN: str | None = None
    GITHUB_APP_ID: int | None = None
    GITHUB_APP_PRIVATE_KEY_PATH: Path | None = None
    GITHUB_APP_INSTALLATION_ID: int | None = None

    # Build outputs
    BUILD_TIMESTAMP: str = ""
    BUILD_SHA_SHORT: str = ""
    BUILD_SUCCESS: bool = False
    IMAGE_NAME: str = ""
    IMAGE_ID: str = ""
    IMAGE_MATCH: bool = False

    # Registry pushes and rollbacks
    DO_REGISTRY_NAME: str = ""
    DH_USERNAME: str = ""
    GHCR_DIGEST: str | None = None
    DH_DIGEST: str | None = None
    DO_DIGEST: str | None = None
    GHCR_ROLLBACK_SUCCESS: bool = False
    DH_ROLLBACK_SUCCESS: bool = False
    DO_ROLLBACK_SUCCESS: bool = False

    # Release inputs
    RELEASE_SUCCESS: bool = False
    RELEASE_NOTES: str = ""
    GPG_PUBLIC_KEY: str = ""

    @field_validator(*FLAG_FIELDS, mode="before")
    @classmethod
    def parse_workflow_flag(cls, value: Any) -> bool:
        """Workflow flags are only set when the expression evaluated to the string 'true'."""
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() == "true"

    @field_validator("GHCR_DIGEST", "DH_DIGEST", "DO_DIGEST", mode="before")
    @classmethod
    def blank_digest_is_missing(cls, value: Any) -> str | None:
        """An empty step output means the registry push did not happen."""
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @property
    def github_pat_token(self) -> str | None:
        """Personal access token, preferring an explicit PAT over the workflow token."""
        return self.GITHUB_PAT_TOKEN or self.GITHUB_TOKEN

    def require(self, name: str) -> str:
        """Return a string setting, raising if it is missing or blank."""
        value = getattr(self, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise RequiredConfigurationElementError(name=name.lower().replace("_", " "), env_name=name)
        return str(value)

    def release_notes_config(self) -> ReleaseNotesConfig:
        """Build the generate-release-notes configuration."""
        return ReleaseNotesConfig(
            repo=self.require("GITHUB_REPOSITORY"),
            github_api_url=self.GITHUB_API_URL,
            github_server_url=self.GITHUB_SERVER_URL,
            debug=self.DEBUG,
            sha=self.require("GITHUB_SHA"),
        )

    def create_release_config(self, artifacts_dir: Path, include_cosign: bool = True) -> CreateReleaseConfig:
        """Build the create-release configuration."""
        return CreateReleaseConfig(
            repo=self.require("GITHUB_REPOSITORY"),
            github_api_url=self.GITHUB_API_URL,
            github_server_url=self.GITHUB_SERVER_URL,
            debug=self.DEBUG,
            sha=self.require("GITHUB_SHA"),
            build_timestamp=self.BUILD_TIMESTAMP,
            sha_short=self.BUILD_SHA_SHORT,
            image_name=self.IMAGE_NAME,
            image_id=self.IMAGE_ID,
            image_match=self.IMAGE_MATCH,
            do_registry_name=self.DO_REGISTRY_NAME,
            dh_username=self.DH_USERNAME,
            ghcr_digest=self.GHCR_DIGEST,
            dh_digest=self.DH_DIGEST,
            do_digest=self.DO_DIGEST,
            release_notes=self.RELEASE_NOTES,
            gpg_public_key=self.GPG_PUBLIC_KEY,
            include_cosign=include_cosign,
            artifacts_dir=artifacts_dir,
        )

    def rollback_record_config(self) -> RollbackRecordConfig:
        """Build the create-rollback-record configuration."""
        return RollbackRecordConfig(
            repo=self.require("GITHUB_REPOSITORY"),
            github_api_url=self.GITHUB_API_URL,
            github_server_url=self.GITHUB_SERVER_URL,
            debug=self.DEBUG,
            sha_short=self.BUILD_SHA_SHORT,
            build_timestamp=self.BUILD_TIMESTAMP,
            actor=self.GITHUB_ACTOR,
            build_success=self.BUILD_SUCCESS,
            release_success=self.RELEASE_SUCCESS,
            ghcr_digest=self.GHCR_DIGEST,
            dh_digest=self.DH_DIGEST,
            do_digest=self.DO_DIGEST,
            ghcr_rollback_success=self.GHCR_ROLLBACK_SUCCESS,
            dh_rollback_success=self.DH_ROLLBACK_SUCCESS,
            do_rollback_success=self.DO_ROLLBACK_SUCCESS,
        )
