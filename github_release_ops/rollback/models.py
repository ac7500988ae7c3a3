"""Data models for the failed-release tracking issue."""

from pydantic import BaseModel, ConfigDict

from github_release_ops.configuration.models import RollbackRecordConfig
from github_release_ops.utils.github import build_actions_url


class RegistryStatus(BaseModel):
    """Push and rollback outcome for one container registry."""

    model_config = ConfigDict(frozen=True)

    label: str
    digest: str | None = None
    rollback_success: bool = False


class RollbackIssueContext(BaseModel):
    """Values rendered into the rollback issue template."""

    actor: str
    workflow_url: str
    build_success: bool
    release_success: bool
    registries: list[RegistryStatus]

    @classmethod
    def from_config(cls, config: RollbackRecordConfig) -> "RollbackIssueContext":
        """Build the context for a create-rollback-record step."""
        return cls(
            actor=config.actor,
            workflow_url=build_actions_url(config.github_server_url, config.repo),
            build_success=config.build_success,
            release_success=config.release_success,
            registries=[
                RegistryStatus(label="DOCR", digest=config.do_digest, rollback_success=config.do_rollback_success),
                RegistryStatus(label="GHCR", digest=config.ghcr_digest, rollback_success=config.ghcr_rollback_success),
                RegistryStatus(label="DHCR", digest=config.dh_digest, rollback_success=config.dh_rollback_success),
            ],
        )
