"""Data models for the release body and the release publisher."""

from pydantic import BaseModel, ConfigDict

from github_release_ops.configuration.models import CreateReleaseConfig
from github_release_ops.utils.constants import DOCR_HOST, GHCR_HOST, GITHUB_OIDC_ISSUER
from github_release_ops.utils.github import split_repository


class Registry(BaseModel):
    """A container registry the release image was pushed to."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    image: str
    digest: str | None = None


def ghcr_registry(repo: str, digest: str | None) -> Registry:
    """GitHub Container Registry, named after the repository."""
    return Registry(
        label="GHCR",
        description="GHCR",
        image=f"{GHCR_HOST}/{repo}",
        digest=digest,
    )


def dh_registry(username: str, image_name: str, digest: str | None) -> Registry:
    """Docker Hub, under the publishing user's namespace."""
    return Registry(
        label="DHCR",
        description="Docker Hub",
        image=f"{username}/{image_name}",
        digest=digest,
    )


def do_registry(registry_name: str, image_name: str, digest: str | None) -> Registry:
    """DigitalOcean Container Registry."""
    return Registry(
        label="DOCR",
        description="DigitalOcean",
        image=f"{DOCR_HOST}/{registry_name}/{image_name}",
        digest=digest,
    )


class ReleaseBodyContext(BaseModel):
    """Values rendered into the release body template."""

    release_notes: str
    server_url: str
    owner: str
    sha: str
    image_name: str
    image_id: str
    gpg_public_key: str
    include_cosign: bool = True
    oidc_issuer: str = GITHUB_OIDC_ISSUER
    registries: list[Registry]

    @classmethod
    def from_config(cls, config: CreateReleaseConfig) -> "ReleaseBodyContext":
        """Build the context for a create-release step."""
        owner, _ = split_repository(config.repo)
        return cls(
            release_notes=config.release_notes,
            server_url=config.github_server_url.rstrip("/"),
            owner=owner,
            sha=config.sha,
            image_name=config.image_name,
            image_id=config.image_id,
            gpg_public_key=config.gpg_public_key,
            include_cosign=config.include_cosign,
            registries=[
                ghcr_registry(config.repo, config.ghcr_digest),
                dh_registry(config.dh_username, config.image_name, config.dh_digest),
                do_registry(config.do_registry_name, config.image_name, config.do_digest),
            ],
        )


class ReleaseResult(BaseModel):
    """Outcome of a successful create-release step."""

    release_id: int
    html_url: str
    tag_name: str
    assets: list[str] = []

