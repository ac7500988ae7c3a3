"""Create a GitHub release with container image information and signed artifacts."""

from pathlib import Path

import structlog

from github_release_ops.configuration.models import CreateReleaseConfig
from github_release_ops.github.abc import SourceHostingClient

from .body import render_release_body
from .models import ReleaseBodyContext, ReleaseResult

logger = structlog.get_logger(__name__)


def list_release_artifacts(artifacts_dir: Path) -> list[Path]:
    """List the regular files directly inside the artifacts directory, sorted by name."""
    return sorted((path for path in artifacts_dir.iterdir() if path.is_file()), key=lambda path: path.name)


class ReleasePublisher:
    """Creates the tagged release and uploads the signed artifacts.

    Nothing is published unless the image reached every registry. API
    failures while creating the release or uploading assets propagate to the
    workflow step.
    """

    def __init__(self, client: SourceHostingClient, config: CreateReleaseConfig) -> None:
        """Initialize with the source-hosting client and the step configuration."""
        self.client = client
        self.config = config

    def all_registries_pushed(self) -> bool:
        """Whether every registry push produced a digest."""
        return bool(self.config.ghcr_digest and self.config.dh_digest and self.config.do_digest)

    def render_body(self) -> str:
        """Render the release body for this release."""
        return render_release_body(ReleaseBodyContext.from_config(self.config))

    async def publish(self) -> ReleaseResult | None:
        """Create the release and upload its assets, or return None when a registry push is missing."""
        if not self.all_registries_pushed():
            logger.info(
                "Missing registry pushes, skipping release.",
                ghcr=bool(self.config.ghcr_digest),
                dh=bool(self.config.dh_digest),
                do=bool(self.config.do_digest),
            )
            return None

        release = await self.client.create_release(
            tag_name=self.config.tag_name,
            name=self.config.release_name,
            body=self.render_body(),
            draft=False,
            prerelease=not self.config.image_match,
            target_commitish=self.config.sha,
        )
        logger.info(f"Created release: {release.html_url}", release_id=release.id, tag_name=self.config.tag_name)

        uploaded: list[str] = []
        for artifact in list_release_artifacts(self.config.artifacts_dir):
            logger.info(f"Uploading artifact: {artifact.name}")
            await self.client.upload_release_asset(
                release_id=release.id,
                name=artifact.name,
                data=artifact.read_bytes(),
                upload_url=release.upload_url,
            )
            uploaded.append(artifact.name)

        return ReleaseResult(release_id=release.id, html_url=release.html_url, tag_name=self.config.tag_name, assets=uploaded)
