"""Render the Markdown body of a release."""

from github_release_ops.utils.templates import load_packaged_template, render_template_with_model

from .models import ReleaseBodyContext

RELEASE_BODY_TEMPLATE = "release_body.md.j2"


def render_release_body(context: ReleaseBodyContext) -> str:
    """Render the release body: notes, container images and verification instructions.

    Registries without a digest are marked with ❌ and left out of the pull
    and verification commands.
    """
    return render_template_with_model(model=context, template=load_packaged_template(RELEASE_BODY_TEMPLATE))
