"""Build the description block of the release notes from a pull request."""

from github_release_ops.utils.constants import RELEASE_NOTES_SECTIONS

from .extractor import extract_section
from .models import PullRequestInfo


def build_release_description(pull_request: PullRequestInfo) -> str:
    """Build the Markdown description block for a merged pull request.

    The Description section falls back to the pull request title. The
    optional sections follow in a fixed order. A block that would only repeat
    the title is dropped and '' is returned.
    """
    description = extract_section(pull_request.body, "Description") or pull_request.title
    notes = f"### Description\n\n{description}"
    for section_name in RELEASE_NOTES_SECTIONS:
        section = extract_section(pull_request.body, section_name)
        if section:
            notes += f"\n\n### {section_name}\n\n{section}"

    if notes == f"### Description\n\n{pull_request.title}":
        return ""
    return notes
